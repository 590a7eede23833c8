"""Variation — accessor generation for tagged unions."""

from .model import TaggedUnionDef, VariantDef, RecordDef  # noqa: F401
from .bundle import MethodBundle, MethodDef  # noqa: F401
from .config import GeneratorConfig  # noqa: F401
from .naming import derive_names, to_snake_case  # noqa: F401
from .describe import describe  # noqa: F401
from .synthesizer import synthesize  # noqa: F401
from .runtime import make_union  # noqa: F401
from .errors import (  # noqa: F401
    GenerationError,
    UnsupportedDefinitionKind,
    InvalidVariantName,
    NameCollision,
    VariantMismatch,
    ConsumedUnionError,
)
from .api import (  # noqa: F401
    parse_definitions,
    generate,
    generate_all,
    emit,
    derive_source,
    bundle_stats,
)
