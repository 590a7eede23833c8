"""Named constants — eliminates magic strings across the codebase."""

from __future__ import annotations

IS_PREFIX = "is_"
AS_PREFIX = "as_"
INTO_PREFIX = "into_"
MUT_SUFFIX = "_mut"

WORD_SEPARATOR = "_"

BINDING_PREFIX = "v"

DERIVE_ATTRIBUTE = "derive"
DERIVE_NAME = "Variation"

DEFAULT_VISIBILITY = "pub"

INTO_DOC = "Consumes the union and returns the inner value(s)."
INTO_PANICS_DOC = "Aborts when called on a value holding a different variant."

EMIT_RUST = "rust"
EMIT_PYTHON = "python"
EMIT_JSON = "json"

INPUT_RUST = "rust"
INPUT_JSON = "json"

RUST_LANGUAGE = "rust"
