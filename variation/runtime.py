"""Python runtime for tagged unions with generated accessors attached."""

from __future__ import annotations

import logging
from typing import Any

from .bundle import Access, BodyKind, MethodDef, PayloadShape
from .config import GeneratorConfig
from .errors import ConsumedUnionError, VariantMismatch
from .model import TaggedUnionDef
from .synthesizer import synthesize

logger = logging.getLogger(__name__)


class PayloadRef:
    """Exclusive view of one payload field; writes land in the owning value."""

    __slots__ = ("_owner", "_index")

    def __init__(self, owner: TaggedUnion, index: int):
        self._owner = owner
        self._index = index

    def get(self) -> Any:
        self._owner._ensure_live()
        return self._owner._payload[self._index]

    def set(self, value: Any) -> None:
        self._owner._ensure_live()
        self._owner._payload[self._index] = value

    value = property(get, set)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PayloadRef):
            return self.get() == other.get()
        return self.get() == other

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PayloadRef({self.get()!r})"


class TaggedUnion:
    """Base class of generated union types.

    A value holds the name of its active variant and a mutable list of
    payload fields. Variant constructors and accessors are added by
    ``make_union``.
    """

    __slots__ = ("_variant", "_payload", "_consumed")

    _VARIANTS: dict[str, int] = {}

    def __init__(self, variant: str, *payload: Any):
        arity = self._VARIANTS.get(variant)
        if arity is None:
            raise ValueError(f"{type(self).__name__} has no variant {variant!r}")
        if len(payload) != arity:
            raise TypeError(
                f"{type(self).__name__}::{variant} takes {arity} field(s), "
                f"got {len(payload)}"
            )
        self._variant = variant
        self._payload = list(payload)
        self._consumed = False

    @property
    def active_variant(self) -> str:
        self._ensure_live()
        return self._variant

    def _ensure_live(self) -> None:
        if self._consumed:
            raise ConsumedUnionError(
                f"{type(self).__name__} value was consumed by an into-accessor"
            )

    def _consume(self) -> list[Any]:
        payload = self._payload
        self._payload = []
        self._consumed = True
        return payload

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self._consumed, self._variant, self._payload) == (
            other._consumed,
            other._variant,
            other._payload,
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._consumed:
            return f"<consumed {type(self).__name__}>"
        fields = ", ".join(repr(f) for f in self._payload)
        suffix = f"({fields})" if self._VARIANTS[self._variant] else ""
        return f"{type(self).__name__}.{self._variant}{suffix}"


def _constructor(variant: str):
    def construct(cls, *payload: Any):
        return cls(variant, *payload)

    construct.__name__ = variant
    construct.__qualname__ = variant
    return classmethod(construct)


def _shaped(method: MethodDef, values: list[Any]) -> Any:
    if method.returns.shape == PayloadShape.SINGLE:
        return values[0]
    return tuple(values)


def _flag(type_name: str, method: MethodDef):
    variant = method.body.variant

    def accessor(self: TaggedUnion) -> bool:
        self._ensure_live()
        return self._variant == variant

    return accessor


def _view(type_name: str, method: MethodDef):
    variant = method.body.variant
    exclusive = method.body.binding_access == Access.EXCLUSIVE

    def accessor(self: TaggedUnion) -> Any:
        self._ensure_live()
        if self._variant != variant:
            return None
        if exclusive:
            views = [PayloadRef(self, i) for i in range(len(self._payload))]
        else:
            views = list(self._payload)
        return _shaped(method, views)

    return accessor


def _extract(type_name: str, method: MethodDef):
    variant = method.body.variant

    def accessor(self: TaggedUnion) -> Any:
        self._ensure_live()
        if self._variant != variant:
            raise VariantMismatch(type_name, variant, self._variant)
        return _shaped(method, self._consume())

    return accessor


_ACCESSOR_FACTORIES = {
    BodyKind.MATCH_FLAG: _flag,
    BodyKind.MATCH_VIEW: _view,
    BodyKind.MATCH_EXTRACT_OR_ABORT: _extract,
}


def build_accessor(type_name: str, method: MethodDef):
    """Return a plain function implementing *method* on ``TaggedUnion`` values."""
    accessor = _ACCESSOR_FACTORIES[method.body.kind](type_name, method)
    accessor.__name__ = method.name
    accessor.__qualname__ = f"{type_name}.{method.name}"
    accessor.__doc__ = method.doc
    return accessor


def make_union(
    definition: TaggedUnionDef, config: GeneratorConfig = GeneratorConfig()
) -> type[TaggedUnion]:
    """Build a Python class for *definition* with its accessors attached.

    Each variant becomes a class-level constructor
    (``Shape.Rect(3.0, 4.0)``). Generation errors propagate unchanged and
    no class is created.

    Raises:
        ValueError: If a variant constructor name clashes with a generated
            method or a ``TaggedUnion`` attribute.
    """
    bundle = synthesize(definition, config)
    attrs: dict[str, Any] = {
        method.name: build_accessor(definition.name, method)
        for method in bundle.methods
    }
    for variant in definition.variants:
        if variant.name in attrs or hasattr(TaggedUnion, variant.name):
            raise ValueError(
                f"{definition.name}: variant constructor '{variant.name}' "
                "clashes with an existing attribute"
            )
        attrs[variant.name] = _constructor(variant.name)
    attrs["_VARIANTS"] = {v.name: v.arity for v in definition.variants}
    attrs["__slots__"] = ()
    logger.info("Built runtime union %s", definition.name)
    return type(definition.name, (TaggedUnion,), attrs)
