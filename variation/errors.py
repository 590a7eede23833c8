"""Error taxonomy for generation-time and generated-code failures."""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for errors that abort generation of a single definition."""

    def __init__(self, type_name: str, message: str):
        super().__init__(f"{type_name}: {message}")
        self.type_name = type_name


class UnsupportedDefinitionKind(GenerationError):
    """Raised when the definition is not a tagged union with positional fields."""

    pass


class InvalidVariantName(GenerationError):
    """Raised when a variant name is empty or yields no valid method name."""

    def __init__(self, type_name: str, variant_name: str, reason: str):
        super().__init__(type_name, f"invalid variant name {variant_name!r}: {reason}")
        self.variant_name = variant_name


class NameCollision(GenerationError):
    """Raised when two variants derive the same method name."""

    def __init__(
        self,
        type_name: str,
        method_name: str,
        first_variant: str,
        second_variant: str,
    ):
        super().__init__(
            type_name,
            f"method '{method_name}' derived from both "
            f"'{first_variant}' and '{second_variant}'",
        )
        self.method_name = method_name
        self.first_variant = first_variant
        self.second_variant = second_variant


class VariantMismatch(RuntimeError):
    """Raised by a generated into-accessor called on the wrong variant.

    Signals a logic error in the caller, which must establish the active
    variant with the is-check or as-accessor first. Not meant to be caught.
    """

    def __init__(self, type_name: str, expected: str, actual: str):
        super().__init__(
            f"called into-accessor for `{type_name}::{expected}` "
            f"on a `{type_name}::{actual}` value"
        )
        self.type_name = type_name
        self.expected = expected
        self.actual = actual


class ConsumedUnionError(RuntimeError):
    """Raised when a union value is used after an into-accessor consumed it."""

    pass
