"""Definition model for the tagged-union shapes handed to the generator."""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Mapping, Sequence, Union

from pydantic import BaseModel, ConfigDict, model_validator


class DefinitionKind(str, Enum):
    TAGGED_UNION = "tagged_union"
    RECORD = "record"
    UNTAGGED_UNION = "untagged_union"


class VariantStyle(str, Enum):
    UNIT = "unit"  # A
    TUPLE = "tuple"  # A(i32), A()
    STRUCT = "struct"  # A { x: i32 }


class VariantDef(BaseModel):
    """One variant: a name plus ordered, unnamed payload field types."""

    model_config = ConfigDict(frozen=True)

    name: str
    fields: tuple[str, ...] = ()
    style: VariantStyle = VariantStyle.UNIT

    @model_validator(mode="before")
    @classmethod
    def _default_style(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("style") is None:
            style = VariantStyle.TUPLE if data.get("fields") else VariantStyle.UNIT
            data = {**data, "style": style}
        return data

    @model_validator(mode="after")
    def _check_style_matches_fields(self) -> VariantDef:
        if self.style == VariantStyle.UNIT and self.fields:
            raise ValueError(
                f"variant {self.name!r} is declared unit but has "
                f"{len(self.fields)} field(s)"
            )
        return self

    @property
    def arity(self) -> int:
        return len(self.fields)


class TaggedUnionDef(BaseModel):
    """A tagged union: its name and variants in declaration order.

    ``generic_params`` and ``generic_args`` are opaque tokens copied into the
    generated impl header (``T: Clone`` and ``T`` respectively).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    variants: tuple[VariantDef, ...] = ()
    generic_params: tuple[str, ...] = ()
    generic_args: tuple[str, ...] = ()
    where_clause: str = ""
    kind: Literal["tagged_union"] = "tagged_union"

    @classmethod
    def from_mapping(
        cls, name: str, variants: Mapping[str, Sequence[str]]
    ) -> TaggedUnionDef:
        """Build a definition from ``{variant_name: [field_type, ...]}``."""
        return cls(
            name=name,
            variants=tuple(
                VariantDef(name=variant, fields=tuple(fields))
                for variant, fields in variants.items()
            ),
        )

    def variant(self, name: str) -> VariantDef | None:
        return next((v for v in self.variants if v.name == name), None)


class RecordDef(BaseModel):
    """A type definition that is not a tagged union (struct, untagged union)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    kind: Literal["record", "untagged_union"] = "record"


Definition = Union[TaggedUnionDef, RecordDef]
