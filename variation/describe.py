"""Normalized projection of one variant."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .model import VariantDef, VariantStyle
from .naming import to_snake_case


class VariantDescription(BaseModel):
    model_config = ConfigDict(frozen=True)

    variant: str
    name_stem: str
    arity: int
    field_types: tuple[str, ...]
    style: VariantStyle


def describe(variant: VariantDef) -> VariantDescription:
    """Project *variant* to its stem, arity and opaque field types."""
    return VariantDescription(
        variant=variant.name,
        name_stem=to_snake_case(variant.name),
        arity=variant.arity,
        field_types=variant.fields,
        style=variant.style,
    )
