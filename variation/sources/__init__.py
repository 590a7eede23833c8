"""Definition sources: host declaration text -> type definitions."""

from __future__ import annotations

from ..config import GeneratorConfig
from .. import constants
from ._base import DefinitionSource
from .json import JsonDefinitionSource
from .rust import RustDefinitionSource


def get_definition_source(
    input_format: str, config: GeneratorConfig = GeneratorConfig()
) -> DefinitionSource:
    """Instantiate the definition source for *input_format*.

    Raises ``ValueError`` if *input_format* has no registered source.
    """
    if input_format == constants.INPUT_RUST:
        return RustDefinitionSource(config=config)
    if input_format == constants.INPUT_JSON:
        return JsonDefinitionSource()
    raise ValueError(f"Unsupported input format: {input_format}")


SUPPORTED_INPUT_FORMATS: tuple[str, ...] = (constants.INPUT_RUST, constants.INPUT_JSON)

__all__ = [
    "DefinitionSource",
    "JsonDefinitionSource",
    "RustDefinitionSource",
    "get_definition_source",
    "SUPPORTED_INPUT_FORMATS",
]
