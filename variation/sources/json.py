"""JsonDefinitionSource -- JSON documents -> type definitions."""

from __future__ import annotations

import logging

from pydantic import TypeAdapter

from ..model import Definition
from ._base import DefinitionSource

logger = logging.getLogger(__name__)

_DEFINITIONS = TypeAdapter(list[Definition])
_DEFINITION = TypeAdapter(Definition)


class JsonDefinitionSource(DefinitionSource):
    """Validates a JSON object (one definition) or array (many definitions).

    A definition without ``kind`` is a tagged union::

        {"name": "Shape", "variants": [{"name": "Circle"},
                                       {"name": "Rect", "fields": ["f64", "f64"]}]}

    Raises ``pydantic.ValidationError`` on malformed input.
    """

    def definitions(self, source: str) -> list[Definition]:
        stripped = source.lstrip()
        if stripped.startswith("["):
            found = _DEFINITIONS.validate_json(source)
        else:
            found = [_DEFINITION.validate_json(source)]
        logger.info("Loaded %d definition(s) from JSON", len(found))
        return found
