"""DefinitionSource — host declarations → type definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import Definition


class DefinitionSource(ABC):
    @abstractmethod
    def definitions(self, source: str) -> list[Definition]:
        ...
