"""Emitter — MethodBundle → source text."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..bundle import MethodBundle
from ..config import GeneratorConfig


class Emitter(ABC):
    def __init__(self, config: GeneratorConfig = GeneratorConfig()):
        self._config = config

    @abstractmethod
    def emit(self, bundle: MethodBundle) -> str:
        ...
