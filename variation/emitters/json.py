"""JsonEmitter -- MethodBundle -> JSON document."""

from __future__ import annotations

from ..bundle import MethodBundle
from ._base import Emitter

JSON_INDENT = 2


class JsonEmitter(Emitter):
    def emit(self, bundle: MethodBundle) -> str:
        return bundle.model_dump_json(indent=JSON_INDENT)
