"""Emitters: MethodBundle -> source text for a target language."""

from __future__ import annotations

import importlib

from ._base import Emitter
from ..config import GeneratorConfig
from .. import constants

# Lazy imports to avoid loading all emitters at startup
_EMITTER_CLASSES: dict[str, str] = {
    constants.EMIT_RUST: "rust.RustEmitter",
    constants.EMIT_PYTHON: "python.PythonEmitter",
    constants.EMIT_JSON: "json.JsonEmitter",
}


def get_emitter(name: str, config: GeneratorConfig = GeneratorConfig()) -> Emitter:
    """Instantiate the emitter registered under *name*.

    Raises ``ValueError`` if *name* has no registered emitter.
    """
    spec = _EMITTER_CLASSES.get(name)
    if spec is None:
        raise ValueError(f"Unsupported emitter: {name}")
    module_name, class_name = spec.split(".")
    mod = importlib.import_module(f".{module_name}", package=__package__)
    cls = getattr(mod, class_name)
    return cls(config)


SUPPORTED_EMITTERS: tuple[str, ...] = tuple(_EMITTER_CLASSES.keys())

__all__ = ["Emitter", "get_emitter", "SUPPORTED_EMITTERS"]
