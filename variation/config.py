"""Generator configuration (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass

from . import constants


@dataclass(frozen=True)
class GeneratorConfig:
    """Groups generation and emission settings."""

    derive_name: str = constants.DERIVE_NAME
    require_derive: bool = True
    visibility: str = constants.DEFAULT_VISIBILITY
    emit_docs: bool = True
