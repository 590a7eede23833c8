"""Generation result types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass

from .bundle import MethodBundle
from .errors import GenerationError


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of generating one definition: a bundle or the error that aborted it."""

    type_name: str
    bundle: MethodBundle | None = None
    error: GenerationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
