"""Composable API functions for the generation pipeline.

Each function corresponds to a CLI workflow (--emit rust/python/json, --stats)
but is callable programmatically without argparse.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .bundle import MethodBundle
from .config import GeneratorConfig
from .emitters import get_emitter
from .errors import GenerationError
from .model import Definition
from .results import GenerationResult
from .sources import get_definition_source
from .stats import count_method_kinds
from .synthesizer import synthesize
from . import constants

logger = logging.getLogger(__name__)


def parse_definitions(
    source: str,
    input_format: str = constants.INPUT_RUST,
    config: GeneratorConfig = GeneratorConfig(),
) -> list[Definition]:
    """Parse declaration text into type definitions.

    Args:
        source: Declaration text (Rust source or JSON).
        input_format: "rust" or "json".
        config: Selection settings (derive name, require_derive).

    Returns:
        The definitions in source order.
    """
    return get_definition_source(input_format, config).definitions(source)


def generate(
    definition: Definition, config: GeneratorConfig = GeneratorConfig()
) -> MethodBundle:
    """Generate the method bundle for one definition; errors propagate."""
    return synthesize(definition, config)


def generate_all(
    definitions: Iterable[Definition], config: GeneratorConfig = GeneratorConfig()
) -> list[GenerationResult]:
    """Generate every definition independently.

    A definition whose generation fails yields a result carrying the error;
    the remaining definitions are still processed.
    """
    results: list[GenerationResult] = []
    for definition in definitions:
        try:
            bundle = synthesize(definition, config)
        except GenerationError as exc:
            logger.warning("Skipping %s: %s", definition.name, exc)
            results.append(GenerationResult(type_name=definition.name, error=exc))
            continue
        results.append(GenerationResult(type_name=definition.name, bundle=bundle))
    return results


def emit(
    bundle: MethodBundle,
    emitter: str = constants.EMIT_RUST,
    config: GeneratorConfig = GeneratorConfig(),
) -> str:
    """Serialize *bundle* with the emitter registered under *emitter*."""
    return get_emitter(emitter, config).emit(bundle)


def derive_source(
    source: str,
    input_format: str = constants.INPUT_RUST,
    emitter: str = constants.EMIT_RUST,
    config: GeneratorConfig = GeneratorConfig(),
) -> str:
    """Parse, generate and emit every definition in *source*.

    Args:
        source: Declaration text.
        input_format: "rust" or "json".
        emitter: "rust", "python" or "json".
        config: Generation settings.

    Returns:
        The emitted code of all definitions, separated by blank lines.

    Raises:
        GenerationError: The first failure; nothing is emitted in that case.
    """
    logger.info("Deriving accessors (%s -> %s)", input_format, emitter)
    definitions = parse_definitions(source, input_format, config)
    bundles = [synthesize(definition, config) for definition in definitions]
    return "\n".join(emit(bundle, emitter, config) for bundle in bundles)


def bundle_stats(
    source: str,
    input_format: str = constants.INPUT_RUST,
    config: GeneratorConfig = GeneratorConfig(),
) -> dict[str, dict[str, int]]:
    """Return method-kind counts per successfully generated definition."""
    results = generate_all(parse_definitions(source, input_format, config), config)
    return {
        result.type_name: count_method_kinds(result.bundle)
        for result in results
        if result.bundle is not None
    }
