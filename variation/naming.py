"""Name derivation: variant identifier → snake_case stem → method names."""

from __future__ import annotations

import logging
import re

from pydantic import BaseModel, ConfigDict

from .errors import InvalidVariantName
from . import constants

logger = logging.getLogger(__name__)

_PIECE_SPLIT = re.compile(r"[\W_]+")


class OperationNames(BaseModel):
    """The four canonical operation names derived from one variant."""

    model_config = ConfigDict(frozen=True)

    is_name: str
    as_name: str
    as_mut_name: str
    into_name: str

    def all(self) -> tuple[str, str, str, str]:
        return (self.is_name, self.as_name, self.as_mut_name, self.into_name)


def _split_words(piece: str) -> list[str]:
    """Split an alphanumeric run at case and digit boundaries.

    Boundaries: lower→upper (``fooBar``), digit→upper (``Utf8Error``) and
    the last capital of an upper-case run followed by a lower-case letter
    (``HTTPServer`` → ``HTTP`` + ``Server``).
    """
    words: list[str] = []
    current = ""
    for i, ch in enumerate(piece):
        if current and ch.isupper():
            prev = current[-1]
            nxt = piece[i + 1] if i + 1 < len(piece) else ""
            if prev.islower() or prev.isdigit():
                words.append(current)
                current = ""
            elif prev.isupper() and nxt.islower():
                words.append(current)
                current = ""
        current += ch
    if current:
        words.append(current)
    return words


def to_snake_case(identifier: str) -> str:
    """Convert *identifier* to its lower-case, underscore-separated stem.

    Non-alphanumeric characters are word separators, so ``Foo_Bar``,
    ``foo-bar`` and ``FooBar`` all map to ``foo_bar``. Returns an empty
    string when *identifier* has no alphanumeric characters.
    """
    words = [
        word.lower()
        for piece in _PIECE_SPLIT.split(identifier)
        if piece
        for word in _split_words(piece)
    ]
    return constants.WORD_SEPARATOR.join(words)


def derive_names(variant_name: str, type_name: str = "") -> OperationNames:
    """Derive ``is_``, ``as_``, ``as_*_mut`` and ``into_`` names for a variant.

    Args:
        variant_name: The variant identifier as declared.
        type_name: Owning type, used only in error messages.

    Returns:
        The four operation names.

    Raises:
        InvalidVariantName: If *variant_name* is empty or does not yield a
            valid identifier.
    """
    if not variant_name:
        raise InvalidVariantName(type_name, variant_name, "name is empty")
    stem = to_snake_case(variant_name)
    if not stem:
        raise InvalidVariantName(
            type_name, variant_name, "name has no alphanumeric characters"
        )
    names = OperationNames(
        is_name=f"{constants.IS_PREFIX}{stem}",
        as_name=f"{constants.AS_PREFIX}{stem}",
        as_mut_name=f"{constants.AS_PREFIX}{stem}{constants.MUT_SUFFIX}",
        into_name=f"{constants.INTO_PREFIX}{stem}",
    )
    invalid = [name for name in names.all() if not name.isidentifier()]
    if invalid:
        raise InvalidVariantName(
            type_name, variant_name, f"derived name {invalid[0]!r} is not an identifier"
        )
    logger.debug("Derived stem '%s' for variant '%s'", stem, variant_name)
    return names
