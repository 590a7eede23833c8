"""Tree-sitter access for definition sources."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from . import constants

logger = logging.getLogger(__name__)


class ParserFactory(ABC):
    """Supplies a tree-sitter parser for a grammar name."""

    @abstractmethod
    def get_parser(self, language: str): ...


class LanguagePackParserFactory(ParserFactory):
    """Loads grammars from tree-sitter-language-pack, one parser per grammar."""

    def __init__(self):
        self._parsers: dict = {}

    def get_parser(self, language: str):
        if language not in self._parsers:
            import tree_sitter_language_pack as tslp

            self._parsers[language] = tslp.get_parser(language)
        return self._parsers[language]


class DeclarationParser:
    """Parses declaration text of one host language into a syntax tree.

    tree-sitter recovers from syntax errors, so a damaged file still yields
    a tree; the error is logged and well-formed items remain collectable.
    """

    def __init__(
        self,
        parser_factory: ParserFactory | None = None,
        language: str = constants.RUST_LANGUAGE,
    ):
        self._factory = parser_factory or LanguagePackParserFactory()
        self._language = language

    @property
    def language(self) -> str:
        return self._language

    def parse(self, source: bytes):
        tree = self._factory.get_parser(self._language).parse(source)
        if tree.root_node.has_error:
            logger.warning(
                "Syntax errors in %s source; only well-formed items are collected",
                self._language,
            )
        return tree
