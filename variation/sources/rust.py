"""RustDefinitionSource -- tree-sitter Rust AST -> type definitions."""

from __future__ import annotations

import logging

from ..config import GeneratorConfig
from ..model import Definition, RecordDef, TaggedUnionDef, VariantDef, VariantStyle
from ..parser import DeclarationParser
from .. import constants
from ._base import DefinitionSource

logger = logging.getLogger(__name__)


class RustDefinitionSource(DefinitionSource):
    """Collects `enum` items (and rejected `struct`/`union` items) from Rust source.

    With ``require_derive`` set, only items carrying ``#[derive(Variation)]``
    (the configured derive name) are collected; otherwise every ``enum`` is.
    Items nested in inline ``mod`` blocks are included.
    """

    COMMENT_TYPES = frozenset({"line_comment", "block_comment"})

    _RECORD_KINDS: dict[str, str] = {
        "struct_item": "record",
        "union_item": "untagged_union",
    }

    # type_parameters child type -> field holding the generic argument
    _PARAM_NAME_FIELD: dict[str, str] = {
        "constrained_type_parameter": "left",
        "optional_type_parameter": "name",
        "type_parameter": "name",
        "lifetime_parameter": "name",
        "const_parameter": "name",
    }

    def __init__(
        self,
        parser: DeclarationParser | None = None,
        config: GeneratorConfig = GeneratorConfig(),
    ):
        self._parser = parser or DeclarationParser()
        self._config = config
        self._source: bytes = b""

    def definitions(self, source: str) -> list[Definition]:
        logger.info("Collecting Rust definitions (%d bytes)", len(source))
        self._source = source.encode("utf-8")
        tree = self._parser.parse(self._source)
        found = self._collect(tree.root_node)
        logger.info("Found %d definition(s)", len(found))
        return found

    # -- helpers ------------------------------------------------------------

    def _node_text(self, node) -> str:
        return self._source[node.start_byte : node.end_byte].decode("utf-8")

    def _collect(self, node) -> list[Definition]:
        found: list[Definition] = []
        attributes: list = []
        for child in node.named_children:
            if child.type in self.COMMENT_TYPES:
                continue
            if child.type == "attribute_item":
                attributes.append(child)
                continue
            if child.type == "mod_item":
                body = child.child_by_field_name("body")
                if body is not None:
                    found.extend(self._collect(body))
            elif self._selected(child, attributes):
                found.append(self._definition(child))
            attributes = []
        return found

    def _selected(self, node, attributes: list) -> bool:
        if node.type != "enum_item" and node.type not in self._RECORD_KINDS:
            return False
        if any(self._derives(attr) for attr in attributes):
            return True
        return not self._config.require_derive and node.type == "enum_item"

    def _derives(self, attribute_item) -> bool:
        """True if *attribute_item* is ``#[derive(..., <derive_name>, ...)]``."""
        attribute = next(
            (c for c in attribute_item.named_children if c.type == "attribute"),
            None,
        )
        if attribute is None or not attribute.named_children:
            return False
        if self._node_text(attribute.named_children[0]) != constants.DERIVE_ATTRIBUTE:
            return False
        arguments = attribute.child_by_field_name("arguments")
        if arguments is None:
            return False
        return self._config.derive_name in self._identifiers(arguments)

    def _identifiers(self, node) -> set[str]:
        if node.type == "identifier":
            return {self._node_text(node)}
        return {
            ident for child in node.named_children for ident in self._identifiers(child)
        }

    def _definition(self, node) -> Definition:
        name_node = node.child_by_field_name("name")
        name = self._node_text(name_node) if name_node else ""
        if node.type in self._RECORD_KINDS:
            logger.debug("Collected non-enum item '%s' (%s)", name, node.type)
            return RecordDef(name=name, kind=self._RECORD_KINDS[node.type])
        return self._enum_def(node, name)

    # -- enum ---------------------------------------------------------------

    def _enum_def(self, node, name: str) -> TaggedUnionDef:
        body_node = node.child_by_field_name("body")
        variants = (
            tuple(
                self._variant(child)
                for child in body_node.named_children
                if child.type == "enum_variant"
            )
            if body_node
            else ()
        )
        params, args = self._generics(node.child_by_field_name("type_parameters"))
        where_node = next(
            (c for c in node.named_children if c.type == "where_clause"), None
        )
        logger.debug("Collected enum '%s' with %d variants", name, len(variants))
        return TaggedUnionDef(
            name=name,
            variants=variants,
            generic_params=params,
            generic_args=args,
            where_clause=self._node_text(where_node) if where_node else "",
        )

    def _variant(self, node) -> VariantDef:
        name_node = node.child_by_field_name("name")
        name = self._node_text(name_node) if name_node else ""
        body = node.child_by_field_name("body")
        if body is None:
            return VariantDef(name=name, style=VariantStyle.UNIT)
        if body.type == "field_declaration_list":
            fields = tuple(
                self._node_text(decl.child_by_field_name("type"))
                for decl in body.named_children
                if decl.type == "field_declaration"
            )
            return VariantDef(name=name, fields=fields, style=VariantStyle.STRUCT)
        fields = tuple(
            self._node_text(type_node)
            for type_node in body.children_by_field_name("type")
        )
        return VariantDef(name=name, fields=fields, style=VariantStyle.TUPLE)

    def _generics(self, node) -> tuple[tuple[str, ...], tuple[str, ...]]:
        """Split ``<'a, T: Clone = u8>`` into impl params and type args.

        Defaults are dropped from the params.
        """
        if node is None:
            return (), ()
        params: list[str] = []
        args: list[str] = []
        for child in node.named_children:
            if child.type in ("lifetime", "type_identifier"):
                params.append(self._node_text(child))
                args.append(self._node_text(child))
                continue
            field = self._PARAM_NAME_FIELD.get(child.type)
            if field is None:
                continue
            arg_node = child.child_by_field_name(field)
            if arg_node is None:
                continue
            params.append(self._param_without_default(child))
            args.append(self._node_text(arg_node))
        return tuple(params), tuple(args)

    def _param_without_default(self, node) -> str:
        eq = next((c for c in node.children if c.type == "="), None)
        end = eq.start_byte if eq is not None else node.end_byte
        return self._source[node.start_byte : end].decode("utf-8").strip()
