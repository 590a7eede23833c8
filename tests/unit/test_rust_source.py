"""Tests for RustDefinitionSource -- tree-sitter Rust AST to definitions."""

from __future__ import annotations

from variation.config import GeneratorConfig
from variation.model import RecordDef, TaggedUnionDef, VariantStyle
from variation.sources.rust import RustDefinitionSource

SHAPE_SOURCE = """\
use variation::Variation;

#[derive(Debug, Variation)]
enum Shape {
    Circle,
    Rect(f64, f64),
}
"""


def _definitions(source: str, **config_kwargs):
    return RustDefinitionSource(config=GeneratorConfig(**config_kwargs)).definitions(
        source
    )


class TestRustEnums:
    def test_derived_enum_collected(self):
        definitions = _definitions(SHAPE_SOURCE)
        assert len(definitions) == 1
        shape = definitions[0]
        assert isinstance(shape, TaggedUnionDef)
        assert shape.name == "Shape"
        assert [v.name for v in shape.variants] == ["Circle", "Rect"]

    def test_variant_fields_and_styles(self):
        shape = _definitions(SHAPE_SOURCE)[0]
        circle, rect = shape.variants
        assert circle.style == VariantStyle.UNIT
        assert circle.fields == ()
        assert rect.style == VariantStyle.TUPLE
        assert rect.fields == ("f64", "f64")

    def test_type_tokens_forwarded_verbatim(self):
        source = """\
#[derive(Variation)]
enum Token<'a> {
    Word(&'a str),
    Items(Vec<Option<u8>>, std::collections::HashMap<String, i32>),
}
"""
        token = _definitions(source)[0]
        assert token.variants[0].fields == ("&'a str",)
        assert token.variants[1].fields == (
            "Vec<Option<u8>>",
            "std::collections::HashMap<String, i32>",
        )

    def test_enum_without_derive_skipped(self):
        source = "enum Plain { A, B(i32) }\n"
        assert _definitions(source) == []

    def test_all_enums_when_derive_not_required(self):
        source = "enum Plain { A, B(i32) }\nstruct Point { x: i32 }\n"
        definitions = _definitions(source, require_derive=False)
        assert [d.name for d in definitions] == ["Plain"]

    def test_scoped_derive_path(self):
        source = "#[derive(variation::Variation)]\nenum E { A }\n"
        assert [d.name for d in _definitions(source)] == ["E"]

    def test_other_attributes_and_comments_between(self):
        source = """\
#[derive(Variation)]
// a comment
#[allow(dead_code)]
enum E { A }
"""
        assert [d.name for d in _definitions(source)] == ["E"]

    def test_attribute_does_not_leak_to_next_item(self):
        source = "#[derive(Variation)]\nfn f() {}\nenum E { A }\n"
        assert _definitions(source) == []

    def test_custom_derive_name(self):
        source = "#[derive(Accessors)]\nenum E { A }\n"
        assert _definitions(source) == []
        assert len(_definitions(source, derive_name="Accessors")) == 1

    def test_nested_module(self):
        source = "mod inner {\n    #[derive(Variation)]\n    enum E { A(u8) }\n}\n"
        assert [d.name for d in _definitions(source)] == ["E"]

    def test_declaration_order(self):
        source = """\
#[derive(Variation)]
enum First { A }
#[derive(Variation)]
enum Second { B }
"""
        assert [d.name for d in _definitions(source)] == ["First", "Second"]

    def test_struct_like_variant_marked(self):
        source = "#[derive(Variation)]\nenum Event { Move { x: i32, y: i32 } }\n"
        move = _definitions(source)[0].variants[0]
        assert move.style == VariantStyle.STRUCT
        assert move.fields == ("i32", "i32")

    def test_empty_tuple_variant(self):
        source = "#[derive(Variation)]\nenum E { Nothing() }\n"
        nothing = _definitions(source)[0].variants[0]
        assert nothing.style == VariantStyle.TUPLE
        assert nothing.arity == 0


class TestRustGenerics:
    def test_type_parameters(self):
        source = "#[derive(Variation)]\nenum Either<L, R: Clone> { Left(L), Right(R) }\n"
        either = _definitions(source)[0]
        assert either.generic_params == ("L", "R: Clone")
        assert either.generic_args == ("L", "R")

    def test_lifetime_parameter(self):
        source = "#[derive(Variation)]\nenum Borrowed<'a> { Text(&'a str) }\n"
        borrowed = _definitions(source)[0]
        assert borrowed.generic_params == ("'a",)
        assert borrowed.generic_args == ("'a",)

    def test_where_clause(self):
        source = "#[derive(Variation)]\nenum Wrap<T> where T: Copy { Value(T) }\n"
        wrap = _definitions(source)[0]
        assert wrap.where_clause == "where T: Copy"


class TestRustRecords:
    def test_derived_struct_becomes_record(self):
        source = "#[derive(Variation)]\nstruct Point { x: i32 }\n"
        definitions = _definitions(source)
        assert definitions == [RecordDef(name="Point", kind="record")]

    def test_derived_union_becomes_untagged(self):
        source = "#[derive(Variation)]\nunion Bits { i: u32, f: f32 }\n"
        assert _definitions(source) == [RecordDef(name="Bits", kind="untagged_union")]
