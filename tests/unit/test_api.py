"""Tests for the composable API functions in variation.api."""

import json

import pytest

from variation.api import (
    bundle_stats,
    derive_source,
    emit,
    generate,
    generate_all,
    parse_definitions,
)
from variation.bundle import MethodBundle
from variation.errors import NameCollision, UnsupportedDefinitionKind
from variation.model import RecordDef, TaggedUnionDef

RUST_SOURCE = """\
#[derive(Variation)]
enum Shape {
    Circle,
    Rect(f64, f64),
}

#[derive(Variation)]
struct Point {
    x: i32,
}

#[derive(Variation)]
enum Clash {
    FooBar,
    Foo_Bar,
}

#[derive(Variation)]
enum Value {
    Int(i64),
}
"""

SHAPE_ONLY = "#[derive(Variation)]\nenum Shape { Circle, Rect(f64, f64) }\n"


class TestParseDefinitions:
    def test_rust(self):
        definitions = parse_definitions(RUST_SOURCE)
        assert [d.name for d in definitions] == ["Shape", "Point", "Clash", "Value"]
        assert isinstance(definitions[1], RecordDef)

    def test_json(self):
        definitions = parse_definitions('{"name": "Unit", "variants": []}', "json")
        assert definitions == [TaggedUnionDef(name="Unit")]

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            parse_definitions(RUST_SOURCE, "haskell")


class TestGenerateAll:
    def test_failures_are_isolated(self):
        results = generate_all(parse_definitions(RUST_SOURCE))
        assert [r.type_name for r in results] == ["Shape", "Point", "Clash", "Value"]
        assert [r.ok for r in results] == [True, False, False, True]
        assert isinstance(results[1].error, UnsupportedDefinitionKind)
        assert isinstance(results[2].error, NameCollision)
        assert results[1].bundle is None
        assert results[2].bundle is None
        assert results[3].bundle.names() == [
            "is_int",
            "as_int",
            "as_int_mut",
            "into_int",
        ]

    def test_generate_propagates(self):
        with pytest.raises(UnsupportedDefinitionKind):
            generate(RecordDef(name="Point"))


class TestEmit:
    def test_json_round_trips_through_model(self):
        bundle = generate(TaggedUnionDef.from_mapping("Shape", {"Rect": ["f64", "f64"]}))
        assert MethodBundle.model_validate_json(emit(bundle, "json")) == bundle

    def test_unknown_emitter(self):
        bundle = generate(TaggedUnionDef(name="Never"))
        with pytest.raises(ValueError):
            emit(bundle, "cobol")


class TestDeriveSource:
    def test_rust_output(self):
        text = derive_source(SHAPE_ONLY)
        assert text.startswith("impl Shape {\n")
        assert "pub fn into_rect(self) -> (f64, f64) {" in text

    def test_python_output(self):
        text = derive_source(SHAPE_ONLY, emitter="python")
        assert "def as_rect_mut(self):" in text

    def test_first_error_raises(self):
        with pytest.raises(UnsupportedDefinitionKind):
            derive_source(RUST_SOURCE)


class TestBundleStats:
    def test_counts_successful_definitions_only(self):
        stats = bundle_stats(RUST_SOURCE)
        assert stats == {
            "Shape": {"is": 2, "as": 1, "as_mut": 1, "into": 1},
            "Value": {"is": 1, "as": 1, "as_mut": 1, "into": 1},
        }
        assert json.loads(json.dumps(stats)) == stats
