"""Tests for RustEmitter -- MethodBundle to impl block text."""

from variation.config import GeneratorConfig
from variation.emitters.rust import RustEmitter
from variation.model import TaggedUnionDef, VariantDef, VariantStyle
from variation.synthesizer import synthesize

SHAPE = TaggedUnionDef.from_mapping("Shape", {"Circle": [], "Rect": ["f64", "f64"]})


def _emit(definition: TaggedUnionDef, config: GeneratorConfig = GeneratorConfig()) -> str:
    return RustEmitter(config).emit(synthesize(definition, config))


class TestRustEmitter:
    def test_unit_only_enum_exact(self):
        text = _emit(TaggedUnionDef.from_mapping("Flag", {"On": []}))
        assert text == (
            "impl Flag {\n"
            "    pub fn is_on(&self) -> bool {\n"
            "        match self {\n"
            "            Flag::On => true,\n"
            "            _ => false,\n"
            "        }\n"
            "    }\n"
            "}\n"
        )

    def test_is_check_wildcards_payload(self):
        assert "Shape::Rect(_, _) => true," in _emit(SHAPE)

    def test_as_accessor(self):
        text = _emit(SHAPE)
        assert "pub fn as_rect(&self) -> Option<(&f64, &f64)> {" in text
        assert "Shape::Rect(ref v0, ref v1) => Some((v0, v1))," in text
        assert "_ => None," in text

    def test_as_mut_accessor(self):
        text = _emit(SHAPE)
        assert "pub fn as_rect_mut(&mut self) -> Option<(&mut f64, &mut f64)> {" in text
        assert "Shape::Rect(ref mut v0, ref mut v1) => Some((v0, v1))," in text

    def test_into_accessor_panics_on_mismatch(self):
        text = _emit(SHAPE)
        assert "pub fn into_rect(self) -> (f64, f64) {" in text
        assert "Shape::Rect(v0, v1) => (v0, v1)," in text
        assert '_ => panic!("called `Shape::into_rect()` on a non-`Rect` variant"),' in text

    def test_single_field_shapes(self):
        text = _emit(TaggedUnionDef.from_mapping("Num", {"Int": ["i32"]}))
        assert "pub fn as_int(&self) -> Option<&i32> {" in text
        assert "Num::Int(ref v0) => Some(v0)," in text
        assert "pub fn into_int(self) -> i32 {" in text
        assert "Num::Int(v0) => v0," in text

    def test_into_doc_comment(self):
        assert "    /// Consumes the union" in _emit(SHAPE)
        assert "///" not in _emit(SHAPE, GeneratorConfig(emit_docs=False))

    def test_visibility(self):
        text = _emit(SHAPE, GeneratorConfig(visibility="pub(crate)"))
        assert "pub(crate) fn is_circle(&self) -> bool {" in text

    def test_generic_header(self):
        either = TaggedUnionDef(
            name="Either",
            variants=TaggedUnionDef.from_mapping("Either", {"Left": ["L"]}).variants,
            generic_params=("L", "R: Clone"),
            generic_args=("L", "R"),
            where_clause="where L: Copy",
        )
        assert _emit(either).startswith("impl<L, R: Clone> Either<L, R> where L: Copy {\n")

    def test_empty_tuple_variant_pattern(self):
        union = TaggedUnionDef(
            name="E", variants=(VariantDef(name="Nothing", style=VariantStyle.TUPLE),)
        )
        assert "E::Nothing() => true," in _emit(union)
