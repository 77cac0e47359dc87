"""Tests for RenderParameters and FacehashStyle."""

import pytest

from facehash.model.colour import DEFAULT_COLOURS, DEFAULT_COLOURS_DARK
from facehash.model.face import FaceType, Rotation, Variant
from facehash.model.render_style import FacehashStyle, RenderParameters


class TestRenderParameters:
    def test_defaults(self):
        params = RenderParameters(
            size=100, background_colour="#fff", face_type=FaceType.ROUND,
        )
        assert params.initial == ""
        assert params.rotation == Rotation(0, 0)
        assert params.variant is Variant.GRADIENT
        assert params.show_initial is True

    def test_string_coercion(self):
        params = RenderParameters(
            size=100, background_colour="#fff", face_type="cross",
            variant="solid",
        )
        assert params.face_type is FaceType.CROSS
        assert params.variant is Variant.SOLID

    def test_unknown_face_type_raises(self):
        with pytest.raises(ValueError):
            RenderParameters(size=100, background_colour="#fff", face_type="blob")

    @pytest.mark.parametrize("size", [0, -10])
    def test_positive_size_required(self, size):
        with pytest.raises(ValueError, match="size must be positive"):
            RenderParameters(
                size=size, background_colour="#fff", face_type=FaceType.ROUND,
            )


class TestFacehashStyle:
    def test_defaults(self):
        style = FacehashStyle()
        assert style.size == 400
        assert style.variant is Variant.GRADIENT
        assert style.show_initial is True
        assert style.colours is None
        assert style.palette == DEFAULT_COLOURS

    def test_variant_string_coercion(self):
        assert FacehashStyle(variant="solid").variant is Variant.SOLID

    def test_invalid_variant_raises(self):
        with pytest.raises(ValueError):
            FacehashStyle(variant="neon")

    def test_positive_size_required(self):
        with pytest.raises(ValueError, match="size must be positive"):
            FacehashStyle(size=0)

    def test_named_palette_kept_by_name(self):
        style = FacehashStyle(colours="dark")
        assert style.colours == "dark"
        assert style.palette == DEFAULT_COLOURS_DARK

    def test_unknown_palette_name_raises(self):
        with pytest.raises(ValueError, match="palette must be one of"):
            FacehashStyle(colours="neon")

    def test_colour_sequence_normalised(self):
        style = FacehashStyle(colours=["red", (0.0, 0.0, 1.0)])
        assert style.colours == ("#ff0000", "#0000ff")

    def test_empty_colours_raises(self):
        with pytest.raises(ValueError, match="non-empty"):
            FacehashStyle(colours=[])


class TestFacehashStyleDict:
    def test_defaults_serialise_empty(self):
        assert FacehashStyle().to_dict() == {}

    def test_non_defaults_serialised(self):
        style = FacehashStyle(
            size=64, variant="solid", show_initial=False, colours=["#000"],
        )
        assert style.to_dict() == {
            "size": 64,
            "variant": "solid",
            "show_initial": False,
            "colours": ["#000"],
        }

    def test_named_palette_serialised_as_string(self):
        assert FacehashStyle(colours="light").to_dict() == {"colours": "light"}

    def test_from_dict(self):
        style = FacehashStyle.from_dict(
            {"size": 128, "variant": "solid", "colours": ["#111", "#222"]},
        )
        assert style.size == 128
        assert style.variant is Variant.SOLID
        assert style.colours == ("#111", "#222")

    def test_from_dict_accepts_rgb_lists(self):
        style = FacehashStyle.from_dict({"colours": [[1.0, 0.0, 0.0]]})
        assert style.colours == ("#ff0000",)

    def test_from_dict_empty_gives_defaults(self):
        assert FacehashStyle.from_dict({}) == FacehashStyle()

    def test_from_dict_unknown_key_raises(self):
        with pytest.raises(ValueError, match="unknown style keys"):
            FacehashStyle.from_dict({"size": 10, "shape": "round"})
