"""Tests for the SVG compositor and render_svg."""

import pytest

from facehash.faces import FACE_ARTWORK
from facehash.model import (
    DEFAULT_COLOURS,
    FaceType,
    FacehashStyle,
    RenderParameters,
    Rotation,
    Variant,
)
from facehash.rendering.svg import (
    _fmt,
    _resolve_style,
    build_render_parameters,
    generate_svg,
    render_svg,
)


def _params(**kwargs):
    defaults = dict(
        size=100,
        background_colour="#3b82f6",
        face_type=FaceType.LINE,
        initial="Q",
        rotation=Rotation(0, 0),
        variant=Variant.SOLID,
        show_initial=False,
    )
    defaults.update(kwargs)
    return RenderParameters(**defaults)


class TestFormatNumber:
    @pytest.mark.parametrize("value, expected", [
        (400, "400"),
        (240.0, "240"),
        (-20.0, "-20"),
        (12.5, "12.5"),
    ])
    def test_format(self, value, expected):
        assert _fmt(value) == expected


class TestGenerateSvgDocument:
    def test_root_canvas(self, parse_svg, svg_ns):
        root = parse_svg(generate_svg(_params(size=400)))
        assert root.tag == f"{svg_ns}svg"
        assert root.get("width") == "400"
        assert root.get("height") == "400"
        assert root.get("viewBox") == "0 0 400 400"

    def test_declares_namespace(self):
        svg = generate_svg(_params())
        assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg"')

    def test_no_external_references(self):
        svg = generate_svg(_params(variant=Variant.GRADIENT, show_initial=True))
        assert "href" not in svg
        assert "http://" not in svg.replace("http://www.w3.org/2000/svg", "")

    def test_background_fill(self, parse_svg, svg_ns):
        root = parse_svg(generate_svg(_params(background_colour="#10b981")))
        background = root[0]
        assert background.tag == f"{svg_ns}rect"
        assert background.get("fill") == "#10b981"
        assert background.get("width") == "100"

    def test_solid_stacking_order(self, parse_svg, svg_ns):
        root = parse_svg(generate_svg(_params(show_initial=True)))
        assert [child.tag for child in root] == [
            f"{svg_ns}rect", f"{svg_ns}svg", f"{svg_ns}text",
        ]

    def test_gradient_stacking_order(self, parse_svg, svg_ns):
        root = parse_svg(generate_svg(
            _params(variant=Variant.GRADIENT, show_initial=True),
        ))
        assert [child.tag for child in root] == [
            f"{svg_ns}rect",
            f"{svg_ns}defs",
            f"{svg_ns}rect",
            f"{svg_ns}svg",
            f"{svg_ns}text",
        ]

    def test_gradient_overlay(self, parse_svg, svg_ns):
        root = parse_svg(generate_svg(_params(variant=Variant.GRADIENT)))
        gradient = root.find(f"{svg_ns}defs/{svg_ns}radialGradient")
        assert gradient is not None
        stops = gradient.findall(f"{svg_ns}stop")
        assert [s.get("offset") for s in stops] == ["0%", "60%"]
        assert [s.get("stop-opacity") for s in stops] == ["0.15", "0"]
        overlay = root[2]
        assert overlay.get("fill") == f"url(#{gradient.get('id')})"

    def test_artwork_paths(self, parse_svg, svg_ns):
        root = parse_svg(generate_svg(_params(face_type=FaceType.CURVED)))
        face = root.find(f"{svg_ns}svg")
        assert face.get("viewBox") == FACE_ARTWORK[FaceType.CURVED].view_box
        paths = face.findall(f"{svg_ns}path")
        assert [p.get("d") for p in paths] == list(
            FACE_ARTWORK[FaceType.CURVED].paths
        )
        assert all(p.get("fill") == "black" for p in paths)

    def test_initial_is_escaped(self, parse_svg, svg_ns):
        root = parse_svg(generate_svg(_params(initial="<", show_initial=True)))
        assert root.find(f"{svg_ns}text").text == "<"

    def test_background_colour_is_escaped(self, parse_svg):
        root = parse_svg(generate_svg(_params(background_colour='a"b')))
        assert root[0].get("fill") == 'a"b'


class TestGenerateSvgLayout:
    def test_face_width_is_sixty_percent(self, parse_svg, svg_ns):
        root = parse_svg(generate_svg(_params(size=400)))
        face = root.find(f"{svg_ns}svg")
        assert face.get("width") == "240"

    @pytest.mark.parametrize("face_type", list(FaceType))
    def test_face_keeps_aspect_ratio(self, parse_svg, svg_ns, face_type):
        root = parse_svg(generate_svg(_params(size=300, face_type=face_type)))
        face = root.find(f"{svg_ns}svg")
        width = float(face.get("width"))
        height = float(face.get("height"))
        assert width / height == pytest.approx(
            FACE_ARTWORK[face_type].aspect_ratio
        )

    def test_centred_without_rotation_or_initial(self, parse_svg, svg_ns):
        root = parse_svg(generate_svg(_params(size=100)))
        face = root.find(f"{svg_ns}svg")
        height = 60 / FACE_ARTWORK[FaceType.LINE].aspect_ratio
        assert float(face.get("x")) == pytest.approx(20.0)
        assert float(face.get("y")) == pytest.approx((100 - height) / 2)

    def test_rotation_cross_maps_axes(self, parse_svg, svg_ns):
        """rotation.y moves the face horizontally, -rotation.x vertically."""
        centred = parse_svg(generate_svg(_params())).find(f"{svg_ns}svg")
        tilted = parse_svg(
            generate_svg(_params(rotation=Rotation(1, -1))),
        ).find(f"{svg_ns}svg")
        dx = float(tilted.get("x")) - float(centred.get("x"))
        dy = float(tilted.get("y")) - float(centred.get("y"))
        assert dx == pytest.approx(-5.0)
        assert dy == pytest.approx(-5.0)

    def test_initial_lifts_face(self, parse_svg, svg_ns):
        hidden = parse_svg(generate_svg(_params())).find(f"{svg_ns}svg")
        shown = parse_svg(
            generate_svg(_params(show_initial=True)),
        ).find(f"{svg_ns}svg")
        lift = float(hidden.get("y")) - float(shown.get("y"))
        assert lift == pytest.approx(100 * 0.26 * 0.3)

    def test_alice_layout(self, parse_svg, svg_ns):
        params = build_render_parameters("alice", FacehashStyle())
        root = parse_svg(generate_svg(params))
        face = root.find(f"{svg_ns}svg")
        text = root.find(f"{svg_ns}text")

        face_height = 240 / (63 / 15)
        font_size = 104.0
        # alice tilts (-1, 1): offset_x = +20, offset_y = +20.
        assert float(face.get("x")) == pytest.approx(100.0 + 20.0)
        assert float(face.get("y")) == pytest.approx(
            (400 - face_height) / 2 - font_size * 0.3 + 20.0
        )
        assert float(text.get("x")) == pytest.approx(220.0)
        assert float(text.get("y")) == pytest.approx(
            200 + face_height / 2 + font_size * 0.8 + 20.0
        )
        assert float(text.get("font-size")) == pytest.approx(font_size)
        assert text.get("text-anchor") == "middle"
        assert text.text == "A"


class TestBuildRenderParameters:
    def test_alice_defaults(self):
        params = build_render_parameters("alice", FacehashStyle())
        assert params.size == 400
        assert params.background_colour == DEFAULT_COLOURS[0]
        assert params.face_type is FaceType.ROUND
        assert params.rotation == Rotation(-1, 1)
        assert params.initial == "A"
        assert params.variant is Variant.GRADIENT
        assert params.show_initial is True

    def test_palette_length_drives_colour_index(self):
        style = FacehashStyle(colours=["#000000", "#111111", "#222222"])
        # string_hash("bob") == 97717, 97717 % 3 == 1
        params = build_render_parameters("bob", style)
        assert params.background_colour == "#111111"


class TestResolveStyle:
    def test_default(self):
        assert _resolve_style(None) == FacehashStyle()

    def test_override(self):
        style = _resolve_style(None, size=64)
        assert style.size == 64

    def test_does_not_mutate_base(self):
        base = FacehashStyle(size=32)
        _resolve_style(base, size=64)
        assert base.size == 32

    def test_none_override_ignored(self):
        style = _resolve_style(FacehashStyle(size=32), size=None)
        assert style.size == 32

    def test_none_colours_resets_palette(self):
        style = _resolve_style(FacehashStyle(colours="dark"), colours=None)
        assert style.colours is None

    def test_unknown_kwarg_raises(self):
        with pytest.raises(TypeError, match="Unknown style keyword"):
            _resolve_style(None, shape="round")


class TestRenderSvg:
    def test_bob_solid_without_initial(self, parse_svg, svg_ns):
        svg = render_svg("bob", size=400, variant="solid", show_initial=False)
        root = parse_svg(svg)
        assert root.find(f"{svg_ns}defs") is None
        assert root.find(f"{svg_ns}text") is None
        assert "radialGradient" not in svg
        assert "<text" not in svg
        assert root[0].get("fill") == DEFAULT_COLOURS[2]

    def test_deterministic(self):
        assert render_svg("carol") == render_svg("carol")

    def test_writes_output(self, tmp_path):
        out = tmp_path / "alice.svg"
        svg = render_svg("alice", out, size=64)
        assert out.read_text(encoding="utf-8") == svg

    def test_accepts_string_path(self, tmp_path):
        out = tmp_path / "alice.svg"
        render_svg("alice", str(out))
        assert out.exists()

    def test_style_argument(self, parse_svg):
        style = FacehashStyle(size=50, colours=["#123456"])
        root = parse_svg(render_svg("dave", style=style))
        assert root.get("width") == "50"
        assert root[0].get("fill") == "#123456"

    def test_unknown_kwarg_raises(self):
        with pytest.raises(TypeError, match="Unknown style keyword"):
            render_svg("alice", colour="red")
