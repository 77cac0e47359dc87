"""SVG compositor: :func:`generate_svg` and :func:`render_svg` entry points."""

from __future__ import annotations

import dataclasses
from dataclasses import replace
from pathlib import Path
from typing import Any
from xml.sax.saxutils import escape, quoteattr

from facehash._constants import (
    FACE_WIDTH_FRACTION,
    FONT_SIZE_FRACTION,
    INITIAL_BASELINE,
    INITIAL_LIFT,
    OFFSET_FRACTION,
    SVG_NAMESPACE,
)
from facehash.derivation import compute_facehash
from facehash.faces import FACE_ARTWORK
from facehash.model import (
    FacehashStyle,
    RenderParameters,
    Variant,
    get_colour,
)

_STYLE_FIELDS = frozenset(f.name for f in dataclasses.fields(FacehashStyle))

# Fields where ``None`` is a meaningful override rather than "unset".
_NULLABLE_STYLE_FIELDS = frozenset({"colours"})

_GRADIENT_ID = "facehash-highlight"


def _fmt(value: float) -> str:
    """Format a coordinate, dropping the ``.0`` of integral values."""
    f = float(value)
    if f.is_integer():
        return str(int(f))
    return repr(f)


def _gradient_overlay(size: int) -> str:
    """Radial white highlight covering the whole canvas."""
    s = _fmt(size)
    return (
        "<defs>"
        f'<radialGradient id="{_GRADIENT_ID}" cx="50%" cy="50%" r="50%">'
        '<stop offset="0%" stop-color="#ffffff" stop-opacity="0.15"/>'
        '<stop offset="60%" stop-color="#ffffff" stop-opacity="0"/>'
        "</radialGradient>"
        "</defs>"
        f'<rect width="{s}" height="{s}" fill="url(#{_GRADIENT_ID})"/>'
    )


def generate_svg(params: RenderParameters) -> str:
    """Compose a standalone SVG document for one avatar.

    The face artwork is scaled to 60% of the canvas width, keeping its
    native aspect ratio, and centred.  The rotation nudges both the
    face and the initial by up to 5% of the canvas: ``rotation.y``
    drives the horizontal offset and ``-rotation.x`` the vertical one.
    When the initial is shown the face is lifted by 30% of the font
    size and the letter is drawn below it.

    Elements are stacked background, gradient highlight (gradient
    variant only), face, then initial.

    Args:
        params: The resolved render inputs.

    Returns:
        The SVG document as a string.
    """
    size = params.size
    artwork = FACE_ARTWORK[params.face_type]

    face_width = size * FACE_WIDTH_FRACTION
    face_height = face_width / artwork.aspect_ratio
    font_size = size * FONT_SIZE_FRACTION

    offset = size * OFFSET_FRACTION
    offset_x = params.rotation.y * offset
    offset_y = -params.rotation.x * offset

    lift = font_size * INITIAL_LIFT if params.show_initial else 0
    face_x = (size - face_width) / 2 + offset_x
    face_y = (size - face_height) / 2 - lift + offset_y

    s = _fmt(size)
    parts = [
        f'<svg xmlns="{SVG_NAMESPACE}" width="{s}" height="{s}" '
        f'viewBox="0 0 {s} {s}">',
        f'<rect width="{s}" height="{s}" '
        f"fill={quoteattr(params.background_colour)}/>",
    ]
    if params.variant is Variant.GRADIENT:
        parts.append(_gradient_overlay(size))

    parts.append(
        f'<svg x="{_fmt(face_x)}" y="{_fmt(face_y)}" '
        f'width="{_fmt(face_width)}" height="{_fmt(face_height)}" '
        f'viewBox="{artwork.view_box}">'
    )
    parts.extend(f'<path d="{d}" fill="black"/>' for d in artwork.paths)
    parts.append("</svg>")

    if params.show_initial:
        text_x = size / 2 + offset_x
        text_y = size / 2 + face_height / 2 + font_size * INITIAL_BASELINE + offset_y
        parts.append(
            f'<text x="{_fmt(text_x)}" y="{_fmt(text_y)}" '
            'text-anchor="middle" font-family="monospace" '
            f'font-weight="bold" font-size="{_fmt(font_size)}" '
            f'fill="black">{escape(params.initial)}</text>'
        )

    parts.append("</svg>")
    return "".join(parts)


def _resolve_style(
    style: FacehashStyle | None,
    **kwargs: Any,
) -> FacehashStyle:
    """Build a :class:`FacehashStyle` from an optional base plus overrides.

    Any kwarg whose name matches a ``FacehashStyle`` field replaces
    that field's value.  Passing ``None`` is treated as "not provided"
    except for ``colours``, where ``None`` selects the default palette.

    Raises:
        TypeError: If a kwarg name does not match any style field.
    """
    unknown = kwargs.keys() - _STYLE_FIELDS
    if unknown:
        raise TypeError(
            f"Unknown style keyword argument(s): {', '.join(sorted(unknown))}"
        )

    s = style if style is not None else FacehashStyle()
    overrides = {
        k: v for k, v in kwargs.items()
        if v is not None or k in _NULLABLE_STYLE_FIELDS
    }
    if overrides:
        s = replace(s, **overrides)
    return s


def build_render_parameters(
    name: str,
    style: FacehashStyle,
) -> RenderParameters:
    """Run the derivation pipeline for *name* under *style*."""
    palette = style.palette
    data = compute_facehash(name, len(palette))
    return RenderParameters(
        size=style.size,
        background_colour=get_colour(palette, data.colour_index),
        face_type=data.face_type,
        initial=data.initial,
        rotation=data.rotation,
        variant=style.variant,
        show_initial=style.show_initial,
    )


def render_svg(
    name: str,
    output: str | Path | None = None,
    *,
    style: FacehashStyle | None = None,
    **style_kwargs: object,
) -> str:
    """Render the avatar for *name* as an SVG document.

    Example usage::

        # Markup only:
        svg = render_svg("alice")

        # Save a small, flat avatar to disk:
        render_svg("alice", "alice.svg", size=64, variant="solid")

        # Custom palette:
        style = FacehashStyle(colours=["#264653", "#2a9d8f", "#e9c46a"])
        render_svg("bob", "bob.svg", style=style)

    Args:
        name: String to derive the avatar from.
        output: Optional file path.  When given, the document is also
            written there as UTF-8.
        style: Base style.  Defaults to ``FacehashStyle()``.
        **style_kwargs: Overrides for individual
            :class:`FacehashStyle` fields (``size``, ``variant``,
            ``show_initial``, ``colours``).

    Returns:
        The SVG document as a string.

    Raises:
        TypeError: If a keyword does not name a style field.
        ValueError: If an override is invalid (see
            :class:`FacehashStyle`).
    """
    resolved = _resolve_style(style, **style_kwargs)
    svg = generate_svg(build_render_parameters(name, resolved))
    if output is not None:
        Path(output).write_text(svg, encoding="utf-8")
    return svg
