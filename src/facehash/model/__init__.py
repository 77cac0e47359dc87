"""Core data model for facehash: face attributes, colours, and styles.

Everything is re-exported here so that ``from facehash.model import
FaceType`` works without knowing which submodule defines it.
"""

from facehash.model.colour import (
    DEFAULT_COLOURS,
    DEFAULT_COLOURS_DARK,
    DEFAULT_COLOURS_LIGHT,
    FALLBACK_COLOUR,
    PALETTES,
    Colour,
    get_colour,
    is_hex_colour,
    normalise_colour,
    resolve_palette,
)
from facehash.model.face import (
    FACE_TYPES,
    FaceType,
    FacehashData,
    Rotation,
    Variant,
)
from facehash.model.render_style import FacehashStyle, RenderParameters

__all__ = [
    "Colour",
    "DEFAULT_COLOURS",
    "DEFAULT_COLOURS_DARK",
    "DEFAULT_COLOURS_LIGHT",
    "FACE_TYPES",
    "FALLBACK_COLOUR",
    "FaceType",
    "FacehashData",
    "FacehashStyle",
    "PALETTES",
    "RenderParameters",
    "Rotation",
    "Variant",
    "get_colour",
    "is_hex_colour",
    "normalise_colour",
    "resolve_palette",
]
