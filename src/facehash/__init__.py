"""Facehash: deterministic face avatars from any string.

Facehash hashes a name (a username, an email, a user ID) to pick a face
shape, a background colour, a tilt and an initial, and renders them as
a standalone SVG.  The same name always gives the same face, so no
image ever needs to be stored.

Example usage::

    from facehash import compute_facehash, render_svg

    compute_facehash("alice").face_type   # FaceType.ROUND
    render_svg("alice", "alice.svg", size=128)
"""

from facehash.derivation import SPHERE_POSITIONS, compute_facehash
from facehash.faces import FACE_ARTWORK, FaceArtwork
from facehash.handler import FacehashResponse, handle_request, make_handler
from facehash.hashing import string_hash
from facehash.model import (
    DEFAULT_COLOURS,
    DEFAULT_COLOURS_DARK,
    DEFAULT_COLOURS_LIGHT,
    FACE_TYPES,
    Colour,
    FaceType,
    FacehashData,
    FacehashStyle,
    RenderParameters,
    Rotation,
    Variant,
    get_colour,
    is_hex_colour,
    normalise_colour,
    resolve_palette,
)
from facehash.rendering.svg import generate_svg, render_svg
from facehash.styles import load_style, save_style

__all__ = [
    "Colour",
    "DEFAULT_COLOURS",
    "DEFAULT_COLOURS_DARK",
    "DEFAULT_COLOURS_LIGHT",
    "FACE_ARTWORK",
    "FACE_TYPES",
    "FaceArtwork",
    "FaceType",
    "FacehashData",
    "FacehashResponse",
    "FacehashStyle",
    "RenderParameters",
    "Rotation",
    "SPHERE_POSITIONS",
    "Variant",
    "compute_facehash",
    "generate_svg",
    "get_colour",
    "handle_request",
    "is_hex_colour",
    "load_style",
    "make_handler",
    "normalise_colour",
    "render_svg",
    "resolve_palette",
    "save_style",
    "string_hash",
]
