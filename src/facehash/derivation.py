"""Derive face attributes from a name."""

from __future__ import annotations

from facehash.hashing import string_hash
from facehash.model import (
    DEFAULT_COLOURS,
    FACE_TYPES,
    FacehashData,
    Rotation,
)

# Candidate tilts: the eight compass directions plus centre.  Order is
# fixed because positions are chosen by ``hash % 9``.
SPHERE_POSITIONS: tuple[Rotation, ...] = (
    Rotation(-1, 1),   # down-right
    Rotation(1, 1),    # up-right
    Rotation(1, 0),    # up
    Rotation(0, 1),    # right
    Rotation(-1, 0),   # down
    Rotation(0, 0),    # centre
    Rotation(0, -1),   # left
    Rotation(-1, -1),  # down-left
    Rotation(1, -1),   # up-left
)


def compute_facehash(
    name: str,
    colours_length: int = len(DEFAULT_COLOURS),
) -> FacehashData:
    """Compute the face attributes for *name*.

    A single :func:`~facehash.hashing.string_hash` value selects the
    face type, colour index and rotation, so the three are correlated
    and the same name always produces the same face::

        data = compute_facehash("alice")
        data.face_type    # FaceType.ROUND
        data.colour_index # 0
        data.initial      # "A"

    Args:
        name: String to derive the face from, typically a username or
            user ID.
        colours_length: Number of colours in the palette the caller
            will index with :attr:`FacehashData.colour_index`.

    Returns:
        The derived :class:`~facehash.model.face.FacehashData`.

    Raises:
        ValueError: If *colours_length* is less than 1.
    """
    if colours_length < 1:
        raise ValueError(
            f"colours_length must be >= 1, got {colours_length}"
        )

    h = string_hash(name)
    return FacehashData(
        face_type=FACE_TYPES[h % len(FACE_TYPES)],
        colour_index=h % colours_length,
        rotation=SPHERE_POSITIONS[h % len(SPHERE_POSITIONS)],
        initial=name[:1].upper(),
    )
