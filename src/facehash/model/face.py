from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class FaceType(StrEnum):
    """Shape of the face artwork.

    The member order is part of the public contract: faces are chosen
    by ``hash % len(FACE_TYPES)``, so reordering or adding members
    changes every derived avatar.

    Attributes:
        ROUND: Two round eyes.
        CROSS: Two crossed-out eyes.
        LINE: Two flat, closed eyes.
        CURVED: Two upturned, smiling eyes.
    """

    ROUND = "round"
    CROSS = "cross"
    LINE = "line"
    CURVED = "curved"


#: Face types in selection order.
FACE_TYPES: tuple[FaceType, ...] = tuple(FaceType)


class Variant(StrEnum):
    """Background style of a rendered avatar.

    Attributes:
        GRADIENT: Flat fill with a soft radial highlight.
        SOLID: Flat fill only.
    """

    GRADIENT = "gradient"
    SOLID = "solid"


_ROTATION_STEPS = frozenset({-1, 0, 1})


@dataclass(frozen=True)
class Rotation:
    """Pseudo-3D tilt of the face.

    Attributes:
        x: Tilt about the horizontal axis (``1`` = up, ``-1`` = down).
        y: Tilt about the vertical axis (``1`` = right, ``-1`` = left).
    """

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        for name in ("x", "y"):
            val = getattr(self, name)
            if isinstance(val, bool) or val not in _ROTATION_STEPS:
                raise ValueError(
                    f"rotation {name} must be -1, 0 or 1, got {val!r}"
                )

    def to_dict(self) -> dict:
        """Serialise to ``{"x": ..., "y": ...}``."""
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class FacehashData:
    """Face attributes derived from a name.

    Created by :func:`~facehash.derivation.compute_facehash`.

    Attributes:
        face_type: Which artwork to draw.
        colour_index: Index into the colour palette, already reduced
            modulo the palette length.
        rotation: Tilt used for the parallax offset.
        initial: First character of the name, upper-cased, or ``""``
            for an empty name.  Upper-casing follows Unicode rules, so
            a few characters expand (``"ß"`` gives ``"SS"``).
    """

    face_type: FaceType
    colour_index: int
    rotation: Rotation
    initial: str

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary."""
        return {
            "face_type": self.face_type.value,
            "colour_index": self.colour_index,
            "rotation": self.rotation.to_dict(),
            "initial": self.initial,
        }
