"""Vector artwork for each face type.

Each face is a pair of eyes drawn as filled paths in its own native
coordinate box.  The compositor scales the box to the canvas while
preserving its aspect ratio, so only the ratio of the view box
dimensions matters for layout.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from facehash.model import FaceType


@dataclass(frozen=True)
class FaceArtwork:
    """Paths and native bounding box for one face type.

    Attributes:
        view_box: SVG ``viewBox`` string, ``"min-x min-y width height"``.
        paths: Path ``d`` attributes, drawn in order.
    """

    view_box: str
    paths: tuple[str, ...]

    def __post_init__(self) -> None:
        parts = self.view_box.split()
        if len(parts) != 4:
            raise ValueError(
                f"view_box must have 4 numbers, got {self.view_box!r}"
            )
        if float(parts[2]) <= 0 or float(parts[3]) <= 0:
            raise ValueError(
                f"view_box width and height must be positive, "
                f"got {self.view_box!r}"
            )
        if not self.paths:
            raise ValueError("paths must be non-empty")

    @property
    def width(self) -> float:
        """Native width of the artwork."""
        return float(self.view_box.split()[2])

    @property
    def height(self) -> float:
        """Native height of the artwork."""
        return float(self.view_box.split()[3])

    @property
    def aspect_ratio(self) -> float:
        """Native width divided by native height."""
        return self.width / self.height


FACE_ARTWORK: MappingProxyType[FaceType, FaceArtwork] = MappingProxyType({
    FaceType.ROUND: FaceArtwork(
        view_box="0 0 63 15",
        paths=(
            "M0 7.5a7.5 7.5 0 1 0 15 0a7.5 7.5 0 1 0-15 0Z",
            "M48 7.5a7.5 7.5 0 1 0 15 0a7.5 7.5 0 1 0-15 0Z",
        ),
    ),
    FaceType.CROSS: FaceArtwork(
        view_box="0 0 71 23",
        paths=(
            "M0 3.5L3.5 0L11.5 8L19.5 0L23 3.5L15 11.5L23 19.5L19.5 23"
            "L11.5 15L3.5 23L0 19.5L8 11.5Z",
            "M48 3.5L51.5 0L59.5 8L67.5 0L71 3.5L63 11.5L71 19.5L67.5 23"
            "L59.5 15L51.5 23L48 19.5L56 11.5Z",
        ),
    ),
    FaceType.LINE: FaceArtwork(
        view_box="0 0 82 8",
        paths=(
            "M4 0H26a4 4 0 0 1 0 8H4a4 4 0 0 1 0-8Z",
            "M56 0H78a4 4 0 0 1 0 8H56a4 4 0 0 1 0-8Z",
        ),
    ),
    FaceType.CURVED: FaceArtwork(
        view_box="0 0 63 18",
        paths=(
            "M0 15C0 6.7 6.7 0 15 0S30 6.7 30 15c0 1.7-1.3 3-3 3s-3-1.3-3-3"
            "c0-5-4-9-9-9s-9 4-9 9c0 1.7-1.3 3-3 3S0 16.7 0 15Z",
            "M33 15C33 6.7 39.7 0 48 0S63 6.7 63 15c0 1.7-1.3 3-3 3s-3-1.3-3-3"
            "c0-5-4-9-9-9s-9 4-9 9c0 1.7-1.3 3-3 3S33 16.7 33 15Z",
        ),
    ),
})
"""Artwork for every :class:`~facehash.model.face.FaceType`."""
