from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from facehash.model.colour import PALETTES, resolve_palette
from facehash.model.face import FaceType, Rotation, Variant


@dataclass(frozen=True)
class RenderParameters:
    """Fully resolved inputs for one SVG render.

    Built fresh for every render, usually from a
    :class:`~facehash.model.face.FacehashData` and a
    :class:`FacehashStyle`.  String values for *face_type* and
    *variant* are coerced to their enums.

    Attributes:
        size: Canvas width and height in pixels.
        background_colour: Fill for the background rectangle.
        face_type: Which artwork to draw.
        initial: Text drawn below the face when *show_initial* is set.
        rotation: Tilt driving the parallax offset.
        variant: Background style.
        show_initial: Whether to draw *initial*.

    Raises:
        ValueError: If *size* is not positive, or *face_type* or
            *variant* are not recognised.
    """

    size: int
    background_colour: str
    face_type: FaceType
    initial: str = ""
    rotation: Rotation = Rotation()
    variant: Variant = Variant.GRADIENT
    show_initial: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.face_type, str):
            object.__setattr__(self, "face_type", FaceType(self.face_type))
        if isinstance(self.variant, str):
            object.__setattr__(self, "variant", Variant(self.variant))
        if self.size <= 0:
            raise ValueError(f"size must be positive, got {self.size}")


@dataclass
class FacehashStyle:
    """User-facing rendering options.

    A default ``FacehashStyle()`` gives a 400 px gradient avatar with
    the initial shown, coloured from :data:`DEFAULT_COLOURS`.  Pass a
    style to :func:`~facehash.rendering.svg.render_svg` via the *style*
    keyword, or override individual fields with keyword arguments::

        style = FacehashStyle(size=128, variant="solid")
        render_svg("alice", "alice.svg", style=style)

        # Or override a single field:
        render_svg("alice", "alice.svg", show_initial=False)

    Attributes:
        size: Canvas width and height in pixels.
        variant: ``"gradient"`` or ``"solid"``.
        show_initial: Whether to draw the name's initial below the
            face.
        colours: Background palette.  ``None`` (the default) uses
            :data:`DEFAULT_COLOURS`; a palette name (``"default"``,
            ``"light"`` or ``"dark"``) selects a built-in palette; a
            sequence of colours is normalised to hex strings.

    Raises:
        ValueError: If *size* is not positive, *variant* is not
            recognised, or *colours* is empty, names an unknown
            palette or holds an uninterpretable colour.
    """

    size: int = 400
    variant: Variant = Variant.GRADIENT
    show_initial: bool = True
    colours: str | tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if isinstance(self.variant, str):
            self.variant = Variant(self.variant)
        if self.size <= 0:
            raise ValueError(f"size must be positive, got {self.size}")
        if isinstance(self.colours, str):
            if self.colours not in PALETTES:
                raise ValueError(
                    f"palette must be one of {sorted(PALETTES)}, "
                    f"got {self.colours!r}"
                )
        elif self.colours is not None:
            self.colours = resolve_palette(self.colours)

    @property
    def palette(self) -> tuple[str, ...]:
        """The resolved background palette as hex strings."""
        return resolve_palette(self.colours)

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Fields at their default values are omitted.
        """
        d: dict = {}
        for f in dataclasses.fields(self):
            val = getattr(self, f.name)
            if val == f.default:
                continue
            if f.name == "variant":
                d[f.name] = val.value
            elif f.name == "colours" and not isinstance(val, str):
                d[f.name] = list(val)
            else:
                d[f.name] = val
        return d

    @classmethod
    def from_dict(cls, d: dict) -> FacehashStyle:
        """Deserialise from a dictionary.

        Missing fields use their defaults.

        Raises:
            ValueError: If *d* contains keys that are not style fields.
        """
        names = {f.name for f in dataclasses.fields(cls)}
        unknown = set(d) - names
        if unknown:
            raise ValueError(f"unknown style keys: {sorted(unknown)}")
        kwargs: dict = dict(d)
        colours = kwargs.get("colours")
        if isinstance(colours, list):
            kwargs["colours"] = tuple(
                tuple(c) if isinstance(c, list) else c for c in colours
            )
        return cls(**kwargs)

