from __future__ import annotations

import re
from collections.abc import Sequence

#: A colour specification accepted throughout facehash.
#:
#: Can be any of:
#:
#: - A CSS colour name or hex string (e.g. ``"hotpink"``, ``"#ec4899"``).
#: - A single float for grey (``0.0`` = black, ``1.0`` = white).
#: - An RGB tuple or list with values in ``[0, 1]``
#:   (e.g. ``(1.0, 0.0, 0.0)``).
#:
#: See :func:`normalise_colour` for conversion to a hex string.
Colour = str | float | tuple[float, float, float] | list[float]

#: Background palette using Tailwind 500 shades.  Works on both light
#: and dark pages.
DEFAULT_COLOURS: tuple[str, ...] = (
    "#ec4899",  # pink-500
    "#f59e0b",  # amber-500
    "#3b82f6",  # blue-500
    "#f97316",  # orange-500
    "#10b981",  # emerald-500
)

#: Pale companion palette (Tailwind 100 shades) for light themes.
DEFAULT_COLOURS_LIGHT: tuple[str, ...] = (
    "#fce7f3",  # pink-100
    "#fef3c7",  # amber-100
    "#dbeafe",  # blue-100
    "#ffedd5",  # orange-100
    "#d1fae5",  # emerald-100
)

#: Saturated companion palette (Tailwind 600 shades) for dark themes.
DEFAULT_COLOURS_DARK: tuple[str, ...] = (
    "#db2777",  # pink-600
    "#d97706",  # amber-600
    "#2563eb",  # blue-600
    "#ea580c",  # orange-600
    "#059669",  # emerald-600
)

FALLBACK_COLOUR: str = DEFAULT_COLOURS[0]

PALETTES: dict[str, tuple[str, ...]] = {
    "default": DEFAULT_COLOURS,
    "light": DEFAULT_COLOURS_LIGHT,
    "dark": DEFAULT_COLOURS_DARK,
}

_HEX_COLOUR = re.compile(r"^#[0-9A-Fa-f]{3,8}$")


def is_hex_colour(value: str) -> bool:
    """Return True if *value* is ``#`` followed by 3 to 8 hex digits."""
    return bool(_HEX_COLOUR.match(value))


def normalise_colour(colour: Colour) -> str:
    """Convert a colour specification to a hex string.

    Hex strings are returned unchanged (including short and alpha
    forms such as ``"#fff"`` or ``"#ff000080"``).  CSS colour names,
    grey floats and RGB tuples are converted to ``"#rrggbb"``.

    Args:
        colour: The colour to normalise.

    Returns:
        A hex colour string.

    Raises:
        ValueError: If the colour cannot be interpreted.
    """
    if isinstance(colour, bool):
        raise ValueError(f"Cannot interpret colour: {colour!r}")

    from matplotlib.colors import to_hex

    if isinstance(colour, (int, float)):
        f = float(colour)
        if not 0.0 <= f <= 1.0:
            raise ValueError(f"Grey value must be in [0, 1], got {f}")
        return to_hex((f, f, f))

    if isinstance(colour, (tuple, list)):
        if len(colour) != 3:
            raise ValueError(
                f"RGB sequence must have 3 elements, got {len(colour)}"
            )
        r, g, b = (float(c) for c in colour)
        for name, val in [("r", r), ("g", g), ("b", b)]:
            if not 0.0 <= val <= 1.0:
                raise ValueError(
                    f"RGB component {name} must be in [0, 1], got {val}"
                )
        return to_hex((r, g, b))

    if isinstance(colour, str):
        if is_hex_colour(colour):
            return colour
        try:
            return to_hex(colour)
        except ValueError:
            raise ValueError(f"Unrecognised colour name: {colour!r}")

    raise ValueError(f"Cannot interpret colour: {colour!r}")


def resolve_palette(
    colours: str | Sequence[Colour] | None,
) -> tuple[str, ...]:
    """Turn a palette specification into a tuple of hex strings.

    Args:
        colours: ``None`` for :data:`DEFAULT_COLOURS`, one of the names
            in :data:`PALETTES` (``"default"``, ``"light"``,
            ``"dark"``), or a sequence of colours accepted by
            :func:`normalise_colour`.

    Raises:
        ValueError: If a palette name is unknown, the sequence is
            empty, or any entry cannot be interpreted.
    """
    if colours is None:
        return DEFAULT_COLOURS
    if isinstance(colours, str):
        try:
            return PALETTES[colours]
        except KeyError:
            raise ValueError(
                f"palette must be one of {sorted(PALETTES)}, got {colours!r}"
            )
    if len(colours) == 0:
        raise ValueError("colours must be non-empty when provided")
    return tuple(normalise_colour(c) for c in colours)


def get_colour(colours: Sequence[str] | None, index: int) -> str:
    """Pick a colour from a palette by index.

    An absent or empty palette falls back to :data:`DEFAULT_COLOURS`.
    The index wraps around the palette length, so any integer
    (including a negative one) selects a valid entry.  Never raises.

    Args:
        colours: Palette to choose from, or ``None``.
        index: Position in the palette, usually
            :attr:`FacehashData.colour_index`.

    Returns:
        A colour string.
    """
    palette = colours if colours else DEFAULT_COLOURS
    colour = palette[index % len(palette)]
    return colour or FALLBACK_COLOUR
