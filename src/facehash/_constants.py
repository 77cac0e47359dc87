"""Shared layout constants used by the SVG compositor."""

FACE_WIDTH_FRACTION: float = 0.6
"""Face artwork width as a fraction of the canvas size."""

FONT_SIZE_FRACTION: float = 0.26
"""Initial-letter font size as a fraction of the canvas size."""

OFFSET_FRACTION: float = 0.05
"""Maximum rotation-driven parallax offset as a fraction of the canvas."""

INITIAL_LIFT: float = 0.3
"""Upward shift of the artwork, in font sizes, when the initial is shown."""

INITIAL_BASELINE: float = 0.8
"""Distance from the artwork's bottom edge to the text baseline, in font sizes."""

SVG_NAMESPACE: str = "http://www.w3.org/2000/svg"
