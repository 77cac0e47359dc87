"""Style save/load for JSON files."""

from __future__ import annotations

import json
from pathlib import Path

from facehash.model import FacehashStyle


def save_style(path: str | Path, style: FacehashStyle) -> None:
    """Save a style to a JSON file.

    Only fields that differ from their defaults are written.  The file
    is human-readable with two-space indentation.

    Args:
        path: Destination file path.
        style: The style to save.
    """
    Path(path).write_text(json.dumps(style.to_dict(), indent=2) + "\n")


def load_style(path: str | Path) -> FacehashStyle:
    """Load a style from a JSON file.

    All fields are optional.  Unknown keys raise :class:`ValueError`.

    Args:
        path: Source file path.

    Returns:
        The parsed :class:`FacehashStyle`.

    Raises:
        ValueError: If the file is not a JSON object or contains
            unknown keys.
    """
    data = json.loads(Path(path).read_text())
    if not isinstance(data, dict):
        raise ValueError(
            f"style file must contain a JSON object, got {type(data).__name__}"
        )
    return FacehashStyle.from_dict(data)
