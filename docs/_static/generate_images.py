"""Generate static images for the documentation."""

from pathlib import Path

from facehash import FACE_TYPES, FacehashStyle, render_svg
from facehash.faces import FACE_ARTWORK
from facehash.model import RenderParameters, Rotation
from facehash.rendering.svg import generate_svg

OUT = Path(__file__).resolve().parent

GALLERY_NAMES = ("alice", "bob", "carol", "dave", "erin", "frank")


def face_types() -> None:
    """One centred, initial-free avatar per face type."""
    for face_type in FACE_TYPES:
        path = OUT / f"face_{face_type.value}.svg"
        path.write_text(generate_svg(RenderParameters(
            size=160,
            background_colour="#e5e7eb",
            face_type=face_type,
            rotation=Rotation(0, 0),
            variant="solid",
            show_initial=False,
        )))
        print(f"  wrote {path}  (view box {FACE_ARTWORK[face_type].view_box})")


def main() -> None:
    # Hero gallery with the default gradient style
    for name in GALLERY_NAMES:
        render_svg(name, OUT / f"gallery_{name}.svg", size=160)
        print(f"  wrote {OUT / f'gallery_{name}.svg'}")

    # Style variations for the user guide
    render_svg("alice", OUT / "alice_solid.svg", size=160, variant="solid")
    print(f"  wrote {OUT / 'alice_solid.svg'}")

    dark = FacehashStyle(size=160, colours="dark", show_initial=False)
    render_svg("alice", OUT / "alice_dark.svg", style=dark)
    print(f"  wrote {OUT / 'alice_dark.svg'}")

    face_types()


if __name__ == "__main__":
    main()
