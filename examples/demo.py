"""Demo script: derive faces for a few names and render them to SVG."""

from pathlib import Path

from facehash import compute_facehash, get_colour, render_svg

OUTPUT = Path(__file__).resolve().parent / "avatars"
NAMES = ["alice", "bob", "carol", "dave", "erin"]


def main():
    OUTPUT.mkdir(exist_ok=True)
    for name in NAMES:
        data = compute_facehash(name)
        print(
            f"{name:>6}: {data.face_type.value:<6} "
            f"colour={get_colour(None, data.colour_index)} "
            f"rotation=({data.rotation.x:+d}, {data.rotation.y:+d}) "
            f"initial={data.initial!r}"
        )
        render_svg(name, OUTPUT / f"{name}.svg", size=200)
    print(f"Rendered {len(NAMES)} avatars to {OUTPUT}")


if __name__ == "__main__":
    main()
