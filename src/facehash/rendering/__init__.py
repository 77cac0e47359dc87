"""Rendering backends for facehash.

Import from submodules directly, e.g.
``from facehash.rendering.svg import render_svg``.
"""
