"""Framework-neutral request adapter for serving avatars over HTTP.

The adapter turns query parameters into an SVG response without doing
any I/O itself, so it can sit behind any web framework::

    handler = make_handler(style=FacehashStyle(size=200))

    # e.g. inside a Starlette/FastAPI/Flask view:
    response = handler(request.query_params)
    return Response(
        response.body, status_code=response.status, headers=response.headers,
    )

Query parameters:

- ``name`` (required): string to generate the avatar from.
- ``size``: image size in pixels, clamped to ``[16, 2000]``.
- ``variant``: ``"gradient"`` or ``"solid"``.
- ``showInitial``: ``"true"``/``"1"`` to show the initial, anything
  else to hide it.
- ``colors``: comma-separated hex colours, e.g. ``#ff0000,#00ff00``.

Missing or invalid optional parameters fall back to the handler's
style.  A missing ``name`` yields a 400 response with a placeholder
image.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from urllib.parse import parse_qsl

from facehash._constants import SVG_NAMESPACE
from facehash.model import FacehashStyle, Variant, is_hex_colour
from facehash.rendering.svg import build_render_parameters, generate_svg

_logger = logging.getLogger(__name__)

SVG_CONTENT_TYPE = "image/svg+xml"
DEFAULT_CACHE_CONTROL = "public, max-age=31536000, immutable"
MIN_SIZE = 16
MAX_SIZE = 2000

_LEADING_INT = re.compile(r"^\s*([+-]?)0*([0-9]+)")

Query = str | Mapping[str, str]


@dataclass(frozen=True)
class FacehashResponse:
    """An HTTP response for a web framework to send.

    Attributes:
        status: HTTP status code.
        headers: Response headers.
        body: SVG document.
    """

    status: int
    body: str
    headers: dict[str, str] = field(default_factory=dict)


def _query_mapping(query: Query) -> Mapping[str, str]:
    """Normalise *query* to a mapping, keeping the first of repeated keys."""
    if not isinstance(query, str):
        return query
    params: dict[str, str] = {}
    for key, value in parse_qsl(query.lstrip("?"), keep_blank_values=True):
        params.setdefault(key, value)
    return params


def parse_bool(value: str | None, default: bool) -> bool:
    """Parse a flag: ``"true"`` and ``"1"`` are true, anything else false."""
    if value is None:
        return default
    return value in ("true", "1")


def parse_int(
    value: str | None,
    default: int,
    minimum: int = 1,
    maximum: int = MAX_SIZE,
) -> int:
    """Parse the leading integer of *value* and clamp it.

    Trailing junk is ignored (``"120px"`` parses as ``120``).  Only
    ASCII digits count.  Values with no leading integer give *default*,
    unclamped; overlong digit runs clamp to *minimum* or *maximum* by
    sign.
    """
    if value is None:
        return default
    match = _LEADING_INT.match(value)
    if match is None:
        _logger.debug("Ignoring non-numeric value %r", value)
        return default
    sign, digits = match.groups()
    if len(digits) > len(str(max(abs(minimum), abs(maximum)))) + 1:
        # Too long to be in range; also keeps int() under its digit limit.
        return minimum if sign == "-" else maximum
    number = -int(digits) if sign == "-" else int(digits)
    return min(max(number, minimum), maximum)


def parse_colours(value: str | None) -> tuple[str, ...] | None:
    """Parse a comma-separated list of hex colours.

    Entries are trimmed and anything that is not a hex colour is
    dropped.  Returns ``None`` if no valid colour remains.
    """
    if not value:
        return None
    colours = tuple(
        c for c in (part.strip() for part in value.split(",")) if is_hex_colour(c)
    )
    if not colours:
        _logger.debug("No valid hex colours in %r", value)
        return None
    return colours


def parse_variant(value: str | None) -> Variant | None:
    """Parse a variant name, returning ``None`` if it is not recognised."""
    if value in (Variant.GRADIENT.value, Variant.SOLID.value):
        return Variant(value)
    return None


def _placeholder_svg(size: int) -> str:
    """Grey image telling the caller the ``name`` parameter is missing."""
    return (
        f'<svg xmlns="{SVG_NAMESPACE}" width="{size}" height="{size}" '
        f'viewBox="0 0 {size} {size}">'
        f'<rect width="{size}" height="{size}" fill="#f3f4f6"/>'
        '<text x="50%" y="50%" text-anchor="middle" '
        'dominant-baseline="middle" font-family="sans-serif" '
        'font-size="24" fill="#6b7280">Missing ?name= parameter</text>'
        "</svg>"
    )


def handle_request(
    query: Query,
    *,
    style: FacehashStyle | None = None,
    cache_control: str | None = DEFAULT_CACHE_CONTROL,
) -> FacehashResponse:
    """Build the avatar response for a set of query parameters.

    Args:
        query: Query parameters as a mapping of name to value, or a
            raw query string (``"name=alice&size=64"``).
        style: Defaults used for absent or invalid parameters.
            Defaults to ``FacehashStyle()``.
        cache_control: ``Cache-Control`` header for successful
            responses, or ``None`` to omit it.

    Returns:
        A 200 response with the avatar, or a 400 response with a
        placeholder image if ``name`` is missing or empty.
    """
    base = style if style is not None else FacehashStyle()
    params = _query_mapping(query)

    name = params.get("name")
    if not name:
        _logger.debug("Request without a name; serving placeholder")
        return FacehashResponse(
            status=400,
            body=_placeholder_svg(base.size),
            headers={"Content-Type": SVG_CONTENT_TYPE},
        )

    resolved = replace(
        base,
        size=parse_int(params.get("size"), base.size, MIN_SIZE, MAX_SIZE),
        variant=parse_variant(params.get("variant")) or base.variant,
        show_initial=parse_bool(params.get("showInitial"), base.show_initial),
        colours=parse_colours(params.get("colors")) or base.colours,
    )
    svg = generate_svg(build_render_parameters(name, resolved))

    headers = {"Content-Type": SVG_CONTENT_TYPE}
    if cache_control:
        headers["Cache-Control"] = cache_control
    return FacehashResponse(status=200, body=svg, headers=headers)


def make_handler(
    *,
    style: FacehashStyle | None = None,
    cache_control: str | None = DEFAULT_CACHE_CONTROL,
) -> Callable[[Query], FacehashResponse]:
    """Return a request handler bound to the given defaults.

    See :func:`handle_request` for the meaning of the arguments.
    """

    def handler(query: Query) -> FacehashResponse:
        return handle_request(query, style=style, cache_control=cache_control)

    return handler
