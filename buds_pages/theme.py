"""Theme palette, color validation, and CSS value helpers.

The directive interpreter only ever writes colors from :data:`COLOR_KEYWORDS`,
but ``site.json`` is hand-editable, so the renderer re-validates every color
before it reaches the inlined stylesheet and falls back to
:data:`DEFAULT_THEME` for anything it does not recognise.
"""

from __future__ import annotations

import dataclasses as dc
import functools
import re
import typing as typ
from urllib.parse import quote

if typ.TYPE_CHECKING:
    from .config import ColorScheme

COLOR_KEYWORDS: dict[str, str] = {
    "coral": "#ef5350",
    "mustard": "#c9a227",
    "purple": "#6A1B9A",
    "green": "#0f3d2e",
    "cream": "#fff6e8",
}

HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
NAMED_COLOR_PATTERN = re.compile(r"^[a-zA-Z]{3,20}$")
_CSS_URL_UNSAFE = re.compile(r"[\s'\"()\\<>]")

_HERO_NOISE_SVG = (
    "<svg xmlns='http://www.w3.org/2000/svg' width='1200' height='800'>"
    "<filter id='n'><feTurbulence type='fractalNoise' baseFrequency='0.9' "
    "numOctaves='2' stitchTiles='stitch'/><feColorMatrix type='saturate' "
    "values='0'/><feComponentTransfer><feFuncA type='table' "
    "tableValues='0 0 0.06 0.12 0.16 0.2 0.24 0.28 0.32 0.36 0.4'/>"
    "</feComponentTransfer></filter>"
    "<rect width='100%' height='100%' filter='url(#n)' opacity='0.3'/></svg>"
)


@dc.dataclass(frozen=True, slots=True)
class Palette:
    """Resolved theme colors used by the stylesheet."""

    primary: str
    accent: str
    paper: str

    @property
    def hero_overlay(self) -> str:
        """Return the gradient laid over the hero background."""
        red, green, blue = _hex_to_rgb(self.primary) or (15, 61, 46)
        return (
            f"linear-gradient(135deg, rgba({red},{green},{blue},.92), "
            f"rgba({red},{green},{blue},.65))"
        )


DEFAULT_THEME = Palette(primary="#0f3d2e", accent="#c9a227", paper="#fffef8")


def is_css_color(value: str) -> bool:
    """Return True for hex colors and plain named colors."""
    return bool(HEX_COLOR_PATTERN.match(value) or NAMED_COLOR_PATTERN.match(value))


def resolve_palette(colors: ColorScheme) -> Palette:
    """Merge configured colors over :data:`DEFAULT_THEME`.

    Examples
    --------
    >>> from buds_pages.config import ColorScheme
    >>> resolve_palette(ColorScheme(accent="#ef5350")).accent
    '#ef5350'
    >>> resolve_palette(ColorScheme(paper="red;}</style>")).paper
    '#fffef8'
    """

    def _pick(value: object, fallback: str) -> str:
        if isinstance(value, str) and is_css_color(value.strip()):
            return value.strip()
        return fallback

    return Palette(
        primary=_pick(colors.primary, DEFAULT_THEME.primary),
        accent=_pick(colors.accent, DEFAULT_THEME.accent),
        paper=_pick(colors.paper, DEFAULT_THEME.paper),
    )


def _hex_to_rgb(value: str) -> tuple[int, int, int] | None:
    """Return the RGB channels of a hex color, or None for other notations."""
    if not HEX_COLOR_PATTERN.match(value):
        return None
    digits = value[1:]
    if len(digits) in {3, 4}:
        digits = "".join(char * 2 for char in digits[:3])
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


@functools.cache
def hero_noise_uri() -> str:
    """Return the generated noise texture as an SVG data URI."""
    return "data:image/svg+xml;utf8," + quote(_HERO_NOISE_SVG, safe="")


def css_url(value: str) -> str:
    """Percent-encode characters that would break out of a CSS ``url('...')``.

    Examples
    --------
    >>> css_url("https://example.com/a b.png")
    'https://example.com/a%20b.png'
    """
    return _CSS_URL_UNSAFE.sub(lambda match: quote(match.group(), safe=""), value)


__all__ = [
    "COLOR_KEYWORDS",
    "DEFAULT_THEME",
    "Palette",
    "css_url",
    "hero_noise_uri",
    "is_css_color",
    "resolve_palette",
]
