"""Render a site configuration into the static marketing pages.

Every page extends ``base.jinja``, which owns the shared chrome: inlined
stylesheet, header and navigation, footer, the decorative sign-in modal, and
the inlined script. Page templates under ``templates/pages`` only fill the
``main`` block, so the header and footer markup of two pages can differ only
in which navigation entry is marked active.

Rendering is pure and deterministic. The templates receive no timestamps or
generated identifiers, and pages are produced in :data:`PAGES` order, so
an unchanged configuration always yields byte-identical documents.

Typical usage:

>>> from buds_pages.config import SiteConfiguration
>>> site = render(SiteConfiguration())
>>> list(site)
['home', 'about', 'services', 'shop', 'get-involved', 'cart']
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from ._constants import OUTPUT_FILENAMES
from .config import DEFAULT_BRAND, SiteCopy, normalize_services, optional_text
from .theme import css_url, hero_noise_uri, resolve_palette

if typ.TYPE_CHECKING:
    from .config import SiteConfiguration

RenderedSite = dict[str, str]

DEFAULT_EMAIL = "budsatwork@malucare.org"
DEFAULT_PHONE = "0474 766 703"


@dc.dataclass(frozen=True, slots=True)
class PageDefinition:
    """Static description of one generated page."""

    key: str
    title: str
    template: str
    nav_label: str | None


PAGES: tuple[PageDefinition, ...] = (
    PageDefinition("home", "Home", "pages/home.jinja", "Home"),
    PageDefinition("about", "About Us", "pages/about.jinja", "About Us"),
    PageDefinition(
        "services", "Services & Pricing", "pages/services.jinja", "Services & Pricing"
    ),
    PageDefinition("shop", "Shop", "pages/shop.jinja", "Shop"),
    PageDefinition("get-involved", "Get Involved", "pages/get_involved.jinja", "Get Involved"),
    PageDefinition("cart", "Cart", "pages/cart.jinja", None),
)


def page_href(page: str) -> str:
    """Return the output filename for a page key, or ``page`` unchanged."""
    return OUTPUT_FILENAMES.get(page, page)


class SiteRenderer:
    """Render every page of the site from one configuration value."""

    def __init__(
        self, copy: SiteCopy | None = None, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        copy : SiteCopy, optional
            Marketing copy for the hero, fixed pages, and FAQ. Defaults to the
            built-in text.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``buds_pages/templates``.
        """
        self.copy = copy or SiteCopy()
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["css_url"] = css_url
        self.env.filters["page_href"] = page_href

    def render(self, config: SiteConfiguration) -> RenderedSite:
        """Return a mapping of page key to complete HTML document."""
        shared = self._shared_context(config)
        site: RenderedSite = {}
        for page in PAGES:
            template = self.env.get_template(page.template)
            html = template.render(**shared, page=page, nav_links=_nav_links(page))
            if not html.endswith("\n"):
                html += "\n"
            site[page.key] = html
        return site

    def _shared_context(self, config: SiteConfiguration) -> dict[str, typ.Any]:
        """Build the template context common to every page."""
        features = config.features
        body_classes = [
            name
            for name, enabled in (
                ("rounded-buttons", features.rounded_buttons),
                ("bigger-hero", features.bigger_hero),
                ("gallery", features.gallery),
            )
            if enabled
        ]
        return {
            "brand": optional_text(config.brand) or DEFAULT_BRAND,
            "palette": resolve_palette(config.colors),
            "hero_noise": hero_noise_uri(),
            "hero_image": optional_text(features.hero_image),
            "show_faq": bool(features.faq),
            "body_classes": body_classes,
            "contact_email": optional_text(config.contact.email) or DEFAULT_EMAIL,
            "contact_phone": optional_text(config.contact.phone) or DEFAULT_PHONE,
            "services": normalize_services(config.services),
            "copy": self.copy,
        }


def _nav_links(current: PageDefinition) -> list[dict[str, typ.Any]]:
    """Return header navigation entries with the current page marked active."""
    return [
        {
            "label": page.nav_label,
            "href": page_href(page.key),
            "active": page.key == current.key,
        }
        for page in PAGES
        if page.nav_label
    ]


def render(config: SiteConfiguration, *, copy: SiteCopy | None = None) -> RenderedSite:
    """Render ``config`` with the packaged templates."""
    return SiteRenderer(copy).render(config)


__all__ = [
    "PAGES",
    "PageDefinition",
    "RenderedSite",
    "SiteRenderer",
    "page_href",
    "render",
]
