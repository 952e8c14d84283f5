"""Typed dataclasses describing the site configuration and build settings."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from .._constants import (
    DEFAULT_COMMANDS,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SITE_CONFIG,
)

DEFAULT_BRAND = "Buds at Work"
SERVICE_COUNT = 3


class SiteConfigError(ValueError):
    """Raised when the build settings file is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class Service:
    """A single offered service shown as a card on the home and services pages.

    Fields hold the values as persisted; a hand-edited price may be a number.
    ``extra`` keeps keys such as an icon name that other tooling stores on the
    entry.
    """

    title: typ.Any
    desc: typ.Any
    price: typ.Any
    extra: dict[str, typ.Any] = dc.field(default_factory=dict)


PLACEHOLDER_SERVICE = Service(title="Service", desc="Description", price="from $100")


@dc.dataclass(frozen=True, slots=True)
class ColorScheme:
    """Optional theme color overrides; unset slots use the built-in theme."""

    primary: typ.Any = None
    accent: typ.Any = None
    paper: typ.Any = None
    extra: dict[str, typ.Any] = dc.field(default_factory=dict)


@dc.dataclass(frozen=True, slots=True)
class FeatureFlags:
    """Named feature toggles.

    ``hero_image`` holds a URL rather than a boolean. ``None`` means the key
    was never set, which keeps it out of the persisted JSON. Directives only
    write ``True``; values loaded from disk are kept as stored and the
    renderer tests them for truthiness.
    """

    rounded_buttons: typ.Any = None
    bigger_hero: typ.Any = None
    faq: typ.Any = None
    gallery: typ.Any = None
    hero_image: typ.Any = None
    extra: dict[str, typ.Any] = dc.field(default_factory=dict)


@dc.dataclass(frozen=True, slots=True)
class ContactInfo:
    """Contact details shown in the shared footer."""

    email: typ.Any = None
    phone: typ.Any = None
    extra: dict[str, typ.Any] = dc.field(default_factory=dict)


@dc.dataclass(frozen=True, slots=True)
class SiteConfiguration:
    """The persisted site configuration exchanged between the build steps.

    Attributes
    ----------
    brand : Any
        Display name used in the header, footer, and page titles, kept as
        stored. The renderer strips it and falls back to the default brand.
    colors : ColorScheme
        Theme color overrides.
    features : FeatureFlags
        Feature toggles set by directives.
    contact : ContactInfo
        Footer contact details.
    services : tuple[Service, ...]
        Offered services; normalized to exactly three entries whenever a
        directive is applied.
    extra : dict[str, Any]
        Unrecognized top-level keys, carried through unchanged.
    """

    brand: typ.Any = DEFAULT_BRAND
    colors: ColorScheme = dc.field(default_factory=ColorScheme)
    features: FeatureFlags = dc.field(default_factory=FeatureFlags)
    contact: ContactInfo = dc.field(default_factory=ContactInfo)
    services: tuple[Service, ...] = ()
    extra: dict[str, typ.Any] = dc.field(default_factory=dict)


@dc.dataclass(frozen=True, slots=True)
class CTAButtonConfig:
    """Call-to-action button within the homepage hero."""

    label: str
    page: str
    variant: str


@dc.dataclass(frozen=True, slots=True)
class HeroCopy:
    """Hero copy and CTAs for the home page."""

    headline: str = "Busy? Leave it to Buds."
    subhead: str = (
        "Reliable local help for windows, lawns & gardens, and dump runs, "
        "powered by community."
    )
    ctas: tuple[CTAButtonConfig, ...] = (
        CTAButtonConfig(
            label="See services & pricing", page="services", variant="primary"
        ),
        CTAButtonConfig(label="Get involved", page="get-involved", variant="ghost"),
    )


@dc.dataclass(frozen=True, slots=True)
class FaqEntry:
    """Question and answer pair rendered in the FAQ block."""

    question: str
    answer: str


DEFAULT_FAQ: tuple[FaqEntry, ...] = (
    FaqEntry(
        question="Which areas do you cover?",
        answer="We work across the local area. Get in touch if you are unsure.",
    ),
    FaqEntry(
        question="How do I book a service?",
        answer="Email or call us with what you need and a suitable time.",
    ),
    FaqEntry(
        question="Do you offer quotes?",
        answer="Yes. Quotes are free and prices start from the rates listed.",
    ),
)


@dc.dataclass(frozen=True, slots=True)
class SiteCopy:
    """Fixed marketing copy used by the page templates."""

    hero: HeroCopy = dc.field(default_factory=HeroCopy)
    about: str = (
        "We're a local team focused on friendly service, fair pricing, and "
        "community impact."
    )
    shop: str = "Products coming soon."
    get_involved: str = (
        "Volunteer, partner, or refer someone who could use a hand."
    )
    cart: str = "Your cart is empty."
    faq: tuple[FaqEntry, ...] = DEFAULT_FAQ


@dc.dataclass(frozen=True, slots=True)
class BuildSettings:
    """Locations and options shared by the ``pages`` subcommands."""

    site_config: Path = Path(DEFAULT_SITE_CONFIG)
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    commands: tuple[str, ...] = DEFAULT_COMMANDS
    copy: SiteCopy = dc.field(default_factory=SiteCopy)


__all__ = [
    "DEFAULT_BRAND",
    "DEFAULT_FAQ",
    "PLACEHOLDER_SERVICE",
    "SERVICE_COUNT",
    "BuildSettings",
    "CTAButtonConfig",
    "ColorScheme",
    "ContactInfo",
    "FaqEntry",
    "FeatureFlags",
    "HeroCopy",
    "Service",
    "SiteConfigError",
    "SiteConfiguration",
    "SiteCopy",
]
