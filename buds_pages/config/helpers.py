"""Conversion helpers between ``site.json`` mappings and configuration models.

The persisted shape uses camelCase feature keys (``roundedButtons``) while the
dataclasses use snake_case attributes. Values are carried exactly as stored:
a hand-written ``"faq": "yes"`` or a numeric phone number stays that way until
a directive overwrites it, and the renderer does its own coercion. Keys the
models do not know about, and known keys stored as ``null``, are kept in each
model's ``extra`` mapping and written back, so state added by other tooling
survives a load/save cycle.
"""

from __future__ import annotations

import collections.abc as cabc
import copy
import typing as typ

from .models import (
    DEFAULT_BRAND,
    PLACEHOLDER_SERVICE,
    SERVICE_COUNT,
    ColorScheme,
    ContactInfo,
    FeatureFlags,
    Service,
    SiteConfiguration,
)

COLOR_KEYS: dict[str, str] = {"primary": "primary", "accent": "accent", "paper": "paper"}
FEATURE_KEYS: dict[str, str] = {
    "rounded_buttons": "roundedButtons",
    "bigger_hero": "biggerHero",
    "faq": "faq",
    "gallery": "gallery",
    "hero_image": "heroImage",
}
CONTACT_KEYS: dict[str, str] = {"email": "email", "phone": "phone"}
SERVICE_KEYS: dict[str, str] = {"title": "title", "desc": "desc", "price": "price"}
SITE_KEYS = frozenset({"brand", "colors", "features", "contact", "services"})


def optional_text(value: object | None) -> str | None:
    """Return a stripped string value or None when empty.

    Examples
    --------
    >>> optional_text(474766703)
    '474766703'
    >>> optional_text("   ") is None
    True
    """
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _as_mapping(value: object) -> cabc.Mapping[str, typ.Any]:
    """Return ``value`` when it is a mapping, otherwise an empty mapping."""
    match value:
        case cabc.Mapping():
            return value
        case _:
            return {}


def _split_extra(
    payload: cabc.Mapping[str, typ.Any], known: cabc.Iterable[str]
) -> dict[str, typ.Any]:
    """Return a deep copy of the entries the model will not hold itself.

    That is every unknown key, plus known keys whose value is ``null`` so the
    explicit null is written back unless a directive sets the field.
    """
    known_keys = set(known)
    return {
        str(key): copy.deepcopy(value)
        for key, value in payload.items()
        if key not in known_keys or value is None
    }


def _filled(value: typ.Any, fallback: str) -> typ.Any:
    return value if optional_text(value) else fallback


def normalize_service(entry: Service) -> Service:
    """Return ``entry`` with blank fields replaced by placeholder values.

    Non-blank fields and unknown keys are kept as they are.
    """
    return Service(
        title=_filled(entry.title, PLACEHOLDER_SERVICE.title),
        desc=_filled(entry.desc, PLACEHOLDER_SERVICE.desc),
        price=_filled(entry.price, PLACEHOLDER_SERVICE.price),
        extra=entry.extra,
    )


def normalize_services(services: cabc.Iterable[Service]) -> tuple[Service, ...]:
    """Return exactly three services: truncated from the end or padded.

    Examples
    --------
    >>> normalize_services([])[0].title
    'Service'
    >>> len(normalize_services([Service("a", "b", "c")] * 5))
    3
    """
    normalized = [normalize_service(entry) for entry in services][:SERVICE_COUNT]
    while len(normalized) < SERVICE_COUNT:
        normalized.append(PLACEHOLDER_SERVICE)
    return tuple(normalized)


def _build_service(payload: object) -> Service | None:
    """Build a Service from a persisted mapping, skipping non-mappings."""
    match payload:
        case cabc.Mapping():
            return Service(
                **{attr: payload.get(key, "") for attr, key in SERVICE_KEYS.items()},
                extra=_split_extra(payload, SERVICE_KEYS.values()),
            )
        case _:
            return None


def _build_services(entries: object) -> tuple[Service, ...]:
    """Build the service list as persisted; normalization happens elsewhere."""
    match entries:
        case list() | tuple() as items:
            built = (_build_service(entry) for entry in items)
            return tuple(service for service in built if service is not None)
        case _:
            return ()


def _section_values(
    payload: cabc.Mapping[str, typ.Any], keys: cabc.Mapping[str, str]
) -> dict[str, typ.Any]:
    return {attr: copy.deepcopy(payload.get(key)) for attr, key in keys.items()}


def config_from_mapping(payload: cabc.Mapping[str, typ.Any]) -> SiteConfiguration:
    """Build a SiteConfiguration from a decoded ``site.json`` mapping.

    Missing or malformed sections fall back to their defaults; unknown keys
    are preserved in the ``extra`` mappings. A missing brand takes
    :data:`DEFAULT_BRAND`; a present one is kept verbatim.
    """
    colors_raw = _as_mapping(payload.get("colors"))
    features_raw = _as_mapping(payload.get("features"))
    contact_raw = _as_mapping(payload.get("contact"))

    return SiteConfiguration(
        brand=copy.deepcopy(payload["brand"]) if "brand" in payload else DEFAULT_BRAND,
        colors=ColorScheme(
            **_section_values(colors_raw, COLOR_KEYS),
            extra=_split_extra(colors_raw, COLOR_KEYS.values()),
        ),
        features=FeatureFlags(
            **_section_values(features_raw, FEATURE_KEYS),
            extra=_split_extra(features_raw, FEATURE_KEYS.values()),
        ),
        contact=ContactInfo(
            **_section_values(contact_raw, CONTACT_KEYS),
            extra=_split_extra(contact_raw, CONTACT_KEYS.values()),
        ),
        services=_build_services(payload.get("services")),
        extra=_split_extra(payload, SITE_KEYS),
    )


def _section_to_mapping(
    section: ColorScheme | FeatureFlags | ContactInfo | Service,
    keys: cabc.Mapping[str, str],
) -> dict[str, typ.Any]:
    """Serialize a configuration section, omitting unset values."""
    result: dict[str, typ.Any] = {}
    for attr, key in keys.items():
        value = getattr(section, attr)
        if value is not None:
            result[key] = copy.deepcopy(value)
    for key, value in section.extra.items():
        result.setdefault(key, copy.deepcopy(value))
    return result


def config_to_mapping(config: SiteConfiguration) -> dict[str, typ.Any]:
    """Serialize ``config`` into the ``site.json`` mapping shape."""
    mapping: dict[str, typ.Any] = {
        "brand": copy.deepcopy(config.brand),
        "colors": _section_to_mapping(config.colors, COLOR_KEYS),
        "features": _section_to_mapping(config.features, FEATURE_KEYS),
        "contact": _section_to_mapping(config.contact, CONTACT_KEYS),
        "services": [
            _section_to_mapping(entry, SERVICE_KEYS) for entry in config.services
        ],
    }
    mapping.update(copy.deepcopy(config.extra))
    return mapping


__all__ = [
    "COLOR_KEYS",
    "CONTACT_KEYS",
    "FEATURE_KEYS",
    "SERVICE_KEYS",
    "SITE_KEYS",
    "config_from_mapping",
    "config_to_mapping",
    "normalize_service",
    "normalize_services",
    "optional_text",
]
