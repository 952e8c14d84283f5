"""Turn free-form directive text into site configuration updates.

Directives arrive as issue or comment bodies such as::

    rename brand to River Care; green; rounded buttons
    service: Pruning | Tree trims | from $60

Each recognised clause is handled by one :class:`ExtractionRule` in
:data:`RULES`. Rules are independent, case-insensitive, and applied in the
listed order; when two rules write the same field the later rule wins, so
"mustard" overrides "coral" wherever each appears in the text. Service lines
are collected separately because they append rather than overwrite.

Interpretation never fails. Text that matches no rule leaves the
configuration untouched apart from the three-service normalization, which is
always applied to the result.

Examples
--------
>>> from buds_pages.config import SiteConfiguration
>>> updated = interpret("rename brand to River Care; purple", SiteConfiguration())
>>> updated.brand, updated.colors.primary
('River Care', '#6A1B9A')
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
import re
import typing as typ

from .config import Service, SiteConfiguration, normalize_services
from .theme import COLOR_KEYWORDS

logger = logging.getLogger(__name__)

SERVICE_LINE_PATTERN = re.compile(r"service\s*:\s*(.+)", re.IGNORECASE)
SERVICE_PART_COUNT = 3


@dc.dataclass(frozen=True, slots=True)
class ExtractionRule:
    """Map the first match of ``pattern`` onto a dotted configuration field.

    Attributes
    ----------
    name : str
        Identifier used in debug logging and tests.
    pattern : re.Pattern[str]
        Compiled pattern searched in the directive text.
    field : str
        Dotted path such as ``"colors.accent"`` or ``"brand"``.
    transform : Callable[[re.Match[str]], object | None]
        Produces the new field value; ``None`` means the clause is ignored.
    """

    name: str
    pattern: re.Pattern[str]
    field: str
    transform: cabc.Callable[[re.Match[str]], object | None]

    def extract(self, text: str) -> object | None:
        """Return the value this rule assigns for ``text``, if any."""
        match = self.pattern.search(text)
        if match is None:
            return None
        return self.transform(match)


def _constant(value: object) -> cabc.Callable[[re.Match[str]], object]:
    return lambda _match: value


def _group_stripped(match: re.Match[str]) -> str | None:
    return match.group(1).strip() or None


def _group(match: re.Match[str]) -> str:
    return match.group(1)


def _rule(
    name: str,
    pattern: str,
    field: str,
    transform: cabc.Callable[[re.Match[str]], object | None],
) -> ExtractionRule:
    return ExtractionRule(
        name=name,
        pattern=re.compile(pattern, re.IGNORECASE | re.MULTILINE),
        field=field,
        transform=transform,
    )


RULES: tuple[ExtractionRule, ...] = (
    _rule("brand", r"rename\s+brand\s+to\s+([^;\n]+?)\s*(?:;|$)", "brand", _group_stripped),
    _rule("coral", r"\bcoral\b", "colors.accent", _constant(COLOR_KEYWORDS["coral"])),
    _rule(
        "mustard",
        r"\bmustard\b|\byellow\b",
        "colors.accent",
        _constant(COLOR_KEYWORDS["mustard"]),
    ),
    _rule("purple", r"\bpurple\b", "colors.primary", _constant(COLOR_KEYWORDS["purple"])),
    _rule("green", r"\bgreen\b", "colors.primary", _constant(COLOR_KEYWORDS["green"])),
    _rule(
        "cream",
        r"\bcream\b|\bivory\b",
        "colors.paper",
        _constant(COLOR_KEYWORDS["cream"]),
    ),
    _rule(
        "rounded_buttons",
        r"rounded buttons|rounded",
        "features.rounded_buttons",
        _constant(True),
    ),
    _rule(
        "bigger_hero",
        r"bigger hero|bigger heading",
        "features.bigger_hero",
        _constant(True),
    ),
    _rule("faq", r"add faq\b", "features.faq", _constant(True)),
    _rule(
        "gallery",
        r"add gallery|add work section",
        "features.gallery",
        _constant(True),
    ),
    _rule(
        "hero_image",
        r"hero(?:\s*image)?\s*:\s*(https?:(?:[^\s;]|;(?!\s|$))+)",
        "features.hero_image",
        _group,
    ),
    _rule("email", r"email\s*:\s*([^\s;]+)", "contact.email", _group),
    _rule("phone", r"phone\s*:\s*([+\d\s()-]+)", "contact.phone", _group_stripped),
)


def extract_fields(text: str) -> dict[str, object]:
    """Return the field updates every rule produces for ``text``.

    The mapping is keyed by dotted field path. Later rules overwrite earlier
    ones writing the same field.

    Examples
    --------
    >>> extract_fields("coral and mustard")
    {'colors.accent': '#c9a227'}
    """
    updates: dict[str, object] = {}
    for rule in RULES:
        value = rule.extract(text)
        if value is None:
            continue
        logger.debug("Directive rule %s set %s=%r", rule.name, rule.field, value)
        updates[rule.field] = value
    return updates


def extract_services(text: str) -> list[Service]:
    """Return services declared by ``service: title | desc | price`` lines.

    Lines with fewer than three pipe-separated parts are skipped; extra parts
    are ignored.

    Examples
    --------
    >>> extract_services("service: Pruning | Tree trims | from $60 | extra")
    [Service(title='Pruning', desc='Tree trims', price='from $60')]
    """
    services: list[Service] = []
    for match in SERVICE_LINE_PATTERN.finditer(text):
        parts = [part.strip() for part in match.group(1).split("|")]
        if len(parts) < SERVICE_PART_COUNT:
            continue
        title, desc, price = parts[:SERVICE_PART_COUNT]
        services.append(Service(title=title, desc=desc, price=price))
    return services


def _apply_updates(
    config: SiteConfiguration, updates: cabc.Mapping[str, object]
) -> SiteConfiguration:
    """Return ``config`` with each dotted-path update applied."""
    top_level: dict[str, typ.Any] = {}
    sections: dict[str, dict[str, object]] = {}
    for path, value in updates.items():
        section, _, attr = path.partition(".")
        if attr:
            sections.setdefault(section, {})[attr] = value
        else:
            top_level[section] = value
    for section, changes in sections.items():
        top_level[section] = dc.replace(getattr(config, section), **changes)
    return dc.replace(config, **top_level)


def interpret(text: str, previous: SiteConfiguration) -> SiteConfiguration:
    """Apply directive ``text`` to ``previous`` and return the new configuration.

    Parameters
    ----------
    text : str
        Free-form directive; may be empty or contain any number of clauses.
    previous : SiteConfiguration
        Configuration to merge onto. It is not modified.

    Returns
    -------
    SiteConfiguration
        ``previous`` with recognised fields overridden, new services appended,
        and the service list normalized to exactly three entries.
    """
    text = text or ""
    updated = _apply_updates(previous, extract_fields(text))
    services = normalize_services([*previous.services, *extract_services(text)])
    return dc.replace(updated, services=services)


__all__ = [
    "RULES",
    "ExtractionRule",
    "extract_fields",
    "extract_services",
    "interpret",
]
