"""Load build settings YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .._constants import DEFAULT_COMMANDS, DEFAULT_OUTPUT_DIR, DEFAULT_SITE_CONFIG
from .helpers import optional_text
from .models import (
    BuildSettings,
    CTAButtonConfig,
    FaqEntry,
    HeroCopy,
    SiteConfigError,
    SiteCopy,
)


def load_build_settings(path: Path | None) -> BuildSettings:
    """Load the optional YAML file describing build locations and site copy.

    Parameters
    ----------
    path : Path or None
        Filesystem path to the settings file (for example,
        ``config/site.yaml``). ``None`` returns the built-in defaults.

    Returns
    -------
    BuildSettings
        Settings with every omitted value filled from the defaults.

    Raises
    ------
    FileNotFoundError
        If ``path`` is given but does not exist.
    SiteConfigError
        If the top level is not a mapping or a copy entry is malformed.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> settings = load_build_settings(None)
    >>> settings.output_dir
    PosixPath('dist')
    """
    if path is None:
        return BuildSettings()
    if not path.exists():
        msg = f"Settings file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise SiteConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    return BuildSettings(
        site_config=Path(raw.get("site_config") or DEFAULT_SITE_CONFIG),
        output_dir=Path(raw.get("output_dir") or DEFAULT_OUTPUT_DIR),
        commands=_build_commands(raw.get("commands")),
        copy=_build_site_copy(raw.get("copy")),
    )


def _build_commands(value: object) -> tuple[str, ...]:
    """Return slash command names without their leading slash."""
    match value:
        case None:
            return DEFAULT_COMMANDS
        case str() as single:
            entries: list[object] = [single]
        case list() as items:
            entries = items
        case _:
            msg = "'commands' must be a string or a list of strings."
            raise SiteConfigError(msg)
    commands = tuple(
        name for name in (str(entry).strip().lstrip("/") for entry in entries) if name
    )
    if not commands:
        msg = "'commands' requires at least one command name."
        raise SiteConfigError(msg)
    return commands


def _build_site_copy(payload: object) -> SiteCopy:
    """Build the site copy, overriding defaults with any provided text."""
    match payload:
        case None:
            return SiteCopy()
        case dict() as data:
            pass
        case _:
            msg = "'copy' must be a mapping."
            raise SiteConfigError(msg)
    base = SiteCopy()
    faq_raw = data.get("faq")
    return SiteCopy(
        hero=_build_hero_copy(data.get("hero")),
        about=optional_text(data.get("about")) or base.about,
        shop=optional_text(data.get("shop")) or base.shop,
        get_involved=optional_text(data.get("get_involved")) or base.get_involved,
        cart=optional_text(data.get("cart")) or base.cart,
        faq=base.faq if faq_raw is None else _build_faq(faq_raw),
    )


def _build_hero_copy(payload: object) -> HeroCopy:
    """Build hero copy for the home page."""
    match payload:
        case None:
            return HeroCopy()
        case dict() as data:
            pass
        case _:
            msg = "'copy.hero' must be a mapping."
            raise SiteConfigError(msg)
    base = HeroCopy()
    ctas_raw = data.get("ctas")
    return HeroCopy(
        headline=optional_text(data.get("headline")) or base.headline,
        subhead=optional_text(data.get("subhead")) or base.subhead,
        ctas=base.ctas if ctas_raw is None else _build_ctas(ctas_raw),
    )


def _build_ctas(entries: object) -> tuple[CTAButtonConfig, ...]:
    """Build call-to-action buttons for the hero section."""
    if not isinstance(entries, list):
        msg = "'copy.hero.ctas' must be a list."
        raise SiteConfigError(msg)
    buttons: list[CTAButtonConfig] = []
    for entry in entries:
        match entry:
            case {"label": label, "page": page, **rest}:
                pass
            case _:
                msg = "Hero CTA entries require 'label' and 'page'."
                raise SiteConfigError(msg)
        if not (label and page):
            msg = "Hero CTA entries require 'label' and 'page'."
            raise SiteConfigError(msg)
        buttons.append(
            CTAButtonConfig(
                label=str(label),
                page=str(page),
                variant=optional_text(rest.get("variant")) or "primary",
            )
        )
    return tuple(buttons)


def _build_faq(entries: object) -> tuple[FaqEntry, ...]:
    """Build FAQ question/answer pairs."""
    if not isinstance(entries, list):
        msg = "'copy.faq' must be a list."
        raise SiteConfigError(msg)
    faq: list[FaqEntry] = []
    for entry in entries:
        match entry:
            case {"question": question, "answer": answer, **_rest} if (
                question and answer
            ):
                faq.append(FaqEntry(question=str(question), answer=str(answer)))
            case _:
                msg = "FAQ entries require 'question' and 'answer'."
                raise SiteConfigError(msg)
    return tuple(faq)


__all__ = ["load_build_settings"]
