"""Cyclopts CLI entrypoint for applying directives and generating the site.

The ``pages`` console script defined here drives the CI workflow: ``pages
apply`` reads a directive from a manual prompt or the triggering GitHub event
and merges it into ``site.json``; ``pages generate`` renders ``site.json``
into the static pages under ``dist/``; ``pages build`` runs both in order.
Every option falls back to an ``INPUT_*`` environment variable so
``workflow_dispatch`` inputs map onto the commands directly.

Examples
--------
Apply a directive locally and rebuild the pages:

>>> from buds_pages.cli import app
>>> app(["build", "--prompt", "rename brand to River Care; green"])  # doctest: +SKIP

Regenerate the pages into a custom directory:

>>> app(["generate", "--output-dir", "public"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_SETTINGS_PATH
from .config import BuildSettings, ConfigurationStore, load_build_settings
from .interpreter import interpret
from .renderer import render
from .trigger import extract_directive, read_event
from .writer import append_step_summary, output_filename, write_site

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

SettingsOption = typ.Annotated[
    Path | None,
    Parameter(help="Path to build settings YAML", env_var="INPUT_SETTINGS"),
]
ConfigOption = typ.Annotated[
    Path | None,
    Parameter(help="Path to site.json", env_var="INPUT_CONFIG"),
]
SummaryOption = typ.Annotated[
    Path | None,
    Parameter(
        help="Step summary file to append to", env_var="GITHUB_STEP_SUMMARY"
    ),
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_settings(settings: Path | None) -> BuildSettings:
    """Load explicit settings, else ``config/site.yaml`` when present."""
    if settings is None:
        default_path = Path(DEFAULT_SETTINGS_PATH)
        return load_build_settings(default_path if default_path.exists() else None)
    return load_build_settings(settings)


@app.command(help="Apply a directive from a prompt or CI event to site.json.")
def apply(
    *,
    prompt: typ.Annotated[
        str | None,
        Parameter(help="Directive text (overrides the CI event)", env_var="INPUT_PROMPT"),
    ] = None,
    config: ConfigOption = None,
    settings: SettingsOption = None,
    event_name: typ.Annotated[
        str | None,
        Parameter(help="Triggering event name", env_var="GITHUB_EVENT_NAME"),
    ] = None,
    event_path: typ.Annotated[
        Path | None,
        Parameter(help="Triggering event payload JSON", env_var="GITHUB_EVENT_PATH"),
    ] = None,
    summary: SummaryOption = None,
) -> None:
    """Merge the triggering directive into the stored site configuration.

    Parameters
    ----------
    prompt : str or None, optional
        Directive supplied by hand; when blank the CI event is consulted.
    config : Path or None, optional
        Override for the ``site.json`` location from the build settings.
    settings : Path or None, optional
        Build settings YAML; defaults to ``config/site.yaml`` when present.
    event_name : str or None, optional
        CI event name (``GITHUB_EVENT_NAME``).
    event_path : Path or None, optional
        CI event payload path (``GITHUB_EVENT_PATH``).
    summary : Path or None, optional
        Step summary file (``GITHUB_STEP_SUMMARY``).

    Returns
    -------
    None
        Writes ``site.json`` when it changed and reports the outcome on stdout.
    """
    build_settings = _load_settings(settings)
    config_path = config or build_settings.site_config
    directive = extract_directive(
        event_name,
        read_event(event_path),
        commands=build_settings.commands,
        manual_prompt=prompt,
    )
    if directive is None:
        print("skipped: no directive in trigger")
        return

    store = ConfigurationStore(config_path)
    updated = interpret(directive, store.load())
    if store.save(updated):
        print(f"wrote {_format_path(config_path)}")
    else:
        print(f"unchanged {_format_path(config_path)}")
    append_step_summary(
        summary,
        f"\n**Applied prompt to {config_path.name}**\n\n```txt\n{directive}\n```\n",
    )


@app.command(help="Render site.json into the static pages.")
def generate(
    *,
    config: ConfigOption = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    settings: SettingsOption = None,
    summary: SummaryOption = None,
) -> None:
    """Render every page from the stored configuration and write them out.

    Parameters
    ----------
    config : Path or None, optional
        Override for the ``site.json`` location from the build settings.
    output_dir : Path or None, optional
        Override for the output folder from the build settings.
    settings : Path or None, optional
        Build settings YAML; defaults to ``config/site.yaml`` when present.
    summary : Path or None, optional
        Step summary file (``GITHUB_STEP_SUMMARY``).
    """
    build_settings = _load_settings(settings)
    site_config = ConfigurationStore(config or build_settings.site_config).load()
    site = render(site_config, copy=build_settings.copy)
    written = write_site(site, output_dir or build_settings.output_dir)
    for path in written:
        print(f"wrote {_format_path(path)}")
    built = ", ".join(output_filename(key).removesuffix(".html") for key in site)
    append_step_summary(summary, f"\n**Built pages:** {built}\n")


@app.command(help="Apply the triggering directive, then render the pages.")
def build(
    *,
    prompt: typ.Annotated[
        str | None,
        Parameter(help="Directive text (overrides the CI event)", env_var="INPUT_PROMPT"),
    ] = None,
    config: ConfigOption = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    settings: SettingsOption = None,
    event_name: typ.Annotated[
        str | None,
        Parameter(help="Triggering event name", env_var="GITHUB_EVENT_NAME"),
    ] = None,
    event_path: typ.Annotated[
        Path | None,
        Parameter(help="Triggering event payload JSON", env_var="GITHUB_EVENT_PATH"),
    ] = None,
    summary: SummaryOption = None,
) -> None:
    """Run :func:`apply` followed by :func:`generate` with shared options."""
    apply(
        prompt=prompt,
        config=config,
        settings=settings,
        event_name=event_name,
        event_path=event_path,
        summary=summary,
    )
    generate(config=config, output_dir=output_dir, settings=settings, summary=summary)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``pages`` console command."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
