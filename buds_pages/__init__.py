"""Apply free-form site directives and render the static marketing pages.

This package exposes the CLI entry points used by ``uv run pages`` in the CI
workflow together with the two pure building blocks behind them: the
directive interpreter and the site renderer.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``interpret``: Merge a directive into a :class:`SiteConfiguration`.
- ``render``: Render a :class:`SiteConfiguration` into page documents.

Examples
--------
>>> from buds_pages import interpret, render
>>> from buds_pages.config import SiteConfiguration
>>> config = interpret("add faq", SiteConfiguration())
>>> "faq" in render(config)["home"]
True
"""

from __future__ import annotations

from .cli import app, main
from .interpreter import interpret
from .renderer import render

__all__ = ["app", "interpret", "main", "render"]
