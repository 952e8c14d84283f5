"""Write rendered pages and CI step summaries to disk."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ._constants import OUTPUT_FILENAMES

if typ.TYPE_CHECKING:
    from pathlib import Path


def output_filename(page_key: str) -> str:
    """Return the HTML filename for ``page_key`` (``home`` maps to ``index.html``)."""
    return OUTPUT_FILENAMES.get(page_key, f"{page_key}.html")


def write_site(site: cabc.Mapping[str, str], output_dir: Path) -> list[Path]:
    """Write each rendered page under ``output_dir`` and return the paths.

    Parent directories are created as needed; filesystem errors propagate.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for key, html in site.items():
        path = output_dir / output_filename(key)
        path.write_text(html, encoding="utf-8")
        written.append(path)
    return written


def append_step_summary(path: Path | None, markdown: str) -> bool:
    """Append ``markdown`` to the CI step summary file when one is configured."""
    if path is None:
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as handle:
        handle.write(markdown)
    return True


__all__ = ["append_step_summary", "output_filename", "write_site"]
