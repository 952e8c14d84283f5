"""Persist the site configuration as ``site.json``.

The store is the only component that touches the configuration file. Loading
never fails: a missing, unreadable, or malformed file yields the built-in
defaults so a bad commit cannot break a CI build. Saving writes only when the
serialized content differs from what is on disk, keeping repeated runs free of
spurious diffs.

Examples
--------
>>> from pathlib import Path
>>> store = ConfigurationStore(Path("site.json"))  # doctest: +SKIP
>>> config = store.load()  # doctest: +SKIP
>>> store.save(config)  # doctest: +SKIP
False
"""

from __future__ import annotations

import json
import logging
import typing as typ

from .helpers import config_from_mapping, config_to_mapping
from .models import SiteConfiguration

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def dump_config(config: SiteConfiguration) -> str:
    """Return the canonical JSON text for ``config``."""
    return json.dumps(config_to_mapping(config), indent=2, ensure_ascii=False) + "\n"


class ConfigurationStore:
    """Load and save a :class:`SiteConfiguration` at a fixed path."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> SiteConfiguration:
        """Return the stored configuration, or defaults when it is unusable."""
        if not self.path.exists():
            return SiteConfiguration()
        try:
            loaded = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable config %s: %s", self.path, exc)
            return SiteConfiguration()
        if not isinstance(loaded, dict):
            logger.warning("Ignoring config %s: top level is not an object", self.path)
            return SiteConfiguration()
        return config_from_mapping(loaded)

    def save(self, config: SiteConfiguration) -> bool:
        """Write ``config`` when it differs from the stored text.

        Returns
        -------
        bool
            ``True`` when the file was written, ``False`` when it already held
            identical content.
        """
        text = dump_config(config)
        if self._read_existing() == text:
            return False
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(text, encoding="utf-8")
        return True

    def _read_existing(self) -> str | None:
        """Return the current file text, or None when it cannot be read."""
        if not self.path.exists():
            return None
        try:
            return self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Overwriting unreadable config %s: %s", self.path, exc)
            return None


__all__ = ["ConfigurationStore", "dump_config"]
