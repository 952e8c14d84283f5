"""Common literal values used across buds_pages.

These constants keep page keys, filenames, and default locations centralized
so the renderer, writer, CLI, and tests import the same values without
drifting. Intended for internal use within the buds_pages package.

Examples
--------
>>> from buds_pages import _constants
>>> _constants.PAGE_KEYS[0]
'home'
>>> _constants.OUTPUT_FILENAMES["home"]
'index.html'
"""

PAGE_KEYS: tuple[str, ...] = (
    "home",
    "about",
    "services",
    "shop",
    "get-involved",
    "cart",
)
OUTPUT_FILENAMES: dict[str, str] = {
    key: "index.html" if key == "home" else f"{key}.html" for key in PAGE_KEYS
}
DEFAULT_SITE_CONFIG = "site.json"
DEFAULT_OUTPUT_DIR = "dist"
DEFAULT_SETTINGS_PATH = "config/site.yaml"
DEFAULT_COMMANDS: tuple[str, ...] = ("deploy", "design")
