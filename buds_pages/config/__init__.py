"""Site configuration models, persistence, and build settings.

This subpackage defines the :class:`SiteConfiguration` value exchanged between
the directive interpreter and the renderer, the :class:`ConfigurationStore`
that owns ``site.json`` on disk, and :func:`load_build_settings`, which reads
the optional ``config/site.yaml`` file holding output locations, accepted
slash commands, and marketing copy overrides.

Examples
--------
>>> from pathlib import Path
>>> from buds_pages.config import ConfigurationStore
>>> config = ConfigurationStore(Path("site.json")).load()  # doctest: +SKIP
>>> config.brand  # doctest: +SKIP
'Buds at Work'
"""

from .helpers import (
    config_from_mapping,
    config_to_mapping,
    normalize_service,
    normalize_services,
    optional_text,
)
from .loader import load_build_settings
from .models import (
    DEFAULT_BRAND,
    PLACEHOLDER_SERVICE,
    SERVICE_COUNT,
    BuildSettings,
    ColorScheme,
    ContactInfo,
    CTAButtonConfig,
    FaqEntry,
    FeatureFlags,
    HeroCopy,
    Service,
    SiteConfigError,
    SiteConfiguration,
    SiteCopy,
)
from .store import ConfigurationStore, dump_config

__all__ = [
    "DEFAULT_BRAND",
    "PLACEHOLDER_SERVICE",
    "SERVICE_COUNT",
    "BuildSettings",
    "CTAButtonConfig",
    "ColorScheme",
    "ConfigurationStore",
    "ContactInfo",
    "FaqEntry",
    "FeatureFlags",
    "HeroCopy",
    "Service",
    "SiteConfigError",
    "SiteConfiguration",
    "SiteCopy",
    "config_from_mapping",
    "config_to_mapping",
    "dump_config",
    "load_build_settings",
    "normalize_service",
    "normalize_services",
    "optional_text",
]
