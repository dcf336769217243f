"""Load and validate the documentation site configuration.

This subpackage merges environment overlays (Algolia identifiers and keys)
into compiled defaults, validates every field, and produces a frozen
:class:`SiteConfiguration` that renderers, search clients, and manifest
packagers read from. The primary entry point is :class:`ConfigStore`, which
loads once and then hands out the same immutable instance.

Examples
--------
>>> from docsite.config import ConfigStore
>>> store = ConfigStore()
>>> config = store.load()  # doctest: +SKIP
>>> config.header.search.index_name  # doctest: +SKIP
'nixos-docs'
"""

from .builder import build_site_configuration
from .defaults import (
    DEFAULT_SETTINGS,
    default_settings,
    load_defaults_file,
    merge_settings,
)
from .models import (
    BuildConfig,
    ConfigError,
    ConfigLoadError,
    ConfigNotLoadedError,
    ConfigValidationError,
    HeaderConfig,
    LinkConfig,
    ManifestConfig,
    ManifestIcon,
    PwaConfig,
    SearchConfig,
    SidebarConfig,
    SiteConfiguration,
    SiteMetadata,
)
from .overlay import ENV_OVERLAYS, apply_overlays
from .store import ConfigStore

__all__ = [
    "DEFAULT_SETTINGS",
    "ENV_OVERLAYS",
    "BuildConfig",
    "ConfigError",
    "ConfigLoadError",
    "ConfigNotLoadedError",
    "ConfigStore",
    "ConfigValidationError",
    "HeaderConfig",
    "LinkConfig",
    "ManifestConfig",
    "ManifestIcon",
    "PwaConfig",
    "SearchConfig",
    "SidebarConfig",
    "SiteConfiguration",
    "SiteMetadata",
    "apply_overlays",
    "build_site_configuration",
    "default_settings",
    "load_defaults_file",
    "merge_settings",
]
