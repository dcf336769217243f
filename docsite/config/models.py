"""Typed dataclasses describing the documentation site configuration."""

from __future__ import annotations

import dataclasses as dc


class ConfigError(ValueError):
    """Base class for configuration failures."""


class ConfigValidationError(ConfigError):
    """Raised when a field is missing, empty, or malformed.

    Parameters
    ----------
    field : str
        Dotted source path of the offending field, for example
        ``header.search.indexName``.
    constraint : str
        Human-readable description of the violated constraint.
    """

    def __init__(self, field: str, constraint: str) -> None:
        self.field = field
        self.constraint = constraint
        super().__init__(f"{field}: {constraint}")


class ConfigLoadError(ConfigError):
    """Raised when overlay input or a defaults file cannot be read."""


class ConfigNotLoadedError(ConfigError):
    """Raised when the configuration is accessed before it was loaded."""


@dc.dataclass(frozen=True, slots=True)
class LinkConfig:
    """Navigation link shown in the header or sidebar."""

    text: str
    link: str


@dc.dataclass(frozen=True, slots=True)
class BuildConfig:
    """Settings consumed by the site build itself."""

    path_prefix: str
    site_url: str
    ga_tracking_id: str | None = None
    trailing_slash: bool = False


@dc.dataclass(frozen=True, slots=True)
class SearchConfig:
    """Algolia search integration settings."""

    enabled: bool
    index_name: str
    algolia_app_id: str | None = None
    algolia_search_key: str | None = None
    algolia_admin_key: str | None = dc.field(default=None, repr=False)


@dc.dataclass(frozen=True, slots=True)
class HeaderConfig:
    """Header branding, links, and search."""

    logo: str
    logo_link: str
    title: str
    search: SearchConfig
    github_url: str = ""
    help_url: str = ""
    tweet_text: str = ""
    links: tuple[LinkConfig, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class SidebarConfig:
    """Sidebar navigation ordering and links."""

    forced_nav_order: tuple[str, ...] = ()
    collapsed_nav: frozenset[str] = frozenset()
    links: tuple[LinkConfig, ...] = ()
    frontline: bool = False
    ignore_index: bool = True
    title: str = ""


@dc.dataclass(frozen=True, slots=True)
class SiteMetadata:
    """Document-level metadata used for titles and social cards."""

    title: str
    description: str
    docs_location: str
    favicon: str
    og_image: str | None = None


@dc.dataclass(frozen=True, slots=True)
class ManifestIcon:
    """A single icon entry in the web app manifest."""

    src: str
    sizes: str
    type: str


@dc.dataclass(frozen=True, slots=True)
class ManifestConfig:
    """Web app manifest fields.

    Values may be empty when the PWA is disabled.
    """

    name: str = ""
    short_name: str = ""
    start_url: str = ""
    background_color: str = ""
    theme_color: str = ""
    display: str = ""
    cross_origin: str = ""
    icons: tuple[ManifestIcon, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class PwaConfig:
    """Progressive web app toggle and manifest."""

    enabled: bool = False
    manifest: ManifestConfig = dc.field(default_factory=ManifestConfig)


@dc.dataclass(frozen=True, slots=True)
class SiteConfiguration:
    """The complete, validated site configuration."""

    build: BuildConfig
    header: HeaderConfig
    sidebar: SidebarConfig
    site_metadata: SiteMetadata
    pwa: PwaConfig


__all__ = [
    "BuildConfig",
    "ConfigError",
    "ConfigLoadError",
    "ConfigNotLoadedError",
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
]
