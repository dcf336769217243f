"""Turn a merged settings mapping into a validated SiteConfiguration."""

from __future__ import annotations

import typing as typ

from .helpers import (
    _boolean,
    _check_icon_sizes,
    _check_mime_type,
    _links,
    _optional_str,
    _path_list,
    _section,
    _string,
    _url,
)
from .models import (
    BuildConfig,
    ConfigValidationError,
    HeaderConfig,
    ManifestConfig,
    ManifestIcon,
    PwaConfig,
    SearchConfig,
    SidebarConfig,
    SiteConfiguration,
    SiteMetadata,
)

# Manifest string fields: source key -> ManifestConfig attribute.
MANIFEST_FIELDS: typ.Final[dict[str, str]] = {
    "name": "name",
    "short_name": "short_name",
    "start_url": "start_url",
    "background_color": "background_color",
    "theme_color": "theme_color",
    "display": "display",
    "crossOrigin": "cross_origin",
}


def build_site_configuration(settings: typ.Mapping[str, typ.Any]) -> SiteConfiguration:
    """Validate ``settings`` and return the frozen configuration.

    Parameters
    ----------
    settings : Mapping[str, Any]
        Defaults with environment overlays already applied, keyed by the
        source names (``build``, ``header``, ``sidebar``, ``siteMetadata``,
        ``pwa``).

    Returns
    -------
    SiteConfiguration
        Immutable configuration ready for collaborators.

    Raises
    ------
    ConfigValidationError
        On the first field that violates its constraint. Validation is
        all-or-nothing; no partial configuration is returned.
    """
    build = _build_build_config(_section(settings.get("build"), "build"))
    return SiteConfiguration(
        build=build,
        header=_build_header_config(_section(settings.get("header"), "header")),
        sidebar=_build_sidebar_config(
            _section(settings.get("sidebar"), "sidebar"),
            trailing_slash=build.trailing_slash,
        ),
        site_metadata=_build_site_metadata(
            _section(settings.get("siteMetadata"), "siteMetadata")
        ),
        pwa=_build_pwa_config(settings.get("pwa")),
    )


def _build_build_config(payload: typ.Mapping[str, typ.Any]) -> BuildConfig:
    path_prefix = _string(payload.get("pathPrefix"), "build.pathPrefix", required=True)
    if not path_prefix.startswith("/"):
        raise ConfigValidationError("build.pathPrefix", "must start with '/'")
    return BuildConfig(
        path_prefix=path_prefix,
        site_url=_url(payload.get("siteUrl"), "build.siteUrl"),
        ga_tracking_id=_optional_str(payload.get("gaTrackingId"), "build.gaTrackingId"),
        trailing_slash=_boolean(
            payload.get("trailingSlash", False), "build.trailingSlash"
        ),
    )


def _build_header_config(payload: typ.Mapping[str, typ.Any]) -> HeaderConfig:
    return HeaderConfig(
        logo=_url(payload.get("logo"), "header.logo"),
        logo_link=_url(payload.get("logoLink"), "header.logoLink"),
        title=_string(payload.get("title"), "header.title", required=True),
        search=_build_search_config(
            _section(payload.get("search"), "header.search")
        ),
        github_url=_string(payload.get("githubUrl"), "header.githubUrl"),
        help_url=_string(payload.get("helpUrl"), "header.helpUrl"),
        tweet_text=_string(payload.get("tweetText"), "header.tweetText"),
        links=_links(payload.get("links"), "header.links"),
    )


def _build_search_config(payload: typ.Mapping[str, typ.Any]) -> SearchConfig:
    """Build search settings; identifiers become mandatory once enabled."""
    enabled = _boolean(payload.get("enabled", False), "header.search.enabled")
    index_name = _string(
        payload.get("indexName"), "header.search.indexName", required=enabled
    )
    app_id = _optional_str(payload.get("algoliaAppId"), "header.search.algoliaAppId")
    search_key = _optional_str(
        payload.get("algoliaSearchKey"), "header.search.algoliaSearchKey"
    )
    admin_key = _optional_str(
        payload.get("algoliaAdminKey"), "header.search.algoliaAdminKey"
    )
    if enabled:
        for field, value in (
            ("header.search.algoliaAppId", app_id),
            ("header.search.algoliaSearchKey", search_key),
        ):
            if value is None or not value.strip():
                raise ConfigValidationError(
                    field, "is required when search is enabled"
                )
    return SearchConfig(
        enabled=enabled,
        index_name=index_name,
        algolia_app_id=app_id,
        algolia_search_key=search_key,
        algolia_admin_key=admin_key,
    )


def _build_sidebar_config(
    payload: typ.Mapping[str, typ.Any], *, trailing_slash: bool
) -> SidebarConfig:
    return SidebarConfig(
        forced_nav_order=_path_list(
            payload.get("forcedNavOrder"),
            "sidebar.forcedNavOrder",
            trailing_slash=trailing_slash,
        ),
        collapsed_nav=frozenset(
            _path_list(
                payload.get("collapsedNav"),
                "sidebar.collapsedNav",
                trailing_slash=trailing_slash,
            )
        ),
        links=_links(payload.get("links"), "sidebar.links"),
        frontline=_boolean(payload.get("frontline", False), "sidebar.frontline"),
        ignore_index=_boolean(payload.get("ignoreIndex", True), "sidebar.ignoreIndex"),
        title=_string(payload.get("title"), "sidebar.title"),
    )


def _build_site_metadata(payload: typ.Mapping[str, typ.Any]) -> SiteMetadata:
    return SiteMetadata(
        title=_string(payload.get("title"), "siteMetadata.title", required=True),
        description=_string(
            payload.get("description"), "siteMetadata.description", required=True
        ),
        docs_location=_url(payload.get("docsLocation"), "siteMetadata.docsLocation"),
        favicon=_url(payload.get("favicon"), "siteMetadata.favicon"),
        og_image=_optional_str(payload.get("ogImage"), "siteMetadata.ogImage"),
    )


def _build_pwa_config(payload: object) -> PwaConfig:
    """Build PWA settings; the manifest is only enforced when enabled."""
    if payload is None:
        return PwaConfig()
    data = _section(payload, "pwa")
    enabled = _boolean(data.get("enabled", False), "pwa.enabled")
    manifest_raw = data.get("manifest")
    if manifest_raw is None and not enabled:
        return PwaConfig(enabled=False)
    manifest = _build_manifest(
        _section(manifest_raw, "pwa.manifest"), required=enabled
    )
    return PwaConfig(enabled=enabled, manifest=manifest)


def _build_manifest(
    payload: typ.Mapping[str, typ.Any], *, required: bool
) -> ManifestConfig:
    values = {
        attribute: _string(
            payload.get(key), f"pwa.manifest.{key}", required=required
        )
        for key, attribute in MANIFEST_FIELDS.items()
    }
    icons = _build_icons(payload.get("icons"), required=required)
    return ManifestConfig(icons=icons, **values)


def _build_icons(value: object, *, required: bool) -> tuple[ManifestIcon, ...]:
    field = "pwa.manifest.icons"
    if value is None:
        value = []
    if not isinstance(value, list):
        raise ConfigValidationError(field, "must be a list of icons")
    if required and not value:
        raise ConfigValidationError(field, "requires at least one icon when PWA is enabled")
    icons: list[ManifestIcon] = []
    for index, entry in enumerate(value):
        entry_field = f"{field}[{index}]"
        if not isinstance(entry, dict):
            raise ConfigValidationError(entry_field, "must be a mapping")
        sizes = _check_icon_sizes(
            entry.get("sizes"), f"{entry_field}.sizes", required=required
        )
        mime = _check_mime_type(
            entry.get("type"), f"{entry_field}.type", required=required
        )
        icons.append(
            ManifestIcon(
                src=_string(entry.get("src"), f"{entry_field}.src", required=required),
                sizes=sizes,
                type=mime,
            )
        )
    return tuple(icons)


__all__ = ["MANIFEST_FIELDS", "build_site_configuration"]
