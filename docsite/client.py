"""Browser-safe serialization of the site configuration.

The rendered site embeds a copy of the configuration for client-side code
(search widget, navigation). That copy must never carry server-only secrets,
so every client artifact is produced from :func:`client_payload`, which
removes the paths listed in :data:`SERVER_ONLY_FIELDS` after building the
full mapping.

Examples
--------
>>> from docsite.config import ConfigStore
>>> config = ConfigStore(environ=env).load()  # doctest: +SKIP
>>> "algoliaAdminKey" in client_payload(config)["header"]["search"]  # doctest: +SKIP
False
"""

from __future__ import annotations

import json
import typing as typ

if typ.TYPE_CHECKING:
    from .config import LinkConfig, SiteConfiguration

SERVER_ONLY_FIELDS: typ.Final[frozenset[str]] = frozenset(
    {"header.search.algoliaAdminKey"}
)


def _links(links: tuple[LinkConfig, ...]) -> list[dict[str, str]]:
    return [{"text": link.text, "link": link.link} for link in links]


def settings_payload(config: SiteConfiguration) -> dict[str, typ.Any]:
    """Return the full configuration keyed by source names, secrets included."""
    build = config.build
    header = config.header
    search = header.search
    sidebar = config.sidebar
    metadata = config.site_metadata
    manifest = config.pwa.manifest
    return {
        "build": {
            "pathPrefix": build.path_prefix,
            "siteUrl": build.site_url,
            "gaTrackingId": build.ga_tracking_id,
            "trailingSlash": build.trailing_slash,
        },
        "header": {
            "logo": header.logo,
            "logoLink": header.logo_link,
            "title": header.title,
            "githubUrl": header.github_url,
            "helpUrl": header.help_url,
            "tweetText": header.tweet_text,
            "links": _links(header.links),
            "search": {
                "enabled": search.enabled,
                "indexName": search.index_name,
                "algoliaAppId": search.algolia_app_id,
                "algoliaSearchKey": search.algolia_search_key,
                "algoliaAdminKey": search.algolia_admin_key,
            },
        },
        "sidebar": {
            "forcedNavOrder": list(sidebar.forced_nav_order),
            "collapsedNav": sorted(sidebar.collapsed_nav),
            "links": _links(sidebar.links),
            "frontline": sidebar.frontline,
            "ignoreIndex": sidebar.ignore_index,
            "title": sidebar.title,
        },
        "siteMetadata": {
            "title": metadata.title,
            "description": metadata.description,
            "ogImage": metadata.og_image,
            "docsLocation": metadata.docs_location,
            "favicon": metadata.favicon,
        },
        "pwa": {
            "enabled": config.pwa.enabled,
            "manifest": {
                "name": manifest.name,
                "short_name": manifest.short_name,
                "start_url": manifest.start_url,
                "background_color": manifest.background_color,
                "theme_color": manifest.theme_color,
                "display": manifest.display,
                "crossOrigin": manifest.cross_origin,
                "icons": [
                    {"src": icon.src, "sizes": icon.sizes, "type": icon.type}
                    for icon in manifest.icons
                ],
            },
        },
    }


def _drop_path(payload: dict[str, typ.Any], path: str) -> None:
    *parents, leaf = path.split(".")
    node: typ.Any = payload
    for segment in parents:
        node = node.get(segment) if isinstance(node, dict) else None
        if node is None:
            return
    if isinstance(node, dict):
        node.pop(leaf, None)


def client_payload(config: SiteConfiguration) -> dict[str, typ.Any]:
    """Return the configuration mapping that is safe to ship to browsers."""
    payload = settings_payload(config)
    for path in SERVER_ONLY_FIELDS:
        _drop_path(payload, path)
    return payload


def dump_client_json(config: SiteConfiguration, *, indent: int | None = 2) -> str:
    """Serialize :func:`client_payload` as JSON text."""
    return json.dumps(client_payload(config), indent=indent, sort_keys=True)


__all__ = [
    "SERVER_ONLY_FIELDS",
    "client_payload",
    "dump_client_json",
    "settings_payload",
]
