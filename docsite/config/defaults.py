"""Compiled-in defaults and the YAML defaults-file reader."""

from __future__ import annotations

import copy
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .models import ConfigLoadError

if typ.TYPE_CHECKING:
    from pathlib import Path

DEFAULT_SETTINGS: typ.Final[dict[str, typ.Any]] = {
    "build": {
        "pathPrefix": "/",
        "siteUrl": "https://nixos.org",
        "gaTrackingId": None,
        "trailingSlash": False,
    },
    "header": {
        "logo": (
            "https://raw.githubusercontent.com/NixOS/nixos-artwork/master/"
            "logo/nix-snowflake.svg"
        ),
        "logoLink": "https://nixos.org/learn",
        "title": "Nix user manual demo",
        "githubUrl": "https://github.com/mboes/nixos-docs-mockup",
        "helpUrl": "",
        "tweetText": "",
        "links": [{"text": "", "link": ""}],
        "search": {
            "enabled": True,
            "indexName": "nixos-docs",
            "algoliaAppId": None,
            "algoliaSearchKey": None,
            "algoliaAdminKey": None,
        },
    },
    "sidebar": {
        "forcedNavOrder": ["/introduction", "/quickstart"],
        "collapsedNav": ["/codeblock"],
        "links": [{"text": "Nix", "link": "https://nixos.org"}],
        "frontline": False,
        "ignoreIndex": True,
        "title": "The Nix user manual demo",
    },
    "siteMetadata": {
        "title": "Nix user manual demo",
        "description": "Documentation built with mdx.",
        "ogImage": None,
        "docsLocation": (
            "https://github.com/mboes/nixos-docs-mockup/tree/master/content"
        ),
        "favicon": "https://graphql-engine-cdn.hasura.io/img/hasura_icon_black.svg",
    },
    "pwa": {
        # Disabling the PWA also removes any previously installed service worker.
        "enabled": False,
        "manifest": {
            "name": "Gatsby Gitbook Starter",
            "short_name": "GitbookStarter",
            "start_url": "/",
            "background_color": "#6b37bf",
            "theme_color": "#6b37bf",
            "display": "standalone",
            "crossOrigin": "use-credentials",
            "icons": [
                {"src": "src/pwa-512.png", "sizes": "512x512", "type": "image/png"},
            ],
        },
    },
}


def default_settings() -> dict[str, typ.Any]:
    """Return a private deep copy of the compiled defaults."""
    return copy.deepcopy(DEFAULT_SETTINGS)


def merge_settings(
    base: typ.Mapping[str, typ.Any], override: typ.Mapping[str, typ.Any]
) -> dict[str, typ.Any]:
    """Deep-merge ``override`` into a copy of ``base``.

    Nested mappings merge key by key; any other value (including lists)
    replaces the base value outright.
    """
    merged: dict[str, typ.Any] = copy.deepcopy(dict(base))
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_settings(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def load_defaults_file(path: Path) -> dict[str, typ.Any]:
    """Read a YAML file and merge it over the compiled defaults.

    Parameters
    ----------
    path : Path
        YAML document using the same keys as :data:`DEFAULT_SETTINGS`. Only the
        keys present in the file are overridden.

    Returns
    -------
    dict[str, Any]
        Defaults mapping suitable for :class:`~docsite.config.ConfigStore`.

    Raises
    ------
    ConfigLoadError
        If the file is missing, cannot be parsed, or its top level is not a
        mapping.
    """
    if not path.exists():
        msg = f"Defaults file '{path}' not found."
        raise ConfigLoadError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle) or {}
    except YAMLError as exc:
        msg = f"Defaults file '{path}' is not valid YAML: {exc}"
        raise ConfigLoadError(msg) from exc
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Defaults file '{path}' could not be read: {exc}"
        raise ConfigLoadError(msg) from exc
    if not isinstance(loaded, dict):
        msg = f"Top-level YAML structure in '{path}' must be a mapping."
        raise ConfigLoadError(msg)
    return merge_settings(DEFAULT_SETTINGS, loaded)


__all__ = [
    "DEFAULT_SETTINGS",
    "default_settings",
    "load_defaults_file",
    "merge_settings",
]
