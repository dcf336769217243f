"""Environment-variable overlays applied on top of the defaults."""

from __future__ import annotations

import copy
import logging
import typing as typ

from .models import ConfigLoadError

logger = logging.getLogger(__name__)

# Environment variable -> dotted path of the field it populates.
ENV_OVERLAYS: typ.Final[tuple[tuple[str, str], ...]] = (
    ("GATSBY_ALGOLIA_APP_ID", "header.search.algoliaAppId"),
    ("GATSBY_ALGOLIA_SEARCH_KEY", "header.search.algoliaSearchKey"),
    ("ALGOLIA_ADMIN_KEY", "header.search.algoliaAdminKey"),
)


def _set_path(
    settings: dict[str, typ.Any], path: str, value: str, *, env_var: str
) -> None:
    """Assign ``value`` at the dotted ``path``, creating mappings as needed."""
    *parents, leaf = path.split(".")
    node = settings
    for segment in parents:
        child = node.setdefault(segment, {})
        if not isinstance(child, dict):
            msg = f"Cannot apply {env_var}: '{segment}' in '{path}' is not a mapping."
            raise ConfigLoadError(msg)
        node = child
    node[leaf] = value


def apply_overlays(
    defaults: typ.Mapping[str, typ.Any],
    environ: typ.Mapping[str, object],
    overlays: typ.Iterable[tuple[str, str]] = ENV_OVERLAYS,
) -> dict[str, typ.Any]:
    """Return a copy of ``defaults`` with environment overlays applied.

    A variable wins only when it is set to a non-blank string; unset or blank
    variables leave the default in place.

    Raises
    ------
    ConfigLoadError
        If a variable is present but is not a string.
    """
    settings: dict[str, typ.Any] = copy.deepcopy(dict(defaults))
    for env_var, path in overlays:
        if env_var not in environ:
            continue
        raw = environ[env_var]
        if not isinstance(raw, str):
            msg = (
                f"Environment variable {env_var} must be a string, "
                f"got {type(raw).__name__}."
            )
            raise ConfigLoadError(msg)
        if not raw.strip():
            logger.debug("Ignoring blank %s", env_var)
            continue
        _set_path(settings, path, raw, env_var=env_var)
        logger.debug("Applied %s to %s", env_var, path)
    return settings


__all__ = ["ENV_OVERLAYS", "apply_overlays"]
