"""Load-once holder for the validated site configuration."""

from __future__ import annotations

import logging
import os
import threading
import typing as typ

from .builder import build_site_configuration
from .defaults import default_settings, merge_settings
from .models import ConfigNotLoadedError
from .overlay import ENV_OVERLAYS, apply_overlays

if typ.TYPE_CHECKING:
    from .models import SiteConfiguration

logger = logging.getLogger(__name__)


class ConfigStore:
    """Produce and cache a single immutable :class:`SiteConfiguration`.

    The store moves one way from unloaded to loaded. A failed :meth:`load`
    leaves it unloaded so the caller may fix the environment and retry; once
    loaded, further calls return the cached instance without re-reading the
    environment.

    Parameters
    ----------
    environ : Mapping[str, object], optional
        Environment to read overlays from. Defaults to ``os.environ``.
    defaults : Mapping[str, Any], optional
        Settings the overlays apply to, copied when the store is created.
        Defaults to the compiled
        :data:`~docsite.config.defaults.DEFAULT_SETTINGS`.

    Examples
    --------
    >>> store = ConfigStore(
    ...     environ={
    ...         "GATSBY_ALGOLIA_APP_ID": "abc123",
    ...         "GATSBY_ALGOLIA_SEARCH_KEY": "xyz789",
    ...     }
    ... )
    >>> store.load().header.search.algolia_app_id
    'abc123'
    >>> store.get() is store.load()
    True
    """

    def __init__(
        self,
        *,
        environ: typ.Mapping[str, object] | None = None,
        defaults: typ.Mapping[str, typ.Any] | None = None,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        self._defaults = (
            default_settings() if defaults is None else merge_settings({}, defaults)
        )
        self._config: SiteConfiguration | None = None
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        """Return True once :meth:`load` has succeeded."""
        return self._config is not None

    def load(self) -> SiteConfiguration:
        """Apply overlays, validate, and cache the configuration.

        Returns
        -------
        SiteConfiguration
            The frozen configuration; the same object on every call.

        Raises
        ------
        ConfigLoadError
            If an overlay variable is present but is not a string.
        ConfigValidationError
            If the merged settings violate a field constraint.
        """
        with self._lock:
            if self._config is not None:
                return self._config
            settings = apply_overlays(self._defaults, self._environ, ENV_OVERLAYS)
            config = build_site_configuration(settings)
            self._config = config
        logger.debug("Loaded site configuration for %s", config.build.site_url)
        return config

    def get(self) -> SiteConfiguration:
        """Return the loaded configuration.

        Raises
        ------
        ConfigNotLoadedError
            If :meth:`load` has not completed successfully.
        """
        config = self._config
        if config is None:
            msg = "Site configuration accessed before ConfigStore.load() succeeded."
            raise ConfigNotLoadedError(msg)
        return config


__all__ = ["ConfigStore"]
