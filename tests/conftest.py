"""Shared fixtures for docsite configuration tests."""

from __future__ import annotations

import typing as typ

import pytest

from docsite.config import default_settings, merge_settings

SEARCH_ENV: dict[str, str] = {
    "GATSBY_ALGOLIA_APP_ID": "abc123",
    "GATSBY_ALGOLIA_SEARCH_KEY": "xyz789",
    "ALGOLIA_ADMIN_KEY": "admin-secret",
}


@pytest.fixture
def search_env() -> dict[str, str]:
    """Return an environment carrying every Algolia overlay."""
    return dict(SEARCH_ENV)


@pytest.fixture
def settings_with() -> typ.Callable[[dict[str, typ.Any]], dict[str, typ.Any]]:
    """Return a helper that deep-merges overrides into the compiled defaults."""

    def _build(overrides: dict[str, typ.Any]) -> dict[str, typ.Any]:
        return merge_settings(default_settings(), overrides)

    return _build
