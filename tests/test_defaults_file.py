"""Tests for reading YAML defaults files over the compiled defaults."""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

from docsite.config import (
    DEFAULT_SETTINGS,
    ConfigLoadError,
    ConfigStore,
    load_defaults_file,
    merge_settings,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "site.yaml"
    path.write_text(dedent(text).lstrip(), encoding="utf-8")
    return path


def test_file_overrides_only_given_keys(tmp_path: Path) -> None:
    """Keys absent from the file keep their compiled values."""
    path = _write(
        tmp_path,
        """
        siteMetadata:
          title: Nixpkgs manual
        header:
          search:
            enabled: false
        sidebar:
          forcedNavOrder:
            - /install
        """,
    )
    settings = load_defaults_file(path)
    assert settings["siteMetadata"]["title"] == "Nixpkgs manual"
    assert settings["siteMetadata"]["description"] == "Documentation built with mdx."
    assert settings["header"]["search"]["indexName"] == "nixos-docs"
    assert settings["sidebar"]["forcedNavOrder"] == ["/install"]

    config = ConfigStore(environ={}, defaults=settings).load()
    assert config.site_metadata.title == "Nixpkgs manual"
    assert config.sidebar.forced_nav_order == ("/install",)


def test_missing_file_raises_load_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigLoadError, match="not found"):
        load_defaults_file(tmp_path / "absent.yaml")


def test_non_mapping_file_raises_load_error(tmp_path: Path) -> None:
    path = _write(tmp_path, "- just\n- a list\n")
    with pytest.raises(ConfigLoadError, match="mapping"):
        load_defaults_file(path)


def test_invalid_yaml_raises_load_error(tmp_path: Path) -> None:
    path = _write(tmp_path, "header: [unclosed\n")
    with pytest.raises(ConfigLoadError, match="not valid YAML"):
        load_defaults_file(path)


def test_merge_does_not_mutate_inputs() -> None:
    """Merging returns fresh structures and leaves both inputs untouched."""
    override = {"header": {"links": [{"text": "Wiki", "link": "https://wiki.nixos.org"}]}}
    merged = merge_settings(DEFAULT_SETTINGS, override)
    merged["header"]["links"].append({"text": "x", "link": "y"})
    assert DEFAULT_SETTINGS["header"]["links"] == [{"text": "", "link": ""}]
    assert len(override["header"]["links"]) == 1


def test_directory_path_raises_load_error(tmp_path: Path) -> None:
    """A path that exists but is not a readable file is a load error."""
    with pytest.raises(ConfigLoadError, match="could not be read"):
        load_defaults_file(tmp_path)


def test_invalid_utf8_raises_load_error(tmp_path: Path) -> None:
    """Bytes that are not UTF-8 are reported as a load error."""
    path = tmp_path / "site.yaml"
    path.write_bytes(b"siteMetadata:\n  title: \xff\xfe\n")
    with pytest.raises(ConfigLoadError):
        load_defaults_file(path)
