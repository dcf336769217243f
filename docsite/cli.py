"""Cyclopts CLI entrypoint for checking and exporting the site configuration.

The ``docsite`` console script loads the configuration exactly once, the same
way a site build does at startup, so CI can fail fast on missing Algolia
credentials or an incomplete PWA manifest before any page is rendered.

Examples
--------
Validate the compiled defaults against the current environment:

>>> from docsite.cli import main
>>> main()  # doctest: +SKIP

Print the browser-safe configuration using a YAML defaults file:

>>> from docsite.cli import app
>>> app.run(["dump", "--defaults", "site.yaml"])  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .client import dump_client_json
from .config import ConfigError, ConfigStore, load_defaults_file

if typ.TYPE_CHECKING:
    from .config import SiteConfiguration

app = App(name="docsite", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _load_or_exit(defaults: Path | None) -> SiteConfiguration:
    """Load the configuration, aborting the process on any ConfigError."""
    try:
        settings = load_defaults_file(defaults) if defaults else None
        return ConfigStore(defaults=settings).load()
    except ConfigError as exc:
        print(f"invalid configuration: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


@app.command(help="Load and validate the site configuration.")
def check(
    *,
    defaults: typ.Annotated[
        Path | None,
        Parameter(help="YAML file overriding compiled defaults", env_var="INPUT_DEFAULTS"),
    ] = None,
) -> None:
    """Validate the configuration and report the site title.

    Parameters
    ----------
    defaults : Path or None, optional
        YAML file merged over the compiled defaults before overlays apply.

    Raises
    ------
    SystemExit
        With status 1 when the configuration cannot be loaded or validated.
    """
    config = _load_or_exit(defaults)
    print(f"configuration ok: {config.site_metadata.title}")


@app.command(help="Print the browser-safe configuration as JSON.")
def dump(
    *,
    defaults: typ.Annotated[
        Path | None,
        Parameter(help="YAML file overriding compiled defaults", env_var="INPUT_DEFAULTS"),
    ] = None,
) -> None:
    """Print the client payload; server-only secrets are never included."""
    config = _load_or_exit(defaults)
    print(dump_client_json(config))


def main() -> None:
    """Invoke the Cyclopts application behind the ``docsite`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
