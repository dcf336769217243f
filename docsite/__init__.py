"""Typed configuration for the documentation site build.

This package exposes the ``docsite`` CLI used to validate the site
configuration before a build and to export its browser-safe form.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from docsite import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
