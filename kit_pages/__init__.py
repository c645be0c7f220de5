"""Navigation, validation, and rendering for the Claude Kit documentation site.

This package exposes the CLI entry points used by ``uv run kit-pages`` to
check the sidebar against the content pages and to render the static site.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from kit_pages import main
>>> main()  # doctest: +SKIP
>>> from kit_pages import app
>>> app(["check", "--config", "config/site.yaml"])  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
