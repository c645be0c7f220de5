"""Cyclopts CLI entrypoint for checking and building the documentation site.

The ``kit-pages`` console script defined here loads ``config/site.yaml`` and
the Markdown content it points to, builds the sidebar navigation tree, and
cross-checks the two. ``kit-pages check`` reports every dangling link and
orphan page in one pass; ``kit-pages build`` refuses to publish when a
blocking error is present and otherwise renders the site; ``kit-pages tree``
prints the sidebar outline.

Examples
--------
Check the default configuration:

>>> from kit_pages.cli import main
>>> main()  # doctest: +SKIP

Build into a custom directory, treating orphan pages as errors:

>>> from kit_pages.cli import app
>>> app(["build", "--output-dir", "public", "--strict"])  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from ruamel.yaml.error import YAMLError

from ._constants import DEFAULT_CONFIG_PATH
from .config import SiteConfigError
from .content import ContentLoadError
from .navigation import (
    MalformedSpecificationError,
    ValidationReport,
    render_outline,
)
from .registry import DuplicateSlugError, InvalidSlugError
from .site import Site, load_site
from .site_builder import OutputPathError, SiteBuilder

DEFAULT_CONFIG = Path(DEFAULT_CONFIG_PATH)

app = App(
    name="kit-pages",
    help="Check and build the documentation site.",
    config=cyclopts.config.Env("KIT_PAGES_", command=False),  # type: ignore[unknown-argument]
)

ConfigOption = typ.Annotated[
    Path, Parameter(help="Path to site config", env_var="KIT_PAGES_CONFIG")
]
StrictOption = typ.Annotated[
    bool,
    Parameter(help="Treat orphan pages as errors", env_var="KIT_PAGES_STRICT"),
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load(config: Path) -> Site:
    """Load the site, turning structural build errors into exit status 1."""
    try:
        return load_site(config)
    except (
        FileNotFoundError,
        TypeError,
        YAMLError,
        SiteConfigError,
        ContentLoadError,
        DuplicateSlugError,
        InvalidSlugError,
        MalformedSpecificationError,
    ) as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)


def _report(report: ValidationReport, *, strict: bool) -> bool:
    """Print every finding to stderr and return ``True`` when publishing is blocked."""
    for error in report.dangling:
        print(f"error: {error.message}", file=sys.stderr)
    level = "error" if strict else "warning"
    for orphan in report.orphans:
        print(f"{level}: {orphan.message}", file=sys.stderr)
    return report.has_fatal(strict=strict)


@app.command(help="Validate the sidebar against the content pages.")
def check(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    strict: StrictOption = False,
) -> None:
    """Report dangling links and orphan pages for the configured site.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``KIT_PAGES_CONFIG``).
    strict : bool, optional
        Treat orphan pages as errors. The ``strict_orphans`` setting in the
        configuration file has the same effect.

    Returns
    -------
    None
        Prints every finding and exits with status 1 when any of them blocks
        publishing.
    """
    site = _load(config)
    strict = strict or site.config.strict_orphans
    if _report(site.report, strict=strict):
        sys.exit(1)
    print(
        f"ok: {len(site.registry)} page(s), "
        f"{len(site.report.orphans)} orphan warning(s)"
    )


@app.command(help="Print the sidebar navigation outline.")
def tree(*, config: ConfigOption = DEFAULT_CONFIG) -> None:
    """Print the configured sidebar as an indented outline.

    Collapsed sections are marked with ``+`` and expanded ones with ``-``.
    """
    site = _load(config)
    print(render_outline(site.navigation))


@app.command(help="Validate the site and render it to static HTML.")
def build(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="KIT_PAGES_OUTPUT_DIR"),
    ] = None,
    strict: StrictOption = False,
) -> None:
    """Validate, then render every page when nothing blocks publishing.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file.
    output_dir : Path or None, optional
        Override for the configured output directory.
    strict : bool, optional
        Treat orphan pages as errors.

    Returns
    -------
    None
        Writes HTML files and logs the generated paths. Exits with status 1,
        without writing anything, when validation fails.
    """
    site = _load(config)
    strict = strict or site.config.strict_orphans
    if _report(site.report, strict=strict):
        print(
            "error: refusing to publish a site with navigation errors",
            file=sys.stderr,
        )
        sys.exit(1)
    try:
        written = SiteBuilder(site, output_dir=output_dir).run()
    except OutputPathError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)
    for path in written:
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``kit-pages`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
