"""Render every documentation page, with its sidebar, to static HTML.

:class:`SiteBuilder` takes a validated :class:`~kit_pages.site.Site` and
writes ``<output_dir>/<slug>/index.html`` for every registered page (the
root ``index`` page goes to ``<output_dir>/index.html``), plus a shared
``pygments.css`` stylesheet for highlighted code. It refuses to write
anything when the site's validation report contains errors that block
publishing, so a broken link never reaches the output directory, or when a
page would land outside the output directory.

Typical usage:

>>> from pathlib import Path
>>> from kit_pages.site import load_site
>>> from kit_pages.site_builder import SiteBuilder
>>> site = load_site(Path("config/site.yaml"))  # doctest: +SKIP
>>> SiteBuilder(site).run()  # doctest: +SKIP
[PosixPath('dist/commands/feature/index.html'), ...]

Templates are read from ``kit_pages/templates`` unless another directory is
given. Side effects are limited to directory creation and UTF-8 file writes
below the output directory.
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ._constants import (
    PAGE_OUTPUT_TEMPLATE,
    ROOT_PAGE_OUTPUT,
    ROOT_SLUG,
    STYLESHEET_NAME,
)
from .navigation import Leaf, NavigationNode, NavigationValidationError, Section
from .renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    from .registry import Page
    from .site import Site



class OutputPathError(ValueError):
    """Raised when a page would be written outside the output directory."""


@dc.dataclass(slots=True)
class SidebarEntry:
    """Sidebar node prepared for one page's template context.

    Attributes
    ----------
    label : str
        Link text or section heading.
    href : str or None
        Target URL for links; ``None`` for sections.
    current : bool
        ``True`` for the link to the page being rendered.
    open : bool
        For sections, whether the ``<details>`` block starts expanded.
    children : list[SidebarEntry]
        Child entries of a section, in declared order.
    """

    label: str
    href: str | None = None
    current: bool = False
    open: bool = False
    children: list[SidebarEntry] = dc.field(default_factory=list)

    @property
    def is_section(self) -> bool:
        """Return ``True`` when the entry groups other entries."""
        return self.href is None


class SiteBuilder:
    """Write themed HTML for every page in a validated site."""

    def __init__(
        self,
        site: Site,
        *,
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and its Jinja environment.

        Parameters
        ----------
        site : Site
            Assembled site whose report is checked before anything is written.
        templates_dir : Path, optional
            Directory containing ``doc_page.jinja``. Defaults to the package
            ``templates`` directory.
        output_dir : Path, optional
            Override for ``site.config.output_dir``.
        """
        self.site = site
        self.output_dir = output_dir or site.config.output_dir
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("doc_page.jinja")
        self.renderer = HtmlContentRenderer(site.config.pygments_style)

    def run(self) -> list[Path]:
        """Render all pages and return the written paths in slug order.

        Raises
        ------
        NavigationValidationError
            If the site's report holds errors that block publishing under the
            configured orphan policy. Nothing is written in that case.
        OutputPathError
            If a page's output path resolves outside the output directory,
            for example through a symlink. Nothing is written in that case.
        """
        fatal = self.site.report.fatal_errors(strict=self.site.config.strict_orphans)
        if fatal:
            raise NavigationValidationError(fatal)
        targets = [(page, self._target(page)) for page in self.site.registry]

        self.output_dir.mkdir(parents=True, exist_ok=True)
        stylesheet_path = self.output_dir / STYLESHEET_NAME
        stylesheet_path.write_text(self.renderer.stylesheet, encoding="utf-8")
        written = [stylesheet_path]
        generated_at = dt.datetime.now(dt.UTC)
        for page, output_path in targets:
            written.append(self._write_page(page, output_path, generated_at))
        return written

    def render_page(self, page: Page, generated_at: dt.datetime | None = None) -> str:
        """Return the full HTML document for ``page``."""
        config = self.site.config
        context = {
            "site": config,
            "page": page,
            "content_html": self.renderer.markdown(page.body),
            "sidebar": self.sidebar_for(page.slug),
            "stylesheet_href": f"{config.base}{STYLESHEET_NAME}",
            "generated_at": generated_at or dt.datetime.now(dt.UTC),
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def sidebar_for(self, current_slug: str | None) -> list[SidebarEntry]:
        """Return the sidebar entries as seen from the page at ``current_slug``."""
        return [
            self._entry(child, current_slug)
            for child in self.site.navigation.children
        ]

    def _entry(self, node: NavigationNode, current_slug: str | None) -> SidebarEntry:
        match node:
            case Leaf(label=label, slug=slug):
                return SidebarEntry(
                    label=label,
                    href=self.site.config.href_for(slug),
                    current=slug == current_slug,
                )
            case Section(label=label, children=children, collapsed=collapsed):
                entries = [self._entry(child, current_slug) for child in children]
                holds_current = any(_holds(entry) for entry in entries)
                return SidebarEntry(
                    label=label,
                    open=holds_current or not collapsed,
                    children=entries,
                )

    def _target(self, page: Page) -> Path:
        output_path = self.output_dir / output_path_for(page.slug)
        if not output_path.resolve().is_relative_to(self.output_dir.resolve()):
            msg = f"Refusing to write page '{page.slug}' outside {self.output_dir}."
            raise OutputPathError(msg)
        return output_path

    def _write_page(
        self, page: Page, output_path: Path, generated_at: dt.datetime
    ) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render_page(page, generated_at), encoding="utf-8")
        return output_path


def output_path_for(slug: str) -> Path:
    """Return the path, relative to the output directory, for the page at ``slug``.

    >>> output_path_for("commands/feature").as_posix()
    'commands/feature/index.html'
    >>> output_path_for("index").as_posix()
    'index.html'
    """
    if slug == ROOT_SLUG:
        return Path(ROOT_PAGE_OUTPUT)
    return Path(PAGE_OUTPUT_TEMPLATE.format(slug=slug))


def _holds(entry: SidebarEntry) -> bool:
    """Return ``True`` when ``entry`` or a descendant is the current link."""
    if entry.current:
        return True
    return any(_holds(child) for child in entry.children)


__all__ = ["OutputPathError", "SidebarEntry", "SiteBuilder", "output_path_for"]
