"""End-to-end tests for rendering the documentation site to HTML.

These tests assemble a small site from in-memory pages, run
``kit_pages.site_builder.SiteBuilder``, and inspect the written HTML with
BeautifulSoup. They verify that:

* every page is written to ``<output_dir>/<slug>/index.html``, and the root
  ``index`` page to ``<output_dir>/index.html``;
* the sidebar keeps the declared order and marks the current link;
* collapsed sections start closed unless they contain the current page;
* fenced code blocks are highlighted with their language recorded;
* nothing is written when the site has dangling links, orphan pages under
  the strict policy, or a page whose path leaves the output directory.

Run ``pytest tests/test_site_builder.py -v``.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import pytest
from bs4 import BeautifulSoup

from kit_pages.config import SiteConfig
from kit_pages.navigation import NavigationValidationError
from kit_pages.registry import Page
from kit_pages.site import Site, assemble_site
from kit_pages.site_builder import OutputPathError, SiteBuilder, output_path_for

if typ.TYPE_CHECKING:
    from pathlib import Path

SIDEBAR: list[dict[str, typ.Any]] = [
    {
        "label": "Getting Started",
        "items": [{"label": "Introduction", "slug": "getting-started/introduction"}],
    },
    {
        "label": "Commands",
        "collapsed": False,
        "items": [
            {"label": "Overview", "slug": "commands/overview"},
            {
                "label": "Development",
                "collapsed": True,
                "items": [
                    {"label": "/tdd", "slug": "commands/tdd"},
                    {"label": "/feature", "slug": "commands/feature"},
                ],
            },
        ],
    },
]

PAGES = [
    Page(
        slug="getting-started/introduction",
        title="Introduction",
        description="What the kit is.",
        body="Welcome to the kit.\n",
    ),
    Page(slug="commands/overview", title="Commands", body="All commands.\n"),
    Page(
        slug="commands/feature",
        title="/feature",
        body="Run it:\n\n```bash title=\"shell\"\n/feature add login\n```\n",
    ),
    Page(slug="commands/tdd", title="/tdd", body="Red, green, refactor.\n"),
]


@pytest.fixture
def site_config(tmp_path: Path) -> SiteConfig:
    """Return a site configuration writing into a temporary directory."""
    return SiteConfig(
        title="Fixture Kit",
        sidebar=SIDEBAR,
        description="Fixture description",
        base="/kit/",
        output_dir=tmp_path / "dist",
    )


@pytest.fixture
def site(site_config: SiteConfig) -> Site:
    return assemble_site(site_config, PAGES)


def _soup(path: Path) -> BeautifulSoup:
    return BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")


def test_every_page_is_written_under_its_slug(site: Site, tmp_path: Path) -> None:
    written = SiteBuilder(site).run()
    out = tmp_path / "dist"
    assert out / "pygments.css" in written
    for page in PAGES:
        path = out / page.slug / "index.html"
        assert path in written, f"Expected {path} in the written files"
        assert path.exists()
    intro = _soup(out / "getting-started/introduction/index.html")
    assert intro.title is not None
    assert intro.title.string == "Introduction | Fixture Kit"
    assert intro.select_one("p.lede").get_text() == "What the kit is."


def test_sidebar_keeps_declared_order(site: Site, tmp_path: Path) -> None:
    SiteBuilder(site).run()
    soup = _soup(tmp_path / "dist/commands/overview/index.html")
    labels = [link.get_text() for link in soup.select("nav.sidebar a.sidebar-link")]
    assert labels == ["Introduction", "Overview", "/tdd", "/feature"], (
        f"Expected sidebar links in declared order, got {labels!r}"
    )
    hrefs = [link["href"] for link in soup.select("nav.sidebar a.sidebar-link")]
    assert hrefs[0] == "/kit/getting-started/introduction/"


def test_current_link_and_collapsed_sections(site: Site, tmp_path: Path) -> None:
    SiteBuilder(site).run()
    overview = _soup(tmp_path / "dist/commands/overview/index.html")
    current = overview.select("a[aria-current='page']")
    assert [link.get_text() for link in current] == ["Overview"]
    sections = {
        details.summary.get_text(): details.has_attr("open")
        for details in overview.select("details.sidebar-section")
    }
    assert sections == {
        "Getting Started": True,
        "Commands": True,
        "Development": False,
    }, f"Expected Development to start collapsed, got {sections!r}"

    feature = _soup(tmp_path / "dist/commands/feature/index.html")
    development = [
        details
        for details in feature.select("details.sidebar-section")
        if details.summary.get_text() == "Development"
    ]
    assert development[0].has_attr("open"), (
        "Expected the collapsed section holding the current page to be open"
    )


def test_code_blocks_are_highlighted(site: Site, tmp_path: Path) -> None:
    SiteBuilder(site).run()
    soup = _soup(tmp_path / "dist/commands/feature/index.html")
    block = soup.select_one("article.content div.codehilite")
    assert block is not None, "Expected a highlighted code block"
    assert block.get("data-language") == "bash"
    assert "/feature add login" in block.get_text()


def test_dangling_links_block_publishing(site_config: SiteConfig, tmp_path: Path) -> None:
    site = assemble_site(site_config, PAGES[:-1])
    assert [error.slug for error in site.report.dangling] == ["commands/tdd"]
    with pytest.raises(NavigationValidationError):
        SiteBuilder(site).run()
    assert not (tmp_path / "dist").exists(), "Expected nothing to be written"


def test_orphans_block_publishing_only_when_strict(
    site_config: SiteConfig, tmp_path: Path
) -> None:
    extra = Page(slug="commands/secret", title="Hidden")
    lenient = assemble_site(site_config, [*PAGES, extra])
    written = SiteBuilder(lenient).run()
    assert tmp_path / "dist/commands/secret/index.html" in written

    strict_config = dc.replace(
        site_config, strict_orphans=True, output_dir=tmp_path / "strict"
    )
    strict = assemble_site(strict_config, [*PAGES, extra])
    with pytest.raises(NavigationValidationError, match="commands/secret"):
        SiteBuilder(strict).run()
    assert not (tmp_path / "strict").exists()


def test_root_index_page_is_the_site_home(site_config: SiteConfig, tmp_path: Path) -> None:
    """The ``index`` page is written at the top and the title link reaches it."""
    home_sidebar = [{"label": "Home", "slug": "index"}, *SIDEBAR]
    config = dc.replace(site_config, sidebar=home_sidebar)
    home = Page(slug="index", title="Claude Kit", body="Start here.\n")
    written = SiteBuilder(assemble_site(config, [home, *PAGES])).run()
    out = tmp_path / "dist"
    assert out / "index.html" in written
    assert not (out / "index").exists(), "Expected no nested index/index.html"

    feature = _soup(out / "commands/feature/index.html")
    title_href = feature.select_one("a.site-title")["href"]
    assert title_href == "/kit/"
    target = out / title_href.removeprefix(config.base) / "index.html"
    assert target.exists(), f"Expected the title link to resolve to {target}"
    assert _soup(target).select_one("main h1").get_text() == "Claude Kit"

    home_link = feature.select_one("nav.sidebar a.sidebar-link")
    assert home_link.get_text() == "Home"
    assert home_link["href"] == "/kit/"


def test_pages_are_never_written_outside_the_output_dir(
    site: Site, tmp_path: Path
) -> None:
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()
    out = tmp_path / "dist"
    out.mkdir()
    (out / "commands").symlink_to(elsewhere, target_is_directory=True)
    with pytest.raises(OutputPathError, match="commands/"):
        SiteBuilder(site).run()
    assert list(elsewhere.iterdir()) == [], "Expected nothing written through the link"
    assert not (out / "pygments.css").exists(), "Expected nothing to be written"


@pytest.mark.parametrize(
    ("slug", "expected"),
    [
        ("index", "index.html"),
        ("guides", "guides/index.html"),
        ("guides/index", "guides/index/index.html"),
        ("commands/feature", "commands/feature/index.html"),
    ],
)
def test_output_path_for(slug: str, expected: str) -> None:
    assert output_path_for(slug).as_posix() == expected


def test_site_fields_cannot_be_reassigned(site_config: SiteConfig) -> None:
    config = dc.replace(site_config, sidebar=list(SIDEBAR))
    site = assemble_site(config, PAGES)
    with pytest.raises(dc.FrozenInstanceError):
        site.registry = site.registry  # type: ignore[misc]
    assert site.registry.frozen, "Expected the site's registry to be frozen"

    config.sidebar.append({"label": "Late", "slug": "late"})
    assert len(site.navigation.children) == len(SIDEBAR)
    assert site.report.ok, "Expected the report to ignore later sidebar edits"
