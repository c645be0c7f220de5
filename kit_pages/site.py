"""Tie configuration, content, navigation, and validation into one site model."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .config import SiteConfig, load_site_config
from .content import load_pages
from .navigation import Section, ValidationReport, build, validate
from .registry import ContentRegistry

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .registry import Page


@dc.dataclass(frozen=True, slots=True)
class Site:
    """Registry, navigation tree, and validation findings for one build.

    Fields cannot be reassigned and the registry is frozen. ``config`` stays a
    mutable :class:`SiteConfig` that is only read after assembly; editing its
    ``sidebar`` does not change ``navigation`` or ``report``, which were built
    from it by :func:`assemble_site`.
    """

    config: SiteConfig
    registry: ContentRegistry
    navigation: Section
    report: ValidationReport

    def has_fatal(self) -> bool:
        """Return ``True`` when the configured policy forbids publishing."""
        return self.report.has_fatal(strict=self.config.strict_orphans)


def assemble_site(config: SiteConfig, pages: cabc.Iterable[Page]) -> Site:
    """Register ``pages``, build the sidebar tree, and validate the pair.

    Raises
    ------
    DuplicateSlugError
        If two pages share a slug.
    InvalidSlugError
        If a page slug is not a relative URL path.
    MalformedSpecificationError
        If the configured sidebar has the wrong shape.

    Validation findings are returned on ``Site.report`` rather than raised.
    """
    registry = ContentRegistry.from_pages(pages).freeze()
    navigation = build(config.sidebar)
    report = validate(navigation, registry)
    return Site(
        config=config, registry=registry, navigation=navigation, report=report
    )


def load_site(config_path: Path) -> Site:
    """Load the config at ``config_path`` and the content it points to."""
    config = load_site_config(config_path)
    return assemble_site(config, load_pages(config.content_dir))


__all__ = ["Site", "assemble_site", "load_site"]
