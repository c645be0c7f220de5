"""Typed dataclasses describing the documentation site configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from .._constants import ROOT_SLUG


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SocialLinkConfig:
    """Icon link shown in the site header."""

    icon: str
    label: str
    href: str


@dc.dataclass(slots=True)
class LogoConfig:
    """Light and dark logo variants for the header."""

    light: str | None = None
    dark: str | None = None
    replaces_title: bool = False


@dc.dataclass(slots=True)
class HeadTagConfig:
    """Extra element injected into every page's ``<head>``."""

    tag: str
    attrs: dict[str, str] = dc.field(default_factory=dict)


@dc.dataclass(slots=True)
class SiteConfig:
    """Site metadata, build paths, and the sidebar grouping specification."""

    title: str
    sidebar: list[typ.Any]
    description: str | None = None
    url: str | None = None
    base: str = "/"
    social: list[SocialLinkConfig] = dc.field(default_factory=list)
    logo: LogoConfig = dc.field(default_factory=LogoConfig)
    head: list[HeadTagConfig] = dc.field(default_factory=list)
    custom_css: list[str] = dc.field(default_factory=list)
    content_dir: Path = Path("src/content/docs")
    output_dir: Path = Path("dist")
    pygments_style: str = "monokai"
    strict_orphans: bool = False

    def href_for(self, slug: str) -> str:
        """Return the site-relative URL for the page at ``slug``.

        The root ``index`` page is served at ``base`` itself.
        """
        if slug == ROOT_SLUG:
            return self.base
        return f"{self.base}{slug}/"


__all__ = [
    "HeadTagConfig",
    "LogoConfig",
    "SiteConfig",
    "SiteConfigError",
    "SocialLinkConfig",
]
