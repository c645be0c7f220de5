"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _build_head_tags,
    _build_logo,
    _build_social_links,
    _normalize_base,
    _optional_str,
    _require_str,
    _resolve_path,
    _string_list,
)
from .models import SiteConfig, SiteConfigError

DEFAULT_CONTENT_DIR = "src/content/docs"
DEFAULT_OUTPUT_DIR = "dist"


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the site and its sidebar.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``). Relative ``content_dir`` and ``output_dir``
        values resolve against the directory containing this file.

    Returns
    -------
    SiteConfig
        Parsed site metadata, build paths, and the raw ``sidebar`` grouping
        specification ready for :func:`kit_pages.navigation.build`.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If the ``site`` block or its ``title`` is missing, the sidebar is
        missing or empty, or a field has the wrong type.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from kit_pages.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.base  # doctest: +SKIP
    '/claudekit/'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    root = path.parent

    site_raw = raw.get("site")
    if not isinstance(site_raw, dict):
        msg = "Configuration is missing the 'site' mapping."
        raise SiteConfigError(msg)

    sidebar = raw.get("sidebar")
    if not sidebar:
        msg = "No sidebar defined in site configuration."
        raise SiteConfigError(msg)
    if not isinstance(sidebar, list):
        msg = "'sidebar' must be a list of entries."
        raise SiteConfigError(msg)

    strict_orphans = raw.get("strict_orphans", False)
    if not isinstance(strict_orphans, bool):
        msg = "'strict_orphans' must be true or false."
        raise SiteConfigError(msg)

    return SiteConfig(
        title=_require_str(site_raw, "title", "'site'"),
        sidebar=sidebar,
        description=_optional_str(site_raw.get("description")),
        url=_optional_str(site_raw.get("url")),
        base=_normalize_base(site_raw.get("base")),
        social=_build_social_links(site_raw.get("social")),
        logo=_build_logo(site_raw.get("logo")),
        head=_build_head_tags(site_raw.get("head")),
        custom_css=_string_list(site_raw.get("custom_css"), "site.custom_css"),
        content_dir=_resolve_path(raw.get("content_dir"), DEFAULT_CONTENT_DIR, root),
        output_dir=_resolve_path(raw.get("output_dir"), DEFAULT_OUTPUT_DIR, root),
        pygments_style=_optional_str(raw.get("pygments_style")) or "monokai",
        strict_orphans=strict_orphans,
    )


__all__ = ["DEFAULT_CONTENT_DIR", "DEFAULT_OUTPUT_DIR", "load_site_config"]
