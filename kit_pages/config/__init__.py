"""Load and validate the documentation site configuration YAML.

This subpackage parses ``config/site.yaml``: site metadata (title, base URL,
social links, logo, extra head tags), build paths, and the ``sidebar``
grouping specification. The primary entry point is :func:`load_site_config`,
which checks required fields, applies defaults, and returns a
:class:`SiteConfig`. The sidebar is left as plain data; turning it into a tree
is the job of :func:`kit_pages.navigation.build`.

Examples
--------
>>> from pathlib import Path
>>> from kit_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.title  # doctest: +SKIP
'Claude Kit'
"""

from .loader import load_site_config
from .models import (
    HeadTagConfig,
    LogoConfig,
    SiteConfig,
    SiteConfigError,
    SocialLinkConfig,
)

__all__ = [
    "HeadTagConfig",
    "LogoConfig",
    "SiteConfig",
    "SiteConfigError",
    "SocialLinkConfig",
    "load_site_config",
]
