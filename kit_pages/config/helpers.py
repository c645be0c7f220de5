"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .models import HeadTagConfig, LogoConfig, SiteConfigError, SocialLinkConfig


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_str(payload: typ.Mapping[str, typ.Any], key: str, where: str) -> str:
    """Return ``payload[key]`` as a non-empty string or raise SiteConfigError."""
    text = _optional_str(payload.get(key))
    if text is None:
        msg = f"{where} is missing '{key}'."
        raise SiteConfigError(msg)
    return text


def _normalize_base(value: object | None) -> str:
    """Return ``value`` as a URL prefix with exactly one leading and trailing slash."""
    text = (_optional_str(value) or "").strip("/")
    if not text:
        return "/"
    return f"/{text}/"


def _resolve_path(value: object | None, default: str, root: Path) -> Path:
    """Resolve a configured path against ``root`` unless it is absolute."""
    path = Path(_optional_str(value) or default)
    if path.is_absolute():
        return path
    return root / path


def _mapping_list(value: object, where: str) -> list[typ.Mapping[str, typ.Any]]:
    """Return ``value`` as a list of mappings, treating None as empty."""
    if value is None:
        return []
    if not isinstance(value, list):
        msg = f"'{where}' must be a list."
        raise SiteConfigError(msg)
    entries: list[typ.Mapping[str, typ.Any]] = []
    for index, entry in enumerate(value):
        if not isinstance(entry, dict):
            msg = f"'{where}[{index}]' must be a mapping."
            raise SiteConfigError(msg)
        entries.append(entry)
    return entries


def _build_social_links(value: object) -> list[SocialLinkConfig]:
    """Build social link configs from the ``site.social`` list."""
    links: list[SocialLinkConfig] = []
    for index, entry in enumerate(_mapping_list(value, "site.social")):
        where = f"site.social[{index}]"
        links.append(
            SocialLinkConfig(
                icon=_require_str(entry, "icon", where),
                label=_require_str(entry, "label", where),
                href=_require_str(entry, "href", where),
            )
        )
    return links


def _build_logo(value: object) -> LogoConfig:
    """Build the logo config from the ``site.logo`` mapping."""
    match value:
        case None:
            return LogoConfig()
        case str() as path:
            return LogoConfig(light=path, dark=path)
        case dict():
            return LogoConfig(
                light=_optional_str(value.get("light") or value.get("src")),
                dark=_optional_str(value.get("dark") or value.get("src")),
                replaces_title=bool(value.get("replaces_title", False)),
            )
        case _:
            msg = "'site.logo' must be a path or a mapping."
            raise SiteConfigError(msg)


def _build_head_tags(value: object) -> list[HeadTagConfig]:
    """Build extra ``<head>`` tags from the ``site.head`` list."""
    tags: list[HeadTagConfig] = []
    for index, entry in enumerate(_mapping_list(value, "site.head")):
        attrs = entry.get("attrs") or {}
        if not isinstance(attrs, dict):
            msg = f"'site.head[{index}].attrs' must be a mapping."
            raise SiteConfigError(msg)
        tags.append(
            HeadTagConfig(
                tag=_require_str(entry, "tag", f"site.head[{index}]"),
                attrs={str(key): str(val) for key, val in attrs.items()},
            )
        )
    return tags


def _string_list(value: object, where: str) -> list[str]:
    """Return ``value`` as a list of non-empty strings."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        msg = f"'{where}' must be a list of strings."
        raise SiteConfigError(msg)
    return [text for item in value if (text := _optional_str(item))]


__all__ = [
    "_build_head_tags",
    "_build_logo",
    "_build_social_links",
    "_mapping_list",
    "_normalize_base",
    "_optional_str",
    "_require_str",
    "_resolve_path",
    "_string_list",
]
