r"""Discover Markdown content files and turn them into :class:`Page` records.

Each file under the content directory becomes one page. The slug comes from
the file's path relative to that directory (``commands/feature.md`` becomes
``commands/feature``; ``guides/index.md`` becomes ``guides``). A YAML front
matter block fenced by ``---`` lines supplies the page title and optional
description:

.. code-block:: markdown

    ---
    title: /feature
    description: Build a feature end to end.
    ---
    Body text.

Front matter may also set ``slug`` to override the derived slug, and
``draft: true`` to leave the page out of the build.

Example
-------
>>> from kit_pages.content import parse_front_matter
>>> meta, body = parse_front_matter("---\ntitle: Intro\n---\nHello\n")
>>> meta["title"], body
('Intro', 'Hello\n')
"""

from __future__ import annotations

import re
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .registry import Page, slug_problem

CONTENT_SUFFIXES = (".md", ".mdx")
FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE
)


class ContentLoadError(ValueError):
    """Raised when a content file cannot be turned into a page."""


def parse_front_matter(text: str) -> tuple[dict[str, typ.Any], str]:
    """Split ``text`` into its front matter mapping and Markdown body.

    Returns an empty mapping and the unchanged text when no front matter
    block is present.

    Raises
    ------
    ContentLoadError
        If the front matter is not valid YAML or is not a mapping.
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        return {}, text
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(match.group(1))
    except YAMLError as exc:
        msg = f"Invalid front matter: {exc}"
        raise ContentLoadError(msg) from exc
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        msg = "Front matter must be a mapping."
        raise ContentLoadError(msg)
    return dict(loaded), text[match.end() :]


def slug_for_path(relative: Path) -> str:
    """Return the slug for a content file at ``relative`` to the content root."""
    parts = [part.lower() for part in relative.with_suffix("").parts]
    if len(parts) > 1 and parts[-1] == "index":
        parts = parts[:-1]
    return "/".join(parts)


def load_page(path: Path, content_dir: Path) -> Page | None:
    """Read one content file, returning ``None`` for drafts.

    Raises
    ------
    ContentLoadError
        If the front matter is invalid, lacks a ``title``, or yields a slug
        that is not a relative URL path.
    """
    text = path.read_text(encoding="utf-8")
    try:
        meta, body = parse_front_matter(text)
    except ContentLoadError as exc:
        msg = f"{path}: {exc}"
        raise ContentLoadError(msg) from exc
    if meta.get("draft") is True:
        return None
    title = meta.get("title")
    if not isinstance(title, str) or not title.strip():
        msg = f"{path}: front matter is missing 'title'."
        raise ContentLoadError(msg)
    override = meta.get("slug")
    match override:
        case None:
            slug = slug_for_path(path.relative_to(content_dir))
        case str() if override.strip("/"):
            slug = override.strip("/")
        case _:
            msg = f"{path}: 'slug' must be a non-empty string."
            raise ContentLoadError(msg)
    problem = slug_problem(slug)
    if problem is not None:
        msg = f"{path}: slug {slug!r} {problem}."
        raise ContentLoadError(msg)
    description = meta.get("description")
    return Page(
        slug=slug,
        title=title.strip(),
        description=str(description).strip() if description else None,
        body=body,
        source=path,
    )


def load_pages(content_dir: Path) -> list[Page]:
    """Return a page for every Markdown file under ``content_dir``.

    Files are visited in sorted path order so duplicate-slug errors name the
    same file on every run. Drafts are skipped.

    Raises
    ------
    FileNotFoundError
        If ``content_dir`` does not exist.
    ContentLoadError
        If any content file is invalid.
    """
    if not content_dir.is_dir():
        msg = f"Content directory '{content_dir}' not found."
        raise FileNotFoundError(msg)
    pages: list[Page] = []
    for path in sorted(content_dir.rglob("*")):
        if path.suffix.lower() not in CONTENT_SUFFIXES or not path.is_file():
            continue
        page = load_page(path, content_dir)
        if page is not None:
            pages.append(page)
    return pages


__all__ = [
    "CONTENT_SUFFIXES",
    "ContentLoadError",
    "load_page",
    "load_pages",
    "parse_front_matter",
    "slug_for_path",
]
