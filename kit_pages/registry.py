"""Slug-addressed registry of documentation pages.

Every topic page on the site is identified by a slug such as
``commands/feature``. The :class:`ContentRegistry` owns the :class:`Page`
records for a build, rejects duplicate slugs at registration time, and is
frozen once the content loader has finished so later stages can share it
without copying.

Examples
--------
>>> from kit_pages.registry import ContentRegistry, Page
>>> registry = ContentRegistry()
>>> registry.register(Page(slug="commands/feature", title="/feature"))
>>> registry.lookup("commands/feature").title
'/feature'
>>> registry.lookup("commands/missing") is None
True
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


class DuplicateSlugError(ValueError):
    """Raised when a page is registered under a slug that is already taken."""

    def __init__(self, slug: str, existing: Page | None = None) -> None:
        self.slug = slug
        self.existing = existing
        msg = f"Duplicate page slug '{slug}'"
        if existing is not None and existing.source is not None:
            msg = f"{msg} (already registered from {existing.source})"
        super().__init__(msg)


class InvalidSlugError(ValueError):
    """Raised when a page slug is not a relative URL path."""

    def __init__(self, slug: str, problem: str) -> None:
        self.slug = slug
        self.problem = problem
        super().__init__(f"Invalid page slug {slug!r}: {problem}")


class RegistryFrozenError(RuntimeError):
    """Raised when registering into a registry that has been frozen."""


def slug_problem(slug: str) -> str | None:
    """Return why ``slug`` is not a relative URL path, or ``None`` if it is.

    A slug is one or more ``/``-separated segments. Segments may not be
    empty, ``.`` or ``..``, and the slug may not contain whitespace or
    backslashes.

    Examples
    --------
    >>> slug_problem("commands/feature") is None
    True
    >>> slug_problem("../escaped")
    "contains a '.' or '..' segment"
    """
    if not slug:
        return "is empty"
    if any(char.isspace() for char in slug):
        return "contains whitespace"
    if "\\" in slug:
        return "contains a backslash"
    segments = slug.split("/")
    if "" in segments:
        return "contains an empty segment"
    if any(segment in {".", ".."} for segment in segments):
        return "contains a '.' or '..' segment"
    return None


@dc.dataclass(frozen=True, slots=True)
class Page:
    """One documentation topic.

    Attributes
    ----------
    slug : str
        Unique, URL-path-shaped identifier (``getting-started/installation``).
    title : str
        Display title used for headings and default link text.
    description : str or None
        Optional one-line summary shown under the title.
    body : str
        Markdown body with any front matter removed.
    source : Path or None
        File the page was read from, when it came from disk.
    """

    slug: str
    title: str
    description: str | None = None
    body: str = ""
    source: Path | None = dc.field(default=None, compare=False)

    @property
    def category(self) -> str:
        """Return the slug's parent path, or an empty string at the top level."""
        head, _, _tail = self.slug.rpartition("/")
        return head


class ContentRegistry:
    """Mapping from slug to :class:`Page`, read-only once frozen."""

    def __init__(self) -> None:
        self._pages: dict[str, Page] = {}
        self._frozen = False

    @classmethod
    def from_pages(cls, pages: cabc.Iterable[Page]) -> ContentRegistry:
        """Build a registry from ``pages``, failing on the first duplicate slug."""
        registry = cls()
        for page in pages:
            registry.register(page)
        return registry

    @property
    def frozen(self) -> bool:
        """Return ``True`` once :meth:`freeze` has been called."""
        return self._frozen

    def register(self, page: Page) -> None:
        """Add ``page`` to the registry.

        Raises
        ------
        DuplicateSlugError
            If a page with the same slug is already registered. The registry
            is left untouched.
        InvalidSlugError
            If the page's slug is not a relative URL path.
        RegistryFrozenError
            If the registry has already been frozen.
        """
        if self._frozen:
            msg = f"Cannot register '{page.slug}': registry is frozen."
            raise RegistryFrozenError(msg)
        problem = slug_problem(page.slug)
        if problem is not None:
            raise InvalidSlugError(page.slug, problem)
        existing = self._pages.get(page.slug)
        if existing is not None:
            raise DuplicateSlugError(page.slug, existing)
        self._pages[page.slug] = page

    def freeze(self) -> ContentRegistry:
        """Reject further registrations and return ``self`` for chaining."""
        self._frozen = True
        return self

    def lookup(self, slug: str) -> Page | None:
        """Return the page registered under ``slug``, or ``None``."""
        return self._pages.get(slug)

    def slugs(self) -> frozenset[str]:
        """Return every registered slug."""
        return frozenset(self._pages)

    def __contains__(self, slug: object) -> bool:
        return slug in self._pages

    def __len__(self) -> int:
        return len(self._pages)

    def __iter__(self) -> cabc.Iterator[Page]:
        for slug in sorted(self._pages):
            yield self._pages[slug]


__all__ = ["ContentRegistry", "DuplicateSlugError", "Page", "RegistryFrozenError"]
