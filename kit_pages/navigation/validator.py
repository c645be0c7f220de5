"""Cross-check the navigation tree against the content registry.

:func:`validate` runs two read-only passes and gathers every finding into a
:class:`ValidationReport` rather than stopping at the first problem:

1. a pre-order, left-to-right walk of the tree reporting each leaf whose slug
   is not registered (:class:`DanglingLinkError`);
2. a comparison of the reached slugs with the registry, reporting each page
   no leaf points at (:class:`OrphanPageError`).

Dangling links always block publishing. Orphan pages are warnings unless the
caller asks for strict checking.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .builder import iter_leaves

if typ.TYPE_CHECKING:
    from kit_pages.registry import ContentRegistry

    from .models import NavigationNode


@dc.dataclass(frozen=True, slots=True)
class DanglingLinkError:
    """A sidebar leaf whose slug matches no registered page."""

    slug: str
    path: tuple[str, ...]

    @property
    def message(self) -> str:
        """Return a one-line description suitable for terminal output."""
        trail = " > ".join(self.path)
        return f"dangling link '{self.slug}' at {trail}"


@dc.dataclass(frozen=True, slots=True)
class OrphanPageError:
    """A registered page that no sidebar leaf links to."""

    slug: str

    @property
    def message(self) -> str:
        """Return a one-line description suitable for terminal output."""
        return f"orphan page '{self.slug}' is not linked from the sidebar"


ValidationError: typ.TypeAlias = DanglingLinkError | OrphanPageError


class NavigationValidationError(ValueError):
    """Raised when a validation report contains errors that block publishing."""

    def __init__(self, errors: typ.Sequence[ValidationError]) -> None:
        self.errors = tuple(errors)
        lines = "\n".join(f"  - {error.message}" for error in self.errors)
        super().__init__(f"{len(self.errors)} navigation error(s):\n{lines}")


@dc.dataclass(frozen=True, slots=True)
class ValidationReport:
    """Every finding from one :func:`validate` run."""

    dangling: tuple[DanglingLinkError, ...] = ()
    orphans: tuple[OrphanPageError, ...] = ()

    @property
    def errors(self) -> tuple[ValidationError, ...]:
        """Return dangling links followed by orphan pages."""
        return (*self.dangling, *self.orphans)

    @property
    def ok(self) -> bool:
        """Return ``True`` when both passes found nothing."""
        return not self.dangling and not self.orphans

    def fatal_errors(self, *, strict: bool = False) -> tuple[ValidationError, ...]:
        """Return the errors that block publishing under the given policy."""
        if strict:
            return self.errors
        return self.dangling

    def has_fatal(self, *, strict: bool = False) -> bool:
        """Return ``True`` when publishing must be refused."""
        return bool(self.fatal_errors(strict=strict))

    def raise_for_errors(self, *, strict: bool = False) -> None:
        """Raise :class:`NavigationValidationError` listing every fatal error."""
        fatal = self.fatal_errors(strict=strict)
        if fatal:
            raise NavigationValidationError(fatal)


def validate(tree: NavigationNode, registry: ContentRegistry) -> ValidationReport:
    """Check that ``tree`` and ``registry`` reference each other consistently.

    Parameters
    ----------
    tree : NavigationNode
        Root of the sidebar tree returned by :func:`~kit_pages.navigation.build`.
    registry : ContentRegistry
        Registry holding every page of the site.

    Returns
    -------
    ValidationReport
        Dangling links in traversal order and orphan pages in slug order.
        ``report.ok`` is ``True`` only when both are empty.
    """
    dangling: list[DanglingLinkError] = []
    reached: set[str] = set()
    for path, leaf in iter_leaves(tree):
        reached.add(leaf.slug)
        if registry.lookup(leaf.slug) is None:
            dangling.append(DanglingLinkError(slug=leaf.slug, path=path))
    orphans = [
        OrphanPageError(slug=slug) for slug in sorted(registry.slugs() - reached)
    ]
    return ValidationReport(dangling=tuple(dangling), orphans=tuple(orphans))


__all__ = [
    "DanglingLinkError",
    "NavigationValidationError",
    "OrphanPageError",
    "ValidationError",
    "ValidationReport",
    "validate",
]
