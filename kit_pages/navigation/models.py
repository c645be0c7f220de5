"""Node types making up the sidebar navigation tree."""

from __future__ import annotations

import dataclasses as dc
import typing as typ


class MalformedSpecificationError(ValueError):
    """Raised when a sidebar grouping entry has the wrong shape.

    Attributes
    ----------
    location : str
        Position of the offending entry, for example ``sidebar[1].items[0]``.
    """

    def __init__(self, location: str, problem: str) -> None:
        self.location = location
        self.problem = problem
        super().__init__(f"{location}: {problem}")


@dc.dataclass(frozen=True, slots=True)
class Leaf:
    """Sidebar link pointing at one page by slug."""

    label: str
    slug: str


@dc.dataclass(frozen=True, slots=True)
class Section:
    """Labelled group of child nodes, optionally collapsed by default."""

    label: str
    children: tuple[NavigationNode, ...]
    collapsed: bool = False


NavigationNode: typ.TypeAlias = Section | Leaf

SectionSpec = typ.Mapping[str, typ.Any]
GroupingSpecification: typ.TypeAlias = typ.Sequence[SectionSpec] | SectionSpec


__all__ = [
    "GroupingSpecification",
    "Leaf",
    "MalformedSpecificationError",
    "NavigationNode",
    "Section",
    "SectionSpec",
]
