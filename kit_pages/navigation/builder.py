"""Assemble the sidebar navigation tree from its declarative description.

The grouping specification is plain configuration data, normally the
``sidebar`` list from ``config/site.yaml``::

    - label: Getting Started
      items:
        - {label: Introduction, slug: getting-started/introduction}
    - label: Commands
      collapsed: false
      items:
        - {label: Overview, slug: commands/overview}
        - label: Development
          collapsed: true
          items:
            - {label: /feature, slug: commands/feature}

:func:`build` checks the shape of every entry and returns an immutable tree
whose child order is exactly the declared order. It does not look slugs up;
that is left to :func:`kit_pages.navigation.validator.validate`.

Examples
--------
>>> from kit_pages.navigation import build
>>> tree = build([{"label": "Intro", "items": [{"label": "A", "slug": "a"}]}])
>>> tree.children[0].children[0].slug
'a'
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from kit_pages.registry import slug_problem

from .models import (
    GroupingSpecification,
    Leaf,
    MalformedSpecificationError,
    NavigationNode,
    Section,
)

SECTION_FIELDS = frozenset({"label", "collapsed", "items"})
LEAF_FIELDS = frozenset({"label", "slug"})
ROOT_LOCATION = "sidebar"


def build(spec: GroupingSpecification) -> Section:
    """Build the navigation tree described by ``spec``.

    Parameters
    ----------
    spec : GroupingSpecification
        Either the ordered list of top-level sidebar entries or a single
        mapping with an ``items`` list. Sections are mappings with ``label``,
        ``items`` and an optional boolean ``collapsed``; leaves are mappings
        with ``label`` and ``slug``.

    Returns
    -------
    Section
        Unlabelled root section whose children are the top-level entries.

    Raises
    ------
    MalformedSpecificationError
        If any entry is not a mapping, misses a required field, carries an
        unknown field, or is a section with no children.
    """
    match spec:
        case cabc.Mapping():
            items = spec.get("items")
            collapsed = _collapsed(spec, ROOT_LOCATION)
            label = spec.get("label", "")
            if not isinstance(label, str):
                raise MalformedSpecificationError(
                    ROOT_LOCATION, "'label' must be a string"
                )
        case str() | bytes():
            raise MalformedSpecificationError(
                ROOT_LOCATION, "expected a list of entries"
            )
        case cabc.Sequence():
            items, collapsed, label = spec, False, ""
        case _:
            raise MalformedSpecificationError(
                ROOT_LOCATION, "expected a list of entries"
            )
    children = _build_children(items, ROOT_LOCATION, ROOT_LOCATION)
    return Section(label=label, children=children, collapsed=collapsed)


def _build_children(
    items: object, location: str, child_prefix: str
) -> tuple[NavigationNode, ...]:
    """Return child nodes built from ``items`` in declared order.

    ``location`` names the owning section in errors; children are located at
    ``{child_prefix}[index]``.
    """
    if isinstance(items, str | bytes) or not isinstance(items, cabc.Sequence):
        raise MalformedSpecificationError(location, "'items' must be a list")
    if not items:
        raise MalformedSpecificationError(location, "section has no items")
    return tuple(
        _build_node(entry, f"{child_prefix}[{index}]")
        for index, entry in enumerate(items)
    )


def _build_node(entry: object, location: str) -> NavigationNode:
    """Return a :class:`Section` or :class:`Leaf` for a single entry."""
    if not isinstance(entry, cabc.Mapping):
        raise MalformedSpecificationError(location, "entry must be a mapping")
    label = _label(entry, location)
    has_slug = "slug" in entry
    has_items = "items" in entry
    if has_slug and has_items:
        raise MalformedSpecificationError(
            location, "entry cannot have both 'slug' and 'items'"
        )
    if has_items:
        _reject_unknown(entry, SECTION_FIELDS, location)
        collapsed = _collapsed(entry, location)
        children = _build_children(entry["items"], location, f"{location}.items")
        return Section(label=label, children=children, collapsed=collapsed)
    if has_slug:
        _reject_unknown(entry, LEAF_FIELDS, location)
        return Leaf(label=label, slug=_slug(entry["slug"], location))
    raise MalformedSpecificationError(
        location, f"entry '{label}' needs either 'slug' or 'items'"
    )


def _label(entry: typ.Mapping[str, typ.Any], location: str) -> str:
    label = entry.get("label")
    if not isinstance(label, str) or not label.strip():
        raise MalformedSpecificationError(location, "missing 'label'")
    return label


def _slug(value: object, location: str) -> str:
    if not isinstance(value, str) or not value.strip("/"):
        raise MalformedSpecificationError(location, "'slug' must be a non-empty string")
    slug = value.strip("/")
    problem = slug_problem(slug)
    if problem is not None:
        raise MalformedSpecificationError(location, f"slug {slug!r} {problem}")
    return slug


def _collapsed(entry: typ.Mapping[str, typ.Any], location: str) -> bool:
    value = entry.get("collapsed", False)
    if not isinstance(value, bool):
        raise MalformedSpecificationError(location, "'collapsed' must be true or false")
    return value


def _reject_unknown(
    entry: typ.Mapping[str, typ.Any], allowed: frozenset[str], location: str
) -> None:
    """Raise when ``entry`` carries a field outside ``allowed``."""
    unknown = sorted(str(key) for key in entry if key not in allowed)
    if unknown:
        fields = ", ".join(unknown)
        raise MalformedSpecificationError(location, f"unrecognised field(s): {fields}")


def iter_leaves(
    node: NavigationNode, path: tuple[str, ...] = ()
) -> cabc.Iterator[tuple[tuple[str, ...], Leaf]]:
    """Yield ``(path, leaf)`` pairs in pre-order, left to right.

    ``path`` holds the labels from the top-level entry down to and including
    the leaf; the unlabelled root contributes nothing.
    """
    match node:
        case Leaf(label=label):
            yield (*path, label), node
        case Section(label=label, children=children):
            here = (*path, label) if label else path
            for child in children:
                yield from iter_leaves(child, here)


def render_outline(root: Section, indent: str = "  ") -> str:
    """Return a plain-text outline of ``root`` for terminal output."""
    lines: list[str] = []

    def _walk(node: NavigationNode, depth: int) -> None:
        prefix = indent * depth
        match node:
            case Leaf(label=label, slug=slug):
                lines.append(f"{prefix}- {label} -> {slug}")
            case Section(label=label, children=children, collapsed=collapsed):
                marker = "+" if collapsed else "-"
                lines.append(f"{prefix}{marker} {label}/")
                for child in children:
                    _walk(child, depth + 1)

    for child in root.children:
        _walk(child, 0)
    return "\n".join(lines)


__all__ = ["build", "iter_leaves", "render_outline"]
