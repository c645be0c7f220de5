"""Sidebar navigation: tree types, the tree builder, and the link validator.

Examples
--------
>>> from kit_pages.navigation import build, validate
>>> from kit_pages.registry import ContentRegistry, Page
>>> registry = ContentRegistry.from_pages([Page("a", "A"), Page("b", "B")])
>>> tree = build([{"label": "Docs", "items": [{"label": "A", "slug": "a"}]}])
>>> [error.slug for error in validate(tree, registry).orphans]
['b']
"""

from .builder import build, iter_leaves, render_outline
from .models import (
    GroupingSpecification,
    Leaf,
    MalformedSpecificationError,
    NavigationNode,
    Section,
)
from .validator import (
    DanglingLinkError,
    NavigationValidationError,
    OrphanPageError,
    ValidationError,
    ValidationReport,
    validate,
)

__all__ = [
    "DanglingLinkError",
    "GroupingSpecification",
    "Leaf",
    "MalformedSpecificationError",
    "NavigationNode",
    "NavigationValidationError",
    "OrphanPageError",
    "Section",
    "ValidationError",
    "ValidationReport",
    "build",
    "iter_leaves",
    "render_outline",
    "validate",
]
