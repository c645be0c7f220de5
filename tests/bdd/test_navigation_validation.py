"""Behaviour tests for sidebar navigation validation.

These pytest-bdd scenarios cover how the registry, the tree builder, and the
validator behave together: orphan pages, dangling links reported in full,
duplicate slugs rejected without changing the registry, and empty sections
refused at build time.

The scenarios live in ``features/navigation_validation.feature``.

Usage:
    Run these behaviour tests with pytest, for example:

        pytest tests/bdd/test_navigation_validation.py -v
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from kit_pages.navigation import MalformedSpecificationError, build, validate
from kit_pages.registry import ContentRegistry, DuplicateSlugError, Page

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "navigation_validation.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


def _slugs(text: str) -> list[str]:
    return [slug.strip() for slug in text.split(",") if slug.strip()]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given(parsers.parse('registered pages "{slugs}"'))
def given_registered_pages(scenario_state: ScenarioState, slugs: str) -> None:
    """Register one page per comma-separated slug."""
    scenario_state["registry"] = ContentRegistry.from_pages(
        Page(slug=slug, title=slug.title()) for slug in _slugs(slugs)
    )


@given(parsers.parse('a sidebar linking "{slugs}"'))
def given_sidebar(scenario_state: ScenarioState, slugs: str) -> None:
    """Describe a one-section sidebar linking each slug in order."""
    scenario_state["spec"] = [
        {
            "label": "Docs",
            "items": [{"label": slug.upper(), "slug": slug} for slug in _slugs(slugs)],
        }
    ]


@given(parsers.parse('a sidebar with an empty section "{label}"'))
def given_empty_section(scenario_state: ScenarioState, label: str) -> None:
    scenario_state["spec"] = [{"label": label, "collapsed": True, "items": []}]


@when("the sidebar is validated")
def when_validated(scenario_state: ScenarioState) -> None:
    tree = build(scenario_state["spec"])
    scenario_state["report"] = validate(tree, scenario_state["registry"])


@when("the sidebar is built")
def when_built(scenario_state: ScenarioState) -> None:
    try:
        scenario_state["tree"] = build(scenario_state["spec"])
    except MalformedSpecificationError as exc:
        scenario_state["error"] = exc


@when(parsers.parse('page "{slug}" is registered again'))
def when_registered_again(scenario_state: ScenarioState, slug: str) -> None:
    registry: ContentRegistry = scenario_state["registry"]
    try:
        registry.register(Page(slug=slug, title="Duplicate"))
    except DuplicateSlugError as exc:
        scenario_state["error"] = exc


@then(parsers.parse('the orphan pages are "{slugs}"'))
def then_orphans(scenario_state: ScenarioState, slugs: str) -> None:
    actual = [error.slug for error in scenario_state["report"].orphans]
    assert actual == _slugs(slugs), f"expected orphans {slugs!r}, got {actual!r}"


@then(parsers.parse('the dangling links are "{slugs}"'))
def then_dangling(scenario_state: ScenarioState, slugs: str) -> None:
    actual = [error.slug for error in scenario_state["report"].dangling]
    assert actual == _slugs(slugs), f"expected dangling {slugs!r}, got {actual!r}"


@then("there are no dangling links")
def then_no_dangling(scenario_state: ScenarioState) -> None:
    assert scenario_state["report"].dangling == ()


@then("there are no orphan pages")
def then_no_orphans(scenario_state: ScenarioState) -> None:
    assert scenario_state["report"].orphans == ()


@then("the report has no errors")
def then_no_errors(scenario_state: ScenarioState) -> None:
    report = scenario_state["report"]
    assert report.ok, f"expected a clean report, got {report.errors!r}"


@then(parsers.parse('a duplicate slug error names "{slug}"'))
def then_duplicate(scenario_state: ScenarioState, slug: str) -> None:
    error = scenario_state.get("error")
    assert isinstance(error, DuplicateSlugError), "expected a DuplicateSlugError"
    assert error.slug == slug


@then(parsers.parse("the registry holds exactly {count:d} page"))
def then_registry_size(scenario_state: ScenarioState, count: int) -> None:
    assert len(scenario_state["registry"]) == count


@then(parsers.parse('a malformed specification error is raised at "{location}"'))
def then_malformed(scenario_state: ScenarioState, location: str) -> None:
    error = scenario_state.get("error")
    assert isinstance(error, MalformedSpecificationError), (
        "expected a MalformedSpecificationError"
    )
    assert error.location == location
    assert "tree" not in scenario_state
