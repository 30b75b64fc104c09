import pytest

from analyzers.imports import RelationshipGraphBuilder
from tools.find_related_tests import lookup_relationships


@pytest.fixture
def graph():
    builder = RelationshipGraphBuilder()
    builder.add("LoginPage", "tests/a.spec.ts")
    builder.add("CartPage", "tests/a.spec.ts")
    return builder.build()


def test_lookup_tests_for_class(graph) -> None:
    assert lookup_relationships(graph, "LoginPage") == {
        "class": "LoginPage",
        "test_files": ["tests/a.spec.ts"],
    }


def test_lookup_classes_for_test(graph) -> None:
    assert lookup_relationships(graph, "tests/a.spec.ts", direction="classes") == {
        "test_file": "tests/a.spec.ts",
        "classes": ["CartPage", "LoginPage"],
    }


def test_lookup_rejects_unknown_direction(graph) -> None:
    with pytest.raises(ValueError):
        lookup_relationships(graph, "LoginPage", direction="both")
