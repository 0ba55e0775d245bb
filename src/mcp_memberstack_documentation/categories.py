"""Category classification for documentation paths."""

from collections.abc import Callable
from pathlib import PurePosixPath

GENERAL = "general"

CATEGORIES: dict[str, str] = {
    "dom-api": "DOM Package API Reference",
    "admin-api": "Admin Package API Reference",
    "rest-api": "REST API Reference",
    "authentication": "Authentication Flows",
    "quick-start": "Quick Start Guide",
    "error-handling": "Error Handling Guide",
    "integration-patterns": "Integration Patterns",
    "decision-trees": "Method Decision Trees",
    GENERAL: "General Documentation",
}


def _path_contains(fragment: str) -> Callable[[str], bool]:
    return lambda path: fragment in path


def _stem_equals(stem: str) -> Callable[[str], bool]:
    return lambda path: PurePosixPath(path).stem == stem


# Evaluated in order; the first matching rule decides the category.
CATEGORY_RULES: list[tuple[Callable[[str], bool], str]] = [
    (_path_contains("dom-package"), "dom-api"),
    (_path_contains("admin-package"), "admin-api"),
    (_path_contains("rest-api"), "rest-api"),
    (_stem_equals("authentication-flows"), "authentication"),
    (_stem_equals("quick-start"), "quick-start"),
    (_stem_equals("error-handling-guide"), "error-handling"),
    (_path_contains("integration-patterns"), "integration-patterns"),
    (_path_contains("decision-trees"), "decision-trees"),
]


def categorise(path: str) -> str:
    """Map a relative document path to its category tag.

    Args:
        path: POSIX style path relative to the documentation root.

    Returns:
        One of the keys of ``CATEGORIES``; ``general`` when no rule matches.
    """
    for matches, category in CATEGORY_RULES:
        if matches(path):
            return category
    return GENERAL


def describe(category: str) -> str:
    """Return the display description for a category tag.

    Args:
        category: Category tag.

    Returns:
        Human readable description, or the tag itself if it is unknown.
    """
    return CATEGORIES.get(category, category)
