"""Test category domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class Category(str, Enum):
    """Kinds of test the scaffolder can generate."""

    UNIT = "unit"
    INTEGRATION = "integration"
    DEBUG = "debug"
    ISOLATED = "isolated"


@dataclass(frozen=True)
class CategoryDescriptor:
    """Template, placement, and placeholders for one test category."""

    category: Category
    template_file: str
    target_directory: str
    placeholders: tuple[str, ...]
    description: str

    @property
    def name(self) -> str:
        return self.category.value


CATEGORY_DESCRIPTORS: Mapping[Category, CategoryDescriptor] = MappingProxyType(
    {
        Category.UNIT: CategoryDescriptor(
            category=Category.UNIT,
            template_file="unit-test.template.js",
            target_directory="unit",
            placeholders=("MODULE_NAME",),
            description="Unit tests for individual functions and modules",
        ),
        Category.INTEGRATION: CategoryDescriptor(
            category=Category.INTEGRATION,
            template_file="integration-test.template.js",
            target_directory="integration",
            placeholders=("FEATURE_NAME",),
            description="Integration tests for interaction between components",
        ),
        Category.DEBUG: CategoryDescriptor(
            category=Category.DEBUG,
            template_file="debug-test.template.js",
            target_directory="debug",
            placeholders=("DEBUG_NAME",),
            description="Debug tests for diagnosing problems",
        ),
        Category.ISOLATED: CategoryDescriptor(
            category=Category.ISOLATED,
            template_file="isolated-test.template.js",
            target_directory="isolated",
            placeholders=("ISOLATED_NAME",),
            description="Isolated component tests",
        ),
    }
)


def list_categories() -> tuple[CategoryDescriptor, ...]:
    """Return all category descriptors in declaration order."""
    return tuple(CATEGORY_DESCRIPTORS[category] for category in Category)


def category_names() -> tuple[str, ...]:
    return tuple(category.value for category in Category)


def find_category_descriptor(category: str) -> CategoryDescriptor | None:
    """Return the descriptor for a category name, or None when it is unknown."""
    try:
        return CATEGORY_DESCRIPTORS[Category(category)]
    except ValueError:
        return None
