"""Test category domain exports."""

from .category_descriptors import (
    CATEGORY_DESCRIPTORS,
    Category,
    CategoryDescriptor,
    category_names,
    find_category_descriptor,
    list_categories,
)

__all__ = [
    "CATEGORY_DESCRIPTORS",
    "Category",
    "CategoryDescriptor",
    "category_names",
    "find_category_descriptor",
    "list_categories",
]
