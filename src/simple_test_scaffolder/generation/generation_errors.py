"""Test generation failure taxonomy."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class GenerationError(Exception):
    """Base class for failures reported by the test generator."""


class UnknownCategoryError(GenerationError):
    """Raised when the requested category is not one of the known categories."""

    def __init__(self, category: str, valid_categories: Sequence[str]) -> None:
        self.category = category
        self.valid_categories = tuple(valid_categories)
        super().__init__(
            f"Unknown test category: {category}. "
            f"Available categories: {', '.join(self.valid_categories)}"
        )


class TemplateMissingError(GenerationError):
    """Raised when the category template is absent from the templates directory."""

    def __init__(self, template_path: Path) -> None:
        self.template_path = template_path
        super().__init__(f"Template not found: {template_path}")


class OutputAlreadyExistsError(GenerationError):
    """Raised instead of overwriting an existing test file."""

    def __init__(self, output_path: Path) -> None:
        self.output_path = output_path
        super().__init__(f"File already exists: {output_path}")


class GenerationFailedError(GenerationError):
    """Raised when reading, writing, or creating directories fails."""

    def __init__(self, message: str, cause: OSError) -> None:
        self.cause = cause
        super().__init__(f"{message}: {cause}")
