"""Test generation exports."""

from simple_test_scaffolder.categories import list_categories

from .generation_contracts import GeneratedTestFile, GenerationRequest, ScratchDirectory
from .generation_errors import (
    GenerationError,
    GenerationFailedError,
    OutputAlreadyExistsError,
    TemplateMissingError,
    UnknownCategoryError,
)
from .placeholder_substitution import substitute_placeholders
from .scaffolding_use_case import ensure_scratch_directory, generate_test_file, resolve_output_path

__all__ = [
    "GeneratedTestFile",
    "GenerationRequest",
    "ScratchDirectory",
    "GenerationError",
    "GenerationFailedError",
    "OutputAlreadyExistsError",
    "TemplateMissingError",
    "UnknownCategoryError",
    "ensure_scratch_directory",
    "generate_test_file",
    "list_categories",
    "resolve_output_path",
    "substitute_placeholders",
]
