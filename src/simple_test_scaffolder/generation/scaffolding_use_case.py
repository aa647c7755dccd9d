"""Test file generation use-case service."""

from __future__ import annotations

import logging
from pathlib import Path

from simple_test_scaffolder.categories.category_descriptors import (
    CategoryDescriptor,
    category_names,
    find_category_descriptor,
)
from simple_test_scaffolder.configuration.scaffold_settings import ScaffoldSettings

from .generation_contracts import GeneratedTestFile, GenerationRequest, ScratchDirectory
from .generation_errors import (
    GenerationFailedError,
    OutputAlreadyExistsError,
    TemplateMissingError,
    UnknownCategoryError,
)
from .placeholder_substitution import substitute_placeholders

logger = logging.getLogger(__name__)


def generate_test_file(request: GenerationRequest, settings: ScaffoldSettings) -> GeneratedTestFile:
    """Materialize a new test file from the category template.

    Args:
      request: Category and name of the test to create.
      settings: Resolved scaffold settings.

    Returns:
      Details of the written file.

    Raises:
      UnknownCategoryError: If the category is not known.
      TemplateMissingError: If the category template does not exist.
      OutputAlreadyExistsError: If the target file exists; it is never overwritten.
      GenerationFailedError: If any file-system operation fails.
    """
    descriptor = find_category_descriptor(request.category)
    if descriptor is None:
        raise UnknownCategoryError(request.category, category_names())

    template_path = settings.templates_dir / descriptor.template_file
    if not template_path.is_file():
        raise TemplateMissingError(template_path)

    target_directory = settings.test_root / descriptor.target_directory
    output_path = resolve_output_path(descriptor, request.name, settings)
    directory_created = _ensure_directory(target_directory)

    if output_path.exists():
        raise OutputAlreadyExistsError(output_path)

    try:
        template = template_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise GenerationFailedError(f"Failed to read template {template_path}", exc) from exc

    content = substitute_placeholders(template, descriptor.placeholders, request.name)
    _write_new_file(output_path, content)
    logger.info("Generated %s test %s from %s", descriptor.name, output_path, template_path.name)

    return GeneratedTestFile(
        output_path=output_path,
        descriptor=descriptor,
        template_path=template_path,
        target_directory=target_directory,
        directory_created=directory_created,
    )


def resolve_output_path(
    descriptor: CategoryDescriptor, name: str, settings: ScaffoldSettings
) -> Path:
    """Return `<test_root>/<target_directory>/test-<name>.<ext>`."""
    filename = f"test-{name}.{settings.file_extension}"
    return settings.test_root / descriptor.target_directory / filename


def ensure_scratch_directory(settings: ScaffoldSettings) -> ScratchDirectory:
    """Create the shared scratch directory under the test root when it is missing."""
    scratch_path = settings.scratch_path
    created = _ensure_directory(scratch_path)
    if created:
        logger.info("Created scratch directory %s", scratch_path)
    return ScratchDirectory(path=scratch_path, created=created)


def _ensure_directory(directory: Path) -> bool:
    if directory.is_dir():
        return False
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise GenerationFailedError(f"Failed to create directory {directory}", exc) from exc
    logger.debug("Created directory %s", directory)
    return True


def _write_new_file(output_path: Path, content: str) -> None:
    try:
        with output_path.open("x", encoding="utf-8") as handle:
            handle.write(content)
    except FileExistsError as exc:
        raise OutputAlreadyExistsError(output_path) from exc
    except OSError as exc:
        raise GenerationFailedError(f"Failed to write {output_path}", exc) from exc
