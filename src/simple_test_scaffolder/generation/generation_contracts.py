"""Test generation entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from simple_test_scaffolder.categories.category_descriptors import CategoryDescriptor


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract for generating one test file."""

    category: str
    name: str


@dataclass(frozen=True)
class GeneratedTestFile:
    """Output contract describing a freshly written test file."""

    output_path: Path
    descriptor: CategoryDescriptor
    template_path: Path
    target_directory: Path
    directory_created: bool

    @property
    def template_name(self) -> str:
        return self.template_path.name


@dataclass(frozen=True)
class ScratchDirectory:
    """Location of the shared scratch directory and whether this call created it."""

    path: Path
    created: bool
