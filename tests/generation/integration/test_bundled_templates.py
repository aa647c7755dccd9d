"""Bundled template generation integration tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from simple_test_scaffolder.categories import CategoryDescriptor, list_categories
from simple_test_scaffolder.configuration import BUNDLED_TEMPLATES_DIR, ScaffoldSettings
from simple_test_scaffolder.generation import GenerationRequest, generate_test_file


@pytest.mark.parametrize("descriptor", list_categories(), ids=lambda item: item.name)
def test_bundled_template_exists_and_declares_its_placeholders(
    descriptor: CategoryDescriptor,
) -> None:
    template_path = BUNDLED_TEMPLATES_DIR / descriptor.template_file

    assert template_path.is_file()
    text = template_path.read_text(encoding="utf-8")
    for placeholder in descriptor.placeholders:
        assert placeholder in text


@pytest.mark.parametrize("descriptor", list_categories(), ids=lambda item: item.name)
def test_every_category_generates_file_without_remaining_placeholders(
    descriptor: CategoryDescriptor, tmp_path: Path
) -> None:
    settings = ScaffoldSettings(test_root=tmp_path / "tests")

    generated = generate_test_file(
        GenerationRequest(category=descriptor.name, name="attendance-flow"), settings
    )

    assert generated.output_path == (
        tmp_path / "tests" / descriptor.target_directory / "test-attendance-flow.js"
    )
    content = generated.output_path.read_text(encoding="utf-8")
    assert "attendance-flow" in content
    for placeholder in descriptor.placeholders:
        assert placeholder not in content


def test_integration_template_points_at_the_scratch_directory(tmp_path: Path) -> None:
    settings = ScaffoldSettings(test_root=tmp_path / "tests")

    generated = generate_test_file(GenerationRequest("integration", "broadcast"), settings)

    content = generated.output_path.read_text(encoding="utf-8")
    assert "describe('broadcast Integration Tests'" in content
    assert "'../tmp/test_broadcast.db'" in content
