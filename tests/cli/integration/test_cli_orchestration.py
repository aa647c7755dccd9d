"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner
from simple_test_scaffolder.cli import cli, create_test


def test_create_command_writes_test_and_prints_next_steps(tmp_path: Path) -> None:
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=str(tmp_path)):
        result = runner.invoke(create_test, ["unit", "user-validation"])
        output_path = Path("tests/unit/test-user-validation.js").resolve()

        assert result.exit_code == 0
        content = output_path.read_text(encoding="utf-8")
        assert "describe('user-validation Unit Tests'" in content
        assert "MODULE_NAME" not in content
        assert Path("tests/tmp").is_dir()
        assert f"Created directory: {output_path.parent}" in result.output
        assert f"Created test: {output_path}" in result.output
        assert "Category: Unit tests for individual functions and modules" in result.output
        assert "Template: unit-test.template.js" in result.output
        assert "Next steps:" in result.output
        assert "Run the tests: npm run test:unit" in result.output


def test_create_command_reports_scratch_directory_only_when_created(tmp_path: Path) -> None:
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=str(tmp_path)):
        scratch_line = f"Created scratch directory: {Path('tests/tmp').resolve()}"

        first = runner.invoke(create_test, ["unit", "user-validation"])
        second = runner.invoke(create_test, ["unit", "user-login"])

        assert first.exit_code == 0
        assert second.exit_code == 0
        assert scratch_line in first.output
        assert "Created scratch directory" not in second.output
        assert "Created directory" not in second.output


def test_create_command_via_group_uses_settings_file(tmp_path: Path) -> None:
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=str(tmp_path)):
        Path("scaffold.yaml").write_text(
            "paths:\n  test_root: spec\n  scratch_directory: scratch\n"
            "generation:\n  run_command: 'npx jest spec/{category}'\n",
            encoding="utf-8",
        )

        result = runner.invoke(cli, ["create", "integration", "attendance-flow"])

        assert result.exit_code == 0
        assert Path("spec/integration/test-attendance-flow.js").exists()
        assert Path("spec/scratch").is_dir()
        assert "Run the tests: npx jest spec/integration" in result.output


def test_create_command_with_explicit_config_and_verbose_logging(tmp_path: Path) -> None:
    config_path = tmp_path / "settings.yaml"
    config_path.write_text("paths:\n  test_root: generated\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(
        create_test, ["debug", "menu-buttons", "--config", str(config_path), "-v"]
    )

    assert result.exit_code == 0
    assert (tmp_path / "generated" / "debug" / "test-menu-buttons.js").exists()


def test_create_command_fails_for_unknown_category_without_writing(tmp_path: Path) -> None:
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=str(tmp_path)):
        result = runner.invoke(create_test, ["bogus", "x"])

        assert result.exit_code == 1
        assert "Unknown test category: bogus" in str(result.exception)
        assert [path.name for path in Path("tests").iterdir()] == ["tmp"]


def test_create_command_without_name_prints_usage(tmp_path: Path) -> None:
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=str(tmp_path)):
        result = runner.invoke(create_test, ["unit"])

        assert result.exit_code == 1
        assert "Usage: create-test <category> <name>" in result.output
        assert not Path("tests").exists()


def test_categories_command_lists_every_category() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["categories"])

    assert result.exit_code == 0
    for name in ("unit", "integration", "debug", "isolated"):
        assert name in result.output
    assert "isolated-test.template.js" in result.output


def test_generate_config_command_writes_settings_file_with_default_name(tmp_path: Path) -> None:
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=str(tmp_path)):
        result = runner.invoke(cli, ["generate-config"])
        output_path = Path("scaffold.yaml").resolve()

        assert result.exit_code == 0
        content = output_path.read_text(encoding="utf-8")
        assert "paths:" in content
        assert "runner:" in content
        assert str(output_path) in result.output

        second = runner.invoke(cli, ["generate-config"])
        assert second.exit_code == 1
        assert "Settings file already exists" in str(second.exception)


def test_generate_runner_config_command_writes_jest_configuration(tmp_path: Path) -> None:
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=str(tmp_path)):
        result = runner.invoke(cli, ["generate-runner-config"])
        output_path = Path("jest.config.json").resolve()

        assert result.exit_code == 0
        document = json.loads(output_path.read_text(encoding="utf-8"))
        assert document["roots"] == ["<rootDir>/tests"]
        assert document["testEnvironment"] == "node"
        assert (
            f"Run the tests with: NODE_ENV=test LOG_LEVEL=error npx jest --config {output_path}"
            in result.output
        )


def test_generate_runner_config_command_refuses_to_overwrite(tmp_path: Path) -> None:
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=str(tmp_path)):
        Path("jest.config.json").write_text("{}", encoding="utf-8")

        result = runner.invoke(cli, ["generate-runner-config"])

        assert result.exit_code == 1
        assert "Runner configuration file already exists" in str(result.exception)
        assert Path("jest.config.json").read_text(encoding="utf-8") == "{}"
