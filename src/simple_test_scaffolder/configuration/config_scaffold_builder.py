"""Settings scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_SETTINGS_FILENAME = "scaffold.yaml"

_SETTINGS_SCAFFOLD_TEMPLATE = """# Scaffold settings for simple-test-scaffolder.
# Every key is optional; delete the ones you do not need to change.
# Relative paths are resolved against the directory of this file.
# Test categories (unit, integration, debug, isolated) are fixed and cannot be added here.

paths:
  # Directory holding the category directories (unit/, integration/, ...).
  test_root: "tests"
  # Directory with your own copies of the category templates.
  # Leave unset to use the templates bundled with the tool.
  # templates_dir: "templates"
  # Scratch directory created under test_root for ephemeral test files.
  # The bundled integration template writes its database to "../tmp/"; when you
  # change this value, use your own templates (templates_dir) that match it.
  scratch_directory: "tmp"

generation:
  # Extension of generated test files.
  file_extension: "js"
  # Command suggested after a test is created; {category} is replaced.
  run_command: "npm run test:{category}"

runner:
  # Settings written by generate-runner-config into jest.config.json.
  test_match:
    - "**/tests/**/*.test.js"
    - "**/tests/**/test-*.spec.js"
  ignore_patterns:
    - "/node_modules/"
    - "/coverage/"
  coverage_paths:
    - "bot/**/*.js"
    - "features/**/*.js"
    - "utils/**/*.js"
    - "database/**/*.js"
    - "interface/**/*.js"
    - "!**/node_modules/**"
  # setup_files:
  #   - "<rootDir>/tests/config/test-setup.js"
  timeout_ms: 30000
  # Environment variables the runner invocation should carry.
  environment:
    NODE_ENV: "test"
    LOG_LEVEL: "error"
"""


def build_placeholder_settings() -> str:
    """Build a YAML settings template with defaults and inline guidance."""
    return _SETTINGS_SCAFFOLD_TEMPLATE


def write_placeholder_settings(output_path: Path | str) -> Path:
    """Write the settings template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Settings file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_settings(), encoding="utf-8")
    return destination.resolve()
