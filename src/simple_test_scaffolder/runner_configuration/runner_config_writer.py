"""Jest configuration rendering and writing."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from .runner_settings import RunnerSettings

DEFAULT_RUNNER_CONFIG_FILENAME = "jest.config.json"


def build_runner_configuration(
    settings: RunnerSettings, *, test_root: Path, config_dir: Path
) -> dict[str, Any]:
    """Build the Jest configuration document for the given test root.

    Args:
      settings: Runner settings to render.
      test_root: Directory holding the generated tests.
      config_dir: Directory the configuration file is written to; Jest resolves
        `<rootDir>` against it.

    Returns:
      A JSON-serialisable mapping.
    """
    document: dict[str, Any] = {
        "testEnvironment": "node",
        "roots": [_root_dir_reference(test_root, config_dir)],
        "testMatch": list(settings.test_match),
        "testPathIgnorePatterns": list(settings.ignore_patterns),
        "collectCoverageFrom": list(settings.coverage_paths),
        "coverageDirectory": settings.coverage_directory,
        "coverageReporters": list(settings.coverage_reporters),
        "testTimeout": settings.timeout_ms,
        "verbose": True,
        "forceExit": True,
        "clearMocks": True,
    }
    if settings.setup_files:
        document["setupFilesAfterEnv"] = list(settings.setup_files)
    return document


def write_runner_configuration(
    settings: RunnerSettings, output_path: Path | str, *, test_root: Path
) -> Path:
    """Write the Jest configuration to the requested output path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the configuration fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Runner configuration file already exists: {destination.resolve()}")
    document = build_runner_configuration(
        settings, test_root=test_root, config_dir=destination.resolve().parent
    )
    destination.write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")
    return destination.resolve()


def _root_dir_reference(test_root: Path, config_dir: Path) -> str:
    try:
        relative = os.path.relpath(test_root.resolve(), config_dir.resolve())
    except ValueError:
        # Different drives on Windows.
        return test_root.resolve().as_posix()
    if relative == ".":
        return "<rootDir>"
    return f"<rootDir>/{Path(relative).as_posix()}"
