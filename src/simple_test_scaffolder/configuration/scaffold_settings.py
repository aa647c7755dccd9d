"""Scaffold settings entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from simple_test_scaffolder.runner_configuration.runner_settings import RunnerSettings

BUNDLED_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

DEFAULT_TEST_ROOT = "tests"
DEFAULT_SCRATCH_DIRECTORY = "tmp"
DEFAULT_FILE_EXTENSION = "js"
DEFAULT_RUN_COMMAND = "npm run test:{category}"


@dataclass(frozen=True)
class ScaffoldSettings:  # pylint: disable=too-many-instance-attributes
    """Resolved locations and conventions used when generating tests."""

    test_root: Path
    templates_dir: Path = BUNDLED_TEMPLATES_DIR
    scratch_directory: str = DEFAULT_SCRATCH_DIRECTORY
    file_extension: str = DEFAULT_FILE_EXTENSION
    run_command: str = DEFAULT_RUN_COMMAND
    runner: RunnerSettings = field(default_factory=RunnerSettings)
    config_path: Path | None = None

    @property
    def scratch_path(self) -> Path:
        return self.test_root / self.scratch_directory

    def run_command_for(self, category: str) -> str:
        """Return the suggested command for running tests of one category."""
        return self.run_command.replace("{category}", category)

    @classmethod
    def defaults(cls, base_dir: Path | None = None) -> ScaffoldSettings:
        root = (base_dir or Path.cwd()).resolve()
        return cls(test_root=root / DEFAULT_TEST_ROOT)
