"""Test runner configuration exports."""

from .runner_config_writer import (
    DEFAULT_RUNNER_CONFIG_FILENAME,
    build_runner_configuration,
    write_runner_configuration,
)
from .runner_settings import EnvironmentBootstrap, RunnerSettings

__all__ = [
    "DEFAULT_RUNNER_CONFIG_FILENAME",
    "EnvironmentBootstrap",
    "RunnerSettings",
    "build_runner_configuration",
    "write_runner_configuration",
]
