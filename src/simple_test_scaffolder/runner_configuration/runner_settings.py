"""Test runner configuration entities."""

from __future__ import annotations

import shlex
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

DEFAULT_TEST_MATCH: tuple[str, ...] = (
    "**/tests/**/*.test.js",
    "**/tests/**/test-*.spec.js",
)
DEFAULT_IGNORE_PATTERNS: tuple[str, ...] = ("/node_modules/", "/coverage/")
DEFAULT_COVERAGE_PATHS: tuple[str, ...] = (
    "bot/**/*.js",
    "features/**/*.js",
    "utils/**/*.js",
    "database/**/*.js",
    "interface/**/*.js",
    "!**/node_modules/**",
)
DEFAULT_COVERAGE_REPORTERS: tuple[str, ...] = ("text", "lcov", "html")
DEFAULT_TIMEOUT_MS = 30000


def _default_environment_variables() -> Mapping[str, str]:
    return MappingProxyType({"NODE_ENV": "test", "LOG_LEVEL": "error"})


@dataclass(frozen=True)
class EnvironmentBootstrap:
    """Environment variables the runner invocation must carry."""

    variables: Mapping[str, str] = field(default_factory=_default_environment_variables)

    def command_prefix(self) -> str:
        """Render the variables as a shell `KEY=value` prefix."""
        return " ".join(
            f"{name}={shlex.quote(value)}" for name, value in self.variables.items()
        )


@dataclass(frozen=True)
class RunnerSettings:  # pylint: disable=too-many-instance-attributes
    """Declarative settings consumed by the external test runner."""

    test_match: tuple[str, ...] = DEFAULT_TEST_MATCH
    ignore_patterns: tuple[str, ...] = DEFAULT_IGNORE_PATTERNS
    coverage_paths: tuple[str, ...] = DEFAULT_COVERAGE_PATHS
    coverage_directory: str = "coverage"
    coverage_reporters: tuple[str, ...] = DEFAULT_COVERAGE_REPORTERS
    setup_files: tuple[str, ...] = ()
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    environment: EnvironmentBootstrap = field(default_factory=EnvironmentBootstrap)
