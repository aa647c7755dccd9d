"""Scaffold settings loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from simple_test_scaffolder.runner_configuration.runner_settings import (
    EnvironmentBootstrap,
    RunnerSettings,
)

from .config_scaffold_builder import DEFAULT_SETTINGS_FILENAME
from .scaffold_settings import (
    BUNDLED_TEMPLATES_DIR,
    DEFAULT_FILE_EXTENSION,
    DEFAULT_RUN_COMMAND,
    DEFAULT_SCRATCH_DIRECTORY,
    DEFAULT_TEST_ROOT,
    ScaffoldSettings,
)

_KNOWN_SECTIONS = frozenset({"paths", "generation", "runner"})


class ConfigurationError(Exception):
    """Raised when the scaffold settings file is invalid."""


def load_scaffold_settings(
    config_path: Path | str | None = None, *, base_dir: Path | None = None
) -> ScaffoldSettings:
    """Load and validate scaffold settings.

    Without an explicit path, `scaffold.yaml` in `base_dir` (default: the
    working directory) is used when present; otherwise defaults apply.
    """
    root = (base_dir or Path.cwd()).resolve()
    if config_path is None:
        candidate = root / DEFAULT_SETTINGS_FILENAME
        if not candidate.is_file():
            return ScaffoldSettings.defaults(root)
        path = candidate
    else:
        path = Path(config_path)
        if not path.is_absolute():
            path = root / path
        if not path.exists():
            raise ConfigurationError(f"Settings file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Failed to read settings file {path}: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse settings file: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Settings root must be a mapping.")

    unknown = sorted(str(key) for key in parsed if key not in _KNOWN_SECTIONS)
    if unknown:
        raise ConfigurationError(f"Unknown settings section(s): {', '.join(unknown)}")

    base_path = path.resolve().parent
    paths = _optional_mapping(parsed.get("paths"), "paths")
    generation = _optional_mapping(parsed.get("generation"), "generation")

    test_root = _resolve_path(
        base_path,
        _require_non_empty_string(paths.get("test_root", DEFAULT_TEST_ROOT), "paths.test_root"),
    )
    templates_value = _optional_string(paths.get("templates_dir"), "paths.templates_dir")
    templates_dir = (
        _resolve_path(base_path, templates_value) if templates_value else BUNDLED_TEMPLATES_DIR
    )
    scratch_directory = _require_path_segment(
        paths.get("scratch_directory", DEFAULT_SCRATCH_DIRECTORY), "paths.scratch_directory"
    )
    file_extension = _require_non_empty_string(
        generation.get("file_extension", DEFAULT_FILE_EXTENSION), "generation.file_extension"
    ).lstrip(".")
    if not file_extension:
        raise ConfigurationError("generation.file_extension must not be empty.")
    run_command = _require_non_empty_string(
        generation.get("run_command", DEFAULT_RUN_COMMAND), "generation.run_command"
    )

    return ScaffoldSettings(
        test_root=test_root,
        templates_dir=templates_dir,
        scratch_directory=scratch_directory,
        file_extension=file_extension,
        run_command=run_command,
        runner=_parse_runner_section(parsed.get("runner")),
        config_path=path.resolve(),
    )


def _parse_runner_section(value: Any) -> RunnerSettings:
    section = _optional_mapping(value, "runner")
    defaults = RunnerSettings()
    timeout_ms = _require_positive_int(
        section.get("timeout_ms", defaults.timeout_ms), "runner.timeout_ms"
    )
    environment = defaults.environment
    if "environment" in section:
        environment = EnvironmentBootstrap(
            variables=_normalize_environment(section.get("environment"))
        )
    return RunnerSettings(
        test_match=_string_sequence_or_default(
            section, "test_match", defaults.test_match, allow_empty=False
        ),
        ignore_patterns=_string_sequence_or_default(
            section, "ignore_patterns", defaults.ignore_patterns
        ),
        coverage_paths=_string_sequence_or_default(
            section, "coverage_paths", defaults.coverage_paths
        ),
        coverage_directory=_require_non_empty_string(
            section.get("coverage_directory", defaults.coverage_directory),
            "runner.coverage_directory",
        ),
        coverage_reporters=_string_sequence_or_default(
            section, "coverage_reporters", defaults.coverage_reporters
        ),
        setup_files=_string_sequence_or_default(section, "setup_files", defaults.setup_files),
        timeout_ms=timeout_ms,
        environment=environment,
    )


def _string_sequence_or_default(
    section: Mapping[str, Any],
    key: str,
    default: tuple[str, ...],
    *,
    allow_empty: bool = True,
) -> tuple[str, ...]:
    if key not in section:
        return default
    field_name = f"runner.{key}"
    value = section[key]
    if value is None:
        normalized: tuple[str, ...] = ()
    elif isinstance(value, str):
        stripped = value.strip()
        normalized = (stripped,) if stripped else ()
    elif isinstance(value, Sequence):
        items = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                items.append(stripped)
        normalized = tuple(items)
    else:
        raise ConfigurationError(f"{field_name} must be a string or list of strings.")
    if not normalized and not allow_empty:
        raise ConfigurationError(f"{field_name} must contain at least one pattern.")
    return normalized


def _normalize_environment(value: Any) -> Mapping[str, str]:
    if value is None:
        return MappingProxyType({})
    if not isinstance(value, Mapping):
        raise ConfigurationError("runner.environment must be a mapping.")
    variables: dict[str, str] = {}
    for name, raw in value.items():
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError("runner.environment keys must be non-empty strings.")
        if isinstance(raw, bool) or not isinstance(raw, str | int | float):
            raise ConfigurationError(f"runner.environment.{name} must be a string.")
        variables[name.strip()] = str(raw)
    return MappingProxyType(variables)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Settings section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_path_segment(value: Any, field_name: str) -> str:
    segment = _require_non_empty_string(value, field_name)
    if "/" in segment or "\\" in segment or segment in {".", ".."}:
        raise ConfigurationError(f"{field_name} must be a single directory name.")
    return segment


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
