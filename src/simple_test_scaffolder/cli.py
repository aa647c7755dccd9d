"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

import click

from simple_test_scaffolder.categories import list_categories
from simple_test_scaffolder.configuration import (
    DEFAULT_SETTINGS_FILENAME,
    ConfigurationError,
    ScaffoldSettings,
    load_scaffold_settings,
    write_placeholder_settings,
)
from simple_test_scaffolder.generation import (
    GeneratedTestFile,
    GenerationError,
    GenerationRequest,
    ensure_scratch_directory,
    generate_test_file,
)
from simple_test_scaffolder.runner_configuration import (
    DEFAULT_RUNNER_CONFIG_FILENAME,
    write_runner_configuration,
)

CREATE_TEST_PROG_NAME = "create-test"

_USAGE_EXAMPLES: tuple[tuple[str, str], ...] = (
    ("unit", "user-validation"),
    ("integration", "attendance-flow"),
    ("debug", "menu-buttons"),
    ("isolated", "simple-functions"),
)

_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


class CliError(Exception):
    """Custom CLI error."""


def render_usage_help(prog_name: str = CREATE_TEST_PROG_NAME) -> str:
    """Build the usage text shown when the category or name is missing."""
    lines = [
        "Create a new test from a template",
        "",
        f"Usage: {prog_name} <category> <name>",
        "",
        "Categories:",
    ]
    lines.extend(
        f"  {descriptor.name:<12} - {descriptor.description}" for descriptor in list_categories()
    )
    lines.extend(["", "Examples:"])
    lines.extend(f"  {prog_name} {category} {name}" for category, name in _USAGE_EXAMPLES)
    lines.extend(["", "Generated files are placed in <test root>/<category>/ (default: tests/)."])
    return "\n".join(lines)


config_option = click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help=f"Path to the scaffold settings file (default: ./{DEFAULT_SETTINGS_FILENAME} if present)",
)


@click.command(name="create", context_settings=_CONTEXT_SETTINGS)
@click.argument("category", required=False)
@click.argument("name", required=False)
@config_option
@click.option("-v", "--verbose", count=True, help="Log progress to stderr (-vv for debug).")
@click.pass_context
def create_test(
    ctx: click.Context,
    category: str | None,
    name: str | None,
    config_path: str | None,
    verbose: int,
) -> None:
    """Create test NAME from the CATEGORY template."""
    if not category or not name:
        click.echo(render_usage_help())
        ctx.exit(1)
    _configure_logging(verbose)
    settings = _load_settings(config_path)
    try:
        scratch = ensure_scratch_directory(settings)
        if scratch.created:
            click.echo(f"Created scratch directory: {scratch.path}")
        generated = generate_test_file(GenerationRequest(category=category, name=name), settings)
    except GenerationError as exc:
        raise CliError(str(exc)) from exc
    _report_generated_test(generated, settings)


@click.group(context_settings=_CONTEXT_SETTINGS)
@click.version_option(package_name="simple-test-scaffolder")
def cli() -> None:
    """Scaffold test files from templates and configure the test runner."""


cli.add_command(create_test)


@cli.command(name="categories")
def categories() -> None:
    """List the test categories and their templates."""
    for descriptor in list_categories():
        click.echo(
            f"{descriptor.name:<12} {descriptor.template_file:<30} {descriptor.description}"
        )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_SETTINGS_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML scaffold settings file to write",
)
def generate_config(output_path: str) -> None:
    """Generate a scaffold settings file with defaults and guidance comments."""
    try:
        resolved_output = write_placeholder_settings(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate-runner-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_RUNNER_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the Jest configuration file to write",
)
@config_option
def generate_runner_config(output_path: str, config_path: str | None) -> None:
    """Generate the Jest configuration used to run the scaffolded tests."""
    settings = _load_settings(config_path)
    try:
        resolved_output = write_runner_configuration(
            settings.runner, output_path, test_root=settings.test_root
        )
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))
    run_command = f"npx jest --config {resolved_output}"
    prefix = settings.runner.environment.command_prefix()
    if prefix:
        run_command = f"{prefix} {run_command}"
    click.echo(f"Run the tests with: {run_command}")


def _load_settings(config_path: str | None) -> ScaffoldSettings:
    try:
        return load_scaffold_settings(config_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc


def _report_generated_test(generated: GeneratedTestFile, settings: ScaffoldSettings) -> None:
    if generated.directory_created:
        click.echo(f"Created directory: {generated.target_directory}")
    click.echo(f"Created test: {generated.output_path}")
    click.echo(f"Category: {generated.descriptor.description}")
    click.echo(f"Template: {generated.template_name}")
    click.echo("")
    click.echo("Next steps:")
    click.echo(f"  1. Edit the file: {generated.output_path}")
    click.echo("  2. Add the required imports and test logic")
    click.echo(f"  3. Run the tests: {settings.run_command_for(generated.descriptor.name)}")


def _configure_logging(verbosity: int) -> None:
    if verbosity <= 0:
        return
    level = logging.INFO if verbosity == 1 else logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    return _run_command(cli, argv)


def create_test_main(argv: Sequence[str] | None = None) -> int:
    """`create-test <category> <name>` entry point."""
    return _run_command(create_test, argv, prog_name=CREATE_TEST_PROG_NAME)


def _run_command(
    command: click.Command, argv: Sequence[str] | None, prog_name: str | None = None
) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    try:
        result = command.main(args=list(argv), prog_name=prog_name, standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    # Explicit ctx.exit(code) calls surface as the return value.
    return result if isinstance(result, int) else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
