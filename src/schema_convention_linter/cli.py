"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from schema_convention_linter.checking import Severity
from schema_convention_linter.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigError,
    load_configuration,
    write_placeholder_configuration,
)
from schema_convention_linter.report_writing import ReportFormat, render_report
from schema_convention_linter.rule_table import RuleTable
from schema_convention_linter.run_execution import (
    RunExecutionError,
    RunRequest,
    execute_lint_run,
)
from schema_convention_linter.template_generation import generate_template_workbook

_FAIL_ON_LEVELS: dict[str, Severity | None] = {
    "error": Severity.ERROR,
    "advisory": Severity.ADVISORY,
    "never": None,
}


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-convention-linter")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Naming-convention linter for relational database schemas."""
    _configure_logging(verbose)


# pylint: disable=too-many-arguments
@cli.command(name="check")
@click.argument("input_paths", nargs=-1, required=True, type=click.Path(path_type=str))
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to a YAML/JSON lint configuration file",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([item.value for item in ReportFormat]),
    default=ReportFormat.TEXT.value,
    show_default=True,
    help="Console output format",
)
@click.option(
    "--report",
    "report_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path of an Excel report workbook to write",
)
@click.option(
    "--fail-on",
    type=click.Choice(list(_FAIL_ON_LEVELS)),
    default="error",
    show_default=True,
    help="Lowest violation severity that makes the command exit with status 1",
)
@click.option(
    "--parallelism",
    type=click.IntRange(min=1),
    default=None,
    help="Worker threads used to check schema objects (overrides the configuration)",
)
@click.pass_context
def check(
    ctx: click.Context,
    input_paths: tuple[str, ...],
    config_path: str | None,
    output_format: str,
    report_path: str | None,
    fail_on: str,
    parallelism: int | None,
) -> None:
    """Check schema object descriptors (YAML, JSON or xlsx) against the naming rules."""
    try:
        outcome = execute_lint_run(
            RunRequest(
                input_paths=input_paths,
                config_path=config_path,
                report_path=report_path,
                fail_on=_FAIL_ON_LEVELS[fail_on],
                parallelism=parallelism,
            )
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    click.echo(render_report(outcome.report, ReportFormat(output_format), outcome.run_metadata))
    if outcome.report_path is not None:
        click.echo(f"report written: {outcome.report_path}", err=True)
    if outcome.failed:
        ctx.exit(1)


# pylint: enable=too-many-arguments


@cli.command(name="list-rules")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to a YAML/JSON lint configuration file",
)
def list_rules(config_path: str | None) -> None:
    """Print the active prefix rules, suffix rules and exempt fields."""
    try:
        configuration = load_configuration(config_path)
    except (ConfigError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(_format_rule_table(configuration.rule_table))


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML lint configuration scaffold to write",
)
def generate_config(output_path: str) -> None:
    """Generate a commented YAML lint configuration scaffold."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate-template")
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the descriptor workbook template to write",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to a YAML/JSON lint configuration file",
)
def generate_template(output_path: str, config_path: str | None) -> None:
    """Generate a blank schema descriptor workbook listing the active rules."""
    try:
        configuration = load_configuration(config_path)
        resolved_output = generate_template_workbook(configuration.rule_table, output_path)
    except (ConfigError, FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def _format_rule_table(rule_table: RuleTable) -> str:
    lines = ["Prefix rules:"]
    for rule in rule_table.naming_rules.values():
        token = rule.prefix_label
        if rule.suffix_label:
            token = f"{token}...{rule.suffix_label}"
        lines.append(f"  {rule.object_kind.value:<18} {token:<10} {rule.description}")
    lines.append("Suffix rules:")
    for suffix_rule in rule_table.suffix_rules:
        types = ", ".join(suffix_rule.expected_type_labels)
        lines.append(f"  {suffix_rule.suffix:<8} {types:<22} {suffix_rule.description}")
    lines.append("Exempt fields: " + ", ".join(sorted(rule_table.exempt_fields)))
    if rule_table.disabled_rules:
        lines.append("Disabled rules: " + ", ".join(sorted(rule_table.disabled_rules)))
    return "\n".join(lines)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        result = cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return result if isinstance(result, int) else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
