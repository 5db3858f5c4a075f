"""
Validate Subcommand Module

Validates Fizop documents from a local file, a URL, an npm package or a
glob batch of files. Prints a human-readable report and optionally
writes a JSON report.
"""

import json
import logging
import sys
import time
from dataclasses import asdict
from pathlib import Path
from typing import Optional

import click

from fizop.config import ConfigurationManager
from fizop.config.environment import EnvironmentVariables
from fizop.utils.logging_config import logging_config
from fizop.validation.engine import ValidationEngine
from fizop.validation.report import ValidationReport


logger = logging.getLogger(__name__)


def _environment_epilog() -> str:
    """Help text listing the environment variables the command reads."""
    lines = ["\b", "Environment variables:"]
    for name, description in EnvironmentVariables.get_variable_documentation().items():
        lines.append(f"  {name:<22} {description}")
    return "\n".join(lines)


@click.command(
    help="Validate Fizop documents structurally and semantically",
    epilog=_environment_epilog(),
)
@click.option(
    "--input", "-i",
    "input_path",
    type=click.Path(),
    help="Local fizop.json file to validate",
)
@click.option(
    "--url", "-u",
    type=str,
    help="URL of a Fizop document to download and validate",
)
@click.option(
    "--npm", "-n",
    "npm_package",
    type=str,
    help="npm package whose fizop.json should be validated (resolved through unpkg)",
)
@click.option(
    "--batch", "-b",
    type=str,
    help="Glob pattern for batch validation (e.g., 'catalogs/**/fizop.json')",
)
@click.option(
    "--lenient",
    is_flag=True,
    help="Only check document structure; skip locale and image checks",
)
@click.option(
    "--report", "-r",
    "report_path",
    type=click.Path(),
    help="Output JSON report to this path",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(),
    help="Path to configuration file",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (default: from configuration, else WARNING)",
)
def validate(
    input_path: Optional[str],
    url: Optional[str],
    npm_package: Optional[str],
    batch: Optional[str],
    lenient: bool,
    report_path: Optional[str],
    config_file: Optional[str],
    log_level: Optional[str],
):
    """Validate Fizop documents.

    Examples:
        # Validate a local file
        fizop validate --input fizop.json

        # Structure only
        fizop validate --input fizop.json --lenient

        # Validate a published package
        fizop validate --npm my-operators

        # Batch validation with report
        fizop validate --batch "catalogs/*/fizop.json" --report report.json
    """
    sources = [s for s in (input_path, url, npm_package, batch) if s]
    if len(sources) != 1:
        click.echo("Error: exactly one of --input, --url, --npm or --batch is required", err=True)
        click.echo("Run 'fizop validate --help' for usage", err=True)
        sys.exit(1)

    cli_overrides = {
        "log_level": log_level.lower() if log_level else None,
        "strict": False if lenient else None,
    }
    try:
        config = ConfigurationManager().load_configuration(config_file, cli_overrides)
    except ValueError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    logging_config.reset()
    logging_config.configure_logging(level=config.log_level, log_file=config.log_file or None)
    logging_config.log_configuration_details(asdict(config))

    engine = ValidationEngine(
        strict=config.strict,
        unpkg_base_url=config.unpkg_base_url,
        http_timeout=config.http_timeout,
    )

    if batch:
        _run_batch(engine, batch, report_path)
    elif url:
        _run_single(engine.validate_url(url), report_path)
    elif npm_package:
        _run_single(engine.validate_npm(npm_package), report_path)
    else:
        _run_single(engine.validate_file(input_path), report_path)


def _run_single(report: ValidationReport, report_path: Optional[str]):
    """Display and optionally save a single report."""
    click.echo(report.format_human())

    if report_path:
        _write_report(report_path, report.to_dict())
        click.echo(f"\nReport saved: {report_path}")

    if not report.is_valid:
        sys.exit(1)


def _run_batch(engine: ValidationEngine, pattern: str, report_path: Optional[str]):
    """Validate multiple files matching a glob pattern."""
    start = time.time()
    reports = engine.validate_batch(pattern)
    logging_config.log_operation_timing(f"Batch validation of {pattern}", time.time() - start)

    passed = sum(1 for r in reports if r.is_valid)
    failed = len(reports) - passed

    click.echo(f"Validating {len(reports)} file(s)...")

    for report in reports:
        click.echo(report.format_human())

    click.echo(f"\n  ✅ {passed} passed")
    if failed:
        click.echo(f"  ❌ {failed} failed")

    if report_path:
        consolidated = {
            "total": len(reports),
            "passed": passed,
            "failed": failed,
            "reports": [r.to_dict() for r in reports],
        }
        _write_report(report_path, consolidated)
        click.echo(f"\nReport saved: {report_path}")

    if failed > 0:
        sys.exit(1)


def _write_report(path: str, data: dict):
    """Write a JSON report to disk."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
