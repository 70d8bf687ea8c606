"""Typer CLI for scoring ACMG evidence codes."""

from typing import Optional

import structlog
import typer

from .core.evidence_codes import all_evidence_codes
from .core.exceptions import EvidenceParsingError
from .core.initialization import configure_logging
from .models.evidence import Category, Evidence
from .services.acmg_classifier import ACMGClassifier, evidence_points
from .services.report_service import format_json, format_report

__version__ = "0.1.0"

app = typer.Typer(name="acmg", help="ACMG evidence scoring and classification.", no_args_is_help=True)
logger = structlog.get_logger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"acmg {__version__}")
        raise typer.Exit()


@app.callback()
def _cli_entry(
    version: bool = typer.Option(
        False,
        "--version",
        help="Print the version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override ACMG_LOG_LEVEL."),
) -> None:
    configure_logging(level=log_level)


@app.command("info")
def info(
    acmg_evidence: str = typer.Argument(..., help="ACMG evidence string, e.g 'PVS1, PM2_Supporting'"),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON output."),
) -> None:
    """Calculates ACMG score and classifies pathogenicity from ACMG evidence codes."""

    try:
        result = ACMGClassifier().classify_evidence(acmg_evidence)
    except EvidenceParsingError as exc:
        logger.debug("Evidence parsing failed", token=exc.token, error=str(exc))
        typer.secho(str(exc), err=True)
        raise typer.Exit(code=1)

    typer.echo(format_json(result) if json_output else format_report(result))


@app.command("codes")
def codes(
    category: Optional[Category] = typer.Option(None, "--category", case_sensitive=False,
                                                help="Only list one category."),
) -> None:
    """List the ACMG evidence codes with their default strength and points."""

    for evidence_code in all_evidence_codes(category):
        signed = evidence_points(Evidence(evidence_code=evidence_code))
        typer.echo(f"{evidence_code.key:>4} {evidence_code.strength.value:<10} {signed:>2} "
                   f"'{evidence_code.description}'")


if __name__ == "__main__":
    app()
