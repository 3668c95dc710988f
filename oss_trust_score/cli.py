"""
Command-line interface for OSS Trust Score.
"""

import logging
from pathlib import Path

import typer
from rich.console import Console

from oss_trust_score.config import set_verify_ssl
from oss_trust_score.core import process_file
from oss_trust_score.http_client import close_http_client
from oss_trust_score.logger import configure_logging

logger = logging.getLogger(__name__)

# --- Typer App ---
app = typer.Typer(add_completion=False)
error_console = Console(stderr=True)


@app.command()
def score(
    input_file: Path = typer.Argument(
        ...,
        help="Text file with one GitHub repository URL or npm package URL per line.",
    ),
    output_file: Path = typer.Argument(
        ...,
        help="NDJSON file that receives one evaluation record per input line (truncated first).",
    ),
    insecure: bool = typer.Option(
        False,
        "--insecure",
        help="Disable SSL certificate verification for HTTPS requests.",
    ),
):
    """Score the packages listed in INPUT_FILE and write the results to OUTPUT_FILE."""
    configure_logging()
    set_verify_ssl(not insecure)

    try:
        count = process_file(input_file, output_file)
    except Exception as e:
        logger.error("Aborting batch: %s", e)
        error_console.print(f"Error: {e}", markup=False, highlight=False)
        raise typer.Exit(code=1) from None
    finally:
        close_http_client()

    logger.info("Wrote %d record(s) to %s", count, output_file)


if __name__ == "__main__":
    app()
