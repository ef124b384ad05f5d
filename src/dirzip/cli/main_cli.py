"""
Top-level CLI: zip every file and folder of a directory into its own
password-protected archive.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from dirzip.archive import EntryResult, EntryStatus, FanOutDriver, ZipCommandArchiver, enumerate_entries
from dirzip.core.config import load_settings
from dirzip.core.errors import InputError, InvalidInputError
from dirzip.credentials import resolve_password

LOG_FORMAT = "%(levelname)s %(name)s - %(message)s"

logger = logging.getLogger(__name__)

main_app = typer.Typer(help="dirzip CLI", add_completion=False)
err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("dirzip").setLevel(level.upper())


def describe_validation_error(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}" for item in error.errors()
    )


def report_result(result: EntryResult) -> None:
    """Print one line per finished entry."""
    if result.status == EntryStatus.SUCCEEDED:
        typer.echo(f"Successfully created password-protected ZIP: {result.archive.name}")
    elif result.status == EntryStatus.FAILED:
        typer.echo(
            f"Error creating ZIP file {result.archive.name} from {result.entry}: {result.error}",
            err=True,
        )


@main_app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def zip_directory(
    directory: Path = typer.Argument(..., help="Directory with the files and folders to zip"),
    jobs: Optional[int] = typer.Option(None, "--jobs", "-j", min=1, help="Number of archives to build in parallel (default: CPU count)"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Where to write the archives (default: current directory)"),
    keyring_service: Optional[str] = typer.Option(None, "--keyring-service", help="Keyring service to read the password from before prompting"),
    zip_binary: Optional[str] = typer.Option(None, "--zip-binary", help="Archiving tool to run (default: zip)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    Create one password-protected ZIP per entry of DIRECTORY.

    The password is taken from ZIP_PASSWORD, or prompted for once.
    """
    try:
        settings = load_settings(
            max_workers=jobs,
            output_dir=output_dir,
            keyring_service=keyring_service,
            zip_binary=zip_binary,
            log_level="DEBUG" if verbose else None,
        )
    except ValidationError as e:
        typer.echo(f"Invalid configuration: {describe_validation_error(e)}", err=True)
        raise typer.Exit(code=1)
    configure_logging(settings.log_level)

    try:
        entries = enumerate_entries(directory)
    except InvalidInputError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    try:
        password = resolve_password(settings)
    except InputError as e:
        typer.echo(f"Failed to read password: {e}", err=True)
        raise typer.Exit(code=1)

    driver = FanOutDriver(
        ZipCommandArchiver(settings.zip_binary),
        output_dir=settings.output_dir,
        max_workers=settings.max_workers,
        on_result=report_result,
    )
    summary = driver.run(entries, password)

    err_console.print(f"[bold]{summary.describe()}[/bold]")
    if summary.failed:
        logger.info("Failed entries: " + ", ".join(str(entry) for entry in summary.failed_entries))


def main():
    main_app()

if __name__ == "__main__":
    main()
