"""
validate-projects – check src/data/projects/*.json before a site build
 • JSON Schema (2020-12, all errors, formats)
 • image filename / existence / size rules
 • suggestions for recommended fields

Run from the site root:  validate-projects   (or  python -m projects_cli)
"""

from __future__ import annotations

import logging
from pathlib import Path

import dotenv
import typer

from projects_cli import logconf, report
from projects_cli.config import Settings
from projects_cli.runner import NoProjectFiles, run

logger = logging.getLogger(__name__)

app = typer.Typer(pretty_exceptions_show_locals=False, add_completion=False)


@app.command()
def main(
    root: Path = typer.Option(Path("."), "--root", envvar="VALIDATE_PROJECTS_ROOT",
                              help="Site root containing src/ and public/."),
    log_level: str = typer.Option("WARNING", "--log-level", envvar="VALIDATE_PROJECTS_LOG_LEVEL"),
    log_file: Path | None = typer.Option(None, "--log-file", envvar="VALIDATE_PROJECTS_LOG_FILE"),
):
    logconf.init(log_level, log_file)
    settings = Settings.for_root(root)
    logger.debug("Settings: %s", settings)

    try:
        outcome = run(settings)
    except NoProjectFiles as e:
        report.error(str(e))
        raise typer.Exit(1)
    except Exception as e:
        logger.debug("Run aborted", exc_info=True)
        report.error(f"{type(e).__name__}: {e}")
        raise typer.Exit(1)

    raise typer.Exit(outcome.exit_code)


def cli() -> None:
    dotenv.load_dotenv(dotenv.find_dotenv(usecwd=True))
    app()


if __name__ == "__main__":
    cli()
