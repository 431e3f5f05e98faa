"""
The validation run: enumerate project files, check each one, fold the
results.

    outcome = run(Settings.for_root("."))
    sys.exit(outcome.exit_code)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

from jsonschema import Draft202012Validator

from projects_cli import checks, report
from projects_cli.config import Settings
from projects_cli.models import FileReport, ProjectRecord, RunOutcome
from projects_cli.utils.validate import load_validator, schema_errors

logger = logging.getLogger(__name__)


class NoProjectFiles(RuntimeError):
    """Nothing to validate – treated as a failed run."""


def find_project_files(settings: Settings) -> List[str]:
    # listing order, no sort
    return [
        p.name
        for p in settings.projects_dir.iterdir()
        if p.is_file() and p.name.endswith(".json") and p.name != settings.schema_path.name
    ]


def validate_file(path: Path, validator: Draft202012Validator, settings: Settings) -> FileReport:
    """All diagnostics for one file.  OS errors propagate; bad JSON doesn't."""
    raw = path.read_bytes()
    try:
        data = json.loads(raw.decode("utf-8"))
    except ValueError as e:  # JSONDecodeError, UnicodeDecodeError
        return FileReport(file=path.name, errors=[f"invalid JSON: {e}"])

    record = ProjectRecord.from_data(data)
    rep = FileReport(
        file=path.name,
        schema_errors=schema_errors(validator, data),
        errors=checks.run_rules(record, settings),
        suggestions=checks.suggestions(record, settings.suggested_fields),
    )
    logger.debug(
        "%s: %d schema, %d rule, %d suggestion(s)",
        path.name, len(rep.schema_errors), len(rep.errors), len(rep.suggestions),
    )
    return rep


def run(settings: Settings) -> RunOutcome:
    report.info(f"Validating project JSON files in {settings.projects_dir}")

    validator = load_validator(settings.schema_path)

    files = find_project_files(settings)
    if not files:
        raise NoProjectFiles(
            f"No project JSON files found. Add files to {settings.rel(settings.projects_dir)}/."
        )
    logger.debug("Found %d project file(s)", len(files))

    outcome = RunOutcome()
    for name in files:
        rep = validate_file(settings.projects_dir / name, validator, settings)
        report.print_file(rep)
        outcome = outcome.add(rep)

    report.print_summary(outcome)
    return outcome
