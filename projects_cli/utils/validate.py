"""
Schema helpers for project files.

Usage (inside other modules):
    from projects_cli.utils.validate import load_validator, schema_errors
    validator = load_validator(settings.schema_path)
    for line in schema_errors(validator, data): ...
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

logger = logging.getLogger(__name__)

ROOT_MARKER = "(root)"


def _load_schema(path: Path) -> Dict[str, Any]:
    return json.loads(Path(path).read_text(encoding="utf-8"))


def load_validator(path: Path) -> Draft202012Validator:
    """Compile the schema at `path` (2020-12, formats enforced).

    Raises on a missing/unparseable file and on a schema that fails the
    metaschema (jsonschema.SchemaError).
    """
    schema = _load_schema(path)
    Draft202012Validator.check_schema(schema)
    logger.debug("Loaded schema %s", path)
    return Draft202012Validator(schema, format_checker=Draft202012Validator.FORMAT_CHECKER)


def instance_path(err: ValidationError) -> str:
    """JSON pointer to the failing value, '(root)' for the document itself."""
    parts = [str(p).replace("~", "~0").replace("/", "~1") for p in err.absolute_path]
    return "/" + "/".join(parts) if parts else ROOT_MARKER


def schema_errors(validator: Draft202012Validator, data: Any) -> List[str]:
    """Every violation in `data`, one '<path> <message>' line each."""
    errs = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
    return [f"{instance_path(e)} {e.message}" for e in errs]
