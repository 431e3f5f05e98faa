"""
Content rules that JSON Schema can't express: deprecated fields, image
references on disk, recommended fields.

Each rule returns a list of messages; an empty list means the rule passed.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, List

from projects_cli.config import Settings
from projects_cli.models import ProjectRecord

logger = logging.getLogger(__name__)

IMAGE_FIELDS = ("projectImage", "studentPhoto")
RENAMED_MSG = "'imageUrl' has been renamed to 'projectImage'. Please update your JSON."


def deprecated_fields(record: ProjectRecord) -> List[str]:
    return [RENAMED_MSG] if record.imageUrl else []


def _mb(size: int) -> float:
    # half-up to one decimal (10.25 -> 10.3)
    return math.floor(size / 1024 / 1024 * 10 + 0.5) / 10


def image_ref(field: str, value: str | None, settings: Settings) -> List[str]:
    if not value:
        return []
    if "/" in value or "\\" in value:
        return [f"{field} should be a filename only, no path (got '{value}')"]

    path = settings.images_dir / value
    if not path.exists():
        return [f"image not found at {settings.rel(settings.images_dir)}/{value}"]

    size = path.stat().st_size
    logger.debug("%s -> %s (%d bytes)", field, path, size)
    if size > settings.max_image_bytes:
        limit = _mb(settings.max_image_bytes)
        return [f"image is large ({_mb(size):g}MB). Please keep < {limit:g}MB."]
    return []


def image_fields(record: ProjectRecord, settings: Settings) -> List[str]:
    out: List[str] = []
    for field in IMAGE_FIELDS:
        out += image_ref(field, getattr(record, field), settings)
    return out


def suggestions(record: ProjectRecord, keys: Iterable[str]) -> List[str]:
    return [f'suggestion: consider adding "{k}"' for k in keys if not record.has(k)]


def run_rules(record: ProjectRecord, settings: Settings) -> List[str]:
    """All error-level content rules, in report order."""
    return deprecated_fields(record) + image_fields(record, settings)
