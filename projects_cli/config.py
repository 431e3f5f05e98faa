"""
Run settings – where the project data, schema and images live.

All paths hang off a single root (the site checkout).  Defaults match the
site layout:

    <root>/src/data/projects/*.json
    <root>/src/data/projects/project.schema.json
    <root>/public/images/
"""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

from pydantic import BaseModel, Field

SCHEMA_NAME = "project.schema.json"
MAX_IMAGE_BYTES = 10 * 1024 * 1024  # 10MB
SUGGESTED_FIELDS = ("projectUrl", "githubUrl", "tags")


class Settings(BaseModel):
    root: Path
    projects_dir: Path
    images_dir: Path
    schema_path: Path
    max_image_bytes: int = Field(MAX_IMAGE_BYTES, ge=0)
    suggested_fields: Tuple[str, ...] = SUGGESTED_FIELDS

    @classmethod
    def for_root(cls, root: Path | str = ".") -> "Settings":
        root = Path(root).resolve()
        projects = root / "src" / "data" / "projects"
        return cls(
            root=root,
            projects_dir=projects,
            images_dir=root / "public" / "images",
            schema_path=projects / SCHEMA_NAME,
        )

    def rel(self, path: Path) -> str:
        """Path relative to root for messages (posix separators)."""
        try:
            return path.relative_to(self.root).as_posix()
        except ValueError:
            return path.as_posix()
