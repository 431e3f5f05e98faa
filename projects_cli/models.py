# projects_cli/models.py
from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProjectRecord(BaseModel):
    """The fields of a project file the content rules look at.

    Types are enforced by the JSON schema, so a value of the wrong type is
    dropped here rather than rejected twice.
    """

    model_config = ConfigDict(extra="allow")

    projectImage: str | None = None
    studentPhoto: str | None = None
    imageUrl: Any = None
    projectUrl: Any = None
    githubUrl: Any = None
    tags: Any = None

    @field_validator("projectImage", "studentPhoto", mode="before")
    @classmethod
    def _strings_only(cls, v: Any) -> str | None:
        return v if isinstance(v, str) else None

    @classmethod
    def from_data(cls, data: Any) -> "ProjectRecord":
        return cls.model_validate(data if isinstance(data, dict) else {})

    def has(self, key: str) -> bool:
        """True if `key` was present in the source document (even if null)."""
        return key in self.model_fields_set or key in (self.model_extra or {})


class FileReport(BaseModel):
    file: str
    schema_errors: List[str] = []
    errors: List[str] = []
    suggestions: List[str] = []

    @property
    def valid(self) -> bool:
        return not (self.schema_errors or self.errors)


class RunOutcome(BaseModel):
    reports: List[FileReport] = Field(default_factory=list)

    def add(self, report: FileReport) -> "RunOutcome":
        return RunOutcome(reports=[*self.reports, report])

    @property
    def failed(self) -> bool:
        return any(not r.valid for r in self.reports)

    @property
    def count(self) -> int:
        return len(self.reports)

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0
