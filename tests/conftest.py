import json
import logging
import shutil
from pathlib import Path

import pytest

from projects_cli.config import Settings

SCHEMA = Path(__file__).parents[1] / "schemas" / "project.schema.json"


def good_project(**extra):
    data = {
        "title": "Weather Station",
        "studentName": "Sam Lee",
        "description": "A solar-powered weather station.",
        "projectUrl": "https://example.org/weather",
        "githubUrl": "https://github.com/example/weather",
        "tags": ["iot", "python"],
    }
    data.update(extra)
    return data


def write_sized(path: Path, size: int) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        f.truncate(size)
    return path


@pytest.fixture
def site(tmp_path):
    """Empty site layout with the bundled schema installed."""
    projects = tmp_path / "src" / "data" / "projects"
    projects.mkdir(parents=True)
    (tmp_path / "public" / "images").mkdir(parents=True)
    shutil.copy(SCHEMA, projects / "project.schema.json")
    return Settings.for_root(tmp_path)


@pytest.fixture
def add_project(site):
    def _add(name, data):
        p = site.projects_dir / name
        p.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
        return p
    return _add


@pytest.fixture(autouse=True)
def _reset_logging():
    """logconf.init() installs root handlers bound to the runner's streams."""
    yield
    root = logging.getLogger()
    for h in root.handlers[:]:
        if type(h) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(logging.WARNING)
