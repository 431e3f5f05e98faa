# tests/test_models.py
from projects_cli.models import FileReport, ProjectRecord, RunOutcome


def test_record_tracks_presence():
    rec = ProjectRecord.from_data({"title": "x", "tags": None, "projectUrl": "https://a.b"})
    assert rec.has("tags")          # present, even though null
    assert rec.has("projectUrl")
    assert rec.has("title")         # extra fields are kept
    assert not rec.has("githubUrl")


def test_record_drops_non_string_images():
    rec = ProjectRecord.from_data({"projectImage": 42, "studentPhoto": "me.jpg"})
    assert rec.projectImage is None
    assert rec.studentPhoto == "me.jpg"


def test_non_object_document_is_empty_record():
    rec = ProjectRecord.from_data(["not", "an", "object"])
    assert not rec.has("tags")
    assert rec.projectImage is None


def test_suggestions_do_not_invalidate():
    assert FileReport(file="a.json", suggestions=['suggestion: consider adding "tags"']).valid
    assert not FileReport(file="a.json", errors=["boom"]).valid
    assert not FileReport(file="a.json", schema_errors=["(root) bad"]).valid


def test_outcome_folds_reports():
    outcome = RunOutcome()
    assert not outcome.failed and outcome.exit_code == 0

    ok = outcome.add(FileReport(file="a.json"))
    bad = ok.add(FileReport(file="b.json", errors=["image not found"]))

    assert ok.count == 1 and not ok.failed
    assert bad.failed and bad.exit_code == 1
    assert outcome.count == 0  # add() doesn't mutate
