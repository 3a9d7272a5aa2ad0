"""Tests for the command-line entry point (fake AI service)."""

import json

from conftest import make_cv_data
from core.exceptions import LLMError
from main import main
from services.container import Container


def _container(ai_service):
    return Container(cv_repository=None, auth_repository=None, ai_service=ai_service)


def test_parse_writes_output(tmp_path, ai_service):
    source = tmp_path / "cv.txt"
    source.write_text("Jane Doe, backend developer with six years of Python experience.", encoding="utf-8")
    target = tmp_path / "cv.json"

    assert main(["parse", str(source), "-o", str(target)], container=_container(ai_service)) == 0
    assert json.loads(target.read_text(encoding="utf-8"))["personalInfo"]["fullName"] == "Jane Doe"


def test_score(tmp_path, ai_service, capsys):
    cv_file = tmp_path / "cv.json"
    cv_file.write_text(json.dumps(make_cv_data()), encoding="utf-8")

    assert main(["score", str(cv_file)], container=_container(ai_service)) == 0
    output = capsys.readouterr().out
    assert "Overall: 78/100" in output
    assert "Quantify your achievements" in output


def test_score_fills_missing_sections(tmp_path, ai_service):
    """A parsed partial CV can be scored directly."""
    cv_file = tmp_path / "cv.json"
    cv_file.write_text(json.dumps({"personalInfo": {"fullName": "Jane Doe"}, "summary": "Developer"}), encoding="utf-8")
    assert main(["score", str(cv_file)], container=_container(ai_service)) == 0


def test_match(tmp_path, ai_service, capsys):
    cv_file = tmp_path / "cv.json"
    cv_file.write_text(json.dumps(make_cv_data()), encoding="utf-8")
    job_file = tmp_path / "job.txt"
    job_file.write_text("Python developer with Kubernetes and PostgreSQL experience.", encoding="utf-8")

    assert main(["match", str(cv_file), str(job_file)], container=_container(ai_service)) == 0
    assert "Missing keywords: Kubernetes" in capsys.readouterr().out


def test_missing_file(tmp_path, ai_service, capsys):
    assert main(["score", str(tmp_path / "missing.json")], container=_container(ai_service)) == 1
    assert "File not found" in capsys.readouterr().out


def test_validation_error_exit_code(tmp_path, ai_service, capsys):
    source = tmp_path / "cv.txt"
    source.write_text("too short", encoding="utf-8")
    assert main(["parse", str(source)], container=_container(ai_service)) == 1
    assert "text:" in capsys.readouterr().out
    assert ai_service.calls == []


def test_ai_error_exit_code(tmp_path, ai_service):
    ai_service.error = LLMError("Invalid JSON from model for cv_scoring")
    cv_file = tmp_path / "cv.json"
    cv_file.write_text(json.dumps(make_cv_data()), encoding="utf-8")
    assert main(["score", str(cv_file)], container=_container(ai_service)) == 1
