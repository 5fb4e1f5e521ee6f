"""Tests for the command-line interface."""

import json
from unittest.mock import Mock, patch

import pytest
from reviewsense.cli import main


@pytest.fixture
def dataset(tmp_path):
    path = tmp_path / "reviews_test.tsv"
    path.write_text("id\ttext\n1\tGreat sound quality\n", encoding="utf-8")
    return path


def _session(status_code=200, body=None):
    response = Mock(status_code=status_code)
    response.json.return_value = body
    session = Mock()
    session.post.return_value = response
    return session


def test_load_command(dataset, capsys):
    main(["load", "--dataset", str(dataset)])

    out = capsys.readouterr().out
    assert "TSV loaded" in out
    assert "1 review loaded" in out


def test_load_command_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["load", "--dataset", str(tmp_path / "missing.tsv")])

    assert excinfo.value.code == 1
    assert "Failed to load TSV" in capsys.readouterr().out


@patch('reviewsense.services.sentiment_client.requests.Session')
def test_analyze_command_exports(mock_session_cls, dataset, tmp_path, capsys):
    mock_session_cls.return_value = _session(body=[[{"label": "POSITIVE", "score": 0.99}]])
    out_file = tmp_path / "result.json"

    main(["analyze", "--dataset", str(dataset), "--token", "", "--seed", "1", "--out", str(out_file)])

    out = capsys.readouterr().out
    assert "Great sound quality" in out
    assert "Positive" in out
    assert "Score: 0.990" in out

    data = json.loads(out_file.read_text(encoding="utf-8"))
    assert data["result"] == {"label": "POSITIVE", "score": 0.99, "verdict": "positive"}
    assert data["error"] is None
    assert data["metadata"]["export_timestamp"]


@patch('reviewsense.services.sentiment_client.requests.Session')
def test_analyze_command_api_error(mock_session_cls, dataset, capsys):
    mock_session_cls.return_value = _session(status_code=429, body={"error": "Rate limit reached"})

    with pytest.raises(SystemExit):
        main(["analyze", "--dataset", str(dataset), "--token", ""])

    out = capsys.readouterr().out
    assert "Rate limited (429)" in out
    assert "Rate limit reached" in out


def test_normalize_command(tmp_path, capsys):
    raw_file = tmp_path / "response.json"
    raw_file.write_text(json.dumps([[{"label": "NEGATIVE", "score": 0.51}]]), encoding="utf-8")

    main(["normalize", str(raw_file)])

    result = json.loads(capsys.readouterr().out)
    assert result == {"label": "NEGATIVE", "score": 0.51, "verdict": "negative"}


def test_normalize_command_no_result(tmp_path, capsys):
    raw_file = tmp_path / "response.json"
    raw_file.write_text("[[]]", encoding="utf-8")

    main(["normalize", str(raw_file)])

    assert json.loads(capsys.readouterr().out) is None


def test_no_command_prints_help(capsys):
    main([])
    assert "usage" in capsys.readouterr().out.lower()
