"""Tests for schemasweep.orchestrator.SweepOrchestrator."""

import json
import os
from unittest.mock import patch, MagicMock

from graphql import build_schema

from config import SweepConfig
from schemasweep.errors import SchemaFetchError
from schemasweep.orchestrator import SweepOrchestrator

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")
PROJECT_DIR = os.path.join(FIXTURES_DIR, "project")
ENDPOINT = "http://localhost:3000/graphql"


def load_schema():
    with open(os.path.join(FIXTURES_DIR, "schema.graphql")) as f:
        return build_schema(f.read())


def _make_config(**overrides):
    values = {
        "project_root": PROJECT_DIR,
        "graphql_endpoint": ENDPOINT,
        "query_globs": ["pages/**/*.ts", "components/**/*.{vue,js}"],
        "graphql_headers": {"Authorization": "Bearer test"},
    }
    values.update(overrides)
    return SweepConfig(**values)


def _run(tmp_path, config=None, schema=None, fetch_error=None):
    client = MagicMock()
    if fetch_error:
        client.fetch_schema.side_effect = fetch_error
    else:
        client.fetch_schema.return_value = schema or load_schema()

    with patch("schemasweep.orchestrator.SchemaClient", return_value=client) as client_cls:
        orchestrator = SweepOrchestrator(config or _make_config(), output_dir=str(tmp_path))
        results = orchestrator.run()
    return orchestrator, results, client_cls


def _report_path(tmp_path):
    return os.path.join(str(tmp_path), "reports", "schemasweep-report.json")


def test_run_writes_report(tmp_path):
    _, results, client_cls = _run(tmp_path)

    assert results["success"] is True
    assert results["report_path"] == _report_path(tmp_path)
    client_cls.assert_called_once_with(ENDPOINT, {"Authorization": "Bearer test"}, False)

    with open(_report_path(tmp_path)) as f:
        report = json.load(f)

    assert report["graphqlEndpoint"] == ENDPOINT
    assert set(report["types"]) == {"Query", "Mutation", "User", "Post", "Comment"}

    user = report["types"]["User"]["fieldUsages"]
    assert user["name"]["used"] is True
    assert len(user["name"]["locations"]) == 3
    assert user["role"] == {"used": False, "locations": []}

    comment = report["types"]["Comment"]["fieldUsages"]
    assert all(not usage["used"] for usage in comment.values())


def test_run_summary_counts(tmp_path):
    _, results, _ = _run(tmp_path)
    summary = results["summary"]
    assert summary["types"] == 5
    assert summary["files"] == 3
    assert summary["parse_failures"] == 1
    # Query.user, Query.node, Mutation.deleteUser, User.role, Post.id, Post.body,
    # Comment.id, Comment.text
    assert summary["unused_fields"] == 8


def test_run_twice_yields_identical_types(tmp_path):
    _run(tmp_path / "first")
    _run(tmp_path / "second")
    with open(_report_path(tmp_path / "first")) as f:
        first = json.load(f)
    with open(_report_path(tmp_path / "second")) as f:
        second = json.load(f)
    assert json.dumps(first["types"], indent=2) == json.dumps(second["types"], indent=2)


def test_fetch_failure_writes_no_report(tmp_path):
    _, results, _ = _run(
        tmp_path, fetch_error=SchemaFetchError("Failed introspection 500", status_code=500)
    )
    assert results["success"] is False
    assert "Failed introspection 500" in results["error"]
    assert not os.path.exists(_report_path(tmp_path))


def test_unexpected_error_is_caught(tmp_path):
    _, results, _ = _run(tmp_path, fetch_error=RuntimeError("boom"))
    assert results["success"] is False
    assert results["error"] == "boom"
    assert "completed_at" in results


def test_validate_config_prints_errors(capsys):
    orchestrator = SweepOrchestrator(_make_config(query_globs=[]))
    assert orchestrator.validate_config() is False
    assert "queryGlobs must contain at least one pattern" in capsys.readouterr().out


def test_validate_config_valid():
    assert SweepOrchestrator(_make_config()).validate_config() is True


def test_print_summary(tmp_path, capsys):
    orchestrator, results, _ = _run(tmp_path)
    capsys.readouterr()
    orchestrator.print_summary(results)
    out = capsys.readouterr().out
    assert "Status: SUCCESS" in out
    assert "Total types: 5" in out
    assert "Unused fields (all types): 8" in out


def test_print_summary_failure(capsys):
    orchestrator = SweepOrchestrator(_make_config())
    orchestrator.print_summary({"success": False, "error": "No data returned"})
    out = capsys.readouterr().out
    assert "Status: FAILED" in out
    assert "Error: No data returned" in out
