"""Tests for schemasweep.usage_scanner."""

import os

import pytest
from graphql import build_schema

from schemasweep.report_builder import build_report
from schemasweep.schema_client import build_type_field_map
from schemasweep.usage_binder import FieldUsageLocation
from schemasweep.usage_scanner import UsageScanner

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")

SMALL_SCHEMA = """
type Query {
  user: User
}

type User {
  id: ID
  email: String
}
"""


def load_fixture_schema():
    with open(os.path.join(FIXTURES_DIR, "schema.graphql")) as f:
        return build_schema(f.read())


@pytest.fixture
def small_schema():
    return build_schema(SMALL_SCHEMA)


def _write(path, text):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    return path


def test_single_query_marks_used_and_unused(tmp_path, small_schema):
    path = _write(str(tmp_path / "app.ts"), "const q = `query { user { id } }`;\n")

    scanner = UsageScanner(small_schema)
    usage_map = scanner.scan_files([path])
    report = build_report("http://x/graphql", build_type_field_map(small_schema), usage_map)

    query = report["types"]["Query"]["fieldUsages"]
    user = report["types"]["User"]["fieldUsages"]
    assert query["user"] == {"used": True, "locations": [{"filePath": path, "line": 1}]}
    assert user["id"] == {"used": True, "locations": [{"filePath": path, "line": 1}]}
    assert user["email"] == {"used": False, "locations": []}


def test_all_fields_in_literal_share_start_line(small_schema):
    code = "// header\n\nconst q = gql`\n  query {\n    user {\n      id\n      email\n    }\n  }\n`;\n"
    usage_map = {}
    UsageScanner(small_schema).scan_source("/src/q.ts", code, usage_map)
    assert usage_map["User"]["id"] == [FieldUsageLocation("/src/q.ts", 3)]
    assert usage_map["User"]["email"] == [FieldUsageLocation("/src/q.ts", 3)]


def test_fragment_only_literal_is_bound(small_schema):
    usage_map = {}
    UsageScanner(small_schema).scan_source(
        "/src/f.ts", "export const F = `fragment UserFields on User { id email }`;", usage_map
    )
    assert set(usage_map) == {"User"}
    assert set(usage_map["User"]) == {"id", "email"}


def test_parse_failure_warns_and_continues(tmp_path, small_schema, capsys):
    broken = _write(str(tmp_path / "broken.ts"), "const q = `query Broken { user { id `;\n")
    good = _write(str(tmp_path / "good.ts"), "const q = `query Ok { user { email } }`;\n")

    scanner = UsageScanner(small_schema)
    usage_map = scanner.scan_files([broken, good])

    out = capsys.readouterr().out
    assert f"Warning: Failed to parse GraphQL in {broken}" in out
    assert scanner.stats.parse_failures == [broken]
    assert usage_map == {
        "Query": {"user": [FieldUsageLocation(good, 1)]},
        "User": {"email": [FieldUsageLocation(good, 1)]},
    }


def test_parse_failure_does_not_skip_later_literals_in_same_file(small_schema):
    code = "const a = `query A { user { `;\nconst b = `query B { user { id } }`;\n"
    usage_map = {}
    scanner = UsageScanner(small_schema)
    scanner.scan_source("/src/mixed.ts", code, usage_map)
    assert usage_map["User"]["id"] == [FieldUsageLocation("/src/mixed.ts", 2)]
    assert scanner.stats.literals_found == 2
    assert scanner.stats.literals_parsed == 1


def test_file_without_literals_records_nothing(small_schema):
    usage_map = {}
    scanner = UsageScanner(small_schema)
    assert scanner.scan_source("/src/plain.ts", "const x = 1;\n", usage_map) == 0
    assert usage_map == {}
    assert scanner.stats.files_scanned == 1
    assert scanner.stats.files_with_literals == 0


def test_scan_fixture_project():
    schema = load_fixture_schema()
    project = os.path.join(FIXTURES_DIR, "project")
    users = os.path.join(project, "pages", "users.ts")
    search = os.path.join(project, "components", "Search.vue")
    rename = os.path.join(project, "components", "rename.js")

    scanner = UsageScanner(schema)
    usage_map = scanner.scan_files([users, search, rename])

    assert usage_map["User"]["name"] == [
        FieldUsageLocation(users, 14),
        FieldUsageLocation(search, 6),
        FieldUsageLocation(rename, 1),
    ]
    assert usage_map["Post"]["title"] == [
        FieldUsageLocation(users, 3),
        FieldUsageLocation(search, 6),
    ]
    assert usage_map["User"]["email"] == [FieldUsageLocation(search, 6)]
    assert usage_map["Mutation"]["updateUser"] == [FieldUsageLocation(rename, 1)]
    assert scanner.stats.parse_failures == [search]
