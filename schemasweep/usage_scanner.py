"""
Usage Scanner — Runs extract -> parse -> bind over every matched file.

For each file (read as UTF-8, strictly one at a time):
  1. pluck_graphql_strings() finds candidate literals
  2. parse_literal() parses each one; a LiteralParseError is printed as a
     warning and the literal is skipped
  3. bind_usages() records every field selection into the shared UsageMap,
     tagged with the file path and the literal's start line

Nothing from a file is kept after its scan apart from the usage records.

Pipeline context:
    Step 3 (usage scan) of the orchestrator pipeline. The resulting UsageMap
    feeds build_report() in Step 4.
"""

from dataclasses import dataclass, field
from typing import Iterable, List

from graphql import GraphQLSchema

from .errors import LiteralParseError
from .literal_extractor import index_to_line, pluck_graphql_strings
from .operation_parser import parse_literal
from .usage_binder import FieldUsageLocation, UsageMap, bind_usages


@dataclass
class ScanStats:
    files_scanned: int = 0
    files_with_literals: int = 0
    literals_found: int = 0
    literals_parsed: int = 0
    parse_failures: List[str] = field(default_factory=list)
    occurrences: int = 0


class UsageScanner:
    """Builds the UsageMap for a set of source files.

    Attributes:
        schema: The introspected schema used to resolve parent types.
        debug: If True, prints per-file and per-literal details.
        stats: Counters for the run summary.
    """

    def __init__(self, schema: GraphQLSchema, debug: bool = False):
        self.schema = schema
        self.debug = debug
        self.stats = ScanStats()

    def scan_files(self, files: Iterable[str]) -> UsageMap:
        """Scan every file in order and return the accumulated usages."""
        usage_map: UsageMap = {}
        for file_path in files:
            with open(file_path, encoding="utf-8", errors="replace") as f:
                code = f.read()
            self.scan_source(file_path, code, usage_map)
        return usage_map

    def scan_source(self, file_path: str, code: str, usage_map: UsageMap) -> int:
        """Scan one file's text into usage_map.

        Returns:
            The number of occurrences recorded for this file.
        """
        self.stats.files_scanned += 1
        recorded = 0
        found_any = False

        for span in pluck_graphql_strings(code):
            found_any = True
            self.stats.literals_found += 1

            try:
                document = parse_literal(span.source)
            except LiteralParseError as e:
                self.stats.parse_failures.append(file_path)
                print(f"  Warning: Failed to parse GraphQL in {file_path}: {e}")
                continue

            self.stats.literals_parsed += 1
            location = FieldUsageLocation(file_path, index_to_line(code, span.index))
            count = bind_usages(self.schema, document, usage_map, location)
            recorded += count

            if self.debug:
                print(f"  {file_path}:{location.line} -> {count} field(s)")

        if found_any:
            self.stats.files_with_literals += 1
        self.stats.occurrences += recorded
        return recorded
