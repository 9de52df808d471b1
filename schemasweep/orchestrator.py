"""
Sweep Orchestrator — Pipeline coordination for unused-field detection.

This module ties together the other modules into a sequential 5-step run:

  Step 1: SCHEMA INTROSPECTION
      SchemaClient POSTs the introspection query to the configured endpoint
      and builds a GraphQLSchema; build_type_field_map() lists every object
      type and its fields.

  Step 2: FILE DISCOVERY
      find_files() expands the configured query globs under the project root.

  Step 3: USAGE SCAN
      UsageScanner reads each file, plucks GraphQL literals, parses them and
      binds every field selection to its parent schema type. Literals that
      fail to parse are reported as warnings and skipped.

  Step 4: BUILD REPORT
      build_report() marks every schema field used or unused and attaches
      the occurrence locations.

  Step 5: WRITE REPORT
      OutputManager writes reports/schemasweep-report.json.

Any error other than a per-literal parse failure stops the run; no report is
written in that case.

Typical usage:
    config = load_config()
    orchestrator = SweepOrchestrator(config)
    if orchestrator.validate_config():
        results = orchestrator.run()
        orchestrator.print_summary(results)
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .file_scanner import find_files, glob_patterns
from .output_manager import OutputManager
from .report_builder import build_report, count_unused_fields
from .schema_client import SchemaClient, build_type_field_map
from .usage_scanner import UsageScanner


class SweepOrchestrator:
    """Orchestrates one SchemaSweep run.

    Attributes:
        config: The SweepConfig for this run (read-only).
        debug: Whether to enable verbose output.
        output_manager: Resolves and writes the report file.
    """

    def __init__(self, config, output_dir: Optional[str] = None, debug: bool = False):
        """Initialize the orchestrator.

        Args:
            config: A SweepConfig (see config.loader).
            output_dir: Base directory for reports/ (default: current directory).
            debug: Enable verbose output.
        """
        self.config = config
        self.debug = debug
        self.output_manager = OutputManager(output_dir)

    def validate_config(self) -> bool:
        """Check the config for missing values, printing each problem.

        Returns:
            True if the config can be used, False otherwise.
        """
        errors = self.config.validate()
        if errors:
            print("\nConfiguration Errors:")
            for err in errors:
                print(f"  - {err}")
            return False
        return True

    def run(self) -> Dict[str, Any]:
        """Execute the full 5-step pipeline.

        Returns:
            A dict containing:
                - started_at/completed_at: ISO timestamps
                - config: endpoint, project root and globs used
                - success: True if all steps completed without error
                - summary: type/field/file counts (on success)
                - report_path: Path of the written report (on success)
                - error: Error message (if success=False)
        """
        results = {
            "started_at": datetime.now(timezone.utc).isoformat(),
            "config": {
                "graphql_endpoint": self.config.graphql_endpoint,
                "project_root": self.config.project_root,
                "query_globs": list(self.config.query_globs),
            },
            "success": False,
        }

        try:
            # Step 1: Fetch the schema
            self._banner("STEP 1: SCHEMA INTROSPECTION")
            print(f"  Fetching GraphQL schema from {self.config.graphql_endpoint}")
            client = SchemaClient(
                self.config.graphql_endpoint, self.config.graphql_headers, self.debug
            )
            schema = client.fetch_schema()
            type_field_map = build_type_field_map(schema)
            field_count = sum(len(fields) for fields in type_field_map.values())
            print(f"  Object types: {len(type_field_map)} ({field_count} fields)")

            # Step 2: Expand the globs
            self._banner("STEP 2: FILE DISCOVERY")
            print("  Scanning files:")
            for pattern in glob_patterns(self.config.project_root, self.config.query_globs):
                print(f"    - {pattern}")
            files = find_files(self.config.project_root, self.config.query_globs)
            print(f"  Found {len(files)} files to inspect")

            # Step 3: Extract, parse and bind every literal
            self._banner("STEP 3: USAGE SCAN")
            scanner = UsageScanner(schema, self.debug)
            usage_map = scanner.scan_files(files)
            stats = scanner.stats
            print(f"  GraphQL literals: {stats.literals_found} ({stats.literals_parsed} parsed)")
            if stats.parse_failures:
                print(f"  Literals skipped (parse errors): {len(stats.parse_failures)}")
            print(f"  Field occurrences: {stats.occurrences}")

            # Step 4: Cross-join schema and usages
            self._banner("STEP 4: BUILD REPORT")
            report = build_report(self.config.graphql_endpoint, type_field_map, usage_map)
            unused = count_unused_fields(report)
            print(f"  Unused fields: {unused} of {field_count}")

            # Step 5: Write the report
            self._banner("STEP 5: WRITE REPORT")
            report_path = self.output_manager.write_report(report)
            print(f"  Report written to {report_path}")

            results["success"] = True
            results["report_path"] = report_path
            results["summary"] = {
                "types": len(report["types"]),
                "fields": field_count,
                "unused_fields": unused,
                "files": len(files),
                "literals": stats.literals_found,
                "parse_failures": len(stats.parse_failures),
            }

        except Exception as e:
            results["error"] = str(e)
            print(f"\n  ERROR: {e}")
            if self.debug:
                import traceback
                traceback.print_exc()

        results["completed_at"] = datetime.now(timezone.utc).isoformat()
        return results

    def print_summary(self, results: Dict):
        """Print a human-readable run summary.

        Args:
            results: The dict returned by run().
        """
        self._banner("SWEEP COMPLETE")
        print(f"Status: {'SUCCESS' if results.get('success') else 'FAILED'}")

        summary = results.get("summary", {})
        if summary:
            print(f"Report: {results.get('report_path')}")
            print(f"Total types: {summary.get('types', 0)}")
            print(f"Unused fields (all types): {summary.get('unused_fields', 0)}")

        if results.get("error"):
            print(f"Error: {results['error']}")

    @staticmethod
    def _banner(title: str):
        print(f"\n{'='*60}")
        print(title)
        print("="*60)
