#!/usr/bin/env python3
"""
SchemaSweep — Entry Point.

Finds GraphQL schema fields that no query, mutation or fragment in a
codebase selects. It reads schemasweep.config.json from the current
directory, introspects the configured endpoint, scans the configured
files and writes reports/schemasweep-report.json.

The pipeline (managed by SweepOrchestrator) performs 5 steps:
  1. Introspect the GraphQL endpoint
  2. Expand the query globs under the project root
  3. Extract, parse and bind every GraphQL literal
  4. Build the used/unused report
  5. Write the report JSON

Usage:
    python run.py                   # Scan using ./schemasweep.config.json
    python run.py --debug           # Verbose output
    python run.py --config path     # Use an alternate config file
    python run.py --env /path       # Use an alternate .env file
    python run.py --output-dir dir  # Write reports/ under dir
    python run.py --version         # Show version
"""

import os
import sys
import argparse
from pathlib import Path

from dotenv import load_dotenv

from config import load_config
from schemasweep import SchemaSweepError, SweepOrchestrator, __version__

VERSION = __version__


def load_environment(env_file: str):
    """Load a .env file if present so GRAPHQL_ENDPOINT / DEBUG can come from it."""
    env_path = Path(env_file)
    if env_path.exists():
        load_dotenv(env_path)
        print(f"Loaded environment from: {env_file}")


def main(argv=None) -> int:
    """Parse CLI arguments and run the sweep.

    Returns:
        Process exit status: 0 on success, 1 on any unrecovered error.
    """
    parser = argparse.ArgumentParser(
        description="SchemaSweep - Find unused GraphQL schema fields in a codebase"
    )
    parser.add_argument("--config", "-c", default=None, help="Path to schemasweep.config.json")
    parser.add_argument("--env", "-e", default="./.env", help="Path to .env file")
    parser.add_argument("--output-dir", "-o", default=None, help="Directory to write reports/ into")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    parser.add_argument("--version", "-v", action="store_true", help="Show version and exit")

    args = parser.parse_args(argv)

    if args.version:
        print(f"schemasweep {VERSION}")
        return 0

    print(f"\n{'='*60}")
    print(f"SCHEMASWEEP v{VERSION}")
    print("="*60)

    load_environment(args.env)
    debug = args.debug or os.getenv("DEBUG", "false").lower() == "true"

    try:
        config = load_config(args.config)
    except SchemaSweepError as e:
        print(f"\n  ERROR: {e}")
        return 1

    print(f"Config: {config.config_path}")
    print(f"Project root: {config.project_root}")

    orchestrator = SweepOrchestrator(config, output_dir=args.output_dir, debug=debug)

    # Validate required configuration before any network or file activity
    if not orchestrator.validate_config():
        return 1

    results = orchestrator.run()
    orchestrator.print_summary(results)

    return 0 if results.get("success") else 1


if __name__ == "__main__":
    sys.exit(main())
