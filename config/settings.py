"""
Settings — Default configuration values for SchemaSweep.

These defaults are the fallback for anything the config file, the
environment (.env) or the CLI does not provide.

Configuration precedence (highest to lowest):
  1. CLI flags (--debug, --output-dir)
  2. Environment variables (from .env file): GRAPHQL_ENDPOINT, DEBUG
  3. schemasweep.config.json
  4. DEFAULT_SETTINGS (this file)

Settings reference:
  CONFIG_FILENAME     Name of the config file looked up in the invocation directory
  GRAPHQL_ENDPOINT    Endpoint used when neither the config nor the environment sets one
  REPORTS_DIR         Directory (under the output base dir) the report is written to
  REPORT_FILENAME     Report file name
  DEBUG               Whether to print verbose output (default: False)
"""

DEFAULT_SETTINGS = {
    "CONFIG_FILENAME": "schemasweep.config.json",
    "GRAPHQL_ENDPOINT": "http://localhost:3000/graphql",
    "REPORTS_DIR": "reports",
    "REPORT_FILENAME": "schemasweep-report.json",
    "DEBUG": False,
}
