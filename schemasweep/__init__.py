"""
SchemaSweep — Finds GraphQL schema fields that no query in a codebase uses.

Each module handles one concern of the pipeline:

  orchestrator.py       Pipeline coordination (Steps 1-5)
  schema_client.py      Introspection request and type/field listing (Step 1)
  graphql_queries.py    The introspection query (Step 1)
  file_scanner.py       Query glob expansion (Step 2)
  literal_extractor.py  Backtick literal plucking (Step 3)
  operation_parser.py   Literal -> GraphQL document (Step 3)
  usage_binder.py       Field -> parent type binding (Step 3)
  usage_scanner.py      Per-file extract/parse/bind loop (Step 3)
  report_builder.py     Used/unused matrix (Step 4)
  output_manager.py     Report file writing (Step 5)
  errors.py             Exception types
"""

from .errors import (
    SchemaSweepError,
    ConfigNotFoundError,
    ConfigError,
    SchemaFetchError,
    LiteralParseError,
)
from .orchestrator import SweepOrchestrator
from .schema_client import SchemaClient, build_type_field_map
from .literal_extractor import LiteralSpan, pluck_graphql_strings, index_to_line
from .operation_parser import parse_literal
from .usage_binder import FieldUsageLocation, UsageBinder, bind_usages
from .usage_scanner import UsageScanner
from .report_builder import build_report, count_unused_fields
from .output_manager import OutputManager

__version__ = "0.1.0"
