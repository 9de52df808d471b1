"""
Report Builder — Cross-joins the schema field list with the usage map.

Output format (returned by build_report()):
    {
      "generatedAt": "2026-10-19T12:00:00.000Z",
      "graphqlEndpoint": "http://localhost:3000/graphql",
      "types": {
        "User": {
          "fields": ["id", "email"],
          "fieldUsages": {
            "id":    {"used": true,  "locations": [{"filePath": "...", "line": 3}]},
            "email": {"used": false, "locations": []}
          }
        }
      }
    }

The report is total over the schema: every field of every object type
appears exactly once, and nothing outside the schema is added (usages of
fields or types the schema does not declare are dropped here).
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .usage_binder import UsageMap


def build_types_section(type_field_map: Dict[str, List[str]], usage_map: UsageMap) -> Dict[str, Any]:
    """Build the "types" part of the report."""
    types = {}
    for type_name, fields in type_field_map.items():
        type_usages = usage_map.get(type_name, {})
        field_usages = {}
        for field_name in fields:
            locations = [loc.to_dict() for loc in type_usages.get(field_name, [])]
            field_usages[field_name] = {
                "used": len(locations) > 0,
                "locations": locations,
            }
        types[type_name] = {
            "fields": list(fields),
            "fieldUsages": field_usages,
        }
    return types


def build_report(
    graphql_endpoint: str,
    type_field_map: Dict[str, List[str]],
    usage_map: UsageMap,
    generated_at: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Build the full report dict.

    Args:
        graphql_endpoint: Endpoint the schema was fetched from.
        type_field_map: Object type name -> field names (schema order).
        usage_map: Occurrences collected by the usage scan.
        generated_at: Timestamp to stamp the report with (defaults to now, UTC).
    """
    generated_at = generated_at or datetime.now(timezone.utc)
    return {
        "generatedAt": _iso_timestamp(generated_at),
        "graphqlEndpoint": graphql_endpoint,
        "types": build_types_section(type_field_map, usage_map),
    }


def count_unused_fields(report: Dict[str, Any]) -> int:
    return sum(
        1
        for type_entry in report["types"].values()
        for usage in type_entry["fieldUsages"].values()
        if not usage["used"]
    )


def _iso_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
