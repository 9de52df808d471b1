"""
Schema Client — Fetches the live schema from a GraphQL endpoint.

This module is responsible for the only network call SchemaSweep makes:
a single POST of the standard introspection query.

Request:
    POST {graphql_endpoint}
    Headers: content-type: application/json (+ configured headers)
    Body: {"query": "<introspection query>"}

Response:
    {"data": {"__schema": {...}}, "errors": [...]?}

A non-2xx status, or a 2xx response without "data", raises SchemaFetchError.
The "data" payload is turned into a graphql-core GraphQLSchema, from which
build_type_field_map() derives the object-type/field listing used by the
report.

Pipeline context:
    Step 1 (schema introspection) of the orchestrator pipeline.
"""

from typing import Dict, List, Optional

import requests
from graphql import GraphQLSchema, build_client_schema, is_object_type

from .errors import SchemaFetchError
from .graphql_queries import INTROSPECTION_QUERY


class SchemaClient:
    """Client for the GraphQL introspection endpoint.

    Attributes:
        endpoint: URL of the GraphQL endpoint.
        headers: Extra headers sent with the request (e.g. Authorization).
        debug: If True, print verbose request/response details.
    """

    def __init__(self, endpoint: str, headers: Optional[Dict[str, str]] = None, debug: bool = False):
        self.endpoint = endpoint
        self.headers = dict(headers or {})
        self.debug = debug
        self._session = requests.Session()

    def introspect(self) -> Dict:
        """POST the introspection query and return the "data" payload.

        Returns:
            The introspection result dict (contains "__schema").

        Raises:
            SchemaFetchError: On a non-success HTTP status or a missing "data" field.
        """
        headers = {"content-type": "application/json"}
        headers.update(self.headers)

        if self.debug:
            print(f"  POST {self.endpoint} ({len(INTROSPECTION_QUERY)} chars)")
            if self.headers:
                print(f"  Extra headers: {', '.join(sorted(self.headers))}")

        response = self._session.post(
            self.endpoint,
            json={"query": INTROSPECTION_QUERY},
            headers=headers,
        )

        if not response.ok:
            raise SchemaFetchError(
                f"Failed introspection {response.status_code} {response.reason}: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            result = response.json()
        except ValueError as e:
            raise SchemaFetchError(
                f"Introspection response is not JSON: {e}",
                status_code=response.status_code,
                body=response.text,
            ) from e

        data = result.get("data") if isinstance(result, dict) else None
        if not data:
            errors = result.get("errors") if isinstance(result, dict) else None
            if errors:
                print(f"  Introspection errors: {_format_errors(errors)}")
            raise SchemaFetchError(
                "No data returned from introspection query",
                status_code=response.status_code,
                body=response.text,
                errors=errors,
            )

        return data

    def fetch_schema(self) -> GraphQLSchema:
        """Introspect the endpoint and build a client-side GraphQLSchema."""
        data = self.introspect()
        try:
            return build_client_schema(data)
        except (TypeError, KeyError) as e:
            raise SchemaFetchError(f"Invalid introspection result: {e}") from e


def build_type_field_map(schema: GraphQLSchema) -> Dict[str, List[str]]:
    """Build the Schema Type Graph: object type name -> field names.

    Introspection types (names starting with "__") and every non-object type
    (scalars, enums, unions, interfaces, input objects) are skipped. Both the
    types and their fields keep the schema's declared order.
    """
    result = {}
    for name, type_ in schema.type_map.items():
        if name.startswith("__"):
            continue
        if not is_object_type(type_):
            continue
        result[name] = list(type_.fields)
    return result


def _format_errors(errors) -> str:
    if isinstance(errors, list):
        return "; ".join(
            e.get("message", str(e)) if isinstance(e, dict) else str(e)
            for e in errors
        )
    return str(errors)
