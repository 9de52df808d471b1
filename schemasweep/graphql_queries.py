"""
GraphQL Query Definitions — The introspection query sent to the endpoint.

INTROSPECTION_QUERY is graphql-core's canonical introspection query, the
same document GraphiQL and most GraphQL tooling send. Its response is what
build_client_schema() expects.

Pipeline context:
  Used in Step 1 of the orchestrator pipeline by SchemaClient.fetch_schema().
"""

from graphql import get_introspection_query

INTROSPECTION_QUERY = get_introspection_query()
