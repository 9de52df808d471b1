"""
Operation Parser — Turns a plucked literal into a GraphQL document.

parse_literal() wraps graphql-core's parse() and converts syntax errors into
LiteralParseError. The scanner catches that error per literal, so one bad
literal never stops the rest of the file or the run.
"""

from graphql import DocumentNode, GraphQLError, parse

from .errors import LiteralParseError


def parse_literal(source: str) -> DocumentNode:
    """Parse one literal.

    Raises:
        LiteralParseError: If the text is not a valid GraphQL document.
    """
    try:
        # Locations are not needed; every field in a literal shares its start line.
        return parse(source, no_location=True)
    except GraphQLError as e:
        raise LiteralParseError(source, e) from e
