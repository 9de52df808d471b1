"""Tests for schemasweep.operation_parser."""

import pytest
from graphql import DocumentNode, OperationDefinitionNode, FragmentDefinitionNode

from schemasweep.errors import LiteralParseError
from schemasweep.operation_parser import parse_literal


def test_parse_operation():
    document = parse_literal("query GetUser { user(id: 1) { id } }")
    assert isinstance(document, DocumentNode)
    assert isinstance(document.definitions[0], OperationDefinitionNode)


def test_parse_fragment_only_document():
    document = parse_literal("fragment UserFields on User { id name }")
    assert isinstance(document.definitions[0], FragmentDefinitionNode)


def test_parse_unbalanced_braces_raises_literal_parse_error():
    source = "query Broken { users { id "
    with pytest.raises(LiteralParseError) as exc_info:
        parse_literal(source)
    assert exc_info.value.source == source
    assert "Syntax Error" in str(exc_info.value)


def test_parse_non_graphql_text_raises_literal_parse_error():
    with pytest.raises(LiteralParseError):
        parse_literal("Run the query again")
