"""
Literal Extractor — Plucks GraphQL documents out of raw source text.

This is a keyword heuristic, not a lexer. Every backtick-delimited string in
the file is a candidate; a candidate is kept when its trimmed text contains
"query ", "mutation " or "fragment " (keyword plus a space).

Known limitations, kept on purpose so reports stay comparable across runs:
  - Nested or escaped backticks and ${...} interpolation are not understood.
  - Anonymous operations written as "query{" or "{ ... }" are missed.
  - Any backtick string that merely contains one of the keywords is kept;
    the parser rejects the ones that are not GraphQL.

Pipeline context:
    Used per file in Step 3 (usage scan). Each LiteralSpan is handed to
    parse_literal() and then to the UsageBinder.
"""

import re
from dataclasses import dataclass
from typing import Iterator

BACKTICK_LITERAL = re.compile(r"`([\s\S]*?)`")

OPERATION_KEYWORDS = ("query ", "mutation ", "fragment ")


@dataclass(frozen=True)
class LiteralSpan:
    """A candidate GraphQL literal.

    Attributes:
        source: Trimmed text between the backticks.
        index: Offset of the opening backtick in the file text.
    """

    source: str
    index: int


def pluck_graphql_strings(code: str) -> Iterator[LiteralSpan]:
    """Yield every backtick literal in code that looks like a GraphQL operation."""
    for match in BACKTICK_LITERAL.finditer(code):
        trimmed = match.group(1).strip()
        if any(keyword in trimmed for keyword in OPERATION_KEYWORDS):
            yield LiteralSpan(source=trimmed, index=match.start())


def index_to_line(code: str, index: int) -> int:
    """1-indexed line number of the character at index."""
    return code.count("\n", 0, index) + 1
