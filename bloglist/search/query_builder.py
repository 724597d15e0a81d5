"""
Search query builder - weighted multi-field Lucene query for post search.
Challenge: Rank exact phrase > whole token > prefix match across every field,
while keeping results inside one blog.

Output is raw query_string syntax, e.g. for "hello world" on {"title": 3}:
    +parentID:10 +(title:"hello world"^18 title:hello^12 title:hello* title:world^12 title:world*)
"""

import re
from collections.abc import Mapping

# Body fields 2, title/slug 3, tags/categories 1
DEFAULT_FIELD_WEIGHTS: dict[str, int] = {
    "markdown": 2,
    "rich_text": 2,
    "title": 3,
    "tags": 1,
    "categories": 1,
    "url_name": 3,
}

PARENT_FIELD = "parentID"

# Class multipliers, applied on top of the doubled field weight
PHRASE_MULTIPLIER = 3
TOKEN_MULTIPLIER = 2
BASE_WEIGHT_FACTOR = 2

# Lucene query_string reserved characters (&& and || are covered by & and |)
_RESERVED = re.compile(r'([+\-=&|><!(){}\[\]^"~*?:\\/])')
_OPERATOR_WORDS = frozenset({"AND", "OR", "NOT"})


def tokenize(term: str) -> list[str]:
    """Split on whitespace, dropping empty tokens."""
    return term.split()


def escape_token(token: str) -> str:
    """Escape reserved characters; a bare AND/OR/NOT would parse as an operator."""
    if token in _OPERATOR_WORDS:
        return "\\" + token
    return _RESERVED.sub(r"\\\1", token)


def escape_phrase(term: str) -> str:
    """Inside a quoted phrase only the quote and backslash are special."""
    return term.replace("\\", "\\\\").replace('"', '\\"')


def phrase_boost(weight: int) -> int:
    return weight * BASE_WEIGHT_FACTOR * PHRASE_MULTIPLIER


def token_boost(weight: int) -> int:
    return weight * BASE_WEIGHT_FACTOR * TOKEN_MULTIPLIER


def build_field_clauses(term: str, tokens: list[str], field_weights: Mapping[str, int]) -> list[str]:
    """
    Clauses for every field: the full phrase first, then for each token an
    exact match followed by a prefix match. Prefix clauses carry no boost.
    """
    phrase = escape_phrase(term)
    escaped = [escape_token(t) for t in tokens]
    clauses: list[str] = []
    for field, weight in field_weights.items():
        clauses.append(f'{field}:"{phrase}"^{phrase_boost(weight)}')
        for token in escaped:
            clauses.append(f"{field}:{token}^{token_boost(weight)}")
            clauses.append(f"{field}:{token}*")
    return clauses


def build_search_query(
    term: str,
    parent_id: int | str,
    field_weights: Mapping[str, int] | None = None,
) -> str:
    """
    Build the raw query for a search term, scoped to children of parent_id.
    Raises ValueError for an empty or whitespace-only term; callers treat
    such a term as absent.
    """
    if term is None or not term.strip():
        raise ValueError("search term must contain at least one non-whitespace character")
    weights = DEFAULT_FIELD_WEIGHTS if field_weights is None else field_weights
    clauses = build_field_clauses(term, tokenize(term), weights)
    return f"+{PARENT_FIELD}:{parent_id} +({' '.join(clauses)})"
