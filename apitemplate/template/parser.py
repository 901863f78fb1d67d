"""Tokenizers for the path and query regions of a template."""

from apitemplate.exceptions import (
    EmptyVariableNameError,
    MalformedQueryError,
    UnbalancedBracesError,
)
from apitemplate.template.models import PathSegment, QueryParam

# Characters stripped from both ends of query wire and variable names
QUERY_TRIM_CHARS = "{} "

# Shortest remaining query text that can hold a "k=v" clause
MIN_QUERY_CLAUSE_LENGTH = 3


def parse_path(path: str, template: str | None = None) -> tuple[PathSegment, ...]:
    """Tokenize a path template into alternating literal and variable segments.

    Text before each '{' becomes a static segment, even when empty, and the
    text up to the matching '}' becomes a dynamic segment. Variable names
    are taken as written, not trimmed.

    Args:
        path: Path region of the template
        template: Full template, used only in error messages

    Returns:
        Ordered path segments

    Raises:
        UnbalancedBracesError: If a '{' has no matching '}'
        EmptyVariableNameError: If a pair of braces encloses nothing
    """
    if not path.strip():
        return ()

    segments: list[PathSegment] = []
    position = 0
    while position < len(path):
        start = path.find("{", position)
        if start == -1:
            segments.append(PathSegment.literal(path[position:]))
            break
        segments.append(PathSegment.literal(path[position:start]))

        end = path.find("}", start + 1)
        if end == -1:
            raise UnbalancedBracesError("Mismatched braces in URI template string", template)
        name = path[start + 1 : end]
        if not name:
            raise EmptyVariableNameError("Empty variable name between braces", template)
        segments.append(PathSegment.variable(name))
        position = end + 1

    return tuple(segments)


def parse_query_param(clause: str, template: str | None = None) -> QueryParam:
    """Parse a single "key={name}" clause.

    Raises:
        MalformedQueryError: If the clause lacks '=' or a name trims to empty
    """
    wire_name, equals, var_name = clause.partition("=")
    if not equals:
        raise MalformedQueryError(f"Missing equals-sign in query clause {clause!r}", template)

    wire_name = wire_name.strip(QUERY_TRIM_CHARS)
    var_name = var_name.strip(QUERY_TRIM_CHARS)
    if not wire_name or not var_name:
        raise MalformedQueryError(
            f"Missing name or identifier in query clause {clause!r}", template
        )

    return QueryParam(wire_name=wire_name, var_name=var_name)


def parse_query(query: str, template: str | None = None) -> tuple[QueryParam, ...]:
    """Tokenize a query template into (wire name, variable name) pairs.

    Clauses are separated by '&' and kept in template order. Parsing stops
    once fewer than three characters remain, so a short trailing fragment
    such as "&x" is dropped without error.

    Args:
        query: Query region of the template
        template: Full template, used only in error messages

    Returns:
        Ordered query params

    Raises:
        MalformedQueryError: If any attempted clause is malformed
    """
    if not query.strip():
        return ()

    params: list[QueryParam] = []
    remaining = query
    while len(remaining) >= MIN_QUERY_CLAUSE_LENGTH:
        clause, ampersand, remaining = remaining.partition("&")
        params.append(parse_query_param(clause, template))
        if not ampersand:
            break

    return tuple(params)
