"""Render parsed template tokens into a concrete URI string."""

from collections.abc import Mapping, Sequence

from apitemplate.template.models import PathSegment, QueryParam


def render_path(segments: Sequence[PathSegment], parameters: Mapping[str, str]) -> str:
    """Join path segments, substituting variables; absent variables render empty."""
    parts: list[str] = []
    for segment in segments:
        if segment.is_static:
            parts.append(segment.text)
        elif segment.text in parameters:
            parts.append(parameters[segment.text])
    return "".join(parts)


def render_query(params: Sequence[QueryParam], parameters: Mapping[str, str]) -> str:
    """Render "wire=value" entries for every param present in parameters.

    Entries keep template order and are joined by exactly one '&'. Params
    absent from parameters are omitted entirely.
    """
    entries = [
        f"{param.wire_name}={parameters[param.var_name]}"
        for param in params
        if param.var_name in parameters
    ]
    return "&".join(entries)


def build_uri(
    segments: Sequence[PathSegment],
    params: Sequence[QueryParam],
    fragment: str,
    parameters: Mapping[str, str],
) -> str:
    """Build the request URI for one set of parameters.

    The '?' is always emitted after the path, even when no query entry is
    rendered. Values are inserted verbatim without percent-encoding.

    Args:
        segments: Parsed path segments
        params: Parsed query params
        fragment: Literal fragment, omitted when empty
        parameters: Variable name to value mapping

    Returns:
        The assembled URI
    """
    uri = f"{render_path(segments, parameters)}?{render_query(params, parameters)}"
    if fragment:
        uri = f"{uri}#{fragment}"
    return uri
