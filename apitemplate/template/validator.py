"""Uniqueness check across every variable name in a template."""

from collections.abc import Iterable

from apitemplate.exceptions import DuplicateVariableError
from apitemplate.template.models import PathSegment, QueryParam


def iter_variable_names(
    segments: Iterable[PathSegment], params: Iterable[QueryParam]
) -> Iterable[str]:
    """Yield dynamic segment names, then query variable names, in template order."""
    for segment in segments:
        if not segment.is_static:
            yield segment.text
    for param in params:
        yield param.var_name


def check_uniqueness(
    segments: Iterable[PathSegment],
    params: Iterable[QueryParam],
    template: str | None = None,
) -> None:
    """Ensure no variable name is used twice across path and query.

    Raises:
        DuplicateVariableError: On the first repeated name
    """
    seen: set[str] = set()
    for name in iter_variable_names(segments, params):
        if name in seen:
            raise DuplicateVariableError(name, template)
        seen.add(name)
