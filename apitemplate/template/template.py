"""Parsed, reusable URI template."""

from collections.abc import Mapping

from apitemplate.exceptions import MissingTemplateError
from apitemplate.observability.logging import get_logger
from apitemplate.template.builder import build_uri
from apitemplate.template.models import PathSegment, QueryParam
from apitemplate.template.parser import parse_path, parse_query
from apitemplate.template.splitter import split_template
from apitemplate.template.validator import check_uniqueness, iter_variable_names

logger = get_logger(__name__)


class UriTemplate:
    """Immutable representation of a template such as
    ``http://host/api/{id}/get?name={displayName}#frag``.

    The template is parsed and validated once at construction. A
    constructed instance is never partially valid and can be shared by
    any number of concurrent callers.

    Attributes:
        original_template: The template string as given
        segments: Path segments in order
        query_params: Query params in order
        fragment: Literal fragment text, possibly empty
    """

    __slots__ = ("_original_template", "_segments", "_query_params", "_fragment")

    def __init__(self, template: str | None) -> None:
        """Parse and validate a template string.

        Args:
            template: Template string to parse

        Raises:
            MissingTemplateError: If template is None
            UnbalancedBracesError: If a path brace is unbalanced
            MalformedQueryError: If a query clause is malformed
            DuplicateVariableError: If a variable name is repeated
        """
        if template is None:
            raise MissingTemplateError("Template string is required")

        path, query, fragment = split_template(template)
        segments = parse_path(path, template)
        query_params = parse_query(query, template)
        check_uniqueness(segments, query_params, template)

        self._original_template = template
        self._segments = segments
        self._query_params = query_params
        self._fragment = fragment

        logger.debug(
            "template_parsed",
            template=template,
            segment_count=len(segments),
            query_param_count=len(query_params),
        )

    @property
    def original_template(self) -> str:
        return self._original_template

    @property
    def segments(self) -> tuple[PathSegment, ...]:
        return self._segments

    @property
    def query_params(self) -> tuple[QueryParam, ...]:
        return self._query_params

    @property
    def fragment(self) -> str:
        return self._fragment

    @property
    def variables(self) -> tuple[str, ...]:
        """All variable names, path variables first, in template order."""
        return tuple(iter_variable_names(self._segments, self._query_params))

    def build(self, parameters: Mapping[str, str]) -> str:
        """Substitute parameters into the template and return the URI."""
        return build_uri(self._segments, self._query_params, self._fragment, parameters)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UriTemplate):
            return NotImplemented
        return self._original_template == other._original_template

    def __hash__(self) -> int:
        return hash(self._original_template)

    def __repr__(self) -> str:
        return f"UriTemplate({self._original_template!r})"

    def __str__(self) -> str:
        return self._original_template
