"""Unit tests for UriTemplate."""

import pytest
from pydantic import ValidationError

from apitemplate.exceptions import (
    DuplicateVariableError,
    MalformedQueryError,
    MalformedTemplateError,
    MissingTemplateError,
    TemplateError,
    UnbalancedBracesError,
)
from apitemplate.template import PathSegment, QueryParam, UriTemplate

EXAMPLE = "/api/{id}/get?name={displayName}#info"


class TestConstruction:
    """Tests for parsing at construction time."""

    def test_parses_all_regions(self) -> None:
        """Segments, params and fragment are exposed."""
        template = UriTemplate(EXAMPLE)
        assert template.segments == (
            PathSegment.literal("api/"),
            PathSegment.variable("id"),
            PathSegment.literal("/get"),
        )
        assert template.query_params == (
            QueryParam(wire_name="name", var_name="displayName"),
        )
        assert template.fragment == "info"
        assert template.original_template == EXAMPLE

    def test_variables(self) -> None:
        """All variable names are listed in template order."""
        assert UriTemplate(EXAMPLE).variables == ("id", "displayName")

    def test_empty_template(self) -> None:
        """Empty string is a valid, empty template."""
        template = UriTemplate("")
        assert template.segments == ()
        assert template.query_params == ()
        assert template.fragment == ""

    def test_absolute_url(self) -> None:
        """Scheme and host are kept as literal path text."""
        template = UriTemplate("http://www.example.com/api/{id}")
        assert template.build({"id": "7"}) == "http://www.example.com/api/7?"

    def test_none_raises(self) -> None:
        """A missing template is rejected."""
        with pytest.raises(MissingTemplateError):
            UriTemplate(None)

    def test_unbalanced_braces_raise(self) -> None:
        """'/a/{id' fails construction."""
        with pytest.raises(UnbalancedBracesError):
            UriTemplate("/a/{id")

    def test_missing_equals_raises(self) -> None:
        """'/a?foo' fails construction."""
        with pytest.raises(MalformedQueryError):
            UriTemplate("/a?foo")

    @pytest.mark.parametrize(
        "template",
        [
            "/a/{id}/b/{id}",
            "/a/{id}?id={id}",
            "/a?x={id}&y={id}",
        ],
    )
    def test_duplicate_variables_raise(self, template: str) -> None:
        """A repeated variable name anywhere fails construction."""
        with pytest.raises(DuplicateVariableError):
            UriTemplate(template)

    def test_errors_share_base(self) -> None:
        """All construction errors are MalformedTemplateError and ValueError."""
        for template in ["/a/{id", "/a?foo", "/{x}/{x}"]:
            with pytest.raises(MalformedTemplateError) as exc_info:
                UriTemplate(template)
            assert isinstance(exc_info.value, ValueError)
            assert isinstance(exc_info.value, TemplateError)

    def test_error_codes_name_the_rule(self) -> None:
        """Each rule has its own error code."""
        codes = set()
        for template in ["/a/{id", "/a?foo", "/{x}/{x}", "/a/{}"]:
            with pytest.raises(MalformedTemplateError) as exc_info:
                UriTemplate(template)
            codes.add(exc_info.value.error_code)
        assert codes == {
            "UNBALANCED_BRACES",
            "MALFORMED_QUERY",
            "DUPLICATE_VARIABLE",
            "EMPTY_VARIABLE_NAME",
        }


class TestBuild:
    """Tests for UriTemplate.build."""

    def test_all_parameters(self) -> None:
        """Every placeholder is substituted."""
        template = UriTemplate(EXAMPLE)
        assert template.build({"id": "42", "displayName": "bob"}) == "api/42/get?name=bob#info"

    def test_absent_query_parameter(self) -> None:
        """An absent query variable drops its entry but keeps the '?'."""
        assert UriTemplate(EXAMPLE).build({"id": "42"}) == "api/42/get?#info"

    def test_absent_path_parameter(self) -> None:
        """An absent path variable renders empty."""
        assert UriTemplate(EXAMPLE).build({"displayName": "bob"}) == "api//get?name=bob#info"

    def test_static_template_ignores_parameters(self) -> None:
        """Templates without variables always build the same URI."""
        template = UriTemplate("/static/path#frag")
        assert template.build({}) == "static/path?#frag"
        assert template.build({"anything": "x"}) == "static/path?#frag"

    def test_extra_parameters_ignored(self) -> None:
        """Unknown names in the mapping are ignored."""
        assert UriTemplate("/a/{x}").build({"x": "1", "y": "2"}) == "a/1?"

    def test_values_positioned_at_placeholders(self) -> None:
        """Each value lands where its placeholder was."""
        template = UriTemplate("/{a}-{b}/c?d={e}&f={g}")
        uri = template.build({"a": "A", "b": "B", "e": "E", "g": "G"})
        assert uri == "A-B/c?d=E&f=G"

    def test_template_reusable(self) -> None:
        """Building doesn't change the template."""
        template = UriTemplate(EXAMPLE)
        first = template.build({"id": "1"})
        template.build({"id": "2", "displayName": "x"})
        assert template.build({"id": "1"}) == first


class TestIdentity:
    """Tests for equality and representation."""

    def test_equal_by_template(self) -> None:
        """Templates from the same string are equal and hash alike."""
        assert UriTemplate(EXAMPLE) == UriTemplate(EXAMPLE)
        assert hash(UriTemplate(EXAMPLE)) == hash(UriTemplate(EXAMPLE))

    def test_repr(self) -> None:
        """repr carries the original template."""
        assert repr(UriTemplate("/a/{b}")) == "UriTemplate('/a/{b}')"

    def test_segments_frozen(self) -> None:
        """Parsed tokens can't be mutated."""
        segment = UriTemplate("/a/{b}").segments[1]
        with pytest.raises(ValidationError):
            segment.text = "c"  # type: ignore[misc]
