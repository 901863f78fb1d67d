"""Reusable parameterized URI templates with a typed JSON GET client.

Usage:
    from apitemplate import ApiEndpoint, UriTemplate

    template = UriTemplate("/api/{id}/get?name={displayName}#info")
    template.build({"id": "42", "displayName": "bob"})
    # 'api/42/get?name=bob#info'
"""

from apitemplate.client import ApiEndpoint, ApiRequest, DecodeOptions, HttpxFetcher
from apitemplate.exceptions import (
    DuplicateVariableError,
    EmptyVariableNameError,
    MalformedQueryError,
    MalformedTemplateError,
    MissingTemplateError,
    TemplateError,
    UnbalancedBracesError,
)
from apitemplate.template import PathSegment, QueryParam, UriTemplate

__all__ = [
    "ApiEndpoint",
    "ApiRequest",
    "DecodeOptions",
    "DuplicateVariableError",
    "EmptyVariableNameError",
    "HttpxFetcher",
    "MalformedQueryError",
    "MalformedTemplateError",
    "MissingTemplateError",
    "PathSegment",
    "QueryParam",
    "TemplateError",
    "UnbalancedBracesError",
    "UriTemplate",
]
