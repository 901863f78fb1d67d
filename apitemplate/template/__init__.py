"""URI template parsing and building.

Usage:
    from apitemplate.template import UriTemplate

    template = UriTemplate("/api/{id}/get?name={displayName}#info")
    template.build({"id": "42", "displayName": "bob"})
    # 'api/42/get?name=bob#info'
"""

from apitemplate.template.builder import build_uri
from apitemplate.template.models import PathSegment, QueryParam
from apitemplate.template.parser import parse_path, parse_query
from apitemplate.template.splitter import split_template
from apitemplate.template.template import UriTemplate
from apitemplate.template.validator import check_uniqueness

__all__ = [
    "PathSegment",
    "QueryParam",
    "UriTemplate",
    "build_uri",
    "check_uniqueness",
    "parse_path",
    "parse_query",
    "split_template",
]
