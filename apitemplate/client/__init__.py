"""Typed HTTP GET client over URI templates.

Usage:
    from apitemplate.client import ApiEndpoint, HttpxFetcher

    async with ApiEndpoint("/api/{id}/get?name={displayName}", Item) as endpoint:
        item = await endpoint.get({"id": "42", "displayName": "bob"})
"""

from apitemplate.client.decoder import DecodeOptions, Decoder, JsonDecoder
from apitemplate.client.endpoint import ApiEndpoint
from apitemplate.client.request import (
    ApiRequest,
    RequestParameters,
    RequestSource,
    resolve_parameters,
)
from apitemplate.client.transport import (
    FetchResult,
    Fetcher,
    HttpxFetcher,
    create_http_client,
)

__all__ = [
    "ApiEndpoint",
    "ApiRequest",
    "DecodeOptions",
    "Decoder",
    "FetchResult",
    "Fetcher",
    "HttpxFetcher",
    "JsonDecoder",
    "RequestParameters",
    "RequestSource",
    "create_http_client",
    "resolve_parameters",
]
