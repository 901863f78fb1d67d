"""Typed GET endpoint built from a URI template.

Usage:
    async with httpx.AsyncClient(base_url="https://api.example.com") as http:
        users = ApiEndpoint(
            "/users/{id}?fields={fields}",
            User,
            fetcher=HttpxFetcher(http),
        )
        user = await users.get({"id": "42", "fields": "name"})
"""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from apitemplate.client.decoder import DecodeOptions, Decoder, JsonDecoder
from apitemplate.client.request import RequestSource, resolve_parameters
from apitemplate.client.transport import Fetcher, HttpxFetcher
from apitemplate.config import get_settings
from apitemplate.config.settings import Settings
from apitemplate.observability.logging import get_logger
from apitemplate.template.template import UriTemplate

logger = get_logger(__name__)

T = TypeVar("T")


class ApiEndpoint(Generic[T]):
    """Compose a URI template with a fetcher and a decoder.

    Each call builds the URI, issues one GET and decodes the body. A
    non-success HTTP status yields the endpoint's default value instead of
    an error; decode errors propagate. There are no retries.

    Attributes:
        template: Parsed URI template
        result_type: Annotation the response body is decoded into
    """

    def __init__(
        self,
        template: UriTemplate | str,
        result_type: Any,
        *,
        fetcher: Fetcher | None = None,
        decoder: Decoder[T] | None = None,
        default: T | None = None,
        default_factory: Callable[[], T] | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the endpoint.

        Args:
            template: Template instance or template string to parse
            result_type: Type the JSON body is decoded into
            fetcher: Transport (defaults to an HttpxFetcher with its own client)
            decoder: Body decoder (defaults to a JsonDecoder using the
                decode settings)
            default: Value returned on non-success status
            default_factory: Callable producing the value returned on
                non-success status; takes precedence over default
            settings: Settings for the default fetcher and decoder
                (defaults to get_settings())

        Raises:
            MalformedTemplateError: If a template string fails to parse
        """
        self.template = template if isinstance(template, UriTemplate) else UriTemplate(template)
        self.result_type = result_type
        if decoder is None:
            decode = (settings or get_settings()).decode
            decoder = JsonDecoder(result_type, strict=decode.strict)
        self._fetcher = fetcher if fetcher is not None else HttpxFetcher(settings=settings)
        self._decoder: Decoder[T] = decoder
        self._default = default
        self._default_factory = default_factory

    def build_uri(self, request: RequestSource) -> str:
        """Build the URI a request would be sent to."""
        return self.template.build(resolve_parameters(request))

    async def get(
        self,
        request: RequestSource,
        options: DecodeOptions | None = None,
    ) -> T | None:
        """Fetch and decode the resource for one set of parameters.

        Args:
            request: Source of template variable values
            options: Decode options for this call

        Returns:
            The decoded value, or the default on non-success status
        """
        uri = self.build_uri(request)
        logger.debug("request_started", uri=uri, template=self.template.original_template)

        result = await self._fetcher.fetch(uri)
        if not result.success:
            logger.warning(
                "request_failed_status",
                uri=uri,
                status_code=result.status_code,
            )
            return self._default_value()

        value = self._decoder.decode(result.body, options)
        logger.debug(
            "request_decoded",
            uri=uri,
            status_code=result.status_code,
            result_type=getattr(self.result_type, "__name__", str(self.result_type)),
        )
        return value

    def _default_value(self) -> T | None:
        if self._default_factory is not None:
            return self._default_factory()
        return self._default

    async def aclose(self) -> None:
        """Close the underlying fetcher."""
        await self._fetcher.aclose()

    async def __aenter__(self) -> "ApiEndpoint[T]":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"ApiEndpoint({self.template.original_template!r})"
