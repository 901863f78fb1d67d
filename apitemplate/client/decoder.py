"""JSON body decoders.

JsonDecoder validates raw bytes straight into the endpoint's result type
with a pydantic TypeAdapter, so models, lists, dicts and primitives all
work as result types. Validation errors are not caught here.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, TypeAdapter

T = TypeVar("T")


class DecodeOptions(BaseModel):
    """Caller-supplied options for a single decode."""

    strict: bool | None = Field(
        default=None,
        description="Disable type coercion (None = decoder default)",
    )
    context: dict[str, Any] | None = Field(
        default=None,
        description="Context passed to validators",
    )


class Decoder(ABC, Generic[T]):
    """Interface for turning a response body into a typed value."""

    @abstractmethod
    def decode(self, body: bytes, options: DecodeOptions | None = None) -> T:
        """Decode a response body.

        Raises:
            Any format or validation error the decoder produces
        """
        pass


class JsonDecoder(Decoder[T]):
    """Decode JSON bodies into a target type via pydantic."""

    def __init__(self, target: Any, *, strict: bool | None = None) -> None:
        """Initialize the decoder.

        Args:
            target: Result type annotation, e.g. a model class or list[Model]
            strict: Default strictness when options don't override it;
                None defers to the target type's own configuration
        """
        self._adapter: TypeAdapter[T] = TypeAdapter(target)
        self._strict = strict

    def decode(self, body: bytes, options: DecodeOptions | None = None) -> T:
        options = options or DecodeOptions()
        strict = self._strict if options.strict is None else options.strict
        return self._adapter.validate_json(body, strict=strict, context=options.context)
