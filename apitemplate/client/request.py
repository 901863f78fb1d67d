"""Request parameter sources.

Anything that can expose a name to value mapping can drive a request:
a RequestParameters subclass, the ready-made ApiRequest model, or a plain
mapping.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field


class RequestParameters(ABC):
    """Interface for objects that supply template variable values."""

    @property
    @abstractmethod
    def parameters(self) -> Mapping[str, str]:
        """Variable name to value mapping for one request."""
        pass


class ApiRequest(BaseModel):
    """Per-call parameter set for an endpoint."""

    model_config = ConfigDict(frozen=True)

    parameters: dict[str, str] = Field(
        default_factory=dict, description="Variable name to value mapping"
    )


RequestSource: TypeAlias = RequestParameters | ApiRequest | Mapping[str, str]


def resolve_parameters(source: RequestSource) -> Mapping[str, str]:
    """Return the name to value mapping held by a request source."""
    if isinstance(source, (RequestParameters, ApiRequest)):
        return source.parameters
    if isinstance(source, Mapping):
        return source
    raise TypeError(
        f"Request source must expose a parameters mapping, got {type(source).__name__}"
    )
