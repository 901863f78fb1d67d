"""HTTP transport configuration."""

from pydantic import BaseModel, Field


class HttpConfig(BaseModel):
    """Settings for the shared httpx client used to fetch built URIs."""

    base_url: str = Field(
        default="",
        description="Prefix joined with every built URI (empty = URIs are absolute)",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Request timeout in seconds",
    )
    user_agent: str | None = Field(
        default=None,
        min_length=1,
        description="User-Agent header override (unset = httpx default)",
    )
    follow_redirects: bool = Field(
        default=False,
        description="Follow 3xx responses instead of treating them as failures",
    )
    max_connections: int = Field(
        default=100,
        ge=1,
        le=1000,
        description="Connection pool size",
    )
