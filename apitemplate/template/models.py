"""Parsed token models for URI templates.

Both token kinds are frozen value objects: they are created once while a
template is parsed and shared read-only by every request built from it.
"""

from pydantic import BaseModel, ConfigDict, Field


class PathSegment(BaseModel):
    """One unit of the path: literal text or a substitution point."""

    model_config = ConfigDict(frozen=True)

    is_static: bool = Field(..., description="True for literal text, False for a variable")
    text: str = Field(..., description="Literal text, or the variable name if dynamic")

    @classmethod
    def literal(cls, text: str) -> "PathSegment":
        """Create a static segment."""
        return cls(is_static=True, text=text)

    @classmethod
    def variable(cls, name: str) -> "PathSegment":
        """Create a dynamic segment."""
        return cls(is_static=False, text=name)


class QueryParam(BaseModel):
    """One key={name} entry of the query string."""

    model_config = ConfigDict(frozen=True)

    wire_name: str = Field(..., min_length=1, description="Key emitted in the built URI")
    var_name: str = Field(..., min_length=1, description="Variable used for substitution lookup")
