"""Format Schemas — Pydantic models for the format negotiation routes.

Invariants:
    - Format names serialize as their str Enum values
    - ContentTypeParseRequest.content_type: 1-1000 chars
"""

from pydantic import BaseModel, Field

from parsoid_rest.core.domain_types import ErrorEncoding, Format


class FormatInfo(BaseModel):
    """One format with its error encoding and legal transform targets."""
    format: Format
    error_encoding: ErrorEncoding
    transforms_to: list[Format] = []
    content_type_template: str | None = None


class FormatListResponse(BaseModel):
    formats: list[FormatInfo]


class ContentTypeParseRequest(BaseModel):
    """Raw Content-Type header value sent by a client."""
    content_type: str = Field(min_length=1, max_length=1000)


class ContentTypeParseResponse(BaseModel):
    matched: bool
    format: Format | None = None
    version: str | None = None
    legacy: bool = False


class TransformResponse(BaseModel):
    """A validated transform and the Content-Type its output will carry."""
    from_format: Format
    to_format: Format
    input_version: str | None = None
    content_type: str | None = None
