"""Format Routes — format listing, Content-Type negotiation and transform checks.

Invariants:
    - Header values come from core.content_type only (never assembled here)
    - Missing ?version= falls back to the configured default for the format
    - Lint has no Content-Type: asking for one is a 404, not a resolver error
    - Transform errors are encoded per the target format's ERROR_ENCODING
      (done by the global ParsoidRestError handler)

Design Decisions:
    - Format path parameters on the transform route are plain strings so
      unknown names surface as INVALID_TRANSFORM rather than a 400 validation error
"""

import logging

from fastapi import APIRouter, Header, HTTPException, Query, Response, status

from parsoid_rest.api.content_negotiation import set_content_type
from parsoid_rest.config import Settings, get_settings
from parsoid_rest.core.content_type import (
    get_input_content_version,
    parse_content_type_header,
    resolve_content_type,
)
from parsoid_rest.core.domain_types import CONTENT_VERSION_PATTERN, Format
from parsoid_rest.core.format_tables import (
    CONTENT_TYPE_PROFILES,
    ERROR_ENCODING,
    VALID_PAGE,
    VALID_TRANSFORM,
    check_transform,
)
from parsoid_rest.schemas.formats import (
    ContentTypeParseRequest,
    ContentTypeParseResponse,
    FormatInfo,
    FormatListResponse,
    TransformResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["formats"])


def default_version(settings: Settings, fmt: Format) -> str | None:
    """Configured content version for fmt; None where versions do not apply."""
    if fmt is Format.HTML:
        return settings.default_html_version
    if fmt is Format.PAGEBUNDLE:
        return settings.default_pagebundle_version
    return None


@router.get("/formats/", response_model=FormatListResponse)
async def list_formats():
    """All formats with their error encodings and allowed transform targets."""
    formats = []
    for fmt in sorted(VALID_PAGE, key=lambda f: f.value):
        template = None
        if fmt in CONTENT_TYPE_PROFILES:
            template = resolve_content_type(fmt, "{version}")
        formats.append(FormatInfo(
            format=fmt,
            error_encoding=ERROR_ENCODING[fmt],
            transforms_to=sorted(
                VALID_TRANSFORM.get(fmt, frozenset()), key=lambda f: f.value,
            ),
            content_type_template=template,
        ))
    return FormatListResponse(formats=formats)


@router.api_route(
    "/formats/{format}/content-type",
    methods=["GET", "HEAD"],
)
async def negotiate_content_type(
    format: Format,
    version: str | None = Query(None, pattern=f"^{CONTENT_VERSION_PATTERN.pattern}$"),
):
    """Empty response carrying the negotiated Content-Type header."""
    if format not in CONTENT_TYPE_PROFILES:
        raise HTTPException(
            status.HTTP_404_NOT_FOUND,
            detail=f"Format '{format.value}' has no content type",
        )
    content_version = version or default_version(get_settings(), format)
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    set_content_type(response, format, content_version)
    logger.info(
        "Negotiated content type",
        extra={"format": format.value, "content_version": content_version},
    )
    return response


@router.post("/formats/parse", response_model=ContentTypeParseResponse)
async def parse_content_type(body: ContentTypeParseRequest):
    """Recover format and version from a Content-Type header value."""
    parsed = parse_content_type_header(body.content_type)
    if not parsed.matched:
        return ContentTypeParseResponse(matched=False)
    return ContentTypeParseResponse(
        matched=True,
        format=parsed.format,
        version=parsed.version,
        legacy=parsed.legacy,
    )


@router.get(
    "/transform/{from_format}/to/{to_format}", response_model=TransformResponse,
)
async def check_transform_route(
    from_format: str,
    to_format: str,
    content_type: str | None = Header(None),
):
    """Validate a transform and report input version and output Content-Type."""
    source, target = check_transform(from_format, to_format)
    settings = get_settings()

    input_version = None
    source_default = default_version(settings, source)
    if source_default is not None:
        input_version = get_input_content_version(content_type, source_default)

    output_type = None
    if target in CONTENT_TYPE_PROFILES:
        output_type = resolve_content_type(target, default_version(settings, target))

    return TransformResponse(
        from_format=source,
        to_format=target,
        input_version=input_version,
        content_type=output_type,
    )
