"""Content Negotiation Shell — applies negotiated headers and format-encoded errors.

Invariants:
    - set_content_type performs exactly one header write; resolver errors
      propagate unchanged and leave the headers untouched
    - build_error_response encodes the body as ERROR_ENCODING prescribes for
      the format: plain text, escaped HTML, or the JSON error envelope

Design Decisions:
    - HeaderCarrier Protocol over a Starlette import in the signature: any
      object with a mutable `headers` mapping works (Response, MutableHeaders holders, test doubles)
"""

import html
from collections.abc import MutableMapping
from typing import Protocol

from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response

from parsoid_rest.core.content_type import resolve_content_type
from parsoid_rest.core.domain_types import ErrorEncoding, Format
from parsoid_rest.core.errors import ErrorSeverity
from parsoid_rest.core.format_tables import error_encoding_for


class HeaderCarrier(Protocol):
    """Structural contract for the transport's response object."""
    headers: MutableMapping[str, str]


def set_content_type(
    response: HeaderCarrier,
    format: Format | str,
    content_version: str | None = None,
) -> None:
    """Set the Content-Type header appropriate for a given response format."""
    response.headers["Content-Type"] = resolve_content_type(format, content_version)


def build_error_response(
    format: Format | str,
    status_code: int,
    message: str,
    code: str = "ERROR",
) -> Response:
    """Error response whose body is encoded for the requested format."""
    encoding = error_encoding_for(format)
    if encoding is ErrorEncoding.PLAIN:
        return PlainTextResponse(message, status_code=status_code)
    if encoding is ErrorEncoding.HTML:
        return HTMLResponse(
            f"<!DOCTYPE html><html><body><p>{html.escape(message)}</p></body></html>",
            status_code=status_code,
        )
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "severity": ErrorSeverity.ERROR.value,
            },
        },
    )
