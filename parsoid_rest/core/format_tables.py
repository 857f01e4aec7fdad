"""Format Tables — static configuration shared by the resolver, parser and routes.

Invariants:
    - Every format in VALID_PAGE has exactly one ERROR_ENCODING entry
    - CONTENT_TYPE_PROFILES is the single source of truth for mime types and
      profile URIs — both the resolver and the parser are built from it
    - All tables are read-only views (MappingProxyType / frozenset); mutation
      raises TypeError
    - Lookups by unknown name never raise except in error_encoding_for()
      and check_transform(), which are explicit about it

Design Decisions:
    - Tables keyed by Format, lookups accept str or Format: route path
      parameters arrive as plain strings
    - VALID_TRANSFORM values are frozensets: membership is all that matters
"""

from types import MappingProxyType
from typing import NamedTuple

from parsoid_rest.core.domain_types import Format, ErrorEncoding
from parsoid_rest.core.errors import InvalidTransformError, UnsupportedFormatError


class ContentTypeProfile(NamedTuple):
    """Mime type and profile URI path token for one format."""
    mime: str
    token: str
    fixed_version: str | None = None   # set when the format ignores the caller's version

    def profile_uri(self, version: str) -> str:
        return f"{PROFILE_URI_PREFIX}{self.token}/{self.fixed_version or version}"


PROFILE_URI_PREFIX = "https://www.mediawiki.org/wiki/Specs/"
LEGACY_PROFILE_PREFIX = "mediawiki.org/specs/"

# Wikitext version is pinned; the resolver ignores whatever version it is given
WIKITEXT_VERSION = "1.0.0"


VALID_PAGE: frozenset[Format] = frozenset(Format)

ERROR_ENCODING: MappingProxyType = MappingProxyType({
    Format.WIKITEXT: ErrorEncoding.PLAIN,
    Format.HTML: ErrorEncoding.HTML,
    Format.PAGEBUNDLE: ErrorEncoding.JSON,
    Format.LINT: ErrorEncoding.JSON,
})

VALID_TRANSFORM: MappingProxyType = MappingProxyType({
    Format.WIKITEXT: frozenset({Format.HTML, Format.PAGEBUNDLE, Format.LINT}),
    Format.HTML: frozenset({Format.WIKITEXT}),
    Format.PAGEBUNDLE: frozenset({Format.WIKITEXT, Format.PAGEBUNDLE}),
})

# Lint has no content type: resolving it is an UnsupportedFormatError
CONTENT_TYPE_PROFILES: MappingProxyType = MappingProxyType({
    Format.WIKITEXT: ContentTypeProfile("text/plain", "wikitext", WIKITEXT_VERSION),
    Format.HTML: ContentTypeProfile("text/html", "HTML"),
    Format.PAGEBUNDLE: ContentTypeProfile("application/json", "pagebundle"),
})

# Recognized on input only, never emitted
LEGACY_PROFILE_TOKENS: MappingProxyType = MappingProxyType({
    Format.HTML: "html",
})


def coerce_format(value: Format | str) -> Format | None:
    """Map a Format or its string value to a Format; None for unknown names."""
    if isinstance(value, Format):
        return value
    try:
        return Format(value)
    except ValueError:
        return None


def is_valid_page_format(value: Format | str) -> bool:
    return coerce_format(value) in VALID_PAGE


def is_valid_transform(from_format: Format | str, to_format: Format | str) -> bool:
    """True when from_format may be transformed into to_format."""
    source = coerce_format(from_format)
    target = coerce_format(to_format)
    if source is None or target is None:
        return False
    return target in VALID_TRANSFORM.get(source, frozenset())


def check_transform(
    from_format: Format | str, to_format: Format | str,
) -> tuple[Format, Format]:
    """Return the (source, target) pair, or raise InvalidTransformError."""
    if not is_valid_transform(from_format, to_format):
        raise InvalidTransformError(format_name(from_format), format_name(to_format))
    return coerce_format(from_format), coerce_format(to_format)


def error_encoding_for(value: Format | str) -> ErrorEncoding:
    """ERROR_ENCODING lookup. Raises UnsupportedFormatError for unknown names."""
    fmt = coerce_format(value)
    if fmt is None:
        raise UnsupportedFormatError(str(value))
    return ERROR_ENCODING[fmt]


def format_name(value: Format | str) -> str:
    """String name of a Format or of whatever the caller passed instead."""
    return value.value if isinstance(value, Format) else str(value)
