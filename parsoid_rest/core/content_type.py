"""Content-Type Negotiation — format/version ↔ Content-Type header value.

Invariants:
    - resolve_content_type is PURE: identical inputs give identical strings
    - Output grammar: '<mime>; charset=utf-8; profile="<profile uri>"'
    - Version is required for every format except wikitext; checked before the
      format lookup, so lint without a version reports the missing version
    - parse_content_type_header never raises: an unrecognized header is a
      normal outcome (ContentTypeUnmatched)
    - The parsed format comes from the alternative that actually matched;
      HTML profiles parse as html, pagebundle profiles as pagebundle
    - Parser regex is derived from CONTENT_TYPE_PROFILES, so resolve → parse
      round-trips for every version-carrying format

Design Decisions:
    - Tagged result (ContentTypeMatch | ContentTypeUnmatched) over an output
      parameter: callers branch on .matched or isinstance
    - Versioned formats only in the parser: wikitext's fixed profile carries
      no information a client could negotiate
"""

import logging
import re
from dataclasses import dataclass

from parsoid_rest.core.domain_types import ContentVersion, Format
from parsoid_rest.core.errors import MissingVersionError, UnsupportedFormatError
from parsoid_rest.core.format_tables import (
    CONTENT_TYPE_PROFILES,
    LEGACY_PROFILE_PREFIX,
    LEGACY_PROFILE_TOKENS,
    PROFILE_URI_PREFIX,
    coerce_format,
    format_name,
)

logger = logging.getLogger(__name__)


# ─── Parse Results ───────────────────────────────────────────────

@dataclass(frozen=True)
class ContentTypeMatch:
    """A recognized profile: the client's format and content version."""
    format: Format
    version: ContentVersion
    legacy: bool = False

    @property
    def matched(self) -> bool:
        return True


@dataclass(frozen=True)
class ContentTypeUnmatched:
    """No recognizable profile in the header."""

    @property
    def matched(self) -> bool:
        return False

    @property
    def format(self) -> None:
        return None

    @property
    def version(self) -> None:
        return None


ParsedContentType = ContentTypeMatch | ContentTypeUnmatched


# ─── Parser Regex ────────────────────────────────────────────────

_TOKEN_TO_FORMAT: dict[str, Format] = {
    profile.token: fmt
    for fmt, profile in CONTENT_TYPE_PROFILES.items()
    if profile.fixed_version is None
}
_LEGACY_TOKEN_TO_FORMAT: dict[str, Format] = {
    token: fmt for fmt, token in LEGACY_PROFILE_TOKENS.items()
}


def _alternation(tokens) -> str:
    return "|".join(re.escape(token) for token in sorted(tokens))


_PROFILE_REGEX = re.compile(
    r'\bprofile="(?:'
    + re.escape(PROFILE_URI_PREFIX) + f"(?P<token>{_alternation(_TOKEN_TO_FORMAT)})/"
    + "|"
    + re.escape(LEGACY_PROFILE_PREFIX)
    + f"(?P<legacy_token>{_alternation(_LEGACY_TOKEN_TO_FORMAT)})/"
    + r')(?P<version>\d+\.\d+\.\d+)"',
    re.ASCII,
)


# ─── Operations ──────────────────────────────────────────────────

def resolve_content_type(
    format: Format | str, content_version: str | None = None,
) -> str:
    """Content-Type header value for a response in the given format.

    content_version is required for every format but wikitext, whose profile
    version is fixed. Raises MissingVersionError when it is absent or empty,
    UnsupportedFormatError for lint and unknown format names.
    """
    fmt = coerce_format(format)
    if fmt is not Format.WIKITEXT and not content_version:
        raise MissingVersionError(format_name(format))

    profile = CONTENT_TYPE_PROFILES.get(fmt)
    if profile is None:
        raise UnsupportedFormatError(format_name(format))

    return (
        f"{profile.mime}; charset=utf-8; "
        f'profile="{profile.profile_uri(content_version or "")}"'
    )


def parse_content_type_header(content_type_header: str) -> ParsedContentType:
    """Recover (format, version) from a received Content-Type header.

    Mostly the inverse of resolve_content_type(), but also accepts the legacy
    'mediawiki.org/specs/html/<version>' profile. Headers without a
    recognizable profile yield ContentTypeUnmatched.
    """
    m = _PROFILE_REGEX.search(content_type_header or "")
    if m is None:
        logger.debug(
            "No content profile in Content-Type header",
            extra={"content_type": content_type_header},
        )
        return ContentTypeUnmatched()

    if m.group("token") is not None:
        return ContentTypeMatch(
            _TOKEN_TO_FORMAT[m.group("token")], ContentVersion(m.group("version")),
        )
    return ContentTypeMatch(
        _LEGACY_TOKEN_TO_FORMAT[m.group("legacy_token")],
        ContentVersion(m.group("version")),
        legacy=True,
    )


def get_input_content_version(
    content_type_header: str | None, default: str,
) -> ContentVersion:
    """Content version the client sent, or default when none is identifiable."""
    parsed = parse_content_type_header(content_type_header or "")
    return parsed.version if parsed.matched else ContentVersion(default)
