"""Domain Types — rich types for formats and content versions.

Invariants:
    - Format has exactly four members: wikitext, html, pagebundle, lint
    - ErrorEncoding has exactly three members: plain, html, json
    - ContentVersion is a major.minor.patch string (CONTENT_VERSION_PATTERN)

Design Decisions:
    - str Enums: path parameters and JSON bodies round-trip without custom encoders
    - NewType for ContentVersion: zero runtime cost, versions stay plain strings
      when embedded in profile URIs
"""

import re
from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

ContentVersion = NewType("ContentVersion", str)   # e.g. "2.1.0"

CONTENT_VERSION_PATTERN = re.compile(r"\d+\.\d+\.\d+", re.ASCII)


def is_content_version(value: str) -> bool:
    """True when value is exactly major.minor.patch (ASCII digits)."""
    return CONTENT_VERSION_PATTERN.fullmatch(value) is not None


# ─── Enums ───────────────────────────────────────────────────────

class Format(str, Enum):
    """Document representations served by the transformation API."""
    WIKITEXT = "wikitext"
    HTML = "html"
    PAGEBUNDLE = "pagebundle"
    LINT = "lint"


class ErrorEncoding(str, Enum):
    """How an error body is serialized for a given format."""
    PLAIN = "plain"
    HTML = "html"
    JSON = "json"
