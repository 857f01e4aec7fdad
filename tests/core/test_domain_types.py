"""Domain Types — verifies format enums and the content version shape.

Tests:
    - Format has exactly four members with their wire names
    - ErrorEncoding has exactly three members
    - is_content_version accepts only major.minor.patch
"""

import pytest

from parsoid_rest.core.domain_types import (
    ContentVersion, ErrorEncoding, Format, is_content_version,
)


def test_format_has_four_members():
    assert [f.value for f in Format] == ["wikitext", "html", "pagebundle", "lint"]


def test_error_encoding_has_three_members():
    assert {e.value for e in ErrorEncoding} == {"plain", "html", "json"}


def test_format_is_a_str():
    assert Format.HTML == "html"
    assert Format("pagebundle") is Format.PAGEBUNDLE


def test_content_version_wraps_str():
    assert ContentVersion("2.1.0") == "2.1.0"


@pytest.mark.parametrize("value", ["0.0.0", "2.1.0", "10.200.3000"])
def test_valid_content_versions(value):
    assert is_content_version(value)


@pytest.mark.parametrize("value", ["", "1.2", "1.2.3.4", "v1.2.3", "1.2.3 ", "a.b.c"])
def test_invalid_content_versions(value):
    assert not is_content_version(value)
