"""Format routes — listing, negotiation, parsing and transform checks over HTTP.

Invariants:
    - Negotiated Content-Type header is byte-identical to resolve_content_type()
    - Transform errors are encoded per the target format
    - Bad path/query input is a 400 validation error, not a 500
"""

from parsoid_rest.config import get_settings
from parsoid_rest.core.content_type import resolve_content_type
from parsoid_rest.core.domain_types import Format


# ─── GET /formats/ ───────────────────────────────────────────────

async def test_list_formats(client):
    res = await client.get("/api/v1/formats/")
    assert res.status_code == 200
    formats = {f["format"]: f for f in res.json()["formats"]}
    assert set(formats) == {"wikitext", "html", "pagebundle", "lint"}
    assert formats["wikitext"]["error_encoding"] == "plain"
    assert formats["wikitext"]["transforms_to"] == ["html", "lint", "pagebundle"]
    assert formats["lint"]["transforms_to"] == []
    assert formats["lint"]["content_type_template"] is None
    assert formats["html"]["content_type_template"].endswith(
        'profile="https://www.mediawiki.org/wiki/Specs/HTML/{version}"',
    )


# ─── GET /formats/{format}/content-type ──────────────────────────

async def test_negotiate_html_with_version(client):
    res = await client.get(
        "/api/v1/formats/html/content-type", params={"version": "2.4.0"},
    )
    assert res.status_code == 204
    assert res.headers["content-type"] == resolve_content_type(Format.HTML, "2.4.0")


async def test_negotiate_uses_default_version(client):
    res = await client.get("/api/v1/formats/pagebundle/content-type")
    assert res.status_code == 204
    assert res.headers["content-type"] == resolve_content_type(
        Format.PAGEBUNDLE, get_settings().default_pagebundle_version,
    )


async def test_negotiate_default_version_from_env(client, monkeypatch):
    monkeypatch.setenv("DEFAULT_HTML_VERSION", "3.0.0")
    get_settings.cache_clear()
    res = await client.get("/api/v1/formats/html/content-type")
    assert res.headers["content-type"].endswith('Specs/HTML/3.0.0"')


async def test_negotiate_wikitext(client):
    res = await client.head("/api/v1/formats/wikitext/content-type")
    assert res.status_code == 204
    assert res.headers["content-type"] == resolve_content_type(Format.WIKITEXT)


async def test_negotiate_lint_is_not_found(client):
    res = await client.get("/api/v1/formats/lint/content-type")
    assert res.status_code == 404


async def test_negotiate_unknown_format_is_validation_error(client):
    res = await client.get("/api/v1/formats/markdown/content-type")
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_negotiate_malformed_version_is_validation_error(client):
    res = await client.get(
        "/api/v1/formats/html/content-type", params={"version": "1.2"},
    )
    assert res.status_code == 400


# ─── POST /formats/parse ─────────────────────────────────────────

async def test_parse_round_trips_negotiated_header(client):
    header = resolve_content_type(Format.PAGEBUNDLE, "2.1.0")
    res = await client.post("/api/v1/formats/parse", json={"content_type": header})
    assert res.status_code == 200
    assert res.json() == {
        "matched": True, "format": "pagebundle", "version": "2.1.0", "legacy": False,
    }


async def test_parse_legacy_profile(client):
    res = await client.post(
        "/api/v1/formats/parse",
        json={"content_type": 'text/html; profile="mediawiki.org/specs/html/1.2.3"'},
    )
    assert res.json() == {
        "matched": True, "format": "html", "version": "1.2.3", "legacy": True,
    }


async def test_parse_without_profile(client):
    res = await client.post("/api/v1/formats/parse", json={"content_type": "text/plain"})
    assert res.status_code == 200
    assert res.json()["matched"] is False
    assert res.json()["format"] is None


async def test_parse_empty_body_is_validation_error(client):
    res = await client.post("/api/v1/formats/parse", json={"content_type": ""})
    assert res.status_code == 400


# ─── GET /transform/{from}/to/{to} ───────────────────────────────

async def test_transform_wikitext_to_html(client):
    res = await client.get("/api/v1/transform/wikitext/to/html")
    assert res.status_code == 200
    body = res.json()
    assert body["from_format"] == "wikitext"
    assert body["input_version"] is None
    assert body["content_type"] == resolve_content_type(
        Format.HTML, get_settings().default_html_version,
    )


async def test_transform_reads_input_version_from_header(client):
    res = await client.get(
        "/api/v1/transform/pagebundle/to/wikitext",
        headers={"Content-Type": resolve_content_type(Format.PAGEBUNDLE, "2.2.0")},
    )
    assert res.status_code == 200
    assert res.json()["input_version"] == "2.2.0"
    assert res.json()["content_type"] == resolve_content_type(Format.WIKITEXT)


async def test_transform_input_version_defaults(client):
    res = await client.get(
        "/api/v1/transform/html/to/wikitext", headers={"Content-Type": "text/html"},
    )
    assert res.json()["input_version"] == get_settings().default_html_version


async def test_transform_to_lint_has_no_content_type(client):
    res = await client.get("/api/v1/transform/wikitext/to/lint")
    assert res.status_code == 200
    assert res.json()["content_type"] is None


async def test_invalid_transform_to_wikitext_is_plain_text(client):
    res = await client.get("/api/v1/transform/lint/to/wikitext")
    assert res.status_code == 404
    assert res.headers["content-type"].startswith("text/plain")
    assert "lint" in res.text


async def test_invalid_transform_to_html_is_html(client):
    res = await client.get("/api/v1/transform/html/to/html")
    assert res.status_code == 404
    assert res.headers["content-type"].startswith("text/html")


async def test_invalid_transform_to_lint_is_json(client):
    res = await client.get("/api/v1/transform/html/to/lint")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "INVALID_TRANSFORM"


async def test_invalid_transform_to_unknown_format_uses_envelope(client):
    res = await client.get("/api/v1/transform/wikitext/to/markdown")
    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "INVALID_TRANSFORM"
    assert error["category"] == "resource_not_found"
