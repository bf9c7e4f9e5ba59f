#!/usr/bin/env python3
"""
Tests for cookie import and normalization
"""

import json

import pytest

from scrape_checker.cookies import (
    CanonicalCookie,
    CookieRecord,
    MalformedCookieInput,
    load_cookie_file,
    normalize_cookies,
)


def _normalize(raw):
    return normalize_cookies([CookieRecord.from_dict(raw)])[0]


def test_same_site_mapping():
    assert _normalize({"sameSite": "no_restriction"}).same_site == "None"
    assert _normalize({"sameSite": "lax"}).same_site == "Lax"
    assert _normalize({}).same_site == "Strict"
    assert _normalize({"sameSite": "strict"}).same_site == "Strict"
    assert _normalize({"sameSite": "unspecified"}).same_site == "Strict"


def test_same_site_mapping_is_exact():
    assert _normalize({"sameSite": "Lax"}).same_site == "Strict"
    assert _normalize({"sameSite": ["lax"]}).same_site == "Strict"


def test_full_cookie():
    cookie = _normalize({
        "name": "auth_token",
        "value": "abc123",
        "domain": ".x.com",
        "path": "/",
        "expirationDate": 1767225600.5,
        "httpOnly": True,
        "secure": True,
        "sameSite": "no_restriction",
    })
    assert cookie == CanonicalCookie(
        name="auth_token",
        value="abc123",
        domain=".x.com",
        path="/",
        expires=1767225600.5,
        http_only=True,
        secure=True,
        same_site="None",
    )


def test_missing_fields_default():
    cookie = _normalize({})
    assert cookie.name == ""
    assert cookie.value == ""
    assert cookie.expires is None
    assert cookie.http_only is False
    assert cookie.secure is False


def test_non_numeric_expiration_is_dropped():
    assert _normalize({"expirationDate": "tomorrow"}).expires is None
    assert _normalize({"expirationDate": True}).expires is None
    assert _normalize({"expirationDate": 0}).expires == 0


def test_to_playwright_omits_absent_fields():
    cookie = _normalize({"name": "sid", "value": "1", "domain": "example.com", "sameSite": "lax"})
    assert cookie.to_playwright() == {
        "name": "sid",
        "value": "1",
        "domain": "example.com",
        "httpOnly": False,
        "secure": False,
        "sameSite": "Lax",
    }


# ------------------------------------------------------------------
# Cookie files
# ------------------------------------------------------------------

def test_load_cookie_file(tmp_path):
    path = tmp_path / "cookies.json"
    path.write_text(json.dumps([
        {"name": "a", "value": "1", "domain": "x.com", "path": "/", "sameSite": "lax"},
        {"name": "b", "value": "2", "domain": "x.com", "path": "/"},
    ]), encoding="utf-8")

    cookies = load_cookie_file(str(path))
    assert [c.name for c in cookies] == ["a", "b"]
    assert [c.same_site for c in cookies] == ["Lax", "Strict"]


def test_non_object_entries_are_skipped(tmp_path):
    path = tmp_path / "cookies.json"
    path.write_text(json.dumps([{"name": "a"}, "junk", 3]), encoding="utf-8")
    assert [c.name for c in load_cookie_file(str(path))] == ["a"]


def test_invalid_json_is_malformed(tmp_path):
    path = tmp_path / "cookies.json"
    path.write_text("[{not json", encoding="utf-8")
    with pytest.raises(MalformedCookieInput):
        load_cookie_file(str(path))


def test_non_array_is_malformed(tmp_path):
    path = tmp_path / "cookies.json"
    path.write_text(json.dumps({"name": "a"}), encoding="utf-8")
    with pytest.raises(MalformedCookieInput, match="JSON array"):
        load_cookie_file(str(path))


def test_missing_file_is_malformed(tmp_path):
    with pytest.raises(MalformedCookieInput):
        load_cookie_file(str(tmp_path / "nope.json"))


def test_undecodable_bytes_are_malformed(tmp_path):
    path = tmp_path / "cookies.json"
    path.write_bytes(b"\xff\xfe[]")
    with pytest.raises(MalformedCookieInput, match="not valid JSON"):
        load_cookie_file(str(path))


def test_byte_order_mark_is_accepted(tmp_path):
    path = tmp_path / "cookies.json"
    path.write_bytes(b"\xef\xbb\xbf" + json.dumps([{"name": "a", "sameSite": "lax"}]).encode("utf-8"))
    cookies = load_cookie_file(str(path))
    assert [(c.name, c.same_site) for c in cookies] == [("a", "Lax")]
