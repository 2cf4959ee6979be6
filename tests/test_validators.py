"""
Tests for URL, boolean and header list validators.
"""

import pytest

from ingress_authreq import ValidationError, parse_bool, parse_header_list, validate_url


@pytest.mark.parametrize(
    "url",
    [
        "http://bar.foo.com/external-auth",
        "https://auth.example.com:8443/check?x=1",
        "http://localhost/auth",
        "http://10.0.0.1/auth",
    ],
)
def test_valid_url_returned_verbatim(url):
    """Test that valid URLs come back unchanged."""
    assert validate_url(url) == url


def test_url_not_normalized():
    """Test that the original spelling is preserved."""
    url = "HTTP://Auth.Example.COM/Check"
    assert validate_url(url) == url


@pytest.mark.parametrize(
    "url, code",
    [
        ("", "empty_url"),
        ("bar", "missing_scheme"),
        ("ftp://foo.com/auth", "invalid_scheme"),
        ("http://", "missing_host"),
        ("http://foo..bar.com", "invalid_host"),
        ("http://.foo.com/auth", "invalid_host"),
        ("http://foo.com./auth", "invalid_host"),
        ("http://foo.com:abc/auth", "invalid_url"),
    ],
)
def test_invalid_url(url, code):
    """Test that malformed URLs are rejected with a specific code."""
    with pytest.raises(ValidationError) as exc_info:
        validate_url(url, field="auth-url")

    assert exc_info.value.code == code
    assert exc_info.value.field == "auth-url"


@pytest.mark.parametrize(
    "raw, expected",
    [("true", True), ("false", False), ("True", True), ("FALSE", False), (" true ", True)],
)
def test_parse_bool(raw, expected):
    """Test accepted boolean spellings."""
    assert parse_bool(raw) is expected


@pytest.mark.parametrize("raw", ["", "1", "0", "yes", "no", "t", "truthy"])
def test_parse_bool_rejects_other_values(raw):
    """Test that anything but true/false is an error naming the field and value."""
    with pytest.raises(ValidationError) as exc_info:
        parse_bool(raw, field="auth-send-body")

    assert exc_info.value.code == "invalid_bool"
    assert exc_info.value.field == "auth-send-body"
    assert repr(raw) in exc_info.value.message


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, []),
        ("", []),
        ("   ", []),
        ("X-Header1, X-Header2", ["X-Header1", "X-Header2"]),
        ("X-User", ["X-User"]),
        ("X-B,X-A,X-B", ["X-B", "X-A", "X-B"]),
        ("x-lower, X-UPPER", ["x-lower", "X-UPPER"]),
        ("X-One,, ,X-Two,", ["X-One", "X-Two"]),
    ],
)
def test_parse_header_list(raw, expected):
    """Test header list splitting keeps order, case and duplicates."""
    assert parse_header_list(raw) == expected
