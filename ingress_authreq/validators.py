"""
Validators for individual auth annotation values.
"""

import httpx

ALLOWED_SCHEMES = ("http", "https")


class ValidationError(Exception):
    """
    An auth annotation is missing or malformed.

    Attributes:
        message: Human-readable error message
        code: Error code for programmatic handling
        field: Annotation key that failed, if known
    """

    def __init__(self, message: str, code: str = "invalid", field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.field = field


def validate_url(raw: str, field: str | None = None) -> str:
    """
    Validate an auth endpoint URL.

    The URL must have an http or https scheme and a host made of non-empty
    labels. It is returned unchanged, never re-serialized.

    Args:
        raw: URL as written in the annotation
        field: Annotation key, used in error reporting

    Returns:
        The original URL string

    Raises:
        ValidationError: If the URL is empty or malformed
    """
    if not raw:
        raise ValidationError("an empty string is not a valid URL", code="empty_url", field=field)

    try:
        url = httpx.URL(raw)
    except httpx.InvalidURL as e:
        raise ValidationError(f"invalid URL {raw!r}: {e}", code="invalid_url", field=field) from e

    if not url.scheme:
        raise ValidationError(f"URL {raw!r} has no scheme", code="missing_scheme", field=field)

    if url.scheme.lower() not in ALLOWED_SCHEMES:
        raise ValidationError(
            f"URL {raw!r} has scheme {url.scheme!r}, expected one of {list(ALLOWED_SCHEMES)}",
            code="invalid_scheme",
            field=field,
        )

    if not url.host:
        raise ValidationError(f"URL {raw!r} has no host", code="missing_host", field=field)

    if any(label == "" for label in url.host.split(".")):
        raise ValidationError(
            f"URL {raw!r} has an invalid host {url.host!r}: empty label",
            code="invalid_host",
            field=field,
        )

    return raw


def parse_bool(raw: str, field: str | None = None) -> bool:
    """
    Parse "true" or "false" (any case) into a bool.

    Raises:
        ValidationError: For any other value, including the empty string
    """
    value = raw.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValidationError(
        f"invalid boolean value {raw!r} for {field or 'field'}, expected 'true' or 'false'",
        code="invalid_bool",
        field=field,
    )


def parse_header_list(raw: str | None) -> list[str]:
    """Split a comma separated list of header names, dropping blank entries."""
    if not raw:
        return []
    # Order and case are kept; duplicates are the caller's business
    return [name.strip() for name in raw.split(",") if name.strip()]
