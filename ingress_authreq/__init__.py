"""
ingress-authreq: External authentication annotations for ingress resources.

This library provides:
- Parsing of the auth-url, auth-method, auth-send-body and auth-headers annotations
- Validation with precise, per-annotation error codes
- An immutable descriptor for proxy configuration templates

Quick start:
    from ingress_authreq import ValidationError, parse_annotations

    try:
        auth = parse_annotations(ingress["metadata"]["annotations"])
    except ValidationError as e:
        log.warning(f"{e.field}: {e.message}")
    else:
        render(auth_url=auth.url, auth_method=auth.method)
"""

from ingress_authreq.config import (
    AUTH_METHOD,
    AUTH_PROXY_HEADERS,
    AUTH_SEND_BODY,
    AUTH_URL,
    DEFAULT_CONFIG,
    AnnotationConfig,
)
from ingress_authreq.core import auth_url, is_auth_configured, parse_annotations, parse_ingress
from ingress_authreq.descriptor import AuthDescriptor
from ingress_authreq.validators import (
    ValidationError,
    parse_bool,
    parse_header_list,
    validate_url,
)

__version__ = "0.1.0"

__all__ = [
    # Config
    "AnnotationConfig",
    "DEFAULT_CONFIG",
    "AUTH_URL",
    "AUTH_METHOD",
    "AUTH_SEND_BODY",
    "AUTH_PROXY_HEADERS",
    # Descriptor
    "AuthDescriptor",
    # Core
    "parse_annotations",
    "parse_ingress",
    "auth_url",
    "is_auth_configured",
    # Validators
    "ValidationError",
    "validate_url",
    "parse_bool",
    "parse_header_list",
]
