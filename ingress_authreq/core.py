"""
Core annotation parsing functions.
"""

import logging
from collections.abc import Mapping
from typing import Any

from ingress_authreq.config import DEFAULT_CONFIG, AnnotationConfig
from ingress_authreq.descriptor import AuthDescriptor
from ingress_authreq.validators import (
    ValidationError,
    parse_bool,
    parse_header_list,
    validate_url,
)

logger = logging.getLogger(__name__)


def auth_url(
    annotations: Mapping[str, str] | None,
    config: AnnotationConfig = DEFAULT_CONFIG,
) -> str:
    """
    Read the raw auth URL annotation.

    Args:
        annotations: Ingress annotations (may be None)
        config: Annotation naming

    Returns:
        The annotation value, unvalidated

    Raises:
        ValidationError: If the annotation is not set
    """
    if annotations is None or config.url_key not in annotations:
        raise ValidationError(
            f"annotation {config.url_key} is not set",
            code="missing_url",
            field=config.url_key,
        )
    return annotations[config.url_key]


def is_auth_configured(
    annotations: Mapping[str, str] | None,
    config: AnnotationConfig = DEFAULT_CONFIG,
) -> bool:
    """Check if the ingress asks for external authentication at all."""
    return bool(annotations and annotations.get(config.url_key))


def parse_annotations(
    annotations: Mapping[str, str] | None,
    config: AnnotationConfig = DEFAULT_CONFIG,
) -> AuthDescriptor:
    """
    Build an AuthDescriptor from ingress annotations.

    This is the main entry point. It:
    1. Reads and validates the auth URL (fails first if it is bad)
    2. Reads the method as-is
    3. Parses the send-body flag (False when the annotation is absent)
    4. Splits the proxied response header list

    The annotations mapping is only read, never modified. Keys that are not
    auth annotations are ignored.

    Args:
        annotations: Ingress annotations
        config: Annotation naming

    Returns:
        A new AuthDescriptor

    Raises:
        ValidationError: On the first missing or malformed annotation

    Example:
        try:
            auth = parse_annotations(ingress["metadata"].get("annotations"))
        except ValidationError as e:
            print(f"auth disabled: {e.message} ({e.code})")
    """
    if annotations is None:
        annotations = {}

    raw_url = auth_url(annotations, config)
    try:
        url = validate_url(raw_url, field=config.url_key)
    except ValidationError as e:
        logger.warning(f"Invalid auth URL: {e.message}")
        raise

    method = annotations.get(config.method_key, "")

    raw_send_body = annotations.get(config.send_body_key)
    send_body = False
    if raw_send_body is not None:
        try:
            send_body = parse_bool(raw_send_body, field=config.send_body_key)
        except ValidationError as e:
            logger.warning(f"Invalid auth annotation: {e.message}")
            raise

    proxy_headers = tuple(parse_header_list(annotations.get(config.proxy_headers_key)))

    descriptor = AuthDescriptor(
        url=url,
        method=method,
        send_body=send_body,
        proxy_headers=proxy_headers,
    )
    logger.debug(f"Parsed external auth for {url}")
    return descriptor


def _ingress_annotations(ingress: Any) -> Mapping[str, str] | None:
    """Pull annotations out of a manifest dict or an API model object."""
    if isinstance(ingress, Mapping):
        metadata = ingress.get("metadata") or {}
        return metadata.get("annotations")

    metadata = getattr(ingress, "metadata", None)
    if metadata is None:
        return None
    return getattr(metadata, "annotations", None)


def parse_ingress(
    ingress: Any,
    config: AnnotationConfig = DEFAULT_CONFIG,
) -> AuthDescriptor:
    """
    Build an AuthDescriptor from a whole ingress resource.

    Accepts either a manifest mapping ({"metadata": {"annotations": {...}}})
    or an object with ``metadata.annotations``, such as a Kubernetes client
    model.

    Raises:
        ValidationError: If the auth annotations are missing or malformed
    """
    return parse_annotations(_ingress_annotations(ingress), config)
