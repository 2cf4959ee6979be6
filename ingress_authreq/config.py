"""
Annotation key configuration.
"""

from dataclasses import dataclass

DEFAULT_PREFIX = "ingress.kubernetes.io"

AUTH_URL = f"{DEFAULT_PREFIX}/auth-url"
AUTH_METHOD = f"{DEFAULT_PREFIX}/auth-method"
AUTH_SEND_BODY = f"{DEFAULT_PREFIX}/auth-send-body"
AUTH_PROXY_HEADERS = f"{DEFAULT_PREFIX}/auth-headers"


@dataclass(frozen=True)
class AnnotationConfig:
    """
    Naming of the annotations read by the parser.

    Attributes:
        prefix: Annotation namespace (default: "ingress.kubernetes.io")

    Example:
        config = AnnotationConfig(prefix="nginx.ingress.kubernetes.io")
        config.url_key  # "nginx.ingress.kubernetes.io/auth-url"
    """

    prefix: str = DEFAULT_PREFIX

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not self.prefix:
            raise ValueError("prefix is required")
        if "/" in self.prefix:
            raise ValueError(f"prefix must not contain '/': {self.prefix}")

    def _key(self, name: str) -> str:
        return f"{self.prefix}/{name}"

    @property
    def url_key(self) -> str:
        return self._key("auth-url")

    @property
    def method_key(self) -> str:
        return self._key("auth-method")

    @property
    def send_body_key(self) -> str:
        return self._key("auth-send-body")

    @property
    def proxy_headers_key(self) -> str:
        return self._key("auth-headers")


DEFAULT_CONFIG = AnnotationConfig()
