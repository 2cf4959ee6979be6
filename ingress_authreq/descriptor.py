"""
External authentication descriptor.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AuthDescriptor:
    """
    Validated external authentication settings for one ingress.

    Attributes:
        url: Authentication endpoint, exactly as written in the annotation
        method: HTTP method for the subrequest ("" lets the renderer pick)
        send_body: Whether the request body is forwarded to the endpoint
        proxy_headers: Response headers to copy from the auth response, in order

    Example:
        descriptor = AuthDescriptor(
            url="http://auth.example.com/check",
            method="POST",
            send_body=True,
            proxy_headers=("X-User", "X-Groups"),
        )
    """

    url: str
    method: str = ""
    send_body: bool = False
    proxy_headers: tuple[str, ...] = ()

    @property
    def has_proxy_headers(self) -> bool:
        """Check if any response headers should be forwarded."""
        return bool(self.proxy_headers)

    def to_dict(self) -> dict[str, Any]:
        """Mapping consumed by the proxy configuration templates."""
        return {
            "url": self.url,
            "method": self.method,
            "sendBody": self.send_body,
            "proxyHeaders": list(self.proxy_headers),
        }
