import os
import ssl
from typing import Any, Optional


def _env_path(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if not value:
        return None
    return os.path.expanduser(os.path.expandvars(value))


def create_ssl_context() -> ssl.SSLContext:
    """SSL context for api.vk.com.

    Uses the system trust store through truststore when it is installed,
    otherwise the bundle from SSL_CERT_FILE, REQUESTS_CA_BUNDLE or certifi.
    """
    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        import certifi

        return ssl.create_default_context(
            cafile=_env_path("SSL_CERT_FILE")
            or _env_path("REQUESTS_CA_BUNDLE")
            or certifi.where(),
            capath=_env_path("SSL_CERT_DIR"),
        )


def get_httpx_client_kwargs() -> dict[str, Any]:
    """Default keyword arguments for the httpx clients talking to VK."""
    return {
        "verify": create_ssl_context(),
        "follow_redirects": True,
    }
