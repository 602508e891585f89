import os
import ssl
from typing import Any, Optional


def expand_path(path: Optional[str]) -> Optional[str]:
    """Resolve $VARS and a leading ~ in a certificate path."""
    if not path:
        return path
    return os.path.expanduser(os.path.expandvars(path))


def create_ssl_context() -> ssl.SSLContext:
    # prefer the operating system trust store when truststore is installed
    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        import certifi

        ssl_cert_file = expand_path(os.environ.get("SSL_CERT_FILE"))
        requests_ca_bundle = expand_path(os.environ.get("REQUESTS_CA_BUNDLE"))
        ssl_cert_dir = expand_path(os.environ.get("SSL_CERT_DIR"))

        return ssl.create_default_context(
            cafile=ssl_cert_file or requests_ca_bundle or certifi.where(),
            capath=ssl_cert_dir,
        )


def get_httpx_client_kwargs() -> dict[str, Any]:
    """Keyword arguments for the short-lived ``httpx.AsyncClient`` the adapter opens."""
    return {
        "verify": create_ssl_context(),
        "follow_redirects": True,
        # the per-call timeout is enforced by the adapter, not by httpx
        "timeout": None,
    }
