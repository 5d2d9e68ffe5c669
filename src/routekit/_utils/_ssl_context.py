import os
import ssl
from typing import Any

from .constants import ENV_DISABLE_SSL_VERIFY

# checked in order; the first one set wins
_CA_BUNDLE_ENV = ("SSL_CERT_FILE", "REQUESTS_CA_BUNDLE")


def _env_path(name: str) -> str | None:
    value = os.environ.get(name)
    if not value:
        return None
    return os.path.expanduser(os.path.expandvars(value))


def _ssl_context() -> ssl.SSLContext:
    """System trust store when available, certifi plus env bundles otherwise."""
    try:
        import truststore
    except ImportError:
        import certifi

        cafile = next(
            (path for path in map(_env_path, _CA_BUNDLE_ENV) if path),
            certifi.where(),
        )
        return ssl.create_default_context(
            cafile=cafile, capath=_env_path("SSL_CERT_DIR")
        )
    return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)


def _ssl_verification_disabled() -> bool:
    return os.environ.get(ENV_DISABLE_SSL_VERIFY, "").lower() in ("1", "true", "yes")


def get_httpx_client_kwargs(
    timeout: float, follow_redirects: bool = True
) -> dict[str, Any]:
    """Keyword arguments shared by every httpx client the router creates.

    ``ROUTEKIT_DISABLE_SSL_VERIFY`` turns certificate checks off entirely.
    """
    verify: ssl.SSLContext | bool = (
        False if _ssl_verification_disabled() else _ssl_context()
    )
    return {
        "verify": verify,
        "timeout": timeout,
        "follow_redirects": follow_redirects,
    }
