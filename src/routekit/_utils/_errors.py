from contextlib import contextmanager
from typing import Generator

import httpx

from ..models.errors import NetworkError, StatusCodeError

# httpcore's wording when the connection closes before any response bytes
_DISCONNECTED = "server disconnected"


def _is_disconnect(error: httpx.RemoteProtocolError) -> bool:
    return str(error).lower().startswith(_DISCONNECTED)


@contextmanager
def handle_errors() -> Generator[None, None, None]:
    """Context manager translating transport failures for a single dispatch.

    Yields:
        None: The context manager yields control to the wrapped code.

    Raises:
        NetworkError: For transport-level failures, including timeouts and
            a server that disconnects without sending a response.
        StatusCodeError: When a response arrived but its status line could
            not be read.
    """
    try:
        yield
    except httpx.RemoteProtocolError as e:
        if _is_disconnect(e):
            raise NetworkError(str(e)) from e
        raise StatusCodeError(None) from e
    except httpx.TransportError as e:
        raise NetworkError(str(e) or type(e).__name__) from e
