class NetworkRouterError(Exception):
    """Base class for every failure raised by a router call."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class EncodingFailedError(NetworkRouterError):
    """Raised when a route could not be turned into a request.

    Covers parameter encoding failures as well as anything else that goes
    wrong while the request is being built.
    """

    def __init__(self, message: str = "Failed to encode request parameters."):
        super().__init__(message)


class InvalidURLError(EncodingFailedError):
    """Raised when the base URL and path do not form a usable address."""

    def __init__(self, url: str | None = None):
        self.url = url
        if url is None:
            message = "Request is missing a URL."
        else:
            message = f"Invalid request URL: {url!r}"
        super().__init__(message)


class NetworkError(NetworkRouterError):
    """Raised when the transport fails before a response is received.

    Attributes:
        data: Whatever partial response body was read, if any.
    """

    def __init__(self, message: str, data: bytes | None = None):
        self.data = data
        super().__init__(message)


class StatusCodeError(NetworkRouterError):
    """Raised when the response status is missing or not a usable 2xx.

    Attributes:
        status_code: The HTTP status, or ``None`` when no status line could
            be read.
        body: The raw response body, if any.
    """

    def __init__(self, status_code: int | None, body: bytes | None = None):
        self.status_code = status_code
        self.body = body
        if status_code is None:
            message = "Response did not carry a recognizable status line."
        else:
            message = f"Unexpected response status: {status_code}"
        super().__init__(message)


class NoDataError(NetworkRouterError):
    def __init__(self, message: str = "Response body is empty."):
        super().__init__(message)


class DecodingFailedError(NetworkRouterError):
    """Raised when a response body cannot be decoded into the target type."""

    def __init__(self, target: object, reason: str):
        self.target = target
        self.reason = reason
        name = getattr(target, "__name__", repr(target))
        super().__init__(f"Failed to decode response into {name}: {reason}")
