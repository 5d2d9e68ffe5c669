from logging import DEBUG, Logger, getLogger

from ._request_spec import RequestSpec
from .constants import PACKAGE_NAME, SENSITIVE_HEADERS

MASK = "***"


class NetworkLogger:
    """Writes outgoing requests to the ``routekit`` logger at DEBUG level.

    Credential-bearing headers are masked.
    """

    def __init__(self, logger: Logger | None = None) -> None:
        self._logger = logger or getLogger(PACKAGE_NAME)

    def log(self, request: RequestSpec) -> None:
        if not self._logger.isEnabledFor(DEBUG):
            return
        self._logger.debug(self.format(request))

    @staticmethod
    def format(request: RequestSpec) -> str:
        url = request.url
        lines = [
            "- - - - - - - - - - OUTGOING - - - - - - - - - -",
            str(url),
            "",
        ]
        if url is not None:
            target = url.raw_path.decode("ascii")
            lines.append(f"{request.method} {target} HTTP/1.1")
            lines.append(f"HOST: {url.host}")

        for key, value in request.headers.items():
            if key.lower() in SENSITIVE_HEADERS:
                value = MASK
            lines.append(f"{key}: {value}")

        if request.content:
            lines.append("")
            lines.append(request.content.decode("utf-8", errors="replace"))

        lines.append("- - - - - - - - - - END - - - - - - - - - -")
        return "\n".join(lines)
