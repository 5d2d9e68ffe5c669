"""Parameter-passing strategies for a route."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .._utils._parameter_encoding import JSONParameterEncoder, URLParameterEncoder
from .._utils._request_spec import RequestSpec

Parameters = Mapping[str, Any]


class ParameterEncoding(Enum):
    """Where a route's parameters are written on the outgoing request."""

    URL = "url"
    JSON = "json"
    URL_AND_JSON = "url_and_json"

    def encode(
        self,
        request: RequestSpec,
        body_parameters: Parameters | None = None,
        url_parameters: Parameters | None = None,
    ) -> None:
        """Write the parameters into ``request`` in place.

        Raises:
            EncodingFailedError: If the parameters cannot be serialized.
            InvalidURLError: If the request has no URL to attach a query to.
        """
        match self:
            case ParameterEncoding.URL:
                URLParameterEncoder().encode(request, url_parameters)
            case ParameterEncoding.JSON:
                JSONParameterEncoder().encode(request, body_parameters)
            case ParameterEncoding.URL_AND_JSON:
                # JSON encoder runs first so it owns Content-Type
                JSONParameterEncoder().encode(request, body_parameters)
                URLParameterEncoder().encode(request, url_parameters)


@dataclass(frozen=True)
class PlainTask:
    """A request with no parameters."""


@dataclass(frozen=True)
class ParametersTask:
    """A request whose parameters go in the query string and/or the body."""

    body_parameters: Parameters | None = None
    body_encoding: ParameterEncoding = ParameterEncoding.JSON
    url_parameters: Parameters | None = None


HTTPTask = Union[PlainTask, ParametersTask]
