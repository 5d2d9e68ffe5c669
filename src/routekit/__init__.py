"""routekit: typed HTTP routes dispatched through httpx.

Describe an endpoint, hand it to a :class:`NetworkRouter` and get back a
decoded value::

    from pydantic import BaseModel

    from routekit import Endpoint, HTTPMethod, NetworkRouter


    class User(BaseModel):
        userId: int
        name: str


    router = NetworkRouter()
    user = router.execute(
        Endpoint(base_url="https://api.example.com", path="users/1"),
        User,
    )
"""

from ._config import RouterConfig
from ._services import (
    NetworkRouter,
    NotificationCenter,
    Reachability,
    RequestInterceptor,
)
from ._utils._decoding import (
    JSONDecoder,
    KeyDecodingStrategy,
    convert_from_snake_case,
)
from ._utils._network_logger import NetworkLogger
from ._utils._parameter_encoding import JSONParameterEncoder, URLParameterEncoder
from ._utils._request_spec import RequestSpec
from .models import (
    DecodingFailedError,
    EncodingFailedError,
    Endpoint,
    EndpointType,
    HTTPHeaders,
    HTTPMethod,
    HTTPTask,
    InvalidURLError,
    NetworkError,
    NetworkRouterError,
    NoDataError,
    ParameterEncoding,
    Parameters,
    ParametersTask,
    PlainTask,
    ReachabilityNotification,
    ReachabilityStatus,
    StatusCodeError,
)

__all__ = [
    "DecodingFailedError",
    "EncodingFailedError",
    "Endpoint",
    "EndpointType",
    "HTTPHeaders",
    "HTTPMethod",
    "HTTPTask",
    "InvalidURLError",
    "JSONDecoder",
    "JSONParameterEncoder",
    "KeyDecodingStrategy",
    "NetworkError",
    "NetworkLogger",
    "NetworkRouter",
    "NetworkRouterError",
    "NoDataError",
    "NotificationCenter",
    "ParameterEncoding",
    "Parameters",
    "ParametersTask",
    "PlainTask",
    "Reachability",
    "ReachabilityNotification",
    "ReachabilityStatus",
    "RequestInterceptor",
    "RequestSpec",
    "RouterConfig",
    "StatusCodeError",
    "URLParameterEncoder",
    "convert_from_snake_case",
]
