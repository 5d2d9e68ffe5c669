from .endpoint import Endpoint, EndpointType, HTTPHeaders, HTTPMethod
from .errors import (
    DecodingFailedError,
    EncodingFailedError,
    InvalidURLError,
    NetworkError,
    NetworkRouterError,
    NoDataError,
    StatusCodeError,
)
from .reachability import ReachabilityNotification, ReachabilityStatus
from .task import (
    HTTPTask,
    ParameterEncoding,
    Parameters,
    ParametersTask,
    PlainTask,
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
    "NetworkError",
    "NetworkRouterError",
    "NoDataError",
    "ParameterEncoding",
    "Parameters",
    "ParametersTask",
    "PlainTask",
    "ReachabilityNotification",
    "ReachabilityStatus",
    "StatusCodeError",
]
