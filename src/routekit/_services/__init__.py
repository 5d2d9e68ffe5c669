from ._notifications import NotificationCenter
from ._reachability import Reachability
from ._router import NetworkRouter, RequestInterceptor

__all__ = [
    "NetworkRouter",
    "NotificationCenter",
    "Reachability",
    "RequestInterceptor",
]
