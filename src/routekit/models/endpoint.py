"""Route descriptors consumed by the router."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable

from httpx import URL

from .task import HTTPTask, PlainTask

HTTPHeaders = Mapping[str, str]


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


@runtime_checkable
class EndpointType(Protocol):
    """Anything that describes a single HTTP call.

    Applications usually implement this on their own route classes, one
    property per attribute, the same way :class:`Endpoint` does with plain
    fields.
    """

    @property
    def base_url(self) -> str | URL: ...

    @property
    def path(self) -> str: ...

    @property
    def http_method(self) -> HTTPMethod: ...

    @property
    def task(self) -> HTTPTask: ...

    @property
    def headers(self) -> HTTPHeaders | None: ...


@dataclass(frozen=True)
class Endpoint:
    """Ready-made :class:`EndpointType` for routes that need no custom class."""

    base_url: str | URL
    path: str = ""
    http_method: HTTPMethod = HTTPMethod.GET
    task: HTTPTask = field(default_factory=PlainTask)
    headers: HTTPHeaders | None = None
