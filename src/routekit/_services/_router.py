import threading
from logging import getLogger
from typing import Any, Callable, Generic, TypeVar

from httpx import URL, AsyncClient, Client, Headers, InvalidURL, Response

from .._config import RouterConfig
from .._utils import user_agent_value
from .._utils._decoding import JSONDecoder
from .._utils._errors import handle_errors
from .._utils._network_logger import NetworkLogger
from .._utils._request_spec import RequestSpec
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import (
    CONTENT_TYPE_JSON,
    HEADER_CACHE_CONTROL,
    HEADER_CONTENT_TYPE,
    HEADER_PRAGMA,
    HEADER_USER_AGENT,
    NO_CACHE,
)
from ..models.endpoint import EndpointType, HTTPHeaders
from ..models.errors import (
    EncodingFailedError,
    InvalidURLError,
    NoDataError,
    StatusCodeError,
)
from ..models.reachability import ReachabilityNotification, ReachabilityStatus
from ..models.task import ParametersTask, PlainTask
from ._notifications import NotificationCenter
from ._reachability import Reachability

E = TypeVar("E", bound=EndpointType)
T = TypeVar("T")

RequestInterceptor = Callable[[RequestSpec], None]


def resolve_url(base_url: str | URL, path: str) -> URL:
    """Append ``path`` to ``base_url`` as a single path component.

    Raises:
        InvalidURLError: If the result is not an absolute http(s) URL.
    """
    raw = str(base_url)
    if path:
        raw = f"{raw.rstrip('/')}/{path.lstrip('/')}"

    try:
        url = URL(raw)
    except InvalidURL as e:
        raise InvalidURLError(raw) from e

    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidURLError(raw)
    return url


def is_success_status(status_code: int) -> bool:
    # 204 carries nothing to decode
    return 200 <= status_code <= 299 and status_code != 204


class NetworkRouter(Generic[E]):
    """Builds, sends and decodes requests for routes of type ``E``.

    A router holds only shared configuration (clients, interceptor, logger,
    reachability wiring) and can serve any number of concurrent calls; every
    call builds and owns its own :class:`RequestSpec`.

    Args:
        config: Router settings. Defaults to ``RouterConfig()``.
        interceptor: Optional callback that may mutate each request right
            before it is sent, e.g. to add an ``Authorization`` header. The
            router keeps a reference but does not own it; replace or clear
            it through the ``interceptor`` attribute.
        request_logger: Receives every outgoing request once. Defaults to a
            :class:`NetworkLogger`.
        client: ``httpx.Client`` used by :meth:`execute`. Created from
            ``config`` when omitted; injected clients are not closed by the
            router.
        async_client: ``httpx.AsyncClient`` used by :meth:`execute_async`.
        reachability: Source of connectivity changes. Each change is posted
            on ``notifications``. A reachability reports to a single router;
            passing one that already has an observer raises ``ValueError``.
        notifications: Channel reachability events are posted on.
    """

    def __init__(
        self,
        config: RouterConfig | None = None,
        *,
        interceptor: RequestInterceptor | None = None,
        request_logger: NetworkLogger | None = None,
        client: Client | None = None,
        async_client: AsyncClient | None = None,
        reachability: Reachability | None = None,
        notifications: NotificationCenter | None = None,
    ) -> None:
        self._logger = getLogger("routekit")
        self._config = config or RouterConfig()
        self.interceptor = interceptor
        self._request_logger = request_logger or NetworkLogger()
        self._decoder = JSONDecoder(self._config.key_decoding_strategy)

        # owned clients are created on first use
        self._owns_client = client is None
        self._owns_client_async = async_client is None
        self._client: Client | None = client
        self._client_async: AsyncClient | None = async_client
        self._client_lock = threading.Lock()

        if reachability is not None and reachability.observer is not None:
            raise ValueError("Reachability is already observed by another owner")
        self.notifications = notifications or NotificationCenter()
        self.reachability = reachability or Reachability()
        self.reachability.observer = self._reachability_status_changed

        self._logger.debug(f"HEADERS: {self.default_headers}")

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            HEADER_USER_AGENT: user_agent_value(),
            **self._config.default_headers,
        }

    def build_request(self, route: E) -> RequestSpec:
        """Turn ``route`` into a complete request without sending it.

        Raises:
            InvalidURLError: If the base URL and path do not form a URL.
            EncodingFailedError: If the route's parameters cannot be encoded.
        """
        request = RequestSpec(
            method=_method_name(route.http_method),
            url=resolve_url(route.base_url, route.path),
            timeout=self._config.timeout,
        )
        request.set_header(HEADER_CACHE_CONTROL, NO_CACHE)
        request.set_header(HEADER_PRAGMA, NO_CACHE)

        match route.task:
            case PlainTask():
                request.set_header(HEADER_CONTENT_TYPE, CONTENT_TYPE_JSON)
                self._add_additional_headers(route.headers, request)
            case ParametersTask(
                body_parameters=body_parameters,
                body_encoding=body_encoding,
                url_parameters=url_parameters,
            ):
                self._add_additional_headers(route.headers, request)
                body_encoding.encode(request, body_parameters, url_parameters)
            case _:
                raise EncodingFailedError(f"Unsupported task: {route.task!r}")

        return request

    def execute(self, route: E, response_type: type[T]) -> T:
        """Send ``route`` and decode the response body into ``response_type``.

        Raises:
            EncodingFailedError: If the request could not be built.
            NetworkError: If the transport failed.
            StatusCodeError: If the status is missing, 204 or outside 2xx.
            NoDataError: If a successful response has an empty body.
            DecodingFailedError: If the body does not decode into
                ``response_type``.
        """
        request = self._prepare(route)

        client = self._sync_client()
        with handle_errors():
            response = client.send(request.build(client))

        return self._handle_response(request, response, response_type)

    async def execute_async(self, route: E, response_type: type[T]) -> T:
        """Asynchronous :meth:`execute`, dispatched on the async client."""
        request = self._prepare(route)

        client = self._async_client()
        with handle_errors():
            response = await client.send(request.build(client))

        return self._handle_response(request, response, response_type)

    def close(self) -> None:
        """Close the clients this router created. Injected clients stay open."""
        if self._owns_client and self._client is not None:
            self._client.close()

    async def aclose(self) -> None:
        self.close()
        if self._owns_client_async and self._client_async is not None:
            await self._client_async.aclose()

    def __enter__(self) -> "NetworkRouter[E]":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> "NetworkRouter[E]":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def _client_kwargs(self) -> dict[str, Any]:
        return {
            **get_httpx_client_kwargs(
                self._config.timeout, self._config.follow_redirects
            ),
            "headers": Headers(self.default_headers),
        }

    def _sync_client(self) -> Client:
        with self._client_lock:
            if self._client is None:
                self._client = Client(**self._client_kwargs())
            return self._client

    def _async_client(self) -> AsyncClient:
        if self._client_async is None:
            self._client_async = AsyncClient(**self._client_kwargs())
        return self._client_async

    def _prepare(self, route: E) -> RequestSpec:
        try:
            request = self.build_request(route)
        except EncodingFailedError:
            raise
        except Exception as e:
            raise EncodingFailedError(f"Failed to build request: {e}") from e

        if self.interceptor is not None:
            self.interceptor(request)

        if request.url is None:
            raise InvalidURLError()

        self._request_logger.log(request)
        return request

    def _handle_response(
        self, request: RequestSpec, response: Response, response_type: type[T]
    ) -> T:
        status_code = response.status_code
        self._logger.debug(f"Response: {status_code} {request.method} {request.url}")

        if not is_success_status(status_code):
            self._logger.warning(
                f"Request failed with status {status_code}: "
                f"{request.method} {request.url}"
            )
            raise StatusCodeError(status_code, response.content)

        if not response.content:
            raise NoDataError()

        return self._decoder.decode(response_type, response.content)

    @staticmethod
    def _add_additional_headers(
        headers: HTTPHeaders | None, request: RequestSpec
    ) -> None:
        if headers is None:
            return
        for key, value in headers.items():
            request.set_header(key, value)

    def _reachability_status_changed(self, status: ReachabilityStatus) -> None:
        self.notifications.post(ReachabilityNotification.for_status(status))


def _method_name(method: Any) -> str:
    return str(getattr(method, "value", method)).upper()
