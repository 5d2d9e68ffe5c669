import json
import math
from collections.abc import Mapping
from typing import Any

from ..models.errors import EncodingFailedError, InvalidURLError
from ._request_spec import RequestSpec
from .constants import (
    CONTENT_TYPE_FORM_URLENCODED,
    CONTENT_TYPE_JSON,
    HEADER_CONTENT_TYPE,
)

_QUERY_PRIMITIVES = (str, int, float, bool, type(None))


def _is_query_primitive(value: Any) -> bool:
    if isinstance(value, float) and not math.isfinite(value):
        return False
    return isinstance(value, _QUERY_PRIMITIVES)


def _check_query_value(key: str, value: Any) -> None:
    if isinstance(value, (list, tuple)):
        if all(_is_query_primitive(item) for item in value):
            return
    elif _is_query_primitive(value):
        return
    raise EncodingFailedError(
        f"Cannot encode URL parameter {key!r}: {type(value).__name__} value "
        f"{value!r} is not a primitive or a list of primitives"
    )


class URLParameterEncoder:
    """Merges parameters into the request's query string.

    Values must be strings, numbers, booleans, ``None`` or lists/tuples of
    those; anything else raises :class:`EncodingFailedError`.
    """

    def encode(
        self, request: RequestSpec, parameters: Mapping[str, Any] | None
    ) -> None:
        if request.url is None:
            raise InvalidURLError()

        if parameters:
            for key, value in parameters.items():
                _check_query_value(key, value)
            request.url = request.url.copy_merge_params(dict(parameters))

        if HEADER_CONTENT_TYPE not in request.headers:
            request.set_header(HEADER_CONTENT_TYPE, CONTENT_TYPE_FORM_URLENCODED)


class JSONParameterEncoder:
    """Serializes parameters as the JSON request body."""

    def encode(
        self, request: RequestSpec, parameters: Mapping[str, Any] | None
    ) -> None:
        if parameters is None:
            return

        try:
            request.content = json.dumps(dict(parameters), allow_nan=False).encode(
                "utf-8"
            )
        except (TypeError, ValueError) as e:
            raise EncodingFailedError(f"Failed to encode JSON body: {e}") from e

        if HEADER_CONTENT_TYPE not in request.headers:
            request.set_header(HEADER_CONTENT_TYPE, CONTENT_TYPE_JSON)
