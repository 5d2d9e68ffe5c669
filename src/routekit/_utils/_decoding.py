"""JSON response decoding with wire-key conversion."""

import json
from enum import Enum
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from ..models.errors import DecodingFailedError

T = TypeVar("T")


class KeyDecodingStrategy(str, Enum):
    USE_DEFAULT_KEYS = "use_default_keys"
    CONVERT_FROM_SNAKE_CASE = "convert_from_snake_case"


def convert_from_snake_case(key: str) -> str:
    """Convert a snake_case key to camelCase.

    Leading and trailing underscores are preserved and the words between
    them are joined by pydantic's ``to_camel``. Keys without an inner
    underscore are returned unchanged.

    Examples:
        >>> convert_from_snake_case("user_id")
        'userId'
        >>> convert_from_snake_case("_created_at_")
        '_createdAt_'
        >>> convert_from_snake_case("userId")
        'userId'
    """
    stripped = key.strip("_")
    if not stripped or "_" not in stripped:
        return key

    leading = key[: len(key) - len(key.lstrip("_"))]
    trailing = key[len(key.rstrip("_")) :]
    # to_camel keeps doubled separators, so collapse them first
    words = "_".join(word for word in stripped.split("_") if word)
    return f"{leading}{to_camel(words)}{trailing}"


def _convert_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            convert_from_snake_case(key): _convert_keys(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [_convert_keys(item) for item in value]
    return value


@lru_cache(maxsize=128)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


class JSONDecoder:
    """Decodes JSON bytes into any type pydantic can validate.

    Targets can be pydantic models, dataclasses, TypedDicts or plain
    containers such as ``list[int]``.
    """

    def __init__(
        self,
        key_decoding_strategy: KeyDecodingStrategy | None = None,
    ) -> None:
        self.key_decoding_strategy = (
            key_decoding_strategy or KeyDecodingStrategy.CONVERT_FROM_SNAKE_CASE
        )

    def decode(self, target: type[T], data: bytes | str) -> T:
        """Decode ``data`` into an instance of ``target``.

        Raises:
            DecodingFailedError: If ``data`` is not valid JSON or does not
                validate against ``target``.
        """
        try:
            payload = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodingFailedError(target, f"invalid JSON: {e}") from e

        if self.key_decoding_strategy == KeyDecodingStrategy.CONVERT_FROM_SNAKE_CASE:
            payload = _convert_keys(payload)

        try:
            return _adapter(target).validate_python(payload)
        except ValidationError as e:
            raise DecodingFailedError(target, str(e)) from e
