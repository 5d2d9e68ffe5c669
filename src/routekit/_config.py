import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from ._utils._decoding import KeyDecodingStrategy
from ._utils.constants import DEFAULT_TIMEOUT, ENV_FOLLOW_REDIRECTS, ENV_TIMEOUT


class RouterConfig(BaseModel):
    """Settings shared by every call a router makes."""

    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    follow_redirects: bool = True
    key_decoding_strategy: KeyDecodingStrategy = (
        KeyDecodingStrategy.CONVERT_FROM_SNAKE_CASE
    )
    default_headers: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_env(
        cls, env_file: str | Path | None = None, **overrides
    ) -> "RouterConfig":
        """Build a config from ``ROUTEKIT_*`` environment variables.

        When ``env_file`` is given it is loaded first; variables already set
        in the environment take precedence over the file. Keyword overrides
        take precedence over both.
        """
        if env_file is not None:
            load_dotenv(env_file, override=False)

        values: dict = {}
        timeout = os.getenv(ENV_TIMEOUT)
        if timeout:
            values["timeout"] = timeout
        follow_redirects = os.getenv(ENV_FOLLOW_REDIRECTS)
        if follow_redirects:
            values["follow_redirects"] = follow_redirects
        values.update(overrides)
        return cls(**values)
