"""Service configuration."""

import re
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .schemas import Size

_SIZE_PATTERN = re.compile(r"(\d+)x(\d+)")


def parse_size(value: str) -> Size:
    """Parse a ``WxH`` string such as ``1000x1000``.

    The pattern is searched, not anchored, so surrounding text is ignored.

    Raises:
        ValueError: If no ``WxH`` pair is present
    """
    match = _SIZE_PATTERN.search(value)
    if match is None:
        raise ValueError(f"expected size in the format WxH, got {value!r}")
    return Size(int(match.group(1)), int(match.group(2)))


class ResizerConfig(BaseModel):
    """Runtime configuration for the resizer service.

    Attributes:
        base_url: Origin prefix that keys are appended to
        listen: ``host:port`` the HTTP server binds
        max_size: Largest width and height a client may request
        fetch_timeout: Origin request deadline in seconds (None = no deadline)
        log_level: loguru level name
    """

    base_url: str
    listen: str = "0.0.0.0:8080"
    max_size: Size = Size(1000, 1000)
    fetch_timeout: float | None = Field(default=30.0)
    log_level: str = "INFO"

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v:
            raise ValueError("a base URL must be provided")
        return v

    @field_validator("listen")
    @classmethod
    def validate_listen(cls, v: str) -> str:
        if not v:
            raise ValueError("a listen address is required")
        _, sep, port = v.rpartition(":")
        if not sep or not port.isdigit():
            raise ValueError(f"expected listen address in the format host:port, got {v!r}")
        return v

    @field_validator("max_size", mode="before")
    @classmethod
    def validate_max_size(cls, v: object) -> object:
        if isinstance(v, str):
            return parse_size(v)
        return v

    @field_validator("fetch_timeout")
    @classmethod
    def validate_fetch_timeout(cls, v: float | None) -> float | None:
        # Non-positive means "wait forever"
        if v is not None and v <= 0:
            return None
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return v.upper()

    @property
    def host(self) -> str:
        host, _, _ = self.listen.rpartition(":")
        return host or "0.0.0.0"

    @property
    def port(self) -> int:
        _, _, port = self.listen.rpartition(":")
        return int(port)
