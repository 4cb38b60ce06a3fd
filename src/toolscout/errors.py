"""Exception types raised by the data-access layer."""

from __future__ import annotations

from typing import Optional


class ToolscoutError(Exception):
    """Base class for toolscout errors."""


class BackendError(ToolscoutError):
    """A request to the managed backend failed.

    status_code is None for transport failures (DNS, connect, timeout).
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    def __str__(self) -> str:
        base = super().__str__()
        if self.status_code is None:
            return base
        return f"{base} (HTTP {self.status_code})"
