"""Abstract logging interface for search events."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .models import SearchResponse


class SearchLogger(ABC):
    """Abstract interface for search event logging."""

    @abstractmethod
    async def log_search(
        self,
        query: str,
        result: SearchResponse,
        latency_ms: float,
    ) -> None: ...

    @abstractmethod
    async def log_search_failure(
        self,
        query: str,
        error: str,
        latency_ms: float,
    ) -> None: ...


class NullSearchLogger(SearchLogger):
    """No-op logger. Default when no audit trail configured."""

    async def log_search(
        self,
        query: str,
        result: SearchResponse,
        latency_ms: float,
    ) -> None:
        pass

    async def log_search_failure(
        self,
        query: str,
        error: str,
        latency_ms: float,
    ) -> None:
        pass
