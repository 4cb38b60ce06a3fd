"""Thin async client for the managed backend's PostgREST API."""

from __future__ import annotations

from typing import Any, Optional

import httpx

from src.toolscout.errors import BackendError
from src.toolscout.settings import ToolscoutSettings
from src.utils.logger import get_logger

TOOL_COLUMNS = (
    "id,name,description,long_description,category_id,pricing_type,"
    "rating,views,featured,tags,features"
)
COLLECTION_COLUMNS = (
    "id,name,description,views,shares,created_at,"
    "owner:profiles(full_name,email),collection_tools(count)"
)


class SupabaseClient:
    """Reads catalog data and invokes remote procedures over REST.

    Use as an async context manager or call aclose(). `transport` replaces
    the network layer (e.g. httpx.MockTransport).
    """

    def __init__(
        self,
        settings: Optional[ToolscoutSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = settings or ToolscoutSettings()
        self.logger = get_logger("toolscout.SupabaseClient")
        self._client = httpx.AsyncClient(
            base_url=f"{self.settings.supabase_url.rstrip('/')}/rest/v1",
            headers=self._auth_headers(),
            timeout=self.settings.request_timeout,
            transport=transport,
        )

    def _auth_headers(self) -> dict[str, str]:
        key = self.settings.supabase_key
        return {"apikey": key, "Authorization": f"Bearer {key}"}

    async def __aenter__(self) -> "SupabaseClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any]] = None,
        json: Any = None,
    ) -> Any:
        self.logger.debug(f"{method} {path}")
        try:
            response = await self._client.request(method, path, params=params, json=json)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise BackendError(
                f"{method} {path} failed: {e.response.text[:200]}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise BackendError(f"{method} {path} failed: {e}") from e

        if not response.content:
            return None
        return response.json()

    async def fetch_published_tools(self, limit: int = 100) -> list[dict[str, Any]]:
        rows = await self._request(
            "GET",
            "/ai_tools",
            params={"select": TOOL_COLUMNS, "status": "eq.Published", "limit": limit},
        )
        return rows or []

    async def fetch_categories(self) -> list[dict[str, Any]]:
        rows = await self._request("GET", "/categories", params={"select": "id,name,slug"})
        return rows or []

    async def fetch_public_collections(self, limit: int = 50) -> list[dict[str, Any]]:
        rows = await self._request(
            "GET",
            "/tool_collections",
            params={"select": COLLECTION_COLUMNS, "is_public": "eq.true", "limit": limit},
        )
        return rows or []

    async def call_rpc(self, name: str, params: Optional[dict[str, Any]] = None) -> Any:
        """Invoke a database function by name. Returns its decoded result, if any."""
        return await self._request("POST", f"/rpc/{name}", json=params or {})

    async def insert(self, table: str, row: dict[str, Any]) -> None:
        await self._request("POST", f"/{table}", json=row)
