"""
Audit logging for search requests.

Logs every search and search failure to JSONL format with rotation support.
"""

from typing import Any, Dict, Optional
from pathlib import Path
from datetime import datetime, timezone
import json

from loguru import logger

from src.toolscout.scoring.logging import SearchLogger
from src.toolscout.scoring.models import SearchResponse
from .config import AuditConfig, DEFAULT_AUDIT_CONFIG


class JsonlSearchLogger(SearchLogger):
    """
    Search logger writing one JSON line per search.

    Entries go through a dedicated loguru sink with automatic rotation.
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: Optional[str] = None,
        retention: Optional[str] = None,
        compression: Optional[str] = None,
        config: Optional[AuditConfig] = None,
    ):
        """
        Initialize the search audit logger.

        Args:
            log_dir: Directory for audit logs (default: ./logs)
            rotation: Log rotation size/time (default: 10 MB)
            retention: How long to keep logs (default: 30 days)
            compression: Compression format (default: gz)
            config: AuditConfig instance (overrides other params)
        """
        if config:
            self.config = config
        else:
            self.config = AuditConfig(
                log_dir=log_dir or DEFAULT_AUDIT_CONFIG.log_dir,
                rotation=rotation or DEFAULT_AUDIT_CONFIG.rotation,
                retention=retention or DEFAULT_AUDIT_CONFIG.retention,
                compression=compression or DEFAULT_AUDIT_CONFIG.compression,
            )

        self.log_path = Path(self.config.log_dir)
        self.log_path.mkdir(parents=True, exist_ok=True)
        self.log_file = self.log_path / "searches.jsonl"

        # Only records bound with this sink's id land in the file
        self._sink_key = str(self.log_file)
        self._sink_id = logger.add(
            str(self.log_file),
            format="{message}",  # Raw JSON, no formatting
            rotation=self.config.rotation,
            retention=self.config.retention,
            compression=self.config.compression,
            serialize=False,
            enqueue=True,
            filter=lambda record: record["extra"].get("audit") == self._sink_key,
        )

    def _clip(self, query: str) -> str:
        return query[: self.config.max_query_chars]

    async def log_search(
        self,
        query: str,
        result: SearchResponse,
        latency_ms: float,
    ) -> None:
        """
        Log a completed search.

        Args:
            query: Raw query text (length-capped)
            result: The response returned to the caller
            latency_ms: Wall time of the search
        """
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "event_type": "search",
            "query": self._clip(query),
            "intent": result.intent.value,
            "filters": result.filters.to_dict(),
            "result_count": len(result.results),
            "result_ids": [tool.id for tool in result.results],
            "latency_ms": round(latency_ms, 2),
            "status": "success",
        }
        self._write_entry(entry)

    async def log_search_failure(
        self,
        query: str,
        error: str,
        latency_ms: float,
    ) -> None:
        """
        Log a search that fell back to the error response.

        Args:
            query: Raw query text (length-capped)
            error: Error message or exception details
            latency_ms: Wall time until the failure
        """
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "event_type": "search",
            "query": self._clip(query),
            "latency_ms": round(latency_ms, 2),
            "status": "error",
            "error": error,
        }
        self._write_entry(entry)

    def _write_entry(self, entry: Dict[str, Any]) -> None:
        """Write a JSONL entry to the audit log."""
        json_line = json.dumps(entry, separators=(",", ":"), default=str)
        logger.bind(audit=self._sink_key).info(json_line)

    def flush(self) -> None:
        """Block until queued entries have been written."""
        logger.complete()

    def close(self) -> None:
        """Remove the audit log sink from loguru."""
        logger.remove(self._sink_id)
