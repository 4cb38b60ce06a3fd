"""
Configuration for the search audit trail.
"""


class AuditConfig:
    """Configuration for search audit logging."""

    def __init__(
        self,
        log_dir: str = "./logs",
        rotation: str = "10 MB",
        retention: str = "30 days",
        compression: str = "gz",
        max_query_chars: int = 500,
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.compression = compression
        self.max_query_chars = max_query_chars


# Default configuration instance
DEFAULT_AUDIT_CONFIG = AuditConfig()
