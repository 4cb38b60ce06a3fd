import sys
from typing import Literal
from loguru import logger

# Global namespace for all loggers
BASE_LOGGER_NAMESPACE = "toolscout"

# Initialization guard to prevent duplicate configuration
_configured = False


def get_logger(name: str) -> "logger":
    """
    Returns a loguru logger bound with the given module name.

    Example: get_logger("ToolSearch") → logger with module="toolscout.ToolSearch"

    Names already carrying the namespace prefix are bound unchanged.
    """
    if name == BASE_LOGGER_NAMESPACE or name.startswith(f"{BASE_LOGGER_NAMESPACE}."):
        return logger.bind(module=name)
    return logger.bind(module=f"{BASE_LOGGER_NAMESPACE}.{name}")


def configure_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO",
) -> None:
    """
    Configures loguru globally for the entire app.

    Should be called once (e.g., from the CLI entry point).
    Subsequent calls are no-ops to prevent duplicate handlers.

    Args:
        level: Logging level as a string.
    """
    global _configured
    if _configured:
        return

    # Remove default loguru handler
    logger.remove()

    # Module-bound records; audit records go to their own sink only
    logger.add(
        sys.stderr,
        format="<level>{level: <8}</level> | <cyan>{extra[module]}</cyan> | {message}",
        level=level,
        colorize=True,
        filter=lambda record: "module" in record["extra"] and not record["extra"].get("audit"),
    )

    # Fallback handler for loggers without module binding
    logger.add(
        sys.stderr,
        format="<level>{level: <8}</level> | {message}",
        level=level,
        colorize=True,
        filter=lambda record: "module" not in record["extra"] and not record["extra"].get("audit"),
    )

    _configured = True
