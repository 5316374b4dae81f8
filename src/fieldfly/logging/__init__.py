"""fieldfly logging: logging port and structlog adapter."""

from fieldfly.logging.port import LoggingPort
from fieldfly.logging.structlog_adapter import StructlogAdapter, configure_logging

__all__ = ["LoggingPort", "StructlogAdapter", "configure_logging"]
