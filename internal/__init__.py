from internal.logging import LogLevel, StructuredLogger, get_logger
from internal.health import HealthChecker, Status, create_clock_check, create_hostname_check

__all__ = [
    "LogLevel",
    "StructuredLogger",
    "get_logger",
    "HealthChecker",
    "Status",
    "create_clock_check",
    "create_hostname_check",
]
