"""SyndromeDx — Журнал запусків виводу (audit)"""

from .run_logger import RunLogger, create_run_logger


__all__ = [
    "RunLogger",
    "create_run_logger",
]
