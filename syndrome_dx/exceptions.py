"""
SyndromeDx — Ієрархія помилок

Структуровані винятки з кодом та деталями для API відповідей.
Лише справжні збої бекенду стають винятками; "немає сигналу"
(порожній випадок, жодного збігу) моделюється як результат з питаннями.
"""

from typing import Any, Dict, Optional


class SyndromeDxError(Exception):
    """Базовий виняток SyndromeDx"""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Словник для відповіді API"""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class DataAccessError(SyndromeDxError):
    """
    Збій читання довідкових даних.

    Не відновлюється локально: перериває поточний вивід без часткового результату.
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="DATA_ACCESS_ERROR",
            details={"operation": operation, **(details or {})}
        )
        self.operation = operation


class StoreConfigurationError(SyndromeDxError):
    """Неповна конфігурація сховища (URL, ключ, шлях до даних)"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            code="STORE_CONFIG_ERROR",
            details=details
        )
