"""
SyndromeDx — Health Routes

Health check та інформація про систему.
"""

from fastapi import APIRouter, Depends

from syndrome_dx import __version__

from ..dependencies import get_manager, EngineManager
from ..models import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    manager: EngineManager = Depends(get_manager)
) -> HealthResponse:
    """
    Перевірка стану сервера.

    Повертає:
    - Статус сервера
    - Чи підключене сховище довідкових даних
    - Чи ввімкнено журнал запусків
    """
    return HealthResponse(
        status="ok" if manager.is_loaded else "degraded",
        version=__version__,
        store_ready=manager.is_loaded,
        store_backend=manager.backend_name,
        audit_enabled=manager.run_logger.enabled,
        error=manager.error,
    )


@router.get("/")
async def root():
    """Головна сторінка API"""
    return {
        "name": "SyndromeDx API",
        "version": __version__,
        "description": "Диференціальна діагностика синдромів традиційної медицини",
        "docs": "/docs",
        "health": "/health",
    }
