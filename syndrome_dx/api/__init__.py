"""
SyndromeDx — REST API модуль

FastAPI REST API для виводу синдромів.

Компоненти:
- app.py: FastAPI application
- routes/: API endpoints
- models.py: Pydantic models
- dependencies.py: Сховище, конвеєр та журнал запусків

Запуск:
    uvicorn syndrome_dx.api.app:app --reload --port 8000

Або:
    python scripts/run_api.py

Документація:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)

Endpoints:
    GET  /              - Root info
    GET  /health        - Health check
    POST /api/infer     - Вивід синдромів за симптомами
"""

from .app import app
from .dependencies import engine_manager, get_manager, get_pipeline, get_run_logger


__all__ = [
    "app",
    "engine_manager",
    "get_manager",
    "get_pipeline",
    "get_run_logger",
]
