"""
SyndromeDx — FastAPI Application

Головний файл FastAPI додатку.

Запуск:
    uvicorn syndrome_dx.api.app:app --reload --host 0.0.0.0 --port 8000

    або:

    python scripts/run_api.py
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import time

from syndrome_dx.exceptions import DataAccessError, StoreConfigurationError

from .config import config
from .dependencies import engine_manager
from .routes import health_router, inference_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifecycle manager — підключення сховища при старті.
    """
    print("=" * 60)
    print("🏥 SyndromeDx API Starting...")
    print("=" * 60)

    success = engine_manager.load()

    if success:
        print("✅ API ready!")
    else:
        print(f"⚠️ API starting in limited mode: {engine_manager.error}")

    print("=" * 60)
    print(f"📍 Swagger UI: http://{config.host}:{config.port}/docs")
    print("=" * 60)

    yield

    print("🛑 SyndromeDx API Stopping...")


# Створюємо додаток
app = FastAPI(
    title=config.api_title,
    description=config.api_description,
    version=config.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=config.cors_allow_credentials,
    allow_methods=config.cors_allow_methods,
    allow_headers=config.cors_allow_headers,
)


# Middleware для логування запитів
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    process_time = time.time() - start_time

    # Логуємо тільки API запити
    if request.url.path.startswith(config.api_prefix):
        print(f"📨 {request.method} {request.url.path} → {response.status_code} ({process_time*1000:.1f}ms)")

    return response


@app.exception_handler(DataAccessError)
async def data_access_exception_handler(request: Request, exc: DataAccessError):
    print(f"❌ Data access error: {exc.message}")
    return JSONResponse(status_code=502, content=exc.to_dict())


@app.exception_handler(StoreConfigurationError)
async def store_config_exception_handler(request: Request, exc: StoreConfigurationError):
    print(f"❌ Store configuration error: {exc.message}")
    return JSONResponse(status_code=503, content=exc.to_dict())


# Глобальний обробник помилок
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    print(f"❌ Error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "INTERNAL_ERROR",
            "message": str(exc) if config.debug else "Internal server error",
            "details": {},
        }
    )


# Підключаємо роутери
app.include_router(health_router)
app.include_router(inference_router, prefix=config.api_prefix)
