"""
SyndromeDx — API Dependencies

Dependency Injection для FastAPI.
Створення сховища, конвеєра виводу та журналу запусків.
"""

from pathlib import Path
from typing import Optional
import threading

from fastapi import HTTPException

from syndrome_dx.audit import RunLogger, create_run_logger
from syndrome_dx.config import SyndromeDxConfig, StoreBackend, get_default_config, load_config
from syndrome_dx.exceptions import SyndromeDxError
from syndrome_dx.inference_engine import InferencePipeline
from syndrome_dx.store import ReferenceDataStore, create_store

from .config import config as api_config


class EngineManager:
    """
    Менеджер конвеєра — створює сховище та конвеєр один раз.
    Singleton pattern.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self.reset()

    def reset(self) -> None:
        """Скинути стан (наприклад, між тестами)"""
        self.is_loaded = False
        self.config: Optional[SyndromeDxConfig] = None
        self.store: Optional[ReferenceDataStore] = None
        self.pipeline: Optional[InferencePipeline] = None
        self.run_logger: RunLogger = RunLogger.disabled()
        self.error: Optional[str] = None

    def load(self) -> bool:
        """Створити сховище та конвеєр з конфігурації"""
        if self.is_loaded:
            return True

        try:
            print("📦 Ініціалізація сховища...")

            if api_config.config_path and Path(api_config.config_path).exists():
                dx_config = load_config(api_config.config_path)
                print(f"   ✅ Config: {api_config.config_path}")
            else:
                dx_config = get_default_config()

            store = create_store(dx_config.store)
            print(f"   ✅ Store: {dx_config.store.backend.value}")

            run_logger = RunLogger.disabled()
            if dx_config.store.backend == StoreBackend.SUPABASE:
                run_logger = create_run_logger(
                    client=getattr(store, "client", None),
                    enabled=dx_config.audit.enabled,
                    table=dx_config.audit.table,
                )

            self.install(store, dx_config, run_logger)
            print("📦 Конвеєр готовий!")
            return True

        except SyndromeDxError as e:
            self.error = e.message
            print(f"❌ Помилка ініціалізації: {e.message}")
            return False
        except Exception as e:
            # Невалідний YAML / env / URL — API стартує в обмеженому режимі
            self.error = str(e)
            print(f"❌ Помилка ініціалізації: {e}")
            return False

    def install(
        self,
        store: ReferenceDataStore,
        dx_config: Optional[SyndromeDxConfig] = None,
        run_logger: Optional[RunLogger] = None
    ) -> None:
        """Підключити готове сховище (тести, вбудовування)"""
        self.config = dx_config or SyndromeDxConfig()
        self.store = store
        self.pipeline = InferencePipeline(store, self.config.inference)
        self.run_logger = run_logger or RunLogger.disabled()
        self.error = None
        self.is_loaded = True

    @property
    def backend_name(self) -> Optional[str]:
        return type(self.store).__name__ if self.store else None


# Глобальний менеджер
engine_manager = EngineManager()


# Dependency functions для FastAPI
def get_manager() -> EngineManager:
    """Dependency: отримати менеджер конвеєра"""
    return engine_manager


def get_pipeline() -> InferencePipeline:
    """Dependency: отримати конвеєр виводу"""
    if not engine_manager.is_loaded and not engine_manager.load():
        raise HTTPException(
            status_code=503,
            detail=f"Inference pipeline not available: {engine_manager.error}"
        )
    return engine_manager.pipeline


def get_run_logger() -> RunLogger:
    """Dependency: отримати журнал запусків"""
    return engine_manager.run_logger
