"""SyndromeDx — Модуль конфігурації"""
from .settings import (
    SyndromeDxConfig,
    get_default_config,
    InferenceConfig,
    QuestionMessages,
    StoreConfig,
    StoreTables,
    StoreBackend,
    AuditConfig,
    DEFAULT_TOP_K,
)
from .loader import save_config, load_config, save_yaml, load_yaml

__all__ = [
    "SyndromeDxConfig",
    "get_default_config",
    "InferenceConfig",
    "QuestionMessages",
    "StoreConfig",
    "StoreTables",
    "StoreBackend",
    "AuditConfig",
    "DEFAULT_TOP_K",
    "save_config",
    "load_config",
    "save_yaml",
    "load_yaml",
]
