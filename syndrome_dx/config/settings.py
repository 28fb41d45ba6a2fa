"""
SyndromeDx — Налаштування системи

Всі параметри системи зібрані в dataclass-и для:
- Типізації та валідації
- Легкого доступу через config.inference.top_k
- Серіалізації в YAML/JSON
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional
from enum import Enum
import os


# =============================================================================
# ENUMS
# =============================================================================

class StoreBackend(str, Enum):
    """Тип сховища довідкових даних"""
    SUPABASE = "supabase"
    MEMORY = "memory"


# =============================================================================
# INFERENCE CONFIGURATION
# =============================================================================

DEFAULT_TOP_K = 5


@dataclass
class QuestionMessages:
    """Статичні шаблони уточнюючих питань"""
    need_more_info: str = "Chưa có triệu chứng đã chuẩn hoá."
    no_match: str = "Không có mapping hội chứng–triệu chứng phù hợp."
    missing_required: str = "Cần bổ sung triệu chứng để củng cố hội chứng."
    all_dropped: str = "Tất cả hội chứng ứng viên đã bị loại bởi ràng buộc."


@dataclass
class InferenceConfig:
    """Параметри конвеєра виводу"""

    # Ранжування
    top_k: int = DEFAULT_TOP_K

    # Якщо всі кандидати відкинуто правилами — додати питання no_match
    question_when_all_dropped: bool = False

    messages: QuestionMessages = field(default_factory=QuestionMessages)

    def __post_init__(self):
        if self.top_k < 1:
            raise ValueError(f"top_k must be >= 1, got {self.top_k}")


# =============================================================================
# STORE CONFIGURATION
# =============================================================================

@dataclass
class StoreTables:
    """Назви таблиць довідкових даних"""
    links: str = "syndrome_symptom"
    constraints: str = "rule_constraint"
    conditions: str = "rule_condition"
    syndromes: str = "syndrome"


@dataclass
class StoreConfig:
    """Параметри сховища довідкових даних"""

    backend: StoreBackend = StoreBackend.SUPABASE

    # Supabase
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None

    # In-memory (JSON файл з довідковими даними)
    reference_data_path: Optional[str] = None

    tables: StoreTables = field(default_factory=StoreTables)

    @classmethod
    def from_env(cls) -> "StoreConfig":
        """Створити конфігурацію з environment variables"""
        return cls(
            backend=StoreBackend(os.getenv("SYNDROME_DX_STORE", StoreBackend.SUPABASE.value)),
            supabase_url=os.getenv("SUPABASE_URL"),
            supabase_key=os.getenv("SUPABASE_SERVICE_ROLE_KEY"),
            reference_data_path=os.getenv("REFERENCE_DATA_PATH"),
        )


# =============================================================================
# AUDIT CONFIGURATION
# =============================================================================

@dataclass
class AuditConfig:
    """Журнал запусків виводу"""
    enabled: bool = False
    table: str = "inference_run"


# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

@dataclass
class SyndromeDxConfig:
    """
    Головна конфігурація SyndromeDx

    Приклад використання:
        config = SyndromeDxConfig()
        print(config.inference.top_k)  # 5
        print(config.store.tables.links)  # syndrome_symptom
    """

    # Метадані
    version: str = "1.0.0"
    project_name: str = "SyndromeDx"

    # Компоненти
    inference: InferenceConfig = field(default_factory=InferenceConfig)
    store: StoreConfig = field(default_factory=StoreConfig)
    audit: AuditConfig = field(default_factory=AuditConfig)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SyndromeDxConfig":
        """Зібрати конфігурацію зі словника (наприклад, з YAML)"""
        data = data or {}

        inference_data = dict(data.get("inference") or {})
        messages = QuestionMessages(**(inference_data.pop("messages", None) or {}))
        inference = InferenceConfig(messages=messages, **inference_data)

        store_data = dict(data.get("store") or {})
        tables = StoreTables(**(store_data.pop("tables", None) or {}))
        if "backend" in store_data:
            store_data["backend"] = StoreBackend(store_data["backend"])
        store = StoreConfig(tables=tables, **store_data)

        audit = AuditConfig(**(data.get("audit") or {}))

        top_level = {
            f.name: data[f.name]
            for f in fields(cls)
            if f.name in ("version", "project_name") and f.name in data
        }

        return cls(inference=inference, store=store, audit=audit, **top_level)


# =============================================================================
# DEFAULT CONFIG INSTANCE
# =============================================================================

def get_default_config() -> SyndromeDxConfig:
    """Отримати конфігурацію за замовчуванням (сховище з environment variables)"""
    return SyndromeDxConfig(store=StoreConfig.from_env())
