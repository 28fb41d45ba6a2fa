"""
SyndromeDx — Модуль сховища довідкових даних (store)

Ядро звертається до даних лише через ReferenceDataStore:
- fetch_links(symptom_ids) — зважені зв'язки симптом↔синдром
- fetch_constraints(syndrome_ids) — правила з умовами
- fetch_syndrome_metadata(syndrome_ids) — назви та описи синдромів

Компоненти:
- ReferenceDataStore: Абстрактний інтерфейс
- InMemoryReferenceStore: Дані в пам'яті / JSON файл
- SupabaseReferenceStore: Продакшн сховище (Supabase)

Приклад використання:
    from syndrome_dx.config import StoreConfig
    from syndrome_dx.store import create_store

    store = create_store(StoreConfig.from_env())
"""

from syndrome_dx.config import StoreBackend, StoreConfig
from syndrome_dx.exceptions import StoreConfigurationError

from .base import (
    ReferenceDataStore,
    link_from_row,
    constraint_from_row,
    syndrome_from_row,
)
from .memory_store import InMemoryReferenceStore


def create_store(config: StoreConfig) -> ReferenceDataStore:
    """Створити сховище відповідно до конфігурації"""
    if config.backend == StoreBackend.MEMORY:
        if not config.reference_data_path:
            raise StoreConfigurationError(
                "Memory backend requires REFERENCE_DATA_PATH",
                details={"backend": config.backend.value}
            )
        return InMemoryReferenceStore.from_json(config.reference_data_path)

    from .supabase_store import create_supabase_store
    return create_supabase_store(config)


__all__ = [
    "ReferenceDataStore",
    "InMemoryReferenceStore",
    "create_store",
    "link_from_row",
    "constraint_from_row",
    "syndrome_from_row",
]
