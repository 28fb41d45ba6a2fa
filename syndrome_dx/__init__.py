"""
SyndromeDx — Диференціальна діагностика синдромів традиційної медицини

Архітектура: зважені зв'язки симптом↔синдром + логічні правила-обмеження

Модулі:
- config: Конфігурація системи
- schemas: Довідкові сутності та результати виводу
- store: Доступ до довідкових даних (Supabase / in-memory)
- scoring: Агрегація доказів та ранжування кандидатів
- constraints: Правила exclude / required / incompatibility
- inference_engine: Конвеєр виводу та збагачення кандидатів
- audit: Журнал запусків виводу
- api: Backend API
"""

__version__ = "0.1.0"
__author__ = "SyndromeDx Team"

from .config import SyndromeDxConfig, get_default_config
