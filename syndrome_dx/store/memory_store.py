"""
SyndromeDx — In-memory сховище довідкових даних

Тримає довідкові сутності в пам'яті. Використовується для
офлайн-демо (JSON файл) та тестів.

Формат JSON файлу (дзеркало реляційних таблиць):
    {
        "syndromes": [{"id": "A", "name": "...", "description": "..."}],
        "links": [{"syndrome_id": "A", "symptom_id": "1", "weight": 2, "polarity": "support"}],
        "constraints": [
            {
                "id": "rc-1", "syndrome_id": "A", "rule_type": "exclude", "message": null,
                "conditions": [{"symptom_id": "1", "operator": "present"}]
            }
        ]
    }
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from syndrome_dx.exceptions import DataAccessError, StoreConfigurationError
from syndrome_dx.schemas import Syndrome, SymptomSyndromeLink, RuleConstraint

from .base import (
    ReferenceDataStore,
    link_from_row,
    constraint_from_row,
    syndrome_from_row,
    unique_ids,
)


class InMemoryReferenceStore(ReferenceDataStore):
    """
    Сховище в пам'яті.

    Приклад використання:
        store = InMemoryReferenceStore.from_json("data/reference.json")
        links = store.fetch_links({"cold-limbs"})

        # Симуляція збою бекенду
        store = InMemoryReferenceStore(links=[...], fail_on={"fetch_constraints"})
    """

    def __init__(
        self,
        links: Optional[List[SymptomSyndromeLink]] = None,
        constraints: Optional[List[RuleConstraint]] = None,
        syndromes: Optional[List[Syndrome]] = None,
        fail_on: Optional[Set[str]] = None
    ):
        """
        Args:
            links: Зв'язки симптом↔синдром
            constraints: Правила з умовами
            syndromes: Метадані синдромів
            fail_on: Назви операцій, що мають кидати DataAccessError
        """
        self.links = list(links or [])
        self.constraints = list(constraints or [])
        self.syndromes = list(syndromes or [])
        self.fail_on = set(fail_on or ())

        # Журнал звернень: (операція, id)
        self.calls: List[Tuple[str, List[str]]] = []

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InMemoryReferenceStore":
        """Створити зі словника "сирих" рядків"""
        return cls(
            links=[link_from_row(row) for row in data.get("links", [])],
            constraints=[constraint_from_row(row) for row in data.get("constraints", [])],
            syndromes=[syndrome_from_row(row) for row in data.get("syndromes", [])],
        )

    @classmethod
    def from_json(cls, path: str) -> "InMemoryReferenceStore":
        """Завантажити з JSON файлу"""
        path = Path(path)
        if not path.exists():
            raise StoreConfigurationError(
                f"Reference data not found: {path}",
                details={"path": str(path)}
            )

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        return cls.from_dict(data)

    def _record(self, operation: str, ids: Iterable[str]) -> List[str]:
        ids = unique_ids(ids)
        if not ids:
            return ids
        self.calls.append((operation, ids))
        if operation in self.fail_on:
            raise DataAccessError(f"{operation} failed: simulated backend error", operation=operation)
        return ids

    def fetch_links(self, symptom_ids: Iterable[str]) -> List[SymptomSyndromeLink]:
        ids = self._record("fetch_links", symptom_ids)
        wanted = set(ids)
        return [link for link in self.links if link.symptom_id in wanted]

    def fetch_constraints(self, syndrome_ids: Iterable[str]) -> List[RuleConstraint]:
        ids = self._record("fetch_constraints", syndrome_ids)
        wanted = set(ids)
        return [c for c in self.constraints if c.syndrome_id in wanted]

    def fetch_syndrome_metadata(self, syndrome_ids: Iterable[str]) -> List[Syndrome]:
        ids = self._record("fetch_syndrome_metadata", syndrome_ids)
        wanted = set(ids)
        return [s for s in self.syndromes if s.id in wanted]

    @property
    def call_names(self) -> List[str]:
        return [name for name, _ in self.calls]

    def __repr__(self) -> str:
        return (
            f"InMemoryReferenceStore(links={len(self.links)}, "
            f"constraints={len(self.constraints)}, syndromes={len(self.syndromes)})"
        )
