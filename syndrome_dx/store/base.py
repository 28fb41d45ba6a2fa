"""
SyndromeDx — Інтерфейс сховища довідкових даних

ReferenceDataStore — три операції читання, кожна є відфільтрованою
проєкцією довідкових таблиць. Реалізації перетворюють "сирі" рядки
сховища на типізовані сутності тут, на межі, щоб ядро не залежало
від схеми бази.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Mapping

from pydantic import ValidationError

from syndrome_dx.exceptions import DataAccessError
from syndrome_dx.schemas import (
    Syndrome,
    SymptomSyndromeLink,
    RuleConstraint,
)


class ReferenceDataStore(ABC):
    """
    Абстрактне сховище довідкових даних.

    Кожна операція кидає DataAccessError при збої бекенду.
    Порожня множина id повертає [] без звернення до бекенду.
    """

    @abstractmethod
    def fetch_links(self, symptom_ids: Iterable[str]) -> List[SymptomSyndromeLink]:
        """Всі зв'язки, symptom_id яких входить у множину"""

    @abstractmethod
    def fetch_constraints(self, syndrome_ids: Iterable[str]) -> List[RuleConstraint]:
        """Всі правила для синдромів з вкладеними умовами"""

    @abstractmethod
    def fetch_syndrome_metadata(self, syndrome_ids: Iterable[str]) -> List[Syndrome]:
        """Метадані (id, name, description) синдромів"""


# =============================================================================
# ROW MAPPING
# =============================================================================

def _mapped(model, row: Mapping[str, Any], operation: str):
    try:
        return model.model_validate(row)
    except ValidationError as e:
        raise DataAccessError(
            f"Malformed {operation} row: {e.errors()[0].get('msg', 'invalid')}",
            operation=operation,
            details={"row": dict(row)}
        ) from e


def link_from_row(row: Mapping[str, Any]) -> SymptomSyndromeLink:
    """Рядок syndrome_symptom → SymptomSyndromeLink"""
    return _mapped(SymptomSyndromeLink, row, "fetch_links")


def constraint_from_row(row: Mapping[str, Any]) -> RuleConstraint:
    """Рядок rule_constraint (з вкладеним rule_condition) → RuleConstraint"""
    data = dict(row)
    if "conditions" not in data:
        data["conditions"] = data.pop("rule_condition", None) or []
    return _mapped(RuleConstraint, data, "fetch_constraints")


def syndrome_from_row(row: Mapping[str, Any]) -> Syndrome:
    """Рядок syndrome → Syndrome"""
    return _mapped(Syndrome, row, "fetch_syndrome_metadata")


def unique_ids(ids: Iterable[str]) -> List[str]:
    """Унікальні id у стабільному порядку (для фільтра IN)"""
    return sorted(set(ids))
