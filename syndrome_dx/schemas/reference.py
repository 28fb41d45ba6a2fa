"""
SyndromeDx — Схеми довідкових даних

Pydantic моделі для:
- Syndrome: синдром з назвою та описом
- SymptomSyndromeLink: зважений зв'язок симптом↔синдром
- RuleCondition: умова правила (present / absent)
- RuleConstraint: правило exclude / required / incompatibility

Довідкові дані належать зовнішньому сховищу; ядро лише читає їх.
"""

from typing import AbstractSet, List, Optional
from enum import Enum
from pydantic import BaseModel, Field, field_validator


class Polarity(str, Enum):
    """Полярність зв'язку"""
    SUPPORT = "support"   # підтверджує синдром (+weight)
    CONTRA = "contra"     # суперечить синдрому (-weight)


class RuleType(str, Enum):
    """Тип правила-обмеження"""
    EXCLUDE = "exclude"
    REQUIRED = "required"
    INCOMPATIBILITY = "incompatibility"


class ConditionOperator(str, Enum):
    """Оператор умови правила"""
    PRESENT = "present"
    ABSENT = "absent"


class Syndrome(BaseModel):
    """
    Синдром (метадані для відображення).

    Приклад:
        syndrome = Syndrome(id="kidney-yang", name="Thận dương hư")
    """
    id: str = Field(..., description="Ідентифікатор синдрому")
    name: str = Field(..., description="Назва для відображення")
    description: str = Field(default="", description="Опис")

    @field_validator("name", mode="before")
    @classmethod
    def missing_name(cls, v: Optional[str]) -> str:
        return v or "Unknown"

    @field_validator("description", mode="before")
    @classmethod
    def empty_description(cls, v: Optional[str]) -> str:
        return v or ""

    @classmethod
    def unknown(cls, syndrome_id: str) -> "Syndrome":
        """Заглушка для синдрому без метаданих"""
        return cls(id=syndrome_id, name="Unknown", description="")


class SymptomSyndromeLink(BaseModel):
    """
    Зважений зв'язок симптом↔синдром.

    Внесок у бал: +weight для support, -weight для contra.
    """
    syndrome_id: str
    symptom_id: str
    weight: float = Field(default=0.0, ge=0.0, description="Вага зв'язку (>= 0)")
    polarity: Polarity = Field(default=Polarity.SUPPORT)

    @field_validator("weight", mode="before")
    @classmethod
    def missing_weight(cls, v):
        """NULL з бази = нульова вага"""
        return 0.0 if v is None else v

    @field_validator("polarity", mode="before")
    @classmethod
    def missing_polarity(cls, v):
        """NULL з бази = support"""
        return Polarity.SUPPORT if v is None else v

    @property
    def delta(self) -> float:
        """Знаковий внесок зв'язку"""
        return -self.weight if self.polarity == Polarity.CONTRA else self.weight

    class Config:
        json_schema_extra = {
            "example": {
                "syndrome_id": "kidney-yang",
                "symptom_id": "cold-limbs",
                "weight": 2.0,
                "polarity": "support"
            }
        }


class RuleCondition(BaseModel):
    """Умова правила щодо одного симптому"""
    symptom_id: str
    operator: ConditionOperator

    def holds(self, observed: AbstractSet[str]) -> bool:
        """Чи виконується умова для множини спостережених симптомів"""
        if self.operator == ConditionOperator.PRESENT:
            return self.symptom_id in observed
        return self.symptom_id not in observed


class RuleConstraint(BaseModel):
    """
    Правило-обмеження для синдрому.

    Умови об'єднуються через AND; порожній список умов вважається виконаним.
    """
    id: str
    syndrome_id: str
    rule_type: RuleType
    message: Optional[str] = None
    conditions: List[RuleCondition] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v) -> str:
        return str(v)

    @field_validator("conditions", mode="before")
    @classmethod
    def missing_conditions(cls, v):
        return v or []

    class Config:
        json_schema_extra = {
            "example": {
                "id": "rc-1",
                "syndrome_id": "kidney-yang",
                "rule_type": "exclude",
                "message": None,
                "conditions": [{"symptom_id": "fever", "operator": "present"}]
            }
        }
