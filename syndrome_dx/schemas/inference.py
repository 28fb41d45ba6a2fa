"""
SyndromeDx — Схеми виводу

Pydantic моделі для:
- CaseRecord: вхідний випадок (спостережені симптоми + метадані)
- EvidenceItem: внесок одного зв'язку в бал синдрому
- Candidate: синдром-кандидат з балом та доказами
- Question: уточнююче питання
- InferenceResult: результат одного виклику конвеєра

Всі ці об'єкти створюються заново для кожного виклику і не зберігаються ядром.
"""

from typing import Any, Dict, FrozenSet, List, Optional
from enum import Enum
from pydantic import BaseModel, Field, field_validator

from .reference import Polarity, Syndrome


class QuestionType(str, Enum):
    """Тип уточнюючого питання"""
    NEED_MORE_INFO = "need_more_info"       # немає симптомів
    NO_MATCH = "no_match"                   # жоден синдром не набрав балів
    MISSING_REQUIRED = "missing_required"   # бракує обов'язкового симптому


class PipelineState(str, Enum):
    """Стан конвеєра виводу"""
    AWAITING_INPUT = "awaiting_input"
    SCORING = "scoring"
    RANKING = "ranking"
    CONSTRAINT_CHECK = "constraint_check"
    ENRICHING = "enriching"
    DONE = "done"

    # Термінальні стани раннього виходу
    NO_SYMPTOMS = "no_symptoms"
    NO_MATCH = "no_match"


class CaseRecord(BaseModel):
    """
    Клінічний випадок — вхід конвеєра.

    Дублікати симптомів згортаються, порядок не має значення.
    meta (вік, стать тощо) не використовується при оцінюванні,
    лише передається далі.

    Приклад:
        case = CaseRecord(
            encounter_id="enc-001",
            symptom_ids=["cold-limbs", "pale-tongue"],
            meta={"age": 54, "sex": "female"}
        )
    """
    symptom_ids: List[str] = Field(
        default_factory=list,
        description="Нормалізовані ідентифікатори симптомів"
    )
    encounter_id: Optional[str] = Field(default=None)
    meta: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("symptom_ids", mode="before")
    @classmethod
    def collapse_duplicates(cls, v) -> List[str]:
        """Прибрати дублікати та порожні id, зберігаючи перший порядок"""
        if v is None:
            return []
        ordered = []
        seen = set()
        for symptom_id in v:
            if symptom_id is None:
                continue
            symptom_id = str(symptom_id).strip()
            if symptom_id and symptom_id not in seen:
                seen.add(symptom_id)
                ordered.append(symptom_id)
        return ordered

    @field_validator("meta", mode="before")
    @classmethod
    def missing_meta(cls, v):
        return v or {}

    @property
    def observed(self) -> FrozenSet[str]:
        """Множина спостережених симптомів"""
        return frozenset(self.symptom_ids)

    @property
    def is_empty(self) -> bool:
        return not self.symptom_ids


class EvidenceItem(BaseModel):
    """Доказ: зв'язок симптому, що вплинув на бал синдрому"""
    symptom_id: str
    weight: float
    polarity: Polarity

    @property
    def delta(self) -> float:
        return -self.weight if self.polarity == Polarity.CONTRA else self.weight


class Candidate(BaseModel):
    """
    Синдром-кандидат.

    syndrome заповнюється Enricher-ом після фільтрації правилами.
    """
    syndrome_id: str
    score: float
    evidence: List[EvidenceItem] = Field(default_factory=list)
    syndrome: Optional[Syndrome] = None

    @property
    def name(self) -> str:
        return self.syndrome.name if self.syndrome else "Unknown"

    class Config:
        json_schema_extra = {
            "example": {
                "syndrome_id": "kidney-yang",
                "score": 3.0,
                "evidence": [
                    {"symptom_id": "cold-limbs", "weight": 2.0, "polarity": "support"},
                    {"symptom_id": "frequent-urination", "weight": 1.0, "polarity": "support"}
                ],
                "syndrome": {"id": "kidney-yang", "name": "Thận dương hư", "description": ""}
            }
        }


class Question(BaseModel):
    """Уточнююче питання (рекомендація, ядро його не зберігає)"""
    type: QuestionType
    message: str
    syndrome_id: Optional[str] = None
    symptom_id: Optional[str] = None


class InferenceResult(BaseModel):
    """
    Результат виводу.

    Неконклюзивний результат має best=None та непорожній questions.
    """
    best: Optional[Candidate] = None
    candidates: List[Candidate] = Field(default_factory=list)
    evidence: List[EvidenceItem] = Field(default_factory=list)
    questions: List[Question] = Field(default_factory=list)

    state: PipelineState = Field(default=PipelineState.DONE)

    # Відлуння вхідного випадку
    encounter_id: Optional[str] = None
    meta: Dict[str, Any] = Field(default_factory=dict)

    @property
    def is_conclusive(self) -> bool:
        return self.best is not None

    def questions_of(self, question_type: QuestionType) -> List[Question]:
        """Питання заданого типу"""
        return [q for q in self.questions if q.type == question_type]

    def to_summary(self) -> Dict[str, Any]:
        """Короткий підсумок для UI та журналу"""
        return {
            "state": self.state.value,
            "best_syndrome_id": self.best.syndrome_id if self.best else None,
            "score": self.best.score if self.best else None,
            "candidates": len(self.candidates),
            "questions": len(self.questions),
        }
