"""
SyndromeDx — Модуль схем даних (schemas)

Pydantic моделі для валідації та серіалізації даних.

Компоненти:
- reference.py: Syndrome, SymptomSyndromeLink, RuleCondition, RuleConstraint
- inference.py: CaseRecord, Candidate, Question, InferenceResult

Приклад використання:
    from syndrome_dx.schemas import CaseRecord, InferenceResult

    case = CaseRecord(symptom_ids=["cold-limbs", "pale-tongue"], meta={"age": 54})

    # Серіалізація в JSON
    json_data = case.model_dump_json()

    # Десеріалізація з JSON
    case_loaded = CaseRecord.model_validate_json(json_data)
"""

# Reference schemas
from .reference import (
    Polarity,
    RuleType,
    ConditionOperator,
    Syndrome,
    SymptomSyndromeLink,
    RuleCondition,
    RuleConstraint,
)

# Inference schemas
from .inference import (
    QuestionType,
    PipelineState,
    CaseRecord,
    EvidenceItem,
    Candidate,
    Question,
    InferenceResult,
)


__all__ = [
    # Reference
    "Polarity",
    "RuleType",
    "ConditionOperator",
    "Syndrome",
    "SymptomSyndromeLink",
    "RuleCondition",
    "RuleConstraint",

    # Inference
    "QuestionType",
    "PipelineState",
    "CaseRecord",
    "EvidenceItem",
    "Candidate",
    "Question",
    "InferenceResult",
]
