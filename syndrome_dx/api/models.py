"""
SyndromeDx API — Pydantic Models

Моделі для запитів та відповідей REST API.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from syndrome_dx.schemas import (
    Candidate,
    EvidenceItem,
    InferenceResult,
    PipelineState,
    Question,
)


# === Request Models ===

class InferRequest(BaseModel):
    """Запит на вивід"""
    encounter_id: Optional[str] = Field(
        default=None,
        description="Ідентифікатор прийому"
    )
    symptom_ids: List[str] = Field(
        default_factory=list,
        description="Нормалізовані id симптомів",
        examples=[["cold-limbs", "pale-tongue", "frequent-urination"]]
    )
    meta: Dict[str, Any] = Field(
        default_factory=dict,
        description="Метадані випадку (вік, стать, ...)",
        examples=[{"age": 54, "sex": "female"}]
    )


# === Response Models ===

class InferResponse(BaseModel):
    """Результат виводу"""
    encounter_id: Optional[str] = None
    state: PipelineState
    best: Optional[Candidate] = None
    candidates: List[Candidate] = Field(default_factory=list)
    evidence: List[EvidenceItem] = Field(default_factory=list)
    questions: List[Question] = Field(default_factory=list)
    processing_time_ms: float = 0.0

    @classmethod
    def from_result(cls, result: InferenceResult, processing_time_ms: float = 0.0) -> "InferResponse":
        return cls(
            encounter_id=result.encounter_id,
            state=result.state,
            best=result.best,
            candidates=result.candidates,
            evidence=result.evidence,
            questions=result.questions,
            processing_time_ms=processing_time_ms,
        )


class HealthResponse(BaseModel):
    """Стан сервера"""
    status: str
    version: str
    store_ready: bool
    store_backend: Optional[str] = None
    audit_enabled: bool = False
    error: Optional[str] = None


class ErrorResponse(BaseModel):
    """Помилка API"""
    error: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)
