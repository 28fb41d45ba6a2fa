"""
SyndromeDx — Конвеєр виводу

InferencePipeline об'єднує всі компоненти:
1. Evidence Fetcher — зв'язки для спостережених симптомів
2. Scoring + Ranker — бали синдромів, топ-K кандидатів
3. ConstraintEvaluator — відкидання кандидатів, уточнюючі питання
4. Enricher — назви та описи синдромів

Стани: AwaitingInput → Scoring → Ranking → ConstraintCheck → Enriching → Done,
з ранніми виходами NoSymptoms та NoMatch.

Кожен виклик самодостатній: дані читаються заново, стан між викликами
не зберігається. DataAccessError на будь-якому кроці перериває вивід.
"""

from typing import Any, Dict, Iterable, List, Optional

from syndrome_dx.config import InferenceConfig
from syndrome_dx.constraints import ConstraintEvaluator
from syndrome_dx.schemas import (
    CaseRecord,
    Candidate,
    InferenceResult,
    PipelineState,
    Question,
    QuestionType,
)
from syndrome_dx.scoring import score_links, rank_candidates
from syndrome_dx.store import ReferenceDataStore

from .enricher import enrich_candidates


class InferencePipeline:
    """
    Конвеєр диференціальної діагностики синдромів.

    Приклад використання:
        store = InMemoryReferenceStore.from_json("data/reference.json")
        pipeline = InferencePipeline(store)

        result = pipeline.infer(CaseRecord(symptom_ids=["cold-limbs", "pale-tongue"]))

        if result.best:
            print(f"Best: {result.best.name} ({result.best.score:+.1f})")
        for q in result.questions:
            print(f"Q [{q.type.value}]: {q.message}")
    """

    def __init__(
        self,
        store: ReferenceDataStore,
        config: Optional[InferenceConfig] = None
    ):
        """
        Args:
            store: Сховище довідкових даних
            config: Параметри виводу (top_k, тексти питань)
        """
        self.store = store
        self.config = config or InferenceConfig()
        self.evaluator = ConstraintEvaluator(self.config.messages)

    def infer(self, case: CaseRecord) -> InferenceResult:
        """
        Виконати вивід для одного випадку.

        Args:
            case: Спостережені симптоми та метадані

        Returns:
            InferenceResult (best=None для неконклюзивних випадків)

        Raises:
            DataAccessError: збій читання довідкових даних
        """
        messages = self.config.messages

        # AwaitingInput
        observed = case.observed
        if not observed:
            return self._terminal(
                case,
                PipelineState.NO_SYMPTOMS,
                Question(type=QuestionType.NEED_MORE_INFO, message=messages.need_more_info),
            )

        # Scoring → Ranking
        links = self.store.fetch_links(observed)
        ranked = rank_candidates(score_links(links), self.config.top_k)

        if not ranked:
            return self._terminal(
                case,
                PipelineState.NO_MATCH,
                Question(type=QuestionType.NO_MATCH, message=messages.no_match),
            )

        # ConstraintCheck
        outcome = self.evaluator.check(
            self.store,
            [c.syndrome_id for c in ranked],
            observed,
        )

        # Enriching
        candidates = enrich_candidates(ranked, outcome.dropped, self.store)

        questions = list(outcome.questions)
        if not candidates and self.config.question_when_all_dropped:
            questions.append(
                Question(type=QuestionType.NO_MATCH, message=messages.all_dropped)
            )

        # Done
        return self._assemble(case, candidates, questions)

    def infer_symptoms(
        self,
        symptom_ids: Iterable[str],
        meta: Optional[Dict[str, Any]] = None,
        encounter_id: Optional[str] = None
    ) -> InferenceResult:
        """Вивід за списком id симптомів"""
        case = CaseRecord(
            symptom_ids=list(symptom_ids),
            meta=meta or {},
            encounter_id=encounter_id,
        )
        return self.infer(case)

    def _assemble(
        self,
        case: CaseRecord,
        candidates: List[Candidate],
        questions: List[Question]
    ) -> InferenceResult:
        best = candidates[0] if candidates else None

        return InferenceResult(
            best=best,
            candidates=candidates,
            evidence=list(best.evidence) if best else [],
            questions=questions,
            state=PipelineState.DONE,
            encounter_id=case.encounter_id,
            meta=case.meta,
        )

    def _terminal(
        self,
        case: CaseRecord,
        state: PipelineState,
        question: Question
    ) -> InferenceResult:
        return InferenceResult(
            questions=[question],
            state=state,
            encounter_id=case.encounter_id,
            meta=case.meta,
        )


def infer(
    store: ReferenceDataStore,
    case: CaseRecord,
    config: Optional[InferenceConfig] = None
) -> InferenceResult:
    """Одноразовий вивід: infer(store, case)"""
    return InferencePipeline(store, config).infer(case)
