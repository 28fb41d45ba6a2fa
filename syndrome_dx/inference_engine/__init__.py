"""
SyndromeDx — Конвеєр виводу (Inference Engine)

Об'єднує всі компоненти системи:
- Evidence Fetcher — зв'язки симптом↔синдром зі сховища
- Scoring Engine + Ranker — бали та топ-K кандидатів
- ConstraintEvaluator — правила exclude / required / incompatibility
- Enricher — метадані синдромів

Компоненти:
- InferencePipeline: Головний клас для виводу
- infer: Одноразовий вивід
- enrich_candidates: Фільтрація + метадані

Приклад використання:
    from syndrome_dx.inference_engine import InferencePipeline
    from syndrome_dx.store import InMemoryReferenceStore

    store = InMemoryReferenceStore.from_json("data/reference.json")
    pipeline = InferencePipeline(store)

    result = pipeline.infer_symptoms(["cold-limbs", "pale-tongue"], meta={"age": 54})

    print(f"State: {result.state.value}")
    for c in result.candidates:
        print(f"  {c.name}: {c.score:+.1f}")
"""

from .enricher import enrich_candidates
from .pipeline import InferencePipeline, infer


__all__ = [
    "InferencePipeline",
    "infer",
    "enrich_candidates",
]
