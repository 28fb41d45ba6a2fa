"""SyndromeDx — Збагачення кандидатів метаданими синдромів"""

from typing import AbstractSet, List

from syndrome_dx.schemas import Candidate, Syndrome
from syndrome_dx.store import ReferenceDataStore


def enrich_candidates(
    candidates: List[Candidate],
    dropped: AbstractSet[str],
    store: ReferenceDataStore
) -> List[Candidate]:
    """
    Відфільтрувати відкинуті кандидати та додати назву/опис синдрому.

    Відсутні метадані не є помилкою: кандидат отримує заглушку "Unknown".
    Порядок кандидатів зберігається.
    """
    survivors = [c for c in candidates if c.syndrome_id not in dropped]
    if not survivors:
        return []

    metadata = {
        s.id: s
        for s in store.fetch_syndrome_metadata(c.syndrome_id for c in survivors)
    }

    return [
        c.model_copy(update={
            "syndrome": metadata.get(c.syndrome_id) or Syndrome.unknown(c.syndrome_id)
        })
        for c in survivors
    ]
