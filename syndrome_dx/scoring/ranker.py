"""SyndromeDx — Ранжування кандидатів"""

from typing import Dict, List

from syndrome_dx.config import DEFAULT_TOP_K
from syndrome_dx.schemas import Candidate

from .engine import SyndromeScore


def rank_candidates(
    scores: Dict[str, SyndromeScore],
    top_k: int = DEFAULT_TOP_K
) -> List[Candidate]:
    """
    Відсортувати синдроми за балом (спадання) та залишити топ-K.

    При рівних балах порядок визначає syndrome_id (зростання),
    тож ранжування детерміноване для однакових даних.
    """
    if top_k < 1:
        raise ValueError(f"top_k must be >= 1, got {top_k}")

    ordered = sorted(
        scores.values(),
        key=lambda s: (-s.score, s.syndrome_id)
    )

    return [entry.to_candidate() for entry in ordered[:top_k]]
