"""
SyndromeDx — Модуль оцінювання (scoring)

Перетворює зв'язки симптом↔синдром на ранжований список кандидатів.

Компоненти:
- score_links: Агрегація знакових ваг та доказів по синдромах
- rank_candidates: Сортування за балом і обрізання до топ-K
- SyndromeScore: Проміжний результат агрегації

Приклад використання:
    from syndrome_dx.scoring import score_links, rank_candidates

    scores = score_links(links)
    candidates = rank_candidates(scores, top_k=5)

    for c in candidates:
        print(f"{c.syndrome_id}: {c.score:+.1f} ({len(c.evidence)} evidence)")
"""

from .engine import SyndromeScore, score_links
from .ranker import rank_candidates


__all__ = [
    "SyndromeScore",
    "score_links",
    "rank_candidates",
]
