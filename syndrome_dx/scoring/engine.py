"""
SyndromeDx — Агрегація доказів

Pipeline:
1. Зв'язок → знаковий внесок (+weight support, -weight contra)
2. Внесок → бал синдрому (сума)
3. Зв'язок → доказ синдрому (у порядку отримання)

Чиста функція: без I/O, без побічних ефектів.
Синдроми з нульовим чи від'ємним балом не відкидаються.
"""

from typing import Dict, Iterable, List
from dataclasses import dataclass, field

from syndrome_dx.schemas import SymptomSyndromeLink, EvidenceItem, Candidate


@dataclass
class SyndromeScore:
    """Накопичений бал синдрому з доказами"""
    syndrome_id: str
    score: float = 0.0
    evidence: List[EvidenceItem] = field(default_factory=list)

    def add(self, link: SymptomSyndromeLink) -> None:
        self.score += link.delta
        self.evidence.append(EvidenceItem(
            symptom_id=link.symptom_id,
            weight=link.weight,
            polarity=link.polarity,
        ))

    def to_candidate(self) -> Candidate:
        return Candidate(
            syndrome_id=self.syndrome_id,
            score=self.score,
            evidence=list(self.evidence),
        )


def score_links(links: Iterable[SymptomSyndromeLink]) -> Dict[str, SyndromeScore]:
    """
    Агрегувати ваги зв'язків по синдромах.

    Args:
        links: Зв'язки для спостережених симптомів

    Returns:
        {syndrome_id: SyndromeScore}; порожній словник для порожнього входу
    """
    scores: Dict[str, SyndromeScore] = {}

    for link in links:
        entry = scores.get(link.syndrome_id)
        if entry is None:
            entry = scores[link.syndrome_id] = SyndromeScore(link.syndrome_id)
        entry.add(link)

    return scores
