"""
Тести для модуля scoring

Запуск: pytest tests/test_scoring.py -v
"""

import itertools

import pytest

from syndrome_dx.schemas import Polarity
from syndrome_dx.scoring import rank_candidates, score_links

from conftest import make_link


def test_scenario_scores(scenario_links):
    """A = 2 - 1 = 1, B = 3"""
    scores = score_links(scenario_links)

    assert set(scores) == {"A", "B"}
    assert scores["A"].score == 1
    assert scores["B"].score == 3

    # Докази зберігають порядок отримання
    assert [e.symptom_id for e in scores["A"].evidence] == ["1", "2"]
    assert [e.polarity for e in scores["A"].evidence] == [Polarity.SUPPORT, Polarity.CONTRA]
    assert [e.delta for e in scores["A"].evidence] == [2, -1]


def test_empty_links():
    assert score_links([]) == {}
    assert rank_candidates({}) == []


def test_non_positive_scores_kept():
    """Нульові та від'ємні бали не відкидаються на етапі агрегації"""
    links = [
        make_link("Z", "1", 2, "support"),
        make_link("Z", "2", 2, "contra"),
        make_link("N", "3", 1, "contra"),
    ]

    scores = score_links(links)

    assert scores["Z"].score == 0
    assert scores["N"].score == -1

    ranked = rank_candidates(scores)
    assert [c.syndrome_id for c in ranked] == ["Z", "N"]


def test_scoring_order_independent(scenario_links):
    """Перестановка зв'язків не змінює бали"""
    expected = {k: v.score for k, v in score_links(scenario_links).items()}

    for permutation in itertools.permutations(scenario_links):
        scores = score_links(permutation)
        assert {k: v.score for k, v in scores.items()} == expected


def test_ranking(scenario_links):
    """Ранжування: B(3), A(1)"""
    ranked = rank_candidates(score_links(scenario_links))

    assert [(c.syndrome_id, c.score) for c in ranked] == [("B", 3), ("A", 1)]
    assert len(ranked[0].evidence) == 1
    assert len(ranked[1].evidence) == 2

    print(f"✓ Ranked: {[(c.syndrome_id, c.score) for c in ranked]}")


def test_ranking_tie_break_by_id():
    """Рівні бали впорядковуються за syndrome_id"""
    links = [
        make_link("C", "1", 1),
        make_link("A", "1", 1),
        make_link("B", "1", 1),
        make_link("D", "1", 2),
    ]

    first = rank_candidates(score_links(links))
    second = rank_candidates(score_links(list(reversed(links))))

    assert [c.syndrome_id for c in first] == ["D", "A", "B", "C"]
    assert [c.syndrome_id for c in second] == [c.syndrome_id for c in first]


def test_ranking_truncates_to_top_k():
    """Не більше K кандидатів, скільки б синдромів не набрало балів"""
    links = [make_link(f"S{i:02d}", "1", i + 1) for i in range(12)]
    scores = score_links(links)

    ranked = rank_candidates(scores)
    assert len(ranked) == 5
    assert [c.syndrome_id for c in ranked] == ["S11", "S10", "S09", "S08", "S07"]

    assert len(rank_candidates(scores, top_k=2)) == 2
    assert len(rank_candidates(scores, top_k=50)) == 12


def test_ranking_rejects_invalid_top_k(scenario_links):
    with pytest.raises(ValueError):
        rank_candidates(score_links(scenario_links), top_k=0)
