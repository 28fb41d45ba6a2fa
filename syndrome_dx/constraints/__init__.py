"""
SyndromeDx — Модуль правил-обмежень (constraints)

Компоненти:
- ConstraintEvaluator: Застосування правил до кандидатів
- ConstraintOutcome: Відкинуті синдроми + уточнюючі питання
- conditions_satisfied: Оцінка умов з семантикою AND

Типи правил:
- exclude: умови виконано → синдром відкидається
- incompatibility: поки що діє так само, як exclude
- required: умови не виконано → питання missing_required (без відкидання)
"""

from .evaluator import (
    ConstraintEvaluator,
    ConstraintOutcome,
    conditions_satisfied,
    DROPPING_RULES,
)


__all__ = [
    "ConstraintEvaluator",
    "ConstraintOutcome",
    "conditions_satisfied",
    "DROPPING_RULES",
]
