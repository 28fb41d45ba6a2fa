"""
SyndromeDx — Оцінювання правил-обмежень

Для кожного правила кандидата:
1. Умови оцінюються з семантикою AND (present / absent)
2. exclude, incompatibility: умови виконано → синдром відкидається
3. required: умови не виконано → питання missing_required
   для кожного відсутнього present-симптому; синдром НЕ відкидається

Порядок питань: порядок правил, далі порядок умов у правилі.
"""

from typing import AbstractSet, Iterable, List, Optional, Set
from dataclasses import dataclass, field

from syndrome_dx.config import QuestionMessages
from syndrome_dx.schemas import (
    ConditionOperator,
    Question,
    QuestionType,
    RuleCondition,
    RuleConstraint,
    RuleType,
)
from syndrome_dx.store import ReferenceDataStore


# Правила, які при виконанні умов відкидають синдром
DROPPING_RULES = {RuleType.EXCLUDE, RuleType.INCOMPATIBILITY}


@dataclass
class ConstraintOutcome:
    """Результат застосування правил до кандидатів"""
    dropped: Set[str] = field(default_factory=set)
    questions: List[Question] = field(default_factory=list)
    evaluated: int = 0

    def is_dropped(self, syndrome_id: str) -> bool:
        return syndrome_id in self.dropped


def conditions_satisfied(
    conditions: Iterable[RuleCondition],
    observed: AbstractSet[str]
) -> bool:
    """AND над умовами; порожній список — виконано"""
    return all(cond.holds(observed) for cond in conditions)


class ConstraintEvaluator:
    """
    Застосування правил exclude / required / incompatibility.

    Приклад використання:
        evaluator = ConstraintEvaluator()

        # З уже отриманими правилами
        outcome = evaluator.evaluate(constraints, observed={"s1", "s2"})

        # Або з вибіркою правил зі сховища
        outcome = evaluator.check(store, ["A", "B"], observed={"s1", "s2"})

        print(outcome.dropped, [q.symptom_id for q in outcome.questions])
    """

    def __init__(self, messages: Optional[QuestionMessages] = None):
        self.messages = messages or QuestionMessages()

    def evaluate(
        self,
        constraints: Iterable[RuleConstraint],
        observed: AbstractSet[str]
    ) -> ConstraintOutcome:
        """
        Застосувати правила до множини спостережених симптомів.

        Args:
            constraints: Правила кандидатів (з умовами)
            observed: Спостережені симптоми випадку

        Returns:
            ConstraintOutcome з відкинутими синдромами та питаннями
        """
        outcome = ConstraintOutcome()

        for constraint in constraints:
            outcome.evaluated += 1
            satisfied = conditions_satisfied(constraint.conditions, observed)

            if constraint.rule_type in DROPPING_RULES:
                if satisfied:
                    outcome.dropped.add(constraint.syndrome_id)

            elif constraint.rule_type == RuleType.REQUIRED:
                if not satisfied:
                    outcome.questions.extend(
                        self._missing_required(constraint, observed)
                    )

        return outcome

    def check(
        self,
        store: ReferenceDataStore,
        candidate_ids: Iterable[str],
        observed: AbstractSet[str]
    ) -> ConstraintOutcome:
        """
        Отримати правила кандидатів зі сховища та застосувати їх.

        DataAccessError прокидається далі: або оцінено всі правила, або жодне.
        """
        constraints = store.fetch_constraints(candidate_ids)
        return self.evaluate(constraints, observed)

    def _missing_required(
        self,
        constraint: RuleConstraint,
        observed: AbstractSet[str]
    ) -> List[Question]:
        message = constraint.message or self.messages.missing_required

        return [
            Question(
                type=QuestionType.MISSING_REQUIRED,
                message=message,
                syndrome_id=constraint.syndrome_id,
                symptom_id=cond.symptom_id,
            )
            for cond in constraint.conditions
            if cond.operator == ConditionOperator.PRESENT and cond.symptom_id not in observed
        ]
