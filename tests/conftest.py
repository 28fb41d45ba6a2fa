"""Спільні фікстури для тестів SyndromeDx"""

from pathlib import Path

import pytest

from syndrome_dx.schemas import (
    RuleCondition,
    RuleConstraint,
    SymptomSyndromeLink,
    Syndrome,
)
from syndrome_dx.store import InMemoryReferenceStore


SAMPLE_DATA_PATH = Path(__file__).parent.parent / "data" / "reference_sample.json"


def make_link(syndrome_id, symptom_id, weight, polarity="support"):
    return SymptomSyndromeLink(
        syndrome_id=syndrome_id,
        symptom_id=symptom_id,
        weight=weight,
        polarity=polarity,
    )


def make_constraint(constraint_id, syndrome_id, rule_type, conditions, message=None):
    return RuleConstraint(
        id=constraint_id,
        syndrome_id=syndrome_id,
        rule_type=rule_type,
        message=message,
        conditions=[
            RuleCondition(symptom_id=symptom_id, operator=operator)
            for symptom_id, operator in conditions
        ],
    )


@pytest.fixture
def scenario_links():
    """A: 2 - 1 = 1, B: 3"""
    return [
        make_link("A", "1", 2, "support"),
        make_link("A", "2", 1, "contra"),
        make_link("B", "1", 3, "support"),
    ]


@pytest.fixture
def scenario_syndromes():
    return [
        Syndrome(id="A", name="Tỳ khí hư", description="Spleen qi deficiency"),
        Syndrome(id="B", name="Thận dương hư", description="Kidney yang deficiency"),
    ]


@pytest.fixture
def scenario_store(scenario_links, scenario_syndromes):
    return InMemoryReferenceStore(links=scenario_links, syndromes=scenario_syndromes)


@pytest.fixture
def sample_store():
    return InMemoryReferenceStore.from_json(str(SAMPLE_DATA_PATH))


class FakeAuditInsert:
    def __init__(self, client, table, row):
        self.client = client
        self.table = table
        self.row = row

    def execute(self):
        if self.client.fail:
            raise RuntimeError("insert failed")
        self.client.inserted.append((self.table, self.row))


class FakeAuditTable:
    def __init__(self, client, name):
        self.client = client
        self.name = name

    def insert(self, row):
        return FakeAuditInsert(self.client, self.name, row)


class FakeAuditClient:
    """Supabase клієнт, що лише збирає вставлені рядки"""

    def __init__(self, fail=False):
        self.fail = fail
        self.inserted = []

    def table(self, name):
        return FakeAuditTable(self, name)
