"""
Тести для модуля store

Запуск: pytest tests/test_store.py -v
"""

import json
from types import SimpleNamespace

import httpx
import pytest
from postgrest.exceptions import APIError

from syndrome_dx.config import StoreBackend, StoreConfig, StoreTables
from syndrome_dx.exceptions import DataAccessError, StoreConfigurationError
from syndrome_dx.schemas import ConditionOperator, Polarity, RuleType
from syndrome_dx.store import (
    InMemoryReferenceStore,
    constraint_from_row,
    create_store,
    link_from_row,
    syndrome_from_row,
)
from syndrome_dx.store.supabase_store import SupabaseReferenceStore, create_supabase_client


# =============================================================================
# Fake Supabase client
# =============================================================================

class FakeQuery:
    def __init__(self, client, table):
        self.client = client
        self.table_name = table

    def select(self, columns):
        self.client.queries.append(("select", self.table_name, columns))
        return self

    def in_(self, column, values):
        self.client.queries.append(("in", self.table_name, column, list(values)))
        return self

    def execute(self):
        if self.client.error is not None:
            raise self.client.error
        return SimpleNamespace(data=self.client.rows.get(self.table_name, []))


class FakeClient:
    def __init__(self, rows=None, error=None):
        self.rows = rows or {}
        self.error = error
        self.queries = []

    def table(self, name):
        return FakeQuery(self, name)


# =============================================================================
# Row mapping
# =============================================================================

def test_row_mapping():
    link = link_from_row({"syndrome_id": "A", "symptom_id": "1", "weight": "2.5", "polarity": "contra"})
    assert link.weight == 2.5
    assert link.polarity == Polarity.CONTRA

    constraint = constraint_from_row({
        "id": 10,
        "syndrome_id": "A",
        "rule_type": "exclude",
        "message": None,
        "rule_condition": [{"id": 1, "symptom_id": "1", "operator": "absent"}],
    })
    assert constraint.id == "10"
    assert constraint.rule_type == RuleType.EXCLUDE
    assert constraint.conditions[0].operator == ConditionOperator.ABSENT


def test_row_mapping_null_polarity():
    """NULL polarity = support"""
    link = link_from_row({"syndrome_id": "A", "symptom_id": "1", "weight": 2, "polarity": None})

    assert link.polarity == Polarity.SUPPORT
    assert link.delta == 2.0

    syndrome = syndrome_from_row({"id": "A", "name": "Tỳ khí hư", "description": None})
    assert syndrome.description == ""


def test_malformed_row_is_data_access_error():
    with pytest.raises(DataAccessError) as exc_info:
        link_from_row({"syndrome_id": "A", "symptom_id": "1", "weight": -3})

    assert exc_info.value.operation == "fetch_links"

    with pytest.raises(DataAccessError):
        constraint_from_row({"id": 1, "syndrome_id": "A", "rule_type": "sometimes"})


# =============================================================================
# InMemoryReferenceStore
# =============================================================================

def test_memory_store_filters(sample_store):
    links = sample_store.fetch_links({"so-lanh"})
    assert {(l.syndrome_id, l.symptom_id) for l in links} == {
        ("than-duong-hu", "so-lanh"), ("ty-khi-hu", "so-lanh")
    }

    constraints = sample_store.fetch_constraints(["than-duong-hu"])
    assert [c.id for c in constraints] == ["rc-1", "rc-2"]

    syndromes = sample_store.fetch_syndrome_metadata(["ty-khi-hu", "missing"])
    assert [s.name for s in syndromes] == ["Tỳ khí hư"]

    print(f"✓ {sample_store!r}")


def test_memory_store_empty_ids_not_recorded():
    store = InMemoryReferenceStore(fail_on={"fetch_links"})

    assert store.fetch_links([]) == []
    assert store.calls == []


def test_memory_store_fail_on():
    store = InMemoryReferenceStore(fail_on={"fetch_syndrome_metadata"})

    assert store.fetch_links(["1"]) == []
    with pytest.raises(DataAccessError):
        store.fetch_syndrome_metadata(["A"])


def test_memory_store_from_json(tmp_path):
    path = tmp_path / "reference.json"
    path.write_text(json.dumps({
        "links": [{"syndrome_id": "A", "symptom_id": "1", "weight": 1}],
        "constraints": [],
    }), encoding="utf-8")

    store = InMemoryReferenceStore.from_json(str(path))

    assert len(store.links) == 1
    assert store.syndromes == []


def test_memory_store_missing_file(tmp_path):
    with pytest.raises(StoreConfigurationError):
        InMemoryReferenceStore.from_json(str(tmp_path / "missing.json"))


def test_create_store_memory():
    from conftest import SAMPLE_DATA_PATH

    store = create_store(StoreConfig(
        backend=StoreBackend.MEMORY,
        reference_data_path=str(SAMPLE_DATA_PATH),
    ))
    assert isinstance(store, InMemoryReferenceStore)

    with pytest.raises(StoreConfigurationError):
        create_store(StoreConfig(backend=StoreBackend.MEMORY))


# =============================================================================
# SupabaseReferenceStore
# =============================================================================

def test_supabase_fetch_links():
    client = FakeClient(rows={"syndrome_symptom": [
        {"syndrome_id": "A", "symptom_id": "1", "weight": 2, "polarity": "support"},
        {"syndrome_id": "A", "symptom_id": "2", "weight": None, "polarity": "contra"},
    ]})
    store = SupabaseReferenceStore(client)

    links = store.fetch_links({"2", "1"})

    assert [(l.symptom_id, l.delta) for l in links] == [("1", 2), ("2", 0)]
    assert client.queries == [
        ("select", "syndrome_symptom", "syndrome_id, symptom_id, weight, polarity"),
        ("in", "syndrome_symptom", "symptom_id", ["1", "2"]),
    ]


def test_supabase_fetch_constraints_nested_conditions():
    client = FakeClient(rows={"rule_constraint": [{
        "id": 1,
        "syndrome_id": "B",
        "rule_type": "required",
        "message": "?",
        "rule_condition": [{"id": 5, "symptom_id": "9", "operator": "present"}],
    }]})
    store = SupabaseReferenceStore(client)

    constraints = store.fetch_constraints(["B"])

    assert constraints[0].conditions[0].symptom_id == "9"
    assert "rule_condition(id, symptom_id, operator)" in client.queries[0][2]


def test_supabase_custom_tables():
    tables = StoreTables(syndromes="syndrome_v2")
    client = FakeClient(rows={"syndrome_v2": [{"id": "A", "name": "Tỳ khí hư", "description": ""}]})

    syndromes = SupabaseReferenceStore(client, tables).fetch_syndrome_metadata(["A"])

    assert syndromes[0].name == "Tỳ khí hư"
    assert client.queries[-1] == ("in", "syndrome_v2", "id", ["A"])


def test_supabase_empty_ids_skip_query():
    client = FakeClient()

    assert SupabaseReferenceStore(client).fetch_syndrome_metadata([]) == []
    assert client.queries == []


def test_supabase_api_error():
    client = FakeClient(error=APIError({"message": "relation does not exist", "code": "42P01"}))

    with pytest.raises(DataAccessError) as exc_info:
        SupabaseReferenceStore(client).fetch_links(["1"])

    error = exc_info.value
    assert "syndrome_symptom query failed" in error.message
    assert "relation does not exist" in error.message
    assert error.details["code"] == "42P01"


def test_supabase_network_error():
    client = FakeClient(error=httpx.ConnectError("connection refused"))

    with pytest.raises(DataAccessError) as exc_info:
        SupabaseReferenceStore(client).fetch_constraints(["A"])

    assert exc_info.value.operation == "fetch_constraints"


def test_supabase_client_requires_credentials():
    with pytest.raises(StoreConfigurationError):
        create_supabase_client(StoreConfig(supabase_url="https://example.supabase.co"))
