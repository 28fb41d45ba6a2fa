"""
SyndromeDx — Supabase сховище довідкових даних

Читає таблиці:
- syndrome_symptom: syndrome_id, symptom_id, weight, polarity
- rule_constraint: id, syndrome_id, rule_type, message + rule_condition(id, symptom_id, operator)
- syndrome: id, name, description

Клієнт передається явно (dependency injection); create_supabase_store()
будує його з StoreConfig.
"""

from typing import Any, Callable, Iterable, List, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import Client, create_client

from syndrome_dx.config import StoreConfig, StoreTables
from syndrome_dx.exceptions import DataAccessError, StoreConfigurationError
from syndrome_dx.schemas import Syndrome, SymptomSyndromeLink, RuleConstraint

from .base import (
    ReferenceDataStore,
    link_from_row,
    constraint_from_row,
    syndrome_from_row,
    unique_ids,
)


class SupabaseReferenceStore(ReferenceDataStore):
    """
    Сховище поверх Supabase (PostgREST).

    Приклад використання:
        client = create_client(url, service_key)
        store = SupabaseReferenceStore(client)
        links = store.fetch_links(["cold-limbs", "pale-tongue"])
    """

    def __init__(self, client: Client, tables: Optional[StoreTables] = None):
        self.client = client
        self.tables = tables or StoreTables()

    def _select(
        self,
        operation: str,
        table: str,
        columns: str,
        filter_column: str,
        ids: List[str],
        mapper: Callable[[Any], Any]
    ) -> list:
        if not ids:
            return []

        try:
            response = (
                self.client.table(table)
                .select(columns)
                .in_(filter_column, ids)
                .execute()
            )
        except APIError as e:
            raise DataAccessError(
                f"{table} query failed: {e.message}",
                operation=operation,
                details={"table": table, "code": e.code}
            ) from e
        except httpx.HTTPError as e:
            raise DataAccessError(
                f"{table} query failed: {e}",
                operation=operation,
                details={"table": table}
            ) from e

        return [mapper(row) for row in (response.data or [])]

    def fetch_links(self, symptom_ids: Iterable[str]) -> List[SymptomSyndromeLink]:
        return self._select(
            "fetch_links",
            self.tables.links,
            "syndrome_id, symptom_id, weight, polarity",
            "symptom_id",
            unique_ids(symptom_ids),
            link_from_row,
        )

    def fetch_constraints(self, syndrome_ids: Iterable[str]) -> List[RuleConstraint]:
        columns = (
            "id, syndrome_id, rule_type, message, "
            f"{self.tables.conditions}(id, symptom_id, operator)"
        )
        return self._select(
            "fetch_constraints",
            self.tables.constraints,
            columns,
            "syndrome_id",
            unique_ids(syndrome_ids),
            self._constraint_mapper,
        )

    def fetch_syndrome_metadata(self, syndrome_ids: Iterable[str]) -> List[Syndrome]:
        return self._select(
            "fetch_syndrome_metadata",
            self.tables.syndromes,
            "id, name, description",
            "id",
            unique_ids(syndrome_ids),
            syndrome_from_row,
        )

    def _constraint_mapper(self, row) -> RuleConstraint:
        # Вкладена таблиця умов може мати нестандартну назву
        row = dict(row)
        if self.tables.conditions in row:
            row["conditions"] = row.pop(self.tables.conditions) or []
        return constraint_from_row(row)


def create_supabase_client(config: StoreConfig) -> Client:
    """Admin клієнт Supabase (service role). Лише для сервера."""
    if not config.supabase_url or not config.supabase_key:
        raise StoreConfigurationError(
            "Missing SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY",
            details={"backend": config.backend.value}
        )
    return create_client(config.supabase_url, config.supabase_key)


def create_supabase_store(config: StoreConfig) -> SupabaseReferenceStore:
    """Створити Supabase сховище з конфігурації"""
    return SupabaseReferenceStore(create_supabase_client(config), config.tables)
