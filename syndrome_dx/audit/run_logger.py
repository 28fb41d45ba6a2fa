"""
SyndromeDx — Журнал запусків виводу

Записує підсумок виводу (best, score, evidence, questions) у таблицю
inference_run. Викликається транспортом ПІСЛЯ infer(); збій запису
ніколи не змінює результат виводу.
"""

from typing import Any, Dict, Optional

from syndrome_dx.schemas import CaseRecord, InferenceResult


class RunLogger:
    """
    Логер запусків у Supabase.

    Приклад використання:
        run_logger = RunLogger(client, table="inference_run")
        result = pipeline.infer(case)
        run_logger.log(case, result)
    """

    def __init__(self, client=None, table: str = "inference_run"):
        self.client = client
        self.table = table

    @classmethod
    def disabled(cls) -> "RunLogger":
        """Логер, що нічого не пише"""
        return cls(client=None)

    @property
    def enabled(self) -> bool:
        return self.client is not None

    @staticmethod
    def build_row(case: CaseRecord, result: InferenceResult) -> Dict[str, Any]:
        """Рядок таблиці inference_run"""
        best = result.best
        return {
            "encounter_id": case.encounter_id,
            "symptom_ids": list(case.symptom_ids),
            "best_syndrome_id": best.syndrome_id if best else None,
            "score": best.score if best else None,
            "evidence": [e.model_dump(mode="json") for e in result.evidence],
            "questions": [q.model_dump(mode="json") for q in result.questions],
            "state": result.state.value,
            "meta": case.meta,
        }

    def log(self, case: CaseRecord, result: InferenceResult) -> bool:
        """
        Записати запуск.

        Returns:
            True якщо записано, False якщо логер вимкнено або запис не вдався
        """
        if not self.enabled:
            return False

        try:
            self.client.table(self.table).insert(self.build_row(case, result)).execute()
            return True
        except Exception as e:
            # Журнал не впливає на результат виводу
            print(f"⚠️ Run log failed ({self.table}): {e}")
            return False


def create_run_logger(client=None, enabled: bool = False, table: str = "inference_run") -> RunLogger:
    """Логер з конфігурації; без клієнта або з enabled=False — вимкнений"""
    if not enabled or client is None:
        return RunLogger.disabled()
    return RunLogger(client, table)
