#!/usr/bin/env python3
"""
SyndromeDx — Вивід для одного випадку з командного рядка

Запуск:
    python scripts/infer_case.py so-lanh tieu-trong-nhieu
    python scripts/infer_case.py so-lanh day-bung --data data/reference_sample.json --top-k 3
"""

import sys
import argparse
from pathlib import Path

# Додаємо корінь проекту до path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from syndrome_dx.config import InferenceConfig
from syndrome_dx.exceptions import SyndromeDxError
from syndrome_dx.inference_engine import InferencePipeline
from syndrome_dx.store import InMemoryReferenceStore


def main():
    parser = argparse.ArgumentParser(description='SyndromeDx — вивід синдромів')
    parser.add_argument('symptoms', nargs='*', help='Нормалізовані id симптомів')
    parser.add_argument(
        '--data',
        default=str(project_root / "data" / "reference_sample.json"),
        help='JSON з довідковими даними'
    )
    parser.add_argument('--top-k', type=int, default=5, help='Кількість кандидатів')

    args = parser.parse_args()

    try:
        store = InMemoryReferenceStore.from_json(args.data)
        pipeline = InferencePipeline(store, InferenceConfig(top_k=args.top_k))
        result = pipeline.infer_symptoms(args.symptoms)
    except SyndromeDxError as e:
        print(f"❌ {e.code}: {e.message}")
        sys.exit(1)

    print("=" * 60)
    print(f"Symptoms: {args.symptoms}")
    print(f"State: {result.state.value}")
    print("=" * 60)

    for i, c in enumerate(result.candidates, 1):
        marker = "★" if i == 1 else " "
        print(f"{marker} {i}. {c.name} ({c.syndrome_id}): {c.score:+.2f}")
        for e in c.evidence:
            print(f"       {e.polarity.value:8} {e.symptom_id} ({e.delta:+.2f})")

    if result.questions:
        print("\nQuestions:")
        for q in result.questions:
            target = f" [{q.symptom_id}]" if q.symptom_id else ""
            print(f"  - {q.type.value}{target}: {q.message}")


if __name__ == "__main__":
    main()
