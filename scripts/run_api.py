#!/usr/bin/env python3
"""
SyndromeDx — Запуск API сервера

Запуск:
    python scripts/run_api.py
    python scripts/run_api.py --port 8080
    python scripts/run_api.py --reference-data data/reference_sample.json
"""

import os
import sys
import argparse
from pathlib import Path

# Додаємо корінь проекту до path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def main():
    parser = argparse.ArgumentParser(description='SyndromeDx API Server')
    parser.add_argument('--host', default='0.0.0.0', help='Host (default: 0.0.0.0)')
    parser.add_argument('--port', type=int, default=8000, help='Port (default: 8000)')
    parser.add_argument('--reload', action='store_true', help='Enable auto-reload')
    parser.add_argument('--workers', type=int, default=1, help='Number of workers')
    parser.add_argument('--config', default=None, help='YAML конфігурація SyndromeDx')
    parser.add_argument(
        '--reference-data',
        default=None,
        help='JSON з довідковими даними (in-memory сховище замість Supabase)'
    )

    args = parser.parse_args()

    # Конфігурація передається через env, щоб її бачили й worker-процеси
    if args.config:
        os.environ["SYNDROME_DX_CONFIG"] = args.config
    if args.reference_data:
        os.environ["SYNDROME_DX_STORE"] = "memory"
        os.environ["REFERENCE_DATA_PATH"] = args.reference_data

    print("=" * 60)
    print("🏥 SyndromeDx — API Server")
    print("=" * 60)
    print(f"   Host: {args.host}")
    print(f"   Port: {args.port}")
    print(f"   Reload: {args.reload}")
    print(f"   Store: {os.environ.get('SYNDROME_DX_STORE', 'supabase')}")
    print("=" * 60)

    import uvicorn

    uvicorn.run(
        "syndrome_dx.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=args.workers if not args.reload else 1,
        log_level="info",
    )


if __name__ == "__main__":
    main()
