"""SyndromeDx — Завантаження конфігурації"""
import yaml
from enum import Enum
from pathlib import Path
from dataclasses import asdict
from .settings import SyndromeDxConfig


def _plain_dict(items) -> dict:
    # Enum -> значення, щоб yaml.safe_load міг прочитати файл назад
    return {k: (v.value if isinstance(v, Enum) else v) for k, v in items}


def save_yaml(config: SyndromeDxConfig, path: str) -> None:
    data = asdict(config, dict_factory=_plain_dict)
    # service role ключ береться лише з environment
    data["store"]["supabase_key"] = None

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(
            data,
            f,
            default_flow_style=False,
            allow_unicode=True,
        )


def load_yaml(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def save_config(config: SyndromeDxConfig, path: str) -> None:
    save_yaml(config, path)


def load_config(path: str) -> SyndromeDxConfig:
    return SyndromeDxConfig.from_dict(load_yaml(path))
