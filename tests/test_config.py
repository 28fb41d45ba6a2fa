"""
Тести для модуля config

Запуск: pytest tests/test_config.py -v
"""

import pytest

from syndrome_dx.config import (
    AuditConfig,
    DEFAULT_TOP_K,
    InferenceConfig,
    StoreBackend,
    StoreConfig,
    SyndromeDxConfig,
    get_default_config,
    load_config,
    load_yaml,
    save_config,
)


def test_defaults():
    """Значення за замовчуванням"""
    config = SyndromeDxConfig()

    assert config.inference.top_k == DEFAULT_TOP_K == 5
    assert config.inference.question_when_all_dropped is False
    assert config.store.backend == StoreBackend.SUPABASE
    assert config.store.tables.links == "syndrome_symptom"
    assert config.store.tables.constraints == "rule_constraint"
    assert config.store.tables.syndromes == "syndrome"
    assert config.audit.enabled is False


def test_invalid_top_k():
    with pytest.raises(ValueError):
        InferenceConfig(top_k=0)


def test_store_config_from_env(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "service-key")
    monkeypatch.setenv("SYNDROME_DX_STORE", "memory")
    monkeypatch.setenv("REFERENCE_DATA_PATH", "data/reference_sample.json")

    store = StoreConfig.from_env()

    assert store.backend == StoreBackend.MEMORY
    assert store.supabase_url == "https://example.supabase.co"
    assert store.supabase_key == "service-key"
    assert store.reference_data_path == "data/reference_sample.json"


def test_default_config_reads_env(monkeypatch):
    monkeypatch.delenv("SYNDROME_DX_STORE", raising=False)
    monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")

    config = get_default_config()

    assert config.store.backend == StoreBackend.SUPABASE
    assert config.store.supabase_url == "https://example.supabase.co"


def test_from_dict_partial():
    """Часткова конфігурація доповнюється значеннями за замовчуванням"""
    config = SyndromeDxConfig.from_dict({
        "inference": {"top_k": 3, "messages": {"no_match": "nothing"}},
        "store": {"backend": "memory", "tables": {"links": "links_v2"}},
        "audit": {"enabled": True},
    })

    assert config.inference.top_k == 3
    assert config.inference.messages.no_match == "nothing"
    assert config.inference.messages.need_more_info  # default kept
    assert config.store.backend == StoreBackend.MEMORY
    assert config.store.tables.links == "links_v2"
    assert config.store.tables.syndromes == "syndrome"
    assert config.audit == AuditConfig(enabled=True)


def test_from_dict_empty():
    assert SyndromeDxConfig.from_dict(None) == SyndromeDxConfig()


def test_yaml_roundtrip(tmp_path):
    """Збереження та завантаження YAML"""
    config = SyndromeDxConfig()
    config.inference.top_k = 4
    config.store.backend = StoreBackend.MEMORY
    config.store.reference_data_path = "data/reference_sample.json"

    path = tmp_path / "configs" / "dx.yaml"
    save_config(config, str(path))

    raw = load_yaml(str(path))
    assert raw["store"]["backend"] == "memory"

    loaded = load_config(str(path))
    assert loaded == config

    print(f"✓ YAML config: {path}")


def test_yaml_omits_supabase_key(tmp_path):
    """Service role ключ не потрапляє у файл"""
    config = SyndromeDxConfig()
    config.store.supabase_url = "https://dx.supabase.co"
    config.store.supabase_key = "service-role-secret"

    path = tmp_path / "dx.yaml"
    save_config(config, str(path))

    assert "service-role-secret" not in path.read_text(encoding="utf-8")

    loaded = load_config(str(path))
    assert loaded.store.supabase_key is None
    assert loaded.store.supabase_url == "https://dx.supabase.co"
    assert config.store.supabase_key == "service-role-secret"
