"""
SyndromeDx — API Configuration

Налаштування FastAPI сервера.
Параметри сховища та виводу — у syndrome_dx.config (YAML або env).
"""

from dataclasses import dataclass, field
from typing import Optional
import os


@dataclass
class APIConfig:
    """Конфігурація API сервера"""

    # Сервер
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = True
    reload: bool = False

    # CORS
    cors_origins: list = field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list = field(default_factory=lambda: ["*"])
    cors_allow_headers: list = field(default_factory=lambda: ["*"])

    # YAML з SyndromeDxConfig (інакше — значення за замовчуванням + env)
    config_path: Optional[str] = None

    # API
    api_prefix: str = "/api"
    api_title: str = "SyndromeDx API"
    api_description: str = "Диференціальна діагностика синдромів традиційної медицини"
    api_version: str = "1.0.0"

    @classmethod
    def from_env(cls) -> 'APIConfig':
        """Створити конфігурацію з environment variables"""
        origins = os.getenv("CORS_ORIGINS")
        return cls(
            host=os.getenv("API_HOST", "0.0.0.0"),
            port=int(os.getenv("API_PORT", "8000")),
            debug=os.getenv("API_DEBUG", "true").lower() == "true",
            cors_origins=[o.strip() for o in origins.split(",")] if origins else ["*"],
            config_path=os.getenv("SYNDROME_DX_CONFIG"),
        )


# Глобальна конфігурація
config = APIConfig.from_env()
