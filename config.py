# config.py
import os
from typing import Optional, List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ==================== Básico ==================== #
    APP_NAME: str = "API de Domínio Externo"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    # Se ROOT_PATH=/api no .env, tudo sai sob /api
    ROOT_PATH: str = os.getenv("ROOT_PATH", "")

    # ==================== Domínio externo ==================== #
    # Nome da variável de ambiente com o domínio de desenvolvimento (override)
    DEV_DOMAIN_ENV_VAR: str = os.getenv("DEV_DOMAIN_ENV_VAR", "REPLIT_DEV_DOMAIN")

    # Usados para montar URLs de callback/redirect
    PUBLIC_SCHEME: str = os.getenv("PUBLIC_SCHEME", "https")
    CALLBACK_PATH: str = os.getenv("CALLBACK_PATH", "/api/callback")

    # ==================== CORS ==================== #
    # Lista separada por vírgula (ex.: "https://a.com,https://b.com")
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    # Lido a cada chamada; o ambiente de hospedagem pode definir depois do import
    @property
    def dev_domain(self) -> Optional[str]:
        return os.getenv(self.DEV_DOMAIN_ENV_VAR)

    # ---------- Aliases em minúsculo (compatibilidade) ---------- #
    @property
    def app_name(self) -> str:
        return self.APP_NAME

    @property
    def app_version(self) -> str:
        return self.APP_VERSION

    @property
    def debug(self) -> bool:
        return self.DEBUG

    @property
    def log_level(self) -> str:
        return self.LOG_LEVEL

    @property
    def public_scheme(self) -> str:
        return self.PUBLIC_SCHEME

    @property
    def callback_path(self) -> str:
        return self.CALLBACK_PATH

    # ---------- Aliases esperados pelo middleware ---------- #
    @property
    def is_development(self) -> bool:
        # considera dev se ENVIRONMENT=development OU DEBUG=True
        return self.ENVIRONMENT.lower() == "development" or self.DEBUG is True

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    # ---------- Config Pydantic v2 ---------- #
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",                    # <- chave para não quebrar com variáveis extras
    )


# Instância global
settings = Settings()
