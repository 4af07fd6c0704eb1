# /regflow/config/settings.py

import sys
from typing import List
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFINITION_STORES = ("memory", "redis")
ACTION_MATCH_POLICIES = ("first", "last")


class Settings(BaseSettings):
    # App Metadata
    service_name: str = "Registration Flow Engine"
    service_version: str = "1.0.0"
    api_version: str = "v1"
    environment: str = Field(default="production")
    log_level: str = "INFO"

    # Flow Behavior
    flow_type: str = "REGISTRATION"
    action_match_policy: str = "first"

    # Definition Storage
    definition_store: str = "memory"
    redis_url: str = "redis://localhost:6379"
    redis_key_prefix: str = "regflow:definition:"

    # Security / Limits
    api_key: str | None = None
    rate_limit_per_minute: int = 100
    cors_allowed_origins: str = ""  # comma-separated

    # Deployment
    workers: int = 1  # sessions live in process memory

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.cors_allowed_origins.split(",") if origin.strip()]

    # ---------------- Validators ---------------- #

    @field_validator("definition_store", "action_match_policy", "environment")
    @classmethod
    def normalize_choice(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("flow_type", "log_level")
    @classmethod
    def normalize_upper(cls, v: str) -> str:
        return v.strip().upper()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def validate_environment(settings_obj: Settings):
    try:
        if settings_obj.definition_store not in DEFINITION_STORES:
            raise ValueError(
                f"DEFINITION_STORE must be one of {DEFINITION_STORES}, got '{settings_obj.definition_store}'"
            )

        if settings_obj.action_match_policy not in ACTION_MATCH_POLICIES:
            raise ValueError(
                f"ACTION_MATCH_POLICY must be one of {ACTION_MATCH_POLICIES}, got '{settings_obj.action_match_policy}'"
            )

        if settings_obj.workers != 1:
            raise ValueError("WORKERS must be 1: flow sessions are held in process memory")

        if settings_obj.definition_store == "redis" and not settings_obj.redis_url:
            raise ValueError("REDIS_URL is required when DEFINITION_STORE=redis")

        return settings_obj

    except ValueError as e:
        print(f"--- [ERROR] Environment validation failed: {e}")
        sys.exit(1)


settings = Settings()
validate_environment(settings)
