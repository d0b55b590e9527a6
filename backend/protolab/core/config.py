from dataclasses import dataclass
from enum import Enum

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ModeEnum(str, Enum):
    development = "development"
    production = "production"
    testing = "testing"


class AIProviderEnum(str, Enum):
    openai = "openai"
    deepseek = "deepseek"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── App ───────────────────────────────────────────────────
    MODE: ModeEnum = ModeEnum.production
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "ProtoLab"
    LOG_LEVEL: str = "INFO"

    # ── CORS ──────────────────────────────────────────────────
    CORS_ORIGINS: list[str] = [
        "http://localhost:5000",
        "http://localhost:5173",
        "http://127.0.0.1:5000",
        "http://127.0.0.1:5173",
    ]

    # ── AI content provider ───────────────────────────────────
    AI_PROVIDER: AIProviderEnum = AIProviderEnum.openai
    OPENAI_API_KEY: str = ""
    OPENAI_MODEL: str = "gpt-4o"
    DEEPSEEK_API_KEY: str = ""
    DEEPSEEK_MODEL: str = "deepseek-chat"

    # Serve canned content when the provider call fails
    CONTENT_FALLBACK_ENABLED: bool = True

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalise_log_level(cls, v: str) -> str:
        return str(v).upper()

    @property
    def ai_model_name(self) -> str:
        """pydantic-ai model string for the configured provider."""
        if self.AI_PROVIDER == AIProviderEnum.deepseek:
            return f"deepseek:{self.DEEPSEEK_MODEL}"
        return f"openai:{self.OPENAI_MODEL}"

    @property
    def ai_provider_name(self) -> str:
        return "DeepSeek" if self.AI_PROVIDER == AIProviderEnum.deepseek else "OpenAI"


@dataclass(frozen=True)
class ConfigError:
    field: str
    message: str


KNOWN_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def validate_settings(config: Settings) -> list[ConfigError]:
    """Check the settings once at start-up.

    Problems are returned, not raised: a missing provider key only disables
    live content generation, rendering keeps working.
    """
    errors: list[ConfigError] = []

    if config.AI_PROVIDER == AIProviderEnum.deepseek and not config.DEEPSEEK_API_KEY:
        errors.append(ConfigError("DEEPSEEK_API_KEY", "DeepSeek is the selected provider but no API key is set"))
    if config.AI_PROVIDER == AIProviderEnum.openai and not config.OPENAI_API_KEY:
        errors.append(ConfigError("OPENAI_API_KEY", "OpenAI is the selected provider but no API key is set"))

    if config.LOG_LEVEL not in KNOWN_LOG_LEVELS:
        errors.append(ConfigError("LOG_LEVEL", f"Unknown log level {config.LOG_LEVEL!r}"))

    return errors


settings = Settings()
