"""
Tests for settings validation.
"""

from protolab.core.config import AIProviderEnum, Settings, validate_settings


def _settings(**overrides) -> Settings:
    values = {
        "AI_PROVIDER": AIProviderEnum.openai,
        "OPENAI_API_KEY": "sk-test",
        "DEEPSEEK_API_KEY": "",
        "LOG_LEVEL": "INFO",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestValidateSettings:
    """Configuration problems are reported, never raised."""

    def test_valid(self):
        assert validate_settings(_settings()) == []

    def test_missing_openai_key(self):
        errors = validate_settings(_settings(OPENAI_API_KEY=""))

        assert [e.field for e in errors] == ["OPENAI_API_KEY"]

    def test_missing_deepseek_key(self):
        errors = validate_settings(_settings(AI_PROVIDER=AIProviderEnum.deepseek))

        assert [e.field for e in errors] == ["DEEPSEEK_API_KEY"]

    def test_unselected_provider_key_not_required(self):
        config = _settings(AI_PROVIDER=AIProviderEnum.deepseek, DEEPSEEK_API_KEY="ds-test", OPENAI_API_KEY="")

        assert validate_settings(config) == []

    def test_unknown_log_level(self):
        errors = validate_settings(_settings(LOG_LEVEL="verbose"))

        assert [e.field for e in errors] == ["LOG_LEVEL"]
        assert "VERBOSE" in errors[0].message

    def test_log_level_normalised(self):
        assert _settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"


class TestProviderModel:
    """pydantic-ai model names per provider."""

    def test_openai(self):
        config = _settings()

        assert config.ai_model_name == "openai:gpt-4o"
        assert config.ai_provider_name == "OpenAI"

    def test_deepseek(self):
        config = _settings(AI_PROVIDER=AIProviderEnum.deepseek, DEEPSEEK_MODEL="deepseek-reasoner")

        assert config.ai_model_name == "deepseek:deepseek-reasoner"
        assert config.ai_provider_name == "DeepSeek"
