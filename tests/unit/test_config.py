"""Tests for settings, credential aliases and startup checks."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from supplement_guard.config import AppSettings, ClassifierConfig, LLMConfig, SessionConfig
from supplement_guard.exceptions import ConfigurationError
from supplement_guard.models import PromptConfig
from supplement_guard.startup_checks import validate_settings

_KEY_VARS = ("SUPPLEMENT_GUARD_LLM_API_KEY", "GEMINI_API_KEY", "API_KEY")


def _clean_env() -> dict[str, str]:
    return {k: v for k, v in os.environ.items() if k not in _KEY_VARS}


class TestCredentialAliases:
    @pytest.mark.parametrize("var", list(_KEY_VARS))
    def test_each_alias_is_read(self, var: str) -> None:
        env = _clean_env()
        env[var] = "from-env"
        with patch.dict(os.environ, env, clear=True):
            config = LLMConfig()
        assert config.api_key == "from-env"
        assert config.credential_present

    def test_prefixed_var_wins(self) -> None:
        env = _clean_env()
        env.update({"SUPPLEMENT_GUARD_LLM_API_KEY": "prefixed", "API_KEY": "bare"})
        with patch.dict(os.environ, env, clear=True):
            assert LLMConfig().api_key == "prefixed"

    @pytest.mark.parametrize("value", ["", "   ", "undefined", "no-key"])
    def test_placeholders_are_absent(self, value: str) -> None:
        assert not LLMConfig(api_key=value).credential_present

    def test_no_env_means_absent(self) -> None:
        with patch.dict(os.environ, _clean_env(), clear=True):
            assert not AppSettings().credential_present


class TestSettingsValues:
    def test_env_prefix(self) -> None:
        env = _clean_env()
        env.update(
            {
                "SUPPLEMENT_GUARD_LLM_MODEL": "gemini/other",
                "SUPPLEMENT_GUARD_LLM_TEMPERATURE": "0.2",
                "SUPPLEMENT_GUARD_LLM_GROUNDING_ENABLED": "false",
            }
        )
        with patch.dict(os.environ, env, clear=True):
            llm = LLMConfig()
        assert llm.model == "gemini/other"
        assert llm.temperature == 0.2
        assert llm.grounding_enabled is False

    def test_classifier_patterns_from_env(self) -> None:
        with patch.dict(os.environ, {"SUPPLEMENT_GUARD_CLASSIFIER_QUOTA_PATTERNS": '["limite"]'}):
            assert ClassifierConfig().quota_patterns == ["limite"]

    def test_default_items(self) -> None:
        assert SessionConfig().default_items == ["Aspirin", "Omega-3", "Vitamin E"]

    def test_to_prompt_config(self, settings: AppSettings) -> None:
        config = settings.to_prompt_config()
        assert config == PromptConfig(
            temperature=0.7, grounding_enabled=True, model_identifier="gemini/test-model", top_p=0.95
        )

    def test_prompt_config_rejects_out_of_range_temperature(self) -> None:
        with pytest.raises(ValueError):
            PromptConfig(temperature=1.5, model_identifier="m")


class TestStartupChecks:
    def test_valid_settings_pass(self, settings: AppSettings) -> None:
        validate_settings(settings)

    def test_rejects_temperature(self) -> None:
        settings = AppSettings(llm=LLMConfig(api_key="k", temperature=1.2))
        with pytest.raises(ConfigurationError, match="TEMPERATURE"):
            validate_settings(settings)

    def test_rejects_top_p(self) -> None:
        settings = AppSettings(llm=LLMConfig(api_key="k", top_p=0.0))
        with pytest.raises(ConfigurationError, match="TOP_P"):
            validate_settings(settings)

    def test_rejects_non_positive_timeout(self) -> None:
        settings = AppSettings(llm=LLMConfig(api_key="k", timeout=0))
        with pytest.raises(ConfigurationError, match="TIMEOUT"):
            validate_settings(settings)

    def test_rejects_blank_model(self) -> None:
        settings = AppSettings(llm=LLMConfig(api_key="k", model="  "))
        with pytest.raises(ConfigurationError, match="MODEL"):
            validate_settings(settings)

    def test_warns_without_key(self, keyless_settings: AppSettings) -> None:
        with patch("supplement_guard.startup_checks.log") as mock_log:
            validate_settings(keyless_settings)
            mock_log.warning.assert_called_once()

    def test_no_warning_with_key(self, settings: AppSettings) -> None:
        with patch("supplement_guard.startup_checks.log") as mock_log:
            validate_settings(settings)
            mock_log.warning.assert_not_called()
