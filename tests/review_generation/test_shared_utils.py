import logging
import os

import pytest

from src.shared.utils.config_validator import (
    ConfigurationError,
    check_config_override,
    get_env_or_default,
    validate_float_env,
    validate_int_env,
)
from src.shared.utils.env import load_env
from src.shared.utils.logging import setup_logging
from src.functions.review_generation.core.config import ServiceConfig


def test_validate_int_env(monkeypatch):
    monkeypatch.delenv("REVIEW_MAX_COUNT", raising=False)
    assert validate_int_env("REVIEW_MAX_COUNT", default=200) == 200

    monkeypatch.setenv("REVIEW_MAX_COUNT", "12")
    assert validate_int_env("REVIEW_MAX_COUNT", default=200, min_value=1) == 12

    monkeypatch.setenv("REVIEW_MAX_COUNT", "twelve")
    with pytest.raises(ConfigurationError):
        validate_int_env("REVIEW_MAX_COUNT", default=200)

    monkeypatch.setenv("REVIEW_MAX_COUNT", "0")
    with pytest.raises(ConfigurationError):
        validate_int_env("REVIEW_MAX_COUNT", default=200, min_value=1)


def test_validate_float_env(monkeypatch):
    monkeypatch.setenv("OPENAI_TIMEOUT_SECONDS", "2.5")
    assert validate_float_env("OPENAI_TIMEOUT_SECONDS", default=60.0) == 2.5

    monkeypatch.setenv("OPENAI_TIMEOUT_SECONDS", "9999")
    with pytest.raises(ConfigurationError):
        validate_float_env("OPENAI_TIMEOUT_SECONDS", default=60.0, max_value=600.0)


def test_check_config_override_prefers_override(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "from-env")
    assert check_config_override("explicit", "OPENAI_API_KEY") == "explicit"
    assert check_config_override(None, "OPENAI_API_KEY") == "from-env"

    monkeypatch.delenv("OPENAI_API_KEY")
    assert check_config_override(None, "OPENAI_API_KEY", required=False) is None
    with pytest.raises(ConfigurationError):
        check_config_override(None, "OPENAI_API_KEY")


def test_get_env_or_default_ignores_blank(monkeypatch):
    monkeypatch.setenv("OPENAI_MODEL", "")
    assert get_env_or_default("OPENAI_MODEL", "gpt-4o-mini") == "gpt-4o-mini"


def test_service_config_from_env(monkeypatch):
    monkeypatch.setenv("OPENAI_MODEL", "gpt-4o")
    monkeypatch.setenv("REVIEW_MAX_COUNT", "30")
    monkeypatch.setenv("REVIEW_DOCUMENT_MAX_CHARS", "500")
    monkeypatch.setenv("OPENAI_TIMEOUT_SECONDS", "15")

    config = ServiceConfig.from_env()

    assert config == ServiceConfig(
        default_model="gpt-4o",
        max_review_count=30,
        document_max_chars=500,
        request_timeout_seconds=15.0,
    )
    assert config.clamp_count(100) == 30
    assert config.clamp_count(0) == 1


def test_load_env_reads_explicit_file(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("REVIEW_TEST_VALUE=from-dotenv\n", encoding="utf-8")
    monkeypatch.delenv("REVIEW_TEST_VALUE", raising=False)

    load_env(str(env_file))

    assert os.environ["REVIEW_TEST_VALUE"] == "from-dotenv"
    os.environ.pop("REVIEW_TEST_VALUE")


def test_setup_logging_quiets_http_clients():
    setup_logging(level="debug")

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING
