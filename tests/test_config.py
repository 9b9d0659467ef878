"""Configuration loading and validation tests"""

import json
import logging

import pytest

from btce.config.loader import load_config, substitute_env_vars
from btce.config.models import ClientConfig, ExchangeConfig, LoggingConfig
from btce.config.validator import validate_config_constraints
from btce.utils.logger import setup_logging


def write_config(tmp_path, config_data: dict, name: str = "config.json") -> str:
    """Write config data to a temp JSON file"""
    path = tmp_path / name
    path.write_text(json.dumps(config_data))
    return str(path)


@pytest.fixture
def valid_config_data():
    """Valid configuration data"""
    return {
        "exchange": {
            "api_key_env": "BTCE_API_KEY",
            "api_secret_env": "BTCE_API_SECRET",
            "trading_url": "https://btc-e.nz/tapi/",
            "public_url": "https://btc-e.nz/api/3/",
            "base_nonce": 42,
            "request_timeout_seconds": 30,
            "public_timeout_seconds": 10,
        },
        "logging": {
            "log_dir": "./logs",
            "log_file": "btce.log",
            "log_level": "info",
        },
    }


class TestModels:
    """Test pydantic models"""

    def test_defaults(self):
        config = ClientConfig()

        assert config.exchange.trading_url == "https://btc-e.nz/tapi/"
        assert config.exchange.base_nonce is None
        assert config.exchange.request_timeout_seconds == 30.0
        assert config.logging.log_level == "INFO"

    def test_log_level_normalized(self):
        assert LoggingConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValueError, match="log_level must be one of"):
            LoggingConfig(log_level="VERBOSE")

    def test_negative_base_nonce_rejected(self):
        with pytest.raises(ValueError):
            ExchangeConfig(base_nonce=-1)

    @pytest.mark.parametrize("timeout", [0, -1, 301])
    def test_request_timeout_bounds(self, timeout):
        with pytest.raises(ValueError):
            ExchangeConfig(request_timeout_seconds=timeout)

    def test_public_timeout_cannot_exceed_request_timeout(self):
        with pytest.raises(ValueError, match="public_timeout_seconds"):
            ExchangeConfig(request_timeout_seconds=5, public_timeout_seconds=10)

    def test_empty_env_name_rejected(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            ExchangeConfig(api_key_env="  ")


class TestValidator:
    """Test cross-field constraints"""

    def test_valid_defaults(self):
        validate_config_constraints(ClientConfig())

    @pytest.mark.parametrize("field", ["trading_url", "public_url"])
    def test_http_url_rejected(self, field):
        exchange = ExchangeConfig(**{field: "http://btc-e.nz/api/3/"})

        with pytest.raises(ValueError, match="https://"):
            validate_config_constraints(ClientConfig(exchange=exchange))

    def test_public_url_needs_trailing_slash(self):
        exchange = ExchangeConfig(public_url="https://btc-e.nz/api/3")

        with pytest.raises(ValueError, match="end with"):
            validate_config_constraints(ClientConfig(exchange=exchange))

    def test_same_env_var_for_key_and_secret(self):
        exchange = ExchangeConfig(api_key_env="BTCE", api_secret_env="BTCE")

        with pytest.raises(ValueError, match="different variables"):
            validate_config_constraints(ClientConfig(exchange=exchange))


class TestSubstituteEnvVars:
    """Test ${VAR} substitution"""

    def test_substitutes_nested(self, monkeypatch):
        monkeypatch.setenv("BTCE_LEVEL", "DEBUG")

        result = substitute_env_vars({"logging": {"log_level": "${BTCE_LEVEL}"}, "list": ["${BTCE_LEVEL}"]})

        assert result == {"logging": {"log_level": "DEBUG"}, "list": ["DEBUG"]}

    def test_default_used_when_unset(self, monkeypatch):
        monkeypatch.delenv("BTCE_UNSET_VAR", raising=False)

        assert substitute_env_vars("${BTCE_UNSET_VAR:-INFO}") == "INFO"

    def test_env_overrides_default(self, monkeypatch):
        monkeypatch.setenv("BTCE_SET_VAR", "WARNING")

        assert substitute_env_vars("${BTCE_SET_VAR:-INFO}") == "WARNING"

    def test_missing_var_raises(self, monkeypatch):
        monkeypatch.delenv("BTCE_MISSING_VAR", raising=False)

        with pytest.raises(ValueError, match="BTCE_MISSING_VAR not found"):
            substitute_env_vars("${BTCE_MISSING_VAR}")

    def test_non_strings_untouched(self):
        assert substitute_env_vars({"a": 1, "b": None, "c": True}) == {"a": 1, "b": None, "c": True}


class TestLoadConfig:
    """Test loading config files"""

    def test_load_valid_config(self, tmp_path, valid_config_data):
        path = write_config(tmp_path, valid_config_data)

        config = load_config(path, load_env=False)

        assert config.exchange.base_nonce == 42
        assert config.logging.log_level == "INFO"

    def test_load_with_env_substitution(self, tmp_path, valid_config_data, monkeypatch):
        monkeypatch.setenv("BTCE_TEST_TIMEOUT", "12")
        valid_config_data["exchange"]["request_timeout_seconds"] = "${BTCE_TEST_TIMEOUT}"
        path = write_config(tmp_path, valid_config_data)

        config = load_config(path, load_env=False)

        assert config.exchange.request_timeout_seconds == 12.0

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.json"), load_env=False)

    def test_non_json_path_rejected(self, tmp_path):
        with pytest.raises(ValueError, match=".json"):
            load_config(str(tmp_path / "config.yaml"), load_env=False)

    def test_path_traversal_rejected(self):
        with pytest.raises(ValueError, match="path traversal"):
            load_config("config/../../etc/config.json", load_env=False)

    def test_invalid_values_wrapped(self, tmp_path, valid_config_data):
        valid_config_data["exchange"]["trading_url"] = "http://insecure/tapi/"
        path = write_config(tmp_path, valid_config_data)

        with pytest.raises(ValueError, match="Config validation failed"):
            load_config(path, load_env=False)

    def test_empty_object_uses_defaults(self, tmp_path):
        path = write_config(tmp_path, {})

        config = load_config(path, load_env=False)

        assert config == ClientConfig()


class TestSetupLogging:
    """Test logging setup"""

    @pytest.fixture(autouse=True)
    def reset_btce_logger(self):
        yield
        logger = logging.getLogger("btce")
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)

    def test_handlers_and_level(self, tmp_path):
        config = LoggingConfig(log_dir=str(tmp_path / "logs"), log_level="DEBUG")

        logger = setup_logging(config)

        assert logger.name == "btce"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        assert logger.propagate is False
        assert (tmp_path / "logs" / "btce.log").exists()

    def test_repeat_setup_does_not_duplicate_handlers(self, tmp_path):
        config = LoggingConfig(log_dir=str(tmp_path))

        setup_logging(config)
        logger = setup_logging(config)

        assert len(logger.handlers) == 2

    def test_console_only(self, tmp_path):
        logger = setup_logging(LoggingConfig(log_dir=str(tmp_path / "unused")), log_to_file=False)

        assert len(logger.handlers) == 1
        assert not (tmp_path / "unused").exists()

    def test_child_loggers_write_to_file(self, tmp_path):
        config = LoggingConfig(log_dir=str(tmp_path), log_level="INFO")
        logger = setup_logging(config)

        logging.getLogger("btce.exchange").info("client ready")
        for handler in logger.handlers:
            handler.flush()

        assert "btce.exchange - INFO - client ready" in (tmp_path / "btce.log").read_text()
