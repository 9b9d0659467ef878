"""Client configuration"""

from btce.config.models import ClientConfig, ExchangeConfig, LoggingConfig
from btce.config.loader import load_config, substitute_env_vars
from btce.config.validator import validate_config_constraints

__all__ = [
    "ClientConfig",
    "ExchangeConfig",
    "LoggingConfig",
    "load_config",
    "substitute_env_vars",
    "validate_config_constraints",
]
