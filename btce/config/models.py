"""Pydantic models for configuration validation"""

from typing import Optional
from pydantic import BaseModel, Field, field_validator, model_validator


class ExchangeConfig(BaseModel):
    """Exchange connection configuration"""
    api_key_env: str = "BTCE_API_KEY"
    api_secret_env: str = "BTCE_API_SECRET"
    trading_url: str = "https://btc-e.nz/tapi/"
    public_url: str = "https://btc-e.nz/api/3/"
    base_nonce: Optional[int] = Field(default=None, ge=0)  # None = seed from Unix time
    request_timeout_seconds: float = Field(default=30.0, gt=0, le=300)
    public_timeout_seconds: float = Field(default=10.0, gt=0, le=60)
    user_agent: str = "btce-client (python-requests)"

    @field_validator("api_key_env", "api_secret_env")
    @classmethod
    def validate_env_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("environment variable name cannot be empty")
        return v.strip()

    @model_validator(mode="after")
    def validate_timeouts(self):
        """Public lookups are expected to be quicker than trading calls"""
        if self.public_timeout_seconds > self.request_timeout_seconds:
            raise ValueError(
                "public_timeout_seconds cannot exceed request_timeout_seconds"
            )
        return self


class LoggingConfig(BaseModel):
    """Logging configuration"""
    log_dir: str = "./logs"
    log_file: str = "btce.log"
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()


class ClientConfig(BaseModel):
    """Root configuration model"""
    exchange: ExchangeConfig = Field(default_factory=ExchangeConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
