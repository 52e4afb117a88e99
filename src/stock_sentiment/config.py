from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from typing import Any

LOG_LEVELS = ("CRITICAL", "FATAL", "ERROR", "WARNING", "WARN", "INFO", "DEBUG", "NOTSET")

def validate_log_level(value: str) -> str:
    """Upper-case a level name and reject anything logging does not know."""
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {value!r}, expected one of {', '.join(LOG_LEVELS)}")
    return level

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False  # Allow case-insensitive environment variable matching
    )

    yahoo_chart_base_url: str = Field(
        "https://query1.finance.yahoo.com", description="Base URL of the daily chart endpoint"
    )
    request_timeout: float = Field(10.0, gt=0, description="Timeout in seconds for a single chart request")

    max_symbols: int = Field(20, ge=1, description="Maximum number of symbols accepted per request")
    max_concurrent_fetches: int = Field(20, ge=1, description="Upper bound on simultaneous chart requests")

    log_level: str = Field("INFO", description="Logging level")

    @field_validator('yahoo_chart_base_url')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip('/')

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Accept 'debug', ' Info ' etc. from the environment"""
        if v is None or (isinstance(v, str) and not v.strip()):
            return "INFO"
        if not isinstance(v, str):
            raise ValueError(f"Log level must be a string, got {type(v).__name__}")
        return validate_log_level(v)

settings = Settings()
