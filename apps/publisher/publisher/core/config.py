from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Publisher settings loaded from environment variables.

    Every field can be set as CONNECT_<FIELD> (e.g. CONNECT_TOKEN) or in a
    local .env file. CLI options take precedence over both.

    The token is normally injected by the CI system's secret store rather
    than written into the configuration file.
    """

    model_config = SettingsConfigDict(
        env_prefix="CONNECT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Shared upload token sent as X-Connect-Token. Overrides the file value.
    token: str = ""

    # Artifact configuration (TOML)
    config_file: Path = Path("connect.toml")

    # Per-request timeout in seconds
    http_timeout: float = 30.0

    # Logging
    debug: bool = False
    json_logs: bool = False

    @field_validator("http_timeout")
    @classmethod
    def timeout_must_be_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("http_timeout must be positive")
        return v


def get_settings() -> Settings:
    return Settings()
