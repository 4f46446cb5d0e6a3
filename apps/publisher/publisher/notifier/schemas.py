"""Configuration file schema for the publishing step.

The configuration is a TOML file:

    token = "..."            # optional; CONNECT_TOKEN / --token win

    [[artifacts]]
    name = "**/*.apk"
    url = "https://connect.example.com/api/upload"

Artifacts are uploaded in the order they appear.
"""

import tomllib
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from publisher.notifier.types import ArtifactSpec
from publisher.resolver import InvalidGlobError, compile_glob

_ALLOWED_URL_SCHEMES = {"http", "https"}


class ConfigError(Exception):
    """Raised when the configuration file cannot be loaded or is invalid."""

    def __init__(self, message: str, *, path: Optional[Path] = None):
        self.message = message
        self.path = path
        super().__init__(message)

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message}: {self.path}"


class ArtifactConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    url: str

    @field_validator("name")
    @classmethod
    def name_must_be_valid_glob(cls, v: str) -> str:
        try:
            compile_glob(v)
        except InvalidGlobError as exc:
            raise ValueError(str(exc)) from exc
        return v

    @field_validator("url")
    @classmethod
    def url_must_be_http(cls, v: str) -> str:
        parsed = urlparse(v.strip())
        if parsed.scheme not in _ALLOWED_URL_SCHEMES or not parsed.hostname:
            raise ValueError("Invalid URL")
        return v.strip()

    def to_spec(self) -> ArtifactSpec:
        return ArtifactSpec(name=self.name, url=self.url)


class PublisherConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    token: str = ""
    artifacts: list[ArtifactConfig] = []

    def with_token(self, token: Optional[str]) -> "PublisherConfig":
        """Return a copy whose token is overridden when token is non-empty."""
        if not token:
            return self
        return self.model_copy(update={"token": token})

    def require_token(self) -> str:
        """Return the token, raising ConfigError when it is empty or cannot
        be sent as an HTTP header value (non-ASCII or control characters).
        """
        if not self.token.strip():
            raise ConfigError("Empty token")
        if not (self.token.isascii() and self.token.isprintable()):
            raise ConfigError("Invalid token (only printable ASCII characters are allowed)")
        return self.token

    def specs(self) -> list[ArtifactSpec]:
        return [a.to_spec() for a in self.artifacts]


def load_publisher_config(path: Path) -> PublisherConfig:
    """Load and validate a publisher configuration file.

    Raises:
        ConfigError: If the file is missing, is not valid TOML, or fails
            schema validation.
    """
    path = Path(path)
    try:
        with open(path, "rb") as fh:
            data = tomllib.load(fh)
    except FileNotFoundError as exc:
        raise ConfigError("Configuration file not found", path=path) from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read configuration file ({exc})", path=path) from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Malformed TOML ({exc})", path=path) from exc

    try:
        return PublisherConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(_format_validation_error(exc), path=path) from exc


def _format_validation_error(exc: ValidationError) -> str:
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"])
        message = err["msg"].removeprefix("Value error, ")
        problems.append(f"{location}: {message}")
    return "Invalid configuration (" + "; ".join(problems) + ")"
