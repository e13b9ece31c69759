"""Configuration schema using Pydantic.

The client only needs a ``DashdConfig``; ``Config`` is the root settings
object used by the CLI, persisted to ~/.darkcoin/config.json.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DashdConfig(BaseModel):
    """Endpoint and credentials of one dashd instance. Immutable once built."""
    model_config = ConfigDict(frozen=True)

    url: str = "http://127.0.0.1:9998"
    user: str = ""
    password: str = Field(default="", repr=False)
    timeout: float | None = None  # None keeps httpx's default timeout

    @field_validator("url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        value = (value or "").strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"dashd url must start with http:// or https://, got {value!r}")
        return value


class Config(BaseSettings):
    """Root configuration for darkcoin."""
    model_config = SettingsConfigDict(env_prefix="DARKCOIN_", env_nested_delimiter="__")

    dashd: DashdConfig = Field(default_factory=DashdConfig)
    log_level: str = "INFO"
