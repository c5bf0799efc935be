"""
Configuration settings for tagsync
"""

from pathlib import Path
from typing import Optional

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings

from .errors import ConfigError


class Settings(BaseSettings):
    # InfluxDB
    db_host: str
    db_name: str
    db_port: str
    measurement: Optional[str] = None  # defaults to db_name
    http_timeout: float = 10.0

    # Vault
    vault_path: str
    notes_dir: str
    note_suffix: str = ".md"
    date_format: str = "%Y-%m-%d"

    # Mapping
    tag_marker: str = "#"

    # Discovery
    discovery_workers: Optional[int] = None  # None = os.cpu_count()

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"

    @field_validator("db_port")
    @classmethod
    def check_port(cls, value: str) -> str:
        value = value.strip()
        if not value.isdigit() or not 0 < int(value) < 65536:
            raise ValueError(f"not a TCP port: {value!r}")
        return value

    @field_validator("db_host")
    @classmethod
    def check_host(cls, value: str) -> str:
        value = value.strip()
        if not value or any(c.isspace() or c in "/?#@" for c in value):
            raise ValueError(f"not a host name: {value!r}")
        return value

    @property
    def notes_path(self) -> Path:
        return Path(self.vault_path) / self.notes_dir

    @property
    def series_name(self) -> str:
        return self.measurement or self.db_name

    @property
    def influx_url(self) -> str:
        return f"http://{self.db_host}:{self.db_port}"


def load_settings(**overrides) -> Settings:
    """Build Settings from the environment, raising ConfigError if incomplete."""
    try:
        return Settings(**overrides)
    except ValidationError as e:
        missing = [".".join(str(p) for p in err["loc"]).upper() for err in e.errors()]
        raise ConfigError(f"Invalid or missing settings: {', '.join(missing)}") from e
