"""Load settings from a YAML file with environment overrides, and set up logging.

Lookup order for the config file: CLIENTBOOK_CONFIG env var, else config.yaml
in the current directory. A missing file means defaults. Environment variables
(CLIENTBOOK_DATA_FILE, CLIENTBOOK_LOG_LEVEL) win over the file; call
load_env() first so values from .env are visible.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml
from dotenv import load_dotenv

DEFAULT_DATA_FILE = Path("data") / "clientbook.json"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    data_file_path: Path = DEFAULT_DATA_FILE
    log_level: str = DEFAULT_LOG_LEVEL
    load_sample_data: bool = True

    def __post_init__(self):
        level = (self.log_level or "").strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level '{self.log_level}'")
        object.__setattr__(self, "log_level", level)
        object.__setattr__(self, "data_file_path", Path(self.data_file_path))


def load_env() -> None:
    """Load .env from the current directory, if present. Existing env vars are kept."""
    path = Path.cwd() / ".env"
    if path.exists():
        load_dotenv(path)


def get_config_path() -> Path:
    """Return path to the YAML config (CLIENTBOOK_CONFIG env or ./config.yaml)."""
    path = os.environ.get("CLIENTBOOK_CONFIG", "").strip()
    if path:
        return Path(path).resolve()
    return Path.cwd() / "config.yaml"


def _to_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def _from_yaml(raw: dict, key: str, default: object) -> object:
    """A key left empty in YAML (``key:``) means the default."""
    value = raw.get(key)
    return default if value is None else value


def load_settings(path: Path | None = None) -> Settings:
    """Read settings from YAML, then apply environment overrides. Validates the result."""
    if path is None:
        path = get_config_path()
    raw: dict = {}
    if path.exists():
        loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
        if loaded is not None and not isinstance(loaded, dict):
            raise ValueError("Config YAML must be a mapping")
        raw = loaded or {}

    data_file = os.environ.get("CLIENTBOOK_DATA_FILE", "").strip() or _from_yaml(
        raw, "data_file_path", DEFAULT_DATA_FILE
    )
    log_level = os.environ.get("CLIENTBOOK_LOG_LEVEL", "").strip() or _from_yaml(
        raw, "log_level", DEFAULT_LOG_LEVEL
    )
    return Settings(
        data_file_path=Path(data_file),
        log_level=str(log_level),
        load_sample_data=_to_bool(_from_yaml(raw, "load_sample_data", True)),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(format=LOG_FORMAT, level=getattr(logging, level.upper()))
