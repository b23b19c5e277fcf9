"""
Core configuration module for the Roo Code assistant backend.
Loads configuration from YAML file and environment variables.
"""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8091
    debug: bool = False


class DatabaseConfig(BaseModel):
    """Database configuration."""

    path: str = "data/roo_code.db"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    file: str = "roo_code.log"
    level: str = os.getenv("LOG_LEVEL", "INFO")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    max_size: int = 10  # MB
    backup_count: int = 5


class AssistantConfig(BaseSettings):
    """Assistant defaults. Values in the settings table take precedence at runtime.

    Every field can be overridden with a ROO_CODE_* environment variable,
    e.g. ROO_CODE_REQUEST_TIMEOUT=60.
    """

    model_config = SettingsConfigDict(env_prefix="ROO_CODE_")

    default_provider: str = "openrouter"
    default_model: str = "anthropic/claude-3-sonnet-20240229"
    max_tokens: int = 4000
    temperature: float = 0.7
    request_timeout: float = 45.0
    sparc_integration: bool = True
    auto_suggest: bool = True

    @classmethod
    def settings_customise_sources(
        cls, settings_cls, init_settings, env_settings, dotenv_settings, file_secret_settings
    ):
        # Environment beats config.yaml
        return env_settings, init_settings, dotenv_settings, file_secret_settings


class AppConfig(BaseModel):
    """Main application configuration.

    Provider selection, API keys and generation parameters chosen by the user
    live in the database (see roo_code.core.settings_db).
    """

    server: ServerConfig = ServerConfig()
    database: DatabaseConfig = DatabaseConfig()
    logging: LoggingConfig = LoggingConfig()
    assistant: AssistantConfig = Field(default_factory=AssistantConfig)


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent.parent


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to the configuration file. If None, uses default location.

    Returns:
        AppConfig instance with loaded configuration.
    """
    if config_path is None:
        config_path = os.environ.get("ROO_CODE_CONFIG")
        if config_path is None:
            config_path = get_project_root() / "config.yaml"

    config_path = Path(config_path)

    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}
            assistant = AssistantConfig(**(config_data.pop("assistant", None) or {}))
            return AppConfig(assistant=assistant, **config_data)

    return AppConfig()


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def _resolve_data_dir() -> Path:
    """
    Resolve the data directory path.

    Supports two modes:
    1. Container mode: DATA_DIR environment variable is set (e.g., /app/data)
    2. Local development: Uses project root/data

    Returns:
        Absolute path to the data directory.
    """
    data_dir_env = os.environ.get("DATA_DIR")

    if data_dir_env:
        return Path(data_dir_env).resolve()
    return (get_project_root() / "data").resolve()


def get_database_path() -> Path:
    """
    Get the absolute path to the database file.

    - Container: /app/data/roo_code.db
    - Local: project_root/data/roo_code.db
    """
    config = get_config()

    # e.g., "data/roo_code.db" -> "roo_code.db"
    db_filename = Path(config.database.path).name

    db_path = (_resolve_data_dir() / db_filename).resolve()
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return db_path


def get_log_path() -> Path:
    """
    Get the absolute path to the log file.

    - Container: $LOGS_DIR/roo_code.log
    - Local: project_root/logs/roo_code.log
    """
    config = get_config()

    logs_dir_env = os.environ.get("LOGS_DIR")

    if logs_dir_env:
        log_dir = Path(logs_dir_env)
    else:
        log_dir = get_project_root() / "logs"

    log_dir.mkdir(parents=True, exist_ok=True)

    # Use only the filename from config so logs never go outside logs/
    name = Path(config.logging.file).name or "roo_code.log"
    return log_dir / name
