"""
Centralized Configuration for TransLuxe
=======================================
All configuration values in one place, configurable via environment variables.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from transluxe.config.constants import SUPPORTED_LANGUAGES


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean from environment variable."""
    val = os.environ.get(key, "").lower()
    if val in ("true", "1", "yes", "on"):
        return True
    elif val in ("false", "0", "no", "off"):
        return False
    return default


def _get_int_env(key: str, default: int) -> int:
    """Get integer from environment variable."""
    try:
        return int(os.environ.get(key, default))
    except (ValueError, TypeError):
        return default


def _get_float_env(key: str, default: float) -> float:
    """Get float from environment variable."""
    try:
        return float(os.environ.get(key, default))
    except (ValueError, TypeError):
        return default


def get_app_dir() -> str:
    """Directory that holds the logs folder; defaults to the project root."""
    return os.environ.get(
        'TRANSLUXE_APP_DIR',
        os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    )


@dataclass
class ServerConfig:
    """Flask server configuration."""
    host: str = field(default_factory=lambda: os.environ.get("TRANSLUXE_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: _get_int_env("TRANSLUXE_PORT", 5002))
    debug: bool = field(default_factory=lambda: _get_bool_env("TRANSLUXE_DEBUG", False))
    secret_key: str = field(default_factory=lambda: os.environ.get("SECRET_KEY", "dev-key-change-in-production"))

    # CORS settings
    cors_origins: List[str] = field(default_factory=lambda: [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5002",
        "http://127.0.0.1:5002"
    ])


@dataclass
class BackendConfig:
    """Lingva translation backend configuration."""
    base_url: str = field(default_factory=lambda: os.environ.get("TRANSLUXE_BACKEND_URL", "https://lingva.ml"))

    # Single attempt per request, bounded only by the transport timeout
    timeout: float = field(default_factory=lambda: _get_float_env("TRANSLUXE_BACKEND_TIMEOUT", 10.0))
    health_check_timeout: float = field(default_factory=lambda: _get_float_env("TRANSLUXE_HEALTH_TIMEOUT", 5.0))
    pool_size: int = field(default_factory=lambda: _get_int_env("TRANSLUXE_POOL_SIZE", 10))


@dataclass
class PipelineConfig:
    """Input pipeline configuration."""
    debounce_seconds: float = field(default_factory=lambda: _get_float_env("TRANSLUXE_DEBOUNCE_SECONDS", 0.5))
    copy_ack_seconds: float = field(default_factory=lambda: _get_float_env("TRANSLUXE_COPY_ACK_SECONDS", 2.0))
    max_text_length: int = field(default_factory=lambda: _get_int_env("TRANSLUXE_MAX_TEXT_LENGTH", 5000))

    # Initial language selection
    default_source_lang: str = field(default_factory=lambda: os.environ.get("TRANSLUXE_SOURCE_LANG", "en"))
    default_target_lang: str = field(default_factory=lambda: os.environ.get("TRANSLUXE_TARGET_LANG", "ar"))

    # How long a request thread waits for the event loop to answer
    call_timeout: float = field(default_factory=lambda: _get_float_env("TRANSLUXE_CALL_TIMEOUT", 5.0))


@dataclass
class LoggingConfig:
    """Logging configuration."""
    verbose_debug: bool = field(default_factory=lambda: _get_bool_env("VERBOSE_DEBUG", True))
    log_buffer_size: int = field(default_factory=lambda: _get_int_env("LOG_BUFFER_SIZE", 500))
    log_file_max_bytes: int = field(default_factory=lambda: _get_int_env("LOG_FILE_MAX_BYTES", 10 * 1024 * 1024))
    log_file_backup_count: int = field(default_factory=lambda: _get_int_env("LOG_FILE_BACKUP_COUNT", 5))


@dataclass
class PathConfig:
    """Path configuration."""
    app_dir: str = field(default_factory=get_app_dir)

    @property
    def log_folder(self) -> Path:
        return Path(self.app_dir) / 'logs'


@dataclass
class Config:
    """Main application configuration container."""
    server: ServerConfig = field(default_factory=ServerConfig)
    backend: BackendConfig = field(default_factory=BackendConfig)
    pipeline: PipelineConfig = field(default_factory=PipelineConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    paths: PathConfig = field(default_factory=PathConfig)

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self):
        """Validate configuration values."""
        if self.pipeline.debounce_seconds < 0:
            raise ValueError("debounce_seconds must not be negative")
        if self.pipeline.copy_ack_seconds < 0:
            raise ValueError("copy_ack_seconds must not be negative")
        if self.pipeline.max_text_length < 1:
            raise ValueError("max_text_length must be at least 1")
        if self.backend.timeout <= 0:
            raise ValueError("backend timeout must be positive")
        for lang in (self.pipeline.default_source_lang, self.pipeline.default_target_lang):
            if lang not in SUPPORTED_LANGUAGES:
                raise ValueError(f"unsupported default language: {lang}")


# Global configuration instance
config = Config()
