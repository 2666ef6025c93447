"""
Logging Utilities
=================
Named loggers for the app, the translation pipeline and the API, plus an
in-memory event buffer the ``/logs`` endpoint serves. Pipeline events carry
the sequence id of the request they belong to so one keystroke burst can be
followed from debounce to display.
"""
import os
import logging
import threading
from collections import deque
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import List, Dict, Optional
from transluxe.config import config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class LogBuffer:
    """Thread-safe ring of recent pipeline events."""

    def __init__(self, max_size: int = None):
        self.buffer = deque(maxlen=max_size or config.logging.log_buffer_size)
        self.lock = threading.Lock()
        self.last_id = 0

    def add(self, level: str, source: str, message: str, sequence_id: Optional[int] = None) -> Dict:
        with self.lock:
            self.last_id += 1
            entry = {
                'id': self.last_id,
                'timestamp': datetime.now().strftime('%H:%M:%S.%f')[:-3],
                'level': level,
                'source': source,
                'sequence_id': sequence_id,
                'message': message
            }
            self.buffer.append(entry)
            return entry

    def get_all(self) -> List[Dict]:
        with self.lock:
            return list(self.buffer)

    def get_since(self, since_id: int) -> List[Dict]:
        with self.lock:
            return [e for e in self.buffer if e['id'] > since_id]

    def get_for_request(self, sequence_id: int) -> List[Dict]:
        """Events recorded for one translation request."""
        with self.lock:
            return [e for e in self.buffer if e['sequence_id'] == sequence_id]

    def clear(self):
        with self.lock:
            self.buffer.clear()
            self.last_id = 0


log_buffer = LogBuffer()


class AppLogger:
    """The three named loggers, each writing to its own rotating file."""

    def __init__(self, log_dir: str = None):
        self.log_dir = log_dir or config.paths.log_folder
        os.makedirs(self.log_dir, exist_ok=True)
        level = logging.DEBUG if config.logging.verbose_debug else logging.INFO

        self.app_logger = self._setup_logger('transluxe.app', 'app.log', level)
        self.translation_logger = self._setup_logger('transluxe.translation', 'translations.log', level)
        self.api_logger = self._setup_logger('transluxe.api', 'api.log', level)

    def _setup_logger(self, name: str, filename: str, level: int) -> logging.Logger:
        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Prevent duplicate handlers
        if logger.handlers:
            return logger

        file_handler = RotatingFileHandler(
            os.path.join(self.log_dir, filename),
            maxBytes=config.logging.log_file_max_bytes,
            backupCount=config.logging.log_file_backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        ))
        logger.addHandler(console_handler)

        return logger


_logger_instance: Optional[AppLogger] = None
_logger_lock = threading.Lock()


def get_logger() -> AppLogger:
    """Get or create the global logger instance."""
    global _logger_instance
    with _logger_lock:
        if _logger_instance is None:
            _logger_instance = AppLogger()
    return _logger_instance


def log_event(
    message: str,
    level: str = 'INFO',
    source: str = 'APP',
    sequence_id: Optional[int] = None
) -> Dict:
    """
    Record a pipeline event in the buffer and the matching named logger.

    Args:
        message: Event text
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
        source: Emitting component, e.g. TRANSLATE or SESSION
        sequence_id: Translation request the event belongs to, if any

    Returns:
        The buffered entry
    """
    entry = log_buffer.add(level, source, message, sequence_id)

    loggers = get_logger()
    logger = loggers.translation_logger if sequence_id is not None else loggers.app_logger
    prefix = f"[{source} #{sequence_id}]" if sequence_id is not None else f"[{source}]"
    logger.log(logging.getLevelName(level.upper()), f"{prefix} {message}")
    return entry
