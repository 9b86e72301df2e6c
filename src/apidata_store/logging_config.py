"""
Centralized logging configuration for ingestion services.

``setup_logging`` configures:
- Console output on stdout
- File output to logs/{service_name}.log when a service name is given
- Fresh log file on each start unless LOG_APPEND=1
"""

import json
import logging
import logging.handlers
import os
import sys
import threading
from pathlib import Path
from typing import Optional

from apidata_store.config import env_bool, env_str

_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)
_LOGGING_CONFIG_PATH = Path("config") / "logging_config.json"
_TECHNICAL_FORMAT = "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_NOISY_LOGGERS = (
    "asyncio",
    "aiohttp",
    "urllib3",
    "redis",
    "redis.asyncio",
    "azure",
    "azure.core.pipeline.policies.http_logging_policy",
)


def _get_configured_log_directory(config_path: Path = _LOGGING_CONFIG_PATH) -> Optional[Path]:
    """Load log directory from logging_config.json if available."""
    if not config_path.exists():
        return None
    with config_path.open() as f:
        config = json.load(f)
    log_dir = config.get("log_directory")
    if not log_dir:
        return None
    return Path(log_dir).expanduser()


def _resolve_level(default: int) -> int:
    raw_level = env_str("LOG_LEVEL")
    if raw_level is None:
        return default
    level = logging.getLevelName(raw_level.upper())
    if not isinstance(level, int):
        _MODULE_LOGGER.warning("Ignoring unknown LOG_LEVEL %r", raw_level)
        return default
    return level


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as e:  # Best-effort cleanup operation
            _MODULE_LOGGER.debug("Handler close failed for logger '%s': %s", logger.name, e)
    logger.handlers = []


def _build_console_handler(user_friendly: bool) -> logging.Handler:
    if user_friendly:
        formatter = logging.Formatter("%(message)s")
    else:
        formatter = logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.WARNING if user_friendly else logging.DEBUG)
    return console_handler


def _configure_file_handler(service_name: Optional[str], project_root: Path) -> Optional[logging.Handler]:
    if not service_name:
        return None

    configured_dir = _get_configured_log_directory()
    logs_dir = configured_dir if configured_dir else project_root / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_path = logs_dir / f"{service_name}.log"
    file_mode = "a" if os.getenv("LOG_APPEND") == "1" else "w"

    file_handler = logging.handlers.WatchedFileHandler(log_path, mode=file_mode)
    file_handler.setFormatter(logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT))
    file_handler.setLevel(logging.INFO)
    return file_handler


def _suppress_noisy_third_parties() -> None:
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def setup_logging(service_name: Optional[str] = None, user_friendly: bool = False) -> None:
    """Configure the root logger for a service process."""

    with _config_lock:
        root_logger = logging.getLogger()
        _close_handlers(root_logger)

        root_logger.addHandler(_build_console_handler(user_friendly))

        if not env_bool("LOG_TO_FILE_DISABLED", or_value=False):
            file_handler = _configure_file_handler(service_name, Path.cwd())
            if file_handler:
                root_logger.addHandler(file_handler)

        root_logger.setLevel(_resolve_level(logging.INFO))
        _suppress_noisy_third_parties()


__all__ = ["setup_logging"]
