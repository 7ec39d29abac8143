"""
Конфигурация логирования Streamlit приложения
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from exceptions import AppException

# Стандартные атрибуты LogRecord, которые не попадают в extra
_RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "taskName",
        "exc_info",
        "exc_text",
        "stack_info",
    }
)


# Ключи extra, значения которых не должны попадать в логи
_SECRET_MARKERS = ("token", "password", "secret", "authorization")
_REDACTED = "***"


def _mask_secrets(value: Any, key: str = "") -> Any:
    if any(marker in key.lower() for marker in _SECRET_MARKERS):
        return _REDACTED
    if isinstance(value, dict):
        return {k: _mask_secrets(v, str(k)) for k, v in value.items()}
    return value


class JSONFormatter(logging.Formatter):
    """
    Однострочный JSON для сбора логов.

    Поля extra с токенами и паролями маскируются. Для AppException в запись
    добавляются error_code и details, чтобы сбой запроса можно было
    отфильтровать без разбора traceback.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "at": f"{record.module}.{record.funcName}:{record.lineno}",
        }

        extra = {k: v for k, v in record.__dict__.items() if k not in _RESERVED_ATTRS}
        if extra:
            entry["extra"] = _mask_secrets(extra)

        if record.exc_info:
            exc = record.exc_info[1]
            if isinstance(exc, AppException):
                entry["error_code"] = exc.error_code
                entry["details"] = _mask_secrets(exc.details)
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, default=str)


class ColoredFormatter(logging.Formatter):
    """
    Форматтер с цветным выводом для консоли (для разработки).
    """

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        original = record.levelname
        record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def setup_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """
    Настройка логирования для приложения.

    Streamlit перезапускает скрипт страницы на каждое действие, поэтому
    повторный вызов заменяет handlers, а не добавляет новые.

    Args:
        level: Уровень логирования (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Использовать JSON формат (для production)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    if json_logs:
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(
            ColoredFormatter(
                "[PORTFOLIO] %(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    root_logger.addHandler(console_handler)

    # Настройка логирования для внешних библиотек
    logging.getLogger("urllib3").setLevel(logging.WARNING)
