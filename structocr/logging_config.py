"""Настройка логирования для приложений, использующих StructOCR.

Библиотека сама логирование не настраивает. Вызовите setup_logging()
в точке входа своего приложения (или в примере), если нужен вывод
логов клиента:

    from structocr.logging_config import setup_logging

    setup_logging()              # уровень/формат из env
    setup_logging("DEBUG", "text")

Переменные окружения:
    STRUCTOCR_LOG_LEVEL - уровень логирования (DEBUG, INFO, WARNING, ERROR). По умолчанию: INFO
    STRUCTOCR_LOG_FORMAT - формат логов (json, text). По умолчанию: text
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Optional


class JSONFormatter(logging.Formatter):
    """JSON formatter для structured logging."""

    # Поля, которые клиент передаёт в extra
    EXTRA_FIELDS = frozenset({
        "endpoint",
        "status_code",
        "duration_ms",
    })

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for field in self.EXTRA_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_data[field] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class HumanReadableFormatter(logging.Formatter):
    """Читаемый форматтер для локальной разработки."""

    FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

    def __init__(self) -> None:
        super().__init__(self.FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def get_log_level(level: Optional[str] = None) -> int:
    """Получить уровень логирования (аргумент или env)."""
    level_str = (level or os.getenv("STRUCTOCR_LOG_LEVEL", "INFO")).upper()
    return getattr(logging, level_str, logging.INFO)


def get_log_format(fmt: Optional[str] = None) -> str:
    """Получить формат логов: 'json' или 'text'."""
    return (fmt or os.getenv("STRUCTOCR_LOG_FORMAT", "text")).lower()


_logging_initialized = False


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Настроить логирование приложения.

    Безопасно вызывать повторно - инициализация произойдёт только один раз.
    """
    global _logging_initialized
    if _logging_initialized:
        return

    log_level = get_log_level(level)

    if get_log_format(fmt) == "json":
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = HumanReadableFormatter()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Уменьшаем шум транспорта
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    _logging_initialized = True

