"""Исключения StructOCR клиента"""
from __future__ import annotations

from typing import Any


class StructOCRError(Exception):
    """Базовая ошибка StructOCR"""

    pass


class ConfigurationError(StructOCRError):
    """Не задан API ключ"""

    pass


class ImageNotFoundError(StructOCRError, FileNotFoundError):
    """Файл изображения не найден (до отправки запроса)"""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File not found: {path}")

    def __str__(self) -> str:
        return self.args[0]


class ApiError(StructOCRError):
    """Сервер вернул статус вне 2xx"""

    def __init__(self, message: str, status_code: int, body: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class NetworkError(StructOCRError):
    """Запрос отправлен, но ответ не получен (таймаут, обрыв соединения)"""

    pass


class ClientError(StructOCRError):
    """Локальная ошибка при формировании или отправке запроса"""

    pass
