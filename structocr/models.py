"""Модели данных StructOCR клиента"""
from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from structocr._metadata import API_KEY_ENV, DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from structocr.exceptions import ConfigurationError


class DocumentType(str, Enum):
    """Тип документа = сегмент пути эндпоинта"""

    PASSPORT = "passport"
    NATIONAL_ID = "national-id"
    DRIVER_LICENSE = "driver-license"
    INVOICE = "invoice"
    VIN = "vin"


def normalize_base_url(base_url: str) -> str:
    """Убрать один завершающий слэш"""
    if base_url.endswith("/"):
        return base_url[:-1]
    return base_url


@dataclass(frozen=True)
class ClientConfig:
    """Настройки подключения, неизменяемы после создания клиента"""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def __repr__(self) -> str:
        return (
            f"ClientConfig(api_key='***', base_url={self.base_url!r}, "
            f"timeout={self.timeout!r})"
        )

    @classmethod
    def resolve(
        cls,
        api_key: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> "ClientConfig":
        """
        Собрать конфигурацию из аргументов и окружения

        Args:
            api_key: API ключ; если не задан, берётся из STRUCTOCR_API_KEY
            base_url: адрес API (один завершающий слэш отбрасывается)
            timeout: таймаут запроса в секундах

        Raises:
            ConfigurationError: ключ не найден ни в аргументе, ни в окружении
        """
        key = api_key or os.getenv(API_KEY_ENV)
        if not key:
            raise ConfigurationError(
                "API Key is required. Get one at https://structocr.com"
            )
        return cls(api_key=key, base_url=normalize_base_url(base_url), timeout=timeout)
