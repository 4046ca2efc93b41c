"""Асинхронный HTTP-клиент StructOCR API"""
from __future__ import annotations

import asyncio
import json
import logging
import time
from typing import Any, Optional, Union

import httpx

from structocr._metadata import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, USER_AGENT
from structocr.exceptions import (
    ApiError,
    ClientError,
    NetworkError,
    StructOCRError,
)
from structocr.models import ClientConfig, DocumentType
from structocr.utils import ensure_file_exists, file_to_base64

logger = logging.getLogger(__name__)


class StructOCR:
    """
    Клиент StructOCR API.

    Каждый scan_* метод читает файл, кодирует его в base64 и отправляет
    JSON {"img": ...} на свой эндпоинт. Ответ сервера возвращается как есть.

    Пример:
        async with StructOCR(api_key="...") as client:
            data = await client.scan_passport("passport.jpg")
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._config = ClientConfig.resolve(api_key, base_url, timeout)
        self._headers = {
            "x-api-key": self._config.api_key,
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._client_loop: Optional[asyncio.AbstractEventLoop] = None

        logger.debug(
            f"StructOCR initialized: base_url={self._config.base_url}, "
            f"timeout={self._config.timeout}s"
        )

    def __repr__(self) -> str:
        return f"StructOCR(base_url={self.base_url!r}, timeout={self.timeout!r})"

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def api_key(self) -> str:
        return self._config.api_key

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def timeout(self) -> float:
        return self._config.timeout

    @property
    def headers(self) -> dict:
        return dict(self._headers)

    def _get_client(self) -> httpx.AsyncClient:
        """Получить или создать httpx AsyncClient

        Пул соединений привязан к event loop: при смене loop (например,
        повторный asyncio.run) создаётся новый клиент.
        """
        loop = asyncio.get_running_loop()
        if self._client_loop is not loop:
            self._client = None
        if self._client is None or self._client.is_closed:
            self._client_loop = loop
            self._client = httpx.AsyncClient(
                headers=self._headers,
                timeout=self._config.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Закрыть HTTP клиент"""
        if (
            self._client
            and not self._client.is_closed
            and self._client_loop is asyncio.get_running_loop()
        ):
            await self._client.aclose()
        self._client = None
        self._client_loop = None

    async def __aenter__(self) -> "StructOCR":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _post_image(self, document_type: DocumentType, file_path) -> Any:
        """
        Прочитать файл и отправить его на эндпоинт

        Args:
            document_type: тип документа (определяет эндпоинт)
            file_path: путь к файлу изображения

        Returns:
            Распарсенный JSON ответа сервера без изменений
            (или текст, если тело ответа не JSON)

        Raises:
            ImageNotFoundError: файла нет, запрос не отправляется
            ApiError: сервер ответил статусом вне 2xx
            NetworkError: ответ не получен
            ClientError: прочие локальные ошибки
        """
        path = ensure_file_exists(file_path)
        endpoint = document_type.value
        url = f"{self.base_url}/{endpoint}"

        try:
            image_b64 = await asyncio.to_thread(file_to_base64, path)
            payload = {"img": image_b64}

            logger.debug(
                f"POST {url} ({len(image_b64)} base64 chars)",
                extra={"endpoint": endpoint},
            )
            started = time.perf_counter()
            # Общий лимит на весь запрос, включая чтение тела ответа
            async with asyncio.timeout(self._config.timeout):
                response = await self._get_client().post(url, json=payload)
            logger.debug(
                f"POST {url} -> {response.status_code}",
                extra={
                    "endpoint": endpoint,
                    "status_code": response.status_code,
                    "duration_ms": int((time.perf_counter() - started) * 1000),
                },
            )

            if not response.is_success:
                body = _response_body(response)
                raise ApiError(
                    f"API Error: {response.status_code} - {_serialize_body(body)}",
                    status_code=response.status_code,
                    body=body,
                )
            return _response_body(response)

        except StructOCRError:
            raise
        except (httpx.TransportError, TimeoutError) as e:
            raise NetworkError(
                "Network Error: No response received from StructOCR API"
            ) from e
        except Exception as e:
            raise ClientError(f"Client Error: {e}") from e

    # --- Public Methods ---

    async def scan(self, document_type: Union[DocumentType, str], file_path) -> Any:
        """
        Распознать документ указанного типа

        Args:
            document_type: DocumentType или его строковое значение ("passport", "vin", ...)
            file_path: путь к файлу изображения
        """
        try:
            document_type = DocumentType(document_type)
        except ValueError as e:
            raise ClientError(f"Client Error: {e}") from e
        return await self._post_image(document_type, file_path)

    async def scan_passport(self, file_path) -> Any:
        """Распознать паспорт"""
        return await self._post_image(DocumentType.PASSPORT, file_path)

    async def scan_national_id(self, file_path) -> Any:
        """Распознать национальную ID-карту"""
        return await self._post_image(DocumentType.NATIONAL_ID, file_path)

    async def scan_driver_license(self, file_path) -> Any:
        """Распознать водительское удостоверение"""
        return await self._post_image(DocumentType.DRIVER_LICENSE, file_path)

    async def scan_invoice(self, file_path) -> Any:
        """Распознать счёт (invoice)"""
        return await self._post_image(DocumentType.INVOICE, file_path)

    async def scan_vin(self, file_path) -> Any:
        """Распознать VIN (идентификационный номер ТС)"""
        return await self._post_image(DocumentType.VIN, file_path)


def _response_body(response: httpx.Response) -> Any:
    """JSON тела ответа, либо текст если это не JSON"""
    try:
        return response.json()
    except ValueError:
        return response.text


def _serialize_body(body: Any) -> str:
    return json.dumps(body, ensure_ascii=False, separators=(",", ":"))
