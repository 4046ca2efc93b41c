"""
StructOCR - Python-клиент StructOCR API.

Компоненты:
- client.py - StructOCR (асинхронный клиент)
- models.py - DocumentType, ClientConfig
- exceptions.py - StructOCRError, ApiError, NetworkError, etc.
- utils.py - ensure_file_exists, file_to_base64
- logging_config.py - setup_logging (опционально, для приложений)
"""

from structocr._metadata import __version__
from structocr.client import StructOCR
from structocr.exceptions import (
    ApiError,
    ClientError,
    ConfigurationError,
    ImageNotFoundError,
    NetworkError,
    StructOCRError,
)
from structocr.models import ClientConfig, DocumentType

__all__ = [
    "StructOCR",
    "ClientConfig",
    "DocumentType",
    "StructOCRError",
    "ConfigurationError",
    "ImageNotFoundError",
    "ApiError",
    "NetworkError",
    "ClientError",
    "__version__",
]
