"""Утилиты для подготовки изображений к отправке"""
import base64
from pathlib import Path

from structocr.exceptions import ImageNotFoundError


def ensure_file_exists(file_path) -> Path:
    """Проверить, что путь указывает на существующий файл"""
    try:
        path = Path(file_path)
    except TypeError:
        raise ImageNotFoundError(str(file_path)) from None
    if not path.is_file():
        raise ImageNotFoundError(str(file_path))
    return path


def file_to_base64(file_path) -> str:
    """
    Прочитать файл целиком и закодировать в base64

    Args:
        file_path: путь к файлу

    Returns:
        Base64 строка (стандартный алфавит, с паддингом)
    """
    data = Path(file_path).read_bytes()
    return base64.b64encode(data).decode("ascii")
