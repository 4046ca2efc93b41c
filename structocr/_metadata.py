"""
StructOCR - метаданные клиентской библиотеки

Общая информация о продукте, используемая клиентом
(User-Agent, адрес API по умолчанию, имя переменной окружения).
"""

__product__ = "StructOCR"
__version__ = "1.1.0"
__description__ = "Python-клиент StructOCR API: паспорта, ID-карты, права, счета, VIN"
__license__ = "MIT"
__url__ = "https://structocr.com"
__python_requires__ = ">=3.11"

DEFAULT_BASE_URL = "https://api.structocr.com/v1"
API_KEY_ENV = "STRUCTOCR_API_KEY"
DEFAULT_TIMEOUT = 30.0

USER_AGENT = f"{__product__}-Python/{__version__}"

