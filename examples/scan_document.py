"""
Пример использования StructOCR: распознать документ и вывести JSON

Запуск:
    python examples/scan_document.py passport path/to/passport.jpg

API ключ берётся из STRUCTOCR_API_KEY (можно положить в .env).
"""

import asyncio
import json
import sys

from dotenv import load_dotenv

from structocr import DocumentType, StructOCR, StructOCRError
from structocr.logging_config import setup_logging


async def main(document_type: str, file_path: str) -> int:
    async with StructOCR() as client:
        try:
            result = await client.scan(document_type, file_path)
        except (StructOCRError, FileNotFoundError) as e:
            print(f"❌ {e}", file=sys.stderr)
            return 1

    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    load_dotenv()
    setup_logging()

    if len(sys.argv) != 3:
        types = ", ".join(t.value for t in DocumentType)
        print(f"Usage: {sys.argv[0]} <{types}> <file>", file=sys.stderr)
        sys.exit(2)

    sys.exit(asyncio.run(main(sys.argv[1], sys.argv[2])))
