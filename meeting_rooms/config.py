from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"

    # JSON-файл с каталогом комнат; без него используется встроенный каталог
    catalog_path: str | None = None


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise RuntimeError(f"Invalid MEETING_ROOMS_LOG_LEVEL value: {raw!r}")
    return level


def load_settings(dotenv_path: str | None = None) -> Settings:
    # .env в корне проекта; dotenv_path позволяет подменить файл в тестах.
    load_dotenv(dotenv_path=dotenv_path, override=False)

    log_level = _parse_log_level(os.getenv("MEETING_ROOMS_LOG_LEVEL", "INFO"))

    catalog_path = os.getenv("MEETING_ROOMS_CATALOG_PATH", "").strip() or None
    if catalog_path is not None and not os.path.isfile(catalog_path):
        raise RuntimeError(f"Room catalog file does not exist: {catalog_path}")

    return Settings(log_level=log_level, catalog_path=catalog_path)
