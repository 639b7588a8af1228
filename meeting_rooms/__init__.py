"""
Сервис бронирования переговорных комнат.

Отвечает за:
- Хранение фиксированного каталога комнат
- Создание и отмену бронирований без пересечений по времени
- Расчет текущей занятости комнат
"""

from . import application, domain, infrastructure

__all__ = [
    "domain",
    "application",
    "infrastructure",
]
