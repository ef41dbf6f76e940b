# meshdata/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger     – готовый объект logging.Logger (с level INFO)
    * set_level  – смена уровня логгера по имени
    * Config     – JSON‑конфигурация
    * Profiler   – замер времени блока кода
"""

from .logger import logger, set_level
from .config import Config, get_config
from .profiler import Profiler

__all__ = ["logger", "set_level", "Config", "get_config", "Profiler"]
