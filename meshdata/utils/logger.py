# meshdata/utils/logger.py
# ---------------------------------------------------------------
# Общий логгер пакета + смена уровня детализации.
# ---------------------------------------------------------------

import logging

def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("meshdata")

logger = init_logger()

def to_level(level, default: int = logging.INFO) -> int:
    """Имя уровня ("debug", "WARNING") или число → число logging."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        logger.warning(f"[Logger] Unknown log level '{level}'")
        return default
    return value

def set_level(level) -> int:
    """Установить уровень логгера пакета, вернуть его числовое значение."""
    value = to_level(level)
    logger.setLevel(value)
    return value
