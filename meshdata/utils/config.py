"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – используются настройки по‑умолчанию
(на диск они пишутся только явным вызовом save()).
"""

import copy
import json
from pathlib import Path
from meshdata.utils.logger import logger

DEFAULT_CONFIG = {
    "log_level": "INFO",
    "recovery_log_level": "DEBUG",
    "profile": False,
    "extensions": {
        ".obj": "obj",
        ".ply": "ply",
        ".gltf": "gltf",
        ".glb": "gltf",
    },
}

def _merge(base: dict, override: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged

class Config:
    """Настройки извлечения: уровни логов, профайлинг, карта расширений."""

    def __init__(self, path: str | None = None):
        self.path = Path(path) if path is not None else None
        self._load()

    def _load(self):
        self.data = copy.deepcopy(DEFAULT_CONFIG)
        if self.path is None:
            return
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    loaded = json.load(f)
                if not isinstance(loaded, dict):
                    raise ValueError(f"top level must be an object, got {type(loaded).__name__}")
                self.data = _merge(DEFAULT_CONFIG, loaded)
                logger.info("[Config] Loaded configuration.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
        else:
            logger.info("[Config] No config file – using defaults.")

    def save(self, path: str | None = None):
        target = Path(path) if path is not None else self.path
        if target is None:
            raise ValueError("[Config] No path to save configuration to")
        with target.open("w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=4)
        logger.info("[Config] Configuration saved.")

    def format_for(self, path) -> str | None:
        """Формат файла по его расширению (или None)."""
        suffix = Path(path).suffix.lower()
        return self["extensions"].get(suffix)

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value

    def get(self, key, default=None):
        return self.data.get(key, default)

_default = None

def get_config() -> Config:
    """Лениво созданная конфигурация по‑умолчанию."""
    global _default
    if _default is None:
        _default = Config()
    return _default
