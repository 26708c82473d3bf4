# gradebook/config.py
"""Настройки приложения из переменных окружения."""
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

# --- КОНФИГУРАЦИЯ ---
DEFAULT_DATA_FILE = "students.json"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_TOP_N = 3


@dataclass
class Settings:
    data_file: str = DEFAULT_DATA_FILE
    log_level: str = DEFAULT_LOG_LEVEL
    top_n: int = DEFAULT_TOP_N


def _read_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("%s=%r не является целым числом, используется %d", key, raw, default)
        return default
    if value <= 0:
        logger.warning("%s должно быть больше нуля, используется %d", key, default)
        return default
    return value


def _read_log_level(env: Mapping[str, str]) -> str:
    level = (env.get("GRADEBOOK_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    # getLevelName возвращает число только для известных уровней
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Неизвестный уровень логирования %r, используется %s", level, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL
    return level


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Собирает Settings из окружения (по умолчанию os.environ)."""
    if env is None:
        env = os.environ

    return Settings(
        data_file=env.get("GRADEBOOK_DATA_FILE") or DEFAULT_DATA_FILE,
        log_level=_read_log_level(env),
        top_n=_read_int(env, "GRADEBOOK_TOP_N", DEFAULT_TOP_N),
    )
