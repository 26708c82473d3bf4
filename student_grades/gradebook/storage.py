# gradebook/storage.py
"""Модуль для операций ввода/вывода: чтение и запись списка студентов в JSON-файл."""
import json
import logging
from pathlib import Path
from typing import Union

try:
    # Сначала относительный (для pytest)
    from .roster import Roster
    from .errors import FileProcessingError
except (ImportError, ValueError):
    # Затем прямой (для запуска скрипта из папки)
    from roster import Roster
    from errors import FileProcessingError
# -------------------------

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_roster(filepath: PathLike) -> Roster:
    """Читает весь файл и возвращает ростер.

    Если файла нет, создаёт пустой файл и возвращает пустой ростер.
    Некорректные записи приводят к DataValidationError из Roster.
    """
    path = Path(filepath)
    if not path.exists():
        logger.warning("Файл данных %s не найден, будет создан новый", path)
        roster = Roster()
        save_roster(path, roster)
        return roster

    try:
        with open(path, mode='r', encoding='utf-8') as file:
            data = json.load(file)
    except json.JSONDecodeError as e:
        raise FileProcessingError(f"Файл {path} содержит некорректный JSON: {e}")
    except UnicodeDecodeError as e:
        raise FileProcessingError(f"Файл {path} не в кодировке UTF-8: {e}")
    except OSError as e:
        raise FileProcessingError(f"Не удалось прочитать файл {path}: {e}")

    roster = Roster.from_list(data)
    logger.info("Загружено %d студентов из %s", roster.get_student_count(), path)
    return roster


def save_roster(filepath: PathLike, roster: Roster) -> None:
    """Перезаписывает файл целиком текущим содержимым ростера."""
    path = Path(filepath)
    try:
        with open(path, mode='w', encoding='utf-8') as file:
            json.dump(roster.to_list(), file, indent=2, ensure_ascii=False)
    except OSError as e:
        logger.error("Ошибка записи в файл %s: %s", path, e)
        raise FileProcessingError(f"Ошибка записи в файл {path}: {e}")
    logger.debug("Сохранено %d студентов в %s", roster.get_student_count(), path)
