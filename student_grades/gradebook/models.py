# gradebook/models.py
"""Модуль, определяющий модель данных Student и правила проверки её полей."""
import math
import re
from typing import Any, Dict, Optional

try:
    # Сначала относительный (для pytest и установленного пакета)
    from .errors import DataValidationError
except (ImportError, ValueError):
    # Затем прямой (для запуска скрипта из папки)
    from errors import DataValidationError
# -------------------------

PASS_THRESHOLD = 75
STATUS_PASSED = "Lulus"
STATUS_FAILED = "Tidak Lulus"
MIN_SCORE = 0
MAX_SCORE = 100

STUDENT_ID_PATTERN = re.compile(r"^S\d{3}$")


def is_valid_student_id(student_id: Any) -> bool:
    """Проверяет формат ID: буква S и ровно три цифры (S001, S042...)."""
    return isinstance(student_id, str) and STUDENT_ID_PATTERN.fullmatch(student_id) is not None


def is_valid_score(score: Any) -> bool:
    """Оценка должна быть конечным числом в диапазоне 0-100."""
    # bool - подкласс int, но оценкой не является
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        return False
    if not math.isfinite(score):
        return False
    return MIN_SCORE <= score <= MAX_SCORE


class Student:
    """Представляет студента: ID, имя, класс и оценки по предметам."""

    def __init__(self, student_id: str, name: str, student_class: str,
                 grades: Optional[Dict[str, float]] = None):
        # Формат ID проверяет вызывающий код (см. is_valid_student_id)
        self._id = student_id
        self.name = name
        self.student_class = student_class
        self._grades: Dict[str, float] = dict(grades) if grades else {}

    @property
    def id(self) -> str:
        """ID неизменяем после создания."""
        return self._id

    def add_grade(self, subject: str, score: float) -> bool:
        """Добавляет или перезаписывает оценку по предмету.

        Возвращает False и ничего не меняет, если оценка не число
        или выходит за пределы 0-100.
        """
        if not is_valid_score(score):
            return False
        self._grades[subject] = score
        return True

    @property
    def average(self) -> float:
        """Средний балл по всем предметам. Возвращает 0, если оценок нет."""
        if not self._grades:
            return 0
        return sum(self._grades.values()) / len(self._grades)

    @property
    def grade_status(self) -> str:
        return STATUS_PASSED if self.average >= PASS_THRESHOLD else STATUS_FAILED

    @property
    def is_passed(self) -> bool:
        return self.grade_status == STATUS_PASSED

    def get_grades(self) -> Dict[str, float]:
        """Возвращает копию оценок: изменения копии не затрагивают студента."""
        return dict(self._grades)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "class": self.student_class,
            "grades": self.get_grades(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Student":
        """Создаёт студента из словаря, прочитанного из JSON.

        Данные из файла проверяются так же строго, как ввод пользователя:
        файл мог быть отредактирован вручную.
        """
        if not isinstance(data, dict):
            raise DataValidationError(f"Запись студента должна быть объектом, получено: {data!r}")

        student_id = data.get("id")
        if not is_valid_student_id(student_id):
            raise DataValidationError(f"Некорректный ID студента: {student_id!r}")

        name = data.get("name")
        if not isinstance(name, str) or not name.strip():
            raise DataValidationError(f"Пустое имя у студента {student_id}.")

        student_class = data.get("class")
        if not isinstance(student_class, str):
            raise DataValidationError(f"Некорректный класс у студента {student_id}: {student_class!r}")

        grades = data.get("grades")
        if grades is None:
            grades = {}
        if not isinstance(grades, dict):
            raise DataValidationError(f"Оценки студента {student_id} должны быть объектом.")
        for subject, score in grades.items():
            if not isinstance(subject, str):
                raise DataValidationError(f"Некорректный предмет у студента {student_id}: {subject!r}")
            if not is_valid_score(score):
                raise DataValidationError(
                    f"Оценка {score!r} по предмету '{subject}' у студента {student_id} недопустима. "
                    f"Разрешен диапазон {MIN_SCORE}-{MAX_SCORE}."
                )

        return cls(student_id, name, student_class, grades)

    def __repr__(self) -> str:
        """Возвращает строковое представление объекта для отладки."""
        return (f"Student(id='{self.id}', name='{self.name}', "
                f"class='{self.student_class}', average={self.average:.2f})")

    def __str__(self) -> str:
        """Карточка студента для вывода в консоль."""
        lines = [
            "=" * 50,
            f"{'ID':<20}: {self.id}",
            f"{'Имя':<20}: {self.name}",
            f"{'Класс':<20}: {self.student_class}",
            "=" * 50,
            "Оценки:",
        ]
        if not self._grades:
            lines.append("  Нет оценок")
        else:
            for subject, score in self._grades.items():
                lines.append(f"  • {subject:<20}: {score}")
        lines.append("-" * 50)
        lines.append(f"{'Средний балл':<20}: {self.average:.2f}")
        lines.append(f"{'Статус':<20}: {self.grade_status}")
        lines.append("=" * 50)
        return "\n".join(lines)
