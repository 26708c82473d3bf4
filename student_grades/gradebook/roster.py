# gradebook/roster.py
"""Модуль для управления списком студентов: CRUD, рейтинг, статистика по классу."""
import logging
from typing import Any, Dict, List, Optional

try:
    # 1. Относительный импорт (для pytest)
    from .models import Student
    from .errors import DataValidationError
except (ImportError, ValueError):
    # 2. Прямой импорт (для запуска скрипта из папки)
    from models import Student
    from errors import DataValidationError
# --------------------------------------------------

logger = logging.getLogger(__name__)


class Roster:
    """Упорядоченный список студентов с уникальными ID.

    Порядок - порядок добавления. Внутренний список наружу не отдаётся,
    все методы чтения возвращают копии.
    """

    def __init__(self):
        self._students: List[Student] = []

    def __len__(self) -> int:
        return len(self._students)

    def add_student(self, student: Student) -> bool:
        """Добавляет студента в конец списка, проверяя уникальность ID и имя."""
        if not isinstance(student, Student):
            return False
        if self.find_student(student.id) is not None:
            logger.debug("Студент с ID %s уже существует", student.id)
            return False
        if not isinstance(student.name, str) or not student.name.strip():
            return False
        if not isinstance(student.student_class, str):
            return False

        self._students.append(student)
        logger.debug("Добавлен студент %s", student.id)
        return True

    def remove_student(self, student_id: str) -> bool:
        student_to_remove = self.find_student(student_id)
        if student_to_remove is None:
            return False

        self._students.remove(student_to_remove)
        logger.debug("Удален студент %s", student_id)
        return True

    def find_student(self, student_id: str) -> Optional[Student]:
        return next((s for s in self._students if s.id == student_id), None)

    def update_student(self, student_id: str, name: Optional[str] = None,
                       student_class: Optional[str] = None) -> bool:
        """Обновляет имя и/или класс студента. ID изменить нельзя.

        None означает "поле не передано". Пустое имя отклоняется целиком,
        класс при этом тоже не меняется.
        """
        student = self.find_student(student_id)
        if student is None:
            return False
        if student_class is not None and not isinstance(student_class, str):
            return False

        if name is not None:
            if not name.strip():
                return False
            student.name = name

        if student_class is not None:
            student.student_class = student_class

        logger.debug("Обновлен студент %s", student_id)
        return True

    def get_all_students(self) -> List[Student]:
        return list(self._students)

    def get_top_students(self, n: int = 3) -> List[Student]:
        """Возвращает N лучших студентов по среднему баллу (по убыванию).

        sorted() стабилен, поэтому при равном среднем балле сохраняется
        порядок добавления.
        """
        if n <= 0:
            return []
        sorted_by_avg = sorted(self._students, key=lambda s: s.average, reverse=True)
        return sorted_by_avg[:n]

    def get_students_by_class(self, class_name: str) -> List[Student]:
        """Студенты класса, название сравнивается без учёта регистра."""
        wanted = class_name.lower()
        return [s for s in self._students if s.student_class.lower() == wanted]

    def get_class_statistics(self, class_name: str) -> Optional[Dict[str, Any]]:
        """Рассчитывает статистику по классу. None, если в классе нет студентов."""
        students = self.get_students_by_class(class_name)
        if not students:
            return None

        total_students = len(students)
        averages = [s.average for s in students]
        passed_students = sum(1 for s in students if s.is_passed)

        return {
            "class_name": class_name,
            "total_students": total_students,
            "class_average": sum(averages) / total_students,
            "passed_students": passed_students,
            "failed_students": total_students - passed_students,
            "pass_rate": passed_students / total_students * 100,
            "highest_average": max(averages),
            "lowest_average": min(averages),
        }

    def get_student_count(self) -> int:
        return len(self._students)

    def to_list(self) -> List[Dict[str, Any]]:
        return [s.to_dict() for s in self._students]

    def load_from_list(self, data: Any) -> None:
        """Заменяет весь список студентов данными из JSON.

        Не список - пустой ростер. Некорректная запись или повторный ID
        вызывают DataValidationError, текущий список при этом не меняется.
        """
        if not isinstance(data, list):
            logger.warning("Ожидался список студентов, получено %s. Список будет пустым.",
                           type(data).__name__)
            self._students = []
            return

        loaded: List[Student] = []
        seen_ids = set()
        for index, item in enumerate(data, start=1):
            try:
                student = Student.from_dict(item)
            except DataValidationError as e:
                raise DataValidationError(f"Ошибка в записи №{index}: {e}") from e
            if student.id in seen_ids:
                raise DataValidationError(f"Ошибка в записи №{index}: ID {student.id} повторяется.")
            seen_ids.add(student.id)
            loaded.append(student)

        self._students = loaded
        logger.debug("Загружено %d студентов", len(loaded))

    @classmethod
    def from_list(cls, data: Any) -> "Roster":
        roster = cls()
        roster.load_from_list(data)
        return roster
