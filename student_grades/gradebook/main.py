# gradebook/main.py
"""Главный модуль, реализующий консольный интерфейс (CLI) для учёта оценок студентов."""
import logging
import math
import sys
from typing import Optional

try:
    # 1. Попытка относительного импорта (для pytest и установленного пакета)
    from . import storage, errors
    from .config import Settings, load_settings
    from .models import Student, is_valid_student_id, is_valid_score, MIN_SCORE, MAX_SCORE
    from .roster import Roster
except (ImportError, ValueError):
    # 2. Попытка прямого импорта (для запуска через python gradebook/main.py)
    import storage
    import errors
    from config import Settings, load_settings
    from models import Student, is_valid_student_id, is_valid_score, MIN_SCORE, MAX_SCORE
    from roster import Roster
# -------------------------

logger = logging.getLogger(__name__)

MEDALS = ["🥇", "🥈", "🥉"]


def print_menu(top_n: int):
    """Выводит на экран главное меню."""
    print("\n" + "=" * 50)
    print("   📚 СИСТЕМА УЧЁТА ОЦЕНОК СТУДЕНТОВ 📚")
    print("=" * 50)
    print("1. Добавить нового студента")
    print("2. Показать всех студентов")
    print("3. Найти студента по ID")
    print("4. Изменить данные студента")
    print("5. Удалить студента")
    print("6. Добавить оценку студенту")
    print(f"7. Показать ТОП-{top_n} студентов")
    print("8. Статистика по классу")
    print("9. Выход")
    print("=" * 50)


def print_header(title: str):
    print("\n" + "-" * 50)
    print(f"   {title}")
    print("-" * 50)


def add_new_student(roster: Roster) -> bool:
    """Запрашивает данные нового студента. Возвращает True, если список изменился."""
    print_header("➕ НОВЫЙ СТУДЕНТ")

    while True:
        student_id = input("Введите ID студента (формат: S001, S002, ...): ").strip()
        if not is_valid_student_id(student_id):
            print("❌ Неверный формат ID! Нужна буква S и 3 цифры (например: S001, S012).")
            continue
        if roster.find_student(student_id) is not None:
            print(f"❌ ID {student_id} уже занят! Введите другой.")
            continue
        break

    name = input("Введите имя студента: ")
    if not name.strip():
        print("❌ Имя не может быть пустым!")
        return False

    student_class = input("Введите класс: ")

    if roster.add_student(Student(student_id, name, student_class)):
        print(f"✅ Студент {name} ({student_id}) успешно добавлен.")
        return True

    print("❌ Не удалось добавить студента!")
    return False


def view_all_students(roster: Roster) -> bool:
    students = roster.get_all_students()
    if not students:
        print("ℹ️ Список студентов пуст.")
        return False

    print("\n--- Список всех студентов ---")
    for index, student in enumerate(students, start=1):
        print(f"\n[{index}]")
        print(student)
    return False


def search_student(roster: Roster) -> bool:
    print_header("🔍 ПОИСК СТУДЕНТА")
    student_id = input("Введите ID студента: ").strip()
    student = roster.find_student(student_id)

    if student is None:
        print(f"❌ Студент с ID {student_id} не найден.")
    else:
        print(student)
    return False


def update_student(roster: Roster) -> bool:
    print_header("✏️ ИЗМЕНЕНИЕ ДАННЫХ СТУДЕНТА")
    student_id = input("Введите ID студента: ").strip()
    student = roster.find_student(student_id)

    if student is None:
        print(f"❌ Студент с ID {student_id} не найден.")
        return False

    print("\n📋 Текущие данные:")
    print(student)
    print("ℹ️ Оставьте поле пустым, чтобы не менять его.")

    new_name = input("Новое имя (Enter - пропустить): ")
    new_class = input("Новый класс (Enter - пропустить): ")

    changes = {}
    if new_name.strip():
        changes["name"] = new_name
    if new_class.strip():
        changes["student_class"] = new_class

    if not changes:
        print("⚠️ Изменений нет.")
        return False

    if roster.update_student(student_id, **changes):
        print("✅ Данные студента обновлены.")
        print(student)
        return True

    print("❌ Не удалось обновить данные студента!")
    return False


def delete_student(roster: Roster) -> bool:
    print_header("🗑️ УДАЛЕНИЕ СТУДЕНТА")
    student_id = input("Введите ID студента: ").strip()
    student = roster.find_student(student_id)

    if student is None:
        print(f"❌ Студент с ID {student_id} не найден.")
        return False

    print("\n📋 Студент будет удален:")
    print(student)

    confirmation = input("⚠️ Вы уверены? (Y/N): ").strip()
    if confirmation.upper() != 'Y':
        print("⚠️ Удаление отменено.")
        return False

    if roster.remove_student(student_id):
        print(f"✅ Студент {student.name} ({student_id}) успешно удален.")
        return True

    print("❌ Не удалось удалить студента!")
    return False


def read_score() -> float:
    """Запрашивает оценку, пока не будет введено число в диапазоне 0-100."""
    while True:
        raw = input(f"Введите оценку ({MIN_SCORE}-{MAX_SCORE}): ").strip()
        try:
            score = float(raw)
        except ValueError:
            score = math.nan
        if is_valid_score(score):
            # 85.0 храним как 85
            return int(score) if score.is_integer() else score
        print(f"❌ Оценка должна быть числом от {MIN_SCORE} до {MAX_SCORE}.")


def add_grade_to_student(roster: Roster) -> bool:
    print_header("📝 НОВАЯ ОЦЕНКА")
    student_id = input("Введите ID студента: ").strip()
    student = roster.find_student(student_id)

    if student is None:
        print(f"❌ Студент с ID {student_id} не найден.")
        return False

    print(f"  Имя: {student.name}")
    print(f"  Класс: {student.student_class}")

    subject = input("Введите предмет: ").strip()
    if not subject:
        print("❌ Название предмета не может быть пустым!")
        return False

    score = read_score()

    if student.add_grade(subject, score):
        print(f"✅ Оценка {subject} ({score}) добавлена студенту {student.name}.")
        print(f"  Средний балл: {student.average:.2f}")
        print(f"  Статус: {student.grade_status}")
        return True

    print("❌ Не удалось добавить оценку!")
    return False


def view_top_students(roster: Roster, n: int) -> bool:
    print_header(f"🏆 ТОП-{n} СТУДЕНТОВ")
    top_students = roster.get_top_students(n)

    if not top_students:
        print("ℹ️ Список студентов пуст.")
        return False

    for index, student in enumerate(top_students):
        medal = MEDALS[index] if index < len(MEDALS) else "  "
        print(f"\n{medal} Место {index + 1}")
        print(student)
    return False


def view_class_statistics(roster: Roster) -> bool:
    print_header("📊 СТАТИСТИКА ПО КЛАССУ")
    class_name = input("Введите название класса: ").strip()
    stats = roster.get_class_statistics(class_name)

    if stats is None:
        print(f"❌ В классе {class_name} нет студентов.")
        return False

    print("\n" + "=" * 50)
    print(f"  СТАТИСТИКА КЛАССА {stats['class_name']}")
    print("=" * 50)
    print(f"  Всего студентов    : {stats['total_students']}")
    print(f"  Средний балл класса: {stats['class_average']:.2f}")
    print(f"  Сдали              : {stats['passed_students']}")
    print(f"  Не сдали           : {stats['failed_students']}")
    print(f"  Процент сдавших    : {stats['pass_rate']:.2f}%")
    print(f"  Лучший средний балл: {stats['highest_average']:.2f}")
    print(f"  Худший средний балл: {stats['lowest_average']:.2f}")
    print("=" * 50)

    print(f"\n📋 Студенты класса {class_name}:")
    for index, student in enumerate(roster.get_students_by_class(class_name), start=1):
        mark = "✅" if student.is_passed else "❌"
        print(f"  {index}. {student.name:<20} ({student.id}) - средний балл: {student.average:.2f} {mark}")
    return False


def open_roster(data_file: str) -> Optional[Roster]:
    """Загружает данные. None, если файл есть, но прочитать его нельзя."""
    try:
        roster = storage.load_roster(data_file)
    except errors.StudentAppError as e:
        logger.error("Не удалось загрузить %s: %s", data_file, e)
        print(f"\n!!! ОШИБКА ЗАГРУЗКИ ДАННЫХ: {e}")
        print("!!! Работа продолжится с пустым списком, сохранение в файл отключено.")
        return None
    print(f"✅ Данные загружены ({roster.get_student_count()} студентов).")
    return roster


def main_cli(settings: Optional[Settings] = None):
    """Основной цикл консольного приложения."""
    if settings is None:
        settings = load_settings()

    roster = open_roster(settings.data_file)
    can_save = roster is not None
    if roster is None:
        roster = Roster()

    handlers = {
        '1': add_new_student,
        '2': view_all_students,
        '3': search_student,
        '4': update_student,
        '5': delete_student,
        '6': add_grade_to_student,
        '7': lambda r: view_top_students(r, settings.top_n),
        '8': view_class_statistics,
    }

    while True:
        print_menu(settings.top_n)
        choice = input("Выберите пункт меню (1-9): ").strip()

        if choice == '9':
            print("👋 До свидания!")
            break

        handler = handlers.get(choice)
        if handler is None:
            print("❌ Неверный выбор. Пожалуйста, введите число от 1 до 9.")
            continue

        try:
            changed = handler(roster)
            if changed:
                if can_save:
                    storage.save_roster(settings.data_file, roster)
                else:
                    print("⚠️ Изменения не сохранены: файл данных не был загружен.")
        except errors.StudentAppError as e:
            print(f"❌ Ошибка: {e}")


def run():
    """Точка входа консольной команды gradebook."""
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        main_cli(settings)
    except (KeyboardInterrupt, EOFError):
        print("\nПрограмма принудительно остановлена.")
        sys.exit(130)


if __name__ == '__main__':
    run()
