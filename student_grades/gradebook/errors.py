# gradebook/errors.py
"""Исключения журнала оценок. Бизнес-операции Roster возвращают bool, исключения - только для данных и файлов."""

class StudentAppError(Exception):
    """Общий предок: main_cli ловит его и продолжает работу меню."""
    pass

class DataValidationError(StudentAppError):
    """Некорректные данные студента: в JSON-файле или при загрузке списка."""
    pass

class FileProcessingError(StudentAppError):
    """Файл данных нельзя прочитать, декодировать, разобрать как JSON или записать."""
    pass
