# tests/conftest.py
import pytest
from typing import List
from gradebook.models import Student
from gradebook.roster import Roster

@pytest.fixture
def sample_students() -> List[Student]:
    """Фикстура, предоставляющая тестовый набор студентов."""
    return [
        Student("S001", "Budi Santoso", "XII-A", {"Matematika": 80, "Fisika": 90}),
        Student("S002", "Siti Aminah", "XII-A", {"Matematika": 60, "Fisika": 60}),
        Student("S003", "Andi Wijaya", "XII-B", {"Matematika": 100}),
    ]

@pytest.fixture
def roster(sample_students) -> Roster:
    """Ростер, заполненный sample_students в порядке добавления."""
    r = Roster()
    for s in sample_students:
        assert r.add_student(s)
    return r
