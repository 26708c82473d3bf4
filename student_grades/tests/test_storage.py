# tests/test_storage.py
import json
import pytest
from gradebook.storage import load_roster, save_roster
from gradebook.roster import Roster
from gradebook.errors import FileProcessingError, DataValidationError

def test_json_roundtrip(roster, tmp_path):
    """Тестирует полный цикл: запись в JSON и чтение обратно."""
    filepath = tmp_path / "students.json"

    save_roster(filepath, roster)
    loaded = load_roster(filepath)

    assert loaded.to_list() == roster.to_list()

def test_saved_file_layout(roster, tmp_path):
    filepath = tmp_path / "students.json"
    save_roster(filepath, roster)

    data = json.loads(filepath.read_text(encoding="utf-8"))
    assert isinstance(data, list)
    assert data[0] == {
        "id": "S001",
        "name": "Budi Santoso",
        "class": "XII-A",
        "grades": {"Matematika": 80, "Fisika": 90},
    }

def test_missing_file_is_created(tmp_path):
    filepath = tmp_path / "new.json"

    loaded = load_roster(filepath)

    assert loaded.get_student_count() == 0
    assert json.loads(filepath.read_text(encoding="utf-8")) == []

def test_malformed_json(tmp_path):
    filepath = tmp_path / "broken.json"
    filepath.write_text("[{", encoding="utf-8")

    with pytest.raises(FileProcessingError):
        load_roster(filepath)

def test_invalid_record_in_file(tmp_path):
    filepath = tmp_path / "bad.json"
    filepath.write_text(json.dumps([{"id": "S001", "name": "A", "class": "X", "grades": {"A": -5}}]),
                        encoding="utf-8")

    with pytest.raises(DataValidationError):
        load_roster(filepath)

def test_non_list_file_gives_empty_roster(tmp_path):
    filepath = tmp_path / "object.json"
    filepath.write_text('{"students": []}', encoding="utf-8")

    assert load_roster(filepath).get_student_count() == 0

def test_save_to_unwritable_path(tmp_path):
    filepath = tmp_path / "missing_dir" / "students.json"

    with pytest.raises(FileProcessingError):
        save_roster(filepath, Roster())

def test_non_utf8_file(tmp_path):
    filepath = tmp_path / "utf16.json"
    filepath.write_bytes(b'\xff\xfe[]')

    with pytest.raises(FileProcessingError, match="UTF-8"):
        load_roster(filepath)

def test_directory_instead_of_file(tmp_path):
    dirpath = tmp_path / "students.json"
    dirpath.mkdir()

    with pytest.raises(FileProcessingError):
        load_roster(dirpath)
