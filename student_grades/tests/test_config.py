# tests/test_config.py
from gradebook.config import load_settings, DEFAULT_DATA_FILE

def test_defaults():
    settings = load_settings({})
    assert settings.data_file == DEFAULT_DATA_FILE
    assert settings.log_level == "WARNING"
    assert settings.top_n == 3

def test_values_from_env():
    settings = load_settings({
        "GRADEBOOK_DATA_FILE": "/tmp/data.json",
        "GRADEBOOK_LOG_LEVEL": "debug",
        "GRADEBOOK_TOP_N": "5",
    })
    assert settings.data_file == "/tmp/data.json"
    assert settings.log_level == "DEBUG"
    assert settings.top_n == 5

def test_invalid_values_fall_back():
    settings = load_settings({"GRADEBOOK_LOG_LEVEL": "loud", "GRADEBOOK_TOP_N": "many"})
    assert settings.log_level == "WARNING"
    assert settings.top_n == 3

    assert load_settings({"GRADEBOOK_TOP_N": "-2"}).top_n == 3
