import json

import pytest

from core.config import AppSettings
from core.domain.code_table import CodeTable
from core.domain.language import MorseLanguage

SAMPLE_CODES = {
    "A": ".-",
    "E": ".",
    "H": "....",
    "I": "..",
    "O": "---",
    "S": "...",
    "T": "-",
}


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    for key in (
        "TXTMORPH_TABLES_DIR",
        "TXTMORPH_DEFAULT_MORSE_LANGUAGE",
        "TXTMORPH_STRICT_LANGUAGE",
        "TXTMORPH_CONFIRM_TOKEN",
        "TXTMORPH_FILE_ENCODING",
        "TXTMORPH_LOG_LEVEL",
        "TXTMORPH_SHOW_BANNER",
        "TXTMORPH_DATA_DIR",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sample_table():
    return CodeTable(SAMPLE_CODES, language=MorseLanguage.ENGLISH)


@pytest.fixture
def tables_dir(tmp_path):
    directory = tmp_path / "tables"
    directory.mkdir()
    (directory / "morse_en.json").write_text(json.dumps(SAMPLE_CODES), encoding="utf-8")
    return directory


@pytest.fixture
def settings(tables_dir):
    return AppSettings(_env_file=None, tables_dir=tables_dir)
