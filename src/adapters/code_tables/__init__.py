from adapters.code_tables.loader import load_code_table, read_table_file, select_language
from adapters.code_tables.models import MorseTableFile

__all__ = [
    "MorseTableFile",
    "load_code_table",
    "read_table_file",
    "select_language",
]
