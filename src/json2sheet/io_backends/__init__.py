from .base import WorksheetWriter
from .csv_backend import CsvWriter
from .json_backend import load_json
from .openpyxl_backend import OpenpyxlWriter
from .router import backend_for_path, make_backend
from .xlsxwriter_backend import XlsxWriterWriter

__all__ = [
    "CsvWriter",
    "OpenpyxlWriter",
    "WorksheetWriter",
    "XlsxWriterWriter",
    "backend_for_path",
    "load_json",
    "make_backend",
]
