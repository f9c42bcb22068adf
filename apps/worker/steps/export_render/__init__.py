from .orchestrator import render_diary
from .diary_pdf import generate_diary_pdf
from .docx_render import generate_diary_docx
from .csv_render import generate_diary_csv
from .common import MIME_TYPES, export_filename

__all__ = [
    "render_diary",
    "generate_diary_pdf",
    "generate_diary_docx",
    "generate_diary_csv",
    "MIME_TYPES",
    "export_filename",
]
