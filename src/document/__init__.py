"""
Word document access for DocxCleaner.

    load_document / save_document / generate_output_path - python-docx I/O
    DocumentWalker - applies a TextCleaner to every text node in place
"""

from .docx_io import DocumentError, generate_output_path, load_document, save_document
from .walker import DocumentWalker, WalkStats

__all__ = [
    "DocumentError",
    "DocumentWalker",
    "WalkStats",
    "generate_output_path",
    "load_document",
    "save_document",
]
