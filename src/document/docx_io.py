"""
Loading and saving .docx files through python-docx.
"""

import zipfile
from pathlib import Path

from docx import Document
from docx.document import Document as DocumentObject
from docx.opc.exceptions import PackageNotFoundError

from src.config import OUTPUT_SUFFIX
from src.logging_config import debug_log
from src.sanitization.exceptions import DocxCleanerError


class DocumentError(DocxCleanerError):
    """The source document cannot be read or the result cannot be written."""


def load_document(path: str | Path) -> DocumentObject:
    """
    Open a .docx file.

    Raises:
        DocumentError: If the file is missing, unreadable, or not a Word document
    """
    path = Path(path)
    if not path.is_file():
        raise DocumentError(f"File '{path}' does not exist.")

    try:
        document = Document(str(path))
    except PackageNotFoundError as e:
        raise DocumentError(f"Failed to parse DOCX '{path.name}': not a Word document") from e
    except (zipfile.BadZipFile, KeyError, ValueError) as e:
        raise DocumentError(f"Failed to parse DOCX '{path.name}': {e}") from e
    except OSError as e:
        raise DocumentError(f"Failed to read DOCX input file '{path}': {e}") from e

    debug_log(f"[DOCX] Loaded {path.name} ({len(document.paragraphs)} body paragraphs)")
    return document


def save_document(document: DocumentObject, path: str | Path) -> Path:
    """
    Write a document to `path`, creating parent directories as needed.

    Raises:
        DocumentError: If the destination cannot be written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        document.save(str(path))
    except OSError as e:
        raise DocumentError(f"Failed to write DOCX '{path}': {e}") from e

    debug_log(f"[DOCX] Saved {path}")
    return path


def generate_output_path(input_path: str | Path, suffix: str = OUTPUT_SUFFIX) -> Path:
    """
    Build the output path next to the input file.

    Example:
        generate_output_path("reports/q3.docx")  # reports/q3_cleaned.docx
    """
    input_path = Path(input_path)
    return input_path.parent / f"{input_path.stem}{suffix}{input_path.suffix}"
