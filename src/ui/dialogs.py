"""
DocxCleaner - Native dialogs for GUI mode.

Used when the tool is started without an input path (e.g. by double-click):
the user picks a document, and the statistics or errors are shown in
message boxes instead of on a console.
"""

import tkinter as tk
from contextlib import contextmanager
from pathlib import Path
from tkinter import filedialog, messagebox

from src.config import APP_NAME, DOCX_FILE_TYPES


@contextmanager
def _hidden_root():
    """Yield a withdrawn Tk root so dialogs have a parent but no empty window."""
    root = tk.Tk()
    root.withdraw()
    root.attributes("-topmost", True)
    try:
        yield root
    finally:
        root.destroy()


def pick_docx_file() -> Path | None:
    """
    Ask the user for a .docx file.

    Returns:
        The selected path, or None if the dialog was cancelled
    """
    with _hidden_root() as root:
        selected = filedialog.askopenfilename(
            parent=root,
            title="Select a DOCX file to process",
            filetypes=DOCX_FILE_TYPES,
        )
    return Path(selected) if selected else None


def show_statistics(message: str) -> None:
    """Show the removal report after a successful run."""
    with _hidden_root() as root:
        messagebox.showinfo("Processing Complete", message, parent=root)


def show_error(title: str, message: str) -> None:
    with _hidden_root() as root:
        messagebox.showerror(title or APP_NAME, message, parent=root)
