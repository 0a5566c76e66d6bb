"""
DocxCleaner Configuration Module
Centralized configuration for the application.
"""

import os
from pathlib import Path

# Debug Mode Configuration
DEBUG_MODE = os.environ.get('DEBUG', 'false').lower() == 'true'

# Application Paths
APP_NAME = "DocxCleaner"
PROJECT_ROOT = Path(__file__).parent.parent
APPDATA_DIR = Path(os.environ.get('APPDATA', os.path.expanduser('~/.config'))) / APP_NAME
LOGS_DIR = APPDATA_DIR / "logs"

# Ensure directories exist
for directory in [APPDATA_DIR, LOGS_DIR]:
    directory.mkdir(parents=True, exist_ok=True)

# Logging
LOG_FILE = LOGS_DIR / "processing.log"
DEBUG_FLOW_FILE = LOGS_DIR / "debug_flow.txt"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Crash reports are appended here (relative to the working directory)
ERROR_LOG_FILE = Path("error.log")

# --- Character Rule Configuration ---
# JSON or YAML mapping: "<char>": ["<display name>", "<replacement>"]
DEFAULT_RULES_FILE = Path(
    os.environ.get('DOCX_CLEANER_RULES', PROJECT_ROOT / "config" / "rules.json")
)

# Substituted when a rule has no replacement character
FALLBACK_MARKER = "✗"  # ✗ BALLOT X

# Display name used when a rule omits one
UNKNOWN_NAME = "UNKNOWN"

# Output Files
OUTPUT_SUFFIX = "_cleaned"
DOCX_FILE_TYPES = [
    ("Word Documents", "*.docx"),
    ("All files", "*.*"),
]

# Parallel Processing
def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable, falling back on bad values."""
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        from src.logging_config import warning
        warning(f"[Config] {name}={value!r} is not an integer; using {default}")
        return default


# Paragraphs are cleaned concurrently; capped at 4 like other worker pools
MAX_WORKERS = _env_int('DOCX_CLEANER_WORKERS', min(os.cpu_count() or 4, 4))
