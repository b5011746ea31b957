"""
Temporary file helpers.

Every temporary file is created with tempfile.mkstemp (random name, created
atomically) and removed when the surrounding ``with`` block exits, whether it
exits normally or through an exception.
"""

import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from dotenv import load_dotenv

load_dotenv()

TEMP_PREFIX = "wkpress_"


def temp_dir() -> Optional[str]:
    """Directory for temporary files (WKPRESS_TMP_DIR, or the platform default)."""
    return os.getenv("WKPRESS_TMP_DIR") or None


def create_temporary_file(content: Optional[str] = None, extension: Optional[str] = None) -> Path:
    """
    Create a uniquely named temporary file and return its path.

    Args:
        content: Text to write into the file (empty file if None)
        extension: Filename extension without the leading dot

    Returns:
        Path to the new file; the caller owns it and must delete it
    """
    suffix = f".{extension}" if extension else ""
    fd, filename = tempfile.mkstemp(prefix=TEMP_PREFIX, suffix=suffix, dir=temp_dir())
    with os.fdopen(fd, "w", encoding="utf-8") as handle:
        if content is not None:
            handle.write(content)
    return Path(filename)


def remove_file(path: Path) -> None:
    """Delete a file if it still exists."""
    Path(path).unlink(missing_ok=True)


@contextmanager
def temporary_file(content: Optional[str] = None, extension: Optional[str] = None) -> Iterator[Path]:
    """
    Context manager yielding a temporary file that is deleted on exit.

    Example:
        with temporary_file("<html>...</html>", "html") as html_path:
            generator.generate(html_path, "out.pdf")
    """
    path = create_temporary_file(content, extension)
    try:
        yield path
    finally:
        remove_file(path)
