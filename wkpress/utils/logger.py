"""
Session logging for wkpress.

One log directory per session: a DEBUG file sink for the record and a console
sink for the user. Context wrappers (wkpress/rendering/logger.py) add prefixes.
"""

import sys
from pathlib import Path

from loguru import logger

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>"
RULE = "-" * 72


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    console_level: str = "INFO",
) -> Path:
    """
    Point loguru at a fresh session directory and write the provenance header.

    Args:
        context_name: Log file stem (e.g., "render" -> render.log)
        log_dir: Session directory, created if missing
        extra_provenance: Additional entries for the header (e.g., {"Binary": ...})
        console_level: Minimum level shown on stdout

    Returns:
        Path to the session log file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(extra_provenance)
    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """Record how this session was started: argv, cwd, interpreter, extras."""
    entries = {
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
        **(extra_context or {}),
    }

    logger.info(RULE)
    for key, value in entries.items():
        logger.info(f"{key}: {value}")
    logger.info(RULE)
