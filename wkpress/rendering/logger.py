"""
Rendering logger.

Provides logging interface for the generators with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from wkpress.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, binary: str = None, verbose: bool = False) -> Path:
    """
    Setup logger for a rendering session.

    Args:
        log_dir: Directory for this rendering session
        binary: Renderer binary, recorded in the provenance header
        verbose: Show DEBUG messages on the console as well

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Binary": binary} if binary else None,
        console_level="DEBUG" if verbose else "INFO",
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering helpers


def log_generation_start(binary: str, input_path, output_path) -> None:
    """Log start of a generation with context."""
    _log_info(f"Rendering {input_path} -> {output_path}")
    _log_debug(f"  Binary: {binary}")


def log_generation_result(output_path, elapsed_time: float) -> None:
    """Log a successful generation."""
    _log_success(f"Rendered {output_path} ({elapsed_time:.2f}s)")


def log_process_failure(error) -> None:
    """
    Log a failed renderer run with its captured streams.

    Args:
        error: ExternalProcessFailed raised by execute_command()
    """
    _log_error(f"Renderer failed (exit code: {error.exit_code})")
    _log_debug(f"  Command: {error.command}")

    # raw=True keeps multi-line process output free of per-line prefixes
    if error.stdout:
        logger.opt(raw=True).debug(f"\n{'=' * 80}\nRENDERER STDOUT:\n{'=' * 80}\n{error.stdout}\n")
    if error.stderr:
        logger.opt(raw=True).debug(f"\n{'=' * 80}\nRENDERER STDERR:\n{'=' * 80}\n{error.stderr}\n")
