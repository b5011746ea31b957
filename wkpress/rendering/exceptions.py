"""Exceptions raised by generators, carrying the context needed to diagnose the renderer."""

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]

# Captured process output is truncated in messages beyond this many characters
MAX_STREAM_CHARS = 2000


def _truncate(text: str) -> str:
    if text and len(text) > MAX_STREAM_CHARS:
        return text[:MAX_STREAM_CHARS] + "..."
    return text


class GeneratorError(Exception):
    """Base class for every error raised by a generator."""


class NotConfigured(GeneratorError, RuntimeError):
    """Raised when a conversion is attempted before a binary is set."""

    def __init__(self, message: str = "You must define a binary prior to conversion."):
        super().__init__(message)


class InvalidOption(GeneratorError, ValueError):
    """
    Raised when an option name is not part of the generator's option set.

    Attributes:
        name: The offending option name
    """

    def __init__(self, name: str, message: Optional[str] = None):
        self.name = name
        super().__init__(message or f"The option '{name}' does not exist.")


class InvalidOutputTarget(GeneratorError, ValueError):
    """Raised when the output path already exists but is not a regular file."""

    def __init__(self, output: PathLike, kind: str = "directory"):
        self.output = output
        self.kind = kind
        super().__init__(f'The output file "{output}" already exists and it is a {kind}.')


class OutputExists(GeneratorError, FileExistsError):
    """Raised when the output file exists and overwriting was not requested."""

    def __init__(self, output: PathLike):
        self.output = output
        super().__init__(f'The output file "{output}" already exists.')


class CleanupFailed(GeneratorError, RuntimeError):
    """Raised when a pre-existing output file could not be deleted."""

    def __init__(self, output: PathLike):
        self.output = output
        super().__init__(f'Could not delete already existing output file "{output}".')


class DirectoryCreateFailed(GeneratorError, RuntimeError):
    """Raised when the output file's directory could not be created."""

    def __init__(self, directory: PathLike):
        self.directory = directory
        super().__init__(f'The output file\'s directory "{directory}" could not be created.')


class ExternalProcessFailed(GeneratorError, RuntimeError):
    """
    Raised when the renderer exits with a non-zero status.

    Attributes:
        exit_code: Process exit status (None if the process was killed)
        stdout: Captured standard output
        stderr: Captured standard error
        command: The full command line that was run
    """

    def __init__(
        self,
        exit_code: Optional[int],
        stdout: str = "",
        stderr: str = "",
        command: str = "",
        message: Optional[str] = None,
    ):
        self.exit_code = exit_code
        self.stdout = stdout or ""
        self.stderr = stderr or ""
        self.command = command

        parts = [message or f'The exit status code "{exit_code}" says something went wrong:']
        parts.append(f'stderr: "{_truncate(self.stderr)}"')
        parts.append(f'stdout: "{_truncate(self.stdout)}"')
        parts.append(f"command: {command}.")

        super().__init__("\n".join(parts))


class ProcessTimeout(ExternalProcessFailed):
    """Raised when the renderer is killed after exceeding the timeout."""

    def __init__(self, timeout: float, stdout: str = "", stderr: str = "", command: str = ""):
        self.timeout = timeout
        super().__init__(
            None,
            stdout,
            stderr,
            command,
            message=f"The process exceeded the timeout of {timeout} seconds and was killed:",
        )


class OutputMissing(GeneratorError, RuntimeError):
    """Raised when the renderer reported success but wrote no file."""

    def __init__(self, output: PathLike, command: str):
        self.output = output
        self.command = command
        super().__init__(f"The file '{output}' was not created (command: {command}).")


class OutputEmpty(GeneratorError, RuntimeError):
    """Raised when the renderer produced a zero-length file."""

    def __init__(self, output: PathLike, command: str):
        self.output = output
        self.command = command
        super().__init__(f"The file '{output}' was created but is empty (command: {command}).")
