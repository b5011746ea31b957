"""
Generator Module

Base class for the renderers. Turns an input (file path, URL or raw HTML) plus an
option set into a command line, runs the external binary and checks its output.

The concrete generators (see wkpress.rendering.media) only declare which options
their binary understands, the default binary path and the default extension.
"""

import os
import signal
import subprocess
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from wkpress.rendering.exceptions import (
    CleanupFailed,
    DirectoryCreateFailed,
    ExternalProcessFailed,
    InvalidOption,
    InvalidOutputTarget,
    NotConfigured,
    OutputEmpty,
    OutputExists,
    OutputMissing,
    ProcessTimeout,
)
from wkpress.rendering.logger import (
    _log_debug,
    _log_warning,
    log_generation_result,
    log_generation_start,
    log_process_failure,
)
from wkpress.utils.shell import escape_shell_arg
from wkpress.utils.tempfiles import temporary_file

PathLike = Union[str, Path]

# Renderer runs are killed after this many seconds
PROCESS_TIMEOUT_S = 600


def _kill_process_group(process: subprocess.Popen) -> None:
    """SIGKILL every process in the session started for process."""
    try:
        os.killpg(process.pid, signal.SIGKILL)
    except ProcessLookupError:
        pass


class Generator(ABC):
    """
    Base generator for media rendered by an external binary.

    Subclasses implement configure() to register the options their binary
    accepts. The set of option names is fixed once configure() has run; after
    that only the values change.

    Attributes:
        DEFAULT_BINARY: Binary used when the constructor receives none
        DEFAULT_EXTENSION: Extension of temporary output files (get_output)
        timeout: Seconds before a renderer run is killed
    """

    DEFAULT_BINARY: Optional[str] = None
    DEFAULT_EXTENSION: Optional[str] = None
    timeout: float = PROCESS_TIMEOUT_S

    def __init__(self, binary: Optional[str] = None, options: Optional[Mapping[str, Any]] = None):
        self._options: Dict[str, Any] = {}
        self._default_extension = self.DEFAULT_EXTENSION

        self.configure()

        self._binary = binary or self.DEFAULT_BINARY
        self.set_options(options or {})

    @abstractmethod
    def configure(self) -> None:
        """Register the recognized options with add_option() / add_options()."""

    # Option schema (configuration hook only)

    def add_option(self, name: str, default: Any = None) -> None:
        """
        Register a recognized option.

        Raises:
            InvalidOption: If the option is already registered
        """
        if name in self._options:
            raise InvalidOption(name, f"The option '{name}' already exists.")
        self._options[name] = default

    def add_options(self, options: Mapping[str, Any]) -> None:
        """Register several options in mapping order."""
        for name, default in options.items():
            self.add_option(name, default)

    # Option values

    def set_option(self, name: str, value: Any) -> None:
        """
        Set an option value (None to unset).

        Option values are NOT validated; validating user input is the caller's
        responsibility.

        Raises:
            InvalidOption: If the option is not recognized
        """
        if name not in self._options:
            raise InvalidOption(name)
        self._options[name] = value

    def set_options(self, options: Mapping[str, Any]) -> None:
        """
        Set several options in mapping order.

        Stops at the first unknown name; options set before it keep their new value.
        """
        for name, value in options.items():
            self.set_option(name, value)

    def get_options(self) -> Dict[str, Any]:
        """Return all options, including unset ones."""
        return dict(self._options)

    def merge_options(self, options: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Merge per-call options over the instance options.

        The instance options are NOT changed.

        Raises:
            InvalidOption: If any given option is not recognized
        """
        merged = dict(self._options)
        for name, value in (options or {}).items():
            if name not in merged:
                raise InvalidOption(name)
            merged[name] = value
        return merged

    # Configuration

    def set_binary(self, binary: Optional[str]) -> None:
        self._binary = binary

    def get_binary(self) -> Optional[str]:
        return self._binary

    binary = property(get_binary, set_binary)

    def set_default_extension(self, extension: Optional[str]) -> None:
        """Set the extension used for temporary output files."""
        self._default_extension = extension

    def get_default_extension(self) -> Optional[str]:
        return self._default_extension

    # Command line

    def get_command(
        self, input: PathLike, output: PathLike, options: Optional[Mapping[str, Any]] = None
    ) -> str:
        """
        Return the command for the given input and output.

        Args:
            input: URL or file location of the page to render
            output: File location of the rendered media
            options: Options used only for this command
        """
        return self.build_command(self._binary, input, output, self.merge_options(options))

    @staticmethod
    def build_command(
        binary: str, input: PathLike, output: PathLike, options: Optional[Mapping[str, Any]] = None
    ) -> str:
        """
        Build the shell command string.

        Options are emitted in mapping order:
            None / False   -> omitted
            True           -> --name
            list / tuple   -> --name 'v' for each value
            dict           -> --name 'key' 'value' for each entry
                              (non-string keys are dropped: --name 'value')
            anything else  -> --name 'value'

        Input and output are always appended as the last two arguments.

        Example:
            >>> Generator.build_command("wkhtmltopdf", "http://the.url/", "/the/path", {"grayscale": True})
            "wkhtmltopdf --grayscale 'http://the.url/' '/the/path'"
        """
        parts = [str(binary)]

        for name, value in (options or {}).items():
            if value is None or value is False:
                continue
            if value is True:
                parts.append(f"--{name}")
            elif isinstance(value, Mapping):
                for key, item in value.items():
                    if isinstance(key, str):
                        parts.append(f"--{name} {escape_shell_arg(key)} {escape_shell_arg(item)}")
                    else:
                        parts.append(f"--{name} {escape_shell_arg(item)}")
            elif isinstance(value, (list, tuple)):
                for item in value:
                    parts.append(f"--{name} {escape_shell_arg(item)}")
            else:
                parts.append(f"--{name} {escape_shell_arg(value)}")

        parts.append(escape_shell_arg(input))
        parts.append(escape_shell_arg(output))

        return " ".join(parts)

    # Invocation pipeline

    def generate(
        self,
        input: PathLike,
        output: PathLike,
        options: Optional[Mapping[str, Any]] = None,
        overwrite: bool = False,
    ) -> PathLike:
        """
        Render input into output.

        Args:
            input: URL or file location of the page to render
            output: File location of the rendered media
            options: Options used only for this conversion
            overwrite: Replace output if it already exists

        Returns:
            The output path

        Raises:
            NotConfigured: No binary is set
            InvalidOutputTarget, OutputExists, CleanupFailed, DirectoryCreateFailed:
                The output location could not be prepared
            InvalidOption: An unknown option was given
            ExternalProcessFailed: The renderer exited with a non-zero status
            OutputMissing, OutputEmpty: The renderer produced nothing usable
        """
        if not self._binary:
            raise NotConfigured()

        self.prepare_output(output, overwrite)

        command = self.get_command(input, output, options)

        log_generation_start(self._binary, input, output)
        start_time = time.time()

        try:
            self.execute_command(command)
        except ExternalProcessFailed as e:
            log_process_failure(e)
            raise

        result = self.check_output(output, command)

        log_generation_result(output, time.time() - start_time)
        return result

    def prepare_output(self, output: PathLike, overwrite: bool) -> None:
        """
        Make sure the renderer can write to output.

        Deletes an existing output file when overwrite is set, otherwise creates
        the parent directory if needed.
        """
        output_path = Path(output)

        if output_path.exists():
            if not output_path.is_file():
                kind = "directory" if output_path.is_dir() else "special file"
                raise InvalidOutputTarget(output, kind)

            if not overwrite:
                raise OutputExists(output)

            try:
                output_path.unlink()
            except OSError as exc:
                raise CleanupFailed(output) from exc
            _log_warning(f"Overwrote existing output: {output_path}")
        else:
            directory = output_path.parent
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise DirectoryCreateFailed(directory) from exc

    def execute_command(self, command: str) -> Tuple[str, str]:
        """
        Run the command through the shell.

        The shell runs in its own session so that on timeout the whole process
        group is killed, including children of wrapper scripts (e.g. xvfb-run).

        Returns:
            Tuple of (stdout, stderr)

        Raises:
            ProcessTimeout: The process ran longer than self.timeout and was killed
            ExternalProcessFailed: The process exited with a non-zero status
        """
        _log_debug(f"Executing: {command}")

        process = subprocess.Popen(
            command,
            shell=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            start_new_session=True,
        )

        try:
            stdout, stderr = process.communicate(timeout=self.timeout)
        except subprocess.TimeoutExpired as exc:
            _kill_process_group(process)
            stdout, stderr = process.communicate()
            raise ProcessTimeout(self.timeout, stdout, stderr, command) from exc

        if process.returncode != 0:
            raise ExternalProcessFailed(process.returncode, stdout, stderr, command)

        return stdout, stderr

    def check_output(self, output: PathLike, command: str) -> PathLike:
        """
        Check that the renderer wrote a non-empty file.

        Raises:
            OutputMissing: The file does not exist
            OutputEmpty: The file is empty
        """
        output_path = Path(output)

        if not output_path.exists():
            raise OutputMissing(output, command)

        if output_path.stat().st_size == 0:
            raise OutputEmpty(output, command)

        return output

    # HTML / content conveniences

    def generate_from_html(
        self,
        html: str,
        output: PathLike,
        options: Optional[Mapping[str, Any]] = None,
        overwrite: bool = False,
    ) -> PathLike:
        """Render raw HTML into output. The temporary HTML file is always removed."""
        with temporary_file(html, "html") as html_path:
            return self.generate(html_path, output, options, overwrite)

    def get_output(self, input: PathLike, options: Optional[Mapping[str, Any]] = None) -> bytes:
        """Render input and return the rendered bytes."""
        with temporary_file(extension=self._default_extension) as output_path:
            # The temporary file reserves the name, so it is always overwritten
            self.generate(input, output_path, options, overwrite=True)
            return output_path.read_bytes()

    def get_output_from_html(
        self, html: str, options: Optional[Mapping[str, Any]] = None
    ) -> bytes:
        """Render raw HTML and return the rendered bytes."""
        with temporary_file(html, "html") as html_path:
            return self.get_output(html_path, options)
