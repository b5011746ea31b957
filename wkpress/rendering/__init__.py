"""
Rendering

Responsibilities:
- Builds renderer command lines from option sets
- Manages temporary input and output files
- Runs the external binary with a timeout
- Verifies the rendered file exists and is not empty

Owns: Command construction, process invocation, output checks
Never: Parses or lays out HTML (the binary does)
"""

from wkpress.rendering.exceptions import (
    CleanupFailed,
    DirectoryCreateFailed,
    ExternalProcessFailed,
    GeneratorError,
    InvalidOption,
    InvalidOutputTarget,
    NotConfigured,
    OutputEmpty,
    OutputExists,
    OutputMissing,
    ProcessTimeout,
)
from wkpress.rendering.generator import PROCESS_TIMEOUT_S, Generator
from wkpress.rendering.media import GENERATORS, Image, Pdf

__all__ = [
    # Generators
    "Generator",
    "Pdf",
    "Image",
    "GENERATORS",
    "PROCESS_TIMEOUT_S",
    # Errors
    "GeneratorError",
    "NotConfigured",
    "InvalidOption",
    "InvalidOutputTarget",
    "OutputExists",
    "CleanupFailed",
    "DirectoryCreateFailed",
    "ExternalProcessFailed",
    "ProcessTimeout",
    "OutputMissing",
    "OutputEmpty",
]
