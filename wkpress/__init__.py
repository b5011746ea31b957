"""
wkpress - HTML to PDF and image conversion through wkhtmltopdf / wkhtmltoimage

Builds the command line from a validated option set, runs the external binary
with a timeout and checks that it produced a non-empty file.

Architecture:
- Rendering: generators, command construction, process invocation
- Utils: logging setup, shell quoting, temporary files, option presets
"""

from wkpress.rendering import Generator, Image, Pdf

__version__ = "0.1.0"

__all__ = ["Generator", "Pdf", "Image"]
