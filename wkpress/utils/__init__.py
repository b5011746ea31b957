"""
Shared utilities for wkpress.

- Logger setup
- Shell quoting
- Temporary files
- Option presets
"""

from wkpress.utils.shell import escape_shell_arg
from wkpress.utils.tempfiles import create_temporary_file, temporary_file

__all__ = ["escape_shell_arg", "create_temporary_file", "temporary_file"]
