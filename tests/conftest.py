"""Shared fixtures: a minimal generator and fake renderer scripts."""

import stat
from pathlib import Path

import pytest

from wkpress.rendering.generator import Generator


class DummyGenerator(Generator):
    """Generator with a tiny option set, for exercising the base class."""

    DEFAULT_BINARY = "thebinary"
    DEFAULT_EXTENSION = "ext"

    def configure(self):
        self.add_options({"foo": "bar", "baz": "bat", "cookie": None, "allow": None})


# Fake renderer bodies. Each receives [flags...] <input> <output> like wkhtmltopdf.
RENDERERS = {}

RENDERERS["args"] = """
eval "output=\\${$#}"
printf '%s\\n' "$@" > "$output"
"""

RENDERERS["copy"] = """
eval "input=\\${$(($# - 1))}"
eval "output=\\${$#}"
cat "$input" > "$output"
"""

RENDERERS["fail"] = """
echo "Loading pages (1/6)"
echo "Exit with code 1 due to network error: HostNotFoundError" >&2
exit 3
"""

RENDERERS["nothing"] = """
exit 0
"""

RENDERERS["empty"] = """
eval "output=\\${$#}"
: > "$output"
"""

RENDERERS["slow"] = """
exec sleep 2
"""

# Wrapper that leaves a long-running child behind, like xvfb-run around wkhtmltopdf
RENDERERS["wrapper"] = """
sleep 30 &
echo $! > "$(dirname "$0")/child.pid"
wait
"""


@pytest.fixture
def make_renderer(tmp_path):
    """Write an executable renderer script of the given kind and return its path."""

    def _make(kind: str) -> str:
        script = tmp_path / "bin" / f"renderer_{kind}"
        script.parent.mkdir(parents=True, exist_ok=True)
        script.write_text("#!/bin/sh\n" + RENDERERS[kind])
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return str(script)

    return _make


@pytest.fixture
def dummy():
    return DummyGenerator()


@pytest.fixture
def scratch_tmp(tmp_path, monkeypatch) -> Path:
    """Route temporary files to an empty directory so leftovers are visible."""
    scratch = tmp_path / "scratch"
    scratch.mkdir()
    monkeypatch.setenv("WKPRESS_TMP_DIR", str(scratch))
    return scratch


@pytest.fixture
def dummy_cls():
    return DummyGenerator
