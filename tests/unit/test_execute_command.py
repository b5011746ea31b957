"""Unit tests for execute_command() with the process facility stubbed."""

import subprocess

import pytest

from wkpress.rendering import PROCESS_TIMEOUT_S, ExternalProcessFailed, Image, Pdf, ProcessTimeout
from wkpress.rendering import generator as generator_module


class FakeProcess:
    """Stands in for subprocess.Popen and records how it was driven."""

    instances = []

    def __init__(self, command, **kwargs):
        self.command = command
        self.kwargs = kwargs
        self.pid = 4242
        self.returncode = None
        self.communicate_timeouts = []
        self.exit_code = 0
        self.hang = False
        FakeProcess.instances.append(self)

    def communicate(self, timeout=None):
        self.communicate_timeouts.append(timeout)
        if self.hang and timeout is not None:
            raise subprocess.TimeoutExpired(self.command, timeout)
        self.returncode = -9 if self.hang else self.exit_code
        return "out", "err"


@pytest.fixture
def fake_popen(monkeypatch):
    FakeProcess.instances = []
    monkeypatch.setattr(generator_module.subprocess, "Popen", FakeProcess)
    return FakeProcess


@pytest.mark.unit
def test_timeout_is_600_seconds():
    assert PROCESS_TIMEOUT_S == 600
    assert Pdf().timeout == 600
    assert Image().timeout == 600


@pytest.mark.unit
def test_process_waits_with_fixed_timeout(fake_popen):
    stdout, stderr = Pdf("wkhtmltopdf").execute_command("wkhtmltopdf 'in' 'out'")

    process = fake_popen.instances[0]
    assert (stdout, stderr) == ("out", "err")
    assert process.communicate_timeouts == [600]
    assert process.kwargs["shell"] is True
    assert process.kwargs["start_new_session"] is True


@pytest.mark.unit
def test_non_zero_exit_raises(fake_popen, monkeypatch):
    monkeypatch.setattr(FakeProcess, "__init__", _with_exit_code(2))

    with pytest.raises(ExternalProcessFailed) as exc_info:
        Pdf("wkhtmltopdf").execute_command("the command")

    assert exc_info.value.exit_code == 2
    assert exc_info.value.stdout == "out"
    assert exc_info.value.stderr == "err"
    assert exc_info.value.command == "the command"


@pytest.mark.unit
def test_timeout_kills_process_group(fake_popen, monkeypatch):
    killed = []
    monkeypatch.setattr(FakeProcess, "__init__", _hanging())
    monkeypatch.setattr(generator_module.os, "killpg", lambda pid, sig: killed.append((pid, sig)))

    with pytest.raises(ProcessTimeout) as exc_info:
        Pdf("wkhtmltopdf").execute_command("the command")

    assert killed == [(4242, generator_module.signal.SIGKILL)]
    assert exc_info.value.stdout == "out"
    assert exc_info.value.timeout == 600
    # Output is collected once more after the kill, without a timeout
    assert fake_popen.instances[0].communicate_timeouts == [600, None]


@pytest.mark.unit
def test_timeout_tolerates_already_exited_group(fake_popen, monkeypatch):
    def gone(pid, sig):
        raise ProcessLookupError()

    monkeypatch.setattr(FakeProcess, "__init__", _hanging())
    monkeypatch.setattr(generator_module.os, "killpg", gone)

    with pytest.raises(ProcessTimeout):
        Pdf("wkhtmltopdf").execute_command("the command")


_original_init = FakeProcess.__init__


def _with_exit_code(exit_code):
    def __init__(self, command, **kwargs):
        _original_init(self, command, **kwargs)
        self.exit_code = exit_code

    return __init__


def _hanging():
    def __init__(self, command, **kwargs):
        _original_init(self, command, **kwargs)
        self.hang = True

    return __init__
