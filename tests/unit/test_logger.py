"""Unit tests for session logging."""

import pytest
from loguru import logger

from wkpress.rendering.logger import setup_rendering_logger


@pytest.fixture
def session_dir(tmp_path):
    yield tmp_path / "logs" / "render_20250101_000000"
    logger.remove()


@pytest.mark.unit
def test_session_log_records_provenance(session_dir):
    log_file = setup_rendering_logger(session_dir, binary="/usr/bin/wkhtmltopdf")
    logger.complete()

    assert log_file == session_dir / "render.log"
    text = log_file.read_text()
    assert "Binary: /usr/bin/wkhtmltopdf" in text
    assert "Working directory:" in text


@pytest.mark.unit
def test_file_keeps_debug_while_console_shows_info(session_dir, capsys):
    log_file = setup_rendering_logger(session_dir)

    logger.debug("[render] detail")
    logger.info("[render] summary")

    console = capsys.readouterr().out
    assert "summary" in console
    assert "detail" not in console
    assert "detail" in log_file.read_text()


@pytest.mark.unit
def test_verbose_shows_debug_on_console(session_dir, capsys):
    setup_rendering_logger(session_dir, verbose=True)

    logger.debug("[render] detail")

    assert "detail" in capsys.readouterr().out
