import logging
from collections.abc import Iterator

import pytest

from app.logging.logger import Log


@pytest.fixture(autouse=True)
def _reset_logger() -> Iterator[None]:
    """Each test configures a fresh logger; handlers must not leak."""
    Log._logger.handlers.clear()
    yield
    Log._logger.handlers.clear()
    Log._logger.setLevel(logging.NOTSET)


class TestLogRendering:
    def test_message_without_fields(self) -> None:
        assert Log._render("Started", {}) == "Started"

    def test_fields_are_appended(self) -> None:
        rendered = Log._render("Rejected", {"kind": "digital", "failed": ["title"]})
        assert rendered == "Rejected kind='digital' failed=['title']"


class TestLogConfigure:
    def test_installs_single_handler(self) -> None:
        Log.configure("debug")
        Log.configure("info")
        assert len(Log._logger.handlers) == 1
        assert Log._logger.level == logging.INFO

    def test_emits_rendered_message(self, capsys: pytest.CaptureFixture[str]) -> None:
        Log.configure("info", app_env="test")
        Log.info("Registered resource", entries=1)
        out = capsys.readouterr().out
        assert "[INFO] (test) Registered resource entries=1" in out

    def test_respects_level(self, capsys: pytest.CaptureFixture[str]) -> None:
        Log.configure("warning")
        Log.info("hidden")
        Log.warning("shown")
        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_error_is_emitted_with_fields(self, capsys: pytest.CaptureFixture[str]) -> None:
        Log.configure("info")
        Log.error("Template failed", name="index.html")
        out = capsys.readouterr().out
        assert "[ERROR] (dev) Template failed name='index.html'" in out
