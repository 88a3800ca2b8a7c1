"""Tests for logging utilities."""

import logging

from common.logger import error, get_logger, progress, setup_logging, success, warning


class TestGetLogger:
    """Tests for get_logger function."""

    def test_returns_named_logger(self):
        logger = get_logger("highlights.test.name")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "highlights.test.name"

    def test_default_level_is_info(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        logger = get_logger("highlights.test.default")
        assert logger.level == logging.INFO

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")
        logger = get_logger("highlights.test.env")
        assert logger.level == logging.WARNING

    def test_explicit_level(self):
        logger = get_logger("highlights.test.explicit", level="DEBUG")
        assert logger.level == logging.DEBUG

    def test_reuses_existing_logger(self):
        logger1 = get_logger("highlights.test.reuse")
        logger2 = get_logger("highlights.test.reuse")
        assert logger1 is logger2
        assert len(logger1.handlers) == 1

    def test_records_reach_caplog(self, caplog):
        logger = get_logger("highlights.test.caplog", level="DEBUG")

        with caplog.at_level(logging.DEBUG):
            logger.debug("Flattened 12 element(s)")
            logger.info("Extracted 3 highlight(s)")

        assert "Flattened 12 element(s)" in caplog.text
        assert "Extracted 3 highlight(s)" in caplog.text

    def test_info_level_filters_debug(self, caplog):
        logger = get_logger("highlights.test.filter", level="INFO")

        with caplog.at_level(logging.DEBUG):
            logger.debug("Skipping heading")
            logger.info("Wrote note")

        assert "Skipping heading" not in caplog.text
        assert "Wrote note" in caplog.text


class TestConsoleHelpers:
    """Tests for user-facing notification helpers."""

    def test_success_goes_to_stdout(self, capsys):
        success("Archivo creado correctamente")
        captured = capsys.readouterr()
        assert "✓ Archivo creado correctamente" in captured.out
        assert captured.err == ""

    def test_error_goes_to_stderr(self, capsys):
        error("El archivo ya existe")
        captured = capsys.readouterr()
        assert "✗ El archivo ya existe" in captured.err
        assert "El archivo ya existe" not in captured.out

    def test_warning_and_progress(self, capsys):
        warning("No .authors element")
        progress("Importing highlights from notebook.html...")
        out = capsys.readouterr().out
        assert "⚠ No .authors element" in out
        assert "Importing highlights from notebook.html..." in out


class TestSetupLogging:
    """Tests for root logger configuration."""

    def test_file_handler(self, tmp_path, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        log_file = tmp_path / "import.log"
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level

        try:
            setup_logging(level="DEBUG", log_file=str(log_file))
            logging.getLogger("highlights.test").debug("Skipping heading")
            for handler in root.handlers:
                handler.flush()
        finally:
            for handler in root.handlers:
                if handler not in saved_handlers:
                    handler.close()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)

        assert "highlights.test - DEBUG - Skipping heading" in log_file.read_text(encoding="utf-8")
