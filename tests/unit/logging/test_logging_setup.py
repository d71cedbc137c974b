"""
Tests for the logging package.
"""

import json
import logging
import sys
from pathlib import Path

import pytest

from fleetdash.core.config import LoggingConfig as LoggingSettings
from fleetdash.logging import (
    ClientLogger,
    LoggingConfig,
    LoggingManager,
    ContextFormatter,
    StructuredFormatter,
)


@pytest.mark.unit
class TestLoggingConfig:

    def test_defaults(self):
        config = LoggingConfig()

        assert config.level == logging.INFO
        assert config.format_type == "console"
        assert config.output == ["console"]
        assert config.service_name == "fleetdash"

    def test_level_from_string(self):
        assert LoggingConfig(level="DEBUG").level == logging.DEBUG

    def test_from_settings(self):
        settings = LoggingSettings(level="ERROR", format="json", output=["console", "file"])

        config = LoggingConfig.from_settings(settings, version="1.2.3")

        assert config.level == logging.ERROR
        assert config.format_type == "json"
        assert config.output == ["console", "file"]
        assert config.version == "1.2.3"


@pytest.mark.unit
class TestStructuredFormatter:

    def _record(self, **extra):
        record = logging.LogRecord("fleetdash.test", logging.INFO, __file__, 10, "hello %s", ("world",), None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_json_output(self):
        output = json.loads(StructuredFormatter(version="0.1.0").format(self._record()))

        assert output["message"] == "hello world"
        assert output["level"] == "INFO"
        assert output["service"] == "fleetdash"
        assert output["version"] == "0.1.0"

    def test_correlation_and_context(self):
        record = self._record(correlation_id="abc12345", extra_context={"endpoint": "/cars"})

        output = json.loads(StructuredFormatter().format(record))

        assert output["correlation_id"] == "abc12345"
        assert output["endpoint"] == "/cars"

    def test_exception_info(self):
        try:
            raise RuntimeError("bad")
        except RuntimeError:
            record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())

        output = json.loads(StructuredFormatter().format(record))

        assert output["exception"]["type"] == "RuntimeError"


@pytest.mark.unit
class TestContextFormatter:

    def _record(self, msg="GET /cars failed", **extra):
        record = logging.LogRecord("fleetdash.services", logging.ERROR, __file__, 10, msg, (), None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_plain_record(self):
        line = ContextFormatter("%(levelname)s %(message)s").format(self._record())

        assert line == "ERROR GET /cars failed"

    def test_context_appended(self):
        record = self._record(correlation_id="abc12345", extra_context={"method": "GET", "status": 502})

        line = ContextFormatter("%(message)s").format(record)

        assert line == "GET /cars failed [abc12345] method=GET status=502"

    def test_context_stays_on_first_line_of_traceback(self):
        try:
            raise RuntimeError("bad")
        except RuntimeError:
            record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())
        record.correlation_id = "abc12345"

        first_line, _, rest = ContextFormatter("%(message)s").format(record).partition("\n")

        assert first_line == "failed [abc12345]"
        assert "RuntimeError: bad" in rest


@pytest.mark.unit
class TestClientLogger:

    def test_correlation_id_and_context_attached(self, caplog):
        logger = ClientLogger("fleetdash.test", "corr0001").with_context(endpoint="/cars")

        with caplog.at_level(logging.INFO, logger="fleetdash.test"):
            logger.warning("sent", status=200)

        record = caplog.records[-1]
        assert record.correlation_id == "corr0001"
        assert record.extra_context == {"endpoint": "/cars", "status": 200}

    def test_with_context_does_not_mutate_original(self):
        base = ClientLogger("fleetdash.test")
        derived = base.with_context(method="GET")

        assert base.extra_context == {}
        assert derived.correlation_id == base.correlation_id


@pytest.mark.unit
class TestLoggingManager:

    @pytest.fixture
    def manager(self):
        manager = LoggingManager()
        root = logging.getLogger()
        root_level = root.level
        package_level = logging.getLogger("fleetdash").level
        yield manager
        for handler in manager.handlers:
            root.removeHandler(handler)
            handler.close()
        manager.handlers.clear()
        root.setLevel(root_level)
        logging.getLogger("fleetdash").setLevel(package_level)

    def test_singleton(self):
        assert LoggingManager() is LoggingManager()

    def test_json_console_handler(self, manager):
        manager.configure(LoggingConfig(level="DEBUG", format_type="json"))

        assert len(manager.handlers) == 1
        assert isinstance(manager.handlers[0].formatter, StructuredFormatter)
        assert logging.getLogger("fleetdash").level == logging.DEBUG

    def test_console_handler_uses_context_formatter(self, manager):
        manager.configure(LoggingConfig())

        assert isinstance(manager.handlers[0].formatter, ContextFormatter)

    def test_urllib3_quiet_unless_debugging(self, manager):
        urllib3_logger = logging.getLogger("urllib3")
        previous = urllib3_logger.level
        try:
            manager.configure(LoggingConfig(level="INFO"))
            assert urllib3_logger.level == logging.WARNING

            manager.configure(LoggingConfig(level="DEBUG"))
            assert urllib3_logger.level == logging.DEBUG
        finally:
            urllib3_logger.setLevel(previous)

    def test_reconfigure_replaces_handlers(self, manager):
        manager.configure(LoggingConfig())
        manager.configure(LoggingConfig(format_type="rich"))

        assert len(manager.handlers) == 1
        assert all(h in logging.getLogger().handlers for h in manager.handlers)

    def test_file_handler(self, manager, temp_dir):
        log_file = temp_dir / "logs" / "fleetdash.log"
        manager.configure(LoggingConfig(output="file", file_path=log_file))

        logging.getLogger("fleetdash.test").warning("to file")
        for handler in manager.handlers:
            handler.flush()

        assert "to file" in Path(log_file).read_text()
