"""
Tests for the engine logger.
"""
from loguru import logger

from huelab import __version__
from huelab.services.colors.errors import OutOfRange
from huelab.utils.logging import SERVICE_NAME, EngineLogger


class TestEngineLogger:
    """Test service context and error records"""

    def _capture(self):
        records = []
        handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
        return records, handler_id

    def test_engine_error_record(self):
        """Test rejected input is logged with its code and path"""
        log = EngineLogger(level="DEBUG")
        records, handler_id = self._capture()
        try:
            log.engine_error("/v1/memory", OutOfRange("Elapsed time must be non-negative", -1))
        finally:
            logger.remove(handler_id)

        record = records[-1]
        assert record["level"].name == "WARNING"
        assert record["message"] == "Rejected color engine input"
        assert record["extra"]["code"] == "out_of_range"
        assert record["extra"]["path"] == "/v1/memory"
        assert record["extra"]["service"] == SERVICE_NAME
        assert record["extra"]["version"] == __version__

    def test_module_logger_gets_service_context(self):
        """Test plain loguru calls carry the configured service name"""
        EngineLogger(level="DEBUG")
        records, handler_id = self._capture()
        try:
            logger.debug("engine event")
        finally:
            logger.remove(handler_id)

        assert records[-1]["extra"]["service"] == SERVICE_NAME
