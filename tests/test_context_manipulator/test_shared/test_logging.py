"""Tests for correlation-aware logging and the error types."""

import logging

from context_manipulator.shared.errors import (
    InvalidArgumentError,
    ManipulationError,
    SinkWriteError,
    UnknownContextError,
)
from context_manipulator.shared.logging import CorrelationLogger, get_logger


class TestCorrelationLogger:
    """Test the correlation logger wrapper."""

    def test_component_defaults_to_module_name(self):
        logger = get_logger("context_manipulator.api.registry")
        assert isinstance(logger, CorrelationLogger)
        assert logger.component == "registry"
        assert logger.correlation_id is None

    def test_extra_fields_attached(self, caplog):
        logger = get_logger("context_manipulator.test", "req-42", "unit")

        with caplog.at_level(logging.INFO, logger="context_manipulator.test"):
            logger.info("hello", extra={"context": "html_content"})

        record = caplog.records[-1]
        assert record.getMessage() == "hello"
        assert record.correlation_id == "req-42"
        assert record.component == "unit"
        assert record.context == "html_content"


class TestErrors:
    """Test the error hierarchy."""

    def test_all_errors_share_a_base(self):
        for error_class in (InvalidArgumentError, SinkWriteError, UnknownContextError):
            assert issubclass(error_class, ManipulationError)

    def test_invalid_argument_error(self):
        error = InvalidArgumentError("no sink", argument="sink")
        assert isinstance(error, ValueError)
        assert error.argument == "sink"

    def test_sink_write_error(self):
        error = SinkWriteError("failed", manipulator="HTMLManipulator(CONTENT)")
        assert error.manipulator == "HTMLManipulator(CONTENT)"
        assert str(error) == "failed"

    def test_unknown_context_error(self):
        error = UnknownContextError("rtf")
        assert isinstance(error, LookupError)
        assert error.context == "rtf"
        assert "'rtf'" in str(error)
