"""Unit tests for loguru setup."""

import logging

from loguru import logger

from cloudflare_entities.runtime.logging import setup_logging
from cloudflare_entities.runtime.settings import EnvironmentVariables


class TestSetupLogging:
    """Test loguru configuration."""

    def test_stdlib_records_routed_to_loguru(self):
        """Should forward stdlib logging records to loguru sinks."""
        setup_logging(EnvironmentVariables(_env_file=None, log_level="DEBUG"), force=True)
        messages: list[str] = []
        sink_id = logger.add(lambda message: messages.append(message.record["message"]))
        try:
            logging.getLogger("third.party").warning("disk almost full")
        finally:
            logger.remove(sink_id)

        assert "disk almost full" in messages

    def test_second_call_is_noop(self):
        """Should not reconfigure loguru unless forced."""
        setup_logging(EnvironmentVariables(_env_file=None), force=True)
        sink_id = logger.add(lambda message: None)
        try:
            setup_logging(EnvironmentVariables(_env_file=None))
            # The sink added above survives because nothing was reconfigured.
            logger.remove(sink_id)
        finally:
            setup_logging(EnvironmentVariables(_env_file=None), force=True)
