# ==============================================================================
# LOGGING TESTS
# ==============================================================================

import io
import json
import logging

from uow_orders.core.logging import (
    configure_logging,
    get_request_id,
    reset_request_id,
    set_request_id,
)


class TestLogging:
    """Tests for root logger configuration and request correlation."""

    def test_json_lines_carry_request_id(self, restore_root_logger):
        stream = io.StringIO()
        configure_logging("info", "json", stream=stream)

        token = set_request_id("req-1")
        try:
            logging.getLogger("uow_orders.test").info("order created")
        finally:
            reset_request_id(token)

        entry = json.loads(stream.getvalue().strip())
        assert entry["message"] == "order created"
        assert entry["level"] == "INFO"
        assert entry["logger"] == "uow_orders.test"
        assert entry["request_id"] == "req-1"
        assert get_request_id() == ""

    def test_text_format_prefixes_request_id(self, restore_root_logger):
        stream = io.StringIO()
        configure_logging("DEBUG", "text", stream=stream)

        token = set_request_id("abc")
        try:
            logging.getLogger("uow_orders.test").debug("hello")
        finally:
            reset_request_id(token)
        logging.getLogger("uow_orders.test").debug("no request")

        first, second = stream.getvalue().strip().splitlines()
        assert first.endswith("[abc] hello")
        assert second.endswith("| DEBUG | no request")
