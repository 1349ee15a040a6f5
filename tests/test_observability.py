import json
import logging

from wallet_service.core.observability import JSONFormatter, setup_logging


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord("wallet_service.test", logging.WARNING, __file__, 1, "rejected %s", ("x",), None)
    record.wallet_id = "abc"

    payload = json.loads(JSONFormatter().format(record))

    assert payload["level"] == "WARNING"
    assert payload["message"] == "rejected x"
    assert payload["wallet_id"] == "abc"


def test_setup_logging_installs_a_single_handler():
    root = logging.getLogger()
    previous_level = root.level
    try:
        setup_logging("DEBUG", "json")
        setup_logging("WARNING", "text")

        ours = [handler for handler in root.handlers if handler.get_name() == "wallet_service"]
        assert len(ours) == 1
        assert not isinstance(ours[0].formatter, JSONFormatter)
        assert root.level == logging.WARNING
    finally:
        for handler in [h for h in root.handlers if h.get_name() == "wallet_service"]:
            root.removeHandler(handler)
        root.setLevel(previous_level)
