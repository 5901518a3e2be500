import json
import logging

from period_billing.common.logging_config import JSONFormatter, configure_logging


def _ours(root):
    return [h for h in root.handlers if getattr(h, "_period_billing", False)]


def test_configure_logging_is_idempotent():
    root = logging.getLogger()
    configure_logging("DEBUG")
    configure_logging("WARNING", json_output=True)

    handlers = _ours(root)
    assert len(handlers) == 1
    assert isinstance(handlers[0].formatter, JSONFormatter)
    assert root.level == logging.WARNING

    for handler in handlers:
        root.removeHandler(handler)


def test_json_formatter_emits_one_object():
    record = logging.LogRecord("period_billing.test", logging.INFO, __file__, 10, "settled %d", (3,), None)
    data = json.loads(JSONFormatter().format(record))
    assert data["message"] == "settled 3"
    assert data["level"] == "INFO"
    assert data["logger"] == "period_billing.test"
