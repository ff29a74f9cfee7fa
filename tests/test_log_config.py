from __future__ import annotations

import logging

from salon_checkout.core.log_config import ContextFormatter, configure_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("salon_checkout.test", logging.INFO, __file__, 1, "Booking confirmed", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_appends_context():
    formatter = ContextFormatter("%(levelname)s:%(name)s:%(message)s")

    line = formatter.format(_record(booking_id="BK123456", source="context", reason=""))

    assert line == "INFO:salon_checkout.test:Booking confirmed | booking_id=BK123456 source=context"


def test_formatter_without_context():
    formatter = ContextFormatter("%(message)s")

    assert formatter.format(_record()) == "Booking confirmed"


def test_configure_logging_sets_level():
    root = logging.getLogger()
    saved_level, saved_handlers = root.level, list(root.handlers)
    try:
        configure_logging("warning")

        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, ContextFormatter)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
