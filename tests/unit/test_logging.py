from __future__ import annotations

import json
import locale
import logging

from record_store.utils.collation import collation_key, configure_collation
from record_store.utils.logging import JsonFormatter, _json_formatter, configure_logging

EXPECTED_ROWS = 10
EXPECTED_MIN_VALUE = 2.5


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="hello",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_promotes_standard_extra_fields() -> None:
    payload = json.loads(_json_formatter(_record(rows=EXPECTED_ROWS, path="data.json")))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["rows"] == EXPECTED_ROWS
    assert payload["path"] == "data.json"
    assert "lineno" not in payload


def test_json_formatter_supports_nested_extra_field() -> None:
    payload = json.loads(_json_formatter(_record(extra={"min_value": EXPECTED_MIN_VALUE})))

    assert payload["min_value"] == EXPECTED_MIN_VALUE
    assert "extra" not in payload


def test_json_formatter_renders_non_serializable_values() -> None:
    payload = json.loads(JsonFormatter().format(_record(source=object())))
    assert isinstance(payload["source"], str)


def test_configure_logging_sets_root_level() -> None:
    root = logging.getLogger()
    previous_level, previous_handlers = root.level, list(root.handlers)
    try:
        configure_logging(level="debug", json_logs=True)
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
    finally:
        root.handlers = previous_handlers
        root.setLevel(previous_level)


def test_configure_logging_without_force_keeps_existing_handlers() -> None:
    root = logging.getLogger()
    previous_level, previous_handlers = root.level, list(root.handlers)
    sentinel = logging.NullHandler()
    root.handlers = [sentinel]
    try:
        configure_logging(level="ERROR", force=False)
        assert root.handlers == [sentinel]
    finally:
        root.handlers = previous_handlers
        root.setLevel(previous_level)


def test_configure_collation_c_locale() -> None:
    assert configure_collation("C") == "C"
    assert collation_key("b") > collation_key("a")
    assert collation_key("a") < collation_key("B")
    assert collation_key("\u00e9clair") < collation_key("fig")


def test_configure_collation_unknown_locale_keeps_current(caplog) -> None:
    current = locale.setlocale(locale.LC_COLLATE)
    with caplog.at_level(logging.WARNING, logger="record_store.utils.collation"):
        active = configure_collation("xx_NOT_A_LOCALE.UTF-8")
    assert active == current
    assert "unavailable" in caplog.text
