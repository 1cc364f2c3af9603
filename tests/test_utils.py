"""Tests for JSON extraction and logging setup."""

import logging

from src.expenseflow.utils import extract_json_object, setup_logging


def test_extract_json_plain():
    assert extract_json_object('{"answer": "ok", "n": 1}') == {"answer": "ok", "n": 1}


def test_extract_json_fenced():
    assert extract_json_object('Result:\n```json\n{"a": {"b": 2}}\n```') == {"a": {"b": 2}}


def test_extract_json_surrounded_by_prose():
    assert extract_json_object('The verdict is {"is_compliant": true} as shown.') == {"is_compliant": True}


def test_extract_json_none():
    assert extract_json_object("") is None
    assert extract_json_object("no json here") is None
    assert extract_json_object("{not: valid}") is None


def test_setup_logging_is_idempotent(tmp_path):
    log_file = tmp_path / "logs" / "expenseflow.log"
    log = setup_logging("debug", log_file)
    handlers_before = list(log.handlers)
    setup_logging("debug", log_file)

    assert log.name == "expenseflow"
    assert log.level == logging.DEBUG
    assert log.handlers == handlers_before
    assert log_file.parent.is_dir()

    logging.getLogger("expenseflow.agent.client").info("hello")
    for h in log.handlers:
        h.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")

    for h in handlers_before:
        log.removeHandler(h)
        h.close()
