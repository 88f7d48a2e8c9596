import json
import logging

from fundapp.logging_config import JSONFormatter, PlainFormatter, get_logger, resolve_level


def _record(msg="saved %s", args=("$9,000",)):
    return logging.LogRecord("fundcalc.core.pipeline", logging.INFO, __file__, 1, msg, args, None)


def test_resolve_level():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("WARNING") == logging.WARNING
    assert resolve_level("basicconfig") == logging.INFO
    assert resolve_level("") == logging.INFO


def test_json_formatter():
    entry = json.loads(JSONFormatter().format(_record()))
    assert entry["level"] == "INFO"
    assert entry["logger"] == "fundcalc.core.pipeline"
    assert entry["message"] == "saved $9,000"


def test_plain_formatter():
    line = PlainFormatter().format(_record())
    assert "INFO" in line
    assert "pipeline" in line
    assert line.endswith("saved $9,000")


def test_get_logger_namespace():
    assert get_logger("fundapp.core.pipeline").name == "fundcalc.core.pipeline"
    assert get_logger("fundmath.utils").name == "fundcalc.fundmath.utils"
