import json
import logging

from holiday_finder.core.logging_config import HumanFormatter, JsonFormatter, setup_logging


def _record(msg="Rendered %d holidays", args=(3,), **extra):
    record = logging.LogRecord(
        name="holiday_finder.services.holiday_search",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=args,
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extras():
    output = json.loads(JsonFormatter().format(_record(country_code="US", year="2025")))

    assert output["level"] == "INFO"
    assert output["logger"] == "holiday_finder.services.holiday_search"
    assert output["message"] == "Rendered 3 holidays"
    assert output["country_code"] == "US"
    assert output["year"] == "2025"


def test_json_formatter_stringifies_unserializable_extras():
    output = json.loads(JsonFormatter().format(_record(client=object())))

    assert isinstance(output["client"], str)


def test_human_formatter_strips_package_prefix():
    output = HumanFormatter(use_colors=False).format(_record(country_code="US"))

    assert "[services.holiday_search] Rendered 3 holidays (country_code=US)" in output


def test_human_formatter_without_extras():
    output = HumanFormatter(use_colors=False).format(_record())

    assert output.endswith("[services.holiday_search] Rendered 3 holidays")


def test_setup_logging_configures_root_once():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging(json_format=True, level="debug")
        setup_logging(json_format=True, level="debug")

        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
