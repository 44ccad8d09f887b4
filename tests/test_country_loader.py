import logging

from holiday_finder.schemas.holiday import Country
from holiday_finder.services.country_loader import (
    LOAD_ERROR_LABEL,
    collation_key,
    populate_countries,
)
from holiday_finder.services.nager_service import NagerDateError
from holiday_finder.services.page import SelectControl


def _empty_select():
    return SelectControl("country-select")


def test_options_render_in_name_order(stub_service, sample_countries):
    select = _empty_select()
    stub_service.get_countries.return_value = sample_countries

    count = populate_countries(select, stub_service)

    assert count == 2
    assert select.labels == ["France", "United States"]
    assert [o.value for o in select.options] == ["FR", "US"]
    stub_service.get_countries.assert_called_once_with()


def test_accented_names_sort_with_base_letter(stub_service):
    select = _empty_select()
    stub_service.get_countries.return_value = [
        Country(code="AL", name="Albania"),
        Country(code="ZA", name="South Africa"),
        Country(code="AX", name="Åland Islands"),
        Country(code="AD", name="andorra"),
    ]

    populate_countries(select, stub_service)

    assert select.labels == ["Åland Islands", "Albania", "andorra", "South Africa"]


def test_collation_key_ignores_case_and_accents():
    assert collation_key("Åland")[0] == collation_key("aland")[0]
    assert collation_key("Curaçao")[0] == "curacao"


def test_failure_appends_disabled_placeholder(stub_service, caplog):
    select = _empty_select()
    stub_service.get_countries.side_effect = NagerDateError("HTTP error! status: 503", status_code=503)

    count = populate_countries(select, stub_service)

    assert count == 0
    assert len(select.options) == 1
    assert select.options[0].label == LOAD_ERROR_LABEL
    assert select.options[0].disabled is True
    assert any(r.levelno == logging.ERROR for r in caplog.records)


def test_existing_options_are_kept(stub_service, sample_countries, page):
    """Options are appended after the page's placeholder option."""
    stub_service.get_countries.return_value = sample_countries

    populate_countries(page.select(), stub_service)

    assert page.select().labels == ["Select a country", "France", "United States"]


def test_logs_loaded_count(stub_service, sample_countries, caplog):
    caplog.set_level(logging.INFO)
    stub_service.get_countries.return_value = sample_countries

    populate_countries(_empty_select(), stub_service)

    assert "Successfully loaded 2 countries." in caplog.text
