"""
Holiday Fetcher & Renderer.

Reads the country and year inputs, fetches that country's public holidays
and renders them as cards into the results container. Each search takes a
sequence token; a response is only committed to the page while its token is
still the latest, so a slow earlier search can never overwrite a newer one.
"""

from datetime import date
from enum import Enum
from threading import Lock
from typing import List, Tuple, Union

from holiday_finder.core.logging_config import get_logger
from holiday_finder.schemas.holiday import Holiday, HolidayQuery
from holiday_finder.services.nager_service import (
    HolidaysNotFound,
    NagerDateError,
    NagerDateService,
)
from holiday_finder.services.page import HolidayCard, Message, Page, ResultNode

logger = get_logger(__name__)

MISSING_INPUT_TEXT = "Please select a country and enter a valid year."
NOT_FOUND_TEXT = "No holiday data available for {country_code} in {year}."
FETCH_ERROR_TEXT = "An error occurred while fetching data. Check the logs for details."
NO_HOLIDAYS_TEXT = "No public holidays found for the selected country and year."


class SearchOutcome(str, Enum):
    FOUND = "found"
    EMPTY = "empty"
    NOT_FOUND = "not_found"
    ERROR = "error"
    INVALID = "invalid"
    STALE = "stale"


def format_long_date(value: Union[date, str]) -> str:
    """
    Format a calendar date as e.g. "Wednesday, January 1, 2025".

    ISO strings are read as plain calendar dates, so no timezone can shift
    the day.
    """
    if isinstance(value, str):
        value = date.fromisoformat(value)
    return f"{value:%A}, {value:%B} {value.day}, {value.year}"


def holiday_card(holiday: Holiday) -> HolidayCard:
    return HolidayCard(
        name=holiday.name,
        date_label=format_long_date(holiday.date),
        type=holiday.type,
        global_label="Yes" if holiday.is_global else "No",
    )


def render_holidays(holidays: List[Holiday]) -> List[ResultNode]:
    """One card per holiday in the given order, or a single message if there are none."""
    if not holidays:
        return [Message(NO_HOLIDAYS_TEXT)]
    return [holiday_card(h) for h in holidays]


class HolidaySearch:
    """
    Runs holiday searches against one page.

    Reuse a single instance for every search on the same page so that the
    sequence token can discard superseded responses.
    """

    def __init__(self, page: Page, service: NagerDateService):
        self.page = page
        self.service = service
        self._lock = Lock()
        self._latest = 0

    @property
    def latest_token(self) -> int:
        with self._lock:
            return self._latest

    def _is_latest(self, token: int) -> bool:
        return token == self._latest

    def _fetch(self, query: HolidayQuery) -> Tuple[List[ResultNode], SearchOutcome]:
        """Call the API and turn every outcome into result nodes. Never raises NagerDateError."""
        try:
            holidays = self.service.get_public_holidays(query.year, query.country_code)
        except HolidaysNotFound:
            logger.info(
                "No holiday data available",
                extra={'country_code': query.country_code, 'year': query.year}
            )
            text = NOT_FOUND_TEXT.format(country_code=query.country_code, year=query.year)
            return [Message(text, is_error=True)], SearchOutcome.NOT_FOUND
        except NagerDateError as e:
            logger.error(
                "Error fetching holidays: %s", e,
                extra={'country_code': query.country_code, 'year': query.year, 'status_code': e.status_code}
            )
            return [Message(FETCH_ERROR_TEXT, is_error=True)], SearchOutcome.ERROR

        outcome = SearchOutcome.FOUND if holidays else SearchOutcome.EMPTY
        logger.info(
            "Rendered %d holidays", len(holidays),
            extra={'country_code': query.country_code, 'year': query.year}
        )
        return render_holidays(holidays), outcome

    def search(self) -> SearchOutcome:
        """
        Run one search from the current input values.

        Returns:
            The outcome that was rendered, or STALE if a newer search
            started while this one was waiting on the API
        """
        results = self.page.results()
        spinner = self.page.spinner()

        with self._lock:
            self._latest += 1
            token = self._latest
            results.clear()

        query = HolidayQuery(
            country_code=self.page.select().value,
            year=self.page.input().value,
        )

        if not query.is_complete:
            with self._lock:
                if self._is_latest(token):
                    results.replace([Message(MISSING_INPUT_TEXT, is_error=True)])
                    spinner.hide()
            return SearchOutcome.INVALID

        with self._lock:
            if self._is_latest(token):
                spinner.show()
        try:
            nodes, outcome = self._fetch(query)
            with self._lock:
                if not self._is_latest(token):
                    logger.info(
                        "Discarding superseded search results",
                        extra={'country_code': query.country_code, 'year': query.year}
                    )
                    return SearchOutcome.STALE
                results.replace(nodes)
            return outcome
        finally:
            with self._lock:
                if self._is_latest(token):
                    spinner.hide()
