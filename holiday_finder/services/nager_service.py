from typing import Any, List, Optional, Union
from urllib.parse import quote

import requests
from pydantic import ValidationError

from holiday_finder.core.config import settings
from holiday_finder.core.logging_config import get_logger
from holiday_finder.schemas.holiday import Country, Holiday

logger = get_logger(__name__)


class NagerDateError(Exception):
    """Raised when a Nager.Date request fails or returns an unusable body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class HolidaysNotFound(NagerDateError):
    """Raised on HTTP 404, which the API uses to mean "no data for this country/year"."""


class NagerDateService:
    """
    Nager.Date API client.

    One GET per call, no retries and no caching. Every failure surfaces as
    NagerDateError so callers only need a single except clause.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        self.base_url = (base_url or settings.NAGER_API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT_SECONDS
        self._session = session

    @property
    def countries_url(self) -> str:
        return f"{self.base_url}/AvailableCountries"

    def holidays_url(self, year: Union[int, str], country_code: str) -> str:
        """Path segments are percent-encoded so input cannot leave the PublicHolidays path."""
        return f"{self.base_url}/PublicHolidays/{quote(str(year), safe='')}/{quote(country_code, safe='')}"

    def _get_json(self, url: str) -> Any:
        """GET a URL and decode its JSON body, mapping every failure to NagerDateError."""
        http = self._session or requests
        try:
            response = http.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise NagerDateError(f"Request to {url} failed: {e}") from e

        if response.status_code == 404:
            raise HolidaysNotFound(f"No data at {url}", status_code=404)

        if not response.ok:
            raise NagerDateError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code
            )

        try:
            return response.json()
        except ValueError as e:
            raise NagerDateError(f"Invalid JSON from {url}: {e}", status_code=response.status_code) from e

    def get_countries(self) -> List[Country]:
        """
        Get all countries the API has holiday data for.

        Returns:
            List of Country in API order (unsorted)

        Raises:
            NagerDateError: on transport failure, non-2xx status or malformed body
        """
        data = self._get_json(self.countries_url)
        if not isinstance(data, list):
            raise NagerDateError("Expected a list of countries")

        try:
            return [Country.model_validate(item) for item in data]
        except ValidationError as e:
            raise NagerDateError(f"Malformed country entry: {e}") from e

    def get_public_holidays(self, year: Union[int, str], country_code: str) -> List[Holiday]:
        """
        Get public holidays for a country and year.

        Args:
            year: Four-digit year (as entered, not validated here)
            country_code: ISO 3166-1 alpha-2 code, e.g. "US"

        Returns:
            List of Holiday in the order the API returned them (may be empty)

        Raises:
            HolidaysNotFound: API answered 404 for this country/year
            NagerDateError: any other failure
        """
        url = self.holidays_url(year, country_code)
        logger.debug("Fetching holidays", extra={'url': url})

        data = self._get_json(url)
        if not isinstance(data, list):
            raise NagerDateError("Expected a list of holidays")

        try:
            return [Holiday.model_validate(item) for item in data]
        except ValidationError as e:
            raise NagerDateError(f"Malformed holiday entry: {e}") from e
