"""
Shared pytest fixtures for holiday-finder tests.

Provides sample Nager.Date payloads, a client pointed at a test base URL
and a stub client for component tests.
"""

from datetime import date
from typing import Any, Dict, List
from unittest.mock import MagicMock

import pytest

from holiday_finder.schemas.holiday import Country, Holiday
from holiday_finder.services.nager_service import NagerDateService
from holiday_finder.services.page import Page

BASE_URL = "https://nager.test/api/v3"


# =============================================================================
# Client Fixtures
# =============================================================================

@pytest.fixture
def nager_service() -> NagerDateService:
    """Real client pointed at a fake base URL, for use with `responses`."""
    return NagerDateService(base_url=BASE_URL, timeout=5)


@pytest.fixture
def stub_service() -> MagicMock:
    """Stub client with no canned answers; tests set return values/side effects."""
    return MagicMock(spec=NagerDateService)


@pytest.fixture
def page() -> Page:
    return Page.build()


# =============================================================================
# API Response Fixtures
# =============================================================================

@pytest.fixture
def countries_payload() -> List[Dict[str, Any]]:
    """Sample /AvailableCountries response (API order is not alphabetical)."""
    return [
        {"countryCode": "US", "name": "United States"},
        {"countryCode": "AL", "name": "Albania"},
        {"countryCode": "FR", "name": "France"},
        {"countryCode": "AX", "name": "Åland Islands"},
    ]


@pytest.fixture
def new_years_day_payload() -> Dict[str, Any]:
    return {
        "date": "2025-01-01",
        "localName": "New Year's Day",
        "name": "New Year's Day",
        "countryCode": "US",
        "fixed": False,
        "global": True,
        "counties": None,
        "launchYear": None,
        "types": ["Public"],
    }


@pytest.fixture
def holidays_payload(new_years_day_payload) -> List[Dict[str, Any]]:
    """Sample /PublicHolidays/2025/US response, in API order."""
    return [
        new_years_day_payload,
        {
            "date": "2025-07-04",
            "localName": "Independence Day",
            "name": "Independence Day",
            "countryCode": "US",
            "fixed": False,
            "global": True,
            "counties": None,
            "launchYear": None,
            "types": ["Public"],
        },
        {
            "date": "2025-04-21",
            "localName": "Patriots' Day",
            "name": "Patriots' Day",
            "countryCode": "US",
            "fixed": False,
            "global": False,
            "counties": ["US-MA", "US-ME"],
            "launchYear": None,
            "types": ["Observance"],
        },
    ]


@pytest.fixture
def new_years_day() -> Holiday:
    return Holiday(date=date(2025, 1, 1), name="New Year's Day", type="Public", global_=True)


@pytest.fixture
def sample_countries() -> List[Country]:
    return [
        Country(code="US", name="United States"),
        Country(code="FR", name="France"),
    ]
