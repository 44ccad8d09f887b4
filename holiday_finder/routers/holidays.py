from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from fastapi.responses import HTMLResponse

from holiday_finder.core.config import settings
from holiday_finder.core.logging_config import get_logger
from holiday_finder.schemas.holiday import Country, Holiday
from holiday_finder.services.country_loader import sort_countries
from holiday_finder.services.holiday_search import HolidaySearch
from holiday_finder.services.nager_service import (
    HolidaysNotFound,
    NagerDateError,
    NagerDateService,
)
from holiday_finder.services.page import Page
from holiday_finder.services.page_setup import initialize_page
from holiday_finder.services.render import render_page_html, render_results_html

logger = get_logger(__name__)

OUTCOME_HEADER = "X-Search-Outcome"


def get_nager_service() -> NagerDateService:
    """Dependency providing the upstream client; overridden in tests."""
    return NagerDateService()


router = APIRouter(
    tags=["Holidays"],
    responses={
        502: {"description": "Upstream holiday API failed"},
    }
)

page_router = APIRouter(tags=["Page"])


def _run_search(page: Page, service: NagerDateService, country: Optional[str], year: Optional[str]):
    page.select().value = (country or "").strip().upper()
    if year is not None:
        page.input().value = year
    return HolidaySearch(page, service).search()


@page_router.get("/", response_class=HTMLResponse, summary="Holiday search page")
def search_page(
    country: Optional[str] = Query(None),
    year: Optional[str] = Query(None),
    service: NagerDateService = Depends(get_nager_service),
):
    """
    Full search page.

    Countries are loaded and the year defaults to the current one. When the
    form was submitted (either query parameter present) the search runs
    before rendering.
    """
    page = initialize_page(service)
    headers = {}
    if country is not None or year is not None:
        outcome = _run_search(page, service, country, year)
        headers[OUTCOME_HEADER] = outcome.value
    return HTMLResponse(render_page_html(page, title=settings.PROJECT_NAME), headers=headers)


@router.get(
    "/holidays/search",
    response_class=HTMLResponse,
    summary="Search holidays (HTML fragment)",
    description="Render the results area for a country/year search",
)
def search_holidays_fragment(
    country: str = Query(""),
    year: str = Query(""),
    service: NagerDateService = Depends(get_nager_service),
):
    page = Page.build()
    outcome = _run_search(page, service, country, year)
    return HTMLResponse(
        render_results_html(page.results()),
        headers={OUTCOME_HEADER: outcome.value},
    )


@router.get(
    "/countries",
    response_model=List[Country],
    summary="List supported countries",
)
def list_countries(service: NagerDateService = Depends(get_nager_service)):
    try:
        return sort_countries(service.get_countries())
    except NagerDateError as e:
        logger.error("Error fetching countries: %s", e)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Could not load countries from the holiday API",
        )


@router.get(
    "/holidays/{year}/{country_code}",
    response_model=List[Holiday],
    summary="Public holidays for a country and year",
)
def get_public_holidays(
    year: int = Path(..., ge=1, le=9999, description="Calendar year"),
    country_code: str = Path(
        ...,
        pattern="^[A-Za-z]{2}$",
        description="ISO 3166-1 alpha-2 country code"
    ),
    service: NagerDateService = Depends(get_nager_service),
):
    try:
        return service.get_public_holidays(year, country_code.upper())
    except HolidaysNotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No holiday data available for {country_code.upper()} in {year}",
        )
    except NagerDateError as e:
        logger.error("Error fetching holidays: %s", e, extra={'country_code': country_code, 'year': year})
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Could not load holidays from the holiday API",
        )
