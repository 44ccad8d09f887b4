from datetime import date
from typing import Optional

from holiday_finder.core.logging_config import get_logger
from holiday_finder.services.country_loader import populate_countries
from holiday_finder.services.nager_service import NagerDateService
from holiday_finder.services.page import Page

logger = get_logger(__name__)


def initialize_page(service: NagerDateService, today: Optional[date] = None) -> Page:
    """
    Build the search page: load countries and default the year to the current one.

    Args:
        service: Nager.Date client used by the Country Loader
        today: Override for the current date (tests)

    Returns:
        Page ready for a search
    """
    page = Page.build()
    populate_countries(page.select(), service)
    page.input().value = str((today or date.today()).year)
    logger.debug("Page initialized", extra={'year': page.input().value})
    return page
