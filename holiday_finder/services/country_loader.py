"""
Country Loader: fills the country selection control from the API.
"""

import unicodedata
from typing import List, Tuple

from holiday_finder.core.logging_config import get_logger
from holiday_finder.schemas.holiday import Country
from holiday_finder.services.nager_service import NagerDateError, NagerDateService
from holiday_finder.services.page import Option, SelectControl

logger = get_logger(__name__)

LOAD_ERROR_LABEL = "Error loading countries."


def collation_key(name: str) -> Tuple[str, str]:
    """
    Sort key approximating a locale-aware comparison.

    Accents and case only break ties: "Åland Islands" sorts with the A's,
    before "Albania".
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), name


def sort_countries(countries: List[Country]) -> List[Country]:
    return sorted(countries, key=lambda c: collation_key(c.name))


def populate_countries(select: SelectControl, service: NagerDateService) -> int:
    """
    Fetch the country list and append one option per country, sorted by name.

    On any failure a single disabled placeholder option is appended instead.
    Never raises.

    Args:
        select: The country selection control to populate
        service: Nager.Date client

    Returns:
        Number of country options appended (0 on failure)
    """
    try:
        countries = service.get_countries()
    except NagerDateError as e:
        logger.error("Error fetching countries: %s", e)
        select.append(Option(value="", label=LOAD_ERROR_LABEL, disabled=True))
        return 0

    for country in sort_countries(countries):
        select.append(Option(value=country.code, label=country.name))

    logger.info("Successfully loaded %d countries.", len(countries))
    return len(countries)
