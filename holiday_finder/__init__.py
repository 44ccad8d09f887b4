"""
Holiday Finder - public holiday lookup backed by the Nager.Date API.

Page flow:
    from holiday_finder.services.page_setup import initialize_page
    from holiday_finder.services.holiday_search import HolidaySearch

    page = initialize_page(service)
    page.select("country-select").value = "US"
    HolidaySearch(page, service).search()
"""

__version__ = "0.1.0"
