from .holiday import Country, Holiday, HolidayQuery

__all__ = [
    "Country",
    "Holiday",
    "HolidayQuery",
]
