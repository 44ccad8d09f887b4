from datetime import date as Date
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_HOLIDAY_TYPE = "Public"


class Country(BaseModel):
    """A country supported by the Nager.Date API"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: str = Field(..., alias="countryCode", min_length=1, description="ISO 3166-1 alpha-2 code")
    name: str = Field(..., min_length=1, description="Display name")


class Holiday(BaseModel):
    """A single public holiday as returned by /PublicHolidays/{year}/{countryCode}"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: Date
    name: str
    type: str = DEFAULT_HOLIDAY_TYPE
    global_: bool = Field(True, alias="global")
    local_name: Optional[str] = Field(None, alias="localName")
    country_code: Optional[str] = Field(None, alias="countryCode")
    counties: Optional[List[str]] = None

    @model_validator(mode="before")
    @classmethod
    def pick_type(cls, data: Any) -> Any:
        """The v3 API sends a `types` list; older payloads send a single `type`."""
        if isinstance(data, dict) and "type" not in data:
            types = data.get("types") or []
            data = {**data, "type": types[0] if types else DEFAULT_HOLIDAY_TYPE}
        return data

    @property
    def is_global(self) -> bool:
        return self.global_


class HolidayQuery(BaseModel):
    """Country/year pair captured from the search inputs"""
    country_code: str
    year: str

    @field_validator("country_code", "year", mode="before")
    @classmethod
    def strip_whitespace(cls, v: Any) -> str:
        return "" if v is None else str(v).strip()

    @property
    def is_complete(self) -> bool:
        return bool(self.country_code and self.year)
