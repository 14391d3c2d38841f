"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator

DEFAULT_REFERENCE_TIME = 5


class HttpMethod(StrEnum):
    GET = "GET"
    PUT = "PUT"


class AreaConfig(BaseModel):
    """Forecast area: a JMA office and one of its sub-areas.

    ``reference_time`` is the rollover hour. Before it, today's
    temperatures are used; at or after it, tomorrow's.
    """

    model_config = {"extra": "forbid"}

    jma_offices: str
    jma_area_code: str
    reference_time: int = Field(default=DEFAULT_REFERENCE_TIME, ge=0, le=23)


class WiFiDigitConfig(BaseModel):
    model_config = {"extra": "forbid"}

    url: str = Field(min_length=1)


class ActionConfig(BaseModel):
    model_config = {"extra": "forbid"}

    lowest: float | None = None
    highest: float | None = None
    method: HttpMethod = HttpMethod.GET
    command: str

    @field_validator("method", mode="before")
    @classmethod
    def _upper_method(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v


class KeepipeConfig(BaseModel):
    model_config = {"extra": "forbid"}

    area: AreaConfig
    wifidigit: WiFiDigitConfig
    actions: list[ActionConfig] = []
