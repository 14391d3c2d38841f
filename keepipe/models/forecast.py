"""Forecast query and resolved temperature models."""

from dataclasses import dataclass
from datetime import datetime

from keepipe.config.schema import DEFAULT_REFERENCE_TIME, AreaConfig


@dataclass(frozen=True)
class ForecastQuery:
    office_code: str
    sub_area_code: str
    rollover_hour: int = DEFAULT_REFERENCE_TIME

    @classmethod
    def from_area(cls, area: AreaConfig) -> "ForecastQuery":
        return cls(
            office_code=area.jma_offices,
            sub_area_code=area.jma_area_code,
            rollover_hour=area.reference_time,
        )


@dataclass(frozen=True)
class ResolvedForecast:
    area_name: str
    area_code: str
    temp_lowest: float  # first in-window sample, not a computed minimum
    temp_highest: float  # second in-window sample
    report_datetime: datetime | None
