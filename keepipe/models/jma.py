"""Typed view of the JMA forecast document.

Only the parts keepipe reads are modelled: the first report's
``reportDatetime`` and the temperature block at ``timeSeries[2]``::

    [
      {
        "reportDatetime": "2024-01-23T05:00:00+09:00",
        "timeSeries": [
          {...}, {...},
          {
            "timeDefines": ["2024-01-23T00:00:00+09:00", ...],
            "areas": [
              {"area": {"name": "札幌", "code": "14163"},
               "temps": ["4", "4", "-1", "1"]},
              ...
            ]
          }
        ]
      },
      ...
    ]
"""

from typing import Any

from pydantic import BaseModel, Field

TEMPERATURE_SERIES_INDEX = 2


class JmaArea(BaseModel):
    name: str
    code: str


class AreaTemperatures(BaseModel):
    area: JmaArea
    # Checked as list[str] only for the queried area.
    temps: Any = None


class TemperatureSeries(BaseModel):
    time_defines: list[str] = Field(alias="timeDefines")
    areas: list[AreaTemperatures]


class ShortTermReport(BaseModel):
    report_datetime: str | None = Field(default=None, alias="reportDatetime")
    time_series: list[dict] = Field(alias="timeSeries")
