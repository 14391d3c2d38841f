"""Shared test fixtures."""

import json
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from keepipe.config.schema import KeepipeConfig
from keepipe.models.forecast import ForecastQuery, ResolvedForecast

JST = timezone(timedelta(hours=9))
FIXTURE_DIR = Path(__file__).parent / "fixtures"


def make_document(
    time_defines: list[str],
    temps: list[str],
    area_code: str = "14163",
    area_name: str = "札幌",
    report_datetime: str | None = "2024-01-23T05:00:00+09:00",
) -> list[dict]:
    """Build a minimal JMA forecast document with one temperature area."""
    report: dict = {
        "timeSeries": [
            {"timeDefines": [], "areas": []},
            {"timeDefines": [], "areas": []},
            {
                "timeDefines": time_defines,
                "areas": [
                    {"area": {"name": area_name, "code": area_code}, "temps": temps}
                ],
            },
        ],
    }
    if report_datetime is not None:
        report["reportDatetime"] = report_datetime
    return [report]


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def jma_document() -> list:
    with open(FIXTURE_DIR / "jma_forecast_016000.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def sapporo_query() -> ForecastQuery:
    return ForecastQuery(office_code="016000", sub_area_code="14163", rollover_hour=5)


@pytest.fixture
def morning() -> datetime:
    """06:00 JST on the fixture's report day."""
    return datetime(2024, 1, 23, 6, 0, tzinfo=JST)


@pytest.fixture
def config_dict() -> dict:
    return {
        "area": {"jma_offices": "016000", "jma_area_code": "14163"},
        "wifidigit": {"url": "http://wifidigit.test"},
        "actions": [
            {"method": "PUT", "command": "upside-down/false"},
            {"method": "PUT", "command": "2digit/{tempLowest}"},
            {"command": "bar/{nowHour}"},
            {"lowest": -2, "method": "PUT", "command": "blink-flipped/1000.10"},
        ],
    }


@pytest.fixture
def config(config_dict: dict) -> KeepipeConfig:
    return KeepipeConfig(**config_dict)


@pytest.fixture
def resolved() -> ResolvedForecast:
    return ResolvedForecast(
        area_name="札幌",
        area_code="14163",
        temp_lowest=-1.0,
        temp_highest=1.0,
        report_datetime=datetime(2024, 1, 23, 5, 0, tzinfo=JST),
    )
