"""Forecast resolver: picks the target day's low/high temperature for a sub-area.

The temperature block of a JMA forecast lists two samples per day for
each sub-area, low first and high second, paired by position with
``timeDefines``. Which day is wanted depends on the clock: before the
rollover hour it is today, at or after it tomorrow.
"""

import logging
import math
from datetime import datetime, time, timedelta, timezone
from typing import Any

from pydantic import TypeAdapter, ValidationError

from keepipe.models.forecast import ForecastQuery, ResolvedForecast
from keepipe.models.jma import (
    TEMPERATURE_SERIES_INDEX,
    AreaTemperatures,
    ShortTermReport,
    TemperatureSeries,
)

logger = logging.getLogger(__name__)

SAMPLES_PER_DAY = 2

_TEMPS = TypeAdapter(list[str])


class ResolutionError(Exception):
    """Base class for failures extracting temperatures from a forecast."""


class AreaNotFound(ResolutionError):
    def __init__(self, area_code: str):
        super().__init__(f"area code {area_code!r} not found in forecast")
        self.area_code = area_code


class MalformedData(ResolutionError):
    def __init__(self, field: str, reason: str):
        super().__init__(f"{field}: {reason}")
        self.field = field


class AmbiguousWindow(ResolutionError):
    def __init__(self, count: int, window_start: datetime):
        super().__init__(
            f"expected {SAMPLES_PER_DAY} temperatures for "
            f"{window_start.date().isoformat()}, found {count}"
        )
        self.count = count
        self.window_start = window_start


class MissingReportTime(ResolutionError):
    def __init__(self):
        super().__init__("reportDatetime missing from forecast")


class InvalidTimestamp(ResolutionError):
    def __init__(self, field: str, value: Any):
        super().__init__(f"{field}: can't parse timestamp {value!r}")
        self.field = field
        self.value = value


def resolve(query: ForecastQuery, document: Any, now: datetime) -> ResolvedForecast:
    """Extract the target day's temperatures for ``query`` from ``document``.

    ``now`` must be timezone-aware; the day boundary is taken in its zone.
    Raises a ResolutionError subclass on any failure; there is no partial
    result.
    """
    report, series = decode_document(document)

    entry = _find_area(series, query.sub_area_code)
    temps = _parse_temps(entry)

    window_start = target_midnight(now, query.rollover_hour)
    window_end = window_start + timedelta(days=1)

    selected: list[float] = []
    for i, (time_define, temp) in enumerate(zip(series.time_defines, temps)):
        at = _parse_instant(time_define, f"timeDefines.{i}")
        if window_start <= at < window_end:
            selected.append(temp)

    if len(selected) != SAMPLES_PER_DAY:
        raise AmbiguousWindow(len(selected), window_start)

    if report.report_datetime is None:
        raise MissingReportTime()
    report_datetime = _parse_instant(report.report_datetime, "reportDatetime")

    return ResolvedForecast(
        area_name=entry.area.name,
        area_code=entry.area.code,
        temp_lowest=selected[0],
        temp_highest=selected[1],
        report_datetime=report_datetime,
    )


def target_midnight(now: datetime, rollover_hour: int) -> datetime:
    """Start of the day whose temperatures are wanted.

    The rollover hour itself already selects the next day. Midnight is
    rebuilt from the calendar date so it carries that day's own offset.
    """
    if now.tzinfo is None:
        raise ValueError("now must be timezone-aware")
    day = now.date()
    if now.hour >= rollover_hour:
        day += timedelta(days=1)
    midnight = datetime.combine(day, time())
    if _is_system_local(now):
        return midnight.astimezone()
    return midnight.replace(tzinfo=now.tzinfo)


def _is_system_local(now: datetime) -> bool:
    # Fixed offsets from datetime.now().astimezone() go through the system
    # zone so the midnight offset follows DST.
    return (
        isinstance(now.tzinfo, timezone)
        and now.utcoffset() == now.astimezone().utcoffset()
    )


def decode_document(document: Any) -> tuple[ShortTermReport, TemperatureSeries]:
    """Validate the parts of a JMA forecast document that are read."""
    reports = document if isinstance(document, list) else [document]
    if not reports:
        raise MalformedData("document", "no reports")

    try:
        report = ShortTermReport.model_validate(reports[0])
    except ValidationError as e:
        raise _malformed(e, prefix="0") from e

    if len(report.time_series) <= TEMPERATURE_SERIES_INDEX:
        raise MalformedData(
            f"0.timeSeries.{TEMPERATURE_SERIES_INDEX}", "temperature block missing"
        )

    try:
        series = TemperatureSeries.model_validate(
            report.time_series[TEMPERATURE_SERIES_INDEX]
        )
    except ValidationError as e:
        raise _malformed(e, prefix=f"0.timeSeries.{TEMPERATURE_SERIES_INDEX}") from e

    return report, series


def _find_area(series: TemperatureSeries, area_code: str) -> AreaTemperatures:
    for entry in series.areas:
        if entry.area.code == area_code:
            return entry
    logger.debug(
        "known area codes: %s", ", ".join(a.area.code for a in series.areas)
    )
    raise AreaNotFound(area_code)


def _parse_temps(entry: AreaTemperatures) -> list[float]:
    try:
        raw_temps = _TEMPS.validate_python(entry.temps)
    except ValidationError as e:
        raise _malformed(e, prefix="temps") from e

    temps: list[float] = []
    for i, raw in enumerate(raw_temps):
        try:
            value = float(raw)
        except ValueError:
            raise MalformedData(f"temps.{i}", f"not a number: {raw!r}") from None
        if not math.isfinite(value):
            raise MalformedData(f"temps.{i}", f"not a finite number: {raw!r}")
        temps.append(value)
    return temps


def _parse_instant(value: str, field: str) -> datetime:
    try:
        dt = datetime.fromisoformat(value)
    except (ValueError, TypeError):
        raise InvalidTimestamp(field, value) from None
    if dt.tzinfo is None:
        raise InvalidTimestamp(field, value)
    return dt


def _malformed(error: ValidationError, prefix: str) -> MalformedData:
    first = error.errors()[0]
    loc = ".".join(str(p) for p in (prefix, *first["loc"]))
    return MalformedData(loc, first["msg"])
