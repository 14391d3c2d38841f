"""Command template placeholders."""

from datetime import datetime

TEMP_LOWEST = "{tempLowest}"
TEMP_HIGHEST = "{tempHighest}"
REPORT_HOUR = "{reportHour}"
NOW_HOUR = "{nowHour}"


class MissingReportHour(Exception):
    """The command needs {reportHour} but the forecast has no report time."""


def format_temperature(value: float) -> str:
    """Decimal text as the display expects it: ``-1``, ``0``, ``1.5``."""
    if value == 0:
        return "0"
    return f"{value:.15g}"


def hour12(dt: datetime) -> int:
    """Hour on a 12-hour clock, 1 to 12."""
    return dt.hour % 12 or 12


def render_command(
    template: str,
    temp_lowest: float,
    temp_highest: float,
    report_datetime: datetime | None,
    now: datetime,
) -> str:
    """Substitute placeholders. Absent placeholders leave the text unchanged."""
    command = template.replace(TEMP_LOWEST, format_temperature(temp_lowest))
    command = command.replace(TEMP_HIGHEST, format_temperature(temp_highest))
    if REPORT_HOUR in command:
        if report_datetime is None:
            raise MissingReportHour(template)
        command = command.replace(REPORT_HOUR, str(report_datetime.hour))
    if NOW_HOUR in command:
        command = command.replace(NOW_HOUR, str(hour12(now)))
    return command
