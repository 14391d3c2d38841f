"""Output formatters for forecasts and run summaries."""

from keepipe.dispatch.templating import format_temperature
from keepipe.models.forecast import ResolvedForecast
from keepipe.models.reporting import RunSummary


def format_forecast_text(f: ResolvedForecast) -> str:
    """The --verbose block printed once the run has finished."""
    report = f.report_datetime.isoformat() if f.report_datetime else "unknown"
    return "\n".join([
        f"report datetime: {report}",
        f"area: {f.area_name}",
        f"  lowest: {format_temperature(f.temp_lowest)}",
        f"  highest: {format_temperature(f.temp_highest)}",
    ])


def format_summary_text(s: RunSummary) -> str:
    """Plain text summary for logging."""
    parts = [
        f"Actions: {len(s.results)} configured, {s.sent} sent, "
        f"{s.skipped} skipped, {s.failed} failed",
    ]
    if s.errors:
        parts.append(f"Errors: {len(s.errors)}")
    parts.append(f"Duration: {s.duration_seconds:.1f}s")
    return " | ".join(parts)
