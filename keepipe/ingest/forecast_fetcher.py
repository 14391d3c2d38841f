"""Forecast fetcher: retrieves a JMA forecast and resolves it for a query."""

import logging
from datetime import datetime

from keepipe.ingest.forecast_resolver import resolve
from keepipe.ingest.jma_client import JmaClient
from keepipe.models.forecast import ForecastQuery, ResolvedForecast

logger = logging.getLogger(__name__)


class ForecastFetcher:
    def __init__(self, jma_client: JmaClient):
        self.jma = jma_client

    def fetch(self, query: ForecastQuery, now: datetime) -> ResolvedForecast:
        """Fetch the office forecast and extract the sub-area temperatures.

        FetchError and ResolutionError propagate to the caller.
        """
        raw = self.jma.get_forecast(query.office_code)
        forecast = resolve(query, raw, now)
        logger.info(
            "Forecast %s (%s): lowest %s, highest %s, reported %s",
            forecast.area_name,
            forecast.area_code,
            forecast.temp_lowest,
            forecast.temp_highest,
            forecast.report_datetime.isoformat() if forecast.report_datetime else "-",
        )
        return forecast
