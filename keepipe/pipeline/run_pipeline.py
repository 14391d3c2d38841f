"""Run pipeline: one forecast fetch followed by the configured actions."""

import logging
import time
from datetime import datetime

from keepipe.config.schema import KeepipeConfig
from keepipe.dispatch.dispatcher import dispatch
from keepipe.execution.device_client import DeviceClient
from keepipe.execution.dry_run import DryRunDevice
from keepipe.ingest.forecast_fetcher import ForecastFetcher
from keepipe.ingest.forecast_resolver import ResolutionError
from keepipe.ingest.jma_client import FetchError, JmaClient
from keepipe.models.common import local_now
from keepipe.models.forecast import ForecastQuery
from keepipe.models.reporting import RunSummary
from keepipe.reporting.formatters import format_summary_text

logger = logging.getLogger(__name__)


class KeepipePipeline:
    def __init__(
        self,
        config: KeepipeConfig,
        jma_client: JmaClient | None = None,
        device: DeviceClient | None = None,
        dry_run: bool = False,
    ):
        self.config = config
        self.dry_run = dry_run
        self.jma = jma_client or JmaClient()
        if device is None:
            device_cls = DryRunDevice if dry_run else DeviceClient
            device = device_cls(config.wifidigit.url)
        self.device = device

    def run(self, now: datetime | None = None) -> RunSummary:
        """Fetch, resolve and dispatch once.

        A fetch or resolution failure ends the run before any action is
        sent; it is recorded in ``summary.errors``.
        """
        start_time = time.monotonic()
        if now is None:
            now = local_now()
        summary = RunSummary()

        query = ForecastQuery.from_area(self.config.area)
        logger.debug("query: %s", query)
        fetcher = ForecastFetcher(self.jma)
        try:
            summary.forecast = fetcher.fetch(query, now)
        except FetchError as e:
            logger.error("Failed to fetch forecast for %s: %s", query.office_code, e)
            summary.errors.append(f"fetch: {e}")
        except ResolutionError as e:
            logger.error(
                "Failed to resolve temperatures for %s/%s: %s",
                query.office_code, query.sub_area_code, e,
            )
            summary.errors.append(f"resolve: {e}")

        if summary.forecast is not None:
            summary.results = dispatch(
                summary.forecast,
                self.config.actions,
                self.device.send,
                now,
                dry_run=self.dry_run,
            )

        summary.duration_seconds = time.monotonic() - start_time
        logger.info(format_summary_text(summary))
        return summary
