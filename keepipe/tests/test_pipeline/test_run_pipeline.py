"""Tests for the run pipeline with mocked collaborators."""

from unittest.mock import MagicMock

from keepipe.execution.device_client import DeviceClient, SendError
from keepipe.execution.dry_run import DryRunDevice
from keepipe.ingest.jma_client import FetchError, JmaClient
from keepipe.models.reporting import ActionStatus
from keepipe.pipeline.run_pipeline import KeepipePipeline
from keepipe.tests.conftest import make_document


def _jma(document) -> MagicMock:
    mock_jma = MagicMock(spec=JmaClient)
    mock_jma.get_forecast.return_value = document
    return mock_jma


class TestKeepipePipeline:
    def test_full_run(self, config, jma_document, morning):
        device = MagicMock(spec=DeviceClient)
        device.send.return_value = "ok"

        pipeline = KeepipePipeline(config, jma_client=_jma(jma_document), device=device)
        summary = pipeline.run(now=morning)

        assert summary.errors == []
        assert summary.forecast.temp_lowest == -1.0
        assert summary.sent == 3
        assert summary.skipped == 1
        assert summary.failed == 0
        assert device.send.call_count == 3

    def test_fetch_error_skips_dispatch(self, config, morning):
        mock_jma = MagicMock(spec=JmaClient)
        mock_jma.get_forecast.side_effect = FetchError("HTTP 503", 503)
        device = MagicMock(spec=DeviceClient)

        summary = KeepipePipeline(config, jma_client=mock_jma, device=device).run(now=morning)

        assert summary.forecast is None
        assert summary.results == []
        assert summary.errors[0].startswith("fetch:")
        device.send.assert_not_called()

    def test_resolution_error_skips_dispatch(self, config, morning):
        document = make_document(["2024-01-24T00:00:00+09:00"], ["-1"])
        device = MagicMock(spec=DeviceClient)

        summary = KeepipePipeline(
            config, jma_client=_jma(document), device=device
        ).run(now=morning)

        assert summary.forecast is None
        assert summary.errors[0].startswith("resolve:")
        device.send.assert_not_called()

    def test_send_failure_recorded(self, config, jma_document, morning):
        device = MagicMock(spec=DeviceClient)
        device.send.side_effect = ["ok", SendError("HTTP 500", 500), "ok"]

        summary = KeepipePipeline(
            config, jma_client=_jma(jma_document), device=device
        ).run(now=morning)

        assert summary.errors == []
        assert summary.failed == 1
        assert summary.sent == 2
        assert summary.results[2].status == ActionStatus.SENT

    def test_dry_run_uses_dry_run_device(self, config, jma_document, morning):
        pipeline = KeepipePipeline(config, jma_client=_jma(jma_document), dry_run=True)
        assert isinstance(pipeline.device, DryRunDevice)

        summary = pipeline.run(now=morning)
        assert summary.count(ActionStatus.DRY_RUN) == 3

    def test_default_device(self, config):
        pipeline = KeepipePipeline(config)
        assert type(pipeline.device) is DeviceClient
        assert pipeline.device.base_url == "http://wifidigit.test"
