"""Dry-run device: logs the request it would make, sends nothing."""

import logging

from keepipe.execution.device_client import DeviceClient

logger = logging.getLogger(__name__)


class DryRunDevice(DeviceClient):
    def send(self, method: str, command: str) -> str:
        logger.info("DRY-RUN: %s %s", method.upper(), self.url_for(command))
        return ""
