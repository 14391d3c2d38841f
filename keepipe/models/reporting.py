"""Run reporting models."""

from dataclasses import dataclass, field
from enum import StrEnum

from keepipe.models.forecast import ResolvedForecast


class ActionStatus(StrEnum):
    SENT = "sent"
    DRY_RUN = "dry-run"
    SKIPPED_THRESHOLD = "skipped-threshold"
    SKIPPED_TEMPLATE = "skipped-template"
    FAILED = "failed"


@dataclass(frozen=True)
class ActionResult:
    index: int
    method: str
    command: str
    status: ActionStatus
    response: str = ""
    error: str = ""


@dataclass
class RunSummary:
    forecast: ResolvedForecast | None = None
    results: list[ActionResult] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    duration_seconds: float = 0.0

    def count(self, *statuses: ActionStatus) -> int:
        return sum(1 for r in self.results if r.status in statuses)

    @property
    def sent(self) -> int:
        return self.count(ActionStatus.SENT, ActionStatus.DRY_RUN)

    @property
    def skipped(self) -> int:
        return self.count(
            ActionStatus.SKIPPED_THRESHOLD, ActionStatus.SKIPPED_TEMPLATE
        )

    @property
    def failed(self) -> int:
        return self.count(ActionStatus.FAILED)
