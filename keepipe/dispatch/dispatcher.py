"""Action dispatcher: renders each configured action and sends it if its
threshold allows.

Actions run in configured order and independently of one another. A
failed send is logged and recorded; the next action still runs.
"""

import logging
from collections.abc import Callable, Sequence
from datetime import datetime

from keepipe.config.schema import ActionConfig
from keepipe.dispatch.templating import MissingReportHour, render_command
from keepipe.execution.device_client import SendError
from keepipe.models.forecast import ResolvedForecast
from keepipe.models.reporting import ActionResult, ActionStatus

logger = logging.getLogger(__name__)

SendFn = Callable[[str, str], str]


def dispatch(
    resolved: ResolvedForecast,
    actions: Sequence[ActionConfig],
    send: SendFn,
    now: datetime,
    dry_run: bool = False,
) -> list[ActionResult]:
    results: list[ActionResult] = []
    for index, action in enumerate(actions):
        result = _run_action(index, resolved, action, send, now, dry_run)
        results.append(result)
    return results


def passes_thresholds(resolved: ResolvedForecast, action: ActionConfig) -> bool:
    """``lowest`` fires at or below it, ``highest`` at or above it."""
    if action.lowest is not None and resolved.temp_lowest > action.lowest:
        return False
    if action.highest is not None and resolved.temp_highest < action.highest:
        return False
    return True


def _run_action(
    index: int,
    resolved: ResolvedForecast,
    action: ActionConfig,
    send: SendFn,
    now: datetime,
    dry_run: bool,
) -> ActionResult:
    method = action.method.value
    try:
        command = render_command(
            action.command,
            resolved.temp_lowest,
            resolved.temp_highest,
            resolved.report_datetime,
            now,
        )
    except MissingReportHour:
        logger.warning(
            "Skipped action %d: no report time for {reportHour} in %r",
            index, action.command,
        )
        return ActionResult(
            index, method, action.command, ActionStatus.SKIPPED_TEMPLATE
        )

    if not passes_thresholds(resolved, action):
        logger.debug(
            "Action %d below threshold (lowest=%s highest=%s): %s",
            index, action.lowest, action.highest, command,
        )
        return ActionResult(index, method, command, ActionStatus.SKIPPED_THRESHOLD)

    logger.debug("command: %s %s", method, command)
    try:
        body = send(method, command)
    except SendError as e:
        logger.error("Action %d failed: %s", index, e)
        return ActionResult(
            index, method, command, ActionStatus.FAILED, error=str(e)
        )
    except Exception as e:
        logger.exception("Action %d failed unexpectedly", index)
        return ActionResult(
            index, method, command, ActionStatus.FAILED, error=str(e)
        )

    status = ActionStatus.DRY_RUN if dry_run else ActionStatus.SENT
    return ActionResult(index, method, command, status, response=body)
