"""Clock helpers shared across models."""

from datetime import datetime


def local_now() -> datetime:
    """Current wall time as an aware datetime in the system timezone."""
    return datetime.now().astimezone()
