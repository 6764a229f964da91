"""Host clock."""

from collections.abc import Callable
from datetime import UTC, datetime

from app.errors import HostUnavailableError


class SystemClock:
    """Wall clock returning naive UTC datetimes."""

    def __call__(self) -> datetime:
        return datetime.now(UTC).replace(tzinfo=None)


def read_clock(clock: Callable[[], datetime]) -> datetime:
    """Read the host clock, surfacing failures as HostUnavailableError."""
    try:
        now = clock()
    except Exception as e:
        raise HostUnavailableError(f"Clock unavailable: {e}") from e
    if now is None:
        raise HostUnavailableError("Clock returned no time")
    return now


def require_caller(caller: str | None) -> str:
    """Validate the host-supplied caller identity."""
    if caller is None or not str(caller).strip():
        raise HostUnavailableError("Caller identity unavailable")
    return str(caller)
