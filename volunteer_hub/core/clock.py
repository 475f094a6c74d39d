"""UTC clock used by application services.

Services take a ``clock`` callable so tests can pin "now" without patching
the interpreter clock under a running event loop.
"""

from collections.abc import Callable
from datetime import UTC, datetime

type Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current timezone-aware UTC time."""
    return datetime.now(UTC)
