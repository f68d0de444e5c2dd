import time
from datetime import datetime
from typing import Final

# Enforce int64 microsecond precision
MICROSECONDS: Final[int] = 1_000_000

class Clock:
    """
    Authoritative local clock source.
    All bucket timestamps are integer microseconds since the epoch.
    """

    @staticmethod
    def now_epoch_us() -> int:
        """
        Returns current epoch time in microseconds (int64).
        This is the time domain of lastSyncTimestamp.
        """
        return time.time_ns() // 1000

    @staticmethod
    def elapsed_seconds(start_us: int, end_us: int) -> float:
        """
        Seconds between two timestamps of the same domain.
        A clock that appears to move backward yields 0.
        """
        return max(0, end_us - start_us) / MICROSECONDS

    @staticmethod
    def format_local(ts_us: int) -> str:
        """
        Human-readable local time of day, for display only.
        """
        return datetime.fromtimestamp(ts_us / MICROSECONDS).strftime("%H:%M:%S")
