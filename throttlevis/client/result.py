"""
Outcome of one remote call.

Results are never stored; the session turns them into log entries
and the client has already applied any level they carry.
"""
from dataclasses import dataclass
from typing import Optional, Tuple, Union
from ..core.errors import ThrottleVisError

@dataclass(frozen=True)
class SyncSuccess:
    message: str
    status_code: int
    level: Optional[float] = None
    warnings: Tuple[ThrottleVisError, ...] = ()
    stale: bool = False # answered after a newer configuration took over; not applied

    ok = True

@dataclass(frozen=True)
class SyncFailure:
    error: ThrottleVisError
    warnings: Tuple[ThrottleVisError, ...] = ()
    stale: bool = False

    ok = False

    @property
    def reason(self) -> str:
        return str(self.error)

SyncResult = Union[SyncSuccess, SyncFailure]
