from .result import SyncFailure, SyncResult, SyncSuccess
from .reconciliation import ReconciliationClient
from .scheduler import SimulationScheduler

__all__ = [
    "SyncFailure",
    "SyncResult",
    "SyncSuccess",
    "ReconciliationClient",
    "SimulationScheduler",
]
