"""
Throttling Visualizer

Local simulation of token bucket and leaky bucket limiters, reconciled
against a remote authoritative limiter.
"""
from .core.config import VisualizerConfig
from .core.errors import (
    CallInProgress,
    IncompleteResponse,
    InvalidConfiguration,
    NetworkUnavailable,
    NotConfigured,
    RemoteRejected,
    ThrottleVisError,
    UnknownAlgorithm,
)
from .core.types import LogEntry, Severity, Snapshot
from .limiter import AlgorithmKind, AlgorithmProfile, RateLimiterModel, get_profile
from .client import ReconciliationClient, SimulationScheduler, SyncFailure, SyncResult, SyncSuccess
from .presentation import ConsoleAdapter, PresentationAdapter
from .session import SessionState, VisualizerSession

__all__ = [
    "VisualizerConfig",
    "CallInProgress",
    "IncompleteResponse",
    "InvalidConfiguration",
    "NetworkUnavailable",
    "NotConfigured",
    "RemoteRejected",
    "ThrottleVisError",
    "UnknownAlgorithm",
    "LogEntry",
    "Severity",
    "Snapshot",
    "AlgorithmKind",
    "AlgorithmProfile",
    "RateLimiterModel",
    "get_profile",
    "ReconciliationClient",
    "SimulationScheduler",
    "SyncFailure",
    "SyncResult",
    "SyncSuccess",
    "ConsoleAdapter",
    "PresentationAdapter",
    "SessionState",
    "VisualizerSession",
]
