"""
Session-level orchestration.

A session is bound to one algorithm variant. It owns the current model
(through its ReconciliationClient), the periodic driver, the bounded
log history and the presentation subscribers. Nothing raised by the
core escapes a session call; every outcome becomes a LogEntry.
"""
from collections import deque
from enum import Enum
from typing import Callable, Deque, List, Optional, Union
import httpx
from .client.reconciliation import ReconciliationClient
from .client.result import SyncFailure, SyncResult
from .client.scheduler import SimulationScheduler
from .core.clock import Clock
from .core.config import VisualizerConfig
from .core.errors import (
    CallInProgress,
    InvalidConfiguration,
    NetworkUnavailable,
    NotConfigured,
    RemoteRejected,
    ThrottleVisError,
    UnknownAlgorithm,
)
from .core.logger import get_logger
from .core.types import LogEntry, Severity, Snapshot
from .limiter.model import validate_request
from .limiter.profile import AlgorithmKind, AlgorithmProfile, get_profile
from .presentation import PresentationAdapter

logger = get_logger("VisualizerSession")

class SessionState(str, Enum):
    UNCONFIGURED = "UNCONFIGURED"
    CONFIGURING = "CONFIGURING"
    CONFIGURED = "CONFIGURED"
    ACTION_IN_FLIGHT = "ACTION_IN_FLIGHT"
    FAILED = "FAILED" # no usable profile

class VisualizerSession:
    def __init__(self, algorithm: Union[AlgorithmKind, str],
                 config: Optional[VisualizerConfig] = None,
                 http_client: Optional[httpx.AsyncClient] = None,
                 clock: Callable[[], int] = Clock.now_epoch_us):
        self.config = config or VisualizerConfig()
        self.clock = clock
        self.history: Deque[LogEntry] = deque(maxlen=self.config.history_size)
        self._snapshot_subscribers: List[Callable[[Snapshot], None]] = []
        self._log_subscribers: List[Callable[[LogEntry], None]] = []
        self._in_flight = False

        self.client = ReconciliationClient(self.config.base_url, http_client,
                                           self.config.request_timeout, clock)
        self.scheduler = SimulationScheduler(self._publish_snapshot, self.config.tick_interval, clock)

        self.algorithm = algorithm
        self.profile: Optional[AlgorithmProfile] = None
        try:
            self.profile = get_profile(algorithm)
        except UnknownAlgorithm as e:
            self.state = SessionState.FAILED
            self._report(e)
        else:
            self.state = SessionState.UNCONFIGURED
            self._emit(f"{self.profile.title} interface initialized.")

    # --- Presentation contract ---

    def subscribe(self, on_snapshot: Callable[[Snapshot], None]) -> Callable[[], None]:
        self._snapshot_subscribers.append(on_snapshot)
        return lambda: self._snapshot_subscribers.remove(on_snapshot)

    def subscribe_log(self, on_entry: Callable[[LogEntry], None]) -> Callable[[], None]:
        self._log_subscribers.append(on_entry)
        return lambda: self._log_subscribers.remove(on_entry)

    def attach(self, adapter: PresentationAdapter):
        """
        Subscribes an adapter to both streams and replays the log history to it.
        """
        for entry in self.history:
            adapter.log(entry)
        self.subscribe(adapter.render)
        self.subscribe_log(adapter.log)

    def snapshot(self) -> Optional[Snapshot]:
        model = self.client.model
        return model.snapshot() if model is not None else None

    # --- User-triggered calls ---

    async def configure(self, capacity: float, rate: float) -> SyncResult:
        blocked = self._blocked(require_model=False)
        if blocked is not None:
            return blocked

        try:
            validate_request(capacity, rate)
        except InvalidConfiguration as e:
            self._emit("Please enter valid positive numbers for Capacity and Rate.", Severity.FAILURE)
            logger.warning("invalid_configuration", detail=str(e))
            return SyncFailure(e)

        previous_state = self.state
        self.state = SessionState.CONFIGURING
        self._in_flight = True
        self._emit(f"Attempting to configure {self.profile.kind.value} on server...")
        try:
            result = await self.client.configure(self.profile, capacity, rate)
        finally:
            self._in_flight = False

        if not result.ok:
            self.state = previous_state
            self._report(result.error, during="configuration")
            return result

        model = self.client.model
        self.scheduler.start(model)
        self.state = SessionState.CONFIGURED
        self._emit(f"Server Response: SUCCESS - {result.message}", Severity.SUCCESS)
        self._emit(f"{self.profile.title} configured on server: "
                   f"Capacity={model.capacity:g}, Rate={model.rate_per_second:g} per second.")
        self._publish_snapshot(model.snapshot())
        return result

    async def send_request(self) -> SyncResult:
        blocked = self._blocked(require_model=True)
        if blocked is not None:
            return blocked

        self.state = SessionState.ACTION_IN_FLIGHT
        self._in_flight = True
        self._emit(f"Attempting to {self.profile.action_text} via {self.client.endpoint(self.profile)}...")
        try:
            result = await self.client.perform_action(self.profile)
        finally:
            self._in_flight = False
            self.state = SessionState.CONFIGURED

        for warning in result.warnings:
            self._emit(f"Warning: {warning}", warning.severity)

        if result.stale:
            self._emit("Discarded response from a superseded configuration.")
        elif result.ok:
            self._emit(f"Server Response: SUCCESS (Status: {result.status_code}) - {result.message}",
                       Severity.SUCCESS)
        else:
            self._report(result.error)

        snapshot = self.snapshot()
        if snapshot is not None:
            self._publish_snapshot(snapshot)
        return result

    async def close(self):
        await self.scheduler.close()
        await self.client.aclose()

    async def __aenter__(self) -> "VisualizerSession":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    # --- Internals ---

    def _blocked(self, require_model: bool) -> Optional[SyncFailure]:
        if self.profile is None:
            error = UnknownAlgorithm(self.algorithm)
        elif self._in_flight:
            error = CallInProgress()
        elif require_model and self.client.model is None:
            error = NotConfigured()
        else:
            return None
        self._report(error)
        return SyncFailure(error)

    def _report(self, error: ThrottleVisError, during: str = ""):
        if isinstance(error, RemoteRejected):
            message = f"Server Response: FAILED (Status: {error.status_code}) - {error.message}"
        elif isinstance(error, NetworkUnavailable):
            context = f" during {during}" if during else ""
            message = f"Network Error{context}: {error}. Check API endpoint or server status."
        else:
            message = str(error)

        if error.fatal:
            logger.error("session_error", error=type(error).__name__, detail=str(error))
        else:
            logger.warning("session_error", error=type(error).__name__, detail=str(error))
        self._emit(message, error.severity)

    def _emit(self, message: str, severity: Severity = Severity.INFO):
        entry = LogEntry(message=message, severity=severity, timestamp=self.clock())
        self.history.append(entry)
        for subscriber in list(self._log_subscribers):
            subscriber(entry)

    def _publish_snapshot(self, snapshot: Snapshot):
        for subscriber in list(self._snapshot_subscribers):
            subscriber(snapshot)
