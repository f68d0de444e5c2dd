import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO
from .core.clock import Clock, MICROSECONDS
from .core.types import LogEntry, Snapshot
from .limiter.profile import AlgorithmProfile

class PresentationAdapter(ABC):
    """
    Consumer of read-only snapshots and log entries.
    Must never mutate the model.
    """

    @abstractmethod
    def render(self, snapshot: Snapshot):
        """
        Called after every tick and after every configuration/action outcome.
        """
        pass

    @abstractmethod
    def log(self, entry: LogEntry):
        pass

class ConsoleAdapter(PresentationAdapter):
    """
    Plain-text renderer used by the command line.
    Between log entries, prints at most one bucket line per `min_interval`
    seconds of bucket time.
    """
    def __init__(self, profile: AlgorithmProfile, stream: Optional[TextIO] = None,
                 min_interval: float = 1.0, width: int = 30):
        self.profile = profile
        self.stream = stream if stream is not None else sys.stdout
        self.min_interval_us = int(min_interval * MICROSECONDS)
        self.width = width
        self._last_rendered_ts: Optional[int] = None

    def render(self, snapshot: Snapshot):
        if (self._last_rendered_ts is not None
                and snapshot.last_sync_ts - self._last_rendered_ts < self.min_interval_us):
            return
        self._last_rendered_ts = snapshot.last_sync_ts
        print(self.format_snapshot(snapshot), file=self.stream)

    def log(self, entry: LogEntry):
        # Outcomes are followed by the snapshot that reflects them; let it through.
        self._last_rendered_ts = None
        print(f"[{Clock.format_local(entry.timestamp)}] {entry.severity.value.upper():<7} {entry.message}",
              file=self.stream)

    def header(self, capacity: float, rate: float) -> str:
        """
        Title block describing the variant and the requested parameters.
        """
        profile = self.profile
        return "\n".join([
            f"=== {profile.title} ===",
            profile.description,
            f"{profile.capacity_label}: {capacity:g}",
            f"{profile.rate_label}: {rate:g}",
            f"Actions: {profile.configure_text}, then {profile.request_text}",
        ])

    def print_header(self, capacity: float, rate: float):
        print(self.header(capacity, rate), file=self.stream)

    def format_snapshot(self, snapshot: Snapshot) -> str:
        filled = round(snapshot.fill_percentage / 100 * self.width)
        bar = "#" * filled + "-" * (self.width - filled)
        return (f"[{bar}] {self.profile.current_label}: {snapshot.level:.2f} / {snapshot.capacity:g}"
                f" | {self.profile.last_update_label}: {Clock.format_local(snapshot.last_sync_ts)}")
