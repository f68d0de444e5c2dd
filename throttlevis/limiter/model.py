import math
import numbers
from ..core.clock import Clock
from ..core.errors import InvalidConfiguration
from ..core.types import Snapshot
from .profile import AlgorithmProfile, Direction, InitialLevelPolicy

def validate_parameters(capacity: float, rate_per_second: float):
    """
    Raises InvalidConfiguration unless capacity > 0 and rate >= 0.
    """
    if not (_is_number(capacity) and _is_number(rate_per_second)):
        raise InvalidConfiguration(f"Capacity and rate must be numbers, got {capacity!r} and {rate_per_second!r}.")
    if not (math.isfinite(capacity) and math.isfinite(rate_per_second)):
        raise InvalidConfiguration("Capacity and rate must be finite numbers.")
    if capacity <= 0:
        raise InvalidConfiguration(f"Capacity must be a positive number, got {capacity}.")
    if rate_per_second < 0:
        raise InvalidConfiguration(f"Rate must be a non-negative number, got {rate_per_second}.")

def validate_request(capacity: float, rate_per_second: float):
    """
    Client-side check before a configuration request: the remote limiter
    only accepts an integral capacity.
    """
    validate_parameters(capacity, rate_per_second)
    if not float(capacity).is_integer():
        raise InvalidConfiguration(f"Capacity must be a whole number, got {capacity}.")

def _is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)

class RateLimiterModel:
    """
    Local approximation of one remote bucket.
    Invariant: 0 <= level <= capacity after every mutation.
    """
    def __init__(self, direction: Direction):
        self.direction = direction
        self.capacity = 0.0
        self.rate_per_second = 0.0
        self.level = 0.0
        self.last_sync_ts = 0 # epoch microseconds

    @classmethod
    def configured(cls, profile: AlgorithmProfile, capacity: float,
                   rate_per_second: float, now: int) -> "RateLimiterModel":
        """
        Builds a fresh model for a successful configuration exchange.
        """
        model = cls(profile.direction)
        model.reconfigure(capacity, rate_per_second, profile.initial_level_policy, now)
        return model

    def evolve(self, now: int):
        """
        Refill (increasing) or leak (decreasing) for the time since the last sync.
        """
        delta = Clock.elapsed_seconds(self.last_sync_ts, now) * self.rate_per_second

        if self.direction is Direction.INCREASING:
            self.level = min(self.capacity, self.level + delta)
        else:
            self.level = max(0.0, self.level - delta)
        # Never rewound, so a clock that jumps back cannot count time twice.
        self.last_sync_ts = max(self.last_sync_ts, now)

    def reconfigure(self, capacity: float, rate_per_second: float,
                    initial_level_policy: InitialLevelPolicy, now: int):
        validate_parameters(capacity, rate_per_second)

        self.capacity = float(capacity)
        self.rate_per_second = float(rate_per_second)
        if initial_level_policy is InitialLevelPolicy.FULL_ON_CONFIGURE:
            self.level = self.capacity
        else:
            self.level = 0.0
        self.last_sync_ts = now

    def overwrite_level(self, server_level: float, now: int):
        """
        The remote limiter is the source of truth once it answers.
        """
        self.level = min(self.capacity, max(0.0, float(server_level)))
        self.last_sync_ts = now

    def snapshot(self) -> Snapshot:
        return Snapshot(level=self.level, capacity=self.capacity, last_sync_ts=self.last_sync_ts)
