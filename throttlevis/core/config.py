import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "http://localhost:8888"

@dataclass(frozen=True)
class VisualizerConfig:
    """
    Immutable settings for one visualizer session.
    """
    base_url: str = DEFAULT_BASE_URL
    tick_interval: float = 0.1      # seconds between local evolution ticks
    request_timeout: float = 5.0    # handed to the HTTP transport, never retried
    history_size: int = 50          # user-facing log entries kept
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, **overrides) -> "VisualizerConfig":
        """
        Reads THROTTLEVIS_* variables. Explicit (non-None) overrides win.
        """
        values = {
            "base_url": os.environ.get("THROTTLEVIS_BASE_URL", DEFAULT_BASE_URL),
            "tick_interval": float(os.environ.get("THROTTLEVIS_TICK_INTERVAL", 0.1)),
            "request_timeout": float(os.environ.get("THROTTLEVIS_REQUEST_TIMEOUT", 5.0)),
            "log_level": os.environ.get("THROTTLEVIS_LOG_LEVEL", "INFO"),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
