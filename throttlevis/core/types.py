from enum import Enum
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict

class Severity(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    FAILURE = "failure"

class Snapshot(BaseModel):
    """
    Read-only view of bucket state handed to the presentation layer.
    """
    model_config = ConfigDict(frozen=True)

    level: float
    capacity: float
    last_sync_ts: int # epoch microseconds

    @property
    def fill_percentage(self) -> float:
        return (self.level / self.capacity) * 100 if self.capacity > 0 else 0.0

class LogEntry(BaseModel):
    """
    One user-facing outcome line.
    """
    model_config = ConfigDict(frozen=True)

    message: str
    severity: Severity = Severity.INFO
    timestamp: int # epoch microseconds

# --- Wire replies from the remote limiter ---

def _message_of(payload: Dict[str, Any]) -> str:
    message = payload.get("message")
    return "" if message is None else str(message)

class ConfigureReply(BaseModel):
    """
    Body of a configuration response. Rate is read from the variant's field name.
    """
    message: str = ""
    capacity: Optional[float] = None
    rate: Optional[float] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any], rate_field: str) -> "ConfigureReply":
        return cls.model_validate({
            "message": _message_of(payload),
            "capacity": payload.get("capacity"),
            "rate": payload.get(rate_field),
        })

class ActionReply(BaseModel):
    """
    Body of an action response. Level is read from the variant's current-level field.
    """
    message: str = ""
    level: Optional[float] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any], level_field: str) -> "ActionReply":
        return cls.model_validate({
            "message": _message_of(payload),
            "level": payload.get(level_field),
        })
