"""
Error taxonomy for the visualizer core.

Every error is surfaced to the presentation layer as a log entry;
only UnknownAlgorithm ends the session.
"""
from typing import Optional
from .types import Severity

class ThrottleVisError(Exception):
    severity: Severity = Severity.FAILURE
    fatal: bool = False

class InvalidConfiguration(ThrottleVisError):
    """
    Capacity must be > 0 and rate must be >= 0. Raised before any network call.
    """

class UnknownAlgorithm(ThrottleVisError):
    fatal = True

    def __init__(self, selector):
        self.selector = selector
        super().__init__(f"Unknown algorithm: {selector!r}")

class NotConfigured(ThrottleVisError):
    def __init__(self, message: str = "Bucket not configured. Please configure it first."):
        super().__init__(message)

class CallInProgress(ThrottleVisError):
    def __init__(self, message: str = "Another request is still in flight."):
        super().__init__(message)

class NetworkUnavailable(ThrottleVisError):
    """
    Transport-level failure. Carries the underlying transport error.
    """
    def __init__(self, error: Exception):
        self.error = error
        super().__init__(str(error) or type(error).__name__)

class RemoteRejected(ThrottleVisError):
    """
    The remote limiter answered with a non-2xx status.
    """
    def __init__(self, status_code: int, message: str, level: Optional[float] = None):
        self.status_code = status_code
        self.message = message
        self.level = level
        super().__init__(f"Status {status_code}: {message}")

class IncompleteResponse(ThrottleVisError):
    severity = Severity.INFO

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Server response did not contain {field}.")
