from throttlevis.core.clock import MICROSECONDS

class FakeClock:
    """
    Manually advanced epoch-microsecond clock.
    """
    def __init__(self, now_us: int = 1_700_000_000 * MICROSECONDS):
        self.now_us = now_us

    def __call__(self) -> int:
        return self.now_us

    def advance(self, seconds: float) -> int:
        self.now_us += int(seconds * MICROSECONDS)
        return self.now_us
