import asyncio
from typing import Callable, Optional
from ..core.clock import Clock
from ..core.logger import get_logger
from ..core.types import Snapshot
from ..limiter.model import RateLimiterModel

logger = get_logger("SimulationScheduler")

class SimulationScheduler:
    """
    Evolves the model on a fixed cadence, independent of in-flight calls.
    At most one periodic driver exists at a time.
    """
    def __init__(self, on_tick: Callable[[Snapshot], None],
                 interval: float = 0.1,
                 clock: Callable[[], int] = Clock.now_epoch_us):
        self.on_tick = on_tick
        self.interval = interval
        self.clock = clock
        self.model: Optional[RateLimiterModel] = None
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, model: RateLimiterModel):
        """
        Must be called from within a running event loop.
        """
        self.stop()
        self.model = model
        self._task = asyncio.get_running_loop().create_task(self._run(model))
        logger.info("scheduler_started", interval=self.interval)

    def stop(self):
        if self._task is None:
            return
        self._task.cancel()
        self._task = None
        logger.info("scheduler_stopped")

    async def close(self):
        """
        Stops and waits for the driver to finish unwinding.
        """
        task = self._task
        self.stop()
        if task is not None:
            try:
                await task
            except asyncio.CancelledError:
                pass

    def tick(self) -> Optional[Snapshot]:
        """
        One evolution step of the current model.
        """
        if self.model is None:
            return None
        return self._tick(self.model)

    def _tick(self, model: RateLimiterModel) -> Snapshot:
        model.evolve(self.clock())
        snapshot = model.snapshot()
        self.on_tick(snapshot)
        return snapshot

    async def _run(self, model: RateLimiterModel):
        while True:
            await asyncio.sleep(self.interval)
            try:
                self._tick(model)
            except Exception:
                # A broken subscriber must not stop the simulation.
                logger.exception("tick_failed")
