import asyncio
from typing import Awaitable, Callable, Iterable, Optional

from .morser import Pulse


class Pacer:
    """
    The only place the loop suspends. Every pause observes the stop token,
    so a stop request cuts the current pause short.

    `sleep` replaces the real wait (takes seconds), tests use it to record
    the requested durations instead of waiting.
    """

    def __init__(self, sleep: Optional[Callable[[float], Awaitable]] = None):
        self._sleep = sleep
        self._stop_event: Optional[asyncio.Event] = None
        self._stopped = False

    @property
    def stopped(self) -> bool:
        return self._stopped

    def _event(self) -> asyncio.Event:
        # created lazily so it belongs to the running loop
        if self._stop_event is None:
            self._stop_event = asyncio.Event()
            if self._stopped:
                self._stop_event.set()
        return self._stop_event

    def stop(self):
        self._stopped = True
        if self._stop_event is not None:
            self._stop_event.set()

    async def sleep(self, ms) -> bool:
        """Pause for `ms` milliseconds. Returns False if stopped before or during the pause."""
        if self._stopped:
            return False

        if self._sleep is not None:
            await self._sleep(ms / 1000)
            return not self._stopped

        try:
            await asyncio.wait_for(self._event().wait(), timeout=ms / 1000)
        except asyncio.TimeoutError:
            pass

        return not self._stopped


class Player:
    def __init__(self, sink, pacer: Optional[Pacer] = None):
        self.sink = sink
        self.pacer = pacer or Pacer()

    async def play(self, pulses: Iterable[Pulse]) -> bool:
        """
        Drive the sink through the pulses in order, one pause per pulse.
        The sink always ends up off, whichever pulse was in flight when
        playback stopped or the task was cancelled.
        Returns True if the whole sequence was played.
        """
        try:
            for pulse in pulses:
                if self.pacer.stopped:
                    return False

                self.sink.set_active(pulse.on)

                if not await self.pacer.sleep(pulse.duration_ms):
                    return False
            return True
        finally:
            self.sink.set_active(False)
