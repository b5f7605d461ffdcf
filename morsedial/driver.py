import asyncio
import math
from typing import Callable, Optional, Sequence

from .logger import Log
from .morser import encode, total_duration
from .player import Pacer, Player
from .selector import NO_SELECTION, selection

START_DELAY_MS = 200
RETRY_MS = 1000


def check_unit(unit_ms) -> float:
    if isinstance(unit_ms, bool) or not isinstance(unit_ms, (int, float)):
        raise ValueError(f"Unit must be a number of milliseconds, got {unit_ms!r}")

    if not math.isfinite(unit_ms) or unit_ms <= 0:
        raise ValueError(f"Unit must be a positive finite number of milliseconds, got {unit_ms!r}")

    return unit_ms


class RepeatDriver:
    """
    Plays the selected word forever.

    Every cycle reads the vector and the word list again, so a change to
    either is picked up on the next repeat. An empty word list or an empty
    entry is reported to the diagnostic sink and retried after RETRY_MS.
    """

    def __init__(self, vector_source: Callable[[], Sequence], dictionary: Callable[[], Sequence[str]],
                 unit_ms, visual_sink, diagnostic_sink: Callable[[str], None],
                 pacer: Optional[Pacer] = None, start_delay_ms: float = START_DELAY_MS,
                 retry_ms: float = RETRY_MS):
        self.unit_ms = check_unit(unit_ms)
        self.vector_source = vector_source
        self.dictionary = dictionary
        self.visual_sink = visual_sink
        self.diagnostic_sink = diagnostic_sink
        self.pacer = pacer or Pacer()
        self.player = Player(visual_sink, self.pacer)
        self.start_delay_ms = start_delay_ms
        self.retry_ms = retry_ms
        self.loop: Optional[asyncio.AbstractEventLoop] = None
        self.running = False
        self.cycles = 0 # completed words

    async def run(self):
        self.loop = asyncio.get_running_loop()
        self.running = True
        Log.driver(f"Repeat loop started (unit {self.unit_ms}ms)")

        try:
            if not await self.pacer.sleep(self.start_delay_ms):
                return

            while not self.pacer.stopped:
                await self._cycle()
        finally:
            try:
                self.visual_sink.set_active(False)
            except Exception as e:
                Log.error(f"Failed to turn the lamp off: {e}")
            self.running = False
            Log.driver("Repeat loop stopped")

    def _report(self, text: str):
        try:
            self.diagnostic_sink(text)
        except Exception as e:
            Log.error(f"Failed to report status \"{text}\": {e}")

    async def _cycle(self):
        # any failure in a cycle is reported and retried, cancellation still goes through
        try:
            await self._play_selected()
        except Exception as e:
            Log.error(f"Error in repeat cycle: {e}")
            self._report(f"Input error: {e}")
            await self.pacer.sleep(self.retry_ms)

    async def _play_selected(self):
        values = self.vector_source()
        words = self.dictionary()

        h, index = selection(values, len(words))

        if index == NO_SELECTION:
            self._report("Dictionary empty (provide dict.csv / dict.json or a word list).")
            await self.pacer.sleep(self.retry_ms)
            return

        word = words[index]
        word = str(word).strip() if word is not None else ""

        if not word:
            self._report(f"No word at index {index}")
            await self.pacer.sleep(self.retry_ms)
            return

        pulses = encode(word.upper(), self.unit_ms)
        Log.select(f"hash=0x{h:08x} ({h}) index={index}")
        Log.morse(f"Playing \"{word}\" ({total_duration(pulses) / 1000:.1f}s)")

        if not await self.player.play(pulses):
            return

        self.cycles += 1
        await self.pacer.sleep(self.unit_ms * 7) # pause between repeats

    def stop(self):
        """Stop the loop. Safe to call from any thread."""
        loop = self.loop

        if loop is None or not loop.is_running():
            self.pacer.stop()
            return

        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None

        if running is loop:
            self.pacer.stop()
            return

        try:
            loop.call_soon_threadsafe(self.pacer.stop)
        except RuntimeError:
            # loop closed since the check above
            self.pacer.stop()
