import sys
import threading
from typing import List, Optional

from .logger import Log
from .selector import normalize


class CounterBank:
    """The live input vector. Written by the shell, read by the driver."""

    def __init__(self, size: int = 5, values: Optional[List] = None, step: int = 1):
        if size < 1:
            raise ValueError("At least one input is required")

        self.size = size
        self.step = step
        self._lock = threading.Lock()
        self._values = [0] * size

        if values:
            for i, value in enumerate(normalize(values)[:size]):
                self._values[i] = value

    def read(self) -> List[int]:
        with self._lock:
            return list(self._values)

    def _check(self, index: int):
        # 1-based, like the labels in the shell
        if not 1 <= index <= self.size:
            raise IndexError(f"Input must be between 1 and {self.size}, got {index}")

    def set(self, index: int, value):
        self._check(index)
        with self._lock:
            self._values[index - 1] = normalize([value])[0]

    def change(self, index: int, delta: int):
        self._check(index)
        with self._lock:
            self._values[index - 1] += delta * self.step

    def reset(self):
        with self._lock:
            self._values = [0] * self.size

    __call__ = read


class TerminalLamp:
    ON = "●"
    OFF = "○"

    def __init__(self, enabled: bool = True, stream=None):
        self.enabled = enabled
        self.stream = stream or sys.stdout
        self.active = False

    def set_active(self, active: bool):
        active = bool(active)
        if active == self.active:
            return

        self.active = active

        if self.enabled:
            self.stream.write(f"\r{self.ON if active else self.OFF} ")
            self.stream.flush()


class StatusLine:
    def __init__(self):
        self.text = ""

    def __call__(self, text: str):
        if text == self.text:
            return

        self.text = text
        Log.status(text)
