import re
import string
from types import MappingProxyType
from typing import List, NamedTuple

import morse_talk as mtalk


class Pulse(NamedTuple):
    on: bool
    duration_ms: float


def _build_symbols():
    # letters and digits only, anything else is played as a gap
    table = {}
    for char in string.ascii_lowercase + string.digits:
        table[char] = mtalk.encode(char.upper()).strip()
    return MappingProxyType(table)


SYMBOLS = _build_symbols()

_WORD_SPLIT = re.compile(r"\s+")


def morse_timings(unit_ms):
    dot = unit_ms
    dash = unit_ms * 3
    intra_char = unit_ms
    inter_char = unit_ms * 3
    inter_word = unit_ms * 7
    return dot, dash, intra_char, inter_char, inter_word


def encode(text: str, unit_ms) -> List[Pulse]:
    """
    Turn text into an ordered list of on/off pulses.

    Every mapped character emits (mark, gap) pairs followed by a letter gap,
    an unmapped character emits a single letter-length gap instead, and
    consecutive words are separated by an extra word gap. The unit is not
    validated here.
    """
    dot, dash, intra, inter, word_gap = morse_timings(unit_ms)
    pulses = []

    words = _WORD_SPLIT.split(text)

    for wi, word in enumerate(words):
        for char in word:
            code = SYMBOLS.get(char.lower())

            if not code:
                pulses.append(Pulse(False, inter))
                continue

            for symbol in code:
                if symbol == ".":
                    pulses.append(Pulse(True, dot))
                else:
                    pulses.append(Pulse(True, dash))
                pulses.append(Pulse(False, intra))

            pulses.append(Pulse(False, inter)) # space between letters

        if wi < len(words) - 1:
            pulses.append(Pulse(False, word_gap)) # space between words

    return pulses


def total_duration(pulses: List[Pulse]) -> float:
    return sum(p.duration_ms for p in pulses)
