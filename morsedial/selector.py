import math
from typing import Iterable, List, Tuple

FNV_OFFSET_BASIS = 0x811c9dc5
FNV_PRIME = 0x01000193

# returned when there is nothing to select from
NO_SELECTION = -1

KEY_SEPARATOR = ","


def _coerce(value) -> int:
    if isinstance(value, int):
        return int(value)

    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0

    if not math.isfinite(number):
        return 0

    return int(number) # truncates toward zero


def normalize(values: Iterable) -> List[int]:
    """Missing, unparsable and non-finite elements become 0, the rest are truncated."""
    return [_coerce(v) for v in values]


def canonical_key(values: Iterable) -> str:
    return KEY_SEPARATOR.join(str(v) for v in normalize(values))


def fnv1a32(data) -> int:
    """32-bit FNV-1a. Not a cryptographic hash."""
    if isinstance(data, str):
        data = data.encode("utf-8")

    h = FNV_OFFSET_BASIS
    for byte in data:
        h ^= byte
        h = (h * FNV_PRIME) & 0xFFFFFFFF
    return h


def selection(values: Iterable, size: int) -> Tuple[int, int]:
    """
    Hash the ordered vector and map it into [0, size).
    Returns (hash, index); index is NO_SELECTION when size is 0.
    """
    h = fnv1a32(canonical_key(values))

    if size <= 0:
        return h, NO_SELECTION

    return h, h % size


def select(values: Iterable, size: int) -> int:
    return selection(values, size)[1]
