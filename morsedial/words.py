import csv
import json
import os
import threading
from typing import List, Optional, Sequence

from .logger import Log

DEFAULT_CANDIDATES = ("dict.csv", "dict.json")


def _clean(words) -> List[str]:
    return [str(w).strip() for w in words if w is not None and str(w).strip()]


def load_words(path: str) -> List[str]:
    """
    Read a word list. `.csv` takes the first column of each row, `.json` an
    array of strings, anything else one word per line.
    Lines starting with '#' are skipped in text files.
    """
    ext = os.path.splitext(path)[1].lower()

    with open(path, "r", encoding="utf-8") as f:
        if ext == ".csv":
            return _clean(row[0] for row in csv.reader(f) if row)

        if ext == ".json":
            data = json.load(f)
            if not isinstance(data, list):
                raise ValueError(f"{path}: expected a JSON array of words")
            # kept as-is so indexes line up with the file, blanks included
            return ["" if w is None else str(w).strip() for w in data]

        return _clean(line for line in f if not line.lstrip().startswith("#"))


def find_dictionary(candidates: Sequence[str] = DEFAULT_CANDIDATES, base_dir: str = ".") -> Optional[str]:
    for name in candidates:
        path = os.path.join(base_dir, name)
        if os.path.isfile(path):
            return path
    return None


class WordList:
    def __init__(self, path: Optional[str] = None):
        self.path = path
        self._lock = threading.Lock()
        self._words: List[str] = []

    def reload(self) -> int:
        if not self.path:
            Log.warning("No word list configured, dictionary is empty")
            words = []
        else:
            try:
                words = load_words(self.path)
                Log.success(f"Loaded {len(words)} word(s) from {self.path}")
            except (OSError, ValueError, csv.Error) as e:
                Log.error(f"Failed to load word list {self.path}: {e}")
                words = []

        with self._lock:
            self._words = words
        return len(words)

    def words(self) -> List[str]:
        with self._lock:
            return self._words

    __call__ = words

    def __len__(self):
        return len(self.words())
