import os
import tempfile
from typing import Dict, Optional

import numpy as np

from .int_vector import load_int_vector, store_int_vector


class CacheConfig:
    """
    Scoped on-disk cache for the arrays of one run.

    Arrays are stored as ``.npy`` files in a private temporary directory and
    handed back memory-mapped. Files registered from outside (precomputed
    arrays given on the command line) are read but never deleted. Leaving the
    ``with`` block removes the directory and everything in it, on every exit
    path.
    """
    def __init__(self, directory: Optional[str] = None):
        self._tmp = tempfile.TemporaryDirectory(prefix="strcomplex-", dir=directory)
        self.directory = self._tmp.name
        self.file_map: Dict[str, str] = {}
        self.owned = set()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.cleanup()
        return False

    def cache_file_name(self, key: str) -> str:
        return os.path.join(self.directory, f"{key}.npy")

    def store(self, key: str, values) -> str:
        path = store_int_vector(self.cache_file_name(key), values)
        self.file_map[key] = path
        self.owned.add(key)
        return path

    def register(self, key: str, path: str):
        self.file_map[key] = path
        self.owned.discard(key)

    def contains(self, key: str) -> bool:
        return key in self.file_map

    def load(self, key: str) -> np.ndarray:
        return load_int_vector(self.file_map[key])

    def remove(self, key: str):
        path = self.file_map.pop(key, None)
        if path is not None and key in self.owned:
            self.owned.discard(key)
            os.remove(path)

    def cleanup(self):
        self.file_map.clear()
        self.owned.clear()
        self._tmp.cleanup()
