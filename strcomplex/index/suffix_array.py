from typing import Optional

import numpy as np

from ..constants.constants import KEY_ISA, KEY_SA
from ..errors import InvalidIndexError
from ..models.text import Text
from .cache import CacheConfig
from .int_vector import load_int_vector


def build_suffix_array(text: np.ndarray) -> np.ndarray:
    """
    Prefix doubling over rank pairs.

    After the round with offset k every suffix is ranked by its first 2k
    symbols; a suffix that runs out of symbols gets -1 as its second key so it
    sorts first. Stops as soon as all ranks are distinct, which the unique
    sentinel guarantees eventually.
    """
    n = text.size
    if n == 0:
        return np.empty(0, dtype=np.int64)

    rank = text.astype(np.int64)
    second = np.empty(n, dtype=np.int64)
    k = 1
    while True:
        second.fill(-1)
        if k < n:
            second[:n - k] = rank[k:]
        sa = np.lexsort((second, rank))

        r, s = rank[sa], second[sa]
        boundary = np.empty(n, dtype=np.int64)
        boundary[0] = 0
        boundary[1:] = (r[1:] != r[:-1]) | (s[1:] != s[:-1])
        rank = np.empty(n, dtype=np.int64)
        rank[sa] = np.cumsum(boundary)

        if rank[sa[-1]] == n - 1:
            return sa.astype(np.int64)
        k <<= 1


def inverse_suffix_array(sa: np.ndarray) -> np.ndarray:
    isa = np.empty(len(sa), dtype=np.int64)
    isa[sa] = np.arange(len(sa), dtype=np.int64)
    return isa


def check_permutation(values: np.ndarray, n: int, what: str):
    if len(values) != n:
        raise InvalidIndexError(f"{what} has {len(values)} entries, the text has {n}")
    if n and (values.min() < 0 or values.max() >= n or np.bincount(values, minlength=n).max() != 1):
        raise InvalidIndexError(f"{what} is not a permutation of the text positions")


class SuffixArrayProvider:
    """
    Builds or loads the suffix array of a text and derives the inverse suffix
    array from it. Both live in the run cache; the SA is additionally kept in
    RAM since every later stage reads it.
    """
    def __init__(self, cache: CacheConfig):
        self.cache = cache

    def getSuffixArray(self, text: Text, path: Optional[str] = None) -> np.ndarray:
        if path:
            sa = np.asarray(load_int_vector(path), dtype=np.int64)
            check_permutation(sa, text.n, f"suffix array {path}")
            self.cache.register(KEY_SA, path)
            return sa

        self.cache.store(KEY_SA, build_suffix_array(text.getArray()))
        return np.array(self.cache.load(KEY_SA), dtype=np.int64)

    def getInverseSuffixArray(self, sa: np.ndarray) -> np.ndarray:
        if not self.cache.contains(KEY_ISA):
            self.cache.store(KEY_ISA, inverse_suffix_array(sa))
        return self.cache.load(KEY_ISA)

    def releaseInverse(self):
        self.cache.remove(KEY_ISA)

    def release(self):
        self.releaseInverse()
        self.cache.remove(KEY_SA)
