from typing import Optional

import numpy as np

from ..constants.constants import KEY_LCP
from ..errors import InvalidIndexError
from ..models.text import Text
from .cache import CacheConfig
from .int_vector import load_int_vector


def build_lcp(text: bytes, sa) -> np.ndarray:
    """
    LCP array with the PHI algorithm.

    phi[SA[i]] = SA[i-1] links every suffix to its predecessor in SA order.
    The permuted LCP is then filled in text order, where the match length
    drops by at most one from one position to the next, so the total number
    of symbol comparisons is O(n).
    """
    n = len(sa)
    if n == 0:
        return np.empty(0, dtype=np.int64)

    order = sa.tolist() if hasattr(sa, "tolist") else list(sa)
    phi = [0] * n
    phi[order[0]] = -1
    for i in range(1, n):
        phi[order[i]] = order[i - 1]

    plcp = [0] * n
    l = 0
    for i in range(n):
        j = phi[i]
        if j < 0:
            l = 0
            continue
        while i + l < n and j + l < n and text[i + l] == text[j + l]:
            l += 1
        plcp[i] = l
        if l > 0:
            l -= 1

    lcp = np.asarray(plcp, dtype=np.int64)[np.asarray(order, dtype=np.int64)]
    lcp[0] = 0
    return lcp


class LcpProvider:
    def __init__(self, cache: CacheConfig):
        self.cache = cache

    def getLcp(self, text: Text, sa: np.ndarray, path: Optional[str] = None) -> np.ndarray:
        if path:
            lcp = load_int_vector(path)
            if len(lcp) != text.n:
                raise InvalidIndexError(f"LCP array {path} has {len(lcp)} entries, the text has {text.n}")
            self.cache.register(KEY_LCP, path)
            return lcp

        if not self.cache.contains(KEY_LCP):
            self.cache.store(KEY_LCP, build_lcp(text.getBytes(), sa))
        return self.cache.load(KEY_LCP)

    def release(self):
        self.cache.remove(KEY_LCP)
