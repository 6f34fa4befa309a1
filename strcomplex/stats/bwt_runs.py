import numpy as np

from ..constants.constants import BWT_BLOCK_SIZE, SENTINEL
from ..models.text import Text


def count_bwt_runs(text: Text, sa: np.ndarray, block_size: int = BWT_BLOCK_SIZE) -> int:
    """
    Number of positions i in [1, n) with BWT[i] != BWT[i-1], not counting the
    boundary that leaves the sentinel (BWT[i-1] == 0).

    BWT[i] = T[SA[i] - 1], and T[n - 1] when SA[i] == 0. The BWT is evaluated
    block by block, with the last symbol of each block carried over.
    """
    symbols = text.getArray()
    n = len(sa)
    if n < 2:
        return 0

    r = 0
    last = None
    for start in range(0, n, block_size):
        positions = np.asarray(sa[start:start + block_size], dtype=np.int64)
        # position 0 wraps around to the sentinel at n - 1
        block = symbols[positions - 1]
        if last is not None:
            block = np.concatenate(([last], block))
        prev, cur = block[:-1], block[1:]
        r += int(np.count_nonzero((prev != SENTINEL) & (cur != prev)))
        last = block[-1]
    return r
