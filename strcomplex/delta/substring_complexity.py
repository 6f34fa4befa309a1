import numpy as np


def substring_complexity(lcp: np.ndarray) -> float:
    """
    delta = max over k >= 1 of D_k / k, D_k being the number of distinct
    length-k substrings.

    dk[l + 1] counts SA neighbours whose common prefix has length l. Reading
    the suffixes in SA order, each one contributes a new length-k substring
    unless it shares k symbols with its predecessor, which gives
    D_1 = dk[1] and D_k = D_{k-1} + dk[k] - 1, where the -1 drops the one
    suffix that is shorter than k. Substrings running into the sentinel are
    not counted. D_k is summed with integers and only the ratio is a double.
    """
    n = len(lcp)
    if n < 2:
        return 0.0

    dk = np.bincount(np.asarray(lcp[1:], dtype=np.int64) + 1, minlength=n)[:n]
    k = np.arange(1, n, dtype=np.int64)
    # x[k-1] = dk[1] + sum_{j=2..k} (dk[j] - 1)
    x = np.cumsum(dk[1:n]) - (k - 1)
    return float(np.max(x.astype(np.float64) / k.astype(np.float64)))
