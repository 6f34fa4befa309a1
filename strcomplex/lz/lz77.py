from typing import Iterator, List, Tuple

from ..constants.constants import LZ77_STRATEGIES, LZ77_STRATEGY
from ..models.text import Text

NONE = -1


def previous_smaller_values(sa: List[int]) -> List[int]:
    """psv[p] = largest p' < p with sa[p'] < sa[p], or -1."""
    psv = [NONE] * len(sa)
    stack = []
    for p, value in enumerate(sa):
        while stack and sa[stack[-1]] > value:
            stack.pop()
        if stack:
            psv[p] = stack[-1]
        stack.append(p)
    return psv


def next_smaller_values(sa: List[int]) -> List[int]:
    """nsv[p] = smallest p' > p with sa[p'] < sa[p], or -1."""
    nsv = [NONE] * len(sa)
    stack = []
    for p in range(len(sa) - 1, -1, -1):
        value = sa[p]
        while stack and sa[stack[-1]] > value:
            stack.pop()
        if stack:
            nsv[p] = stack[-1]
        stack.append(p)
    return nsv


def longest_common_extension(data: bytes, end: int, i: int, j: int) -> int:
    """Length of the common prefix of data[i:end] and data[j:end], for j < i."""
    l = 0
    while i + l < end and data[i + l] == data[j + l]:
        l += 1
    return l


class LZ77Parser:
    """
    Greedy LZ77 parsing where each factor is the longest prefix of the
    remaining text that starts at an earlier position (sources may overlap the
    factor), or a single literal byte if there is none.

    Among all earlier suffixes, the one sharing the longest prefix with
    suffix i is adjacent to i in the suffix array once later suffixes are
    skipped: the previous or next SA entry whose value is smaller than i.
    Only those two candidates are compared with i symbol by symbol.

    strategy "scan" walks the SA outwards from ISA[i] for every factor;
    "stack" precomputes both neighbours for all SA positions with a monotone
    stack in O(n). Both give the same factors.
    """
    def __init__(self, strategy: str = LZ77_STRATEGY):
        if strategy not in LZ77_STRATEGIES:
            raise ValueError(f"unknown LZ77 strategy {strategy!r}, expected one of {LZ77_STRATEGIES}")
        self.strategy = strategy

    def factors(self, text: Text, sa, isa) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (start, length, source) for every factor; source is the
        earlier position copied from, or -1 for a literal.
        """
        data = text.getBytes()
        end = text.length
        sa = sa.tolist() if hasattr(sa, "tolist") else list(sa)
        isa = isa.tolist() if hasattr(isa, "tolist") else list(isa)
        n = len(sa)

        psv = nsv = None
        if self.strategy == "stack":
            psv = previous_smaller_values(sa)
            nsv = next_smaller_values(sa)

        i = 0
        while i < end:
            p = isa[i]

            if self.strategy == "stack":
                psv_pos = psv[p]
                nsv_pos = nsv[p]
            else:
                psv_pos = p - 1
                while psv_pos >= 0 and sa[psv_pos] > i:
                    psv_pos -= 1
                nsv_pos = p + 1
                while nsv_pos < n and sa[nsv_pos] > i:
                    nsv_pos += 1
                if nsv_pos >= n:
                    nsv_pos = NONE

            length, source = 0, NONE
            if psv_pos >= 0:
                j = sa[psv_pos]
                l = longest_common_extension(data, end, i, j)
                if l > length:
                    length, source = l, j
            if nsv_pos >= 0:
                j = sa[nsv_pos]
                l = longest_common_extension(data, end, i, j)
                if l > length:
                    length, source = l, j

            if length == 0:
                yield i, 1, NONE
                i += 1
            else:
                yield i, length, source
                i += length

    def parse(self, text: Text, sa, isa) -> int:
        z77 = 0
        for _ in self.factors(text, sa, isa):
            z77 += 1
        return z77
