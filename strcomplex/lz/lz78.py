from typing import Iterator, Tuple

from ..models.text import Text
from .trie import NIL, Trie


class LZ78Parser:
    """
    Greedy LZ78 parsing: every phrase is a previous phrase (or the empty one)
    extended by one byte. The phrase trie is rebuilt for each parse.
    """
    def __init__(self):
        self.trie = None

    def phrases(self, text: Text) -> Iterator[Tuple[int, int]]:
        """Yields (start, length) for every phrase of the text."""
        self.trie = trie = Trie()
        data = text.getBytes()
        root = trie.root()

        v = root
        start = 0
        for i in range(text.length):
            c = data[i]
            child = trie.try_descend(v, c)
            if child == NIL:
                trie.add_child(v, c)
                yield start, i + 1 - start
                start = i + 1
                v = root
            else:
                v = child

        # the input ended inside the trie: the pending phrase repeats an earlier one
        if v != root:
            yield start, text.length - start

    def parse(self, text: Text) -> int:
        z78 = 0
        for _ in self.phrases(text):
            z78 += 1
        return z78
