from array import array
from typing import Iterator

NIL = -1
ROOT = 0


class Trie:
    """
    Node arena for LZ78 parsing.

    Nodes are integers indexing three parallel arrays (label, first child,
    next sibling). Children of a node form a singly linked list; a successful
    lookup moves the child found to the head of its parent's list, so the
    most recently used child is always checked first.
    """
    def __init__(self):
        self.labels = array("B")
        self.first_child = array("q")
        self.next_sibling = array("q")
        self._create_node(0)    # root

    def _create_node(self, label: int) -> int:
        x = len(self.labels)
        self.labels.append(label)
        self.first_child.append(NIL)
        self.next_sibling.append(NIL)
        return x

    def root(self) -> int:
        return ROOT

    def size(self) -> int:
        return len(self.labels)

    def label(self, u: int) -> int:
        return self.labels[u]

    def try_descend(self, u: int, c: int) -> int:
        """Child of u labelled c, moved to the front of u's list, or NIL."""
        first_child = self.first_child
        next_sibling = self.next_sibling
        labels = self.labels

        prev = NIL
        v = first_child[u]
        while v != NIL:
            if labels[v] == c:
                if prev != NIL:
                    # move to front
                    next_sibling[prev] = next_sibling[v]
                    next_sibling[v] = first_child[u]
                    first_child[u] = v
                return v
            prev = v
            v = next_sibling[v]
        return NIL

    def add_child(self, u: int, c: int) -> int:
        v = self._create_node(c)
        self.next_sibling[v] = self.first_child[u]
        self.first_child[u] = v
        return v

    def children(self, u: int) -> Iterator[int]:
        v = self.first_child[u]
        while v != NIL:
            yield v
            v = self.next_sibling[v]
