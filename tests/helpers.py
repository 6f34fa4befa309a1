import random

import numpy as np

from strcomplex.index.suffix_array import build_suffix_array, inverse_suffix_array
from strcomplex.models.text import Text

SAMPLES = [
    b"a",
    b"ab",
    b"aa",
    b"abab",
    b"banana",
    b"mississippi",
    b"abracadabra",
    b"aaaaaaaaaa",
    b"abcd",
    b"baba",
    b"to be or not to be, that is the question",
]


def random_texts(count=30, seed=7):
    rng = random.Random(seed)
    texts = []
    for _ in range(count):
        alphabet = rng.choice([b"ab", b"abc", b"acgt", bytes(range(1, 256))])
        length = rng.randint(1, 80)
        texts.append(bytes(rng.choice(alphabet) for _ in range(length)))
    return texts


def make_text(content: bytes, path: str = "<memory>") -> Text:
    return Text(path=path, data=content + b"\x00")


def index_of(content: bytes):
    """(text, sa, isa) for a content without sentinel."""
    text = make_text(content)
    sa = build_suffix_array(text.getArray())
    return text, sa, inverse_suffix_array(sa)


def as_list(values) -> list:
    return np.asarray(values).tolist()
