import numpy as np


class Text:
    """
    An input text terminated by the sentinel.

    `n` counts the sentinel, `length` does not. The bytes are kept twice:
    as `bytes` for byte-wise comparisons in the Python loops and as a read-only
    numpy view over the same buffer for the vectorised kernels.
    """
    def __init__(self, path: str, data: bytes):
        self.path = path
        self.data = data
        self.array = np.frombuffer(data, dtype=np.uint8)
        self.n = len(data)
        self.length = self.n - 1

    def getPath(self) -> str:
        return self.path

    def getBytes(self) -> bytes:
        return self.data

    def getArray(self) -> np.ndarray:
        return self.array

    def getContent(self) -> bytes:
        # text without the sentinel
        return self.data[:self.length]

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        return f"Text(path={self.path!r}, n={self.n})"
