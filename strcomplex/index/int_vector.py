"""
Integer vectors on disk.

Two formats are understood:

* numpy ``.npy`` files, written with ``np.save`` and opened memory-mapped;
  this is what the run cache uses.
* the serialisation of a bit-compressed integer vector used by succinct data
  structure libraries: a little-endian uint64 holding the size in bits, one
  byte holding the element width w, then the payload as little-endian 64-bit
  words where element i occupies bits [i*w, (i+1)*w) of the bit stream.
  Precomputed suffix and LCP arrays are usually shipped in this format.
"""
from typing import Optional

import numpy as np

from ..errors import InvalidIndexError

NPY_MAGIC = b"\x93NUMPY"
HEADER_SIZE = 9             # uint64 bit size + uint8 width
DECODE_BLOCK = 1 << 16      # elements unpacked per step


def load_int_vector(path: str) -> np.ndarray:
    with open(path, "rb") as fh:
        magic = fh.read(len(NPY_MAGIC))
    if magic == NPY_MAGIC:
        values = np.load(path, mmap_mode="r")
        if values.ndim != 1 or values.dtype.kind not in "iu":
            raise InvalidIndexError(f"{path}: expected a one-dimensional integer array")
        return values
    return load_packed_int_vector(path)


def store_int_vector(path: str, values) -> str:
    np.save(path, np.ascontiguousarray(values))
    return path


def load_packed_int_vector(path: str) -> np.ndarray:
    raw = np.fromfile(path, dtype=np.uint8)
    if raw.size < HEADER_SIZE:
        raise InvalidIndexError(f"{path}: truncated integer vector header")

    bits = int(raw[:8].view("<u8")[0])
    width = int(raw[8])
    if width == 0 or width > 64 or bits % width:
        raise InvalidIndexError(f"{path}: invalid integer vector header (bits={bits}, width={width})")

    size = bits // width
    words = (bits + 63) // 64
    payload = raw[HEADER_SIZE:HEADER_SIZE + 8 * words]
    if payload.size < 8 * words:
        raise InvalidIndexError(f"{path}: integer vector payload is truncated")

    if width in (8, 16, 32, 64):
        return payload.view(f"<u{width // 8}")[:size].astype(np.int64)

    weights = np.left_shift(np.uint64(1), np.arange(width, dtype=np.uint64))
    out = np.empty(size, dtype=np.int64)
    for start in range(0, size, DECODE_BLOCK):
        stop = min(size, start + DECODE_BLOCK)
        # whole bytes covering elements [start, stop)
        lo, hi = (start * width) // 8, -(-(stop * width) // 8)
        stream = np.unpackbits(payload[lo:hi], bitorder="little")
        offset = start * width - lo * 8
        block = stream[offset:offset + (stop - start) * width].reshape(stop - start, width)
        out[start:stop] = (block.astype(np.uint64) @ weights).astype(np.int64)
    return out


def store_packed_int_vector(path: str, values, width: Optional[int] = None) -> str:
    """Write `values` in the bit-compressed format, using the minimal width unless given."""
    values = np.asarray(values, dtype=np.uint64)
    if width is None:
        width = max(1, int(values.max()).bit_length()) if values.size else 1
    bits = values.size * width
    words = (bits + 63) // 64

    shifts = np.arange(width, dtype=np.uint64)
    stream = ((values[:, None] >> shifts) & np.uint64(1)).astype(np.uint8).ravel()
    stream = np.concatenate([stream, np.zeros(words * 64 - bits, dtype=np.uint8)])
    payload = np.packbits(stream, bitorder="little")

    with open(path, "wb") as fh:
        fh.write(np.array([bits], dtype="<u8").tobytes())
        fh.write(bytes([width]))
        fh.write(payload.tobytes())
    return path
