from typing import Tuple

import numpy as np

from ..constants.constants import ALPHABET_SIZE
from ..models.text import Text


def histogram(text: Text) -> np.ndarray:
    """Occurrences of every byte value in the text, sentinel excluded."""
    return np.bincount(text.getArray()[:text.length], minlength=ALPHABET_SIZE)


def alphabet_and_entropy(text: Text) -> Tuple[int, float]:
    """
    Returns (sigma, h0).

    h0 = sum over occurring bytes c of (n_c / n) * log2(n / n_c), in bits per
    symbol; both are 0 for the empty text.
    """
    counts = histogram(text)
    occurring = counts[counts > 0].astype(np.float64)
    sigma = int(occurring.size)
    if sigma == 0:
        return 0, 0.0

    n = float(text.length)
    h0 = float(np.sum((occurring / n) * np.log2(n / occurring)))
    return sigma, h0
