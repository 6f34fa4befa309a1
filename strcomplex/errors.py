from .constants.constants import EXIT_BAD_INDEX, EXIT_USAGE, EXIT_ZERO_BYTE


class ComplexityError(Exception):
    """Base class for errors reported to the user with a one-line message."""
    exitCode: int = 1


class UsageError(ComplexityError):
    exitCode = EXIT_USAGE


class InvalidTextError(ComplexityError):
    """The input contains a zero byte before its last position."""
    exitCode = EXIT_ZERO_BYTE

    def __init__(self, path: str, position: int):
        super().__init__(f"the input file must not contain any zero bytes ({path} has one at offset {position})")
        self.path = path
        self.position = position


class InvalidIndexError(ComplexityError):
    """A precomputed suffix or LCP array does not fit the text."""
    exitCode = EXIT_BAD_INDEX
