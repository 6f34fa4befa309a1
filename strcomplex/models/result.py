from dataclasses import dataclass
from typing import IO

from ..constants.constants import FLOAT_PRECISION


@dataclass
class ComplexityResult:
    file:   str     = ""        # path as given on the command line
    n:      int     = 0         # text length without the sentinel
    sigma:  int     = 0         # alphabet size
    h0:     float   = 0.0       # zeroth-order empirical entropy
    r:      int     = 0         # run boundaries in the BWT
    z78:    int     = 0         # LZ78 phrases
    z77:    int     = 0         # greedy LZ77 phrases
    delta:  float   = 0.0       # substring complexity

    def toLine(self, precision: int = FLOAT_PRECISION) -> str:
        """
        Format the result as a single RESULT line (without newline).

        Fields are written in declaration order as key=value pairs; floats use
        fixed-point notation.
        """
        output = []
        for f in self.__dataclass_fields__:
            value = getattr(self, f)
            if isinstance(value, float):
                value = f"{value:.{precision}f}"
            output.append(f"{f}={value}")
        return "RESULT " + " ".join(output)


class ResultWriter:
    """Writes RESULT lines to an open text stream."""
    def __init__(self, outputFile: IO, precision: int = FLOAT_PRECISION):
        self.outputFile = outputFile
        self.precision = precision

    def writeResult(self, result: ComplexityResult):
        self.outputFile.write(result.toLine(self.precision) + "\n")
        self.outputFile.flush()
