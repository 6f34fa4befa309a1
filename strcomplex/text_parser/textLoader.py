from typing import IO

from ..constants.constants import SENTINEL
from ..errors import InvalidTextError
from ..models.text import Text


class TextLoader:
    def __init__(self, path: str, prefix: int = 0):
        """
        Args:
        path: file to read
        prefix: read at most this many bytes, 0 reads the whole file
        """
        self.path = path
        self.prefix = prefix

    def load(self) -> Text:
        with open(self.path, "rb") as textFile:
            return self.parse(textFile)

    def parse(self, textFile: IO) -> Text:
        data = textFile.read(self.prefix) if self.prefix > 0 else textFile.read()

        # a zero byte is only allowed as the very last symbol, where it is taken as the sentinel
        zero = data.find(SENTINEL)
        if zero != -1 and zero < len(data) - 1:
            raise InvalidTextError(self.path, zero)
        if zero == -1:
            data += bytes([SENTINEL])

        return Text(path=self.path, data=bytes(data))
