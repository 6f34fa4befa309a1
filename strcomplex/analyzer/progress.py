import os
import sys
import time
from contextlib import contextmanager
from typing import IO, Dict, Optional

import psutil


def get_memory_usage() -> int:
    """Get current memory usage in bytes using psutil"""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss


class Progress:
    """
    Stage-by-stage progress on stderr: "computing SA ... 0.0123 s".

    Wall-clock time of every stage is recorded in `timings`; with
    trackMemory, the resident set size relative to the start of the run is
    recorded in `memory` as well.
    """
    def __init__(self, stream: Optional[IO] = None, enabled: bool = True, trackMemory: bool = False):
        self.stream = stream if stream is not None else sys.stderr
        self.enabled = enabled
        self.trackMemory = trackMemory
        self.timings: Dict[str, float] = {}
        self.memory: Dict[str, int] = {}
        self.baseline = get_memory_usage() if trackMemory else 0
        self.peak = self.baseline

    def write(self, message: str):
        if self.enabled:
            self.stream.write(message)
            self.stream.flush()

    @contextmanager
    def stage(self, name: str, message: str):
        self.write(f"{message} ...")
        startTime = time.perf_counter()
        try:
            yield
        except BaseException:
            self.write("\n")
            raise
        elapsedTime = time.perf_counter() - startTime
        self.timings[name] = elapsedTime

        line = f" {elapsedTime:.4f} s"
        if self.trackMemory:
            current = get_memory_usage()
            self.peak = max(self.peak, current)
            self.memory[name] = current - self.baseline
            line += f", {self.memory[name] / 10**6:.2f} MB"
        self.write(line + "\n")

    def summary(self):
        total = sum(self.timings.values())
        self.write(f"total {total:.4f} s\n")
        if self.trackMemory:
            self.write(f"peak memory {(self.peak - self.baseline) / 10**6:.2f} MB\n")
