from dataclasses import dataclass, field
from typing import Dict, Optional

from ..constants.constants import LZ77_STRATEGY
from .result import ComplexityResult


@dataclass
class AnalyzerInput:
    # required fields
    path: str

    # optional fields
    prefix: int = 0                     # 0 reads the whole file
    suffixArrayPath: Optional[str] = None
    lcpPath: Optional[str] = None
    lz77Strategy: str = LZ77_STRATEGY
    trackMemory: bool = False


@dataclass
class AnalyzerOutput:
    result: ComplexityResult
    timings: Dict[str, float] = field(default_factory=dict)     # stage -> seconds
    memory: Dict[str, int] = field(default_factory=dict)        # stage -> rss delta in bytes
