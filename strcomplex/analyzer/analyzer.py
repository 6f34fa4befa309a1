from abc import ABC, abstractmethod
from typing import Optional

from ..delta.substring_complexity import substring_complexity
from ..index.cache import CacheConfig
from ..index.lcp import LcpProvider
from ..index.suffix_array import SuffixArrayProvider
from ..lz.lz77 import LZ77Parser
from ..lz.lz78 import LZ78Parser
from ..models.analyzer import AnalyzerInput, AnalyzerOutput
from ..models.result import ComplexityResult
from ..stats.bwt_runs import count_bwt_runs
from ..stats.histogram import alphabet_and_entropy
from ..text_parser.textLoader import TextLoader
from .progress import Progress


class AComplexityAnalyzer(ABC):
    @abstractmethod
    def analyze(self, inputData: AnalyzerInput) -> AnalyzerOutput:
        pass


class ComplexityAnalyzer(AComplexityAnalyzer):
    def __init__(self, progress: Optional[Progress] = None, cacheDirectory: Optional[str] = None):
        self.progress = progress
        self.cacheDirectory = cacheDirectory

    def analyze(self, inputData: AnalyzerInput) -> AnalyzerOutput:
        progress = self.progress
        if progress is None:
            progress = Progress(enabled=False, trackMemory=inputData.trackMemory)

        result = ComplexityResult(file=inputData.path)

        # every cache file is gone once this block is left, whichever way
        with CacheConfig(self.cacheDirectory) as cache:
            with progress.stage("load", "loading file"):
                text = TextLoader(inputData.path, inputData.prefix).load()
            result.n = text.length

            saProvider = SuffixArrayProvider(cache)
            message = "loading SA" if inputData.suffixArrayPath else "computing SA"
            with progress.stage("sa", message):
                sa = saProvider.getSuffixArray(text, inputData.suffixArrayPath)

            with progress.stage("sigma", "computing sigma and h0"):
                result.sigma, result.h0 = alphabet_and_entropy(text)

            with progress.stage("r", "counting BWT runs"):
                result.r = count_bwt_runs(text, sa)

            with progress.stage("z78", "computing LZ78 parse"):
                result.z78 = LZ78Parser().parse(text)

            with progress.stage("z77", "computing LZ77 parse"):
                isa = saProvider.getInverseSuffixArray(sa)
                result.z77 = LZ77Parser(inputData.lz77Strategy).parse(text, sa, isa)
                del isa
                saProvider.releaseInverse()

            lcpProvider = LcpProvider(cache)
            message = "loading LCP" if inputData.lcpPath else "computing LCP"
            with progress.stage("delta", f"{message} and delta"):
                lcp = lcpProvider.getLcp(text, sa, inputData.lcpPath)
                result.delta = substring_complexity(lcp)
                del lcp
                lcpProvider.release()

            saProvider.release()

        return AnalyzerOutput(result=result, timings=dict(progress.timings), memory=dict(progress.memory))
