"""
Main.py:
Handles CLI and prints the RESULT line
"""

import argparse
import sys
from typing import List, Optional

from .analyzer.analyzer import ComplexityAnalyzer
from .analyzer.progress import Progress
from .constants.constants import EXIT_OK, EXIT_USAGE, LZ77_STRATEGIES, LZ77_STRATEGY
from .errors import ComplexityError, UsageError
from .models.analyzer import AnalyzerInput
from .models.result import ResultWriter

USAGE = "strcomplex <FILE> [prefix] [sa-path] [lcp-path]"


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def parse_args(argv: Optional[List[str]] = None):
    parser = ArgumentParser(
        prog='strcomplex',
        usage=USAGE,
        description='Compressibility statistics of a text: sigma, H0, BWT runs, LZ78, LZ77 and delta')

    # Positional arguments
    parser.add_argument('file', metavar='FILE', help='Input text, must not contain zero bytes')
    parser.add_argument('prefix', nargs='?', type=int, default=0, help='Read at most this many bytes (0 = whole file)')
    parser.add_argument('sa_path', metavar='sa-path', nargs='?', default=None, help='Precomputed suffix array')
    parser.add_argument('lcp_path', metavar='lcp-path', nargs='?', default=None, help='Precomputed LCP array')

    # Optional arguments
    parser.add_argument('-m', '--memory', action='store_true', help='Track memory usage')
    parser.add_argument('-q', '--quiet', action='store_true', help='No progress messages on stderr')
    parser.add_argument('--lz77-strategy', choices=LZ77_STRATEGIES, default=LZ77_STRATEGY,
                        help='How PSV/NSV are found for the LZ77 parse')

    args = parser.parse_args(argv)
    if args.prefix < 0:
        raise UsageError(f"prefix must not be negative: {args.prefix}")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = parse_args(argv)
    except UsageError as e:
        print(f"usage: {USAGE} ({e})", file=sys.stderr)
        return EXIT_USAGE

    progress = Progress(enabled=not args.quiet, trackMemory=args.memory)
    analyzer = ComplexityAnalyzer(progress=progress)
    inputData = AnalyzerInput(
        path=args.file,
        prefix=args.prefix,
        suffixArrayPath=args.sa_path,
        lcpPath=args.lcp_path,
        lz77Strategy=args.lz77_strategy,
        trackMemory=args.memory,
    )

    try:
        output = analyzer.analyze(inputData)
    except ComplexityError as e:
        print(f"failed -- {e}", file=sys.stderr)
        return e.exitCode

    ResultWriter(sys.stdout).writeResult(output.result)
    progress.summary()
    return EXIT_OK


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
