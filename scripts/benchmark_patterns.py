#!/usr/bin/env python3
"""
Pattern Trie Benchmark

Loads a TeX hyphenation pattern file and times the two hot paths of a
hyphenator built on hyphen-trie: enumerating every stored pattern, and
collecting the weights of all patterns matching each suffix of a word.

Usage:
    python scripts/benchmark_patterns.py hyph-en-us.tex
    python scripts/benchmark_patterns.py hyph-en-us.tex --word .hyphenation. -n 5000
    python scripts/benchmark_patterns.py hyph-en-us.tex --frozen
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Callable, List

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from hyphen_trie import PatternSyntaxError, PatternTrie, load_patterns

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

DEFAULT_WORD = ".hyphenation."
DEFAULT_ITERATIONS = 1000


# ============================================================================
# Workloads
# ============================================================================

def merge_weights(trie, word: str) -> List[int]:
    """
    Merge the weights of every pattern found inside ``word``.

    Each position keeps the highest weight any matching pattern gives it.
    """
    merged = [0] * len(word)
    for pos in range(len(word)):
        found, values = trie.all_substrings_and_values(word[pos:])
        for text, points in zip(found, values):
            # a leading weight sits one position before the match
            start = pos - (len(points) - len(text))
            for offset, weight in enumerate(points):
                index = start + offset
                if 0 <= index < len(merged) and weight > merged[index]:
                    merged[index] = weight
    return merged


def time_it(label: str, func: Callable[[], object], iterations: int) -> float:
    """Run ``func`` repeatedly and log the mean time per call."""
    start = time.perf_counter()
    for _ in range(iterations):
        func()
    elapsed = time.perf_counter() - start
    logger.info(f"{label:<28} {elapsed / iterations * 1e6:>10.1f} us/op ({iterations} runs)")
    return elapsed


def run_benchmarks(trie: PatternTrie, word: str, iterations: int, frozen: bool = False):
    """Time traversal and matching on an already-loaded trie."""
    target = trie.freeze() if frozen else trie
    kind = "frozen" if frozen else "live"

    time_it(f"members ({kind})", target.members, iterations)
    time_it(f"merge {word!r} ({kind})", lambda: merge_weights(target, word), iterations)

    logger.info(f"Merged weights for {word!r}: {merge_weights(target, word)}")


# ============================================================================
# Main
# ============================================================================

def main():
    parser = argparse.ArgumentParser(
        description="Benchmark hyphen-trie on a TeX hyphenation pattern file"
    )
    parser.add_argument(
        'patterns',
        type=Path,
        help="Path to a TeX pattern file (\\patterns{...}) or a plain pattern list"
    )
    parser.add_argument(
        '--word', '-w',
        default=DEFAULT_WORD,
        help=f"Word to match, with boundary dots (default: {DEFAULT_WORD})"
    )
    parser.add_argument(
        '--iterations', '-n',
        type=int,
        default=DEFAULT_ITERATIONS,
        help=f"Runs per benchmark (default: {DEFAULT_ITERATIONS})"
    )
    parser.add_argument(
        '--frozen', '-f',
        action='store_true',
        help="Also benchmark the read-only marisa_trie snapshot"
    )

    args = parser.parse_args()

    if not args.patterns.exists():
        logger.error(f"Pattern file not found: {args.patterns}")
        return 1

    start_time = time.time()
    try:
        trie = load_patterns(args.patterns.read_text(encoding="utf-8"))
    except PatternSyntaxError as e:
        logger.error(f"Cannot parse {args.patterns}: {e}")
        return 1
    logger.info(f"Loaded {args.patterns} in {time.time() - start_time:.2f} seconds")

    run_benchmarks(trie, args.word, args.iterations)
    if args.frozen:
        run_benchmarks(trie, args.word, args.iterations, frozen=True)

    return 0


if __name__ == "__main__":
    sys.exit(main())
