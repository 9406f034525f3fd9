# bench_profiling.py
"""
Simple profiling harness for Trie.exists and Trie.strip

Usage:
    python -m vocab_trie.core.bench_profiling --runs 200 --warmup 20
"""

import argparse
import itertools
import statistics
import string
import time
from typing import Callable, List

from vocab_trie.core.trie import Trie


def synthetic_vocab(size: int = 5000) -> List[str]:
    """Deterministic pseudo-words: every 3..5 letter combination, in order."""
    words = []
    for length in (3, 4, 5):
        for combo in itertools.product(string.ascii_lowercase, repeat=length):
            words.append("".join(combo))
            if len(words) >= size:
                return words
    return words


def profile(fn: Callable[[str], object], inputs: List[str], runs: int = 200, warmup: int = 20) -> List[float]:
    # warmup
    for i in range(warmup):
        fn(inputs[i % len(inputs)])

    times = []
    for i in range(runs):
        arg = inputs[i % len(inputs)]
        t0 = time.perf_counter()
        fn(arg)
        times.append((time.perf_counter() - t0) * 1000.0)
    return times


def summarize(label: str, times: List[float]) -> None:
    print(f"{label}:")
    print("  calls:", len(times))
    print("  mean ms:", round(statistics.mean(times), 4))
    print("  median ms:", round(statistics.median(times), 4))
    print("  p99 ms:", round(sorted(times)[max(int(len(times) * 0.99) - 1, 0)], 4))


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument("--runs", type=int, default=200)
    parser.add_argument("--warmup", type=int, default=20)
    parser.add_argument("--vocab", type=int, default=5000)
    args = parser.parse_args(argv)

    vocab = synthetic_vocab(args.vocab)
    trie = Trie(vocab)
    try:
        lookups = vocab[:: max(len(vocab) // 50, 1)] + ["zzzzz", "qqqq"]
        summarize("exists", profile(trie.exists, lookups, args.runs, args.warmup))

        texts = [" ".join(vocab[i:i + 40]) + " unmatched tokens here" for i in range(0, 400, 40)]
        summarize("strip", profile(trie.strip, texts, args.runs, args.warmup))
    finally:
        trie.destroy()


if __name__ == "__main__":
    main()
