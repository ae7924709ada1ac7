from ccspan import CCSpan, ClosurePolicy, SPMFParser, redundancy

import argparse
from typing import List
import logging


def run_ccspan_sweep(
    input_sequences: List[List[int]], min_support: float, closure: ClosurePolicy
) -> None:
    """
    Run CCSpan on the sequences and print pattern statistics
    """
    miner = CCSpan(closure=closure, verbose=True)

    # Warm up JIT functions
    miner.warmup()

    print(f"\nMining {closure.value} patterns with minimum support = {min_support}")
    patterns = miner.mine_to_list(input_sequences, min_support)

    longest = max((len(p.symbols) for p in patterns), default=0)
    print(f"Min support count: {miner.min_support}")
    print(f"Levels: {miner.levels}, candidates: {miner.candidates}")
    print(f"Patterns: {len(patterns)}, longest pattern: {longest}")
    print(f"Redundancy: {redundancy(patterns):.4f}")
    print(f"Runtime: {miner.runtime:.4f} sec")


def main():
    # Configure logging
    logging.basicConfig(level=logging.INFO)

    parser = argparse.ArgumentParser(description="Sweep CCSpan over support thresholds")
    parser.add_argument("input_file", type=str, help="SPMF sequence file, e.g. FIFA.txt")
    parser.add_argument(
        "--min_supports",
        type=float,
        nargs="+",
        default=[0.4, 0.2],
        help="Relative minimum supports to run",
    )
    args = parser.parse_args()

    sequences = SPMFParser().parse_sequences(args.input_file)
    print(f"Loaded {len(sequences)} sequences")

    for min_support in args.min_supports:
        for closure in ClosurePolicy:
            run_ccspan_sweep(sequences, min_support, closure)


if __name__ == "__main__":
    main()
