import argparse
import logging
from typing import List
import time

from ccspan import CCSpan, ClosurePolicy, SPMFParser, write_patterns


def run_ccspan_analysis(
    input_sequences: List[List[int]],
    min_support: float,
    output_file: str,
    closure: ClosurePolicy = ClosurePolicy.PREFIX,
    verbose: bool = True,
    all_frequent: bool = False,
) -> None:
    """
    Run CCSpan on the sequences and write closed patterns to output file
    """
    miner = CCSpan(closure=closure, verbose=verbose)

    # Warm up JIT functions
    miner.warmup()

    if verbose:
        print(f"\nFinding closed contiguous patterns with minimum support = {min_support}")
    patterns = miner.mine_to_list(
        input_sequences, min_support, closed_only=not all_frequent
    )

    suffix = "#FREQUENT" if all_frequent else closure.suffix
    cnt = write_patterns(patterns, output_file, suffix)
    if verbose:
        print(f"Wrote {cnt} patterns (min support count {miner.min_support})")


def main():
    # Set up argument parser
    parser = argparse.ArgumentParser(
        description="Run CCSpan closed contiguous pattern mining on SPMF sequence data"
    )
    parser.add_argument("input_file", type=str, help="Input file containing sequences")
    parser.add_argument(
        "output_file",
        type=str,
        help="Output file for closed patterns",
    )
    parser.add_argument(
        "--min_support_ratio",
        type=float,
        default=0.25,
        help="Minimum support threshold",
    )
    parser.add_argument(
        "--closure",
        type=str,
        default=ClosurePolicy.PREFIX.value,
        choices=[policy.value for policy in ClosurePolicy],
        help="Closure policy used to drop redundant patterns",
    )
    parser.add_argument(
        "--all_frequent",
        action="store_true",
        help="Write every frequent pattern instead of only closed ones",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output")

    # Parse arguments
    args = parser.parse_args()

    # Configure logging
    if args.verbose:
        logging.basicConfig(
            level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
        )

    # Load sequences
    if args.verbose:
        print(f"Loading sequences from {args.input_file}")
    sequences = SPMFParser().parse_sequences(args.input_file)

    if args.verbose:
        print(f"Loaded {len(sequences)} sequences")

    # Run analysis
    start_time = time.time()
    run_ccspan_analysis(
        sequences,
        args.min_support_ratio,
        args.output_file,
        ClosurePolicy.from_name(args.closure),
        args.verbose,
        args.all_frequent,
    )
    end_time = time.time()

    if args.verbose:
        print(f"Analysis completed in {end_time - start_time:.2f} seconds")
        print(f"Results written to {args.output_file}")


if __name__ == "__main__":
    main()
