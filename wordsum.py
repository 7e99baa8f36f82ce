#!/usr/bin/env python3
"""
Word-sum search - wordsum.py

Builds a cipher from a key, finds every word1 + word2 = word3 within a bound
and writes the triplets to a CSV file.

Usage:
  python3 wordsum.py --key wanderlust --max 200000
  python3 wordsum.py -k wanderlust -m 1000000 -0 -o sums.csv
  python3 wordsum.py --dictionary-source wordfreq --wordfreq-limit 80000
"""

from __future__ import annotations
import argparse
import csv
import sys
import time
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from cipher import Cipher, CipherError
from dictionary import WordList, load_word_list, load_wordfreq_word_list
from sums import Triplet, iter_valid_sums

# ============================================================================ #
#                              CONFIGURATION                                   #
# ============================================================================ #

DEFAULT_WORD_LIST = Path("words.txt")
DEFAULT_MAX = 200000
DEFAULT_KEY = "wanderlust"
DEFAULT_WORDFREQ_LIMIT = 50000

CSV_HEADER = ["Numbers 1", "Letters 1", "Numbers 2", "Letters 2", "Numbers 3", "Letters 3"]

# ANSI color codes
GREEN = '\033[92m'
RED = '\033[91m'
YELLOW = '\033[93m'
RESET = '\033[0m'


# ============================================================================ #
#                              OUTPUT                                          #
# ============================================================================ #

def default_output_path(key: str, max_sum: int, leading0: bool) -> Path:
    """<key>-<max>[-0].csv"""
    suffix = "-0" if leading0 else ""
    return Path(f"{key}-{max_sum}{suffix}.csv")


def write_triplets(handle: TextIO, triplets: Iterable[Triplet]) -> int:
    """Write the header and one row per triplet. Returns the number of rows."""
    writer = csv.writer(handle)
    writer.writerow(CSV_HEADER)
    count = 0
    for triplet in triplets:
        writer.writerow(triplet.as_row())
        count += 1
    return count


def write_triplets_csv(path: Path, triplets: Iterable[Triplet]) -> int:
    with path.open("w", encoding="utf-8", newline="") as handle:
        return write_triplets(handle, triplets)


# ============================================================================ #
#                              MAIN                                            #
# ============================================================================ #

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find dictionary words that add up under a letter cipher")
    parser.add_argument("-w", "--word-list", type=Path, default=DEFAULT_WORD_LIST,
                        help=f"Path to word list used (default: {DEFAULT_WORD_LIST})")
    parser.add_argument("-m", "--max", type=int, default=DEFAULT_MAX,
                        help=f"Max value of the sum, in base 10 (default: {DEFAULT_MAX})")
    parser.add_argument("-k", "--key", type=str, default=DEFAULT_KEY,
                        help=f"Cipher key, one letter per digit (default: {DEFAULT_KEY})")
    parser.add_argument("-0", "--leading0", action="store_true",
                        help="Start the numbers list with 0 instead of ending with it")
    parser.add_argument("-o", "--output", type=Path, default=None,
                        help="File path to output CSV (default: <key>-<max>[-0].csv)")
    parser.add_argument("--dictionary-source", choices=["file", "wordfreq"], default="file",
                        help="Read --word-list, or take the most frequent words from wordfreq")
    parser.add_argument("--wordfreq-limit", type=int, default=DEFAULT_WORDFREQ_LIMIT,
                        help=f"Top-N words to take with --dictionary-source=wordfreq (default: {DEFAULT_WORDFREQ_LIMIT})")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="No progress bars or summary output")
    return parser.parse_args(argv)


def load_dictionary(args: argparse.Namespace) -> WordList:
    if args.dictionary_source == "file":
        return load_word_list(args.word_list)
    if args.dictionary_source == "wordfreq":
        return load_wordfreq_word_list(args.wordfreq_limit)
    raise ValueError(f"Unknown dictionary source: {args.dictionary_source}")


def error(message: str) -> int:
    print(f"{RED}Error {message}{RESET}", file=sys.stderr)
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    verbose = not args.quiet

    output_path = args.output
    if output_path is None:
        output_path = default_output_path(args.key, args.max, args.leading0)

    try:
        word_list = load_dictionary(args)
    except (OSError, ValueError) as e:
        return error(f"loading word list: {e}")

    try:
        cipher = Cipher.from_key(args.key, args.leading0)
    except CipherError as e:
        return error(f"creating cipher: {e}")

    if verbose:
        source = args.word_list if args.dictionary_source == "file" else f"wordfreq top {args.wordfreq_limit}"
        print(f"Loaded {len(word_list):,} words from {source}")
        print(f"Cipher (base {cipher.base}): {cipher.describe()}")
        print(f"Searching sums below {args.max:,} (addends below {args.max // 2:,})")
        if not len(word_list):
            print(f"{YELLOW}Word list is empty, no sums can be found{RESET}")

    t0 = time.time()
    triplets = iter_valid_sums(args.max, cipher, word_list, show_progress=verbose)
    try:
        count = write_triplets_csv(output_path, triplets)
    except OSError as e:
        return error(f"writing csv: {e}")

    if verbose:
        print(f"{GREEN}Wrote {count:,} triplets to {output_path}{RESET} ({time.time() - t0:.1f}s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
