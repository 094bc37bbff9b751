import argparse
import json
import logging
import os
import sys

import numpy as np

from sdes import config
from sdes.analysis import binomial_reference, key_avalanche, plot_avalanche, summarize
from sdes.bits import bits_from_string, bits_to_string
from sdes.cipher import encrypt_trace
from sdes.errors import SDESError
from sdes.loaders import load_tables, read_input
from sdes.tables import DEFAULT_TABLES
from sdes.utils import random_10bit_string, to_jsonable

logger = logging.getLogger("sdes")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _resolve_tables(path):
    # An explicit --permutations must exist; the configured default may not.
    if path is not None:
        return load_tables(path)
    if os.path.exists(config.PERMUTATIONS_FILE):
        return load_tables(config.PERMUTATIONS_FILE)
    logger.info("%s not found, using built-in tables", config.PERMUTATIONS_FILE)
    return DEFAULT_TABLES


def run_encrypt(args) -> int:
    tables = _resolve_tables(args.permutations)

    key, plaintext = args.key, args.plaintext
    if key is None or plaintext is None:
        file_key, file_plaintext = read_input(args.input or config.INPUT_FILE)
        key = file_key if key is None else key
        plaintext = file_plaintext if plaintext is None else plaintext

    key_bits = bits_from_string(key, 10)
    plaintext_bits = bits_from_string(plaintext, 8)

    trace = encrypt_trace(plaintext_bits, key_bits, tables)

    if args.json:
        print(json.dumps({
            "key": key,
            "plaintext": plaintext,
            "k1": bits_to_string(trace.k1),
            "k2": bits_to_string(trace.k2),
            "round1": bits_to_string(trace.round1),
            "ciphertext": bits_to_string(trace.ciphertext),
        }, indent=2))
    else:
        print(f"K1: {bits_to_string(trace.k1)}")
        print(f"K2: {bits_to_string(trace.k2)}")
        print(f"Ciphertext: {bits_to_string(trace.ciphertext)}")
    return 0


def run_avalanche(args) -> int:
    tables = _resolve_tables(args.permutations)

    # ─── 1. Optionally fix RNG for reproducibility ─────────────────────────────
    if args.seed is not None:
        np.random.seed(args.seed)

    # ─── 2. Pick the keys: all of them, or a random sample ─────────────────────
    if args.keys == 0:
        keys = None
    else:
        keys = [bits_from_string(random_10bit_string(), 10) for _ in range(args.keys)]

    distances = key_avalanche(keys, tables, progress=not args.quiet)
    summary = summarize(distances, 16)
    summary["binomial_reference"] = binomial_reference(16, distances.size)

    print(f"Flips tested:        {summary['samples']}")
    print(f"Mean K1||K2 change:  {summary['mean']:.3f} bits")
    print(f"Min / max change:    {summary['min']} / {summary['max']}")
    print(f"Unchanged fraction:  {summary['unchanged_fraction']:.4f}")

    # ─── 3. Save results ───────────────────────────────────────────────────────
    with open(args.output, "w") as f:
        json.dump(to_jsonable(summary), f, indent=2)
    print(f"Results saved to {args.output}")

    if args.plot:
        plot_avalanche(summary["histogram"], summary["binomial_reference"], args.plot,
                       title="Round-key avalanche (single master-key bit flips)")
    return 0


def _non_negative(value):
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"{value} is negative")
    return n


def _log_level(value):
    # string defaults go through this too, so a bad SDES_LOG_LEVEL is caught
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise argparse.ArgumentTypeError(f"unknown log level {value!r}")
    return level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sdes",
        description="Simplified DES: derive K1/K2 and encrypt an 8-bit block",
    )
    parser.add_argument("--log-level", type=_log_level, default=config.LOG_LEVEL,
                        help=f"one of {', '.join(LOG_LEVELS)} (default: %(default)s)")
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--permutations", default=None,
                        help=f"permutation table file (default: {config.PERMUTATIONS_FILE} if present)")
    sub = parser.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encrypt", parents=[common], help="encrypt one block")
    enc.add_argument("--input", default=None,
                     help=f"file with Key:/Plaintext: lines (default: {config.INPUT_FILE})")
    enc.add_argument("--key", default=None, help="10-bit key, overrides the input file")
    enc.add_argument("--plaintext", default=None, help="8-bit plaintext, overrides the input file")
    enc.add_argument("--json", action="store_true", help="print results as JSON")
    enc.set_defaults(func=run_encrypt)

    ava = sub.add_parser("avalanche", parents=[common], help="single-bit key flip statistics")
    ava.add_argument("--keys", type=_non_negative, default=config.AVALANCHE_NUM_KEYS,
                     help="number of random keys, 0 for all 1024 (default: %(default)s)")
    ava.add_argument("--seed", type=int, default=config.GLOBAL_RANDOM_SEED)
    ava.add_argument("--output", default=config.RESULTS_FILE)
    ava.add_argument("--plot", default=None,
                     help=f"save a histogram, e.g. {config.PLOT_FILE}")
    ava.add_argument("--quiet", action="store_true", help="hide the progress bar")
    ava.set_defaults(func=run_avalanche)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        return args.func(args)
    except (SDESError, OSError) as exc:
        print(f"sdes: error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
