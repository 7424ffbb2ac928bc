"""Standard command-line arguments shared by the Boggle tools."""

import argparse
import random

from boggle.trie import make_py_trie


def add_standard_args(parser: argparse.ArgumentParser, *, random_seed=False):
    parser.add_argument(
        "--dictionary",
        type=str,
        default="wordlists/dictionary.txt",
        help="Path to dictionary file with one word per line.",
    )

    if random_seed:
        parser.add_argument(
            "--random_seed",
            help="Explicitly set the random seed.",
            type=int,
            default=-1,
        )


def get_trie_from_args(args: argparse.Namespace):
    t = make_py_trie(args.dictionary)
    assert t
    return t


def get_rng_from_args(args: argparse.Namespace) -> random.Random:
    if args.random_seed >= 0:
        return random.Random(args.random_seed)
    return random.Random()
