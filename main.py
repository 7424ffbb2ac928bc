#!/usr/bin/env python
"""Play Boggle against the computer."""

import argparse
import sys
import time

from boggle.args import add_standard_args, get_rng_from_args, get_trie_from_args
from boggle.console import Console
from boggle.gui import BoggleGUI
from boggle.play import play_one_game

WELCOME = """Welcome to Boggle!

You'll be playing against the computer on a 4x4 board. Find words of four or
more letters by stringing together adjacent cubes (no cube twice in a word).
When you run out, press Enter and I'll find all the words you missed.
"""


def main():
    parser = argparse.ArgumentParser(description="Play Boggle against the computer")
    add_standard_args(parser, random_seed=True)
    args = parser.parse_args()

    console = Console()
    console.print(WELCOME)

    start_s = time.time()
    try:
        t = get_trie_from_args(args)
    except OSError as e:
        sys.stderr.write(f"Unable to load dictionary {args.dictionary}: {e}\n")
        sys.exit(1)
    elapsed_s = time.time() - start_s
    sys.stderr.write(f"Loaded {t.size()} words in {elapsed_s:.2f}s\n")

    rng = get_rng_from_args(args)
    gui = BoggleGUI()
    try:
        while True:
            play_one_game(t, console, gui, rng)
            if not console.get_yes_or_no("Play again? "):
                break
    except EOFError:
        console.print()
    console.print("Have a nice day.")


if __name__ == "__main__":
    main()
