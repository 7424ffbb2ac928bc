"""The sixteen Boggle cubes and a roller for random boards."""

import random

# https://www.bananagrammer.com/2013/10/the-boggle-cube-redesign-and-its-effect.html
# "New" Boggle dice, 1987 to ~2008
DICE = [
    "aaeegn",
    "achops",
    "affkps",
    "abbjoo",
    "cimotu",
    "delrvy",
    "deilrx",
    "eeinsu",
    "eeghnw",
    "hlnnrz",
    "distty",
    "aoottw",
    "elrtty",
    "eiosst",
    "ehrtvw",
    "himnqu",
]


def roll_board(rng: random.Random | None = None, dice=DICE) -> str:
    """Shake the cubes into the grid and read off the top faces, upper-cased."""
    rng = rng or random
    cubes = [*dice]
    rng.shuffle(cubes)
    return "".join(rng.choice(cube) for cube in cubes).upper()
