"""Headless stand-in for the Boggle GUI.

Nothing is drawn; the latest state of each widget is kept in attributes so a
game can be inspected after (or during) play.
"""

import enum


class Player(enum.Enum):
    HUMAN = "human"
    COMPUTER = "computer"


class BoggleGUI:
    def __init__(self):
        self._reset()

    def _reset(self):
        self.rows = 0
        self.cols = 0
        self.cubes: list[list[str]] = []
        self.highlighted: set[tuple[int, int]] = set()
        self.status = ""
        self.scores = {p: 0 for p in Player}
        self.words: dict[Player, list[str]] = {p: [] for p in Player}
        self._initialized = False

    def initialize(self, rows: int, cols: int):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Invalid board dimensions: {rows}x{cols}")
        self._reset()
        self.rows = rows
        self.cols = cols
        self.cubes = [[" "] * cols for _ in range(rows)]
        self._initialized = True

    def _check(self):
        if not self._initialized:
            raise RuntimeError("BoggleGUI.initialize() must be called first")

    def _check_cell(self, row: int, col: int):
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise ValueError(f"Cube ({row}, {col}) is off the {self.rows}x{self.cols} board")

    def label_all_cubes(self, letters: str):
        self._check()
        assert len(letters) >= self.rows * self.cols, letters
        for i in range(self.rows * self.cols):
            self.cubes[i // self.cols][i % self.cols] = letters[i]

    def set_status_message(self, text: str):
        self._check()
        self.status = text

    def clear_highlighting(self):
        self._check()
        self.highlighted.clear()

    def set_highlighted(self, row: int, col: int, highlighted=True):
        self._check()
        self._check_cell(row, col)
        if highlighted:
            self.highlighted.add((row, col))
        else:
            self.highlighted.discard((row, col))

    def record_word(self, word: str, player: Player):
        self._check()
        self.words[player].append(word)

    def set_score(self, score: int, player: Player):
        self._check()
        self.scores[player] = score
