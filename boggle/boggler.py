import random

from boggle.dice import roll_board
from boggle.gui import BoggleGUI
from boggle.neighbors import NEIGHBORS
from boggle.trie import PyTrie

MIN_WORD_LENGTH = 4


def word_score(word: str) -> int:
    return max(0, len(word) - MIN_WORD_LENGTH + 1)


class Boggle:
    """One game's board plus both players' words and scores."""

    BOARD_SIZE = 16
    DIMS = (4, 4)

    _dictionary: PyTrie

    def __init__(
        self,
        dictionary: PyTrie,
        board_text: str = "",
        gui: BoggleGUI | None = None,
        rng: random.Random | None = None,
    ):
        self._dictionary = dictionary
        self._gui = gui
        if board_text == "":
            board_text = roll_board(rng)
        if not (
            len(board_text) == self.BOARD_SIZE
            and board_text.isascii()
            and board_text.isalpha()
        ):
            raise ValueError(f"Invalid board: {board_text!r}")
        board_text = board_text.upper()
        self._letters = board_text
        self._rows, self._cols = self.DIMS
        self._neighbors = NEIGHBORS[self.DIMS]
        self._human_words: set[str] = set()
        self._computer_words: set[str] = set()

    def __str__(self):
        return "\n".join(
            self._letters[r * self._cols : (r + 1) * self._cols]
            for r in range(self._rows)
        )

    def get_current_board(self) -> str:
        return self._letters

    def get_letter(self, row: int, col: int) -> str:
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(f"({row}, {col}) is off the board")
        return self._letters[row * self._cols + col]

    # --- human

    def human_word_search(self, word: str) -> bool:
        """Check a human guess; on success it's recorded and its path highlighted."""
        word = word.lower()
        if len(word) < MIN_WORD_LENGTH:
            return False
        if word in self._human_words:
            return False
        if not self._dictionary.is_word(word):
            return False
        path = self.find_path(word)
        if path is None:
            return False
        self._human_words.add(word)
        if self._gui:
            for i in path:
                self._gui.set_highlighted(i // self._cols, i % self._cols)
        return True

    def find_path(self, word: str) -> list[int] | None:
        """Cells spelling out word along adjacent, unrepeated cubes, if any."""
        target = word.upper()
        if not target:
            return None
        used = [False] * self.BOARD_SIZE
        seq: list[int] = []

        def dfs(i: int, pos: int) -> bool:
            if self._letters[i] != target[pos]:
                return False
            used[i] = True
            seq.append(i)
            if pos + 1 == len(target):
                return True
            for idx in self._neighbors[i]:
                if not used[idx] and dfs(idx, pos + 1):
                    return True
            seq.pop()
            used[i] = False
            return False

        for i in range(self.BOARD_SIZE):
            if dfs(i, 0):
                return seq
        return None

    def human_score(self) -> int:
        return sum(word_score(w) for w in self._human_words)

    def get_num_human_words(self) -> int:
        return len(self._human_words)

    def get_human_words(self) -> set[str]:
        return set(self._human_words)

    # --- computer

    def computer_word_search(self) -> set[str]:
        """Find every word on the board that the human hasn't claimed."""
        found = set[str]()
        used = [False] * self.BOARD_SIZE
        t = self._dictionary
        for i in range(self.BOARD_SIZE):
            d = t.descend(self._cell(i))
            if d:
                self._do_dfs(i, d, self._letters[i].lower(), used, found)
        self._computer_words = found - self._human_words
        return set(self._computer_words)

    def _cell(self, i: int) -> int:
        return ord(self._letters[i]) - ord("A")

    def _do_dfs(self, i: int, t: PyTrie, prefix: str, used: list[bool], out: set[str]):
        used[i] = True
        if t.is_terminal() and len(prefix) >= MIN_WORD_LENGTH:
            out.add(prefix)

        for idx in self._neighbors[i]:
            if not used[idx]:
                d = t.descend(self._cell(idx))
                if d:
                    self._do_dfs(idx, d, prefix + self._letters[idx].lower(), used, out)

        used[i] = False

    def get_score_computer(self) -> int:
        return sum(word_score(w) for w in self._computer_words)

    def get_computer_words(self) -> set[str]:
        return set(self._computer_words)
