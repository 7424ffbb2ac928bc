from typing import Iterable, Self

LETTER_A = ord("a")


class PyTrie:
    """Word-membership lookup for the Boggle dictionary."""

    _children: list[Self | None]
    _is_word: bool

    def __init__(self):
        self._is_word = False
        self._children = [None] * 26

    def starts_word(self, i: int):
        return self._children[i] is not None

    def descend(self, i: int):
        return self._children[i]

    def is_terminal(self):
        return self._is_word

    # ---

    def add_word(self, word: str) -> Self:
        node = self
        for let in word:
            c = ord(let) - LETTER_A
            assert 0 <= c < 26, word
            if not node.starts_word(c):
                node._children[c] = PyTrie()
            node = node.descend(c)
        node._is_word = True
        return node

    def size(self):
        return (1 if self._is_word else 0) + sum(c.size() for c in self._children if c)

    def find_node(self, prefix: str):
        node = self
        for let in prefix.lower():
            c = ord(let) - LETTER_A
            if c < 0 or c >= 26 or not node.starts_word(c):
                return None
            node = node.descend(c)
        return node

    def is_prefix(self, prefix: str) -> bool:
        return self.find_node(prefix) is not None

    def is_word(self, word: str) -> bool:
        node = self.find_node(word)
        return node is not None and node.is_terminal()

    @staticmethod
    def create_from_wordlist(words: Iterable[str]) -> Self:
        """Words that aren't plain a-z are skipped."""
        trie = PyTrie()
        for word in words:
            word = normalize_word(word)
            if word is not None:
                trie.add_word(word)
        return trie


def normalize_word(word: str) -> str | None:
    word = word.strip().lower()
    if not word:
        return None
    for let in word:
        if let < "a" or let > "z":
            return None
    return word


def make_py_trie(dict_input: str):
    with open(dict_input) as f:
        return PyTrie.create_from_wordlist(f)
