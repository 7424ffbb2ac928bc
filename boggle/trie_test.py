import os

from boggle.test_utils import TESTDATA
from boggle.trie import PyTrie, make_py_trie, normalize_word


def asc(char: str):
    assert len(char) == 1
    return ord(char) - ord("a")


def test_trie():
    t = PyTrie.create_from_wordlist(
        [
            "agriculture",
            "culture",
            "boggle",
            "tea",
            "sea",
            "teapot",
        ]
    )
    assert not t.is_terminal()

    assert t.size() == 6
    assert t.is_word("agriculture")
    assert t.is_word("culture")
    assert t.is_word("boggle")
    assert t.is_word("tea")
    assert t.is_word("sea")
    assert t.is_word("teapot")

    assert not t.is_word("teap")
    assert not t.is_word("random")
    assert not t.is_word("cultur")
    assert t.is_prefix("teap")
    assert t.is_prefix("cultur")
    assert not t.is_prefix("random")

    wd = t.descend(asc("t"))
    assert wd is not None
    wd = wd.descend(asc("e"))
    assert wd is not None
    assert not wd.is_terminal()
    wd = wd.descend(asc("a"))
    assert wd is not None
    assert wd.is_terminal()


def test_case_insensitive_lookup():
    t = PyTrie.create_from_wordlist(["Boggle"])
    assert t.is_word("boggle")
    assert t.is_word("BOGGLE")
    assert t.is_word("BoGgLe")
    assert not t.is_word("bog gle")
    assert not t.is_word("")


def test_normalize_word():
    assert normalize_word("  Quart\n") == "quart"
    assert normalize_word("don't") is None
    assert normalize_word("café") is None
    assert normalize_word("\n") is None


def test_load_file():
    t = make_py_trie(os.path.join(TESTDATA, "boggle-words.txt"))
    assert not t.is_terminal()
    assert t.size() == 10

    assert t.is_word("fink")
    assert t.is_word("cat")
    assert not t.is_word("finks")
    assert not t.is_word("don't")
