import pytest

from boggle.gui import BoggleGUI, Player


def test_requires_initialize():
    gui = BoggleGUI()
    with pytest.raises(RuntimeError):
        gui.set_status_message("hello")
    with pytest.raises(ValueError):
        gui.initialize(0, 4)


def test_gui_state():
    gui = BoggleGUI()
    gui.initialize(4, 4)
    gui.label_all_cubes("ABCDEFGHIJKLMNOP")
    assert gui.cubes[0] == ["A", "B", "C", "D"]
    assert gui.cubes[3][3] == "P"

    gui.set_highlighted(1, 2)
    gui.set_highlighted(2, 2)
    gui.set_highlighted(2, 2, False)
    assert gui.highlighted == {(1, 2)}
    with pytest.raises(ValueError):
        gui.set_highlighted(4, 0)
    gui.clear_highlighting()
    assert gui.highlighted == set()

    gui.record_word("fink", Player.HUMAN)
    gui.record_word("glop", Player.COMPUTER)
    gui.set_score(3, Player.COMPUTER)
    gui.set_status_message("It's my turn!")
    assert gui.words == {Player.HUMAN: ["fink"], Player.COMPUTER: ["glop"]}
    assert gui.scores == {Player.HUMAN: 0, Player.COMPUTER: 3}
    assert gui.status == "It's my turn!"


def test_initialize_resets():
    gui = BoggleGUI()
    gui.initialize(4, 4)
    gui.record_word("fink", Player.HUMAN)
    gui.set_score(1, Player.HUMAN)
    gui.initialize(4, 4)
    assert gui.words[Player.HUMAN] == []
    assert gui.scores[Player.HUMAN] == 0
