from boggle.console import Console
from boggle.gui import BoggleGUI, Player


def format_word_set(words) -> str:
    return "{" + ", ".join(f'"{w}"' for w in sorted(words)) + "}"


class Reporter:
    """Mirrors game events to both the console and the GUI."""

    def __init__(self, console: Console, gui: BoggleGUI):
        self.console = console
        self.gui = gui

    def print(self, *args):
        self.console.print(*args)

    def print_to_console_and_gui(self, message: str):
        self.console.print(message)
        self.gui.set_status_message(message)

    def set_score(self, score: int, player: Player):
        self.gui.set_score(score, player)

    def record_word(self, word: str, player: Player):
        self.gui.record_word(word, player)

    def clear_highlighting(self):
        self.gui.clear_highlighting()

    def label_all_cubes(self, letters: str):
        self.gui.label_all_cubes(letters)
