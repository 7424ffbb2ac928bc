"""Play one game of Boggle: the human goes first, then the computer.

All output goes through a Reporter so that every message shows up on the
console and in the GUI's status line.
"""

import random

from boggle.boggler import Boggle
from boggle.console import Console
from boggle.gui import BoggleGUI, Player
from boggle.reporter import Reporter, format_word_set
from boggle.trie import PyTrie

RANDOM_BOARD_PROMPT = "Do you want to generate a random board? "
BOARD_TEXT_PROMPT = "Type the 16 letters to appear on the board: "
INVALID_BOARD = "That is not a valid 16-letter board string. Try again."
WORD_PROMPT = "Type a word (or Enter to stop): "
HUMAN_TURN = "It's your turn!"
COMPUTER_TURN = "It's my turn!"
INVALID_WORD = "You must enter an unfound 4+ letter word from the dictionary."
COMPUTER_WINS = "Ha ha ha, I destroyed you. Better luck next time, puny human!"
HUMAN_WINS = "WOW, you defeated me! Congratulations!"


def play_one_game(
    dictionary: PyTrie,
    console: Console,
    gui: BoggleGUI,
    rng: random.Random | None = None,
):
    rows, cols = Boggle.DIMS
    gui.initialize(rows, cols)
    reporter = Reporter(console, gui)
    board = set_up_board(dictionary, console, gui, rng)

    console.clear()
    reporter.label_all_cubes(board.get_current_board())

    reporter.print_to_console_and_gui(HUMAN_TURN)
    play_human(board, reporter)

    reporter.print()
    reporter.print_to_console_and_gui(COMPUTER_TURN)
    play_computer(board, reporter)

    reporter.print_to_console_and_gui(game_result(board))


def game_result(board: Boggle) -> str:
    if board.get_score_computer() > board.human_score():
        return COMPUTER_WINS
    return HUMAN_WINS


def is_valid_board_input(text: str) -> bool:
    # Non-ASCII letters can change length or land in A-Z when upper-cased.
    if len(text) != Boggle.BOARD_SIZE or not text.isascii():
        return False
    return all("A" <= let <= "Z" for let in text.upper())


def set_up_board(
    dictionary: PyTrie,
    console: Console,
    gui: BoggleGUI | None = None,
    rng: random.Random | None = None,
) -> Boggle:
    """Roll a random board or ask for one; an empty board text means random."""
    board_text = ""
    if not console.get_yes_or_no(RANDOM_BOARD_PROMPT):
        board_text = console.get_line(BOARD_TEXT_PROMPT)
        while not is_valid_board_input(board_text):
            console.print(INVALID_BOARD)
            board_text = console.get_line(BOARD_TEXT_PROMPT)
        board_text = board_text.upper()

    return Boggle(dictionary, board_text, gui=gui, rng=rng)


def print_human_state(board: Boggle, reporter: Reporter):
    reporter.print(
        f"Your words ({board.get_num_human_words()}): "
        + format_word_set(board.get_human_words())
    )
    reporter.print(f"Your score: {board.human_score()}")
    reporter.set_score(board.human_score(), Player.HUMAN)


def human_status_message(is_valid_word: bool, word: str) -> str:
    if is_valid_word:
        return f'You found a new word! "{word.upper()}"'
    return INVALID_WORD


def play_human(board: Boggle, reporter: Reporter):
    console = reporter.console
    while True:
        reporter.print(board)
        print_human_state(board, reporter)

        word = console.get_line(WORD_PROMPT)
        if word == "":
            break

        word = word.lower()
        reporter.clear_highlighting()
        is_valid_word = board.human_word_search(word)

        console.clear()
        if is_valid_word:
            reporter.record_word(word, Player.HUMAN)
        reporter.print_to_console_and_gui(human_status_message(is_valid_word, word))


def play_computer(board: Boggle, reporter: Reporter):
    words = board.computer_word_search()
    reporter.print(f"My words ({len(words)}): {format_word_set(words)}")
    reporter.print(f"My score: {board.get_score_computer()}")

    for word in sorted(words):
        reporter.record_word(word, Player.COMPUTER)
    reporter.set_score(board.get_score_computer(), Player.COMPUTER)
