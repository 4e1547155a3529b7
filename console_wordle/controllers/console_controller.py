"""
Console Controller

Terminal front end: intro, board and alphabet rendering, the guess prompt,
the end-of-round statistics screen and its menu.
"""

import sys
from typing import Callable, List, Optional, TextIO

from colorama import Cursor, Fore, Style
from colorama.ansi import clear_screen

from ..config.game_settings import ALPHABET, BOARD_COLS
from ..models.errors import InvalidGuessCharacters, InvalidGuessLength, UnknownWord
from ..models.game import LetterStatus
from ..models.stats import StatsLedger
from ..services.alphabet_tracker import AlphabetTracker
from ..services.game_service import GameSession
from ..services.round_state import RoundState
from ..utils.game_logger import game_logger

PLAY = 1
RESET_STATS = 2
EXIT_GAME = 3

STATUS_COLORS = {
    LetterStatus.CORRECT: Fore.GREEN,
    LetterStatus.PRESENT: Fore.YELLOW,
    LetterStatus.ABSENT: Fore.LIGHTBLACK_EX,
    LetterStatus.UNUSED: Fore.WHITE,
}

# Shown after each letter when colour is off
STATUS_MARKERS = {
    LetterStatus.CORRECT: '+',
    LetterStatus.PRESENT: '?',
    LetterStatus.ABSENT: '-',
    LetterStatus.UNUSED: ' ',
}


class _ExitRequested(Exception):
    """Input stream closed or interrupted."""


def paint(text: str, color: str, use_color: bool = True) -> str:
    if not use_color:
        return text
    return f"{color}{text}{Style.RESET_ALL}"


def render_letter(letter: str, status: LetterStatus, use_color: bool = True) -> str:
    if use_color:
        return paint(letter, STATUS_COLORS[status])
    return letter + STATUS_MARKERS[status]


def render_alphabet(tracker: AlphabetTracker, use_color: bool = True) -> str:
    if use_color:
        return "".join(render_letter(letter, tracker.status_of(letter)) for letter in ALPHABET)
    # Plain mode: letters known to be absent are hidden
    return "".join(
        '.' if tracker.status_of(letter) is LetterStatus.ABSENT else letter
        for letter in ALPHABET
    )


def render_board(round_state: RoundState, use_color: bool = True) -> str:
    """The guess grid, one row per allowed attempt."""
    cell_width = 1 if use_color else 2
    separator = "-" * (BOARD_COLS * (cell_width + 4) - 1)
    history = round_state.history
    lines: List[str] = []

    for row in range(round_state.max_attempts):
        lines.append(separator)
        cells = []
        if row < len(history):
            record = history[row]
            for letter, status in zip(record.guess, record.evaluation):
                cells.append(f" |{render_letter(letter, status, use_color)}| ")
        else:
            cells = [f" |{' ' * cell_width}| "] * BOARD_COLS
        lines.append("".join(cells))

    lines.append(separator)
    return "\n".join(lines) + "\n"


def render_statistics(ledger: StatsLedger, stats_enabled: bool = True, use_color: bool = True) -> str:
    lines = []
    if stats_enabled:
        lines.append(paint("\t\tSTATISTICS", Fore.BLUE, use_color))
    else:
        lines.append(paint("\t\tSTATISTICS ARE UNAVAILABLE", Fore.BLUE, use_color))
        lines.append("\t(this session only, not saved)")

    lines.append(paint(
        f"{ledger.games_played}\t{ledger.win_percentage():g}\t{ledger.current_streak}\t{ledger.max_streak}\n"
        "Played\tWin %\tCurrent\tMax\n"
        "\t\tStreak\tStreak",
        Fore.CYAN, use_color
    ))

    distribution = ["", "Guess Distribution"]
    distribution += [f"{i + 1} : {count}" for i, count in enumerate(ledger.guess_distribution)]
    lines.append(paint("\n".join(distribution), Fore.YELLOW, use_color))
    return "\n".join(lines)


class ConsoleGame:
    """
    Drives a GameSession from a terminal.

    Input and output are injectable so the flow can be exercised without a
    real terminal.
    """

    def __init__(self,
                 session: GameSession,
                 input_fn: Callable[[str], str] = input,
                 out: Optional[TextIO] = None,
                 use_color: bool = True):
        self.session = session
        self.input_fn = input_fn
        self.out = out if out is not None else sys.stdout
        self.use_color = use_color
        self.running = True
        self.stats_failure_acknowledged = False

    def run(self) -> None:
        """Intro, then rounds until the player exits."""
        try:
            self.intro()
            while self.running:
                self.session.new_round()
                self.play_round()
                self.end_screen()
        except _ExitRequested:
            self.running = False
        game_logger.log_user_action(None, 'exit', rounds_started=self.session.rounds_started)

    def intro(self) -> None:
        self.confirm_stats_failure()
        if not self.running:
            return

        self._write(paint("Welcome to Wordle.\n", Fore.BLUE, self.use_color))
        self._write(paint(
            f"Guess the {BOARD_COLS}-letter word in {self.session.round.max_attempts} tries.\n"
            "Green: right letter, right spot.\n"
            "Yellow: in the word, wrong spot.\n"
            "Grey: not in the word.\n",
            Fore.RED, self.use_color
        ))
        self._read("Press ENTER to continue ")
        self._clear()

    def confirm_stats_failure(self) -> None:
        """Asks once per session whether to play on without saved statistics."""
        if self.session.stats_enabled or self.stats_failure_acknowledged:
            return

        while True:
            self._write(paint(
                "Stats are disabled for the session due to an error.\n\n"
                f"{self.session.stats_error}",
                Fore.RED, self.use_color
            ))
            self._write("")
            self._write(f"{PLAY}. Play")
            self._write(f"{EXIT_GAME}. Exit")
            self._write("")

            option = self._read_option()
            self._clear()
            if option == PLAY:
                self.stats_failure_acknowledged = True
                return
            if option == EXIT_GAME:
                self.running = False
                return
            self._read("Invalid option")

    def play_round(self) -> None:
        round_state = self.session.round
        while not round_state.is_complete:
            self._clear()
            self._write(render_alphabet(self.session.tracker, self.use_color))
            self._write(render_board(round_state, self.use_color))

            raw = self._read(paint("Word: ", Fore.YELLOW, self.use_color))
            self._write("")
            try:
                self.session.submit_guess(raw)
            except (InvalidGuessLength, InvalidGuessCharacters, UnknownWord) as e:
                game_logger.log_user_action(None, 'invalid_guess', guess=raw.strip(), reason=str(e))
                self._read(paint(f"Please enter a valid {BOARD_COLS}-letter word", Fore.YELLOW, self.use_color))

        self._clear()

    def end_screen(self) -> None:
        self.confirm_stats_failure()
        if not self.running:
            return

        while True:
            self._write(self._end_screen_text())
            self._write("")
            self._write(f"{PLAY}. Play Again")
            if self.session.stats_enabled:
                self._write(f"{RESET_STATS}. Reset Stats")
            self._write(f"{EXIT_GAME}. Exit")
            self._write("")

            option = self._read_option()
            self._clear()
            if option == PLAY:
                game_logger.log_user_action(None, 'play_again')
                return
            if option == RESET_STATS and self.session.stats_enabled:
                game_logger.log_user_action(None, 'reset_stats')
                self.session.reset_stats()
            elif option == EXIT_GAME:
                self.running = False
                return

    def _end_screen_text(self) -> str:
        round_state = self.session.round
        if round_state.won:
            banner = paint("\t\tYOU WON", Fore.GREEN, self.use_color)
        else:
            banner = paint("\t\tYOU LOST", Fore.RED, self.use_color)

        return "\n".join([
            render_board(round_state, self.use_color),
            banner,
            paint(f"\t\tANSWER: {round_state.secret}\n", Fore.MAGENTA, self.use_color),
            render_statistics(self.session.ledger, self.session.stats_enabled, self.use_color),
        ])

    def _read_option(self) -> Optional[int]:
        raw = self._read("Option: ").strip()
        try:
            return int(raw)
        except ValueError:
            return None

    def _read(self, prompt: str) -> str:
        try:
            return self.input_fn(prompt)
        except (EOFError, KeyboardInterrupt):
            raise _ExitRequested()

    def _write(self, text: str) -> None:
        print(text, file=self.out)

    def _clear(self) -> None:
        if self.use_color:
            self.out.write(clear_screen() + Cursor.POS())
