"""Game session: language, difficulty and keyboard input handling."""

from __future__ import annotations

import enum
import random
from os import PathLike
from pathlib import Path

from pendu.game import (
    DEFAULT_MAX_ERRORS,
    Difficulty,
    Game,
    GuessResult,
    Language,
)

MAX_ERRORS_FOR_DIFFICULTY_CHANGE = 2


class Outcome(enum.Enum):
    """Effect of a key submitted by the player."""

    IGNORED = "ignored"
    INVALID = "invalid"
    REPEATED = "repeated"
    HIT = "hit"
    MISS = "miss"
    WON = "won"
    LOST = "lost"


_OUTCOMES = {
    GuessResult.REJECTED: Outcome.REPEATED,
    GuessResult.HIT: Outcome.HIT,
    GuessResult.MISS: Outcome.MISS,
    GuessResult.WON: Outcome.WON,
    GuessResult.LOST: Outcome.LOST,
}


class DifficultyLockedError(Exception):
    """Raised when the difficulty is changed too late in a game."""

    def __init__(self) -> None:
        super().__init__(
            "Vous ne pouvez plus modifier le nombre d'erreurs maximum, "
            "car vous etes deja bien avance dans la partie."
        )


class Session:
    """A sequence of games sharing language and difficulty settings."""

    def __init__(
        self,
        dictionary_dir: str | PathLike[str] = ".",
        rng: random.Random | None = None,
    ) -> None:
        self.dictionary_dir = Path(dictionary_dir)
        self.rng = rng
        self.language = Language.FRENCH
        self.max_errors = DEFAULT_MAX_ERRORS
        self.game = self.new_game()

    def new_game(self) -> Game:
        """Replace the current game by a fresh one and return it."""
        path = self.dictionary_dir / self.language.dictionary
        self.game = Game.from_dictionary(path, self.max_errors, self.rng)
        return self.game

    def set_language(self, language: Language) -> Game:
        """Switch dictionary and start a new game with it."""
        self.language = language
        return self.new_game()

    def set_difficulty(self, difficulty: Difficulty) -> None:
        """Change the error limit, also for the game in progress.

        Raises DifficultyLockedError once more than two errors were made.
        """
        if self.game.errors() > MAX_ERRORS_FOR_DIFFICULTY_CHANGE:
            raise DifficultyLockedError()
        self.max_errors = difficulty.max_errors
        self.game.max_errors = self.max_errors

    def submit(self, key: str) -> Outcome:
        """Play the first character of *key* as a guess."""
        if self.game.finished():
            return Outcome.IGNORED
        letter = key[:1].lower()
        if not (letter.isascii() and letter.isalpha()):
            return Outcome.INVALID
        return _OUTCOMES[self.game.guess(letter)]


def end_message(word: str, won: bool) -> str:
    """Text shown when a game ends on *word*."""
    if won:
        head = "BRAVO !!!!\n\nVous avez gagne la partie !\n\n"
    else:
        head = (
            "PERDU !!!\n\n"
            "Vous avez fait trop d'erreurs, vous avez perdu la partie !\n\n"
        )
    return (
        head
        + "Appuyez sur Ok pour relancer une nouvelle partie !\n\n"
        + f"Le mot etait : {word}\n\n"
    )