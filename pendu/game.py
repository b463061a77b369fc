"""State and rules of a single hangman game."""

from __future__ import annotations

import enum
import random
import string
from os import PathLike

from pendu.words import load_dictionary, random_word

DEFAULT_MAX_ERRORS = 8


class Difficulty(enum.Enum):
    """Difficulty levels, each tied to a maximum number of errors."""

    EASY = "Facile"
    MEDIUM = "Moyen"
    HARD = "Difficile"

    @property
    def max_errors(self) -> int:
        return _MAX_ERRORS[self]


_MAX_ERRORS = {Difficulty.EASY: 8, Difficulty.MEDIUM: 7, Difficulty.HARD: 6}


class Language(enum.Enum):
    """Dictionary languages."""

    FRENCH = "francais"
    ENGLISH = "Anglais"

    @property
    def dictionary(self) -> str:
        """File name of the dictionary for this language."""
        return "dico_fr.txt" if self is Language.FRENCH else "dico_uk.txt"


class GuessResult(enum.Enum):
    """What a guess did to the game."""

    REJECTED = "rejected"
    HIT = "hit"
    MISS = "miss"
    WON = "won"
    LOST = "lost"


class Game:
    """A hangman game around one secret word."""

    def __init__(self, word: str, max_errors: int = DEFAULT_MAX_ERRORS) -> None:
        self.word = word
        self.max_errors = max_errors
        self.letters_found = 0
        self._shown = ["_"] * len(word)
        self._used: set[str] = set()
        self._errors = 0

    @classmethod
    def from_dictionary(
        cls,
        path: str | PathLike[str],
        max_errors: int = DEFAULT_MAX_ERRORS,
        rng: random.Random | None = None,
    ) -> Game:
        """Start a game on a word drawn from the dictionary at *path*."""
        return cls(random_word(load_dictionary(path), rng), max_errors)

    def guess(self, letter: str) -> GuessResult:
        """Propose *letter* and report the effect.

        Raises ValueError when *letter* is not a single letter a-z.
        """
        choice = letter.lower()
        if len(choice) != 1 or choice not in string.ascii_lowercase:
            raise ValueError(f"not a letter a-z: {letter!r}")
        if choice in self._used:
            return GuessResult.REJECTED
        self._used.add(choice)

        positions = [i for i, ch in enumerate(self.word) if ch == choice]
        for i in positions:
            self._shown[i] = choice
        self.letters_found += len(positions)

        if self.won():
            return GuessResult.WON
        if positions:
            return GuessResult.HIT
        self._errors += 1
        if self._errors >= self.max_errors:
            return GuessResult.LOST
        return GuessResult.MISS

    def used_letters(self) -> str:
        """Letters already proposed, in alphabetical order."""
        return "".join(sorted(self._used))

    def errors(self) -> int:
        """Number of wrong guesses so far."""
        return self._errors

    def masked(self) -> str:
        """The word as shown to the player, '_' for letters not found."""
        return "".join(self._shown)

    def won(self) -> bool:
        """True once every letter of the word has been found."""
        return self.masked() == self.word

    def finished(self) -> bool:
        """True when the game is won or the error limit is reached."""
        return self.won() or self._errors >= self.max_errors