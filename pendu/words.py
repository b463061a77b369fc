"""Dictionary loading and random word selection."""

from __future__ import annotations

import random
from collections.abc import Sequence
from os import PathLike

MIN_WORD_LENGTH = 6
MAX_WORD_LENGTH = 8


def load_dictionary(path: str | PathLike[str]) -> list[str]:
    """Return the words of *path* whose length lies between the bounds.

    The file holds one word per line. Only the trailing newline is removed;
    any other character counts toward the word's length.
    Raises OSError when the file cannot be read.
    """
    with open(path, encoding="utf-8") as handle:
        words = (line.rstrip("\n") for line in handle)
        return [
            word
            for word in words
            if MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH
        ]


def random_word(words: Sequence[str], rng: random.Random | None = None) -> str:
    """Pick one word from *words* at random.

    Raises ValueError when *words* is empty.
    """
    if not words:
        raise ValueError("the dictionary holds no usable word")
    chooser = rng if rng is not None else random.Random()
    return chooser.choice(words)