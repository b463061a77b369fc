import random

import pytest

from pendu.game import (
    DEFAULT_MAX_ERRORS,
    Difficulty,
    Game,
    GuessResult,
    Language,
)

_MISSES_FOR_MAISON = "bcdefghjklpqrtuvwxyz"


def _misses_until_lost(game):
    for count, letter in enumerate(_MISSES_FOR_MAISON, start=1):
        if game.guess(letter) is GuessResult.LOST:
            return count
    raise AssertionError("game never lost")


@pytest.mark.parametrize(
    "difficulty, expected",
    [(Difficulty.EASY, 8), (Difficulty.MEDIUM, 7), (Difficulty.HARD, 6)],
)
def test_difficulty_limits(difficulty, expected):
    game = Game("maison", max_errors=difficulty.max_errors)
    assert _misses_until_lost(game) == expected
    assert game.errors() == expected
    assert game.finished()


def test_default_limit_is_easy():
    game = Game("maison")
    assert _misses_until_lost(game) == DEFAULT_MAX_ERRORS == 8


def test_difficulty_from_label():
    assert Difficulty("Moyen") is Difficulty.MEDIUM
    with pytest.raises(ValueError):
        Difficulty("Impossible")


def test_language_dictionaries():
    assert Language.FRENCH.dictionary == "dico_fr.txt"
    assert Language.ENGLISH.dictionary == "dico_uk.txt"
    assert Language("francais") is Language.FRENCH


def test_new_game_is_masked():
    game = Game("maison")
    assert game.masked() == "_" * len("maison")
    assert game.errors() == 0
    assert game.used_letters() == ""
    assert not game.won()
    assert not game.finished()


def test_hit_reveals_all_occurrences():
    game = Game("banane")
    assert game.guess("a") is GuessResult.HIT
    assert game.masked() == "_a_a__"
    assert game.letters_found == 2
    assert game.errors() == 0


def test_uppercase_letter_is_lowered():
    game = Game("banane")
    assert game.guess("N") is GuessResult.HIT
    assert game.masked() == "__n_n_"


def test_repeated_letter_is_rejected():
    game = Game("maison")
    game.guess("z")
    assert game.guess("z") is GuessResult.REJECTED
    assert game.errors() == 1


def test_non_letter_raises():
    game = Game("maison")
    for bad in ("1", "", "ab", "é", "-"):
        with pytest.raises(ValueError):
            game.guess(bad)
    assert game.used_letters() == ""


def test_miss_counts_error():
    game = Game("maison")
    assert game.guess("x") is GuessResult.MISS
    assert game.errors() == 1
    assert game.masked() == "______"


def test_reaching_limit_loses():
    game = Game("maison", max_errors=3)
    results = [game.guess(c) for c in "xyz"]
    assert results == [GuessResult.MISS, GuessResult.MISS, GuessResult.LOST]
    assert game.finished()
    assert not game.won()


def test_finding_every_letter_wins():
    game = Game("maison")
    results = [game.guess(c) for c in "maiso"]
    assert results[:-1] == [GuessResult.HIT] * 4
    assert game.guess("n") is GuessResult.WON
    assert game.won()
    assert game.finished()
    assert game.masked() == "maison"


def test_used_letters_sorted():
    game = Game("maison")
    for c in "zmaq":
        game.guess(c)
    assert game.used_letters() == "".join(sorted("zmaq"))


def test_lowering_limit_affects_running_game():
    game = Game("maison", max_errors=8)
    for c in "xyz":
        game.guess(c)
    assert not game.finished()
    game.max_errors = 3
    assert game.finished()


def test_from_dictionary(tmp_path):
    path = tmp_path / "dico.txt"
    path.write_text("chat\njardin\nfenetre\n", encoding="utf-8")
    game = Game.from_dictionary(path, 7, random.Random(1))
    assert game.word in {"jardin", "fenetre"}
    assert game.max_errors == 7
    assert game.masked() == "_" * len(game.word)


def test_from_dictionary_without_usable_word(tmp_path):
    path = tmp_path / "dico.txt"
    path.write_text("chat\n", encoding="utf-8")
    with pytest.raises(ValueError):
        Game.from_dictionary(path)