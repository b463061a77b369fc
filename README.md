# pendu

A game of hangman. A word of six to eight characters is drawn at random from
a French or an English dictionary; guess it one letter at a time before the
hanged man is complete.

## Installing

```
pip install .
```

The interface uses Tk (`tkinter`), which ships with most Python
installations. No other dependencies are needed.

## Playing

The game reads its words from two plain-text files, one word per line,
without accents:

- `dico_fr.txt`: the French dictionary (used by default)
- `dico_uk.txt`: the English dictionary

Only lines of six to eight characters are kept. Start the game from the
directory holding these files:

```
pendu
```

or point it at another directory:

```
pendu --dictionaries path/to/words
```

If the dictionary cannot be read or holds no usable word, or if no display
can be opened, the command prints a message and exits with status 1.

Type a letter in the entry field and press Enter. A correct letter is
revealed in every position where it occurs; a wrong one adds a piece to the
drawing (head, body, arms, legs, then eyes). A letter already tried changes
nothing, and anything other than a letter a–z is refused with a message.
When the game ends, the word is shown and a new game begins.

The buttons along the top:

- **Menu**: choose the dictionary language (French or English); choosing one
  starts a new game.
- **Niveau de difficulte**: set the maximum number of errors, which also
  applies to the game in progress:
  - Facile: 8 errors (the default)
  - Moyen: 7 errors
  - Difficile: 6 errors

  The level can no longer be changed once more than two errors have been made
  in the current game.
- **Aide**: shows the rules and tries to open a page about the game in the
  web browser with `xdg-open`.
- **Rejouer**: abandons the current game and starts a new one.

## Using the game logic

The rules are available without the interface:

```python
from pendu.game import Game, GuessResult

game = Game("pendule", 8)
game.guess("e")             # GuessResult.HIT
print(game.masked())        # _e____e
game.guess("z")             # GuessResult.MISS
print(game.used_letters())  # ez
print(game.errors(), game.won(), game.finished())  # 1 False False
```

`Game.guess` returns a `GuessResult` (`REJECTED` for a letter already
tried, `HIT`, `MISS`, `WON`, `LOST`) and raises `ValueError` for anything
that is not a single letter a–z. `Game.from_dictionary(path, max_errors, rng)`
starts a game on a word drawn from a dictionary file.

`pendu.controller.Session` holds the current game together with the chosen
`Language` and `Difficulty`: `new_game()`, `set_language(language)`,
`set_difficulty(difficulty)` (which raises `DifficultyLockedError` after more
than two errors) and `submit(key)`, which returns an `Outcome`.
`pendu.controller.end_message(word, won)` gives the end-of-game text.

`pendu.words.load_dictionary(path)` reads a dictionary file and
`pendu.words.random_word(words, rng)` picks one word from it.
`pendu.drawing.gallows_lines(width, height)` and
`pendu.drawing.figure_shapes(errors, width, height)` give the drawing as
`Line` and `Oval` shapes.

## Running the tests

```
pip install .[test]
pytest
```