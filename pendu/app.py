"""Graphical hangman game."""

from __future__ import annotations

import argparse
import subprocess
import sys
import tkinter as tk
from tkinter import messagebox

from pendu.controller import (
    DifficultyLockedError,
    Outcome,
    Session,
    end_message,
)
from pendu.drawing import Line, Oval, figure_shapes, gallows_lines
from pendu.game import Difficulty, Language

WINDOW_WIDTH = 600
DRAW_HEIGHT = 200
BUTTON_BG = "#99ccff"
ENTRY_BG = "#dcc8dc"
BIG_FONT = ("Courier", 24)

HELP_URL = "https://fr.wikipedia.org/wiki/Jeu_du_pendu"
HELP_TEXT = (
    "Bienvenue dans le jeu du Pendu !\n\n"
    "Pour gagner, il faut trouver le mot a deviner, represente par les petits "
    "batons horizontaux (comme ca tu peux aussi connaitre le nombre de lettres). "
    "Selectionne les lettres grace a ton clavier !\n\n"
    "Si tu fais une erreur, le pendu se dessine petit a petit. "
    "Tu as un nombre maximum d'erreurs, que tu peux configurer dans le menu.\n\n"
    "D'ailleurs, chaque niveau de difficulté est associe a un nombre d'erreurs maximum :\n"
    "Facile : 8 erreurs maximum\n"
    "Moyen : 7 erreurs maximum\n"
    "Difficile : 6 erreurs maximum\n\n"
    "Pour changer de langue, appuie sur le bouton en haut a gauche et "
    "selectionne ta langue favorite !\n\n"
    "Si tu veux en savoir plus sur le jeu, n'hesite pas a te rendre sur la page "
    "Wikipedia ouverte dans ton navigateur. \n"
    "Bonne chance !\n\n"
)


def open_help_page() -> bool:
    """Open the help page in the default browser; False if that failed."""
    try:
        subprocess.Popen(
            ["xdg-open", HELP_URL],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError:
        return False
    return True


class HangmanApp:
    """Main window: menu buttons, drawing area, word and letter entry."""

    def __init__(self, root: tk.Tk, session: Session) -> None:
        self.root = root
        self.session = session
        root.title("Pendu")

        top = tk.Frame(root)
        top.pack(fill="x")
        tk.Button(top, text="Menu", bg=BUTTON_BG,
                  command=self.show_language_menu).pack(side="left")
        tk.Button(top, text="Niveau de difficulte", bg=BUTTON_BG,
                  command=self.show_difficulty_menu).pack(side="left")
        tk.Button(top, text="Rejouer", bg=BUTTON_BG,
                  command=self.replay).pack(side="right")
        tk.Button(top, text="Aide", bg=BUTTON_BG,
                  command=self.show_help).pack(side="right")

        self.canvas = tk.Canvas(root, width=WINDOW_WIDTH, height=DRAW_HEIGHT, bg="white")
        self.canvas.pack(fill="both", expand=True)
        self.canvas.bind("<Configure>", lambda _event: self.redraw())

        self.word_label = tk.Label(root, font=BIG_FONT)
        self.word_label.pack(pady=8)

        bottom = tk.Frame(root)
        bottom.pack(pady=8)
        tk.Label(bottom, text="Saisir une lettre :", font=BIG_FONT).pack(side="left")
        self.entry = tk.Entry(bottom, bg=ENTRY_BG, width=4, font=BIG_FONT)
        self.entry.pack(side="left")
        self.entry.bind("<Return>", self._on_submit)
        self.entry.focus_set()

        self.refresh()

    def _area_size(self) -> tuple[int, int]:
        width = self.canvas.winfo_width()
        height = self.canvas.winfo_height()
        if width < 2 or height < 2:
            return WINDOW_WIDTH, DRAW_HEIGHT
        return width, height

    def _draw(self, shape: Line | Oval) -> None:
        if isinstance(shape, Oval):
            self.canvas.create_oval(shape.x, shape.y,
                                    shape.x + shape.width, shape.y + shape.height)
        else:
            self.canvas.create_line(shape.x1, shape.y1, shape.x2, shape.y2)

    def redraw(self) -> None:
        """Draw the gallows and the figure for the current error count."""
        self.canvas.delete("all")
        width, height = self._area_size()
        for line in gallows_lines(width, height):
            self._draw(line)
        for shape in figure_shapes(self.session.game.errors(), width, height):
            self._draw(shape)

    def refresh(self) -> None:
        """Update the shown word and the drawing."""
        self.word_label.config(text=self.session.game.masked())
        self.redraw()

    def replay(self) -> None:
        """Start a new game and clear the display."""
        self.session.new_game()
        self.entry.delete(0, "end")
        self.refresh()

    def _dialog(self, title: str) -> tk.Toplevel:
        window = tk.Toplevel(self.root)
        window.title(title)
        window.transient(self.root)
        window.grab_set()
        return window

    def show_language_menu(self) -> None:
        """Let the player pick the dictionary language."""
        window = self._dialog("Langues preferees")
        tk.Label(window, text="Selectionnez votre langue preferee :").pack()

        def choose(language: Language, name: str) -> None:
            window.destroy()
            self.session.set_language(language)
            self.entry.delete(0, "end")
            self.refresh()
            messagebox.showinfo("Pendu", f"Dictionnaire selectionne : {name}")

        row = tk.Frame(window)
        row.pack()
        tk.Button(row, text="    Francais    ",
                  command=lambda: choose(Language.FRENCH, "francais")).pack(side="left")
        tk.Button(row, text="    Anglais    ",
                  command=lambda: choose(Language.ENGLISH, "anglais")).pack(side="left")
        tk.Button(window, text="    Annuler    ", command=window.destroy).pack()

    def show_difficulty_menu(self) -> None:
        """Let the player pick the maximum number of errors."""
        window = self._dialog("Choix de la difficulté")

        def choose(difficulty: Difficulty) -> None:
            window.destroy()
            try:
                self.session.set_difficulty(difficulty)
            except DifficultyLockedError as exc:
                messagebox.showwarning("Pendu", str(exc))
            self.redraw()

        for difficulty in Difficulty:
            tk.Button(window, text=difficulty.value,
                      command=lambda d=difficulty: choose(d)).pack(side="left")

    def show_help(self) -> None:
        """Show the rules and open the help page."""
        messagebox.showinfo("Aide", HELP_TEXT)
        open_help_page()

    def _on_submit(self, _event: object = None) -> None:
        outcome = self.session.submit(self.entry.get())
        self.entry.delete(0, "end")
        if outcome is Outcome.INVALID:
            messagebox.showwarning("Pendu", "Veuillez saisir une lettre a-z")
            return
        self.refresh()
        if outcome in (Outcome.WON, Outcome.LOST):
            won = outcome is Outcome.WON
            title = "Partie gagnee" if won else "Partie perdue"
            messagebox.showinfo(title, end_message(self.session.game.word, won))
            self.replay()


def main(argv: list[str] | None = None) -> int:
    """Start the game window."""
    parser = argparse.ArgumentParser(prog="pendu", description="Jeu du pendu")
    parser.add_argument(
        "-d", "--dictionaries", default=".",
        help="directory holding dico_fr.txt and dico_uk.txt",
    )
    args = parser.parse_args(argv)
    try:
        session = Session(args.dictionaries)
    except (OSError, ValueError) as exc:
        print(f"pendu: {exc}", file=sys.stderr)
        return 1
    try:
        root = tk.Tk()
    except tk.TclError:
        print("Erreur : Impossible d'ouvrir l'affichage.", file=sys.stderr)
        return 1
    HangmanApp(root, session)
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())