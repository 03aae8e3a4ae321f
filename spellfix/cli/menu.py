#!/usr/bin/env python3
"""Console front end for the spell checker.

The menu only prompts and prints; checking, suggesting and rewriting are all
done by the engine and the corrector.
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Callable, Sequence

from spellfix.common.config import settings
from spellfix.spellcheck.corrector import correct_text
from spellfix.spellcheck.engine import CheckResult, Correction, SpellCheckerEngine
from spellfix.spellcheck.text import Token

logger = logging.getLogger(__name__)

MENU = (
    "\n---- Spell Checker Menu ----\n"
    "[L] Load dictionary\n"
    "[C] Check spelling\n"
    "[F] Check spelling and correct file\n"
    "[A] Add word to dictionary\n"
    "[P] Purge cache\n"
    "[Q] Quit"
)


def format_results(result: CheckResult) -> str:
    lines = [""]
    if not result.misspelled:
        lines.append("No misspelled words found.")
    else:
        lines.append("Misspelled words:")
        lines.extend(result.misspelled)

    if result.corrections:
        lines.append("Corrections:")
        lines.extend(f"{c.misspelled} -> {c.suggestion}" for c in result.corrections)
    return "\n".join(lines)


class SpellMenu:
    def __init__(
        self,
        engine: SpellCheckerEngine,
        *,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self.engine = engine
        self.read = read
        self.write = write
        self._actions = {
            "l": self.load_dictionary,
            "c": self.check_spelling,
            "f": self.correct_file,
            "a": self.add_word,
            "p": self.purge_cache,
        }

    def run(self) -> None:
        while True:
            self.write(MENU)
            try:
                choice = self.read("Choose an option: ").strip().lower()
            except EOFError:
                choice = "q"

            if choice == "q":
                self.write("\nExiting program.")
                return
            action = self._actions.get(choice)
            if action is None:
                self.write("\nInvalid option. Please try again.")
                continue
            action()

    def load_dictionary(self) -> None:
        filename = self.read("\nEnter the name of the dictionary file: ").strip()
        if self.engine.load_dictionary(filename) and len(self.engine.dictionary):
            self.write("\nDictionary loaded successfully.")
        else:
            self.write("\nFailed to load dictionary.")

    def check_spelling(self) -> None:
        if not len(self.engine.dictionary):
            self.write("\nPlease load a dictionary first.")
            return
        text = self.read("\nEnter the text to spell check:\n")
        self.write(format_results(self.engine.check_text(text)))

    def correct_file(self) -> None:
        filename = self.read("Enter the filename for spell checking and correction: ").strip()
        path = Path(filename)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("file unreadable path=%s error=%s", path, exc)
            self.write(f"Could not open \"{filename}\".")
            return

        outcome = correct_text(text, self.engine, self._prompt_choice)
        if not outcome.changed:
            self.write("No corrections were made to the file.")
            return

        path.write_text(outcome.text, encoding="utf-8")
        self.write(f"All corrections have been applied and saved back to \"{filename}\".")

    def add_word(self) -> None:
        word = self.read("Enter the word to add to the dictionary: ")
        try:
            added = self.engine.insert(word)
        except ValueError:
            self.write("A dictionary word needs at least one letter.")
            return
        self.write("Word added successfully." if added else "Word already exists in the dictionary.")

    def purge_cache(self) -> None:
        self.engine.purge()
        self.write("\nCache purged.")

    def _prompt_choice(self, _index: int, token: Token, corrections: Sequence[Correction]) -> int:
        self.write(f"\nMisspelled word: {token.raw}")
        if not corrections:
            self.write("No suggestions.")
            return 0
        self.write(f"Suggestions for \"{token.raw}\":")
        for number, correction in enumerate(corrections, start=1):
            self.write(f"{number}: {correction.suggestion}")
        self.write("0: Skip (make no change)")
        raw = self.read("Choose a correction (number): ").strip()
        try:
            choice = int(raw)
        except ValueError:
            return -1
        if 0 < choice <= len(corrections):
            self.write("Applying correction...")
        return choice


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Interactive dictionary spell checker.")
    parser.add_argument(
        "--dictionary",
        default=None,
        help=f"Word list to load at start (default: {settings.dictionary_path} if it exists)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    engine = SpellCheckerEngine(
        max_distance=settings.max_edit_distance,
        deadline_s=settings.suggest_deadline_s,
    )
    dictionary_path = args.dictionary or settings.dictionary_path
    if args.dictionary or Path(dictionary_path).exists():
        engine.load_dictionary(dictionary_path)

    SpellMenu(engine).run()


if __name__ == "__main__":
    main()
