"""Text commands driving an editing session from a script or a terminal."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, TextIO, Tuple

from ..core.constants import ClickOutcome
from ..core.exceptions import CommandError, LayoutExportError
from ..core.models import Word
from ..engine.editor import PuzzleEditor
from ..utils.logger import get_logger
from ..utils.pretty import format_grid, format_word_list, print_session


LOGGER = get_logger(__name__)

HELP: Dict[str, str] = {
    "add": "add TEXT                 add one word (may contain spaces) to the list",
    "rename": "rename REF TEXT          change a word's text (clears its letters if changed)",
    "edit": "edit REF                 start editing a word (deselects)",
    "save": "save TEXT                save the word being edited",
    "cancel": "cancel                   stop editing without changes",
    "remove": "remove REF               remove a word from the list",
    "select": "select REF               select a word, or deselect it if already selected",
    "deselect": "deselect                 drop the current selection",
    "click": "click ROW COL            click a grid cell",
    "clear": "clear REF                remove all of a word's letters from the grid",
    "theme": "theme TEXT               set the theme line",
    "hint": "hint TEXT                set the hint line",
    "show": "show                     print status, words and grid",
    "check": "check                    run layout integrity checks",
    "export": "export [PATH]            write the layout file",
    "help": "help                     list commands",
    "quit": "quit                     end the session",
}

OUTCOME_MESSAGES: Dict[ClickOutcome, str] = {
    ClickOutcome.IGNORED: "No word selected",
    ClickOutcome.EXHAUSTED: "Word already fully placed; deselected",
    ClickOutcome.REMOVED: "Letter removed",
    ClickOutcome.BLOCKED: "Cell belongs to another word",
    ClickOutcome.NOT_ADJACENT: "Cell does not touch the previous letter",
    ClickOutcome.PLACED: "Letter placed",
    ClickOutcome.COMPLETED: "Word complete",
}


@dataclass
class Command:
    name: str
    args: List[str]
    rest: str


def parse_command(line: str) -> Optional[Command]:
    """Parse one input line. Blank lines and ``#`` comments yield ``None``."""

    text = line.rstrip("\r\n").lstrip()
    if not text or text.startswith("#"):
        return None
    head, _, rest = text.partition(" ")
    name = head.lower()
    if name == "exit":
        name = "quit"
    if name not in HELP:
        raise CommandError(f"Unknown command '{head}' (try 'help')")
    return Command(name=name, args=rest.split(), rest=rest)


class CommandRunner:
    """Dispatch parsed commands against a :class:`PuzzleEditor`."""

    def __init__(self, editor: PuzzleEditor, stream: Optional[TextIO] = None) -> None:
        self.editor = editor
        self.stream = stream or sys.stdout
        self._handlers: Dict[str, Callable[[Command], None]] = {
            "add": self._add,
            "rename": self._rename,
            "edit": self._edit,
            "save": self._save,
            "cancel": self._cancel,
            "remove": self._remove,
            "select": self._select,
            "deselect": self._deselect,
            "click": self._click,
            "clear": self._clear,
            "theme": self._theme,
            "hint": self._hint,
            "show": self._show,
            "check": self._check,
            "export": self._export,
            "help": self._help,
        }

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------
    def execute(self, line: str) -> bool:
        """Run one line; returns ``False`` once the session should end."""

        command = parse_command(line)
        if command is None:
            return True
        if command.name == "quit":
            return False
        self._handlers[command.name](command)
        return True

    def run(self, lines: Iterable[str], *, prompt: Optional[str] = None) -> int:
        """Run lines until exhausted or ``quit``. Returns the number of errors."""

        errors = 0
        if prompt:
            self._emit(prompt, end="")
        for line in lines:
            try:
                if not self.execute(line):
                    break
            except CommandError as exc:
                errors += 1
                self._emit(f"Error: {exc}")
            if prompt:
                self._emit(prompt, end="")
        return errors

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------
    def _add(self, command: Command) -> None:
        word = self.editor.add_word(command.rest)
        if word is None:
            raise CommandError("add needs a word")
        self._emit(f"Added {len(self.editor.registry)}. {word.text}")

    def _rename(self, command: Command) -> None:
        ref, text = self._split_ref(command)
        word = self._resolve(ref)
        renamed = self.editor.save_edit(word.id, text)
        if renamed is None:
            self._emit("Word unchanged")
        else:
            self._emit(f"Renamed to {renamed.text}")

    def _edit(self, command: Command) -> None:
        word = self._resolve(self._single_arg(command))
        self.editor.start_edit(word.id)
        self._emit(f"Editing {word.text}")

    def _save(self, command: Command) -> None:
        word_id = self.editor.editing_word_id
        if word_id is None:
            raise CommandError("No word is being edited")
        saved = self.editor.save_edit(word_id, command.rest)
        self._emit("Edit cancelled" if saved is None else f"Saved {saved.text}")

    def _cancel(self, command: Command) -> None:
        self.editor.cancel_edit()

    def _remove(self, command: Command) -> None:
        word = self._resolve(self._single_arg(command))
        self.editor.remove_word(word.id)
        self._emit(f"Removed {word.text}")

    def _select(self, command: Command) -> None:
        word = self._resolve(self._single_arg(command))
        selection = self.editor.select_word(word.id)
        if selection is None:
            self._emit(f"Deselected {word.text}")
        elif selection.is_exhausted:
            self._emit(f"Selected {selection.word_text} (fully placed)")
        else:
            self._emit(f"Selected {selection.word_text}, next letter '{selection.next_letter}'")

    def _deselect(self, command: Command) -> None:
        self.editor.deselect()

    def _click(self, command: Command) -> None:
        if len(command.args) != 2:
            raise CommandError("click needs ROW and COL")
        try:
            row, col = int(command.args[0]), int(command.args[1])
        except ValueError as exc:
            raise CommandError(f"Invalid coordinates: {command.rest}") from exc
        if not self.editor.grid.bounds.contains(row, col):
            bounds = self.editor.grid.bounds
            raise CommandError(f"({row},{col}) is outside the {bounds.rows}x{bounds.cols} grid")
        outcome = self.editor.click(row, col)
        self._emit(OUTCOME_MESSAGES[outcome])

    def _clear(self, command: Command) -> None:
        word = self._resolve(self._single_arg(command))
        cleared = self.editor.clear_word_cells(word.id)
        self._emit(f"Cleared {cleared} letter(s) of {word.text}")

    def _theme(self, command: Command) -> None:
        self.editor.set_theme(command.rest)

    def _hint(self, command: Command) -> None:
        self.editor.set_hint(command.rest)

    def _show(self, command: Command) -> None:
        target = command.args[0].lower() if command.args else ""
        if target == "grid":
            self._emit(format_grid(self.editor.grid))
        elif target == "words":
            self._emit(format_word_list(self.editor))
        else:
            print_session(self.editor, stream=self.stream)

    def _check(self, command: Command) -> None:
        result = self.editor.validate()
        for message in result.messages:
            self._emit(f"Error: {message}")
        for warning in result.warnings:
            self._emit(f"Warning: {warning}")
        if result.ok and not result.warnings:
            self._emit("Layout OK")

    def _export(self, command: Command) -> None:
        path = command.rest.strip() or None
        try:
            target = self.editor.export(path)
        except LayoutExportError as exc:
            raise CommandError(str(exc)) from exc
        self._emit(f"Exported {target}")

    def _help(self, command: Command) -> None:
        for usage in HELP.values():
            self._emit(f"  {usage}")

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------
    def _resolve(self, token: str) -> Word:
        word = self.editor.registry.resolve(token)
        if word is None:
            raise CommandError(f"Unknown word: {token}")
        return word

    @staticmethod
    def _single_arg(command: Command) -> str:
        ref = command.rest.strip()
        if not ref:
            raise CommandError(f"{command.name} needs a word reference")
        return ref

    @staticmethod
    def _split_ref(command: Command) -> Tuple[str, str]:
        ref, _, text = command.rest.strip().partition(" ")
        if not ref:
            raise CommandError(f"{command.name} needs a word reference")
        return ref, text

    def _emit(self, message: str, end: str = "\n") -> None:
        print(message, file=self.stream, end=end)
