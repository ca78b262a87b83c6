"""CLI entrypoint for the strands layout editor."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from strands.engine.editor import EditorConfig, PuzzleEditor
from strands.io.commands import CommandRunner
from strands.utils.logger import configure_logging


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Paint word paths onto an 8x6 grid and export a strands layout",
    )
    parser.add_argument("--words", nargs="+", metavar="WORD", help="Words to start the list with")
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--theme", type=str, default="", help="Theme line of the layout")
    parser.add_argument("--hint", type=str, default="", help="Hint line of the layout")
    parser.add_argument(
        "--script",
        type=Path,
        metavar="FILE",
        help="Run session commands from FILE instead of reading the terminal",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Export the layout to this path when the session ends",
    )
    parser.add_argument(
        "--export-dir",
        type=Path,
        default=Path("."),
        help="Directory for 'export' without an explicit path",
    )
    parser.add_argument("--no-chime", action="store_true", help="Do not ring the bell on word completion")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    editor = PuzzleEditor(
        EditorConfig(export_dir=args.export_dir, chime_enabled=not args.no_chime)
    )
    editor.set_theme(args.theme)
    editor.set_hint(args.hint)

    words: List[str] = []
    if args.words:
        words.extend(args.words)
    if args.words_file:
        words.extend(parse_words_file(args.words_file))
    for text in words:
        editor.add_word(text)

    runner = CommandRunner(editor)
    if args.script:
        lines = args.script.read_text(encoding="utf-8").splitlines()
        errors = runner.run(lines)
    else:
        interactive = sys.stdin.isatty()
        errors = runner.run(sys.stdin, prompt="> " if interactive else None)

    if args.output:
        target = editor.export(args.output)
        print(f"Exported {target}")
    return 1 if errors and args.script else 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
