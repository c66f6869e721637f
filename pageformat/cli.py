"""Interactive menu for formatting a text file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO

from pageformat.formatter import DEFAULT_WIDTH, Formatter, FormatterError

MENU = "\n".join(
    [
        "  ",
        "  ** Formatter **",
        "  ",
        "  1 - Select file",
        "  2 - Clean all file",
        "  3 - Change string length ",
        "  4 - No format",
        "  5 - Format ",
        "  6 - Paragraph ",
        "  0 - Exit",
        "  ",
    ]
)


def prompt_filename(stdin: TextIO, stdout: TextIO) -> Path:
    """Ask for file names until one can be opened and return its path."""
    stdout.write(" Enter filename \n")
    while True:
        line = stdin.readline()
        if not line:
            raise FormatterError("no file name given")
        tokens = line.split()
        if not tokens:
            continue
        path = Path(tokens[0])
        try:
            with path.open("rb"):
                pass
        except OSError:
            stdout.write("Error open, file not found \n")
            stdout.write(" Enter filename \n")
            continue
        stdout.write("Open file \n")
        return path


def _read_int(stdin: TextIO) -> int | None:
    tokens = stdin.readline().split()
    if not tokens:
        return None
    try:
        return int(tokens[0])
    except ValueError:
        return None


def _change_width(formatter: Formatter, stdin: TextIO, stdout: TextIO) -> None:
    stdout.write(" Enter new string length \n  \n")
    width = _read_int(stdin)
    try:
        if width is None:
            raise FormatterError("no line width given")
        formatter.set_width(width)
    except FormatterError:
        stdout.write(" Error \n")
    formatter.format()


def _add_paragraph(formatter: Formatter, stdin: TextIO, stdout: TextIO) -> None:
    stdout.write("enter the line\n")
    line = _read_int(stdin)
    try:
        if line is None:
            raise FormatterError("no line given")
        formatter.add_paragraph(line)
    except FormatterError:
        stdout.write(" Error \n")
        return
    formatter.format()


def run_menu(formatter: Formatter, stdin: TextIO, stdout: TextIO) -> None:
    """Show the menu and carry out choices until exit or end of input."""
    while True:
        stdout.write(MENU + "\n")
        line = stdin.readline()
        if not line:
            return
        choice = line.strip()[:1]
        if choice == "1":
            formatter.select(prompt_filename(stdin, stdout))
        elif choice == "2":
            formatter.clear()
        elif choice == "3":
            _change_width(formatter, stdin, stdout)
        elif choice == "4":
            formatter.reset_paragraphs()
            formatter.format()
        elif choice == "5":
            formatter.format()
        elif choice == "6":
            _add_paragraph(formatter, stdin, stdout)
        elif choice == "0":
            return


def main(argv: list[str] | None = None) -> int:
    """Open a file, flatten it, then run the formatting menu."""
    parser = argparse.ArgumentParser(
        prog="pageformat", description="Format a text file into numbered pages."
    )
    parser.add_argument("path", nargs="?", help="file to format")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="line width")
    args = parser.parse_args(argv)
    try:
        path = args.path if args.path else prompt_filename(sys.stdin, sys.stdout)
        formatter = Formatter(path, args.width)
        formatter.no_format()
        formatter.save()
        run_menu(formatter, sys.stdin, sys.stdout)
    except FormatterError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())