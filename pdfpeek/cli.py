"""Interactive console menu for inspecting the pages of a PDF file."""

from __future__ import annotations

import argparse
import sys

from .document import PdfDocument
from .model import PdfError

_MARGIN = "\t" * 5
_BORDER = "\u2551"

_PATH_PROMPT = "Please Enter the complete path of your file (including .pdf): "
_MENU = (
    "Please Enter:"
    "\n1 for viewing total number of Pages:"
    "\n2 for viewing Resources of a Page ( Fonts & Images): "
    "\n3 for Exit."
    "\nInput: "
)
_PAGE_PROMPT = "Enter Page Number whose resources you want to get: "
_INVALID = "You did give an ivalid input.\n"
_PAUSE = "Press Enter to continue . . ."


def header() -> str:
    """Return the banner shown at the top of every screen."""
    stars = _MARGIN + "  " + "*" * 38 + "\n"
    title = f"{_MARGIN}{_BORDER} |P| |D| |F|    |V| |I| |E| |W| |E| |R| {_BORDER}\n"
    blank = f"{_MARGIN}{_BORDER}{' ' * 40}{_BORDER}\n"
    return stars + title + blank + stars + "\n\n"


def _ask(prompt: str) -> str | None:
    """Prompt for one line of input; None when input has run out."""
    try:
        return input(prompt)
    except EOFError:
        return None


def _pause() -> None:
    print()
    _ask(_PAUSE)


def _refresh() -> None:
    """Clear the terminal (when there is one) and redraw the banner."""
    if sys.stdout.isatty():
        print("\033[2J\033[H\033[96m", end="")
    print(header(), end="")


def _show_resources(document: PdfDocument, output_dir: str) -> None:
    answer = _ask(_PAGE_PROMPT)
    if answer is None:
        return
    try:
        page_number = int(answer.strip())
    except ValueError:
        print(_INVALID)
        return
    try:
        print(document.describe_resources(page_number, output_dir))
    except (PdfError, OSError) as exc:
        print(exc)
    print()


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu; returns the process exit status."""
    parser = argparse.ArgumentParser(
        prog="pdfpeek",
        description="Show the page count, fonts and images of an uncompressed PDF file.",
    )
    parser.add_argument("path", nargs="?", help="PDF file to open")
    parser.add_argument(
        "-o",
        "--output-dir",
        default=".",
        help="directory in which extracted images are saved (default: current)",
    )
    args = parser.parse_args(argv)

    _refresh()
    path = args.path
    if path is None:
        path = _ask(_PATH_PROMPT)
        if path is None:
            return 1
    try:
        document = PdfDocument(path.strip())
    except PdfError as exc:
        print(f"{exc}\n")
        _pause()
        return 1

    while True:
        _refresh()
        choice = _ask(_MENU)
        if choice is None:
            return 0
        _refresh()
        choice = choice.strip()
        if choice == "1":
            print(
                "Total Number of Pages in this pdf file are: "
                f"{document.total_pages()}\n"
            )
        elif choice == "2":
            _show_resources(document, args.output_dir)
        elif choice == "3":
            return 0
        else:
            print(_INVALID)
        _pause()


if __name__ == "__main__":
    sys.exit(main())