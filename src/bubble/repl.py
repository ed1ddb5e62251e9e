"""BubbleRepl: interactive shell and the ``bubble`` CLI entry point.

Usage::

    bubble                  # interactive shell
    bubble -c 'say 1 plus 2'
    bubble script.bub       # one session, one line at a time
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import IO

from .session import Session
from .values import Value, format_value


BANNER = """
  BUBBLE

  Welcome to the Bubble programming language!

  Type help for a list of commands. To exit, type exit.
"""

HELP = """
  Bubble commands:
    exit - Exit the Bubble REPL
    help - Display this help message
    <expression> - Evaluate the expression
    remember <variable> as <expression> - Assign a value to a variable
    say <expression> - Print the value of an expression
"""

PROMPT = "> "


# ---------------------------------------------------------------------------
# BubbleRepl class (programmatic use)
# ---------------------------------------------------------------------------

class BubbleRepl:
    """Stateful shell that keeps variables across calls.

    Usage::

        repl = BubbleRepl()
        repl.eval("remember y as 10")
        repl.eval("say y")          # → VText("10")

        repl.session.variables      # all defined variables
        repl.reset()                # clear state
    """

    def __init__(self) -> None:
        self.session = Session()

    def eval(self, text: str) -> Value:
        """Evaluate one line against the session and return its result."""
        return self.session.run(text)

    def reset(self) -> None:
        self.session = Session()


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _print_result(result: Value, dest: IO[str]) -> None:
    print(f"  {format_value(result)}", file=dest)
    print(" ", file=dest)


def _process_line(repl: BubbleRepl, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    command = line.strip()
    if not command:
        return True

    if command == "exit":
        return False

    if command == "help":
        print(HELP, file=dest)
        return True

    _print_result(repl.eval(line), dest)
    return True


def _run_file(repl: BubbleRepl, filepath: str, dest: IO[str]) -> int:
    """Feed every line of *filepath* through one session."""
    try:
        with open(filepath, encoding="utf-8") as fh:
            for file_line in fh:
                if not _process_line(repl, file_line.rstrip("\n"), dest):
                    break
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error reading '{filepath}': {exc}", file=sys.stderr)
        return 1
    return 0


def _interact(repl: BubbleRepl, dest: IO[str]) -> None:
    print(BANNER, file=dest)
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print(file=dest)
            break
        except KeyboardInterrupt:
            print(file=dest)
            continue

        if not _process_line(repl, line, dest):
            break


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

parser = argparse.ArgumentParser(
    prog="bubble",
    description="Interpreter for the Bubble scripting language.",
)
parser.add_argument("file", nargs="?", help="run each line of FILE in one session")
parser.add_argument("-c", "--command", metavar="LINE", help="evaluate LINE and print the result")
parser.add_argument("-v", "--verbose", action="store_true", help="log diagnostics to stderr")


def main(argv: list[str] | None = None) -> int:
    """Bubble shell (``bubble`` / ``python -m bubble``)."""
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    repl = BubbleRepl()
    dest: IO[str] = sys.stdout

    if args.command is not None:
        _print_result(repl.eval(args.command), dest)
        return 0
    if args.file:
        return _run_file(repl, args.file, dest)

    _interact(repl, dest)
    return 0


if __name__ == "__main__":
    sys.exit(main())
