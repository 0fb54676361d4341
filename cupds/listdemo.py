"""An interactive menu that drives a list and a stack built on linked lists."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from cupds.dlist import ListHead

ANSI_RESET = "\x1b[0m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
MAGENTA = "\x1b[35m"
CYAN = "\x1b[36m"

MENU = (
    "0. Print datastructures\n"
    "1. Add to list\n"
    "2. Delete from list\n"
    "3. Push to stack\n"
    "4. Pop from stack\n"
    "5. Exit\n"
)


class _EndOfInput(Exception):
    pass


def _color(code: str, text: str) -> str:
    return f"{code}{text}{ANSI_RESET}"


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _next_number(tokens: Iterator[str], out: TextIO) -> int | None:
    token = next(tokens, None)
    if token is None:
        raise _EndOfInput
    try:
        return int(token)
    except ValueError:
        out.write(_color(RED, "Input not recognized. Try again\n"))
        return None


def render(head: ListHead, name: str) -> str:
    """The printed form of one structure, ending in a newline."""
    if head.empty():
        return _color(YELLOW, f"Empty {name}, cannot print!\n")
    return "".join(_color(MAGENTA, f"{name}: {value} ") for value in head.values()) + "\n"


def _add(head: ListHead, tokens: Iterator[str], out: TextIO, name: str) -> None:
    out.write(f"Enter number to add to {name}: ")
    value = _next_number(tokens, out)
    if value is None:
        return
    head.add(ListHead(value))
    if name == "list":
        out.write(_color(GREEN, f"Number {value} added to list\n"))
    else:
        out.write(_color(GREEN, f"Added {value} to {name}\n"))


def _delete(head: ListHead, out: TextIO) -> None:
    if head.empty():
        out.write(_color(YELLOW, "List is empty, cannot delete!\n"))
        return
    entry = head.next
    entry.delete()
    out.write(_color(GREEN, f"Deleted {entry.data} from list\n"))


def _pop(head: ListHead, out: TextIO) -> None:
    if head.empty():
        out.write(_color(YELLOW, "Stack empty, cannot pop from it!\n"))
        return
    entry = head.next
    entry.delete()
    out.write(f"Popped {entry.data} from the stack\n")


def run(
    lines: Iterable[str], out: TextIO | None = None
) -> tuple[ListHead, ListHead, ListHead]:
    """Run the menu over the whitespace-separated tokens of ``lines``.

    Stops on the exit option or when the input runs out, and returns the
    list, stack and queue heads as they were left.
    """
    out = sys.stdout if out is None else out
    tokens = _tokens(lines)
    items, stack, queue = ListHead(), ListHead(), ListHead()
    out.write(_color(GREEN, "Welcome to the data structures tester!\n"))
    try:
        while True:
            out.write(_color(CYAN, "Available options:\n"))
            out.write(MENU)
            choice = _next_number(tokens, out)
            if choice is None:
                continue
            if choice == 0:
                out.write(render(items, "list"))
                out.write(render(stack, "stack"))
                out.write(render(queue, "queue"))
            elif choice == 1:
                _add(items, tokens, out, "list")
            elif choice == 2:
                _delete(items, out)
            elif choice == 3:
                _add(stack, tokens, out, "stack")
            elif choice == 4:
                _pop(stack, out)
            elif choice == 5:
                break
            else:
                out.write(_color(RED, "Input not recognized. Try again\n"))
    except _EndOfInput:
        pass
    out.write(_color(GREEN, "Have a nice day!\n"))
    return items, stack, queue


def main(argv: list[str] | None = None) -> int:
    """Run the menu on standard input."""
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())