"""Interactive menus for the data structures and the expression converters."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator
from typing import TextIO, Union

from dsakit.circular_queue import CircularQueue
from dsakit.linear_queue import LinearQueue, QueueEmptyError, QueueFullError
from dsakit.linked_list import EmptyListError, LinkedList, NodeNotFoundError
from dsakit.notation import infix_to_postfix, infix_to_prefix
from dsakit.stack import Stack, StackOverflowError, StackUnderflowError

_DATA_PROMPT = "Enter data to be inserted: "

_USER_ERRORS = (
    EmptyListError,
    NodeNotFoundError,
    IndexError,
    QueueFullError,
    QueueEmptyError,
    StackOverflowError,
    StackUnderflowError,
    ValueError,
)

_Action = Callable[[], None]
_AnyQueue = Union[LinearQueue[int], CircularQueue[int]]


class _EndOfInput(Exception):
    """The input ran out while a value was expected."""


class _Console:
    """Whitespace-separated tokens in, lines out."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._tokens: Iterator[str] = (token for line in stdin for token in line.split())
        self._out = stdout

    def say(self, text: str = "") -> None:
        print(text, file=self._out)

    def ask(self, prompt: str) -> str:
        print(prompt, end="", file=self._out)
        token = next(self._tokens, None)
        if token is None:
            raise _EndOfInput
        return token

    def ask_int(self, prompt: str) -> int:
        token = self.ask(prompt)
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"Not a whole number: {token!r}") from None


def _parse_choice(token: str) -> int | None:
    try:
        return int(token)
    except ValueError:
        return None


def _run_menu(
    console: _Console,
    actions: dict[int, tuple[str, _Action]],
    exit_choice: int,
    after: _Action | None = None,
) -> int:
    lines = [f"{number}. {label}" for number, (label, _) in actions.items()]
    lines.append(f"{exit_choice}. Exit")
    menu = "\n".join(lines)
    try:
        while True:
            console.say(menu)
            choice = _parse_choice(console.ask("Enter your choice: "))
            if choice == exit_choice:
                console.say("Exiting the program.")
                return 0
            entry = actions.get(choice) if choice is not None else None
            if entry is None:
                console.say("Invalid choice. Please try again.")
                continue
            try:
                entry[1]()
            except _USER_ERRORS as exc:
                console.say(str(exc))
            if after is not None:
                after()
    except _EndOfInput:
        console.say()
        return 0


def _linked_list_session(console: _Console) -> int:
    items: LinkedList[int] = LinkedList()

    def require(action: str) -> None:
        if not items:
            raise EmptyListError(f"List is empty. Cannot {action}.")

    def show() -> None:
        console.say(" ".join(map(str, items)) if items else "List is empty.")

    def deleted(value: int) -> None:
        console.say(f"{value} deleted successfully.")

    def insert_at_end() -> None:
        items.insert_at_end(console.ask_int(_DATA_PROMPT))

    def insert_at_beginning() -> None:
        items.insert_at_beginning(console.ask_int(_DATA_PROMPT))

    def insert_after() -> None:
        require("insert after")
        key = console.ask_int("Enter the data value after which you want to insert: ")
        items.insert_after(key, console.ask_int(_DATA_PROMPT))

    def insert_before() -> None:
        require("insert before")
        key = console.ask_int("Enter the data value before which you want to insert: ")
        items.insert_before(key, console.ask_int(_DATA_PROMPT))

    def delete_after() -> None:
        require("delete after")
        key = console.ask_int("Enter the data value after which you want to delete: ")
        deleted(items.delete_after(key))

    def delete_before() -> None:
        require("delete before")
        key = console.ask_int("Enter the data value before which you want to delete: ")
        deleted(items.delete_before(key))

    def insert_after_position() -> None:
        require("insert after position")
        position = console.ask_int("Enter the position after which you want to insert: ")
        items.insert_after_position(position, console.ask_int(_DATA_PROMPT))

    def insert_before_position() -> None:
        require("insert before position")
        position = console.ask_int("Enter the position before which you want to insert: ")
        items.insert_before_position(position, console.ask_int(_DATA_PROMPT))

    def delete_after_position() -> None:
        require("delete after position")
        position = console.ask_int("Enter the position after which you want to delete: ")
        deleted(items.delete_after_position(position))

    actions: dict[int, tuple[str, _Action]] = {
        1: ("Insert at End", insert_at_end),
        2: ("Insert at Beginning", insert_at_beginning),
        3: ("Insert After", insert_after),
        4: ("Insert Before", insert_before),
        5: ("Delete at End", lambda: deleted(items.delete_at_end())),
        6: ("Delete at Beginning", lambda: deleted(items.delete_at_beginning())),
        7: ("Delete After", delete_after),
        8: ("Delete Before", delete_before),
        9: ("Display", lambda: None),
        10: ("Insert After Position", insert_after_position),
        11: ("Insert Before Position", insert_before_position),
        12: ("Delete After Position", delete_after_position),
    }
    return _run_menu(console, actions, exit_choice=0, after=show)


def _queue_session(console: _Console, queue: _AnyQueue, name: str) -> int:
    console.say("Queue created")

    def enqueue() -> None:
        if queue.is_full():
            raise QueueFullError("Queue is full")
        data = console.ask_int("Enter data you want to insert: ")
        queue.enqueue(data)
        console.say(f"{data} is inserted to the {name} successfully")

    def dequeue() -> None:
        console.say(f"{queue.dequeue()} is removed from the {name} successfully")

    def display() -> None:
        console.say("\t".join(map(str, queue)) if queue else "Queue is empty")

    actions: dict[int, tuple[str, _Action]] = {
        1: ("Enqueue", enqueue),
        2: ("Dequeue", dequeue),
        3: ("Display", display),
    }
    return _run_menu(console, actions, exit_choice=4)


def _stack_session(console: _Console, capacity: int) -> int:
    stack: Stack[str] = Stack(capacity)

    def push() -> None:
        stack.push(console.ask("Enter data to push: "))

    def pop() -> None:
        console.say(f"Popped element: {stack.pop()}")

    def display() -> None:
        if stack.is_empty():
            console.say("Stack is empty. Cannot display.")
        else:
            console.say(" ".join(stack))

    actions: dict[int, tuple[str, _Action]] = {
        1: ("Push", push),
        2: ("Pop", pop),
        3: ("Display", display),
    }
    return _run_menu(console, actions, exit_choice=4)


def _convert(
    console: _Console,
    converter: Callable[[str], str],
    expression: str | None,
    kind: str,
) -> int:
    if expression is None:
        try:
            expression = console.ask("Enter the infix expression: ")
        except _EndOfInput:
            print("error: no expression given", file=sys.stderr)
            return 1
    try:
        result = converter(expression)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    console.say(f"The {kind} expression is: {result}")
    return 0


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a whole number: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError("capacity must be at least 1")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dsakit", description="Menu-driven data structures and expression conversion."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("linked-list", help="work with a singly linked list")
    for name, default, help_text in (
        ("queue", 5, "work with a linear queue"),
        ("circular-queue", 5, "work with a circular queue"),
        ("stack", 10, "work with a stack"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("--capacity", type=_positive_int, default=default)
    for name in ("postfix", "prefix"):
        sub = commands.add_parser(name, help=f"convert an infix expression to {name}")
        sub.add_argument("expression", nargs="?", help="read from standard input if omitted")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command named in ``argv`` and return the exit status."""
    args = _build_parser().parse_args(argv)
    console = _Console(sys.stdin, sys.stdout)
    if args.command == "linked-list":
        return _linked_list_session(console)
    if args.command == "queue":
        return _queue_session(console, LinearQueue(args.capacity), "queue")
    if args.command == "circular-queue":
        return _queue_session(console, CircularQueue(args.capacity), "circular queue")
    if args.command == "stack":
        return _stack_session(console, args.capacity)
    if args.command == "postfix":
        return _convert(console, infix_to_postfix, args.expression, "postfix")
    return _convert(console, infix_to_prefix, args.expression, "prefix")


if __name__ == "__main__":
    raise SystemExit(main())