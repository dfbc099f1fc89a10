"""
Prompt/Menu engine — numbered lists and line-based answers.

Every interactive step of the wizard goes through here. Answers are
read with an ``ask`` callable (default: ``click.prompt``) so tests can
script a sequence of answers without a terminal.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

import click

T = TypeVar("T")

Ask = Callable[[str], str]

SELECT_ONE_PROMPT = "\nMake your selection (number):"
SELECT_MANY_PROMPT = "\nMake your selections (comma-separated, e.g. 1,3,5):"
INVALID_SELECTION = "Invalid selection. Please try again."


def default_ask(prompt: str) -> str:
    """Read one line from the terminal. Empty input is allowed."""
    return click.prompt(prompt, default="", show_default=False, prompt_suffix=" ")


def print_menu(items: Sequence[object], prompt: str) -> None:
    """Print the prompt followed by a 1-based numbered list."""
    click.echo(f"\n{prompt}")
    for index, item in enumerate(items, start=1):
        click.echo(f"{index}. {item}")


def parse_index(token: str, count: int) -> int | None:
    """Turn a 1-based answer into a 0-based index, or None if invalid.

    Only plain ASCII digits count: signs, underscores, decimals and
    superscripts are rejected.
    """
    token = token.strip()
    if not (token.isascii() and token.isdigit()):
        return None
    number = int(token)
    if 1 <= number <= count:
        return number - 1
    return None


def select_one(items: Sequence[T], prompt: str, ask: Ask | None = None) -> T:
    """Ask until the user picks a valid entry; return that entry.

    Non-numeric and out-of-range answers print an error and re-prompt.
    There is no attempt limit.
    """
    ask = ask or default_ask
    print_menu(items, prompt)

    while True:
        index = parse_index(ask(SELECT_ONE_PROMPT), len(items))
        if index is not None:
            return items[index]
        click.echo(INVALID_SELECTION)


def select_many(items: Sequence[T], prompt: str, ask: Ask | None = None) -> list[T]:
    """Ask once for a comma-separated selection.

    Invalid tokens are dropped silently. Valid picks come back in the
    order typed, duplicates included. An empty list is a valid answer.
    """
    ask = ask or default_ask
    print_menu(items, prompt)

    answer = ask(SELECT_MANY_PROMPT)
    selected: list[T] = []
    for token in answer.split(","):
        index = parse_index(token, len(items))
        if index is not None:
            selected.append(items[index])
    return selected


def confirm(prompt: str, ask: Ask | None = None) -> bool:
    """Yes only for an answer of ``y`` (any case)."""
    ask = ask or default_ask
    return ask(prompt).strip().lower() == "y"


def pause(prompt: str = "Press Enter to continue...", ask: Ask | None = None) -> None:
    """Block until the user presses Enter."""
    ask = ask or default_ask
    ask(prompt)
