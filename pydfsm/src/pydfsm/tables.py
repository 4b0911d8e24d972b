"""
Helpers for writing transition tables.

- create_transition_table: build a complete nested table from a function or
  a single default target
- flatten_table / nest_table: convert between {state: {symbol: target}} and
  {(state, symbol): target}
- Symbol constants: ordered tuples of one-character symbols
"""

from __future__ import annotations

import string
from collections.abc import Iterable, Mapping
from typing import Callable, Optional

LOWERCASE_LETTERS: tuple[str, ...] = tuple(string.ascii_lowercase)
UPPERCASE_LETTERS: tuple[str, ...] = tuple(string.ascii_uppercase)
DIGITS: tuple[str, ...] = tuple(string.digits)
ALPHANUMERIC: tuple[str, ...] = LOWERCASE_LETTERS + UPPERCASE_LETTERS + DIGITS
BINARY_DIGITS: tuple[str, ...] = ("0", "1")

TransitionFunction = Callable[[str, str], str]


def create_transition_table(
    states: Iterable[str],
    input_alphabet: Iterable[str],
    transition_function: Optional[TransitionFunction] = None,
    default_state: str = "",
) -> dict[str, dict[str, str]]:
    """
    Build a nested transition table covering every (state, symbol) pair.

    Args:
        states: States to create entries for, in the order given.
        input_alphabet: Symbols each entry must define.
        transition_function: Called as transition_function(state, symbol) to
            get each target. When omitted every target is default_state.
        default_state: Target used when no transition_function is given.

    Returns:
        {state: {symbol: target}}. The result is complete by construction; it
        passes validation as long as every target is one of states and every
        state is reachable.

    Examples:
        >>> create_transition_table(["A", "B"], ["0"], default_state="A")
        {'A': {'0': 'A'}, 'B': {'0': 'A'}}
    """
    alphabet = tuple(input_alphabet)
    table: dict[str, dict[str, str]] = {}
    for state in states:
        if transition_function is None:
            table[state] = {symbol: default_state for symbol in alphabet}
        else:
            table[state] = {symbol: transition_function(state, symbol) for symbol in alphabet}
    return table


def flatten_table(table: Mapping[str, Mapping[str, str]]) -> dict[tuple[str, str], str]:
    return {
        (state, symbol): target
        for state, entry in table.items()
        for symbol, target in entry.items()
    }


def nest_table(transitions: Mapping[tuple[str, str], str]) -> dict[str, dict[str, str]]:
    table: dict[str, dict[str, str]] = {}
    for (state, symbol), target in transitions.items():
        table.setdefault(state, {})[symbol] = target
    return table
