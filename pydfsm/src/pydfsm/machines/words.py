from __future__ import annotations

from collections.abc import Iterable

from pydfsm.core.machine import MachineDefinition
from pydfsm.tables import LOWERCASE_LETTERS, create_transition_table

EMPTY_STATE = "Empty String"
ERROR_STATE = "Error State"


def make_word_dfa(word: str, alphabet: Iterable[str] = LOWERCASE_LETTERS) -> MachineDefinition:
    """
    Recognizer that accepts exactly `word`.

    States are EMPTY_STATE, one state per non-empty prefix of the word (named
    by the prefix), and ERROR_STATE, which absorbs every mismatch and every
    symbol read after the full word.
    """
    symbols = tuple(alphabet)
    if not word:
        raise ValueError("word must not be empty")
    unknown = sorted(set(word) - set(symbols))
    if unknown:
        raise ValueError(f"word uses symbols outside the alphabet: {unknown}")

    prefixes = [word[:i] for i in range(1, len(word) + 1)]
    states = (EMPTY_STATE, *prefixes, ERROR_STATE)

    def advance(state: str, symbol: str) -> str:
        if state == ERROR_STATE or state == word:
            return ERROR_STATE
        matched = "" if state == EMPTY_STATE else state
        if symbol == word[len(matched)]:
            return matched + symbol
        return ERROR_STATE

    return MachineDefinition(
        states=states,
        initial_state=EMPTY_STATE,
        input_alphabet=symbols,
        transition_table=create_transition_table(states, symbols, advance),
        accepting_states=frozenset({word}),
    )


def make_hello_dfa() -> MachineDefinition:
    return make_word_dfa("hello")
