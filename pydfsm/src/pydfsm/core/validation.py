"""
Construction-time validation of machine definitions.

Checks run in a fixed order and stop at the first violation, so the same bad
definition always reports the same error:

1. states: collection of unique, non-empty strings
2. initial_state: member of states
3. input_alphabet: collection of unique, non-empty strings
4. accepting_states: non-empty subset of states
5. transition table completeness (missing states, extra states, extra
   symbols, unknown targets, missing symbols)
6. reachability of every state from initial_state

check_definition() returns the first ValidationIssue (or None) without
raising; validate_definition() raises the matching ValidationError.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Set as AbstractSet
from typing import Any, NamedTuple, Optional, Union

from pydfsm.core import errors
from pydfsm.core.errors import ValidationIssue

log = logging.getLogger(__name__)

FlatTable = Mapping[tuple[str, str], str]
NestedTable = Mapping[str, Mapping[str, str]]


class NormalizedDefinition(NamedTuple):
    states: tuple[str, ...]
    initial_state: str
    input_alphabet: tuple[str, ...]
    transitions: dict[tuple[str, str], str]
    accepting_states: frozenset[str]


def _is_member_collection(value: Any) -> bool:
    return isinstance(value, (AbstractSet, list, tuple))


def _check_string_set(parameter: str, value: Any) -> Union[tuple[str, ...], ValidationIssue]:
    if not _is_member_collection(value):
        return errors.type_mismatch(parameter, "a set, list or tuple of str", value)
    if len(value) == 0:
        return errors.empty_set(parameter)

    seen: set[str] = set()
    members: list[str] = []
    for member in value:
        if not isinstance(member, str):
            return errors.non_string_member(parameter, member)
        if member in seen:
            return errors.duplicate_member(parameter, member)
        seen.add(member)
        members.append(member)
    return tuple(members)


def _check_accepting_states(
    value: Any,
    state_set: frozenset[str],
) -> Union[frozenset[str], ValidationIssue]:
    parameter = "accepting_states"
    if not _is_member_collection(value):
        return errors.type_mismatch(parameter, "a set, list or tuple of str", value)
    for member in value:
        if not isinstance(member, str):
            return errors.non_string_member(parameter, member)
        if member not in state_set:
            return errors.invalid_accepting_state(member)
    if len(value) == 0:
        return errors.empty_set(parameter)
    return frozenset(value)


def _is_flat(table: Mapping) -> bool:
    return len(table) > 0 and all(isinstance(key, tuple) and len(key) == 2 for key in table)


def _nest_table(table: Any) -> Union[dict[Any, Mapping], ValidationIssue]:
    """Bring either table shape into {state: {symbol: target}}, keeping key order."""
    if not isinstance(table, Mapping):
        return errors.type_mismatch("transition_table", "a mapping", table)

    if _is_flat(table):
        nested: dict[Any, dict] = {}
        for (state, symbol), target in table.items():
            nested.setdefault(state, {})[symbol] = target
        return nested

    for state, entry in table.items():
        if not isinstance(entry, Mapping):
            return errors.type_mismatch(f"transition_table[{state!r}]", "a mapping", entry)
    return dict(table)


def _check_table(
    nested: dict[Any, Mapping],
    states: tuple[str, ...],
    state_set: frozenset[str],
    alphabet: tuple[str, ...],
    alphabet_set: frozenset[str],
) -> Optional[ValidationIssue]:
    for state in states:
        if state not in nested:
            return errors.missing_state_from_table(state)

    # Remaining checks finish one table entry before moving to the next.
    for state, entry in nested.items():
        if state not in state_set:
            return errors.invalid_state_in_table(state)

        bad_symbols = [symbol for symbol in entry if symbol not in alphabet_set]
        if bad_symbols:
            return errors.invalid_input_in_table(state, bad_symbols)

        bad_targets = [
            target
            for target in entry.values()
            if not isinstance(target, str) or target not in state_set
        ]
        if bad_targets:
            return errors.invalid_transition_target(state, bad_targets)

        for symbol in alphabet:
            if symbol not in entry:
                return errors.missing_input_definition(state, symbol)

    return None


def reachable_states(transitions: FlatTable, initial_state: str) -> frozenset[str]:
    """Depth-first walk of the table edges starting at initial_state."""
    successors: dict[str, list[str]] = {}
    for (state, _symbol), target in transitions.items():
        successors.setdefault(state, []).append(target)

    visited: set[str] = set()
    stack = [initial_state]
    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        stack.extend(successors.get(current, ()))
    return frozenset(visited)


def unreachable_states(
    states: tuple[str, ...],
    transitions: FlatTable,
    initial_state: str,
) -> tuple[str, ...]:
    visited = reachable_states(transitions, initial_state)
    return tuple(state for state in states if state not in visited)


def _inspect(
    states: Any,
    initial_state: Any,
    input_alphabet: Any,
    transition_table: Any,
    accepting_states: Any,
) -> Union[NormalizedDefinition, ValidationIssue]:
    checked_states = _check_string_set("states", states)
    if isinstance(checked_states, ValidationIssue):
        return checked_states
    state_set = frozenset(checked_states)

    if not isinstance(initial_state, str) or initial_state not in state_set:
        return errors.invalid_initial_state(initial_state)

    alphabet = _check_string_set("input_alphabet", input_alphabet)
    if isinstance(alphabet, ValidationIssue):
        return alphabet
    alphabet_set = frozenset(alphabet)

    accepting = _check_accepting_states(accepting_states, state_set)
    if isinstance(accepting, ValidationIssue):
        return accepting

    nested = _nest_table(transition_table)
    if isinstance(nested, ValidationIssue):
        return nested

    issue = _check_table(nested, checked_states, state_set, alphabet, alphabet_set)
    if issue is not None:
        return issue

    transitions = {
        (state, symbol): nested[state][symbol]
        for state in checked_states
        for symbol in alphabet
    }

    unreachable = unreachable_states(checked_states, transitions, initial_state)
    if unreachable:
        return errors.unreachable_state(unreachable[0])

    return NormalizedDefinition(
        states=checked_states,
        initial_state=initial_state,
        input_alphabet=alphabet,
        transitions=transitions,
        accepting_states=accepting,
    )


def check_definition(
    states: Any,
    initial_state: Any,
    input_alphabet: Any,
    transition_table: Any,
    accepting_states: Any,
) -> Optional[ValidationIssue]:
    """Return the first violation in the definition, or None when it is valid."""
    result = _inspect(states, initial_state, input_alphabet, transition_table, accepting_states)
    if isinstance(result, ValidationIssue):
        return result
    return None


def normalize_definition(
    states: Any,
    initial_state: Any,
    input_alphabet: Any,
    transition_table: Any,
    accepting_states: Any,
) -> NormalizedDefinition:
    """
    Validate a definition and return its components in canonical form.

    States and symbols keep the caller's iteration order; the table is
    flattened to {(state, symbol): target}.

    Raises:
        ValidationError: subclass matching the first violation found.
    """
    result = _inspect(states, initial_state, input_alphabet, transition_table, accepting_states)
    if isinstance(result, ValidationIssue):
        log.debug("rejected machine definition: %s (%s)", result.message, result.code)
        raise result.to_exception()
    return result


def validate_definition(
    states: Any,
    initial_state: Any,
    input_alphabet: Any,
    transition_table: Any,
    accepting_states: Any,
) -> None:
    normalize_definition(states, initial_state, input_alphabet, transition_table, accepting_states)
