from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Set as AbstractSet
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Optional

from pydfsm.core import errors
from pydfsm.core.cursor import Cursor
from pydfsm.core.errors import InvalidInputError, InvalidInputTypeError, UnknownStateError
from pydfsm.core.trace import StepRecord, TraceSink
from pydfsm.core.validation import normalize_definition

log = logging.getLogger(__name__)

_UNORDERED_OR_BINARY = (bytes, bytearray, memoryview, Mapping, AbstractSet)


@dataclass(frozen=True)
class MachineDefinition:
    """
    Immutable, validated deterministic finite state machine.

    Construction validates all five components (see pydfsm.core.validation)
    and raises a ValidationError on the first violation. After construction
    the fields hold canonical forms: states and input_alphabet as tuples in
    the caller's order, accepting_states as a frozenset, and transition_table
    as a read-only {(state, symbol): target} mapping.

    A definition carries no current state and can be shared freely; execution
    happens on a Cursor obtained from cursor().
    """

    states: Any
    initial_state: str
    input_alphabet: Any
    transition_table: Any = field(hash=False)
    accepting_states: Any

    _state_set: frozenset = field(init=False, repr=False, compare=False)
    _alphabet_set: frozenset = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        normalized = normalize_definition(
            self.states,
            self.initial_state,
            self.input_alphabet,
            self.transition_table,
            self.accepting_states,
        )
        # Frozen dataclass: canonical forms are installed with object.__setattr__
        object.__setattr__(self, "states", normalized.states)
        object.__setattr__(self, "input_alphabet", normalized.input_alphabet)
        object.__setattr__(self, "transition_table", MappingProxyType(normalized.transitions))
        object.__setattr__(self, "accepting_states", normalized.accepting_states)
        object.__setattr__(self, "_state_set", frozenset(normalized.states))
        object.__setattr__(self, "_alphabet_set", frozenset(normalized.input_alphabet))

        log.debug(
            "built machine: %d states, %d symbols, %d accepting, initial=%r",
            len(self.states),
            len(self.input_alphabet),
            len(self.accepting_states),
            self.initial_state,
        )

    def has_state(self, state: str) -> bool:
        return state in self._state_set

    def has_symbol(self, symbol: str) -> bool:
        return symbol in self._alphabet_set

    def is_accepting_state(self, state: str) -> bool:
        return state in self.accepting_states

    def next_state(self, state: str, symbol: str) -> str:
        if not isinstance(state, str) or state not in self._state_set:
            raise UnknownStateError(errors.unknown_state(state, "state"))
        if not isinstance(symbol, str) or symbol not in self._alphabet_set:
            raise InvalidInputError(errors.invalid_input(symbol))
        return self.transition_table[(state, symbol)]

    def validate_input(self, symbols: Any) -> tuple[str, ...]:
        """
        Check an input sequence before any of it is applied.

        Accepts a str (one symbol per character) or any ordered iterable of
        symbols. Sets, mappings, bytes-like values and non-iterables are
        rejected with InvalidInputTypeError; the first symbol outside the
        input alphabet is reported with InvalidInputError.
        """
        if isinstance(symbols, str):
            sequence = tuple(symbols)
        elif isinstance(symbols, _UNORDERED_OR_BINARY) or not isinstance(symbols, Iterable):
            raise InvalidInputTypeError(errors.invalid_input_type(symbols))
        else:
            sequence = tuple(symbols)

        for symbol in sequence:
            if not isinstance(symbol, str) or symbol not in self._alphabet_set:
                raise InvalidInputError(errors.invalid_input(symbol))
        return sequence

    def _start_state(self, start: Optional[str]) -> str:
        if start is None:
            return self.initial_state
        if not isinstance(start, str) or start not in self._state_set:
            raise UnknownStateError(errors.unknown_state(start, "start"))
        return start

    def _walk(self, sequence: tuple[str, ...], state: str) -> Iterator[StepRecord]:
        for index, symbol in enumerate(sequence):
            next_state = self.transition_table[(state, symbol)]
            yield StepRecord(index=index, state=state, symbol=symbol, next_state=next_state)
            state = next_state

    def steps(self, symbols: Any, start: Optional[str] = None) -> Iterator[StepRecord]:
        """Validate symbols eagerly, then lazily yield one StepRecord per symbol."""
        sequence = self.validate_input(symbols)
        return self._walk(sequence, self._start_state(start))

    def run(self, symbols: Any, start: Optional[str] = None) -> str:
        state = self._start_state(start)
        for symbol in self.validate_input(symbols):
            state = self.transition_table[(state, symbol)]
        return state

    def accepts(self, symbols: Any) -> bool:
        return self.run(symbols) in self.accepting_states

    def cursor(self, trace_sink: Optional[TraceSink] = None) -> Cursor:
        return Cursor(self, trace_sink=trace_sink)
