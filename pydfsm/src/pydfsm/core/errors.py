"""
Error taxonomy for pydfsm.

Every violation is described by a ValidationIssue: a tagged record carrying
the ErrorKind plus the offending parameter, state, symbol or values. Issues
can be inspected without raising (see validation.check_definition) or turned
into the matching exception with ValidationIssue.to_exception().

Exception hierarchy:
- FSMError
  - ValidationError (ValueError): construction-time kinds
  - ExecutionError: process-time kinds
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    TYPE_MISMATCH = "TYPE_MISMATCH"
    EMPTY_SET = "EMPTY_SET"
    DUPLICATE_MEMBER = "DUPLICATE_MEMBER"
    INVALID_INITIAL_STATE = "INVALID_INITIAL_STATE"
    INVALID_ACCEPTING_STATE = "INVALID_ACCEPTING_STATE"
    MISSING_STATE_FROM_TABLE = "MISSING_STATE_FROM_TRANSITION_TABLE"
    INVALID_STATE_IN_TABLE = "INVALID_STATE_VALUE_IN_TRANSITION_TABLE"
    INVALID_INPUT_IN_TABLE = "INVALID_INPUT_VALUE"
    INVALID_TRANSITION_TARGET_IN_TABLE = "INVALID_TRANSITION_STATE"
    MISSING_INPUT_DEFINITION = "MISSING_INPUT_DEFINITION"
    UNREACHABLE_STATE = "UNREACHABLE_STATE"
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_INPUT_TYPE = "INVALID_INPUT_TYPE"
    UNKNOWN_STATE = "UNKNOWN_STATE"


@dataclass(frozen=True)
class ValidationIssue:
    """A single violation, with enough context to diagnose it."""

    kind: ErrorKind
    message: str
    parameter: Optional[str] = None
    state: Optional[str] = None
    symbol: Optional[str] = None
    values: tuple = ()

    @property
    def code(self) -> str:
        return self.kind.value

    def to_exception(self) -> FSMError:
        return _EXCEPTION_BY_KIND[self.kind](self)


class FSMError(Exception):
    """Base class for all pydfsm errors."""

    def __init__(self, issue: ValidationIssue):
        super().__init__(issue.message)
        self.issue = issue

    @property
    def kind(self) -> ErrorKind:
        return self.issue.kind

    @property
    def code(self) -> str:
        return self.issue.code


class ValidationError(FSMError, ValueError):
    """The machine definition is ill-formed."""


class TypeMismatchError(ValidationError, TypeError):
    pass


class EmptySetError(ValidationError):
    pass


class DuplicateMemberError(ValidationError):
    pass


class InvalidInitialStateError(ValidationError):
    pass


class InvalidAcceptingStateError(ValidationError):
    pass


class MissingStateFromTableError(ValidationError):
    pass


class InvalidStateInTableError(ValidationError):
    pass


class InvalidInputInTableError(ValidationError):
    pass


class InvalidTransitionTargetInTableError(ValidationError):
    pass


class MissingInputDefinitionError(ValidationError):
    pass


class UnreachableStateError(ValidationError):
    pass


class ExecutionError(FSMError):
    """The input handed to a running machine is unusable."""


class InvalidInputTypeError(ExecutionError, TypeError):
    pass


class InvalidInputError(ExecutionError, ValueError):
    pass


class UnknownStateError(ExecutionError, ValueError):
    """A state passed to next_state or run is not part of the machine."""


_EXCEPTION_BY_KIND: dict[ErrorKind, type[FSMError]] = {
    ErrorKind.TYPE_MISMATCH: TypeMismatchError,
    ErrorKind.EMPTY_SET: EmptySetError,
    ErrorKind.DUPLICATE_MEMBER: DuplicateMemberError,
    ErrorKind.INVALID_INITIAL_STATE: InvalidInitialStateError,
    ErrorKind.INVALID_ACCEPTING_STATE: InvalidAcceptingStateError,
    ErrorKind.MISSING_STATE_FROM_TABLE: MissingStateFromTableError,
    ErrorKind.INVALID_STATE_IN_TABLE: InvalidStateInTableError,
    ErrorKind.INVALID_INPUT_IN_TABLE: InvalidInputInTableError,
    ErrorKind.INVALID_TRANSITION_TARGET_IN_TABLE: InvalidTransitionTargetInTableError,
    ErrorKind.MISSING_INPUT_DEFINITION: MissingInputDefinitionError,
    ErrorKind.UNREACHABLE_STATE: UnreachableStateError,
    ErrorKind.INVALID_INPUT: InvalidInputError,
    ErrorKind.INVALID_INPUT_TYPE: InvalidInputTypeError,
    ErrorKind.UNKNOWN_STATE: UnknownStateError,
}


def type_mismatch(parameter: str, expected: str, got: object) -> ValidationIssue:
    return ValidationIssue(
        kind=ErrorKind.TYPE_MISMATCH,
        message=f"expected {parameter!r} to be {expected}, got {type(got).__name__}",
        parameter=parameter,
        values=(got,),
    )


def non_string_member(parameter: str, value: object) -> ValidationIssue:
    return ValidationIssue(
        kind=ErrorKind.TYPE_MISMATCH,
        message=f"{value!r} in {parameter!r} is not a str; all members must be strings",
        parameter=parameter,
        values=(value,),
    )


def empty_set(parameter: str) -> ValidationIssue:
    return ValidationIssue(
        kind=ErrorKind.EMPTY_SET,
        message=f"{parameter!r} must not be empty",
        parameter=parameter,
    )


def duplicate_member(parameter: str, value: str) -> ValidationIssue:
    return ValidationIssue(
        kind=ErrorKind.DUPLICATE_MEMBER,
        message=f"{parameter!r} contains {value!r} more than once",
        parameter=parameter,
        values=(value,),
    )


def invalid_initial_state(state: object) -> ValidationIssue:
    return ValidationIssue(
        kind=ErrorKind.INVALID_INITIAL_STATE,
        message=f"initial state {state!r} is not in states",
        parameter="initial_state",
        state=state if isinstance(state, str) else None,
        values=(state,),
    )


def invalid_accepting_state(state: str) -> ValidationIssue:
    return ValidationIssue(
        kind=ErrorKind.INVALID_ACCEPTING_STATE,
        message=f"accepting state {state!r} is not in states",
        parameter="accepting_states",
        state=state,
    )


def missing_state_from_table(state: str) -> ValidationIssue:
    return ValidationIssue(
        kind=ErrorKind.MISSING_STATE_FROM_TABLE,
        message=f"transition table has no entry for state {state!r}",
        parameter="transition_table",
        state=state,
    )


def invalid_state_in_table(state: object) -> ValidationIssue:
    return ValidationIssue(
        kind=ErrorKind.INVALID_STATE_IN_TABLE,
        message=f"transition table key {state!r} is not in states",
        parameter="transition_table",
        state=state if isinstance(state, str) else None,
        values=(state,),
    )


def invalid_input_in_table(state: str, symbols: list) -> ValidationIssue:
    return ValidationIssue(
        kind=ErrorKind.INVALID_INPUT_IN_TABLE,
        message=f"transition table entry for state {state!r} uses symbols outside the input alphabet: {symbols!r}",
        parameter="transition_table",
        state=state,
        values=tuple(symbols),
    )


def invalid_transition_target(state: str, targets: list) -> ValidationIssue:
    return ValidationIssue(
        kind=ErrorKind.INVALID_TRANSITION_TARGET_IN_TABLE,
        message=f"transition table entry for state {state!r} leads to unknown states: {targets!r}",
        parameter="transition_table",
        state=state,
        values=tuple(targets),
    )


def missing_input_definition(state: str, symbol: str) -> ValidationIssue:
    return ValidationIssue(
        kind=ErrorKind.MISSING_INPUT_DEFINITION,
        message=f"transition table entry for state {state!r} has no transition on symbol {symbol!r}",
        parameter="transition_table",
        state=state,
        symbol=symbol,
    )


def unreachable_state(state: str) -> ValidationIssue:
    return ValidationIssue(
        kind=ErrorKind.UNREACHABLE_STATE,
        message=f"state {state!r} is unreachable from the initial state",
        parameter="transition_table",
        state=state,
    )


def invalid_input(symbol: object) -> ValidationIssue:
    return ValidationIssue(
        kind=ErrorKind.INVALID_INPUT,
        message=f"input {symbol!r} is not a member of the input alphabet",
        parameter="input",
        symbol=symbol if isinstance(symbol, str) else None,
        values=(symbol,),
    )


def invalid_input_type(value: object) -> ValidationIssue:
    return ValidationIssue(
        kind=ErrorKind.INVALID_INPUT_TYPE,
        message=f"input must be a str or an ordered sequence of symbols, got {type(value).__name__}",
        parameter="input",
        values=(value,),
    )


def unknown_state(state: object, parameter: str) -> ValidationIssue:
    label = "start state" if parameter == "start" else "state"
    return ValidationIssue(
        kind=ErrorKind.UNKNOWN_STATE,
        message=f"unknown {label}: {state!r}",
        parameter=parameter,
        state=state if isinstance(state, str) else None,
        values=(state,),
    )
