"""pydfsm: immutable, strictly validated deterministic finite state machines."""

from pydfsm.core.cursor import Cursor
from pydfsm.core.engine import Machine
from pydfsm.core.errors import (
    DuplicateMemberError,
    EmptySetError,
    ErrorKind,
    ExecutionError,
    FSMError,
    InvalidAcceptingStateError,
    InvalidInitialStateError,
    InvalidInputError,
    InvalidInputInTableError,
    InvalidInputTypeError,
    InvalidStateInTableError,
    InvalidTransitionTargetInTableError,
    MissingInputDefinitionError,
    MissingStateFromTableError,
    TypeMismatchError,
    UnknownStateError,
    UnreachableStateError,
    ValidationError,
    ValidationIssue,
)
from pydfsm.core.machine import MachineDefinition
from pydfsm.core.trace import LoggingTraceSink, RecordingTraceSink, StepRecord, TraceSink
from pydfsm.core.validation import check_definition, validate_definition
from pydfsm.tables import create_transition_table

__version__ = "0.1.0"

__all__ = [
    "Cursor",
    "DuplicateMemberError",
    "EmptySetError",
    "ErrorKind",
    "ExecutionError",
    "FSMError",
    "InvalidAcceptingStateError",
    "InvalidInitialStateError",
    "InvalidInputError",
    "InvalidInputInTableError",
    "InvalidInputTypeError",
    "InvalidStateInTableError",
    "InvalidTransitionTargetInTableError",
    "LoggingTraceSink",
    "Machine",
    "MachineDefinition",
    "MissingInputDefinitionError",
    "MissingStateFromTableError",
    "RecordingTraceSink",
    "StepRecord",
    "TraceSink",
    "TypeMismatchError",
    "UnknownStateError",
    "UnreachableStateError",
    "ValidationError",
    "ValidationIssue",
    "check_definition",
    "create_transition_table",
    "validate_definition",
]
