from __future__ import annotations

from typing import Any, Optional

from pydfsm.core.cursor import Cursor
from pydfsm.core.machine import MachineDefinition
from pydfsm.core.trace import TraceSink


class Machine:
    """
    A validated definition bundled with the one cursor that runs it.

    Convenience facade for single-consumer use. For concurrent use share
    machine.definition and hand each consumer its own definition.cursor().
    """

    def __init__(self, definition: MachineDefinition, trace_sink: Optional[TraceSink] = None):
        self.definition = definition
        self._cursor = Cursor(definition, trace_sink=trace_sink)

    @classmethod
    def from_parts(
        cls,
        states: Any,
        initial_state: str,
        input_alphabet: Any,
        transition_table: Any,
        accepting_states: Any,
        trace_sink: Optional[TraceSink] = None,
    ) -> Machine:
        """Validate the five raw components and wrap them; raises ValidationError."""
        definition = MachineDefinition(
            states=states,
            initial_state=initial_state,
            input_alphabet=input_alphabet,
            transition_table=transition_table,
            accepting_states=accepting_states,
        )
        return cls(definition, trace_sink=trace_sink)

    def __repr__(self) -> str:
        return (
            f"Machine(states={self.definition.states!r}, "
            f"current_state={self.current_state!r})"
        )

    @property
    def current_state(self) -> str:
        return self._cursor.current_state

    def process(self, symbols: Any, verbose: bool = False) -> str:
        return self._cursor.process(symbols, verbose=verbose)

    def process_and_reset(self, symbols: Any, verbose: bool = False) -> str:
        return self._cursor.process_and_reset(symbols, verbose=verbose)

    def reset(self) -> None:
        self._cursor.reset()

    def is_accepting(self) -> bool:
        return self._cursor.is_accepting()
