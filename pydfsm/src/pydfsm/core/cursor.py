from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from pydfsm.core.trace import LoggingTraceSink, StepRecord, TraceSink

if TYPE_CHECKING:
    from pydfsm.core.machine import MachineDefinition


class Cursor:
    """
    Mutable execution state over a shared MachineDefinition.

    A cursor holds only the current state. Cursors are not thread-safe; give
    each concurrent consumer its own cursor via MachineDefinition.cursor().
    """

    def __init__(self, definition: MachineDefinition, trace_sink: Optional[TraceSink] = None):
        self.definition = definition
        self.trace_sink = trace_sink
        self._current_state = definition.initial_state

    def __repr__(self) -> str:
        return f"Cursor(current_state={self._current_state!r})"

    @property
    def current_state(self) -> str:
        return self._current_state

    def _sinks(self, verbose: bool) -> list[TraceSink]:
        sinks: list[TraceSink] = []
        if self.trace_sink is not None:
            sinks.append(self.trace_sink)
        if verbose:
            sinks.append(LoggingTraceSink())
        return sinks

    def process(self, symbols: Any, verbose: bool = False) -> str:
        """
        Feed symbols through the machine and return the state reached.

        The whole sequence is checked against the input alphabet before the
        first transition, so an invalid symbol leaves current_state untouched.
        """
        sequence = self.definition.validate_input(symbols)
        sinks = self._sinks(verbose)
        table = self.definition.transition_table

        for sink in sinks:
            sink.start(self._current_state)
        for index, symbol in enumerate(sequence):
            state = self._current_state
            next_state = table[(state, symbol)]
            if sinks:
                record = StepRecord(index=index, state=state, symbol=symbol, next_state=next_state)
                for sink in sinks:
                    sink.step(record)
            self._current_state = next_state
        for sink in sinks:
            sink.end(self._current_state)

        return self._current_state

    def process_and_reset(self, symbols: Any, verbose: bool = False) -> str:
        state = self.process(symbols, verbose=verbose)
        self.reset()
        return state

    def reset(self) -> None:
        self._current_state = self.definition.initial_state

    def is_accepting(self) -> bool:
        return self.definition.is_accepting_state(self._current_state)
