from __future__ import annotations

from pydfsm.core.machine import MachineDefinition


def make_mod3_dfa() -> MachineDefinition:
    """Reads a binary number most significant bit first; the state is its value mod 3."""
    return MachineDefinition(
        states=("0", "1", "2"),
        initial_state="0",
        input_alphabet=("0", "1"),
        transition_table={
            "0": {"0": "0", "1": "1"},
            "1": {"0": "2", "1": "0"},
            "2": {"0": "1", "1": "2"},
        },
        accepting_states=frozenset({"0", "1", "2"}),
    )
