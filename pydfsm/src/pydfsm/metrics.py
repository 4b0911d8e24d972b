from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from pydfsm.core.machine import MachineDefinition


def _state_index(definition: MachineDefinition) -> dict[str, int]:
    return {state: idx for idx, state in enumerate(definition.states)}


def transition_matrix(definition: MachineDefinition) -> np.ndarray:
    """Rows follow definition.states, columns definition.input_alphabet; values are target indices."""
    state_to_idx = _state_index(definition)
    matrix = np.zeros((len(definition.states), len(definition.input_alphabet)), dtype=np.int64)
    for row, state in enumerate(definition.states):
        for col, symbol in enumerate(definition.input_alphabet):
            matrix[row, col] = state_to_idx[definition.transition_table[(state, symbol)]]
    return matrix


def visit_counts(definition: MachineDefinition, inputs: Sequence[Any]) -> np.ndarray:
    if not inputs:
        raise ValueError("inputs must not be empty")

    state_to_idx = _state_index(definition)
    counts = np.zeros(len(definition.states), dtype=np.int64)
    for symbols in inputs:
        counts[state_to_idx[definition.initial_state]] += 1
        for record in definition.steps(symbols):
            counts[state_to_idx[record.next_state]] += 1
    return counts


def acceptance_rate(definition: MachineDefinition, inputs: Sequence[Any]) -> float:
    if not inputs:
        raise ValueError("inputs must not be empty")

    accepted = np.array([definition.accepts(symbols) for symbols in inputs], dtype=bool)
    return float(accepted.mean())
