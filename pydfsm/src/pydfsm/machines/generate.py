from __future__ import annotations

from collections.abc import Iterable

import numpy as np
from numpy.random import Generator

from pydfsm.core.machine import MachineDefinition


def random_dfa(
    n_states: int,
    alphabet: Iterable[str],
    rng: Generator,
    p_accept: float = 0.5,
) -> MachineDefinition:
    """
    Draw a random valid machine over states q0..q{n_states-1}.

    Every state after q0 is first attached to a free (state, symbol) slot of
    an earlier state, which keeps all states reachable from q0; the remaining
    slots get uniformly random targets. At least one state is accepting.
    """
    symbols = tuple(alphabet)
    if n_states <= 0:
        raise ValueError("n_states must be > 0")
    if not symbols:
        raise ValueError("alphabet must not be empty")
    if not (0.0 <= p_accept <= 1.0):
        raise ValueError("p_accept must be in [0, 1]")

    states = tuple(f"q{i}" for i in range(n_states))
    transitions: dict[tuple[str, str], str] = {}

    for i in range(1, n_states):
        free = [
            (states[j], symbol)
            for j in range(i)
            for symbol in symbols
            if (states[j], symbol) not in transitions
        ]
        transitions[free[int(rng.integers(len(free)))]] = states[i]

    for state in states:
        for symbol in symbols:
            if (state, symbol) not in transitions:
                transitions[(state, symbol)] = states[int(rng.integers(n_states))]

    accept_mask = rng.random(n_states) < p_accept
    if not np.any(accept_mask):
        accept_mask[int(rng.integers(n_states))] = True
    accepting = frozenset(state for state, keep in zip(states, accept_mask) if keep)

    return MachineDefinition(
        states=states,
        initial_state=states[0],
        input_alphabet=symbols,
        transition_table=transitions,
        accepting_states=accepting,
    )
