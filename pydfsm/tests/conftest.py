"""
Pytest configuration and fixtures for pydfsm tests.

Provides a deterministic RNG and a few small machine definitions.
"""

import numpy as np
import pytest


@pytest.fixture
def deterministic_rng():
    """
    Create a deterministic RNG seeded with 12345.

    Used by the random-machine tests to keep draws reproducible.
    """
    return np.random.default_rng(12345)


@pytest.fixture
def mod3_dfa():
    from pydfsm.machines import make_mod3_dfa

    return make_mod3_dfa()


@pytest.fixture
def s_machine_parts():
    """
    Three-state machine over {0, 1}: S0 -1-> S1 -0-> S2, with self-loops elsewhere.

    Returned as the raw five components so tests can break one at a time.
    """
    return {
        "states": ["S0", "S1", "S2"],
        "initial_state": "S0",
        "input_alphabet": ["0", "1"],
        "transition_table": {
            "S0": {"0": "S0", "1": "S1"},
            "S1": {"0": "S2", "1": "S1"},
            "S2": {"0": "S0", "1": "S1"},
        },
        "accepting_states": ["S2"],
    }
