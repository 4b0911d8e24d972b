"""
Tests for construction-time validation.

Each check is broken in isolation, then combined with later violations to pin
down the order in which checks are reported.
"""

import copy
import logging

import pytest

from pydfsm.core.errors import (
    DuplicateMemberError,
    EmptySetError,
    ErrorKind,
    InvalidAcceptingStateError,
    InvalidInitialStateError,
    InvalidInputInTableError,
    InvalidStateInTableError,
    InvalidTransitionTargetInTableError,
    MissingInputDefinitionError,
    MissingStateFromTableError,
    TypeMismatchError,
    UnreachableStateError,
    ValidationError,
)
from pydfsm.core.validation import (
    check_definition,
    normalize_definition,
    reachable_states,
    unreachable_states,
    validate_definition,
)


@pytest.fixture
def parts(s_machine_parts):
    return copy.deepcopy(s_machine_parts)


def _validate(parts):
    validate_definition(**parts)


class TestValidDefinitions:
    def test_valid_definition_passes(self, parts):
        assert check_definition(**parts) is None
        _validate(parts)

    def test_sets_and_frozensets_accepted(self, parts):
        parts["states"] = set(parts["states"])
        parts["input_alphabet"] = frozenset(parts["input_alphabet"])
        parts["accepting_states"] = {"S2"}
        assert check_definition(**parts) is None

    def test_flat_table_accepted(self, parts):
        parts["transition_table"] = {
            (state, symbol): target
            for state, entry in parts["transition_table"].items()
            for symbol, target in entry.items()
        }
        assert check_definition(**parts) is None

    def test_single_state_self_loop(self):
        validate_definition(
            states={"only"},
            initial_state="only",
            input_alphabet={"x"},
            transition_table={"only": {"x": "only"}},
            accepting_states={"only"},
        )

    def test_normalize_keeps_caller_order_and_flattens(self, parts):
        normalized = normalize_definition(**parts)
        assert normalized.states == ("S0", "S1", "S2")
        assert normalized.input_alphabet == ("0", "1")
        assert normalized.accepting_states == frozenset({"S2"})
        assert normalized.transitions[("S1", "0")] == "S2"
        assert len(normalized.transitions) == 6


class TestStateSet:
    def test_string_is_not_a_state_set(self, parts):
        parts["states"] = "S0S1S2"
        with pytest.raises(TypeMismatchError):
            _validate(parts)

    def test_mapping_is_not_a_state_set(self, parts):
        parts["states"] = {"S0": 1, "S1": 2, "S2": 3}
        with pytest.raises(TypeError):
            _validate(parts)

    def test_empty_states(self, parts):
        parts["states"] = set()
        with pytest.raises(EmptySetError) as info:
            _validate(parts)
        assert info.value.issue.parameter == "states"

    def test_non_string_state(self, parts):
        parts["states"] = ["S0", 1, "S2"]
        with pytest.raises(TypeMismatchError) as info:
            _validate(parts)
        assert info.value.issue.values == (1,)

    def test_duplicate_state(self, parts):
        parts["states"] = ["S0", "S1", "S1", "S2"]
        with pytest.raises(DuplicateMemberError) as info:
            _validate(parts)
        assert info.value.issue.values == ("S1",)


class TestInitialState:
    def test_initial_state_not_in_states(self, parts):
        parts["initial_state"] = "S42"
        with pytest.raises(InvalidInitialStateError) as info:
            _validate(parts)
        assert info.value.issue.state == "S42"
        assert info.value.code == "INVALID_INITIAL_STATE"

    def test_non_string_initial_state(self, parts):
        parts["initial_state"] = 0
        with pytest.raises(InvalidInitialStateError):
            _validate(parts)

    def test_unhashable_initial_state(self, parts):
        parts["initial_state"] = ["S0"]
        with pytest.raises(InvalidInitialStateError):
            _validate(parts)

    def test_checked_before_alphabet(self, parts):
        parts["initial_state"] = "S42"
        parts["input_alphabet"] = []
        with pytest.raises(InvalidInitialStateError):
            _validate(parts)


class TestInputAlphabet:
    def test_empty_alphabet(self, parts):
        parts["input_alphabet"] = []
        with pytest.raises(EmptySetError) as info:
            _validate(parts)
        assert info.value.issue.parameter == "input_alphabet"

    def test_non_string_symbols(self, parts):
        parts["input_alphabet"] = [0, 1]
        with pytest.raises(TypeMismatchError):
            _validate(parts)

    def test_alphabet_wrong_container(self, parts):
        parts["input_alphabet"] = "01"
        with pytest.raises(TypeMismatchError) as info:
            _validate(parts)
        assert info.value.issue.parameter == "input_alphabet"


class TestAcceptingStates:
    def test_accepting_state_not_in_states(self, parts):
        parts["accepting_states"] = ["S2", "S9"]
        with pytest.raises(InvalidAcceptingStateError) as info:
            _validate(parts)
        assert info.value.issue.state == "S9"

    def test_empty_accepting_states(self, parts):
        parts["accepting_states"] = []
        with pytest.raises(EmptySetError) as info:
            _validate(parts)
        assert info.value.issue.parameter == "accepting_states"

    def test_accepting_states_wrong_container(self, parts):
        parts["accepting_states"] = "S2"
        with pytest.raises(TypeMismatchError):
            _validate(parts)

    def test_first_offending_value_wins(self, parts):
        parts["accepting_states"] = ["S9", 3]
        with pytest.raises(InvalidAcceptingStateError):
            _validate(parts)

        parts["accepting_states"] = [3, "S9"]
        with pytest.raises(TypeMismatchError):
            _validate(parts)


class TestTransitionTable:
    def test_table_must_be_mapping(self, parts):
        parts["transition_table"] = [("S0", "0", "S0")]
        with pytest.raises(TypeMismatchError):
            _validate(parts)

    def test_entries_must_be_mappings(self, parts):
        parts["transition_table"]["S1"] = ["S2", "S1"]
        with pytest.raises(TypeMismatchError) as info:
            _validate(parts)
        assert "S1" in info.value.issue.parameter

    def test_missing_state(self, parts):
        del parts["transition_table"]["S2"]
        with pytest.raises(MissingStateFromTableError) as info:
            _validate(parts)
        assert info.value.issue.state == "S2"

    def test_empty_table_reports_first_state(self, parts):
        parts["transition_table"] = {}
        with pytest.raises(MissingStateFromTableError) as info:
            _validate(parts)
        assert info.value.issue.state == "S0"

    def test_extra_state(self, parts):
        parts["transition_table"]["S9"] = {"0": "S0", "1": "S0"}
        with pytest.raises(InvalidStateInTableError) as info:
            _validate(parts)
        assert info.value.issue.state == "S9"

    def test_invalid_symbols_listed_in_full(self, parts):
        parts["transition_table"]["S1"]["2"] = "S0"
        parts["transition_table"]["S1"]["3"] = "S0"
        with pytest.raises(InvalidInputInTableError) as info:
            _validate(parts)
        assert info.value.issue.state == "S1"
        assert info.value.issue.values == ("2", "3")

    def test_invalid_targets_listed_in_full(self, parts):
        parts["transition_table"]["S0"] = {"0": "S7", "1": "S8"}
        with pytest.raises(InvalidTransitionTargetInTableError) as info:
            _validate(parts)
        assert info.value.issue.state == "S0"
        assert info.value.issue.values == ("S7", "S8")

    def test_non_string_target(self, parts):
        parts["transition_table"]["S2"]["1"] = 1
        with pytest.raises(InvalidTransitionTargetInTableError) as info:
            _validate(parts)
        assert info.value.issue.values == (1,)

    def test_missing_symbol(self, parts):
        del parts["transition_table"]["S1"]["1"]
        with pytest.raises(MissingInputDefinitionError) as info:
            _validate(parts)
        assert info.value.issue.state == "S1"
        assert info.value.issue.symbol == "1"

    def test_missing_state_reported_before_extra_state(self, parts):
        del parts["transition_table"]["S2"]
        parts["transition_table"]["S9"] = {"0": "S0", "1": "S0"}
        with pytest.raises(MissingStateFromTableError):
            _validate(parts)

    def test_earlier_entry_bad_symbol_beats_later_extra_state(self, parts):
        parts["transition_table"]["S0"]["x"] = "S0"
        parts["transition_table"]["S9"] = {"0": "S0", "1": "S0"}
        with pytest.raises(InvalidInputInTableError) as info:
            _validate(parts)
        assert info.value.issue.state == "S0"
        assert info.value.issue.values == ("x",)

    def test_earlier_entry_bad_target_beats_later_bad_symbol(self, parts):
        parts["transition_table"]["S0"]["0"] = "S7"
        parts["transition_table"]["S2"]["x"] = "S0"
        with pytest.raises(InvalidTransitionTargetInTableError) as info:
            _validate(parts)
        assert info.value.issue.state == "S0"

    def test_earlier_entry_missing_symbol_beats_later_bad_target(self, parts):
        del parts["transition_table"]["S0"]["1"]
        parts["transition_table"]["S2"]["0"] = "S7"
        with pytest.raises(MissingInputDefinitionError) as info:
            _validate(parts)
        assert info.value.issue.state == "S0"
        assert info.value.issue.symbol == "1"

    def test_extra_state_checked_in_table_order(self, parts):
        table = {"S9": {"0": "S0", "1": "S0"}}
        table.update(parts["transition_table"])
        table["S1"]["x"] = "S0"
        parts["transition_table"] = table
        with pytest.raises(InvalidStateInTableError) as info:
            _validate(parts)
        assert info.value.issue.state == "S9"

    def test_within_entry_bad_symbol_before_bad_target(self, parts):
        parts["transition_table"]["S1"] = {"0": "S7", "x": "S0"}
        with pytest.raises(InvalidInputInTableError) as info:
            _validate(parts)
        assert info.value.issue.state == "S1"

    def test_within_entry_bad_target_before_missing_symbol(self, parts):
        parts["transition_table"]["S1"] = {"0": "S7"}
        with pytest.raises(InvalidTransitionTargetInTableError) as info:
            _validate(parts)
        assert info.value.issue.values == ("S7",)


class TestReachability:
    def test_unreachable_state_named(self):
        with pytest.raises(UnreachableStateError) as info:
            validate_definition(
                states=["S0", "S1", "S2", "S3"],
                initial_state="S0",
                input_alphabet=["0", "1"],
                transition_table={
                    "S0": {"0": "S0", "1": "S1"},
                    "S1": {"0": "S2", "1": "S1"},
                    "S2": {"0": "S0", "1": "S1"},
                    "S3": {"0": "S0", "1": "S3"},
                },
                accepting_states=["S0"],
            )
        assert info.value.issue.state == "S3"

    def test_first_unreachable_in_state_order(self):
        with pytest.raises(UnreachableStateError) as info:
            validate_definition(
                states=["A", "Z", "Y"],
                initial_state="A",
                input_alphabet=["x"],
                transition_table={"A": {"x": "A"}, "Z": {"x": "Y"}, "Y": {"x": "Z"}},
                accepting_states=["A"],
            )
        assert info.value.issue.state == "Z"

    def test_reachable_states_follows_edges(self):
        transitions = {
            ("A", "x"): "B",
            ("B", "x"): "C",
            ("C", "x"): "C",
            ("D", "x"): "A",
        }
        assert reachable_states(transitions, "A") == frozenset({"A", "B", "C"})
        assert reachable_states(transitions, "D") == frozenset({"A", "B", "C", "D"})
        assert unreachable_states(("A", "B", "C", "D"), transitions, "A") == ("D",)


class TestInspection:
    """check_definition reports what validate_definition raises, without raising."""

    @pytest.mark.parametrize(
        "mutate, kind",
        [
            (lambda p: p.update(states=[]), ErrorKind.EMPTY_SET),
            (lambda p: p.update(initial_state="S42"), ErrorKind.INVALID_INITIAL_STATE),
            (lambda p: p.update(accepting_states=["S9"]), ErrorKind.INVALID_ACCEPTING_STATE),
            (lambda p: p["transition_table"].pop("S1"), ErrorKind.MISSING_STATE_FROM_TABLE),
            (lambda p: p["transition_table"]["S1"].pop("0"), ErrorKind.MISSING_INPUT_DEFINITION),
        ],
    )
    def test_issue_matches_raised_error(self, parts, mutate, kind):
        mutate(parts)
        issue = check_definition(**parts)
        assert issue is not None
        assert issue.kind is kind

        with pytest.raises(ValidationError) as info:
            _validate(parts)
        assert info.value.issue == issue

    def test_rejection_logged_at_debug(self, parts, caplog):
        parts["initial_state"] = "S42"
        with caplog.at_level(logging.DEBUG, logger="pydfsm.core.validation"):
            with pytest.raises(InvalidInitialStateError):
                _validate(parts)
        assert any("INVALID_INITIAL_STATE" in r.getMessage() for r in caplog.records)
