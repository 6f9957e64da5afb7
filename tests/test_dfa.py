import pytest
from powerset.dfa import DFA
from powerset.fsa import EPSILON, NoStartStateError, NondeterministicError, UnknownStateError


def parity_dfa():
    # Accepts strings with an even number of 1s
    dfa = DFA()
    dfa.add_final_state("even")
    dfa.add_state("odd")
    dfa.add_start_state("even")
    dfa.add_transition("even", "0", "even")
    dfa.add_transition("even", "1", "odd")
    dfa.add_transition("odd", "0", "odd")
    dfa.add_transition("odd", "1", "even")
    return dfa


def test_builder_contract():
    dfa = parity_dfa()
    assert dfa.get_states() == ["even", "odd"]
    assert dfa.get_final_states() == ["even"]
    assert dfa.get_start_state() == "even"
    assert dfa.get_abc() == ["0", "1"]
    assert dfa.get_to_state("odd", "1") == "even"
    assert dfa.get_to_state("odd", "2") is None
    assert len(dfa) == 2
    assert dfa.is_total()
    assert dfa.to_dfa() is dfa


def test_add_start_state_keeps_final():
    dfa = DFA()
    dfa.add_final_state("a")
    dfa.add_start_state("a")
    assert dfa.get_states() == ["a"]
    assert dfa.is_final(dfa.start())


def test_accept():
    dfa = parity_dfa()
    assert dfa.accept("")
    assert dfa.accept("0110")
    assert not dfa.accept("010")
    # Symbols outside the alphabet reject
    assert not dfa.accept("0x")


def test_no_start():
    dfa = DFA()
    dfa.add_state("a")
    with pytest.raises(NoStartStateError):
        dfa.accept("")


def test_transition_errors():
    dfa = parity_dfa()
    with pytest.raises(UnknownStateError):
        dfa.add_transition("even", "2", "nowhere")
    with pytest.raises(UnknownStateError):
        dfa.add_transition("nowhere", "2", "even")
    with pytest.raises(NondeterministicError):
        dfa.add_transition("even", "1", "even")
    with pytest.raises(NondeterministicError):
        dfa.add_transition("even", EPSILON, "odd")

    # Repeating an identical transition is harmless
    dfa.add_transition("even", "1", "odd")
    assert dfa.get_to_state("even", "1") == "odd"


def test_is_total():
    dfa = DFA()
    dfa.add_start_state("a")
    dfa.add_state("b")
    dfa.add_transition("a", "x", "b")
    assert not dfa.is_total()
    dfa.add_transition("b", "x", "b")
    assert dfa.is_total()
    dfa.add_transition("b", "y", "a")
    assert not dfa.is_total()


def test_reachable_from():
    dfa = DFA()
    for name in "abcd":
        dfa.add_state(name)
    dfa.add_start_state("a")
    dfa.add_transition("a", "x", "b")
    dfa.add_transition("b", "x", "c")
    dfa.add_transition("c", "x", "a")
    assert dfa.reachable_from("a") == {"a", "b", "c"}
    assert dfa.reachable_from("d") == {"d"}
    assert dfa.reachable_from("d", inclusive=False) == set()


def test_equality():
    assert parity_dfa() == parity_dfa()

    other = parity_dfa()
    other.add_final_state("odd")
    assert parity_dfa() != other

    other = parity_dfa()
    other.add_start_state("odd")
    assert parity_dfa() != other

    assert parity_dfa() != "dfa"
