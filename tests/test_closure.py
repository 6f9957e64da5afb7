import pytest
from powerset.fsa import EPSILON, UnknownStateError
from powerset.nfa import NFA


def names(states):
    return {s.name for s in states}


def chain_nfa():
    nfa = NFA()
    for name in "ABCDE":
        nfa.add_state(name)
    nfa.add_transition("A", EPSILON, "B")
    nfa.add_transition("B", EPSILON, "C")
    nfa.add_transition("C", "x", "D")
    nfa.add_transition("D", EPSILON, "E")
    return nfa


def cyclic_nfa():
    nfa = NFA()
    for name in "ABCD":
        nfa.add_state(name)
    nfa.add_transition("A", EPSILON, "B")
    nfa.add_transition("B", EPSILON, "A")
    nfa.add_transition("B", EPSILON, "C")
    nfa.add_transition("C", EPSILON, "C")
    nfa.add_transition("C", "x", "D")
    nfa.add_transition("D", EPSILON, "A")
    return nfa


def test_chain():
    nfa = chain_nfa()
    assert names(nfa.eclosure("A")) == {"A", "B", "C"}
    assert names(nfa.eclosure("C")) == {"C"}
    assert names(nfa.eclosure("D")) == {"D", "E"}
    assert names(nfa.eclosure(nfa.get_state("B"))) == {"B", "C"}


def test_cycles_terminate():
    nfa = cyclic_nfa()
    assert names(nfa.eclosure("A")) == {"A", "B", "C"}
    assert names(nfa.eclosure("B")) == {"A", "B", "C"}
    assert names(nfa.eclosure("C")) == {"C"}
    assert names(nfa.eclosure("D")) == {"A", "B", "C", "D"}


def test_long_chain():
    nfa = NFA()
    count = 5000
    for i in range(count):
        nfa.add_state(f"s{i}")
        if i:
            nfa.add_transition(f"s{i - 1}", EPSILON, f"s{i}")
    assert len(nfa.eclosure("s0")) == count


@pytest.mark.parametrize("factory", [chain_nfa, cyclic_nfa])
def test_self_inclusion_and_idempotence(factory):
    nfa = factory()
    for state in nfa.get_states():
        closure = nfa.eclosure(state)
        assert state in closure
        assert nfa.eclosure_of_states(closure) == frozenset(closure)


def test_of_states():
    nfa = chain_nfa()
    result = nfa.eclosure_of_states(["A", "D"])
    assert isinstance(result, frozenset)
    assert names(result) == {"A", "B", "C", "D", "E"}
    assert nfa.eclosure_of_states([]) == frozenset()


def test_unknown_state():
    nfa = chain_nfa()
    with pytest.raises(UnknownStateError):
        nfa.eclosure("Z")

    nfa.add_transition("E", EPSILON, "Z")
    with pytest.raises(UnknownStateError) as e:
        nfa.eclosure("D")
    assert e.value.name == "Z"
