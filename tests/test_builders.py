import itertools

from powerset import builders
from powerset.builders import StateNamer
from powerset.fsa import EPSILON
from powerset.subset import StateSet


def accepted(fsa, alphabet, maxlen=5):
    result = set()
    for length in range(maxlen + 1):
        for string in itertools.product(alphabet, repeat=length):
            if fsa.accept(string):
                result.add("".join(string))
    return result


def test_namer():
    namer = StateNamer("s", start=5)
    assert [namer(), namer(), namer()] == ["s5", "s6", "s7"]


def test_basic_and_epsilon():
    nfa = builders.basic_nfa("a")
    assert accepted(nfa, "ab") == {"a"}
    nfa = builders.epsilon_nfa()
    assert nfa.get_abc() == []
    assert accepted(nfa, "ab") == {""}


def test_fresh_names():
    n1 = builders.basic_nfa("a")
    n2 = builders.basic_nfa("a")
    assert not set(n1.states) & set(n2.states)


def test_string_and_charset():
    assert accepted(builders.string_nfa("abc"), "abc") == {"abc"}
    assert accepted(builders.string_nfa(""), "abc") == {""}
    assert accepted(builders.charset_nfa("ac"), "abc") == {"a", "c"}


def test_choice():
    nfa = builders.choice_nfa(builders.string_nfa("ab"), builders.string_nfa("ba"))
    assert accepted(nfa, "ab") == {"ab", "ba"}
    assert len(nfa.get_final_states()) == 1


def test_concat():
    nfa = builders.concat_nfa(builders.charset_nfa("ab"), builders.basic_nfa("c"))
    assert accepted(nfa, "abc") == {"ac", "bc"}


def test_star():
    nfa = builders.star_nfa(builders.string_nfa("ab"))
    assert accepted(nfa, "ab", maxlen=6) == {"", "ab", "abab", "ababab"}


def test_plus():
    nfa = builders.plus_nfa(builders.basic_nfa("a"))
    assert accepted(nfa, "ab", maxlen=4) == {"a", "aa", "aaa", "aaaa"}


def test_optional():
    nfa = builders.optional_nfa(builders.basic_nfa("a"))
    assert accepted(nfa, "ab") == {"", "a"}


def test_custom_namer():
    namer = StateNamer("t")
    nfa = builders.string_nfa("ab", namer=namer)
    assert list(nfa.states) == ["t0", "t1", "t2"]
    assert nfa.get_start_state().name == "t0"
    assert [s.name for s in nfa.get_final_states()] == ["t2"]


def test_converted_language():
    # (a|b)*abb
    namer = StateNamer()
    ab = builders.charset_nfa("ab", namer=namer)
    nfa = builders.concat_nfa(
        builders.star_nfa(ab, namer=namer), builders.string_nfa("abb", namer=namer), namer=namer
    )
    assert EPSILON not in nfa.get_abc()

    dfa = nfa.get_dfa()
    assert dfa.is_total()
    expected = {
        "".join(s)
        for n in range(7)
        for s in itertools.product("ab", repeat=n)
        if "".join(s).endswith("abb")
    }
    assert accepted(dfa, "ab", maxlen=6) == expected
    assert accepted(nfa, "ab", maxlen=6) == expected
    # Same five subsets as the textbook construction, none of them dead
    assert len(dfa) == 5
    assert StateSet() not in dfa.states


def test_union_of_automata():
    namer = StateNamer()
    keywords = [builders.string_nfa(w, namer=namer) for w in ("if", "in", "int")]
    nfa = keywords[0]
    for other in keywords[1:]:
        nfa = builders.choice_nfa(nfa, other, namer=namer)

    dfa = nfa.get_dfa()
    assert dfa.is_total()
    assert accepted(dfa, "fint", maxlen=3) == {"if", "in", "int"}
