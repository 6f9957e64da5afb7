# Copyright 2012 Matt Chaput. All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#    1. Redistributions of source code must retain the above copyright notice,
#       this list of conditions and the following disclaimer.
#
#    2. Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY MATT CHAPUT ``AS IS'' AND ANY EXPRESS OR
# IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO
# EVENT SHALL MATT CHAPUT OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA,
# OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE,
# EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
#
# The views and conclusions contained in the software and documentation are
# those of the authors and should not be interpreted as representing official
# policies, either expressed or implied, of Matt Chaput.

"""
Subset (powerset) construction: converts an NFA into an equivalent DFA
whose states are the reachable sets of NFA states.
"""

from collections import deque

from cached_property import cached_property
from loguru import logger

from powerset.dfa import DFA
from powerset.fsa import State


class StateSet:
    """
    An immutable, order-independent set of NFA state names, used as the
    identity of one DFA state.

    Two StateSets are equal when they hold the same names, whatever order
    the names were given in. The empty StateSet is the dead state.

    The label only affects display, never equality. Labels are unique among
    the StateSets of one automaton as long as they all share the same
    ``compact`` setting and, when it is true, every state name is a single
    character. :func:`subset_construction` decides ``compact`` once for
    the whole NFA.

    Args:
        names (iterable): State names or :class:`~powerset.fsa.State`
            objects.
        compact (bool, optional): Write the names next to each other
            instead of separating them with commas. Defaults to None, which
            writes them next to each other only if every name in this set
            is a single character.

    Example:
        >>> StateSet(["B", "A"]) == StateSet("AB")
        True
        >>> str(StateSet(["B", "A"]))
        '[AB]'
        >>> str(StateSet(["B", "A"], compact=False))
        '[A,B]'
        >>> str(StateSet(["q10", "q2"]))
        '[q10,q2]'
    """

    def __init__(self, names=(), compact=None):
        self._names = tuple(
            sorted({n.name if isinstance(n, State) else n for n in names})
        )
        if compact is None:
            compact = all(len(name) == 1 for name in self._names)
        self._compact = compact

    @property
    def names(self):
        return self._names

    @cached_property
    def label(self):
        """
        The bracketed display name.
        """
        if self._compact:
            return "[" + "".join(self._names) + "]"
        return "[" + ",".join(self._names) + "]"

    def __eq__(self, other):
        return isinstance(other, StateSet) and self._names == other._names

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(self._names)

    def __len__(self):
        return len(self._names)

    def __iter__(self):
        return iter(self._names)

    def __contains__(self, name):
        if isinstance(name, State):
            name = name.name
        return name in self._names

    def __str__(self):
        return self.label

    def __repr__(self):
        return f"StateSet({self.label})"


def _explore(nfa, start, alphabet, compact):
    # Breadth-first discovery of the reachable subsets. Returns the
    # discovered subsets in order (without the start subset) and the
    # recorded moves keyed by (subset, label).
    discovered = []
    moves = {}
    seen = {start}
    queue = deque([start])

    while queue:
        current = queue.popleft()
        if current != start:
            discovered.append(current)

        for label in alphabet:
            dests = set()
            for name in current:
                dests.update(nfa.get_to_state(name, label))
            target = StateSet(dests, compact)
            if not target:
                continue
            if target not in seen:
                logger.debug("Discovered subset {} via {} on {!r}", target, current, label)
                seen.add(target)
                queue.append(target)
            moves[current, label] = target

    return discovered, moves


def subset_construction(nfa, builder=None):
    """
    Converts an NFA to a DFA by subset construction.

    The start state of the DFA is the epsilon-closure of the NFA's start
    state. Every other reachable set of NFA states becomes one DFA state,
    which is final if any of its members is final. Missing moves are sent
    to a single dead state (the empty StateSet), created only when needed,
    which loops to itself on every symbol, so the result is total over the
    NFA's alphabet.

    The DFA is emitted only through ``add_state``, ``add_final_state``,
    ``add_start_state`` and ``add_transition``, with :class:`StateSet`
    objects as state names.

    Args:
        nfa (NFA): The automaton to convert. It is not modified.
        builder (optional): An empty DFA-like object to emit into. Defaults
            to a new :class:`~powerset.dfa.DFA`.

    Returns:
        The populated builder.

    Raises:
        NoStartStateError: If the NFA has no start state.
        UnknownStateError: If a transition refers to an unknown state.
    """
    nfa.validate()
    dfa = DFA() if builder is None else builder
    alphabet = nfa.get_abc()
    finals = {state.name for state in nfa.get_final_states()}

    compact = all(len(name) == 1 for name in nfa.states)
    start = StateSet(nfa.eclosure(nfa.initial), compact)
    discovered, moves = _explore(nfa, start, alphabet, compact)
    dfa_states = [start] + discovered

    for stateset in dfa_states:
        if finals.isdisjoint(stateset.names):
            dfa.add_state(stateset)
        else:
            dfa.add_final_state(stateset)
    dfa.add_start_state(start)

    dead = None
    for src in dfa_states:
        for label in alphabet:
            dest = moves.get((src, label))
            if dest is None:
                if dead is None:
                    dead = StateSet((), compact)
                    logger.debug("Adding dead state {}", dead)
                    dfa.add_state(dead)
                    for c in alphabet:
                        dfa.add_transition(dead, c, dead)
                dest = dead
            dfa.add_transition(src, label, dest)

    logger.info(
        "Converted NFA with {} states into DFA with {} states (dead state: {})",
        len(nfa.states),
        len(dfa_states) + (dead is not None),
        dead is not None,
    )
    return dfa
