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

from powerset.fsa import (
    EPSILON,
    FSA,
    NoStartStateError,
    NondeterministicError,
    UnknownStateError,
)


class DFA(FSA):
    """
    Deterministic Finite Automaton (DFA) class.

    States are identified by any hashable name. Each state has at most one
    destination per input symbol. Subset construction fills a DFA through
    ``add_state``, ``add_final_state``, ``add_start_state`` and
    ``add_transition`` only.

    Attributes:
        states (dict): The state names in insertion order (only the keys
            are meaningful).
        initial (object): The start state, or None.
        final_states (set): The final states.
        alphabet (dict): The input symbols in the order they were first
            used (only the keys are meaningful).
        transitions (dict): Maps a source state to a dictionary of labels
            and destination states.
    """

    def __init__(self):
        self.states = {}
        self.initial = None
        self.final_states = set()
        self.alphabet = {}
        self.transitions = {}

    def __repr__(self):
        return f"<DFA with {len(self.states)} states>"

    def __eq__(self, other):
        """
        Two DFAs are equal when they have the same states, start state,
        final states and transitions.
        """
        if not isinstance(other, DFA):
            return NotImplemented
        if self.initial != other.initial:
            return False
        if self.final_states != other.final_states:
            return False
        if set(self.states) != set(other.states):
            return False
        return self.transitions == other.transitions

    __hash__ = None

    # Construction

    def add_state(self, name):
        self.states.setdefault(name)

    def add_final_state(self, name):
        self.add_state(name)
        self.final_states.add(name)

    def add_start_state(self, name):
        self.add_state(name)
        self.initial = name

    def add_transition(self, src, label, dest):
        """
        Adds a transition from the source state to the destination state
        with the given input label.

        Args:
            src (object): The source state.
            label (object): The input label.
            dest (object): The destination state.

        Raises:
            UnknownStateError: If either state has not been added.
            NondeterministicError: If the label is EPSILON, or ``src``
                already moves somewhere else on ``label``.
        """
        if src not in self.states:
            raise UnknownStateError(src)
        if dest not in self.states:
            raise UnknownStateError(dest)
        if label is EPSILON:
            raise NondeterministicError("A DFA cannot have epsilon transitions")

        trans = self.transitions.setdefault(src, {})
        existing = trans.get(label)
        if existing is not None and existing != dest:
            raise NondeterministicError(
                f"{src} already moves to {existing} on {label!r}, not {dest}"
            )
        trans[label] = dest
        self.alphabet.setdefault(label)

    # Queries

    def get_states(self):
        return list(self.states)

    def get_final_states(self):
        return [state for state in self.states if state in self.final_states]

    def get_start_state(self):
        return self.initial

    def get_abc(self):
        return list(self.alphabet)

    def get_to_state(self, state, label):
        """
        Returns the destination of ``state`` on ``label``, or None if there
        is no such transition.
        """
        return self.transitions.get(state, {}).get(label)

    def is_total(self):
        """
        Checks that every state has exactly one transition for every symbol
        of the alphabet.
        """
        labels = set(self.alphabet)
        return all(
            set(self.transitions.get(state, {})) == labels for state in self.states
        )

    def reachable_from(self, src, inclusive=True):
        """
        Returns the set of states that can be reached from the specified
        source state.

        Args:
            src (object): The source state.
            inclusive (bool, optional): Whether the source state itself is
                included in the result. Defaults to True.

        Returns:
            set: The set of reachable states.
        """
        transitions = self.transitions

        reached = set()
        if inclusive:
            reached.add(src)

        stack = [src]
        seen = set()
        while stack:
            src = stack.pop()
            seen.add(src)
            for dest in transitions.get(src, {}).values():
                reached.add(dest)
                if dest not in seen:
                    stack.append(dest)
        return reached

    # Simulation

    def start(self):
        if self.initial is None:
            raise NoStartStateError("DFA has no start state")
        return self.initial

    def next_state(self, src, label):
        return self.get_to_state(src, label)

    def is_final(self, state):
        return state in self.final_states

    def to_dfa(self):
        return self
