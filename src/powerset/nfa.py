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

from loguru import logger

from powerset.fsa import EPSILON, FSA, NoStartStateError, State, UnknownStateError
from powerset.subset import subset_construction


class NFAState(State):
    """
    A state of a nondeterministic automaton: a name plus a final flag.

    Like :class:`~powerset.fsa.State`, equality and hashing only look at the
    name, so an NFA can never hold two states with the same name.

    Args:
        name (str): The name of the state.
        final (bool, optional): Whether the state is accepting. Defaults to False.
    """

    __slots__ = ("_final",)

    def __init__(self, name, final=False):
        super().__init__(name)
        object.__setattr__(self, "_final", bool(final))

    @property
    def final(self):
        return self._final

    def __repr__(self):
        if self._final:
            return f"NFAState({self.name!r}, final=True)"
        return f"NFAState({self.name!r})"


def _state_name(state):
    if isinstance(state, State):
        return state.name
    if not isinstance(state, str):
        raise TypeError(f"State name must be a string, not {state!r}")
    return state


class NFA(FSA):
    """
    NFA (Non-Deterministic Finite Automaton) class.

    The automaton is built incrementally: states are added by name, one of
    them is designated the start state, and labelled transitions are
    registered between names. Registering the same ``(src, label)`` pair
    more than once accumulates destinations, which is how nondeterminism is
    expressed. Transitions labelled :data:`~powerset.fsa.EPSILON` are
    consumed without reading input and never become part of the alphabet.

    States may be mentioned by a transition before they are added; every
    name is checked when the automaton is converted or simulated.

    Attributes:
        states (dict): Maps state names to :class:`NFAState` objects, in
            insertion order.
        initial (str): The name of the start state, or None.
        alphabet (dict): The input symbols, in the order they were first
            seen (only the keys are meaningful).
        transitions (dict): Maps a source name to a dictionary of labels
            and sets of destination names.

    Example:
        >>> nfa = NFA()
        >>> nfa.add_start_state("A")
        >>> nfa.add_final_state("B")
        >>> nfa.add_transition("A", "0", "B")
        >>> nfa.accept("0")
        True
    """

    def __init__(self):
        self.states = {}
        self.initial = None
        self.alphabet = {}
        self.transitions = {}

    def __repr__(self):
        return (
            f"<NFA with {len(self.states)} states and "
            f"{sum(1 for _ in self.triples())} transitions>"
        )

    # Construction

    def add_state(self, name):
        """
        Adds a non-final state. Does nothing if a state with this name
        already exists.

        Args:
            name (str): The name of the state.
        """
        name = _state_name(name)
        if name not in self.states:
            self.states[name] = NFAState(name)

    def add_final_state(self, name):
        """
        Adds a final state.

        If a non-final state with this name already exists it is promoted to
        a final state in place, keeping its position and any start state
        designation.

        Args:
            name (str): The name of the state.
        """
        name = _state_name(name)
        existing = self.states.get(name)
        if existing is None:
            self.states[name] = NFAState(name, final=True)
        elif not existing.final:
            logger.debug("Promoting NFA state {!r} to final", name)
            self.states[name] = NFAState(name, final=True)

    def add_start_state(self, name):
        """
        Designates the start state, creating a non-final state with this
        name if none exists yet. A later call replaces the designation.

        Args:
            name (str): The name of the state.
        """
        name = _state_name(name)
        self.add_state(name)
        self.initial = name

    def add_transition(self, src, label, dest):
        """
        Registers ``dest`` as a destination of ``src`` on ``label``.

        Destinations registered earlier for the same pair are kept. Unless
        the label is :data:`~powerset.fsa.EPSILON` it is added to the
        alphabet.

        Args:
            src (str): The name of the source state.
            label (object): A hashable input symbol, or EPSILON.
            dest (str): The name of the destination state.

        Raises:
            TypeError: If the label is None or a state name is not a string.
        """
        if label is None:
            raise TypeError("Transition label must not be None")
        src = _state_name(src)
        dest = _state_name(dest)
        if label is not EPSILON:
            self.alphabet.setdefault(label)
        self.transitions.setdefault(src, {}).setdefault(label, set()).add(dest)

    def embed(self, other):
        """
        Copies all states and transitions from another NFA into this NFA.

        The copied states are added as non-final states: the caller decides
        how the other automaton's final states connect to this one (see
        :meth:`insert`). States already present keep their flags.

        Args:
            other (NFA): The other NFA to copy from.
        """
        for name in other.states:
            self.add_state(name)
        for label in other.alphabet:
            self.alphabet.setdefault(label)
        for src, othertrans in other.transitions.items():
            trans = self.transitions.setdefault(src, {})
            for label, otherdests in othertrans.items():
                dests = trans.setdefault(label, set())
                dests.update(otherdests)

    def insert(self, src, other, dest):
        """
        Embeds another NFA, connecting ``src`` to its start state and each
        of its final states to ``dest`` with epsilon transitions.

        Args:
            src (str): The state to connect from.
            other (NFA): The NFA to splice in.
            dest (str): The state to connect to.

        Raises:
            NoStartStateError: If ``other`` has no start state.
        """
        if other.initial is None:
            raise NoStartStateError("Cannot insert an NFA without a start state")
        self.embed(other)
        self.add_transition(src, EPSILON, other.initial)
        for finalstate in other.get_final_states():
            self.add_transition(finalstate.name, EPSILON, dest)

    # Queries

    def get_states(self):
        return list(self.states.values())

    def get_final_states(self):
        return [state for state in self.states.values() if state.final]

    def get_start_state(self):
        """
        Returns the start :class:`NFAState`, or None if no start state has
        been designated yet.
        """
        if self.initial is None:
            return None
        return self.states[self.initial]

    def get_abc(self):
        return list(self.alphabet)

    def get_state(self, name):
        """
        Returns the :class:`NFAState` with the given name.

        Raises:
            UnknownStateError: If no state with this name was added.
        """
        name = _state_name(name)
        try:
            return self.states[name]
        except KeyError:
            raise UnknownStateError(name) from None

    def triples(self):
        """
        Generates every (source name, label, destination name) triple in
        the NFA.
        """
        for src, trans in self.transitions.items():
            for label, dests in trans.items():
                for dest in dests:
                    yield src, label, dest

    def validate(self):
        """
        Checks that the automaton can be converted or simulated.

        Raises:
            NoStartStateError: If no start state has been designated.
            UnknownStateError: If a transition refers to a state that was
                never added.
        """
        if self.initial is None:
            raise NoStartStateError("NFA has no start state")
        states = self.states
        for src, _, dest in self.triples():
            if src not in states:
                raise UnknownStateError(src)
            if dest not in states:
                raise UnknownStateError(dest)

    def get_to_state(self, state, label):
        """
        Returns the states reachable from ``state`` on ``label``.

        For EPSILON only the directly registered destinations are returned.
        For any other label the result is already closed under epsilon
        transitions: each direct destination contributes its whole
        epsilon-closure.

        Args:
            state (NFAState or str): The source state.
            label (object): The transition label.

        Returns:
            set: :class:`NFAState` objects. Empty when nothing is registered
            for the pair.

        Raises:
            UnknownStateError: If the source or a destination is unknown.
        """
        name = self.get_state(state).name
        dests = self.transitions.get(name, {}).get(label)
        if not dests:
            return set()
        if label is EPSILON:
            return {self.get_state(dest) for dest in dests}
        return {self.states[n] for n in self._expand(set(dests))}

    # Epsilon closure

    def _expand(self, names):
        """
        Expands a set of state names in place by following epsilon
        transitions until no new state is found, and returns it.
        """
        transitions = self.transitions
        frontier = list(names)
        for name in frontier:
            if name not in self.states:
                raise UnknownStateError(name)
        while frontier:
            name = frontier.pop()
            trans = transitions.get(name)
            if trans is None or EPSILON not in trans:
                continue
            for dest in trans[EPSILON]:
                if dest not in names:
                    if dest not in self.states:
                        raise UnknownStateError(dest)
                    names.add(dest)
                    frontier.append(dest)
        return names

    def eclosure(self, state):
        """
        Returns the epsilon-closure of a state: the state itself plus every
        state reachable from it using only epsilon transitions.

        Cycles of epsilon transitions are fine; each state is visited once.

        Args:
            state (NFAState or str): The state to start from.

        Returns:
            set: :class:`NFAState` objects.

        Raises:
            UnknownStateError: If the state, or a state reachable from it,
                was never added.
        """
        name = self.get_state(state).name
        return {self.states[n] for n in self._expand({name})}

    def eclosure_of_states(self, states):
        """
        Returns the union of the epsilon-closures of all the given states.

        Args:
            states (iterable): :class:`NFAState` objects or state names.

        Returns:
            frozenset: :class:`NFAState` objects.
        """
        names = {self.get_state(state).name for state in states}
        return frozenset(self.states[n] for n in self._expand(names))

    # Simulation

    def start(self):
        """
        Returns the epsilon-closure of the start state as a frozenset.

        Raises:
            NoStartStateError: If no start state has been designated.
        """
        if self.initial is None:
            raise NoStartStateError("NFA has no start state")
        return frozenset(self.eclosure(self.initial))

    def next_state(self, states, label):
        """
        Returns the frozenset of states reachable from any of ``states`` on
        ``label``, closed under epsilon transitions.
        """
        dest_states = set()
        for state in states:
            dest_states.update(self.get_to_state(state, label))
        return frozenset(dest_states)

    def is_final(self, states):
        """
        Checks if any of the given states is a final state.

        Args:
            states (iterable): :class:`NFAState` objects.

        Returns:
            bool: True if any of the states is final.
        """
        return any(state.final for state in states)

    # Conversion

    def get_dfa(self, builder=None):
        """
        Converts the NFA to an equivalent DFA using subset construction.

        The NFA itself is not modified, so it can be converted again or
        reused afterwards.

        Args:
            builder (optional): An empty DFA-like object to emit the result
                into. It must provide ``add_state``, ``add_final_state``,
                ``add_start_state`` and ``add_transition``. Defaults to a new
                :class:`~powerset.dfa.DFA`.

        Returns:
            The populated builder.

        Raises:
            NoStartStateError: If no start state has been designated.
            UnknownStateError: If a transition refers to an unknown state.
        """
        return subset_construction(self, builder)

    def to_dfa(self):
        return self.get_dfa()
