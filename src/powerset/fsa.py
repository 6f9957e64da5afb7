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

# The library stays silent until an application calls
# logger.enable("powerset")
logger.disable("powerset")


# Marker constants


class Marker:
    """
    Represents a marker object.

    Markers are sentinel labels that can never be confused with a real
    input symbol, because they only compare equal to themselves.

    Attributes:
        name (str): The name of the marker.

    Example:
        >>> marker = Marker("EPSILON")
        >>> repr(marker)
        '<EPSILON>'
    """

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return f"<{self.name}>"


EPSILON = Marker("EPSILON")


# Exceptions


class AutomatonError(Exception):
    """Base class for errors raised while building or converting automata."""


class UnknownStateError(AutomatonError, KeyError):
    """
    Raised when a state name is looked up, or referenced by a transition,
    but no state with that name was ever added to the automaton.
    """

    def __init__(self, name):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f"Unknown state {self.name!r}"


class NoStartStateError(AutomatonError):
    """Raised when an automaton is used before a start state is designated."""


class NondeterministicError(AutomatonError):
    """
    Raised when a deterministic automaton is given a second, different
    destination for a (state, symbol) pair it already has an edge for.
    """


# States


class State:
    """
    A named, immutable state identity.

    Two states are equal when their names are equal, regardless of which
    automaton they belong to or what other attributes they carry.

    Args:
        name (str): The name of the state.
    """

    __slots__ = ("_name",)

    def __init__(self, name):
        if name is None:
            raise TypeError("State name must not be None")
        if not isinstance(name, str):
            raise TypeError(f"State name must be a string, not {name!r}")
        object.__setattr__(self, "_name", name)

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} objects are immutable")

    @property
    def name(self):
        return self._name

    def __eq__(self, other):
        return isinstance(other, State) and self._name == other._name

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(self._name)

    def __str__(self):
        return str(self._name)

    def __repr__(self):
        return f"{type(self).__name__}({self._name!r})"


# Base class


class FSA:
    """
    Finite State Automaton (FSA) base class.

    Defines the construction interface shared by both automaton kinds
    (``add_state``, ``add_final_state``, ``add_start_state`` and
    ``add_transition``) and implements string acceptance in terms of the
    ``start``, ``next_state`` and ``is_final`` methods each subclass
    provides.

    Methods:
        __len__(): Returns the total number of states in the automaton.
        get_states(): Returns the states of the automaton.
        get_final_states(): Returns the final states of the automaton.
        get_start_state(): Returns the designated start state.
        get_abc(): Returns the input alphabet.
        start(): Returns the state simulation begins in.
        next_state(state, label): Returns the state reached on a label.
        is_final(state): Checks if a simulation state is accepting.
        to_dfa(): Converts the automaton to a DFA.
        accept(string): Checks if a given string is accepted.
    """

    def __len__(self):
        return len(self.get_states())

    def add_state(self, name):
        raise NotImplementedError

    def add_final_state(self, name):
        raise NotImplementedError

    def add_start_state(self, name):
        raise NotImplementedError

    def add_transition(self, src, label, dest):
        raise NotImplementedError

    def get_states(self):
        raise NotImplementedError

    def get_final_states(self):
        raise NotImplementedError

    def get_start_state(self):
        raise NotImplementedError

    def get_abc(self):
        raise NotImplementedError

    def start(self):
        """
        Returns the state the automaton is in before reading any input.

        Raises:
            NotImplementedError: This method should be implemented in a subclass.
        """
        raise NotImplementedError

    def next_state(self, state, label):
        """
        Returns the next state given the current state and a label.

        Args:
            state (object): The current state.
            label (object): The input symbol being read.

        Returns:
            object: The next state, or None if the automaton is stuck.

        Raises:
            NotImplementedError: This method should be implemented in a subclass.
        """
        raise NotImplementedError

    def is_final(self, state):
        raise NotImplementedError

    def to_dfa(self):
        raise NotImplementedError

    def accept(self, string, debug=False):
        """
        Checks if a given string is accepted by the automaton.

        Args:
            string (iterable): The sequence of input symbols to check.
            debug (bool, optional): Whether to log every step at debug
                level. Defaults to False.

        Returns:
            bool: True if the string is accepted, False otherwise.

        Notes:
            Symbols are consumed one at a time starting from ``start()``.
            If the automaton gets stuck (``next_state`` returns None) the
            string is rejected.
        """
        state = self.start()

        for label in string:
            if debug:
                logger.debug("{} -> {!r} ->", state, label)

            state = self.next_state(state, label)
            if state is None:
                return False

        return self.is_final(state)
