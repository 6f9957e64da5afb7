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
Functions for building NFAs out of smaller NFAs (Thompson's construction).

Every function returns a new :class:`~powerset.nfa.NFA` whose states get
fresh names from a :class:`StateNamer`, so automata built by separate calls
can be combined without their states being merged by accident.
"""

import itertools

from powerset.fsa import EPSILON
from powerset.nfa import NFA


class StateNamer:
    """
    Generates unique state names: ``prefix`` followed by a counter.

    Args:
        prefix (str, optional): Prefix of every generated name. Defaults to "q".
        start (int, optional): First counter value. Defaults to 0.

    Example:
        >>> namer = StateNamer("s")
        >>> namer(), namer()
        ('s0', 's1')
    """

    def __init__(self, prefix="q", start=0):
        self.prefix = prefix
        self._counter = itertools.count(start)

    def __call__(self):
        return f"{self.prefix}{next(self._counter)}"


_namer = StateNamer()


def _new_nfa(namer):
    s = namer()
    nfa = NFA()
    nfa.add_start_state(s)
    return nfa, s


def epsilon_nfa(namer=None):
    """
    Creates an NFA that accepts only the empty string.
    """
    return basic_nfa(EPSILON, namer)


def basic_nfa(label, namer=None):
    """
    Creates an NFA with a single transition on ``label`` from the start
    state to a final state.

    Args:
        label (object): The label of the transition.
        namer (StateNamer, optional): Source of state names. Defaults to a
            module-wide namer.

    Returns:
        NFA: The created NFA.
    """
    namer = namer or _namer
    nfa, s = _new_nfa(namer)
    e = namer()
    nfa.add_final_state(e)
    nfa.add_transition(s, label, e)
    return nfa


def charset_nfa(labels, namer=None):
    """
    Creates an NFA that accepts any one of the given symbols.
    """
    namer = namer or _namer
    nfa, s = _new_nfa(namer)
    e = namer()
    nfa.add_final_state(e)
    for label in labels:
        nfa.add_transition(s, label, e)
    return nfa


def string_nfa(string, namer=None):
    """
    Creates an NFA that accepts exactly the given sequence of symbols.

    Example:
        >>> nfa = string_nfa("abc")
        >>> nfa.accept("abc"), nfa.accept("ab")
        (True, False)
    """
    namer = namer or _namer
    nfa, s = _new_nfa(namer)
    for label in string:
        e = namer()
        nfa.add_state(e)
        nfa.add_transition(s, label, e)
        s = e
    nfa.add_final_state(s)
    return nfa


def choice_nfa(n1, n2, namer=None):
    """
    Creates an NFA that accepts the union of the languages of two NFAs.
    """
    namer = namer or _namer
    nfa, s = _new_nfa(namer)
    e = namer()
    #   -> nfa1 -
    #  /         \
    # s           e
    #  \         /
    #   -> nfa2 -
    nfa.insert(s, n1, e)
    nfa.insert(s, n2, e)
    nfa.add_final_state(e)
    return nfa


def concat_nfa(n1, n2, namer=None):
    """
    Creates an NFA that accepts a string of ``n1`` followed by a string of
    ``n2``.
    """
    namer = namer or _namer
    nfa, s = _new_nfa(namer)
    m = namer()
    e = namer()
    nfa.insert(s, n1, m)
    nfa.insert(m, n2, e)
    nfa.add_final_state(e)
    return nfa


def star_nfa(n, namer=None):
    r"""
    Creates an NFA that accepts zero or more repetitions of ``n``.

        -----<-----
       /           \
      s ---> n ---> e
       \           /
        ----->-----
    """
    namer = namer or _namer
    nfa, s = _new_nfa(namer)
    e = namer()
    nfa.insert(s, n, e)
    nfa.add_transition(s, EPSILON, e)
    for finalstate in n.get_final_states():
        nfa.add_transition(finalstate.name, EPSILON, s)
    nfa.add_final_state(e)
    return nfa


def plus_nfa(n, namer=None):
    """
    Creates an NFA that accepts one or more repetitions of ``n``.
    """
    return concat_nfa(n, star_nfa(n, namer), namer)


def optional_nfa(n, namer=None):
    """
    Creates an NFA that accepts ``n`` or the empty string.
    """
    return choice_nfa(n, epsilon_nfa(namer), namer)
