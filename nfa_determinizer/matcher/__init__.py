# nfa_determinizer/matcher/__init__.py

from .errors import AutomatonError, MalformedAutomatonError, EmptyAutomatonError
from .automata import EPSILON, NFA, epsilon_closure
from .dfa import DFA, DFABuilder, NO_TRANSITION, determinize

__all__ = [
    'AutomatonError',
    'MalformedAutomatonError',
    'EmptyAutomatonError',
    'EPSILON',
    'NFA',
    'epsilon_closure',
    'DFA',
    'DFABuilder',
    'NO_TRANSITION',
    'determinize',
]
