# nfa_determinizer/__init__.py

from .config import ConverterConfig
from .matcher import (
    AutomatonError, MalformedAutomatonError, EmptyAutomatonError,
    EPSILON, NFA, epsilon_closure, DFA, DFABuilder, NO_TRANSITION, determinize,
)
from .parser import ParseError, read_nfa_csv, parse_nfa_frame
from .writer import dfa_to_frame, format_dfa_csv, write_dfa_csv
from .executor import convert_csv

__version__ = "0.1.0"

__all__ = [
    'ConverterConfig',
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
    'ParseError',
    'read_nfa_csv',
    'parse_nfa_frame',
    'dfa_to_frame',
    'format_dfa_csv',
    'write_dfa_csv',
    'convert_csv',
]
