# nfa_determinizer/parser/__init__.py

from .error_handler import ParseError
from .csv_parser import read_nfa_csv, parse_nfa_frame

__all__ = [
    'ParseError',
    'read_nfa_csv',
    'parse_nfa_frame',
]
