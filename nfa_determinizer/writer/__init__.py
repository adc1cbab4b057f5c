# nfa_determinizer/writer/__init__.py

from .csv_writer import dfa_to_frame, format_dfa_csv, write_dfa_csv

__all__ = [
    'dfa_to_frame',
    'format_dfa_csv',
    'write_dfa_csv',
]
