# nfa_determinizer/executor/__init__.py

from .convert import convert_csv

__all__ = ['convert_csv']
