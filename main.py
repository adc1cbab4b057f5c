"""
Main Application (main.py):
Coordinates all the steps:

Reads the NFA transition table (input.csv by default),
Builds the epsilon-closed subset construction,
Writes the DFA transition table (out.csv by default).

Example:
    python main.py NFAin.csv DFAout.csv --start q0
"""

import sys

from nfa_determinizer.cli import main

if __name__ == "__main__":
    sys.exit(main())
