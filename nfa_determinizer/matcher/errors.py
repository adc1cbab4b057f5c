# nfa_determinizer/matcher/errors.py

from typing import Iterable, Optional


class AutomatonError(ValueError):
    """Base class for automata that cannot be determinized."""


class MalformedAutomatonError(AutomatonError):
    """
    Raised when the transition table references a state it does not define.

    Attributes:
        state: The unknown state identifier
        source: State whose transition referenced it, if known
    """
    def __init__(self, state: str, source: Optional[str] = None, symbol: Optional[str] = None):
        self.state = state
        self.source = source
        self.symbol = symbol
        if source is not None:
            message = f"State {source!r} has a transition on {symbol!r} to unknown state {state!r}"
        else:
            message = f"Unknown state {state!r} is not defined in the transition table"
        super().__init__(message)


class EmptyAutomatonError(AutomatonError):
    """Raised when there are no states to build a start state from."""
    def __init__(self, message: str = "Automaton has no states to determinize"):
        super().__init__(message)


def describe_states(states: Iterable[str]) -> str:
    """Render a state set in sorted order for log and error messages."""
    return "{" + ", ".join(sorted(states)) + "}"
