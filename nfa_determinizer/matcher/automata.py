"""
Nondeterministic finite automata with epsilon-transitions.

This module holds the NFA model consumed by the subset construction in
``nfa_determinizer.matcher.dfa`` together with the epsilon-closure
computation it relies on.

The transition table maps every state to a map from symbol to the set of
destination states. The epsilon marker is an ordinary key of that inner map
and is never part of the alphabet.
"""

from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Set

from nfa_determinizer.config.converter_config import DEFAULT_EPSILON
from nfa_determinizer.matcher.errors import (
    EmptyAutomatonError, MalformedAutomatonError, describe_states
)
from nfa_determinizer.utils.logging_config import get_logger

# Module logger
logger = get_logger(__name__)

EPSILON = DEFAULT_EPSILON

# Type aliases for better readability
StateId = str
Symbol = str
StateSet = FrozenSet[StateId]
TransitionTable = Mapping[StateId, Mapping[Symbol, Iterable[StateId]]]


def epsilon_closure(states: Iterable[StateId], transitions: TransitionTable,
                    epsilon: Symbol = EPSILON) -> StateSet:
    """
    Compute the epsilon closure of a set of states.

    The result contains the input states and every state reachable from them
    through epsilon-transitions only. Cycles of epsilon-transitions are
    handled because a state is pushed at most once.

    Args:
        states: States to close over; may be empty
        transitions: NFA transition table
        epsilon: Symbol used for epsilon-transitions

    Returns:
        FrozenSet of state identifiers in the closure

    Raises:
        MalformedAutomatonError: If an input or reached state is not in the table
    """
    closure: Set[StateId] = set(states)
    for state in closure:
        if state not in transitions:
            raise MalformedAutomatonError(state)

    stack: List[StateId] = list(closure)
    while stack:
        current = stack.pop()
        for target in transitions[current].get(epsilon, ()):
            if target in closure:
                continue
            if target not in transitions:
                raise MalformedAutomatonError(target, source=current, symbol=epsilon)
            closure.add(target)
            stack.append(target)

    return frozenset(closure)


class NFA:
    """
    Nondeterministic finite automaton over string states and symbols.

    Attributes:
        transitions: State -> symbol -> frozenset of destination states
        finals: Final (accepting) states
        alphabet: Input symbols in first-seen order, epsilon excluded
        start: Designated start state, ``None`` only for an empty table
        epsilon: Marker used for epsilon-transitions

    The table is copied on construction and is not modified afterwards.
    """

    def __init__(self, transitions: TransitionTable, finals: Iterable[StateId] = (),
                 alphabet: Optional[Iterable[Symbol]] = None,
                 start: Optional[StateId] = None, epsilon: Symbol = EPSILON):
        """
        Args:
            transitions: NFA transition table
            finals: Final states
            alphabet: Alphabet in output order; derived from the table in
                first-seen order when omitted
            start: Start state; defaults to the first state of the table
            epsilon: Epsilon marker

        Raises:
            EmptyAutomatonError: If a start state is given for a table with no states
            MalformedAutomatonError: If an explicit start state is not in the table
        """
        self.epsilon = epsilon
        self.transitions: Dict[StateId, Dict[Symbol, StateSet]] = {
            state: {symbol: frozenset(targets) for symbol, targets in moves.items()}
            for state, moves in transitions.items()
        }
        self.finals: FrozenSet[StateId] = frozenset(finals)

        if alphabet is None:
            alphabet = self._collect_alphabet()
        self.alphabet: List[Symbol] = []
        for symbol in alphabet:
            if symbol != epsilon and symbol not in self.alphabet:
                self.alphabet.append(symbol)

        if start is None:
            start = next(iter(self.transitions), None)
        elif not self.transitions:
            raise EmptyAutomatonError()
        elif start not in self.transitions:
            raise MalformedAutomatonError(start)
        self.start: Optional[StateId] = start

        logger.debug(f"NFA created: {len(self.transitions)} states, "
                     f"alphabet={self.alphabet}, start={self.start!r}, "
                     f"finals={describe_states(self.finals)}")

    def _collect_alphabet(self) -> List[Symbol]:
        seen: List[Symbol] = []
        for moves in self.transitions.values():
            for symbol in moves:
                if symbol != self.epsilon and symbol not in seen:
                    seen.append(symbol)
        return seen

    @property
    def states(self) -> List[StateId]:
        """States in declaration order."""
        return list(self.transitions)

    def epsilon_closure(self, states: Iterable[StateId]) -> StateSet:
        """Epsilon closure of ``states`` within this automaton."""
        return epsilon_closure(states, self.transitions, self.epsilon)

    def move(self, states: Iterable[StateId], symbol: Symbol) -> StateSet:
        """
        Union of the destinations of ``states`` on ``symbol``, without closure.

        Raises:
            MalformedAutomatonError: If a state or a destination is unknown
        """
        targets: Set[StateId] = set()
        for state in states:
            if state not in self.transitions:
                raise MalformedAutomatonError(state)
            for target in self.transitions[state].get(symbol, ()):
                if target not in self.transitions:
                    raise MalformedAutomatonError(target, source=state, symbol=symbol)
                targets.add(target)
        return frozenset(targets)

    def is_accepting(self, states: Iterable[StateId]) -> bool:
        return not self.finals.isdisjoint(states)

    def accepts(self, word: Iterable[Symbol]) -> bool:
        """
        Check whether the automaton accepts a sequence of symbols.

        Symbols outside the alphabet reject the word.
        """
        if self.start is None:
            return False
        current = self.epsilon_closure([self.start])
        for symbol in word:
            if symbol not in self.alphabet:
                return False
            current = self.epsilon_closure(self.move(current, symbol))
            if not current:
                return False
        return self.is_accepting(current)

    def __len__(self) -> int:
        return len(self.transitions)

    def __repr__(self) -> str:
        return (f"NFA(states={len(self.transitions)}, alphabet={self.alphabet}, "
                f"start={self.start!r}, finals={describe_states(self.finals)})")
