"""
Subset construction of deterministic finite automata.

Every DFA state stands for an epsilon-closed set of NFA states. States are
discovered breadth-first from the closure of the NFA start state and named
in discovery order (``S0``, ``S1``, ...), so for a fixed NFA and alphabet
order the names, their order and the transition table are reproducible.

The set-to-name mapping and the worklist are local to a single
``DFABuilder.build()`` call.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from nfa_determinizer.config.converter_config import DEFAULT_STATE_PREFIX
from nfa_determinizer.matcher.automata import (
    EPSILON, NFA, StateId, StateSet, Symbol, TransitionTable
)
from nfa_determinizer.matcher.errors import EmptyAutomatonError, describe_states
from nfa_determinizer.utils.logging_config import get_logger, PerformanceTimer

# Module logger
logger = get_logger(__name__)

# Marker stored in the transition table for a missing transition
NO_TRANSITION = None

DfaTable = Dict[str, Dict[Symbol, Optional[str]]]


@dataclass(frozen=True, eq=True)
class DFA:
    """
    Deterministic finite automaton produced by subset construction.

    Attributes:
        start: Name of the start state
        states: State names in discovery order
        alphabet: Input symbols in output order
        transitions: State name -> symbol -> destination name or ``NO_TRANSITION``
        finals: Names of final states
        state_sets: State name -> NFA states it represents
    """
    start: str
    states: List[str]
    alphabet: List[Symbol]
    transitions: DfaTable
    finals: FrozenSet[str]
    state_sets: Dict[str, StateSet] = field(default_factory=dict)

    # Holds lists and dicts, so instances compare by value but are not hashable
    __hash__ = None

    def is_final(self, name: str) -> bool:
        return name in self.finals

    def next_state(self, name: str, symbol: Symbol) -> Optional[str]:
        return self.transitions[name].get(symbol, NO_TRANSITION)

    def accepts(self, word: Iterable[Symbol]) -> bool:
        """Run the automaton over a sequence of symbols."""
        current: Optional[str] = self.start
        for symbol in word:
            current = self.next_state(current, symbol)
            if current is NO_TRANSITION:
                return False
        return self.is_final(current)

    def as_tuple(self) -> Tuple[DfaTable, List[str], Set[str]]:
        """Table, state list and final states as plain containers."""
        table = {name: dict(row) for name, row in self.transitions.items()}
        return table, list(self.states), set(self.finals)

    def get_debug_info(self) -> Dict[str, Any]:
        return {
            'states': len(self.states),
            'finals': len(self.finals),
            'alphabet': list(self.alphabet),
            'transitions': sum(
                1 for row in self.transitions.values()
                for target in row.values() if target is not NO_TRANSITION
            ),
            'state_sets': {name: describe_states(nfa_states)
                           for name, nfa_states in self.state_sets.items()},
        }


class DFABuilder:
    """
    Builds a DFA from an NFA with the subset construction.

    The builder keeps no state between ``build()`` calls apart from the
    statistics of the last run.
    """

    def __init__(self, nfa: NFA, state_prefix: str = DEFAULT_STATE_PREFIX):
        """
        Args:
            nfa: Source NFA
            state_prefix: Prefix of the generated DFA state names
        """
        if not isinstance(nfa, NFA):
            raise TypeError(f"Expected NFA instance, got {type(nfa)}")

        self.nfa = nfa
        self.state_prefix = state_prefix
        self.build_stats = {
            'states_created': 0,
            'transitions_created': 0,
            'dead_transitions': 0,
            'build_time': 0.0,
        }

        logger.debug(f"DFABuilder initialized for NFA with {len(nfa)} states")

    def build(self) -> DFA:
        """
        Run the subset construction.

        Returns:
            DFA: Deterministic automaton equivalent to the source NFA

        Raises:
            EmptyAutomatonError: If the NFA has no states
            MalformedAutomatonError: If a transition references an unknown state
        """
        if self.nfa.start is None:
            raise EmptyAutomatonError()

        self.build_stats = {key: 0 for key in self.build_stats}
        alphabet = list(self.nfa.alphabet)

        try:
            with PerformanceTimer("dfa_build") as timer:
                logger.info(f"Starting DFA construction from NFA with {len(self.nfa)} states "
                            f"over {len(alphabet)} symbols")

                state_map: Dict[StateSet, str] = {}
                states: List[str] = []
                finals: Set[str] = set()
                transitions: DfaTable = {}
                queue: Deque[StateSet] = deque()

                start_set = self.nfa.epsilon_closure([self.nfa.start])
                logger.debug(f"Start state epsilon closure: {describe_states(start_set)}")
                start_name = self._register(start_set, state_map, states, finals, queue)

                while queue:
                    current_set = queue.popleft()
                    current_name = state_map[current_set]
                    row: Dict[Symbol, Optional[str]] = {}

                    for symbol in alphabet:
                        target_set = self.nfa.epsilon_closure(self.nfa.move(current_set, symbol))

                        if not target_set:
                            row[symbol] = NO_TRANSITION
                            self.build_stats['dead_transitions'] += 1
                            continue

                        target_name = state_map.get(target_set)
                        if target_name is None:
                            target_name = self._register(target_set, state_map, states, finals, queue)
                        row[symbol] = target_name
                        self.build_stats['transitions_created'] += 1

                    transitions[current_name] = row
                    logger.debug(f"{current_name} = {describe_states(current_set)}: {row}")

        except Exception as e:
            logger.error(f"DFA construction failed: {e}")
            raise

        self.build_stats['build_time'] = timer.duration
        logger.info(f"DFA construction completed: {len(states)} states, "
                    f"{len(finals)} final, "
                    f"{self.build_stats['transitions_created']} transitions, "
                    f"{self.build_stats['build_time']:.3f}s")

        return DFA(
            start=start_name,
            states=states,
            alphabet=alphabet,
            transitions=transitions,
            finals=frozenset(finals),
            state_sets={name: nfa_states for nfa_states, name in state_map.items()},
        )

    def _register(self, nfa_states: StateSet, state_map: Dict[StateSet, str],
                  states: List[str], finals: Set[str], queue: Deque[StateSet]) -> str:
        """Name a newly discovered state set and schedule it for expansion."""
        name = f"{self.state_prefix}{len(states)}"
        state_map[nfa_states] = name
        states.append(name)
        if self.nfa.is_accepting(nfa_states):
            finals.add(name)
        queue.append(nfa_states)
        self.build_stats['states_created'] += 1
        return name

    def get_build_statistics(self) -> Dict[str, Any]:
        return dict(self.build_stats)


def determinize(transitions: TransitionTable, finals: Iterable[StateId],
                alphabet: Iterable[Symbol], start: Optional[StateId] = None,
                epsilon: Symbol = EPSILON,
                state_prefix: str = DEFAULT_STATE_PREFIX) -> Tuple[DfaTable, List[str], Set[str]]:
    """
    Convert an NFA given as plain containers into a DFA.

    Args:
        transitions: NFA transition table
        finals: NFA final states
        alphabet: Input symbols in output order, epsilon excluded
        start: Start state; the first state of ``transitions`` when omitted
        epsilon: Epsilon marker
        state_prefix: Prefix of the generated DFA state names

    Returns:
        Tuple of (DFA transition table, DFA state names in discovery order,
        DFA final state names)
    """
    nfa = NFA(transitions, finals, alphabet=alphabet, start=start, epsilon=epsilon)
    return DFABuilder(nfa, state_prefix=state_prefix).build().as_tuple()
