"""
Pytest fixtures for the nfa_determinizer tests.
"""

import pytest


def complete_table(moves, states, symbols):
    """Give every state an entry for every symbol, like the CSV parser does."""
    return {
        state: {symbol: set(moves.get(state, {}).get(symbol, ())) for symbol in symbols}
        for state in states
    }


@pytest.fixture
def self_loop_nfa():
    """q0 --a--> {q0, q1}, q1 final, no epsilon-transitions."""
    transitions = {
        'q0': {'a': {'q0', 'q1'}},
        'q1': {'a': set()},
    }
    return transitions, {'q1'}, ['a']


@pytest.fixture
def epsilon_only_nfa():
    """q0 --ε--> q1, q1 final, empty alphabet."""
    transitions = {
        'q0': {'ε': {'q1'}},
        'q1': {'ε': set()},
    }
    return transitions, {'q1'}, []


@pytest.fixture
def dead_transition_nfa():
    """q0 has no targets on 'a'; only 'b' leads anywhere."""
    transitions = {
        'q0': {'a': set(), 'b': {'q1'}},
        'q1': {'a': set(), 'b': set()},
    }
    return transitions, {'q1'}, ['a', 'b']


@pytest.fixture
def converging_nfa():
    """q1 and q2 are reached independently but lead to the same closure {q3, q4}."""
    transitions = complete_table(
        {
            'q0': {'a': {'q1'}, 'b': {'q2'}},
            'q1': {'a': {'q3'}},
            'q2': {'b': {'q4'}},
            'q3': {'ε': {'q4'}},
            'q4': {'ε': {'q3'}},
        },
        ['q0', 'q1', 'q2', 'q3', 'q4'],
        ['a', 'b', 'ε'],
    )
    return transitions, {'q4'}, ['a', 'b']


@pytest.fixture
def abb_nfa():
    """Plain NFA for (a|b)*abb."""
    transitions = complete_table(
        {
            'q0': {'a': {'q0', 'q1'}, 'b': {'q0'}},
            'q1': {'b': {'q2'}},
            'q2': {'b': {'q3'}},
        },
        ['q0', 'q1', 'q2', 'q3'],
        ['a', 'b'],
    )
    return transitions, {'q3'}, ['a', 'b']


@pytest.fixture
def thompson_abb_nfa():
    """Thompson construction of (a|b)*abb with states '0' to '10'."""
    transitions = complete_table(
        {
            '0': {'ε': {'1', '7'}},
            '1': {'ε': {'2', '4'}},
            '2': {'a': {'3'}},
            '3': {'ε': {'6'}},
            '4': {'b': {'5'}},
            '5': {'ε': {'6'}},
            '6': {'ε': {'1', '7'}},
            '7': {'a': {'8'}},
            '8': {'b': {'9'}},
            '9': {'b': {'10'}},
        },
        [str(i) for i in range(11)],
        ['a', 'b', 'ε'],
    )
    return transitions, {'10'}, ['a', 'b']


@pytest.fixture
def nfa_csv_text():
    """Table layout read by the CSV parser: finals row, states row, symbol rows."""
    return (
        ";;;F\n"
        ";q0;q1;q2\n"
        "a;q0,q1;;\n"
        "b;;q2;\n"
        "ε;q1;;\n"
    )
