"""
Tests for reading NFA tables and writing DFA tables.
"""

import io

import pandas as pd
import pytest

from nfa_determinizer.config.converter_config import ConverterConfig
from nfa_determinizer.matcher.automata import NFA
from nfa_determinizer.matcher.dfa import DFABuilder
from nfa_determinizer.parser.csv_parser import parse_nfa_frame, read_nfa_csv
from nfa_determinizer.parser.error_handler import ParseError
from nfa_determinizer.writer.csv_writer import dfa_to_frame, format_dfa_csv, write_dfa_csv


class TestCsvParser:
    """NFA table parsing."""

    def test_parse_sample(self, nfa_csv_text):
        nfa = read_nfa_csv(io.StringIO(nfa_csv_text))

        assert nfa.states == ['q0', 'q1', 'q2']
        assert nfa.start == 'q0'
        assert nfa.finals == frozenset({'q2'})
        assert nfa.alphabet == ['a', 'b']
        assert nfa.transitions['q0'] == {
            'a': frozenset({'q0', 'q1'}),
            'b': frozenset(),
            'ε': frozenset({'q1'}),
        }
        assert nfa.transitions['q1']['b'] == frozenset({'q2'})
        assert nfa.transitions['q2'] == {'a': frozenset(), 'b': frozenset(), 'ε': frozenset()}

    def test_read_from_path_with_bom(self, tmp_path, nfa_csv_text):
        path = tmp_path / "nfa.csv"
        path.write_text(nfa_csv_text, encoding="utf-8-sig")

        nfa = read_nfa_csv(path)
        assert nfa.states == ['q0', 'q1', 'q2']
        assert nfa.finals == frozenset({'q2'})

    def test_whitespace_and_lowercase_marker(self):
        text = "; ; f \n; q0 ; q1 \na; q0 , q1 ; \n"
        nfa = read_nfa_csv(io.StringIO(text))
        assert nfa.states == ['q0', 'q1']
        assert nfa.finals == frozenset({'q1'})
        assert nfa.transitions['q0']['a'] == frozenset({'q0', 'q1'})

    def test_trailing_delimiters_and_blank_lines(self):
        text = ";F;;;\n;q0;q1;;\n\na;q1;;;\n;;;;\nb;;q0;;\n\n"
        nfa = read_nfa_csv(io.StringIO(text))
        assert nfa.states == ['q0', 'q1']
        assert nfa.alphabet == ['a', 'b']
        assert nfa.transitions['q1']['b'] == frozenset({'q0'})

    def test_short_rows_are_padded(self):
        text = ";;F\n;q0;q1\na;q1\n"
        nfa = read_nfa_csv(io.StringIO(text))
        assert nfa.transitions['q0']['a'] == frozenset({'q1'})
        assert nfa.transitions['q1']['a'] == frozenset()

    def test_repeated_symbol_rows_are_merged(self):
        text = ";;F\n;q0;q1\na;q0;\nb;;q1\na;q1;\n"
        nfa = read_nfa_csv(io.StringIO(text))
        assert nfa.alphabet == ['a', 'b']
        assert nfa.transitions['q0']['a'] == frozenset({'q0', 'q1'})

    def test_no_final_states(self):
        text = ";;\n;q0;q1\na;q1;\n"
        nfa = read_nfa_csv(io.StringIO(text))
        assert nfa.finals == frozenset()

    def test_explicit_start(self, nfa_csv_text):
        nfa = read_nfa_csv(io.StringIO(nfa_csv_text), start='q1')
        assert nfa.start == 'q1'

    def test_custom_epsilon_and_delimiter(self):
        config = ConverterConfig(epsilon='eps', delimiter='|', target_separator=' ')
        text = "||F\n|q0|q1\neps|q1|\nx|q0 q1|\n"
        nfa = read_nfa_csv(io.StringIO(text), config)
        assert nfa.alphabet == ['x']
        assert nfa.epsilon_closure({'q0'}) == frozenset({'q0', 'q1'})
        assert nfa.transitions['q0']['x'] == frozenset({'q0', 'q1'})

    def test_parse_frame_directly(self):
        frame = pd.DataFrame([
            ['', 'F', None],
            ['', 'q0', 'q1'],
            ['a', 'q1', ''],
        ])
        nfa = parse_nfa_frame(frame)
        assert nfa.finals == frozenset({'q0'})
        assert nfa.transitions['q0']['a'] == frozenset({'q1'})

    def test_header_only_gives_empty_alphabet(self):
        nfa = read_nfa_csv(io.StringIO(";F\n;q0\n"))
        assert nfa.alphabet == []
        assert nfa.states == ['q0']

    @pytest.mark.parametrize("text,row,column", [
        ("", 1, 1),
        ("   \n\n", 1, 1),
        (";F;\n", 2, 1),
        (";;F\n;;q1\na;;q1\n", 2, 2),
        (";;F\n;q0;q1\n;q1;\n", 3, 1),
    ])
    def test_parse_errors(self, text, row, column):
        with pytest.raises(ParseError) as excinfo:
            read_nfa_csv(io.StringIO(text))
        assert excinfo.value.row == row
        assert excinfo.value.column == column

    def test_quote_characters_are_ordinary_text(self):
        text = ';;F\n;"q0;q1"\n"a;q1";\n'
        nfa = read_nfa_csv(io.StringIO(text))

        assert nfa.states == ['"q0', 'q1"']
        assert nfa.alphabet == ['"a']
        assert nfa.finals == frozenset({'q1"'})
        assert nfa.transitions['"q0']['"a'] == frozenset({'q1"'})

        written = format_dfa_csv(DFABuilder(nfa).build())
        assert written == ';;F\n;S0;S1\n"a;S1;\n'
        assert read_nfa_csv(io.StringIO(written)).alphabet == ['"a']

    def test_unbalanced_quote_in_symbol(self):
        nfa = read_nfa_csv(io.StringIO(';F\n;q0\n"x;q0\n'))
        assert nfa.alphabet == ['"x']
        assert nfa.transitions['q0']['"x'] == frozenset({'q0'})

    def test_pandas_failure_reports_first_cell(self, monkeypatch):
        def fail(*args, **kwargs):
            raise pd.errors.ParserError("Error tokenizing data")

        monkeypatch.setattr("nfa_determinizer.parser.csv_parser.pd.read_csv", fail)
        with pytest.raises(ParseError) as excinfo:
            read_nfa_csv(io.StringIO(";F\n;q0\n"))
        assert (excinfo.value.row, excinfo.value.column) == (1, 1)
        assert "Malformed table" in str(excinfo.value)


class TestCsvWriter:
    """DFA table rendering."""

    def test_format_self_loop(self, self_loop_nfa):
        dfa = DFABuilder(NFA(*self_loop_nfa)).build()
        assert format_dfa_csv(dfa) == ";;F\n;S0;S1\na;S1;S1\n"

    def test_no_transition_is_an_empty_cell(self, dead_transition_nfa):
        dfa = DFABuilder(NFA(*dead_transition_nfa)).build()
        assert format_dfa_csv(dfa) == ";;F\n;S0;S1\na;;\nb;S1;\n"

    def test_empty_alphabet(self, epsilon_only_nfa):
        dfa = DFABuilder(NFA(*epsilon_only_nfa)).build()
        assert format_dfa_csv(dfa) == ";F\n;S0\n"

    def test_frame_layout(self, thompson_abb_nfa):
        dfa = DFABuilder(NFA(*thompson_abb_nfa)).build()
        frame = dfa_to_frame(dfa)

        assert frame.shape == (4, 6)
        assert frame.iloc[0].tolist() == ['', '', '', '', '', 'F']
        assert frame.iloc[1].tolist() == ['', 'S0', 'S1', 'S2', 'S3', 'S4']
        assert frame.iloc[2].tolist() == ['a', 'S1', 'S1', 'S1', 'S1', 'S1']
        assert frame.iloc[3].tolist() == ['b', 'S2', 'S3', 'S2', 'S4', 'S2']

    def test_custom_marker_and_delimiter(self, self_loop_nfa):
        dfa = DFABuilder(NFA(*self_loop_nfa)).build()
        config = ConverterConfig(delimiter=',', target_separator=' ', final_marker='*')
        assert format_dfa_csv(dfa, config) == ",,*\n,S0,S1\na,S1,S1\n"

    def test_write_to_path(self, tmp_path, abb_nfa):
        dfa = DFABuilder(NFA(*abb_nfa)).build()
        path = tmp_path / "dfa.csv"
        write_dfa_csv(dfa, path)

        assert path.read_text(encoding="utf-8") == (
            ";;;;F\n"
            ";S0;S1;S2;S3\n"
            "a;S1;S1;S1;S1\n"
            "b;S0;S2;S3;S0\n"
        )

    def test_written_dfa_is_a_fixed_point(self, nfa_csv_text):
        dfa = DFABuilder(read_nfa_csv(io.StringIO(nfa_csv_text))).build()
        text = format_dfa_csv(dfa)

        again = DFABuilder(read_nfa_csv(io.StringIO(text))).build()
        assert format_dfa_csv(again) == text

    def test_quotes_are_written_verbatim(self):
        dfa = DFABuilder(NFA({'q0': {'say "hi"': {'q0'}}}, {'q0'})).build()
        assert format_dfa_csv(dfa) == ';F\n;S0\nsay "hi";S0\n'

    def test_cell_with_delimiter_is_rejected(self, tmp_path):
        dfa = DFABuilder(NFA({'q0': {'a;b': {'q0'}}}, {'q0'})).build()
        with pytest.raises(ValueError, match="delimiter"):
            format_dfa_csv(dfa)

        path = tmp_path / "dfa.csv"
        with pytest.raises(ValueError):
            write_dfa_csv(dfa, path)
        assert not path.exists()

    def test_cell_with_line_break_is_rejected(self):
        dfa = DFABuilder(NFA({'q0': {'a\nb': {'q0'}}}, {'q0'})).build()
        with pytest.raises(ValueError, match="line break"):
            format_dfa_csv(dfa)
