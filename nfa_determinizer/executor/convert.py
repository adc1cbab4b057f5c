# nfa_determinizer/executor/convert.py

from typing import Optional

from nfa_determinizer.config.converter_config import ConverterConfig
from nfa_determinizer.matcher.dfa import DFA, DFABuilder
from nfa_determinizer.parser.csv_parser import Source, read_nfa_csv
from nfa_determinizer.utils.logging_config import get_logger, PerformanceTimer
from nfa_determinizer.writer.csv_writer import Target, write_dfa_csv

# Module logger
logger = get_logger(__name__)


def convert_csv(source: Source, target: Target, config: Optional[ConverterConfig] = None,
                start: Optional[str] = None) -> DFA:
    """
    Read an NFA table, determinize it and write the DFA table.

    Args:
        source: Input path or readable text buffer
        target: Output path or writable text buffer
        config: Converter configuration
        start: Explicit NFA start state; the first declared state otherwise

    Returns:
        DFA: The automaton that was written

    Raises:
        ParseError: If the input table is malformed
        AutomatonError: If the automaton cannot be determinized
        OSError: If a file cannot be read or written
    """
    config = config or ConverterConfig()

    with PerformanceTimer("convert_csv"):
        nfa = read_nfa_csv(source, config, start=start)
        logger.info(f"Determinizing {nfa!r}")

        dfa = DFABuilder(nfa, state_prefix=config.state_prefix).build()
        write_dfa_csv(dfa, target, config)

    logger.info(f"Converted NFA with {len(nfa)} states into DFA with {len(dfa.states)} states")
    return dfa
