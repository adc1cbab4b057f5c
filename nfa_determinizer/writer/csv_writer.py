"""
Writer for DFA transition tables in the same delimited layout the parser reads.

Row 0 carries the final marker above each final state, row 1 the DFA state
names in discovery order, and every following row one alphabet symbol with
the destination of each state. A missing transition is an empty cell.

Cells are written verbatim with no quoting, matching the reader. A state
name or symbol that contains the delimiter or a line break cannot be
represented and is rejected.
"""

import os
from typing import List, Optional, TextIO, Union

import pandas as pd

from nfa_determinizer.config.converter_config import ConverterConfig
from nfa_determinizer.matcher.dfa import DFA, NO_TRANSITION
from nfa_determinizer.utils.logging_config import get_logger

# Module logger
logger = get_logger(__name__)

Target = Union[str, os.PathLike, TextIO]


def dfa_to_frame(dfa: DFA, config: Optional[ConverterConfig] = None) -> pd.DataFrame:
    """Lay out a DFA as an all-string table ready to be written."""
    config = config or ConverterConfig()

    rows: List[List[str]] = [
        [""] + [config.final_marker if dfa.is_final(name) else "" for name in dfa.states],
        [""] + list(dfa.states),
    ]
    for symbol in dfa.alphabet:
        row = [symbol]
        for name in dfa.states:
            target = dfa.transitions[name].get(symbol, NO_TRANSITION)
            row.append("" if target is NO_TRANSITION else target)
        rows.append(row)

    return pd.DataFrame(rows, dtype=str)


def format_dfa_csv(dfa: DFA, config: Optional[ConverterConfig] = None) -> str:
    """
    Render a DFA table as text.

    Raises:
        ValueError: If a cell contains the delimiter or a line break
    """
    config = config or ConverterConfig()
    frame = dfa_to_frame(dfa, config)

    unsafe = frame.apply(
        lambda column: column.str.contains(config.delimiter, regex=False)
        | column.str.contains(r"[\r\n]", regex=True)
    )
    if unsafe.to_numpy().any():
        row, column = next(zip(*unsafe.to_numpy().nonzero()))
        raise ValueError(
            f"Cell {frame.iat[row, column]!r} at row {row + 1}, column {column + 1} "
            f"contains the delimiter {config.delimiter!r} or a line break"
        )

    lines = frame.apply(lambda cells: config.delimiter.join(cells), axis=1)
    return "".join(f"{line}\n" for line in lines)


def write_dfa_csv(dfa: DFA, target: Target, config: Optional[ConverterConfig] = None) -> None:
    """
    Write a DFA table to a file path or an open text buffer.

    Args:
        dfa: Automaton to write
        target: Path or writable text buffer
        config: Converter configuration

    Raises:
        ValueError: If a cell contains the delimiter or a line break
        OSError: If the file cannot be written
    """
    config = config or ConverterConfig()
    text = format_dfa_csv(dfa, config)

    if hasattr(target, "write"):
        target.write(text)
    else:
        with open(target, "w", encoding=config.output_encoding, newline="") as handle:
            handle.write(text)

    logger.debug(f"Wrote DFA table with {len(dfa.states)} states and {len(dfa.alphabet)} symbols")
