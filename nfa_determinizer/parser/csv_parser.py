"""
Reader for NFA transition tables stored as delimited text.

Layout (``;`` delimited by default)::

    ;  ;F ;          <- final marker above every final state
    ;q0;q1;          <- state names
    a;q0,q1;         <- symbol, then comma separated targets per state
    ε;q1;            <- epsilon-transitions use the epsilon marker

The first declared state is the start state unless one is given explicitly.
Cells are split on the delimiter only; quote characters are ordinary text.
"""

import csv
import io
import os
from typing import List, Optional, Set, Dict, TextIO, Union

import pandas as pd

from nfa_determinizer.config.converter_config import ConverterConfig
from nfa_determinizer.matcher.automata import NFA
from nfa_determinizer.parser.error_handler import ParseError
from nfa_determinizer.utils.logging_config import get_logger

# Module logger
logger = get_logger(__name__)

Source = Union[str, os.PathLike, TextIO]


def read_nfa_csv(source: Source, config: Optional[ConverterConfig] = None,
                 start: Optional[str] = None) -> NFA:
    """
    Read an NFA from a file path or an open text buffer.

    Args:
        source: Path or readable text buffer
        config: Converter configuration; defaults are used when omitted
        start: Explicit start state

    Returns:
        NFA: Parsed automaton

    Raises:
        ParseError: If the table layout is invalid
        OSError: If the file cannot be read
    """
    config = config or ConverterConfig()

    if hasattr(source, "read"):
        text = source.read()
        name = getattr(source, "name", "<buffer>")
    else:
        with open(source, encoding=config.input_encoding) as handle:
            text = handle.read()
        name = os.fspath(source)

    logger.debug(f"Reading NFA table from {name}")
    return parse_nfa_frame(_load_frame(text, config), config, start=start)


def _load_frame(text: str, config: ConverterConfig) -> pd.DataFrame:
    """Load raw text into an all-string frame, one row per input line."""
    # A byte order mark can survive when a buffer is passed instead of a path
    text = text.lstrip("\ufeff")
    if not text.strip():
        raise ParseError("Input is empty", row=1, column=1)

    # Rows may be ragged, so size the frame by the widest line
    width = max(line.count(config.delimiter) for line in text.splitlines()) + 1

    try:
        frame = pd.read_csv(
            io.StringIO(text),
            sep=config.delimiter,
            header=None,
            names=list(range(width)),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=False,
            quoting=csv.QUOTE_NONE,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise ParseError(f"Malformed table: {e}", row=1, column=1) from e

    return frame


def parse_nfa_frame(frame: pd.DataFrame, config: Optional[ConverterConfig] = None,
                    start: Optional[str] = None) -> NFA:
    """
    Convert a loaded table into an NFA.

    Row ``i`` of ``frame`` is reported as row ``i + 1`` in errors.

    Args:
        frame: Table with the final markers in row 0, state names in row 1
            and one row per symbol after that
        config: Converter configuration
        start: Explicit start state

    Returns:
        NFA: Parsed automaton

    Raises:
        ParseError: If the layout is invalid
    """
    config = config or ConverterConfig()
    frame = frame.fillna("").astype(str).apply(lambda column: column.str.strip())
    frame = _drop_trailing_blank_columns(frame)

    if len(frame) < 2:
        raise ParseError("Expected a final-marker row and a state-name row", row=len(frame) + 1, column=1)

    flags: List[str] = frame.iloc[0, 1:].tolist()
    names: List[str] = frame.iloc[1, 1:].tolist()

    for column, name in enumerate(names, start=2):
        if not name:
            raise ParseError("Missing state name", row=2, column=column)

    marker = config.final_marker.upper()
    finals: Set[str] = {name for flag, name in zip(flags, names) if flag.upper() == marker}

    transitions: Dict[str, Dict[str, Set[str]]] = {name: {} for name in names}
    alphabet: List[str] = []

    for row_number, cells in enumerate(frame.iloc[2:].itertuples(index=False, name=None), start=3):
        if not any(cells):
            continue

        symbol = cells[0]
        if not symbol:
            raise ParseError("Missing symbol for transition row", row=row_number, column=1)
        if symbol != config.epsilon and symbol not in alphabet:
            alphabet.append(symbol)

        for name, cell in zip(names, cells[1:]):
            targets = transitions[name].setdefault(symbol, set())
            targets.update(
                target.strip() for target in cell.split(config.target_separator) if target.strip()
            )

    logger.info(f"Parsed NFA: {len(transitions)} states, {len(alphabet)} symbols, "
                f"{len(finals)} final states")

    return NFA(transitions, finals, alphabet=alphabet, start=start, epsilon=config.epsilon)


def _drop_trailing_blank_columns(frame: pd.DataFrame) -> pd.DataFrame:
    width = frame.shape[1]
    while width > 1 and (frame.iloc[:, width - 1] == "").all():
        width -= 1
    return frame.iloc[:, :width]
