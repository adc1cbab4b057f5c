#!/usr/bin/env python3
"""
Command line entry point: convert an NFA table file into a DFA table file.

Usage:
    nfa-determinizer [INPUT] [OUTPUT] [--start STATE] [--epsilon SYMBOL]
                     [--state-prefix PREFIX] [--delimiter CHAR]
                     [--log-level LEVEL] [--log-file PATH]
"""

import argparse
import sys
from typing import List, Optional

from nfa_determinizer.config.converter_config import ConverterConfig
from nfa_determinizer.executor.convert import convert_csv
from nfa_determinizer.matcher.errors import AutomatonError
from nfa_determinizer.parser.error_handler import ParseError
from nfa_determinizer.utils.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nfa-determinizer",
        description="Convert an NFA transition table (with epsilon-transitions) into a DFA table",
    )
    parser.add_argument("input", nargs="?", default="input.csv", help="NFA table to read (default: input.csv)")
    parser.add_argument("output", nargs="?", default="out.csv", help="DFA table to write (default: out.csv)")
    parser.add_argument("--start", help="NFA start state (default: first declared state)")
    parser.add_argument("--epsilon", help="Symbol used for epsilon-transitions")
    parser.add_argument("--state-prefix", help="Prefix for generated DFA state names")
    parser.add_argument("--delimiter", help="Cell delimiter of both tables")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        type=str.upper, help="Logging level")
    parser.add_argument("--log-file", help="Also write logs to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        config = ConverterConfig.from_env().with_overrides(
            epsilon=args.epsilon,
            state_prefix=args.state_prefix,
            delimiter=args.delimiter,
            log_level=args.log_level,
            log_file=args.log_file,
        )
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    setup_logging(log_level=config.log_level, log_file=config.log_file)

    try:
        dfa = convert_csv(args.input, args.output, config, start=args.start)
    except (ParseError, AutomatonError) as e:
        logger.error(f"Cannot convert {args.input}: {e}")
        return 1
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Cannot write {args.output}: {e}")
        return 1

    print(f"Wrote DFA with {len(dfa.states)} states ({len(dfa.finals)} final) to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
