"""
utils.py

Helper utilities for the SugarOpt UCI loop.

Contains command tokenization, `setoption` parsing and the debug log that
mirrors engine I/O to a file.

Keep this file lightweight so main.py and other modules can import it freely.

Author: Kartik
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from constants import IO_LOGGER_NAME

io_logger = logging.getLogger(IO_LOGGER_NAME)

_log_handler: Optional[logging.FileHandler] = None


# --- command tokenization ----------------------------------------------------
def tokenize_command(line: str) -> List[str]:
    """Split a UCI command line on whitespace.

    Quotes are not special in UCI: option values such as Windows paths are
    passed through verbatim.
    """
    return line.split()


# --- setoption parsing ------------------------------------------------------
def parse_setoption(tokens: List[str]) -> Tuple[Optional[str], str]:
    """Parse tokens from a `setoption` command.

    Expected style: setoption name <NAME...> [value <VALUE...>]
    Both name and value may span several tokens. A missing value yields ""
    (buttons are sent without one). Returns (None, "") if no name is given.

    Example:
        parse_setoption('setoption name Clear Hash'.split())
        -> ('Clear Hash', '')
    """
    name_parts: List[str] = []
    value_parts: List[str] = []
    target = None
    for t in tokens[1:]:
        if target is None and t.lower() == "name":
            target = name_parts
            continue
        if target is name_parts and t.lower() == "value":
            target = value_parts
            continue
        if target is not None:
            target.append(t)
    if not name_parts:
        return None, ""
    return " ".join(name_parts), " ".join(value_parts)


# --- debug log ---------------------------------------------------------------
def start_logger(path: str) -> None:
    """Mirror engine I/O into `path`; an empty path stops logging."""
    global _log_handler

    if _log_handler is not None:
        io_logger.removeHandler(_log_handler)
        _log_handler.close()
        _log_handler = None

    if path:
        _log_handler = logging.FileHandler(path, mode="a", encoding="utf-8")
        _log_handler.setFormatter(logging.Formatter("%(message)s"))
        io_logger.addHandler(_log_handler)
        io_logger.setLevel(logging.DEBUG)
        io_logger.propagate = False


def log_input(line: str) -> None:
    io_logger.debug(">> %s", line)


def log_output(line: str) -> None:
    io_logger.debug("<< %s", line)


# Exports
__all__ = [
    "tokenize_command",
    "parse_setoption",
    "start_logger",
    "log_input",
    "log_output",
]
