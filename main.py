"""
main.py

UCI main loop for SugarOpt. Reads commands from stdin and speaks UCI on stdout.

Author: Kartik
"""
from __future__ import annotations

import logging
import sys
from typing import List, TextIO

from constants import (
    CMD_HELP,
    CMD_ISREADY,
    CMD_NEWGAME,
    CMD_QUIT,
    CMD_READYOK,
    CMD_SETOPTION,
    CMD_UCI,
    CMD_UCIOK,
    ENGINE_AUTHOR,
    ENGINE_NAME,
)
from engine import SugarOptEngine
from options import AssignResult, OptionTypeError
from utils import log_input, log_output, parse_setoption, tokenize_command

logger = logging.getLogger(__name__)

HELP_TEXT = """
SugarOpt UCI commands:
  uci                                      - handshake and option list
  setoption name <name> [value <value>]    - set engine option
  isready                                  - check if engine is ready
  ucinewgame                               - clear search state
  quit / exit                              - exit engine
  help                                     - show this help text
"""


def send(text: str, out: TextIO = sys.stdout) -> None:
    for line in text.splitlines():
        log_output(line)
    print(text, file=out)
    out.flush()


def handle_uci(engine: SugarOptEngine, out: TextIO = sys.stdout) -> None:
    # option lines come newline-prefixed, so they follow the author line directly
    send(f"id name {ENGINE_NAME}\nid author {ENGINE_AUTHOR}{engine.option_lines()}\n{CMD_UCIOK}", out)


def handle_setoption(engine: SugarOptEngine, tokens: List[str], out: TextIO = sys.stdout) -> None:
    name, value = parse_setoption(tokens)
    if name is None:
        return
    result, msg = engine.set_option(name, value)
    if result is AssignResult.NOT_FOUND:
        send(msg, out)
    elif result is AssignResult.APPLIED:
        logger.debug(msg)


def run(engine: SugarOptEngine, inp: TextIO = sys.stdin, out: TextIO = sys.stdout) -> None:
    for raw in inp:
        line = raw.strip()
        if not line:
            continue
        log_input(line)
        tokens = tokenize_command(line)
        cmd = tokens[0].lower()
        try:
            if cmd == CMD_UCI:
                handle_uci(engine, out)
            elif cmd == CMD_SETOPTION:
                handle_setoption(engine, tokens, out)
            elif cmd == CMD_ISREADY:
                send(CMD_READYOK, out)
            elif cmd == CMD_NEWGAME:
                engine.new_game()
            elif cmd == CMD_HELP:
                send(HELP_TEXT.strip(), out)
            elif cmd in CMD_QUIT:
                break
            else:
                send(f"Unknown command: {tokens[0]}", out)
        except OptionTypeError:
            # wrong accessor for an option kind is a bug, not bad host input
            raise
        except Exception:
            logger.exception("Command failed: %s", line)
            continue


def main():
    logging.basicConfig(level=logging.WARNING, stream=sys.stderr)
    run(SugarOptEngine())


if __name__ == "__main__":
    main()
