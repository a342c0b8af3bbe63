"""
engine.py

SugarOpt engine glue: owns the OptionsMap and the subsystems its options
drive, and implements the on-change hooks the option catalog binds.

Responsibilities
- Build the option table once at startup
- Route `setoption` assignments and report their outcome
- Keep search, evaluation, hash table, thread pool and tablebases in step
  with option changes

Author: Kartik
"""
from __future__ import annotations

import logging
import os
from typing import Dict, List, Tuple

from catalog import eval_option_names, init_options
from constants import EMPTY_PATH, TB_WDL_SUFFIX, TT_ENTRY_BYTES
from options import AssignResult, Option, OptionsMap
from utils import start_logger

logger = logging.getLogger(__name__)


class Search:
    """Search state that survives between `go` commands."""

    def __init__(self) -> None:
        self.history: Dict[Tuple[int, int], int] = {}
        self.nodes = 0
        self.clears = 0

    def clear(self) -> None:
        self.history.clear()
        self.nodes = 0
        self.clears += 1


class Evaluation:
    """Evaluation weights, stored as percentages of the built-in values."""

    def __init__(self) -> None:
        self.weights: Dict[str, int] = {}

    def init(self, options: OptionsMap) -> None:
        self.weights = {name: options[name].as_int() for name in eval_option_names()}


class TranspositionTable:
    def __init__(self) -> None:
        self.size_mb = 0
        self.capacity = 0
        self.table: Dict[int, Tuple[int, int, int]] = {}

    def resize(self, mb: int) -> None:
        """Reallocate for `mb` megabytes of entries; the old content is lost."""
        self.size_mb = mb
        self.capacity = mb * 1024 * 1024 // TT_ENTRY_BYTES
        self.clear()

    def clear(self) -> None:
        self.table = {}


class ThreadPool:
    def __init__(self) -> None:
        self.size = 1

    def read_options(self, options: OptionsMap) -> None:
        requested = options["Threads"].as_int()
        if requested != self.size:
            logger.info("Thread pool resized from %d to %d", self.size, requested)
        self.size = requested


class Tablebases:
    """Syzygy tablebase discovery.

    `init` rescans the given directories (separated by os.pathsep) and records
    the tables found and the largest piece count they cover.
    """

    def __init__(self) -> None:
        self.paths: List[str] = []
        self.files: List[str] = []
        self.max_cardinality = 0

    def init(self, path: str) -> None:
        self.paths = []
        self.files = []
        self.max_cardinality = 0
        if not path or path == EMPTY_PATH:
            return

        self.paths = [p for p in path.split(os.pathsep) if p]
        for directory in self.paths:
            if not os.path.isdir(directory):
                logger.warning("Tablebase directory not found: %s", directory)
                continue
            for fname in sorted(os.listdir(directory)):
                if not fname.endswith(TB_WDL_SUFFIX):
                    continue
                self.files.append(os.path.join(directory, fname))
                pieces = sum(1 for c in fname[: -len(TB_WDL_SUFFIX)] if c.isalpha() and c != "v")
                self.max_cardinality = max(self.max_cardinality, pieces)
        logger.info("Found %d tablebases, up to %d pieces", len(self.files), self.max_cardinality)


class SugarOptEngine:
    def __init__(self) -> None:
        self.search = Search()
        self.evaluation = Evaluation()
        self.tt = TranspositionTable()
        self.threads = ThreadPool()
        self.tablebases = Tablebases()

        self.options = init_options(OptionsMap(), self)

        # bring every subsystem in line with the defaults
        self.evaluation.init(self.options)
        self.tt.resize(self.options["Hash"].as_int())
        self.threads.read_options(self.options)
        self.tablebases.init(self.options["SyzygyPath"].as_str())

    # ------------------ on-change hooks -----------------------------------
    def on_clear_hash(self, option: Option) -> None:
        self.search.clear()
        self.tt.clear()

    def on_eval(self, option: Option) -> None:
        self.evaluation.init(self.options)

    def on_hash_size(self, option: Option) -> None:
        self.tt.resize(option.as_int())

    def on_large_pages(self, option: Option) -> None:
        # page size only matters at allocation time, so reallocate
        self.tt.resize(self.options["Hash"].as_int())

    def on_logger(self, option: Option) -> None:
        start_logger(option.as_str())

    def on_threads(self, option: Option) -> None:
        self.threads.read_options(self.options)

    def on_tb_path(self, option: Option) -> None:
        self.tablebases.init(option.as_str())

    # ------------------ options / game lifecycle ---------------------------
    def set_option(self, name: str, value: str) -> Tuple[AssignResult, str]:
        """Assign an option and describe the outcome.

        Returns (result, message). The message is the host-facing text for
        NOT_FOUND; rejected values are ignored silently, as UCI expects.
        """
        result = self.options.set_option(name, value)
        if result is AssignResult.NOT_FOUND:
            return result, f"No such option: {name}"
        if result is AssignResult.APPLIED:
            return result, f'set "{name}" to {value}'
        return result, ""

    def new_game(self) -> None:
        self.search.clear()
        self.tt.clear()

    def option_lines(self) -> str:
        return str(self.options)


__all__ = [
    "Search",
    "Evaluation",
    "TranspositionTable",
    "ThreadPool",
    "Tablebases",
    "SugarOptEngine",
]
