"""
catalog.py

The engine's fixed UCI option table. `init_options` fills a fresh
OptionsMap with every option, in the order the GUI will list them, and
binds the on-change hooks supplied by the caller (normally the Engine).
"""
from __future__ import annotations

import os
import sys
from typing import Protocol

from constants import (
    DEFAULT_HASH_MB,
    EMPTY_PATH,
    EVAL_TERMS,
    EVAL_WEIGHT_DEFAULT,
    EVAL_WEIGHT_MAX,
    MAX_HASH_MB_32,
    MAX_HASH_MB_64,
    MAX_THREADS,
)
from options import Option, OptionsMap


class OptionHooks(Protocol):
    def on_clear_hash(self, option: Option) -> None: ...
    def on_eval(self, option: Option) -> None: ...
    def on_hash_size(self, option: Option) -> None: ...
    def on_large_pages(self, option: Option) -> None: ...
    def on_logger(self, option: Option) -> None: ...
    def on_threads(self, option: Option) -> None: ...
    def on_tb_path(self, option: Option) -> None: ...


def is_64bit() -> bool:
    return sys.maxsize > 2**32


def max_hash_mb() -> int:
    return MAX_HASH_MB_64 if is_64bit() else MAX_HASH_MB_32


def default_threads() -> int:
    """Number of hardware threads, or 1 when the platform can't tell, capped at MAX_THREADS."""
    return min(os.cpu_count() or 1, MAX_THREADS)


def eval_option_names():
    """Names of the evaluation weight options, in table order."""
    names = [f"{term}({phase})" for term in EVAL_TERMS for phase in ("mg", "eg")]
    names.append("Space")
    return names


def init_options(o: OptionsMap, hooks: OptionHooks) -> OptionsMap:
    """Register the hard-coded option table into `o` and return it."""
    o.register("Tactical Mode", Option.check(False))
    o.register("Debug Log File", Option.string("", hooks.on_logger))
    o.register("Contempt", Option.spin(0, -100, 100))
    o.register("Threads", Option.spin(default_threads(), 1, MAX_THREADS, hooks.on_threads))
    o.register("Hash", Option.spin(DEFAULT_HASH_MB, 1, max_hash_mb(), hooks.on_hash_size))
    o.register("Clear Hash", Option.button(hooks.on_clear_hash))
    o.register("Ponder", Option.check(False))
    for name in eval_option_names():
        o.register(name, Option.spin(EVAL_WEIGHT_DEFAULT, 0, EVAL_WEIGHT_MAX, hooks.on_eval))
    o.register("Razoring", Option.check(True))
    o.register("Futility", Option.check(True))
    o.register("NullMove", Option.check(True))
    o.register("ProbCut", Option.check(True))
    o.register("Pruning", Option.check(True))
    o.register("LMR", Option.check(True))
    o.register("MaxLMR", Option.spin(10, 0, 20))
    o.register("MultiPV", Option.spin(1, 1, 500))
    o.register("Skill Level", Option.spin(20, 0, 20))
    o.register("Move Overhead", Option.spin(30, 0, 5000))
    o.register("Minimum Thinking Time", Option.spin(20, 0, 5000))
    o.register("Large Pages", Option.check(True, hooks.on_large_pages))
    o.register("Slow Mover", Option.spin(89, 10, 1000))
    o.register("nodestime", Option.spin(0, 0, 10000))
    o.register("UCI_Chess960", Option.check(False))
    o.register("SyzygyPath", Option.string(EMPTY_PATH, hooks.on_tb_path))
    o.register("SyzygyProbeDepth", Option.spin(1, 1, 100))
    o.register("Syzygy50MoveRule", Option.check(True))
    o.register("SyzygyProbeLimit", Option.spin(6, 0, 6))
    return o


__all__ = [
    "OptionHooks",
    "is_64bit",
    "max_hash_mb",
    "default_threads",
    "eval_option_names",
    "init_options",
]
