"""
constants.py

Static constants for the SugarOpt UCI options layer.
Other modules import these values; keep this file free of logic.

Author: Kartik
"""
from __future__ import annotations

# Engine identity -------------------------------------------------------------
ENGINE_NAME = "SugarOpt"
ENGINE_AUTHOR = "Kartik"

# UCI protocol keywords / tokens ---------------------------------------------
CMD_UCI = "uci"
CMD_UCIOK = "uciok"
CMD_ISREADY = "isready"
CMD_READYOK = "readyok"
CMD_SETOPTION = "setoption"
CMD_NEWGAME = "ucinewgame"
CMD_HELP = "help"
CMD_QUIT = ("quit", "exit")

# Option kinds as they appear on the wire ------------------------------------
KIND_STRING = "string"
KIND_CHECK = "check"
KIND_BUTTON = "button"
KIND_SPIN = "spin"

CHECK_TRUE = "true"
CHECK_FALSE = "false"

# Option table constants -----------------------------------------------------
DEFAULT_HASH_MB = 16
MAX_HASH_MB_64 = 1024 * 1024
MAX_HASH_MB_32 = 2048
MAX_THREADS = 512

# Placeholder the GUI shows for an unset tablebase path
EMPTY_PATH = "<empty>"

# Evaluation terms tuned as (mg)/(eg) percentage pairs, in table order
EVAL_TERMS = (
    "Material",
    "Imbalance",
    "PawnStructure",
    "Mobility",
    "PassedPawns",
    "KingSafety",
    "Threats",
)
EVAL_WEIGHT_DEFAULT = 100
EVAL_WEIGHT_MAX = 300

# Transposition table entry size in bytes
TT_ENTRY_BYTES = 16

# Syzygy tablebase file suffixes
TB_WDL_SUFFIX = ".rtbw"
TB_DTZ_SUFFIX = ".rtbz"

# Logger that mirrors engine I/O when "Debug Log File" is set
IO_LOGGER_NAME = "uci.io"

__all__ = [
    "ENGINE_NAME",
    "ENGINE_AUTHOR",
    "CMD_UCI",
    "CMD_UCIOK",
    "CMD_ISREADY",
    "CMD_READYOK",
    "CMD_SETOPTION",
    "CMD_NEWGAME",
    "CMD_HELP",
    "CMD_QUIT",
    "KIND_STRING",
    "KIND_CHECK",
    "KIND_BUTTON",
    "KIND_SPIN",
    "CHECK_TRUE",
    "CHECK_FALSE",
    "DEFAULT_HASH_MB",
    "MAX_HASH_MB_64",
    "MAX_HASH_MB_32",
    "MAX_THREADS",
    "EMPTY_PATH",
    "EVAL_TERMS",
    "EVAL_WEIGHT_DEFAULT",
    "EVAL_WEIGHT_MAX",
    "TT_ENTRY_BYTES",
    "TB_WDL_SUFFIX",
    "TB_DTZ_SUFFIX",
    "IO_LOGGER_NAME",
]
