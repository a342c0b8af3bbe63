"""
options.py

UCI options for the SugarOpt engine.

Provides the typed option cell (`Option`), the case-insensitive registry
(`OptionsMap`) and the printer that renders the registry as UCI
`option name ...` declarations. The fixed option table itself lives in
catalog.py.
"""
from __future__ import annotations

import logging
import re
import string
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Protocol, Tuple

from constants import (
    CHECK_FALSE,
    CHECK_TRUE,
    KIND_BUTTON,
    KIND_CHECK,
    KIND_SPIN,
    KIND_STRING,
)

logger = logging.getLogger(__name__)


class Kind(Enum):
    """Closed set of option kinds; the value is the UCI type name."""

    STRING = KIND_STRING
    CHECK = KIND_CHECK
    BUTTON = KIND_BUTTON
    SPIN = KIND_SPIN


class AssignResult(Enum):
    APPLIED = "applied"
    REJECTED = "rejected"
    NOT_FOUND = "not found"


class OptionTypeError(TypeError):
    """Raised when an option is read through the wrong accessor for its kind."""


class DuplicateOptionError(ValueError):
    """Raised when a name is registered twice in the same OptionsMap."""


class OnChange(Protocol):
    def __call__(self, option: "Option") -> None:
        ...


# --- case-insensitive names --------------------------------------------------
_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ci_key(name: str) -> str:
    """Fold ASCII letters to lower case, leaving everything else untouched.

    UCI option names compare case-insensitively; str.lower() would also fold
    non-ASCII letters, so a translation table is used instead.
    """
    return name.translate(_ASCII_FOLD)


def ci_less(a: str, b: str) -> bool:
    return ci_key(a) < ci_key(b)


# --- option cell -------------------------------------------------------------
_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass
class Option:
    kind: Optional[Kind] = None  # None only for a slot not yet loaded
    default_value: str = ""
    current_value: str = ""
    min: int = 0
    max: int = 0
    on_change: Optional[OnChange] = None
    idx: Optional[int] = None

    # constructors, one per kind
    @classmethod
    def string(cls, default: str, on_change: Optional[OnChange] = None) -> "Option":
        return cls(Kind.STRING, default, default, on_change=on_change)

    @classmethod
    def check(cls, default: bool, on_change: Optional[OnChange] = None) -> "Option":
        v = CHECK_TRUE if default else CHECK_FALSE
        return cls(Kind.CHECK, v, v, on_change=on_change)

    @classmethod
    def button(cls, on_change: Optional[OnChange] = None) -> "Option":
        return cls(Kind.BUTTON, on_change=on_change)

    @classmethod
    def spin(
        cls, default: int, min: int, max: int, on_change: Optional[OnChange] = None
    ) -> "Option":
        if min > max:
            raise ValueError(f"Spin bounds are inverted: min {min} > max {max}")
        v = str(default)
        return cls(Kind.SPIN, v, v, min, max, on_change)

    # accessors
    def as_int(self) -> int:
        """Value of a check (1/0) or spin option."""
        if self.kind is Kind.SPIN:
            return int(self.current_value)
        if self.kind is Kind.CHECK:
            return int(self.current_value == CHECK_TRUE)
        raise OptionTypeError(f"Option of kind {self._kind_name()} has no integer value")

    def as_str(self) -> str:
        """Value of a string option."""
        if self.kind is Kind.STRING:
            return self.current_value
        raise OptionTypeError(f"Option of kind {self._kind_name()} has no string value")

    def __int__(self) -> int:
        return self.as_int()

    def _kind_name(self) -> str:
        return self.kind.value if self.kind is not None else "<unset>"

    # mutation
    def accepts(self, text: str) -> bool:
        if self.kind is Kind.BUTTON:
            return True
        if not text:
            return False
        if self.kind is Kind.CHECK:
            return text in (CHECK_TRUE, CHECK_FALSE)
        if self.kind is Kind.SPIN:
            if not _INTEGER.fullmatch(text):
                return False
            return self.min <= int(text) <= self.max
        return self.kind is Kind.STRING

    def assign(self, text: str) -> bool:
        """Validate `text` and apply it, then fire on_change.

        Invalid values are ignored: the GUI is expected to respect the
        advertised limits, but values typed into a console are checked anyway.
        Returns True when the value was applied.
        """
        if not self.accepts(text):
            return False
        if self.kind is Kind.SPIN:
            self.current_value = str(int(text))
        elif self.kind is not Kind.BUTTON:
            self.current_value = text
        if self.on_change is not None:
            self.on_change(self)
        return True

    def load(self, other: "Option", idx: int) -> None:
        """Copy every field of `other` into this slot and stamp its index."""
        self.kind = other.kind
        self.default_value = other.default_value
        self.current_value = other.current_value
        self.min = other.min
        self.max = other.max
        self.on_change = other.on_change
        self.idx = idx


# --- registry ----------------------------------------------------------------
class OptionsMap:
    """Append-only map of option name -> Option, keyed case-insensitively.

    Names keep the spelling they were registered with. Iteration follows
    case-insensitive name order; `enumerate_by_insertion_order` follows the
    registration order used for the UCI dump.
    """

    def __init__(self) -> None:
        self._names: Dict[str, str] = {}
        self._options: Dict[str, Option] = {}
        self._insert_order = 0

    def __len__(self) -> int:
        return len(self._options)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and ci_key(name) in self._options

    def __getitem__(self, name: str) -> Option:
        opt = self.lookup(name)
        if opt is None:
            raise KeyError(f"Unknown option '{name}'")
        return opt

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def names(self) -> List[str]:
        return [self._names[k] for k in sorted(self._names)]

    def lookup(self, name: str) -> Optional[Option]:
        return self._options.get(ci_key(name))

    def get_or_create(self, name: str) -> Option:
        key = ci_key(name)
        opt = self._options.get(key)
        if opt is None:
            opt = Option()
            self._names[key] = name
            self._options[key] = opt
        return opt

    def register(self, name: str, option: Option) -> Option:
        slot = self.get_or_create(name)
        if slot.idx is not None:
            raise DuplicateOptionError(f"Option '{name}' is already registered")
        slot.load(option, self._insert_order)
        self._insert_order += 1
        return slot

    def enumerate_by_insertion_order(self) -> Iterator[Tuple[str, Option]]:
        keys = [k for k, o in self._options.items() if o.idx is not None]
        keys.sort(key=lambda k: self._options[k].idx)
        for k in keys:
            yield self._names[k], self._options[k]

    def set_option(self, name: str, value: str) -> AssignResult:
        opt = self.lookup(name)
        if opt is None:
            return AssignResult.NOT_FOUND
        if not opt.assign(value):
            logger.debug("Ignored value %r for option '%s'", value, name)
            return AssignResult.REJECTED
        logger.info("Option '%s' set to %r", name, opt.current_value)
        return AssignResult.APPLIED

    def __str__(self) -> str:
        return format_options(self)


# --- printer -----------------------------------------------------------------
def format_option(name: str, opt: Option) -> str:
    line = f"option name {name} type {opt.kind.value}"
    if opt.kind is not Kind.BUTTON:
        line += f" default {opt.default_value}"
    if opt.kind is Kind.SPIN:
        line += f" min {opt.min} max {opt.max}"
    return line


def format_options(options: OptionsMap) -> str:
    """All declarations in insertion order, each prefixed by a newline."""
    return "".join(
        "\n" + format_option(name, opt)
        for name, opt in options.enumerate_by_insertion_order()
    )


__all__ = [
    "Kind",
    "AssignResult",
    "OptionTypeError",
    "DuplicateOptionError",
    "OnChange",
    "ci_key",
    "ci_less",
    "Option",
    "OptionsMap",
    "format_option",
    "format_options",
]
