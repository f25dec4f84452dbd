"""Dhrystone package 2: the leaf procedures and functions of the benchmark."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

__all__ = [
    "ARRAY_SIZE",
    "Enumeration",
    "Record",
    "Globals",
    "proc_6",
    "proc_7",
    "proc_8",
    "func_1",
    "func_2",
    "func_3",
]

ARRAY_SIZE = 50


class Enumeration(IntEnum):
    """The five-valued enumeration type of the benchmark."""

    IDENT_1 = 0
    IDENT_2 = 1
    IDENT_3 = 2
    IDENT_4 = 3
    IDENT_5 = 4


@dataclass(eq=False)
class Record:
    """A benchmark record; ``ptr_comp`` links records, possibly to themselves."""

    ptr_comp: Optional["Record"] = field(default=None, repr=False)
    discr: Enumeration = Enumeration.IDENT_1
    enum_comp: Enumeration = Enumeration.IDENT_1
    int_comp: int = 0
    str_comp: str = ""


def _zero_matrix() -> list[list[int]]:
    return [[0] * ARRAY_SIZE for _ in range(ARRAY_SIZE)]


@dataclass
class Globals:
    """Global state shared by all benchmark procedures."""

    int_glob: int = 0
    bool_glob: bool = False
    ch_1_glob: str = "\0"
    ch_2_glob: str = "\0"
    arr_1_glob: list[int] = field(default_factory=lambda: [0] * ARRAY_SIZE)
    arr_2_glob: list[list[int]] = field(default_factory=_zero_matrix)
    ptr_glob: Optional[Record] = field(default=None, repr=False)
    next_ptr_glob: Optional[Record] = field(default=None, repr=False)


def func_3(enum_val: Enumeration) -> bool:
    """True when ``enum_val`` is ``IDENT_3``."""
    return enum_val == Enumeration.IDENT_3


def proc_6(enum_val: Enumeration, glob: Globals) -> Enumeration:
    """Map ``enum_val`` to the enumeration value the benchmark assigns for it."""
    result = Enumeration(enum_val)
    if not func_3(enum_val):
        result = Enumeration.IDENT_4
    if enum_val == Enumeration.IDENT_1:
        result = Enumeration.IDENT_1
    elif enum_val == Enumeration.IDENT_2:
        result = Enumeration.IDENT_1 if glob.int_glob > 100 else Enumeration.IDENT_4
    elif enum_val == Enumeration.IDENT_3:
        result = Enumeration.IDENT_2
    elif enum_val == Enumeration.IDENT_5:
        result = Enumeration.IDENT_3
    return result


def proc_7(int_1: int, int_2: int) -> int:
    """Return ``int_2 + int_1 + 2``."""
    int_loc = int_1 + 2
    return int_2 + int_loc


def proc_8(
    arr_1: list[int],
    arr_2: list[list[int]],
    int_1: int,
    int_2: int,
    glob: Globals,
) -> None:
    """Update the two arrays around index ``int_1 + 5`` and set ``int_glob`` to 5."""
    int_loc = int_1 + 5
    arr_1[int_loc] = int_2
    arr_1[int_loc + 1] = arr_1[int_loc]
    arr_1[int_loc + 30] = int_loc
    for int_index in (int_loc, int_loc + 1):
        arr_2[int_loc][int_index] = int_loc
    arr_2[int_loc][int_loc - 1] += 1
    arr_2[int_loc + 20][int_loc] = arr_1[int_loc]
    glob.int_glob = 5


def func_1(ch_1: str, ch_2: str, glob: Globals) -> Enumeration:
    """``IDENT_1`` if the characters differ; otherwise store ``ch_1`` and return ``IDENT_2``."""
    ch_1_loc = ch_1
    ch_2_loc = ch_1_loc
    if ch_2_loc != ch_2:
        return Enumeration.IDENT_1
    glob.ch_1_glob = ch_1_loc
    return Enumeration.IDENT_2


def func_2(str_1: str, str_2: str, glob: Globals) -> bool:
    """Compare two benchmark strings; True only if ``str_1`` sorts after ``str_2``.

    Raises :class:`ValueError` when ``str_1[2]`` equals ``str_2[3]``, for which
    the benchmark's loop would never end.
    """
    int_loc = 2
    ch_loc = "\0"
    while int_loc <= 2:
        if func_1(str_1[int_loc], str_2[int_loc + 1], glob) != Enumeration.IDENT_1:
            raise ValueError("string comparison loop never terminates for these inputs")
        ch_loc = "A"
        int_loc += 1
    if "W" <= ch_loc < "Z":
        int_loc = 7
    if ch_loc == "R":
        return True
    if str_1 > str_2:
        int_loc += 7
        glob.int_glob = int_loc
        return True
    return False