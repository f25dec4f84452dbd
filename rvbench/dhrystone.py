"""Dhrystone 2.1 main program: the measurement loop and its report."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, fields
from typing import Optional

from .dhry_pack2 import (
    Enumeration,
    Globals,
    Record,
    func_1,
    func_2,
    proc_6,
    proc_7,
    proc_8,
)

__all__ = [
    "DEFAULT_RUNS",
    "TOO_SMALL_TIME",
    "DhrystoneResult",
    "Dhrystone",
    "format_report",
    "main",
]

DEFAULT_RUNS = 100
TOO_SMALL_TIME = 2.0
MIC_SECS_PER_SECOND = 1_000_000.0

SOME_STRING = "DHRYSTONE PROGRAM, SOME STRING"
FIRST_STRING = "DHRYSTONE PROGRAM, 1'ST STRING"
SECOND_STRING = "DHRYSTONE PROGRAM, 2'ND STRING"
THIRD_STRING = "DHRYSTONE PROGRAM, 3'RD STRING"


def _assign(dst: Record, src: Record) -> None:
    """Copy every field of ``src`` into ``dst``."""
    for f in fields(Record):
        setattr(dst, f.name, getattr(src, f.name))


def _c_div(a: int, b: int) -> int:
    """Integer division truncating towards zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


@dataclass
class DhrystoneResult:
    """Final variable values and timing of one benchmark run."""

    number_of_runs: int
    glob: Globals
    int_1_loc: int
    int_2_loc: int
    int_3_loc: int
    enum_loc: Enumeration
    str_1_loc: str
    str_2_loc: str
    user_time: float
    reg: bool = field(default=False)

    @property
    def ptr_glob(self) -> Record:
        assert self.glob.ptr_glob is not None
        return self.glob.ptr_glob

    @property
    def next_ptr_glob(self) -> Record:
        assert self.glob.next_ptr_glob is not None
        return self.glob.next_ptr_glob

    @property
    def time_too_small(self) -> bool:
        """True when the measured time is too short to be meaningful."""
        return self.user_time < TOO_SMALL_TIME

    @property
    def microseconds(self) -> float:
        """Microseconds for one run through the benchmark."""
        return self.user_time * MIC_SECS_PER_SECOND / self.number_of_runs

    @property
    def dhrystones_per_second(self) -> float:
        """Runs per second, or infinity when no time was measured."""
        if self.user_time <= 0:
            return float("inf")
        return self.number_of_runs / self.user_time


class Dhrystone:
    """Benchmark state with the package-1 procedures operating on it."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self.clock = clock
        self.glob = Globals()
        self._reset()

    def _reset(self) -> None:
        glob = Globals()
        next_ptr = Record()
        glob.next_ptr_glob = next_ptr
        glob.ptr_glob = Record(
            ptr_comp=next_ptr,
            discr=Enumeration.IDENT_1,
            enum_comp=Enumeration.IDENT_3,
            int_comp=40,
            str_comp=SOME_STRING,
        )
        glob.arr_2_glob[8][7] = 10
        self.glob = glob

    def _ptr_glob(self) -> Record:
        if self.glob.ptr_glob is None:
            raise ValueError("global record is not set")
        return self.glob.ptr_glob

    def proc_1(self, ptr_val: Record) -> None:
        """Rework ``ptr_val`` and the record it points to."""
        next_record = ptr_val.ptr_comp
        if next_record is None:
            raise ValueError("record has no successor")
        ptr_glob = self._ptr_glob()
        _assign(next_record, ptr_glob)
        ptr_val.int_comp = 5
        next_record.int_comp = ptr_val.int_comp
        next_record.ptr_comp = ptr_val.ptr_comp
        next_record.ptr_comp = self.proc_3()
        if next_record.discr == Enumeration.IDENT_1:
            next_record.int_comp = 6
            next_record.enum_comp = proc_6(ptr_val.enum_comp, self.glob)
            next_record.ptr_comp = ptr_glob.ptr_comp
            next_record.int_comp = proc_7(next_record.int_comp, 10)
        else:
            if ptr_val.ptr_comp is None:
                raise ValueError("record has no successor")
            _assign(ptr_val, ptr_val.ptr_comp)

    def proc_2(self, int_val: int) -> int:
        """Return ``int_val + 9 - int_glob``; the first character must be ``'A'``."""
        int_loc = int_val + 10
        if self.glob.ch_1_glob != "A":
            raise ValueError("procedure loop never terminates unless ch_1_glob is 'A'")
        int_loc -= 1
        return int_loc - self.glob.int_glob

    def proc_3(self) -> Optional[Record]:
        """Update the global record's integer and return its successor."""
        ptr_glob = self._ptr_glob()
        successor = ptr_glob.ptr_comp
        ptr_glob.int_comp = proc_7(10, self.glob.int_glob)
        return successor

    def proc_4(self) -> None:
        bool_loc = self.glob.ch_1_glob == "A"
        self.glob.bool_glob = bool_loc or self.glob.bool_glob
        self.glob.ch_2_glob = "B"

    def proc_5(self) -> None:
        self.glob.ch_1_glob = "A"
        self.glob.bool_glob = False

    def run(self, number_of_runs: int = DEFAULT_RUNS) -> DhrystoneResult:
        """Initialise the globals and execute the benchmark loop."""
        if number_of_runs < 1:
            raise ValueError("number of runs must be at least 1")
        self._reset()
        glob = self.glob
        ptr_glob = self._ptr_glob()
        str_1_loc = FIRST_STRING
        int_1_loc = int_2_loc = int_3_loc = 0
        enum_loc = Enumeration.IDENT_1
        str_2_loc = ""

        begin = self.clock()
        for run_index in range(1, number_of_runs + 1):
            self.proc_5()
            self.proc_4()
            int_1_loc = 2
            int_2_loc = 3
            str_2_loc = SECOND_STRING
            enum_loc = Enumeration.IDENT_2
            glob.bool_glob = not func_2(str_1_loc, str_2_loc, glob)
            while int_1_loc < int_2_loc:
                int_3_loc = 5 * int_1_loc - int_2_loc
                int_3_loc = proc_7(int_1_loc, int_2_loc)
                int_1_loc += 1
            proc_8(glob.arr_1_glob, glob.arr_2_glob, int_1_loc, int_3_loc, glob)
            self.proc_1(ptr_glob)
            for code in range(ord("A"), ord(glob.ch_2_glob) + 1):
                if enum_loc == func_1(chr(code), "C", glob):
                    enum_loc = proc_6(Enumeration.IDENT_1, glob)
                    str_2_loc = THIRD_STRING
                    int_2_loc = run_index
                    glob.int_glob = run_index
            int_2_loc = int_2_loc * int_1_loc
            int_1_loc = _c_div(int_2_loc, int_3_loc)
            int_2_loc = 7 * (int_2_loc - int_3_loc) - int_1_loc
            int_1_loc = self.proc_2(int_1_loc)
        end = self.clock()

        return DhrystoneResult(
            number_of_runs=number_of_runs,
            glob=glob,
            int_1_loc=int_1_loc,
            int_2_loc=int_2_loc,
            int_3_loc=int_3_loc,
            enum_loc=Enumeration(enum_loc),
            str_1_loc=str_1_loc,
            str_2_loc=str_2_loc,
            user_time=end - begin,
        )


def _record_lines(name: str, record: Record, extra: str) -> list[str]:
    return [
        f"{name}->",
        f"  Ptr_Comp:          {id(record.ptr_comp)}",
        f"        should be:   (implementation-dependent){extra}",
        f"  Discr:             {int(record.discr)}",
        "        should be:   0",
        f"  Enum_Comp:         {int(record.enum_comp)}",
    ]


def format_report(result: DhrystoneResult) -> str:
    """Render the benchmark output for ``result``."""
    glob = result.glob
    ptr, nxt = result.ptr_glob, result.next_ptr_glob
    register = "with" if result.reg else "without"
    lines = [
        "",
        "Dhrystone Benchmark, Version 2.1 (Language: Python)",
        "",
        f"Program compiled {register} 'register' attribute",
        "",
        "Please give the number of runs through the benchmark: ",
        f"Execution starts, {result.number_of_runs} runs through Dhrystone",
        "Execution ends",
        "",
        "Final values of the variables used in the benchmark:",
        "",
        f"Int_Glob:            {glob.int_glob}",
        "        should be:   5",
        f"Bool_Glob:           {int(glob.bool_glob)}",
        "        should be:   1",
        f"Ch_1_Glob:           {glob.ch_1_glob}",
        "        should be:   A",
        f"Ch_2_Glob:           {glob.ch_2_glob}",
        "        should be:   B",
        f"Arr_1_Glob[8]:       {glob.arr_1_glob[8]}",
        "        should be:   7",
        f"Arr_2_Glob[8][7]:    {glob.arr_2_glob[8][7]}",
        "        should be:   Number_Of_Runs + 10",
    ]
    lines += _record_lines("Ptr_Glob", ptr, "")
    lines += [
        "        should be:   2",
        f"  Int_Comp:          {ptr.int_comp}",
        "        should be:   17",
        f"  Str_Comp:          {ptr.str_comp}",
        f"        should be:   {SOME_STRING}",
    ]
    lines += _record_lines("Next_Ptr_Glob", nxt, ", same as above")
    lines += [
        "        should be:   1",
        f"  Int_Comp:          {nxt.int_comp}",
        "        should be:   18",
        f"  Str_Comp:          {nxt.str_comp}",
        f"        should be:   {SOME_STRING}",
        f"Int_1_Loc:           {result.int_1_loc}",
        "        should be:   5",
        f"Int_2_Loc:           {result.int_2_loc}",
        "        should be:   13",
        f"Int_3_Loc:           {result.int_3_loc}",
        "        should be:   7",
        f"Enum_Loc:            {int(result.enum_loc)}",
        "        should be:   1",
        f"Str_1_Loc:           {result.str_1_loc}",
        f"        should be:   {FIRST_STRING}",
        f"Str_2_Loc:           {result.str_2_loc}",
        f"        should be:   {SECOND_STRING}",
        "",
    ]
    if result.time_too_small:
        lines += [
            "Measured time too small to obtain meaningful results",
            "Please increase number of runs",
            "",
        ]
    else:
        lines += [
            "Microseconds for one run through Dhrystone: " + "%6.1f " % result.microseconds,
            "Dhrystones per Second:                      "
            + "%6.1f " % result.dhrystones_per_second,
            "",
        ]
    return "\n".join(lines) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry: ``[number_of_runs]``."""
    parser = argparse.ArgumentParser(prog="rvbench-dhrystone")
    parser.add_argument("runs", nargs="?", type=int, default=DEFAULT_RUNS)
    args = parser.parse_args(argv)
    try:
        result = Dhrystone().run(args.runs)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    sys.stdout.write(format_report(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())