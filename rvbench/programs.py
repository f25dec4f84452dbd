"""Small demonstration programs: greeting, pi digits, sorting, file I/O, echo, shapes."""

from __future__ import annotations

import argparse
import math
import string
import struct
import sys
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from functools import cmp_to_key
from itertools import islice
from os import PathLike
from typing import Optional, TextIO, Union

__all__ = [
    "GLOBAL_OFFSET",
    "SORT_VALUES",
    "Shape",
    "Rectangle",
    "Circle",
    "total_area",
    "pi_digits",
    "sort_values",
    "format_sort_report",
    "file_roundtrip",
    "upcase_echo",
    "hello",
    "main",
]

GLOBAL_OFFSET = 10
PI_APPROX = 3.14159
SORT_VALUES = (-192.293, 382.19, 382.18, -192.294, 0.000001, 283874923.123, 0.0000001)

_INT32 = struct.Struct("<i")
_UPCASE = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def _f32(value: float) -> float:
    """Round to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


class Shape(ABC):
    """A plane figure with an area."""

    @abstractmethod
    def area(self) -> float:
        """Area of the figure in single precision."""


@dataclass
class Rectangle(Shape):
    width: float
    height: float

    def area(self) -> float:
        return _f32(_f32(self.width) * _f32(self.height))


@dataclass
class Circle(Shape):
    radius: float

    def area(self) -> float:
        r = _f32(self.radius)
        return _f32(PI_APPROX * r * r)


def total_area(shapes: Iterable[Shape], offset: int = GLOBAL_OFFSET) -> float:
    """Sum the areas in single precision and add ``offset``."""
    total = 0.0
    for shape in shapes:
        total = _f32(total + shape.area())
    return _f32(total + offset)


def pi_digits() -> str:
    """The first 800 decimal digits of pi, from a spigot algorithm."""
    a = 10000
    c = 2800
    f = [a // 5] * c + [0]
    e = 0
    chunks: list[str] = []
    while True:
        d = 0
        g = c * 2
        if g == 0:
            break
        b = c
        while True:
            d += f[b] * a
            g -= 1
            f[b] = d % g
            d //= g
            g -= 1
            b -= 1
            if b == 0:
                break
            d *= b
        c -= 14
        chunks.append(f"{e + d // a:04d}")
        e = d % a
    return "".join(chunks)


def _compare(a: float, b: float) -> int:
    if a < b:
        return -1
    if a == b:
        return 0
    return 1


def sort_values(values: Iterable[float]) -> list[float]:
    """Return the values in ascending order."""
    return sorted(values, key=cmp_to_key(_compare))


def format_sort_report(values: Sequence[float] = SORT_VALUES) -> str:
    """Text listing ``values`` before and after sorting, in ``%e`` form."""
    before = "".join("%e " % v for v in values)
    after = "".join("%e " % v for v in sort_values(values))
    return f"Before sorting: \n{before}\nAfter sorting: \n{after}\n"


def _newlib_rand(seed: int) -> Iterator[int]:
    """The C library's ``rand`` sequence after ``srand(seed)``."""
    state = seed & 0xFFFF_FFFF_FFFF_FFFF
    while True:
        state = (state * 6364136223846793005 + 1) & 0xFFFF_FFFF_FFFF_FFFF
        yield (state >> 32) & 0x7FFF_FFFF


def file_roundtrip(
    path: Union[str, PathLike[str]], count: int = 4096, seed: int = 10
) -> int:
    """Write ``count`` pseudo-random 32-bit integers to ``path``, read and verify them.

    Returns the file size in bytes. Raises :class:`ValueError` if the data read
    back differs from what was written.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    with open(path, "wb") as out:
        for n in islice(_newlib_rand(seed), count):
            out.write(_INT32.pack(n))

    with open(path, "rb") as inp:
        data = inp.read()
    size = len(data)
    usable = size - size % _INT32.size
    expected = _newlib_rand(seed)
    for i, (n,) in enumerate(_INT32.iter_unpack(data[:usable])):
        if n != next(expected):
            raise ValueError(f"data compare failed ({i},{n})")
    return size


def upcase_echo(source: TextIO, sink: TextIO) -> str:
    """Echo characters from ``source`` to ``sink`` up to and including a newline.

    Lower-case ASCII letters are written in upper case. Stops at end of input.
    Returns what was written.
    """
    written: list[str] = []
    while True:
        c = source.read(1)
        if not c:
            break
        out = c.translate(_UPCASE)
        sink.write(out)
        sink.flush()
        written.append(out)
        if c == "\n":
            break
    return "".join(written)


def hello() -> str:
    """The greeting."""
    return "hello world!"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rvbench-programs")
    sub = parser.add_subparsers(dest="program", required=True)
    sub.add_parser("hello", help="print a greeting")
    sub.add_parser("pi", help="print 800 digits of pi")
    sub.add_parser("qsort", help="sort a fixed set of numbers")
    file_cmd = sub.add_parser("file", help="write and verify a binary file")
    file_cmd.add_argument("--path", default="out.bin")
    file_cmd.add_argument("--count", type=int, default=4096)
    file_cmd.add_argument("--seed", type=int, default=10)
    sub.add_parser("io", help="echo a line in upper case")
    sub.add_parser("shapes", help="print the sum of two shape areas")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one of the demonstration programs."""
    args = _build_parser().parse_args(argv)
    out = sys.stdout
    if args.program == "hello":
        out.write(hello() + "\n")
    elif args.program == "pi":
        out.write(pi_digits() + "\n\n")
    elif args.program == "qsort":
        out.write(format_sort_report(SORT_VALUES))
    elif args.program == "file":
        try:
            size = file_roundtrip(args.path, args.count, args.seed)
        except OSError as exc:
            out.write(f"file operation failed: {exc}\n")
            return 1
        except ValueError as exc:
            out.write(f"{exc}\n")
            return 1
        out.write(f"file {size} bytes\nDone\n")
    elif args.program == "io":
        out.write("Enter character (enter to exit): ")
        out.flush()
        upcase_echo(sys.stdin, out)
        out.write("\n")
    elif args.program == "shapes":
        area = total_area([Rectangle(10, 5), Circle(7)], GLOBAL_OFFSET)
        out.write(f"{area:f}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())