"""CoreMark matrix kernel: small integer matrix arithmetic folded into a CRC."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass, field

from .crc import crc16

__all__ = [
    "MatParams",
    "init_matrix",
    "bench_matrix",
    "matrix_test",
    "matrix_sum",
    "matrix_mul_const",
    "matrix_add_const",
    "matrix_mul_vect",
    "matrix_mul_matrix",
    "matrix_mul_matrix_bitextract",
]


def _s16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


def _s32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x1_0000_0000 if value & 0x8000_0000 else value


def _c_mod(value: int, modulus: int) -> int:
    """Remainder with the sign of the dividend, as integer division truncates."""
    remainder = abs(value) % modulus
    return -remainder if value < 0 else remainder


def _rows(n: int, m: Sequence[int]) -> list[Sequence[int]]:
    return [m[start:start + n] for start in range(0, n * n, n)]


def _columns(n: int, m: Sequence[int]) -> list[Sequence[int]]:
    return [m[col:n * n:n] for col in range(n)]


@dataclass
class MatParams:
    """Matrices of one benchmark context: inputs ``a`` and ``b``, result ``c``."""

    n: int
    a: list[int]
    b: list[int]
    c: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.c:
            self.c = [0] * (self.n * self.n)


def init_matrix(blksize: int, seed: int) -> MatParams:
    """Create the matrices that fit in ``blksize`` bytes, filled from ``seed``.

    ``a`` holds small values (0..255), ``b`` medium 16-bit values.
    """
    if blksize <= 0:
        raise ValueError("matrix block size must be positive")
    seed = _s32(seed)
    if seed == 0:
        seed = 1

    side = 0
    used = 0
    while used < blksize:
        side += 1
        used = side * side * 2 * 4
    n = side - 1

    a: list[int] = []
    b: list[int] = []
    for order in range(1, n * n + 1):
        seed = _c_mod(_s32(order * seed), 65536)
        val = _s16(seed + order)
        b.append(val)
        a.append(_s16(val + order) & 0xFF)
    return MatParams(n=n, a=a, b=b, c=[0] * (n * n))


def matrix_add_const(n: int, a: MutableSequence[int], val: int) -> None:
    """Add ``val`` to every element of ``a`` in place, with 16-bit wrap-around."""
    count = n * n
    a[:count] = [_s16(x + val) for x in a[:count]]


def matrix_mul_const(n: int, c: MutableSequence[int], a: Sequence[int], val: int) -> None:
    """Store ``a * val`` into ``c``."""
    val = _s16(val)
    count = n * n
    c[:count] = [_s32(x * val) for x in a[:count]]


def matrix_mul_vect(n: int, c: MutableSequence[int], a: Sequence[int], b: Sequence[int]) -> None:
    """Store the product of ``a`` and the first ``n`` entries of ``b`` into ``c[:n]``."""
    vector = b[:n]
    c[:n] = [_s32(sum(x * y for x, y in zip(row, vector))) for row in _rows(n, a)]


def matrix_mul_matrix(n: int, c: MutableSequence[int], a: Sequence[int], b: Sequence[int]) -> None:
    """Store the matrix product ``a @ b`` into ``c``."""
    columns = _columns(n, b)
    c[:n * n] = [
        _s32(sum(x * y for x, y in zip(row, column)))
        for row in _rows(n, a)
        for column in columns
    ]


def _bit_products(row: Sequence[int], column: Sequence[int]) -> int:
    total = 0
    for x, y in zip(row, column):
        tmp = _s32(x * y)
        total += ((tmp >> 2) & 0xF) * ((tmp >> 5) & 0x7F)
    return _s32(total)


def matrix_mul_matrix_bitextract(
    n: int, c: MutableSequence[int], a: Sequence[int], b: Sequence[int]
) -> None:
    """Multiply ``a`` by ``b``, combining bit fields of each partial product."""
    columns = _columns(n, b)
    c[:n * n] = [_bit_products(row, column) for row in _rows(n, a) for column in columns]


def matrix_sum(n: int, c: Sequence[int], clipval: int) -> int:
    """Score the elements of ``c`` against ``clipval``; returns a 16-bit value."""
    clipval = _s16(clipval)
    tmp = 0
    prev = 0
    ret = 0
    for cur in c[:n * n]:
        tmp = _s32(tmp + cur)
        if tmp > clipval:
            ret += 10
            tmp = 0
        elif cur > prev:
            ret += 1
        prev = cur
    return _s16(ret)


def matrix_test(
    n: int,
    c: MutableSequence[int],
    a: MutableSequence[int],
    b: Sequence[int],
    val: int,
) -> int:
    """Run the sequence of matrix operations and return a CRC of their sums.

    ``a`` is returned to its original contents afterwards.
    """
    val = _s16(val)
    clipval = _s16(0xF000 | (val & 0xFFFF))
    crc = 0

    matrix_add_const(n, a, val)
    matrix_mul_const(n, c, a, val)
    crc = crc16(matrix_sum(n, c, clipval), crc)
    matrix_mul_vect(n, c, a, b)
    crc = crc16(matrix_sum(n, c, clipval), crc)
    matrix_mul_matrix(n, c, a, b)
    crc = crc16(matrix_sum(n, c, clipval), crc)
    matrix_mul_matrix_bitextract(n, c, a, b)
    crc = crc16(matrix_sum(n, c, clipval), crc)
    matrix_add_const(n, a, _s16(-val))

    return _s16(crc)


def bench_matrix(params: MatParams, seed: int, crc: int) -> int:
    """Run :func:`matrix_test` on ``params`` and fold its result into ``crc``."""
    return crc16(matrix_test(params.n, params.c, params.a, params.b, _s16(seed)), crc)