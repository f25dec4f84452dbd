"""CoreMark state-machine kernel: classify comma-separated number tokens."""

from __future__ import annotations

from collections.abc import MutableSequence
from enum import IntEnum

from .crc import crcu32

__all__ = ["CoreState", "NUM_CORE_STATES", "init_state", "state_transition", "bench_state"]


class CoreState(IntEnum):
    """States of the number-recognising machine."""

    START = 0
    INVALID = 1
    S1 = 2
    S2 = 3
    INT = 4
    FLOAT = 5
    EXPONENT = 6
    SCIENTIFIC = 7


NUM_CORE_STATES = len(CoreState)

_INT_PATTERNS = (b"5012", b"1234", b"-874", b"+122")
_FLOAT_PATTERNS = (b"35.54400", b".1234500", b"-110.700", b"+0.64400")
_SCI_PATTERNS = (b"5.500e+3", b"-.123e-2", b"-87e+832", b"+0.6e-12")
_ERR_PATTERNS = (b"T0.3e-1F", b"-T.T++Tq", b"1T3.4e4z", b"34.0e-T^")

_COMMA = ord(",")
_DOT = ord(".")
_SIGNS = (ord("+"), ord("-"))
_EXP_MARKS = (ord("e"), ord("E"))


def _to_s16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


def _is_digit(c: int) -> bool:
    return 0x30 <= c <= 0x39


def _pattern_for(seed: int) -> bytes:
    kind = seed & 0x7
    index = (seed >> 3) & 0x3
    if kind <= 2:
        return _INT_PATTERNS[index]
    if kind <= 4:
        return _FLOAT_PATTERNS[index]
    if kind <= 6:
        return _SCI_PATTERNS[index]
    return _ERR_PATTERNS[index]


def init_state(size: int, seed: int) -> bytearray:
    """Build a ``size``-byte input of comma-separated tokens chosen by ``seed``.

    The remainder of the block is filled with zero bytes.
    """
    if size < 1:
        raise ValueError("state block size must be at least 1")
    block = bytearray(size)
    limit = size - 1
    total = 0
    token = b""
    seed = _to_s16(seed)
    while total + len(token) + 1 < limit:
        if token:
            block[total:total + len(token)] = token
            block[total + len(token)] = _COMMA
            total += len(token) + 1
        seed = _to_s16(seed + 1)
        token = _pattern_for(seed)
    return block


def state_transition(
    data: bytes | bytearray,
    pos: int,
    transition_count: MutableSequence[int],
) -> tuple[CoreState, int]:
    """Scan one token starting at ``pos``.

    Counts transitions into ``transition_count`` (indexed by :class:`CoreState`)
    and returns the final state with the position where scanning stopped.
    A zero byte or the end of ``data`` ends the input.
    """
    state = CoreState.START
    end = len(data)
    while pos < end and data[pos] != 0 and state != CoreState.INVALID:
        symbol = data[pos]
        if symbol == _COMMA:
            pos += 1
            break
        if state == CoreState.START:
            if _is_digit(symbol):
                state = CoreState.INT
            elif symbol in _SIGNS:
                state = CoreState.S1
            elif symbol == _DOT:
                state = CoreState.FLOAT
            else:
                state = CoreState.INVALID
                transition_count[CoreState.INVALID] += 1
            transition_count[CoreState.START] += 1
        elif state == CoreState.S1:
            if _is_digit(symbol):
                state = CoreState.INT
            elif symbol == _DOT:
                state = CoreState.FLOAT
            else:
                state = CoreState.INVALID
            transition_count[CoreState.S1] += 1
        elif state == CoreState.INT:
            if symbol == _DOT:
                state = CoreState.FLOAT
                transition_count[CoreState.INT] += 1
            elif not _is_digit(symbol):
                state = CoreState.INVALID
                transition_count[CoreState.INT] += 1
        elif state == CoreState.FLOAT:
            if symbol in _EXP_MARKS:
                state = CoreState.S2
                transition_count[CoreState.FLOAT] += 1
            elif not _is_digit(symbol):
                state = CoreState.INVALID
                transition_count[CoreState.FLOAT] += 1
        elif state == CoreState.S2:
            state = CoreState.EXPONENT if symbol in _SIGNS else CoreState.INVALID
            transition_count[CoreState.S2] += 1
        elif state == CoreState.EXPONENT:
            state = CoreState.SCIENTIFIC if _is_digit(symbol) else CoreState.INVALID
            transition_count[CoreState.EXPONENT] += 1
        elif state == CoreState.SCIENTIFIC:
            if not _is_digit(symbol):
                state = CoreState.INVALID
                transition_count[CoreState.INVALID] += 1
        pos += 1
    return state, pos


def _scan(data: bytearray, final_counts: list[int], track_counts: list[int]) -> None:
    pos = 0
    while pos < len(data) and data[pos] != 0:
        state, pos = state_transition(data, pos, track_counts)
        final_counts[state] += 1


def _corrupt(data: bytearray, blksize: int, mask: int, step: int) -> None:
    for pos in range(0, blksize, step):
        if data[pos] != _COMMA:
            data[pos] ^= mask


def bench_state(
    blksize: int,
    memblock: bytearray,
    seed1: int,
    seed2: int,
    step: int,
    crc: int,
) -> int:
    """Run the state machine over ``memblock`` twice and return the updated CRC.

    Between the passes every ``step``-th byte is XORed with ``seed1``; afterwards
    it is XORed with ``seed2``, so equal seeds leave ``memblock`` unchanged.
    """
    if step <= 0:
        raise ValueError("step must be positive")
    if len(memblock) < blksize:
        raise ValueError("memory block is smaller than blksize")

    final_counts = [0] * NUM_CORE_STATES
    track_counts = [0] * NUM_CORE_STATES

    _scan(memblock, final_counts, track_counts)
    _corrupt(memblock, blksize, seed1 & 0xFF, step)
    _scan(memblock, final_counts, track_counts)
    _corrupt(memblock, blksize, seed2 & 0xFF, step)

    for final, track in zip(final_counts, track_counts):
        crc = crcu32(final, crc)
        crc = crcu32(track, crc)
    return crc