"""16-bit CRC helpers and seed parsing used by the CoreMark kernels."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["crcu8", "crcu16", "crcu32", "crc16", "parseval", "get_seed_args"]

_HEX_DIGITS = "0123456789abcdef"


def _to_s32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x1_0000_0000 if value & 0x8000_0000 else value


def crcu8(data: int, crc: int) -> int:
    """Fold one byte into a 16-bit CRC."""
    data &= 0xFF
    crc &= 0xFFFF
    for _ in range(8):
        x16 = (data & 1) ^ (crc & 1)
        data >>= 1
        if x16:
            crc ^= 0x4002
        crc >>= 1
        if x16:
            crc |= 0x8000
        else:
            crc &= 0x7FFF
    return crc


def crcu16(newval: int, crc: int) -> int:
    """Fold an unsigned 16-bit value into the CRC, low byte first."""
    newval &= 0xFFFF
    crc = crcu8(newval & 0xFF, crc)
    return crcu8(newval >> 8, crc)


def crc16(newval: int, crc: int) -> int:
    """Fold a signed 16-bit value into the CRC."""
    return crcu16(newval & 0xFFFF, crc)


def crcu32(newval: int, crc: int) -> int:
    """Fold an unsigned 32-bit value into the CRC, low half first."""
    newval &= 0xFFFFFFFF
    crc = crc16(newval & 0xFFFF, crc)
    return crc16(newval >> 16, crc)


def parseval(text: str) -> int:
    """Parse a decimal or ``0x`` hex number with optional ``K``/``M`` suffix.

    Parsing stops at the first character that is not a digit; the result is
    wrapped to a signed 32-bit integer.
    """
    sign = 1
    if text.startswith("-"):
        sign = -1
        text = text[1:]
    if text.startswith("0x"):
        base, digits = 16, _HEX_DIGITS
        text = text[2:]
    else:
        base, digits = 10, _HEX_DIGITS[:10]

    value = 0
    consumed = 0
    for ch in text:
        if ch not in digits:
            break
        value = value * base + digits.index(ch)
        consumed += 1

    suffix = text[consumed:consumed + 1]
    if suffix == "K":
        value *= 1024
    elif suffix == "M":
        value *= 1024 * 1024

    return _to_s32(value * sign)


def get_seed_args(i: int, argv: Sequence[str]) -> int:
    """Return ``argv[i]`` parsed with :func:`parseval`, or 0 if absent."""
    if len(argv) > i:
        return parseval(argv[i])
    return 0