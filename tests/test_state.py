import pytest

from rvbench.state import (
    NUM_CORE_STATES,
    CoreState,
    bench_state,
    init_state,
    state_transition,
)

ALL_PATTERNS = {
    b"5012", b"1234", b"-874", b"+122",
    b"35.54400", b".1234500", b"-110.700", b"+0.64400",
    b"5.500e+3", b"-.123e-2", b"-87e+832", b"+0.6e-12",
    b"T0.3e-1F", b"-T.T++Tq", b"1T3.4e4z", b"34.0e-T^",
}


def _counts():
    return [0] * NUM_CORE_STATES


def test_init_state_length_and_zero_tail():
    block = init_state(666, 0x3415)
    assert len(block) == 666
    assert block[-1] == 0
    text = block.split(b"\0", 1)[0]
    assert all(b == 0 for b in block[len(text):])


def test_init_state_first_token_follows_seed():
    block = init_state(100, 0)
    assert block.startswith(b"5012,")


def test_init_state_rejects_empty_size():
    with pytest.raises(ValueError):
        init_state(0, 1)


@pytest.mark.parametrize(
    "token, expected",
    [
        (b"5012", CoreState.INT),
        (b"-874", CoreState.INT),
        (b"35.54400", CoreState.FLOAT),
        (b".1234500", CoreState.FLOAT),
        (b"5.500e+3", CoreState.SCIENTIFIC),
        (b"-.123e-2", CoreState.SCIENTIFIC),
        (b"34.0e-T^", CoreState.INVALID),
    ],
)
def test_state_transition_classifies_token(token, expected):
    data = token + b",next"
    state, pos = state_transition(data, 0, _counts())
    assert state == expected
    if expected != CoreState.INVALID:
        assert data[pos:] == b"next"


def test_state_transition_stops_right_after_invalid_symbol():
    data = b"T0.3e-1F,5012"
    state, pos = state_transition(data, 0, _counts())
    assert state == CoreState.INVALID
    assert data[pos:] == b"0.3e-1F,5012"


def test_state_transition_stops_at_zero_byte():
    data = b"1234\0\0"
    state, pos = state_transition(data, 0, _counts())
    assert state == CoreState.INT
    assert data[pos] == 0


def test_state_transition_counts_plain_integer():
    counts = _counts()
    state_transition(b"5012,", 0, counts)
    assert counts[CoreState.START] == 1
    assert sum(counts) == counts[CoreState.START]


def test_state_transition_accumulates_counts():
    counts = _counts()
    state_transition(b"+122,", 0, counts)
    once = list(counts)
    state_transition(b"+122,", 0, counts)
    assert counts == [2 * c for c in once]


def test_bench_state_equal_seeds_restore_block():
    block = init_state(666, 0x3415)
    original = bytes(block)
    bench_state(len(block), block, 0x3415, 0x3415, 0x22, 0)
    assert bytes(block) == original


def test_bench_state_different_seeds_change_block():
    block = init_state(666, 0x3415)
    original = bytes(block)
    bench_state(len(block), block, 0x3415, 0, 0x22, 0)
    assert bytes(block) != original


def test_bench_state_is_repeatable():
    block = init_state(666, 0x3415)
    first = bench_state(len(block), block, 0x3415, 0x3415, 0x22, 0x1234)
    second = bench_state(len(block), block, 0x3415, 0x3415, 0x22, 0x1234)
    assert first == second
    assert 0 <= first <= 0xFFFF


def test_bench_state_rejects_non_positive_step():
    block = init_state(100, 1)
    with pytest.raises(ValueError):
        bench_state(len(block), block, 1, 1, 0, 0)


def test_bench_state_rejects_short_block():
    block = init_state(100, 1)
    with pytest.raises(ValueError):
        bench_state(200, block, 1, 1, 0x22, 0)