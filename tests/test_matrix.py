import pytest

from rvbench.matrix import (
    MatParams,
    bench_matrix,
    init_matrix,
    matrix_add_const,
    matrix_mul_matrix,
    matrix_mul_matrix_bitextract,
    matrix_mul_vect,
    matrix_sum,
    matrix_test,
)


def _identity(n):
    return [1 if row == col else 0 for row in range(n) for col in range(n)]


def test_init_matrix_dimension_for_2k_block():
    params = init_matrix(666, 0)
    assert params.n == 9
    assert len(params.a) == params.n * params.n
    assert len(params.b) == params.n * params.n
    assert len(params.c) == params.n * params.n


def test_init_matrix_zero_seed_behaves_as_one():
    assert init_matrix(666, 0) == init_matrix(666, 1)


def test_init_matrix_small_values_in_a():
    params = init_matrix(2000, 0x34153415)
    assert all(0 <= x <= 255 for x in params.a)
    assert all(-32768 <= x <= 32767 for x in params.b)


def test_init_matrix_rejects_empty_block():
    with pytest.raises(ValueError):
        init_matrix(0, 1)


def test_add_const_round_trip():
    params = init_matrix(666, 7)
    original = list(params.a)
    matrix_add_const(params.n, params.a, 123)
    assert params.a != original
    matrix_add_const(params.n, params.a, -123)
    assert params.a == original


def test_add_const_wraps_at_16_bits():
    a = [32767]
    matrix_add_const(1, a, 1)
    assert a == [-32768]


def test_mul_matrix_by_identity_is_unchanged():
    params = init_matrix(666, 3)
    n = params.n
    c = [0] * (n * n)
    matrix_mul_matrix(n, c, params.a, _identity(n))
    assert c == params.a


def test_mul_vect_by_unit_vector_selects_first_column():
    params = init_matrix(666, 5)
    n = params.n
    c = [-1] * (n * n)
    unit = [1] + [0] * (n * n - 1)
    matrix_mul_vect(n, c, params.a, unit)
    assert c[:n] == params.a[0:n * n:n]
    assert c[n:] == [-1] * (n * n - n)


def test_bitextract_with_zero_matrix_gives_zeros():
    params = init_matrix(666, 9)
    n = params.n
    c = [5] * (n * n)
    matrix_mul_matrix_bitextract(n, c, [0] * (n * n), params.b)
    assert c == [0] * (n * n)


def test_matrix_sum_of_zero_matrix():
    assert matrix_sum(3, [0] * 9, 100) == 0


def test_matrix_sum_counts_clip_overflow():
    assert matrix_sum(1, [5], -4096) == 10


def test_matrix_test_restores_inputs():
    params = init_matrix(666, 0x3415)
    a_before = list(params.a)
    b_before = list(params.b)
    matrix_test(params.n, params.c, params.a, params.b, 0x22)
    assert params.a == a_before
    assert params.b == b_before


def test_bench_matrix_is_repeatable_and_16_bit():
    params = init_matrix(666, 0)
    first = bench_matrix(params, 0x55, 0)
    second = bench_matrix(params, 0x55, 0)
    assert first == second
    assert 0 <= first <= 0xFFFF


def test_matparams_defaults_result_matrix():
    params = MatParams(n=2, a=[1, 2, 3, 4], b=[4, 3, 2, 1])
    assert params.c == [0, 0, 0, 0]