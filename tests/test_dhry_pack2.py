import pytest

from rvbench.dhry_pack2 import (
    ARRAY_SIZE,
    Enumeration,
    Globals,
    Record,
    func_1,
    func_2,
    func_3,
    proc_6,
    proc_7,
    proc_8,
)

STR_1 = "DHRYSTONE PROGRAM, 1'ST STRING"
STR_2 = "DHRYSTONE PROGRAM, 2'ND STRING"


@pytest.mark.parametrize(
    "int_1, int_2, expected", [(2, 3, 7), (10, 5, 17), (6, 10, 18)]
)
def test_proc_7_documented_calls(int_1, int_2, expected):
    assert proc_7(int_1, int_2) == expected


def test_func_3():
    assert func_3(Enumeration.IDENT_3) is True
    assert func_3(Enumeration.IDENT_1) is False


@pytest.mark.parametrize(
    "value, expected",
    [
        (Enumeration.IDENT_1, Enumeration.IDENT_1),
        (Enumeration.IDENT_3, Enumeration.IDENT_2),
        (Enumeration.IDENT_4, Enumeration.IDENT_4),
        (Enumeration.IDENT_5, Enumeration.IDENT_3),
    ],
)
def test_proc_6_mapping(value, expected):
    assert proc_6(value, Globals()) == expected


def test_proc_6_ident_2_depends_on_int_glob():
    assert proc_6(Enumeration.IDENT_2, Globals(int_glob=0)) == Enumeration.IDENT_4
    assert proc_6(Enumeration.IDENT_2, Globals(int_glob=101)) == Enumeration.IDENT_1


def test_proc_8_updates_arrays():
    glob = Globals()
    arr_2 = glob.arr_2_glob
    arr_2[8][7] = 10
    proc_8(glob.arr_1_glob, arr_2, 3, 7, glob)
    assert glob.arr_1_glob[8] == 7
    assert glob.arr_1_glob[9] == 7
    assert glob.arr_1_glob[38] == 8
    assert arr_2[8][8] == 8
    assert arr_2[8][9] == 8
    assert arr_2[8][7] == 11
    assert arr_2[28][8] == 7
    assert glob.int_glob == 5


def test_proc_8_repeated_increments():
    glob = Globals()
    glob.arr_2_glob[8][7] = 10
    for _ in range(100):
        proc_8(glob.arr_1_glob, glob.arr_2_glob, 3, 7, glob)
    assert glob.arr_2_glob[8][7] == 100 + 10


def test_globals_array_shapes():
    glob = Globals()
    assert len(glob.arr_1_glob) == ARRAY_SIZE
    assert all(len(row) == ARRAY_SIZE for row in glob.arr_2_glob)
    glob.arr_2_glob[0][0] = 1
    assert glob.arr_2_glob[1][0] == 0


def test_func_1_different_characters():
    glob = Globals(ch_1_glob="Q")
    assert func_1("A", "C", glob) == Enumeration.IDENT_1
    assert glob.ch_1_glob == "Q"


def test_func_1_equal_characters_store_global():
    glob = Globals()
    assert func_1("C", "C", glob) == Enumeration.IDENT_2
    assert glob.ch_1_glob == "C"


def test_func_2_benchmark_strings_false():
    glob = Globals(int_glob=5)
    assert func_2(STR_1, STR_2, glob) is False
    assert glob.int_glob == 5


def test_func_2_greater_string_sets_int_glob():
    glob = Globals()
    assert func_2("ZZZZZ", "AAAAA", glob) is True
    assert glob.int_glob == 10


def test_func_2_nonterminating_input_raises():
    with pytest.raises(ValueError):
        func_2("ABCDE", "XXXCX", Globals())


def test_record_self_reference_is_allowed():
    record = Record(int_comp=40, str_comp="DHRYSTONE PROGRAM, SOME STRING")
    record.ptr_comp = record
    assert record.ptr_comp is record
    assert "DHRYSTONE PROGRAM, SOME STRING" in repr(record)