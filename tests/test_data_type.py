import math

import pytest

from wake.data_type import DataCell, DataType


def integer(value):
    return DataCell(DataType.INTEGER, value)


def flt(value):
    return DataCell(DataType.FLOAT, value)


# Cases carried over from the source's own tests.


def test_can_create_from_string():
    d = DataCell.of("hello")
    assert d == "hello"
    assert d != "world"


def test_can_create_from_str():
    d = DataCell.of("hello")
    assert d == DataCell(DataType.TEXT, "hello")
    assert d == "hello"
    assert d != "world"


def test_can_create_from_float():
    d = flt(1.0)
    assert d == 1.0
    assert d != 2.0
    assert d == 1


def test_can_create_from_int():
    d = integer(1)
    assert d == 1
    assert d != 2
    assert d == 1.0


def test_can_add_datacell_simple():
    assert integer(1) + integer(2) == integer(3)


def test_can_sum_datacells():
    cells = [integer(i) for i in range(1, 10)]
    assert DataCell.sum(cells) == integer(45)


def test_can_count_datacells():
    cells = []
    for i in range(1, 10):
        cells.append(integer(i))
        if i % 2 == 0:
            cells.append(DataCell.null())
    assert DataCell.count(cells) == integer(9)


def test_can_avg_datacells():
    cells = [integer(i) for i in range(1, 10)]
    assert DataCell.avg(cells) == DataCell(DataType.TUPLE, (integer(45), integer(9)))


def test_can_hash_datacell():
    assert integer(1).hash_value() == integer(1).hash_value()
    assert DataCell.vector_hash([integer(1), DataCell.of("hello")]) == DataCell.vector_hash(
        [integer(1), DataCell.of("hello")]
    )
    assert DataCell.vector_hash([integer(1), DataCell.of("hello")]) != DataCell.vector_hash(
        [integer(1), DataCell.of("hello ")]
    )


def test_can_add_datacell():
    assert integer(1) + integer(2) == integer(3)
    assert integer(1) + flt(4.0) == flt(5.0)
    assert flt(4.0) + flt(2.5) == flt(6.5)


def test_can_sub_datacell():
    assert integer(1) - integer(2) == integer(-1)
    assert integer(1) - flt(4.0) == flt(-3.0)
    assert flt(4.0) - flt(2.5) == flt(1.5)


def test_can_mul_datacell():
    assert integer(1) * integer(2) == integer(2)
    assert integer(1) * flt(4.0) == flt(4.0)
    assert flt(4.0) * flt(2.5) == flt(10.0)


def test_can_div_datacell():
    assert integer(1) / integer(2) == flt(0.5)
    assert integer(1) / flt(4.0) == flt(0.25)
    assert flt(4.0) / flt(2.5) == flt(4.0 / 2.5)


# Further behaviour.


def test_integer_division_result_is_float_kind():
    result = integer(4) / integer(2)
    assert result.dtype is DataType.FLOAT
    assert result.value == 2.0


def test_division_by_zero_follows_float_rules():
    assert float(integer(1) / integer(0)) == math.inf
    assert float(flt(-1.0) / flt(0.0)) == -math.inf
    assert math.isnan(float(integer(0) / integer(0)))


def test_integer_overflow_raises():
    with pytest.raises(OverflowError):
        integer(2**31 - 1) + integer(1)


def test_text_arithmetic_raises():
    with pytest.raises(TypeError, match="ADD not implemented"):
        DataCell.of("a") + integer(1)
    with pytest.raises(TypeError, match="MUL not implemented"):
        integer(1) * DataCell.null()


def test_cells_of_different_kind_are_not_equal():
    assert integer(1) != flt(1.0)
    assert DataCell.of(True) != 1


def test_of_infers_kinds():
    assert DataCell.of(True).dtype is DataType.BOOLEAN
    assert DataCell.of(3).dtype is DataType.INTEGER
    assert DataCell.of(3.5).dtype is DataType.FLOAT
    assert DataCell.of(None) == DataCell.null()
    assert DataCell.of((1, 2.5)) == DataCell(DataType.TUPLE, (integer(1), flt(2.5)))


def test_of_rejects_out_of_range_integer():
    with pytest.raises(OverflowError):
        DataCell.of(2**31)


@pytest.mark.parametrize(
    "text, dtype, expected",
    [
        ("true", DataType.BOOLEAN, DataCell(DataType.BOOLEAN, True)),
        ("false", DataType.BOOLEAN, DataCell(DataType.BOOLEAN, False)),
        ("42", DataType.UNSIGNED_INT, DataCell(DataType.UNSIGNED_INT, 42)),
        ("-17", DataType.INTEGER, DataCell(DataType.INTEGER, -17)),
        ("+5", DataType.INTEGER, DataCell(DataType.INTEGER, 5)),
        ("2.5", DataType.FLOAT, DataCell(DataType.FLOAT, 2.5)),
        ("abc", DataType.TEXT, DataCell(DataType.TEXT, "abc")),
        ("", DataType.INTEGER, DataCell(DataType.NULL, None)),
        ("", DataType.TUPLE, DataCell(DataType.NULL, None)),
    ],
)
def test_parse(text, dtype, expected):
    assert DataCell.parse(text, dtype) == expected


@pytest.mark.parametrize(
    "text, dtype",
    [
        ("abc", DataType.INTEGER),
        (" 1", DataType.INTEGER),
        ("2147483648", DataType.INTEGER),
        ("-1", DataType.UNSIGNED_INT),
        ("True", DataType.BOOLEAN),
        ("1_0", DataType.FLOAT),
        ("1", DataType.TUPLE),
        ("1", DataType.NULL),
    ],
)
def test_parse_rejects_invalid(text, dtype):
    with pytest.raises(ValueError):
        DataCell.parse(text, dtype)


def test_parse_bytes():
    assert DataCell.parse_bytes(b"12", DataType.INTEGER) == integer(12)
    assert DataCell.parse_bytes(b"", DataType.TEXT) == DataCell.null()
    assert DataCell.parse_bytes("héllo".encode(), DataType.TEXT) == "héllo"


def test_hash_value_matches_vector_hash_of_one():
    cell = DataCell.of("key")
    assert cell.hash_value() == DataCell.vector_hash([cell])


def test_floats_do_not_contribute_to_hash():
    assert flt(1.5).hash_value() == flt(2.5).hash_value()
    assert flt(1.5).hash_value() == DataCell.null().hash_value()


def test_python_hash_consistent_with_equality():
    assert hash(integer(1)) == hash(1)
    assert hash(DataCell.of("x")) == hash("x")
    assert len({integer(3), integer(3), integer(4)}) == 2


def test_ordering_within_kind():
    assert integer(1) < integer(2)
    assert flt(2.5) > flt(1.0)
    assert DataCell.of("a") <= DataCell.of("b")
    assert DataCell.null() <= DataCell.null()
    assert not DataCell.null() < DataCell.null()


def test_ordering_across_kinds_uses_kind_rank():
    assert integer(5) < flt(1.0)
    assert DataCell.of("z") < DataCell.null()
    assert DataCell.of(True) < integer(-100)


def test_ordering_with_plain_value_raises():
    with pytest.raises(TypeError):
        integer(1) < 2


def test_min_and_max():
    cells = [integer(5), integer(2), integer(9)]
    assert DataCell.min(cells) == integer(2)
    assert DataCell.max(cells) == integer(9)
    assert DataCell.max([flt(1.5), integer(3)]) == flt(3.0)
    assert DataCell.min([]) == DataCell.null()


def test_sum_typed_after_first_cell():
    assert DataCell.sum([integer(1), flt(2.9)]) == integer(3)
    assert DataCell.sum([flt(1.5), integer(2)]) == flt(3.5)
    assert DataCell.sum([]) == DataCell.null()


def test_sum_of_text_raises():
    with pytest.raises(TypeError, match="SUM not implemented"):
        DataCell.sum([DataCell.of("a")])


def test_numeric_conversions():
    assert int(flt(3.9)) == 3
    assert int(flt(-3.9)) == -3
    assert int(flt(math.nan)) == 0
    assert int(flt(1e20)) == 2**31 - 1
    assert float(integer(7)) == 7.0
    with pytest.raises(TypeError):
        int(DataCell.of("x"))
    with pytest.raises(TypeError):
        float(DataCell.null())


@pytest.mark.parametrize(
    "cell, text",
    [
        (DataCell(DataType.BOOLEAN, True), "true"),
        (DataCell(DataType.INTEGER, -4), "-4"),
        (DataCell(DataType.FLOAT, 1.0), "1"),
        (DataCell(DataType.FLOAT, 0.1), "0.1"),
        (DataCell(DataType.FLOAT, 1e20), "100000000000000000000"),
        (DataCell(DataType.FLOAT, math.nan), "NaN"),
        (DataCell(DataType.TEXT, "abc"), "abc"),
        (DataCell.of((1, 2.5)), "(1,2.5)"),
    ],
)
def test_str(cell, text):
    assert str(cell) == text


def test_str_of_null_raises():
    with pytest.raises(ValueError, match="Invalid DataCell"):
        str(DataCell.null())