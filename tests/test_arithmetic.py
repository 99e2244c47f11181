import math

import pytest

from stackpp.types.value import Bool, Number, String


@pytest.mark.parametrize(
    "source,expected",
    [
        ("1 2 add", 3.0),
        ("7 2 sub", 5.0),
        ("2 7 sub", -5.0),
        ("3 4 mul", 12.0),
        ("7 2 div", 3.5),
        ("7 2 mod", 1.0),
        ("-7 2 mod", -1.0),
        ("7 -2 mod", 1.0),
        ("5.5 2 mod", 1.5),
        ("2 10 pow", 1024.0),
        ("4 0.5 pow", 2.0),
        ("2 -1 pow", 0.5),
        ("1 2 3 add mul", 5.0),
        ("0.1 0.2 add", 0.1 + 0.2),
    ]
)
def test_arithmetic(run, source, expected):
    assert run(source).stack == [Number(expected)]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("1 0 div", math.inf),
        ("-1 0 div", -math.inf),
        ("1 -0.0 div", -math.inf),
        ("10 1000 pow", math.inf),
        ("-10 1001 pow", -math.inf),
        ("0 -1 pow", math.inf),
        ("5 inf mod", 5.0),
    ]
)
def test_arithmetic_follows_float_semantics(run, source, expected):
    assert run(source).stack == [Number(expected)]


@pytest.mark.parametrize("source", ["0 0 div", "5 0 mod", "inf 2 mod", "-8 0.5 pow", "nan 1 add"])
def test_arithmetic_produces_nan(run, source):
    [result] = run(source).stack
    assert isinstance(result, Number)
    assert math.isnan(result.as_number())


@pytest.mark.parametrize(
    "source,expected",
    [
        ('"3" 4 add', 4.0),
        ("$x 1 add", 1.0),
        ("{1} 1 add", 1.0),
        ("5 add", 5.0),
        ("1 1 equal 1 add", 1.0),
    ]
)
def test_non_numbers_coerce_to_zero(run, source, expected):
    assert run(source).stack == [Number(expected)]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("1 2 less-than", True),
        ("2 1 less-than", False),
        ("2 2 less-than", False),
        ("2 1 greater-than", True),
        ("1 2 greater-than", False),
        ('"a" 1 less-than', True),
        ("nan 1 less-than", False),
        ('"a" "a" equal', True),
        ('"a" "b" equal', False),
        ("1 1.0 equal", True),
        ('1 "1" equal', True),
        ("$x $x equal", True),
        ('$x "x" equal', True),
    ]
)
def test_comparisons(run, source, expected):
    assert run(source).stack == [Bool(expected)]


def test_binary_ops_pop_right_operand_first(run):
    assert run('"left" "right" concat').stack == [String("leftright")]
    run("pop 10 4 sub")
    assert run("").stack == [Number(6.0)]
