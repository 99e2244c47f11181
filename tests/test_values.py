import math

import pytest

from stackpp.types.instruction import Opcode
from stackpp.types.value import (
    STACK_EMPTY,
    Block,
    Bool,
    Error,
    ErrorKind,
    Instruction,
    Number,
    String,
    Variable,
    format_number,
)


ADD = Instruction(Opcode.ADD)


@pytest.mark.parametrize(
    "value,number,string,flag",
    [
        (Number(2.5), 2.5, "2.5", False),
        (Number(0.0), 0.0, "0", False),
        (Number(1.0), 1.0, "1", False),
        (String("12"), 0.0, "12", False),
        (String(""), 0.0, "", False),
        (Bool(True), 0.0, "", True),
        (Bool(False), 0.0, "", False),
        (Variable("x"), 0.0, "x", False),
        (ADD, 0.0, "", False),
        (Block((Number(1.0),)), 0.0, "", False),
        (STACK_EMPTY, 0.0, "", False),
    ]
)
def test_coercions_are_total(value, number, string, flag):
    assert value.as_number() == number
    assert value.as_string() == string
    assert value.as_bool() is flag


def test_block_coerces_to_its_body():
    body = (Number(1.0), ADD)
    assert Block(body).as_block() == body


@pytest.mark.parametrize(
    "value", [Number(3.0), String("s"), Bool(True), Variable("v"), ADD, STACK_EMPTY]
)
def test_non_block_coerces_to_single_element_block(value):
    assert value.as_block() == (value,)


def test_stack_empty_is_an_error_value():
    assert STACK_EMPTY == Error(ErrorKind.STACK_EMPTY)
    assert STACK_EMPTY.kind.value == "StackEmpty"


def test_values_are_immutable():
    n = Number(1.0)
    with pytest.raises(AttributeError):
        n.value = 2.0


def test_values_compare_structurally():
    assert Block((Number(1.0), String("a"))) == Block((Number(1.0), String("a")))
    assert Number(1.0) != String("1")
    assert Variable("x") != String("x")


@pytest.mark.parametrize(
    "n,text",
    [
        (7.0, "7"),
        (100.0, "100"),
        (0.5, "0.5"),
        (-2.5, "-2.5"),
        (3.14, "3.14"),
        (0.1 + 0.2, "0.30000000000000004"),
        (-0.0, "-0"),
        (1e21, "1000000000000000000000"),
        (1e-7, "0.0000001"),
        (math.nan, "NaN"),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
    ]
)
def test_format_number(n, text):
    assert format_number(n) == text
