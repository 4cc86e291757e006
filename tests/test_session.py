import math

import pytest

from rpncalc.session import ERROR_OUTPUT, CalcState
from rpncalc.utils import format_result


@pytest.mark.parametrize(
    "value, expected",
    [
        pytest.param(7.0, "7"),
        pytest.param(-3.0, "-3"),
        pytest.param(0.5, "0.5"),
        pytest.param(3.5, "3.5"),
        pytest.param(1e-07, "0.0000001"),
        pytest.param(-2.5e-10, "-0.00000000025"),
        pytest.param(0.1, "0.1"),
        pytest.param(math.inf, "inf"),
        pytest.param(-math.inf, "-inf"),
        pytest.param(math.nan, "NaN"),
    ],
)
def test_format_result(value: float, expected: str) -> None:
    assert format_result(value) == expected


@pytest.mark.parametrize(
    "code, expected_output",
    [
        pytest.param("2+3*4", "14"),
        pytest.param("7/2", "3.5"),
        pytest.param("1/10000000", "0.0000001"),
        pytest.param("1/0", "inf"),
        pytest.param("(1+2", ERROR_OUTPUT),
        pytest.param("2@3", ERROR_OUTPUT),
        pytest.param("1 +", ERROR_OUTPUT),
        pytest.param("(1)(2)", ERROR_OUTPUT),
        pytest.param("", ERROR_OUTPUT),
    ],
)
def test_calculate(code: str, expected_output: str) -> None:
    state = CalcState(input=code)
    assert state.calculate() == expected_output
    assert state.output == expected_output
    assert state.input == code


def test_initial_state() -> None:
    state = CalcState()
    assert state.input == ""
    assert state.output == "0"
    assert state.memory == ""


def test_memory_save_and_recall() -> None:
    state = CalcState()
    for key in ["1", "2", "*", "3", "="]:
        state.press(key)
    assert state.output == "36"

    state.press("M+")
    assert state.memory == "36"

    state.press("C")
    assert state.input == ""
    assert state.output == "36"

    for key in ["MR", "+", "4", "="]:
        state.press(key)
    assert state.input == "36+4"
    assert state.output == "40"
    assert state.memory == "36"


def test_memory_recall_of_error_output_fails_calculation() -> None:
    state = CalcState(input="(")
    state.calculate()
    state.memory_save()
    state.clear()
    state.memory_recall()
    assert state.input == ERROR_OUTPUT
    assert state.calculate() == ERROR_OUTPUT


def test_press_is_case_insensitive() -> None:
    state = CalcState(input="1+1", output="5")
    state.press("m+")
    assert state.memory == "5"
    state.press("mr")
    assert state.input == "1+15"
    state.press("c")
    assert state.input == ""


@pytest.mark.parametrize(
    "code, expected_output",
    [
        pytest.param("1" + "0" * 400, "inf"),
        pytest.param("1" + "0" * 400 + "-" + "1" + "0" * 400, "NaN"),
        pytest.param("1/" + "1" + "0" * 400, "0"),
    ],
)
def test_calculate_number_beyond_float_range(code: str, expected_output: str) -> None:
    state = CalcState(input=code)
    assert state.calculate() == expected_output
