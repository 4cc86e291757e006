import math
import operator
from dataclasses import dataclass
from typing import Callable, Optional

from rpncalc.tokenizer import Bracket, Number, Operator, Token, lexeme


@dataclass
class CalcRuntimeError(Exception):
    errmsg: str

    def __str__(self) -> str:
        return f"[Runtime error] {self.errmsg}"


@dataclass
class InsufficientOperandsError(CalcRuntimeError):
    operator: Operator
    operand_count: int


def ieee_div(a: float, b: float) -> float:
    """Float division returning inf/-inf/nan on zero divisor instead of raising"""
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def number_to_float(value: int) -> float:
    """Numbers beyond float range saturate to inf like an overflowing float operation"""
    try:
        return float(value)
    except OverflowError:
        return math.inf


BinaryOperationImpl = Callable[[float, float], float]

binary_operation_impls: dict[Operator, BinaryOperationImpl] = {
    Operator.ADD: operator.add,
    Operator.SUB: operator.sub,
    Operator.MUL: operator.mul,
    Operator.DIV: ieee_div,
}


def evaluate(tokens: list[Token]) -> Optional[float]:
    """Reduces postfix token sequence to a single value.

    Returns None when the sequence does not reduce to exactly one value, e.g. for
    two numbers without an operator between them or for an empty sequence.
    """
    stack: list[float] = []
    for token in tokens:
        if isinstance(token, Number):
            stack.append(number_to_float(token.value))
        elif isinstance(token, Operator):
            if len(stack) < 2:
                raise InsufficientOperandsError(
                    f"Operator {lexeme(token)!r} needs two operands, found {len(stack)}",
                    operator=token,
                    operand_count=len(stack),
                )
            right = stack.pop()
            left = stack.pop()
            stack.append(binary_operation_impls[token](left, right))
        elif isinstance(token, Bracket):
            raise CalcRuntimeError(f"Unexpected bracket in postfix expression: {lexeme(token)!r}")
        else:
            raise CalcRuntimeError(f"Unexpected token: {token!r}")

    if len(stack) != 1:
        return None
    return stack[0]
