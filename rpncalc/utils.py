import enum
import math
from decimal import Decimal


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def format_result(value: float) -> str:
    """Renders evaluation result for display without exponent: 7.0 -> '7', 1e-07 -> '0.0000001'"""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    # shortest repr digits, expanded to positional notation
    return format(Decimal(repr(value)), "f")
