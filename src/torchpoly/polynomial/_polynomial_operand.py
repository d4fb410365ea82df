from ._exceptions import NullOperandError
from ._polynomial import Polynomial


def check_operands(*operands) -> None:
    """Raise NullOperandError unless every operand is a Polynomial."""
    for operand in operands:
        if operand is None:
            raise NullOperandError("Polynomial operand is missing")

        if not isinstance(operand, Polynomial):
            raise NullOperandError(
                f"Expected Polynomial, got {type(operand).__name__}"
            )
