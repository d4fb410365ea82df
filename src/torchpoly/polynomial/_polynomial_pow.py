import logging
import operator

from ._constants import MAX_EXPONENT
from ._exceptions import PowerNotAllowedError
from ._polynomial import Polynomial
from ._polynomial_multiply import polynomial_multiply
from ._polynomial_operand import check_operands
from ._polynomial_trim import polynomial_trim

logger = logging.getLogger(__name__)


def polynomial_is_power_allowed(p: Polynomial, power: int) -> bool:
    """Check whether ``p`` may be raised to ``power``.

    A power is allowed when it is non-negative and
    ``(p.leading_exponent + 1) * power`` stays within ``MAX_EXPONENT``.
    Call this before :func:`polynomial_pow`.

    Raises
    ------
    NullOperandError
        If ``p`` is missing.
    """
    check_operands(p)

    power = operator.index(power)

    return power >= 0 and (p.leading_exponent + 1) * power <= MAX_EXPONENT


def polynomial_pow(p: Polynomial, power: int) -> Polynomial:
    """Raise polynomial to non-negative integer power.

    Multiplies an accumulator seeded to the constant 1 by ``p``, ``power``
    times. The cost is ``power`` full multiplications; the result size is
    bounded by :func:`polynomial_is_power_allowed`.

    Parameters
    ----------
    p : Polynomial
        Base polynomial.
    power : int
        Non-negative integer exponent.

    Returns
    -------
    Polynomial
        p raised to ``power``. ``power == 0`` gives the constant 1 of
        capacity 1; ``power == 1`` gives a copy of ``p`` trimmed to
        ``p.leading_exponent + 1``.

    Raises
    ------
    NullOperandError
        If ``p`` is missing.
    PowerNotAllowedError
        If ``polynomial_is_power_allowed(p, power)`` is false.

    Examples
    --------
    >>> p = polynomial([1.0, 1.0])  # 1 + x
    >>> polynomial_pow(p, 3).coefficients  # 1 + 3x + 3x^2 + x^3
    tensor([1., 3., 3., 1.], dtype=torch.float64)
    """
    if not polynomial_is_power_allowed(p, power):
        raise PowerNotAllowedError(
            f"Power {power} is negative or exceeds the maximum result "
            f"exponent {MAX_EXPONENT} for leading exponent "
            f"{p.leading_exponent}"
        )

    if power == 0:
        result = Polynomial(1)
        result.set_coefficient(0, 1.0)
        return result

    if power == 1:
        return polynomial_trim(p)

    logger.debug(
        "Raising polynomial of leading exponent %d to power %d",
        p.leading_exponent,
        power,
    )

    result = Polynomial((p.leading_exponent + 1) * power)
    result.set_coefficient(0, 1.0)

    for _ in range(power):
        result = polynomial_multiply(result, p)

    return result
