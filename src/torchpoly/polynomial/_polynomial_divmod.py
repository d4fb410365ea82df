import logging

from ._exceptions import DivisionByZeroError
from ._polynomial import Polynomial
from ._polynomial_multiply import polynomial_multiply
from ._polynomial_operand import check_operands
from ._polynomial_subtract import polynomial_subtract
from ._polynomial_trim import polynomial_trim

logger = logging.getLogger(__name__)


def polynomial_divmod(
    p: Polynomial, q: Polynomial
) -> tuple[Polynomial, Polynomial]:
    """Divide polynomial p by q, returning quotient and remainder.

    Computes quotient and remainder such that p = q * quotient + remainder,
    where deg(remainder) < deg(q).

    Three cases are distinguished:

    * ``q`` is a non-zero constant: every coefficient of ``p`` up to its
      leading exponent is divided by it. There is no remainder term, so the
      remainder is the zero polynomial of capacity 1.
    * ``deg(p) < deg(q)``: the quotient is the zero polynomial of capacity
      1 and the remainder is ``p`` trimmed to its leading exponent.
    * otherwise, long division. The remainder starts as a full-capacity
      copy of ``p``; each step divides its leading coefficient by that of
      ``q``, records it in the quotient and subtracts the matching multiple
      of ``q``, until the remainder's degree drops below ``deg(q)``.

    Parameters
    ----------
    p : Polynomial
        Dividend polynomial.
    q : Polynomial
        Divisor polynomial. Must not be the zero polynomial.

    Returns
    -------
    quotient : Polynomial
        Quotient of division.
    remainder : Polynomial
        Remainder of division.

    Raises
    ------
    NullOperandError
        If either operand is missing.
    DivisionByZeroError
        If divisor is zero polynomial.

    Examples
    --------
    >>> p = polynomial([-1.0, 0.0, 0.0, 1.0])  # x^3 - 1
    >>> q = polynomial([-1.0, 1.0])  # x - 1
    >>> quot, rem = polynomial_divmod(p, q)
    >>> quot.coefficients  # x^2 + x + 1
    tensor([1., 1., 1.], dtype=torch.float64)
    >>> rem.is_zero()
    True
    """
    check_operands(p, q)

    if q.is_zero():
        raise DivisionByZeroError("Cannot divide by zero polynomial")

    deg_p = p.leading_exponent
    deg_q = q.leading_exponent

    if deg_q == 0:
        logger.debug("Dividing by constant %r", q.leading_coefficient)

        coeffs = p.coefficients[: deg_p + 1] / q.leading_coefficient

        return Polynomial._from_coeffs(coeffs), Polynomial(1)

    if deg_p < deg_q:
        logger.debug(
            "Dividend degree %d below divisor degree %d", deg_p, deg_q
        )

        return Polynomial(1), polynomial_trim(p)

    logger.debug("Long division of degree %d by degree %d", deg_p, deg_q)

    quotient = Polynomial(deg_p - deg_q + 1)
    remainder = p.copy()

    while True:
        lead = remainder.leading_exponent
        i = lead - deg_q

        quotient.set_coefficient(
            i, remainder.leading_coefficient / q.leading_coefficient
        )

        term = Polynomial(i + 1)
        term.set_coefficient(i, quotient.get_coefficient(i))

        remainder = polynomial_subtract(
            remainder, polynomial_multiply(term, q)
        )

        # The eliminated coefficient is zero by construction; drop any
        # rounding residue so the degree strictly decreases.
        remainder.set_coefficient(lead, 0.0)

        if remainder.leading_exponent < deg_q:
            break

    return quotient, remainder
