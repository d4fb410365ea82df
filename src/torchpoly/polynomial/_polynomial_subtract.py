import torch

from ._constants import DTYPE
from ._polynomial import Polynomial
from ._polynomial_operand import check_operands


def polynomial_subtract(p: Polynomial, q: Polynomial) -> Polynomial:
    """Subtract two polynomials.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to subtract.

    Returns
    -------
    Polynomial
        Difference p - q with capacity
        ``max(p.leading_exponent, q.leading_exponent) + 1``.

    Raises
    ------
    NullOperandError
        If either operand is missing.
    """
    check_operands(p, q)

    n_p = p.leading_exponent + 1
    n_q = q.leading_exponent + 1

    result = torch.zeros(max(n_p, n_q), dtype=DTYPE)

    result[:n_p] += p.coefficients[:n_p]
    result[:n_q] -= q.coefficients[:n_q]

    return Polynomial._from_coeffs(result)


def polynomial_negate(p: Polynomial) -> Polynomial:
    """Negate polynomial, trimmed to ``p.leading_exponent + 1``."""
    check_operands(p)

    n = p.leading_exponent + 1

    return Polynomial._from_coeffs(-p.coefficients[:n])
