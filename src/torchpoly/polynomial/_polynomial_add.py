import torch

from ._constants import DTYPE
from ._polynomial import Polynomial
from ._polynomial_operand import check_operands


def polynomial_add(p: Polynomial, q: Polynomial) -> Polynomial:
    """Add two polynomials.

    Computes element-wise sum of coefficients with zero-padding for
    polynomials of different degrees.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to add.

    Returns
    -------
    Polynomial
        Sum p + q with capacity
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
    result[:n_q] += q.coefficients[:n_q]

    return Polynomial._from_coeffs(result)
