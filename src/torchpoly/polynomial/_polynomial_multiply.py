import torch

from ._constants import DTYPE
from ._polynomial import Polynomial
from ._polynomial_operand import check_operands


def polynomial_multiply(p: Polynomial, q: Polynomial) -> Polynomial:
    """Multiply two polynomials.

    Computes the convolution of the coefficients up to each leading
    exponent. Every pair ``(i, j)`` contributes ``p[i] * q[j]`` to the
    coefficient of x^(i+j), for O(deg(p) * deg(q)) multiplications.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to multiply.

    Returns
    -------
    Polynomial
        Product p * q with capacity
        ``p.leading_exponent + q.leading_exponent + 1``.

    Raises
    ------
    NullOperandError
        If either operand is missing.

    Examples
    --------
    >>> p = polynomial([1.0, 1.0])   # x + 1
    >>> q = polynomial([-1.0, 1.0])  # x - 1
    >>> polynomial_multiply(p, q).coefficients
    tensor([-1.,  0.,  1.], dtype=torch.float64)
    """
    check_operands(p, q)

    deg_p = p.leading_exponent
    deg_q = q.leading_exponent

    p_coeffs = p.coefficients[: deg_p + 1]
    q_coeffs = q.coefficients[: deg_q + 1]

    result = torch.zeros(deg_p + deg_q + 1, dtype=DTYPE)

    # Iterate over the rows of the shorter operand; each row lands on
    # exponents i .. i + deg(longer).
    if deg_p <= deg_q:
        shorter, longer = p_coeffs, q_coeffs
    else:
        shorter, longer = q_coeffs, p_coeffs

    n_longer = longer.shape[0]

    for i in range(shorter.shape[0]):
        result[i : i + n_longer] += shorter[i] * longer

    return Polynomial._from_coeffs(result)
