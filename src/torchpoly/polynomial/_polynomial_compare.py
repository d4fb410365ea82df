import torch

from ._polynomial import Polynomial
from ._polynomial_operand import check_operands


def polynomial_compare(p: Polynomial, q: Polynomial) -> int:
    """Compare two polynomials by value, ignoring capacity.

    Polynomials are ordered by leading exponent first. On a tie the
    coefficients are compared from the leading exponent down to 0 and the
    first differing coefficient decides.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to compare.

    Returns
    -------
    int
        Negative if p < q, zero if the values are identical, positive if
        p > q.

    Examples
    --------
    >>> p = polynomial([1.0, 2.0])            # 2x + 1
    >>> q = polynomial([1.0, 2.0, 0.0, 0.0])  # 2x + 1, larger capacity
    >>> polynomial_compare(p, q)
    0
    >>> p == q
    False
    """
    check_operands(p, q)

    if p is q:
        return 0

    p_lead = p.leading_exponent
    q_lead = q.leading_exponent

    if p_lead != q_lead:
        return p_lead - q_lead

    p_coeffs = p.coefficients[: p_lead + 1].flip(0)
    q_coeffs = q.coefficients[: q_lead + 1].flip(0)

    differs = torch.nonzero(p_coeffs != q_coeffs).flatten()

    if differs.numel() == 0:
        return 0

    first = int(differs[0])

    return 1 if p_coeffs[first] > q_coeffs[first] else -1
