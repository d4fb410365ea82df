import torch

from ._constants import DTYPE
from ._polynomial import Polynomial
from ._polynomial_operand import check_operands


def polynomial_derivative(p: Polynomial) -> Polynomial:
    """Compute derivative of polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    Polynomial
        Derivative dp/dx with capacity ``max(p.leading_exponent, 1)``. A
        constant polynomial returns the zero polynomial of capacity 1.

    Raises
    ------
    NullOperandError
        If ``p`` is missing.

    Examples
    --------
    >>> p = polynomial([1.0, 2.0, 3.0])  # 3x^2 + 2x + 1
    >>> polynomial_derivative(p).coefficients  # 6x + 2
    tensor([2., 6.], dtype=torch.float64)
    """
    check_operands(p)

    n = p.leading_exponent

    if n == 0:
        return Polynomial(1)

    # new_coeffs[i] = (i+1) * old_coeffs[i+1]
    indices = torch.arange(1, n + 1, dtype=DTYPE)
    new_coeffs = p.coefficients[1 : n + 1] * indices

    return Polynomial._from_coeffs(new_coeffs)
