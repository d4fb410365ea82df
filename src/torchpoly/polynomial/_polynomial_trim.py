from ._polynomial import Polynomial
from ._polynomial_operand import check_operands


def polynomial_trim(p: Polynomial) -> Polynomial:
    """Copy a polynomial into the smallest capacity that holds it.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    Polynomial
        New polynomial of capacity ``p.leading_exponent + 1`` with the same
        coefficients. The zero polynomial trims to capacity 1.
    """
    check_operands(p)

    coeffs = p.coefficients[: p.leading_exponent + 1].clone()

    return Polynomial._from_coeffs(coeffs)
