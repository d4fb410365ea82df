from ._constants import FRACTION_DIGITS
from ._polynomial import Polynomial
from ._polynomial_operand import check_operands


def _format_magnitude(value: float) -> str:
    text = f"{abs(value):.{FRACTION_DIGITS}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _format_term(coefficient: float, exponent: int) -> str:
    # Unsigned text of a single term; the caller supplies the separator.
    if exponent == 0:
        return _format_magnitude(coefficient)

    if abs(coefficient) == 1.0:
        return f"x^{exponent}"

    return f"{_format_magnitude(coefficient)}x^{exponent}"


def polynomial_format(p: Polynomial) -> str:
    """Render the canonical text form of a polynomial.

    Terms are written from the leading exponent down to the constant,
    zero coefficients are skipped and every non-constant term is written
    ``x^i``. A coefficient of exactly 1 or -1 is shown by its sign only;
    other coefficients keep at most three fractional digits.

    Parameters
    ----------
    p : Polynomial
        Polynomial to render.

    Returns
    -------
    str
        ``"P(x) = "`` followed by the terms, or ``"P(x) = 0"`` for the
        zero polynomial.

    Examples
    --------
    >>> polynomial_format(polynomial([-1.0, 1.0]))
    'P(x) = x^1 - 1'
    >>> polynomial_format(polynomial([0.5, 0.0, -2.25]))
    'P(x) = - 2.25x^2 + 0.5'
    """
    check_operands(p)

    if p.is_zero():
        return "P(x) = 0"

    coeffs = p.coefficients.tolist()
    lead = p.leading_exponent

    parts = []

    for exponent in range(lead, -1, -1):
        coefficient = coeffs[exponent]

        if coefficient == 0.0:
            continue

        negative = coefficient < 0.0

        if exponent == lead:
            parts.append("- " if negative else "")
        else:
            parts.append(" - " if negative else " + ")

        parts.append(_format_term(coefficient, exponent))

    return "P(x) = " + "".join(parts)
