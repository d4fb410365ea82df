import warnings
from typing import Union

import torch
from torch import Tensor

from ._constants import DTYPE, SAMPLE_START, SAMPLE_STOP
from ._polynomial import Polynomial
from ._polynomial_operand import check_operands


def polynomial_evaluate(
    p: Polynomial, x: Union[float, Tensor]
) -> Union[float, Tensor]:
    """Evaluate polynomial at points term by term.

    Every term with a non-zero coefficient contributes
    ``coefficient * x ** exponent`` with the power computed directly, and
    the terms are accumulated in ascending exponent order. Unlike Horner's
    method this overflows to ``inf`` for large exponents once ``|x| > 1``;
    plotted values depend on that behaviour, so it is kept.

    Parameters
    ----------
    p : Polynomial
        Polynomial to evaluate.
    x : float or Tensor
        Evaluation point(s).

    Returns
    -------
    float or Tensor
        ``float`` for a scalar ``x``, otherwise a float64 tensor with the
        shape of ``x``.

    Warns
    -----
    RuntimeWarning
        If any value is not finite.

    Examples
    --------
    >>> p = polynomial([1.0, 2.0, 3.0])  # 3x^2 + 2x + 1
    >>> polynomial_evaluate(p, 2.0)
    17.0
    >>> polynomial_evaluate(p, torch.tensor([0.0, 1.0]))
    tensor([1., 6.], dtype=torch.float64)
    """
    check_operands(p)

    scalar = not isinstance(x, Tensor)

    points = torch.as_tensor(x, dtype=DTYPE)

    coeffs = p.coefficients
    exponents = torch.nonzero(coeffs).flatten().tolist()

    result = torch.zeros_like(points)

    for exponent in exponents:
        result = result + coeffs[exponent] * torch.pow(points, exponent)

    if not bool(torch.isfinite(result).all()):
        warnings.warn(
            "Polynomial value is not finite at one or more points",
            RuntimeWarning,
            stacklevel=2,
        )

    if scalar:
        return float(result)

    return result


def polynomial_sample(
    p: Polynomial,
    start: int = SAMPLE_START,
    stop: int = SAMPLE_STOP,
) -> tuple[Tensor, Tensor]:
    """Sample a polynomial over the integers ``start .. stop`` inclusive.

    Parameters
    ----------
    p : Polynomial
        Polynomial to sample.
    start, stop : int
        Inclusive bounds of the integer domain.

    Returns
    -------
    x : Tensor
        Sample points, float64, shape ``(stop - start + 1,)``.
    y : Tensor
        ``polynomial_evaluate(p, x)``.

    Raises
    ------
    ValueError
        If ``start > stop``.
    """
    if start > stop:
        raise ValueError(f"Empty sample domain [{start}, {stop}]")

    x = torch.arange(start, stop + 1, dtype=DTYPE)

    return x, polynomial_evaluate(p, x)
