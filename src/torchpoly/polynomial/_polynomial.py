import math
import operator
from collections.abc import Mapping
from typing import Optional, Sequence, Union

import torch
from torch import Tensor

from torchpoly.polynomial._constants import DTYPE
from torchpoly.polynomial._exceptions import (
    ExponentOutOfRangeError,
    InvalidCapacityError,
)


class Polynomial:
    """Real polynomial of bounded degree with dense ascending coefficients.

    Represents p(x) = c[0] + c[1]*x + ... + c[capacity-1]*x^(capacity-1).

    The number of representable exponents (``capacity``) is fixed at
    construction. Coefficients are mutated in place only through
    :meth:`set_coefficient` and :meth:`reset`; the leading term
    (``leading_exponent``, ``leading_coefficient``) is recomputed on every
    write, so it always matches a fresh scan of the coefficients.

    Attributes
    ----------
    capacity : int
        Number of representable exponents; valid exponents are
        ``0 .. capacity - 1``.
    leading_exponent : int
        Highest exponent with a non-zero coefficient, 0 for the zero
        polynomial.
    leading_coefficient : float
        Coefficient at ``leading_exponent``.

    Notes
    -----
    Equality and ordering deliberately disagree on capacity. ``p == q``
    requires the same capacity and identical coefficients, while ``<``,
    ``>`` and :meth:`compare_to` ignore capacity and compare only the
    mathematical value. Two polynomials may therefore compare as neither
    less nor greater and still be unequal.

    ``hash(p)`` is bounded to ``0 .. 999`` and collides easily; it follows
    the current coefficients, so a polynomial must not be mutated while it
    is used as a dictionary key.

    Examples
    --------
    3x^2 + 1:
        p = Polynomial(3)
        p[0] = 1.0
        p[2] = 3.0

    Operator overloading:
        p + q         # polynomial_add(p, q)
        p - q         # polynomial_subtract(p, q)
        p * q         # polynomial_multiply(p, q)
        -p            # polynomial_negate(p)
        p ** n        # polynomial_pow(p, n)
        divmod(p, q)  # polynomial_divmod(p, q)
        p(x)          # polynomial_evaluate(p, x)
    """

    def __init__(self, capacity: int):
        if isinstance(capacity, bool):
            raise TypeError("Polynomial capacity must be an integer")
        capacity = operator.index(capacity)

        if capacity <= 0:
            raise InvalidCapacityError(
                f"Polynomial capacity must be at least 1, got {capacity}"
            )

        self._capacity = capacity
        self._coeffs = torch.zeros(capacity, dtype=DTYPE)
        self._leading_exponent = 0
        self._leading_coefficient = 0.0

    @classmethod
    def _from_coeffs(cls, coeffs: Tensor) -> "Polynomial":
        # Takes ownership of a 1-D float64 tensor and rescans it once.
        result = cls.__new__(cls)
        result._capacity = coeffs.shape[-1]
        result._coeffs = coeffs
        result._update_leading_term()
        return result

    def _update_leading_term(self) -> None:
        nonzero = torch.nonzero(self._coeffs).flatten()

        if nonzero.numel() == 0:
            self._leading_exponent = 0
        else:
            self._leading_exponent = int(nonzero[-1])

        self._leading_coefficient = float(
            self._coeffs[self._leading_exponent]
        )

    def _check_exponent(self, exponent: int) -> int:
        if isinstance(exponent, bool):
            raise TypeError("Exponent must be an integer")
        exponent = operator.index(exponent)

        if exponent < 0 or exponent >= self._capacity:
            raise ExponentOutOfRangeError(
                f"Exponent {exponent} outside [0, {self._capacity - 1}]"
            )

        return exponent

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def coefficients(self) -> Tensor:
        """Copy of the ascending coefficient tensor, shape ``(capacity,)``."""
        return self._coeffs.clone()

    @property
    def leading_exponent(self) -> int:
        return self._leading_exponent

    @property
    def leading_coefficient(self) -> float:
        return self._leading_coefficient

    def set_coefficient(self, exponent: int, value: float) -> None:
        """Store ``value`` as the coefficient of ``x^exponent``.

        Raises
        ------
        ExponentOutOfRangeError
            If ``exponent`` is outside ``[0, capacity - 1]``.
        """
        exponent = self._check_exponent(exponent)

        self._coeffs[exponent] = float(value)

        self._update_leading_term()

    def get_coefficient(self, exponent: int) -> float:
        """Return the coefficient of ``x^exponent``.

        Raises
        ------
        ExponentOutOfRangeError
            If ``exponent`` is outside ``[0, capacity - 1]``.
        """
        exponent = self._check_exponent(exponent)

        return float(self._coeffs[exponent])

    def is_zero(self) -> bool:
        return self._leading_exponent == 0 and self._leading_coefficient == 0

    def reset(self) -> None:
        """Set every coefficient to zero. Capacity is unchanged."""
        self._coeffs.zero_()
        self._leading_exponent = 0
        self._leading_coefficient = 0.0

    def copy(self) -> "Polynomial":
        return Polynomial._from_coeffs(self._coeffs.clone())

    def evaluate(self, x: Union[float, Tensor]) -> Union[float, Tensor]:
        from ._polynomial_evaluate import polynomial_evaluate

        return polynomial_evaluate(self, x)

    def compare_to(self, other: "Polynomial") -> int:
        from ._polynomial_compare import polynomial_compare

        return polynomial_compare(self, other)

    def __getitem__(self, exponent: int) -> float:
        return self.get_coefficient(exponent)

    def __setitem__(self, exponent: int, value: float) -> None:
        self.set_coefficient(exponent, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented

        if other is self:
            return True

        if self._capacity != other._capacity:
            return False

        return torch.equal(self._coeffs, other._coeffs)

    def __hash__(self) -> int:
        h = 7.0

        for value in self._coeffs[self._coeffs != 0].tolist():
            h = 17 * h + value

        h += self._capacity

        if not math.isfinite(h):
            return 0

        return int(h % 1000)

    def __lt__(self, other: "Polynomial") -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: "Polynomial") -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: "Polynomial") -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: "Polynomial") -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        from ._polynomial_format import polynomial_format

        return polynomial_format(self)

    def __repr__(self) -> str:
        nonzero = torch.nonzero(self._coeffs).flatten().tolist()
        terms = ", ".join(f"{i}: {float(self._coeffs[i])!r}" for i in nonzero)
        return (
            f"Polynomial(capacity={self._capacity}, coefficients={{{terms}}})"
        )

    def __add__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_add import polynomial_add

        return polynomial_add(self, other)

    def __sub__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_subtract import polynomial_subtract

        return polynomial_subtract(self, other)

    def __mul__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_multiply import polynomial_multiply

        return polynomial_multiply(self, other)

    def __neg__(self) -> "Polynomial":
        from ._polynomial_subtract import polynomial_negate

        return polynomial_negate(self)

    def __pow__(self, power: int) -> "Polynomial":
        from ._polynomial_pow import polynomial_pow

        return polynomial_pow(self, power)

    def __divmod__(self, other: "Polynomial"):
        from ._polynomial_divmod import polynomial_divmod

        return polynomial_divmod(self, other)

    def __floordiv__(self, other: "Polynomial") -> "Polynomial":
        return divmod(self, other)[0]

    def __mod__(self, other: "Polynomial") -> "Polynomial":
        return divmod(self, other)[1]

    def __call__(self, x: Union[float, Tensor]) -> Union[float, Tensor]:
        return self.evaluate(x)


def polynomial(
    coefficients: Union[Sequence[float], Tensor, Mapping],
    capacity: Optional[int] = None,
) -> Polynomial:
    """Create polynomial from coefficients.

    Parameters
    ----------
    coefficients : sequence, Tensor or mapping
        Either coefficients in ascending order (``coefficients[i]`` is the
        coefficient of x^i), or a mapping ``{exponent: coefficient}``.
    capacity : int, optional
        Capacity of the result. Defaults to the smallest capacity holding
        every given coefficient, at least 1.

    Returns
    -------
    Polynomial
        Polynomial instance.

    Raises
    ------
    InvalidCapacityError
        If ``capacity`` is given and is below 1.
    ExponentOutOfRangeError
        If a given exponent is negative or does not fit ``capacity``.

    Examples
    --------
    >>> p = polynomial([1.0, 0.0, 3.0])  # 3x^2 + 1
    >>> q = polynomial({0: 1.0, 2: 3.0})  # same value
    >>> p == q
    True
    """
    if isinstance(coefficients, Mapping):
        exponents = [operator.index(e) for e in coefficients]

        for exponent in exponents:
            if exponent < 0:
                raise ExponentOutOfRangeError(
                    f"Exponent must be non-negative, got {exponent}"
                )

        if capacity is None:
            capacity = max(exponents, default=0) + 1

        result = Polynomial(capacity)

        for exponent, value in coefficients.items():
            result._coeffs[result._check_exponent(exponent)] = float(value)

        result._update_leading_term()

        return result

    values = torch.as_tensor(coefficients, dtype=DTYPE)

    if values.dim() != 1:
        raise ValueError(
            f"Coefficients must be one-dimensional, got shape {tuple(values.shape)}"
        )

    n = values.shape[0]

    if capacity is None:
        capacity = max(n, 1)

    result = Polynomial(capacity)

    if n > result.capacity:
        raise ExponentOutOfRangeError(
            f"{n} coefficients do not fit capacity {result.capacity}"
        )

    result._coeffs[:n] = values

    result._update_leading_term()

    return result
