import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Union

from torch import Tensor

from ._constants import MAX_EXPONENT, SAMPLE_START, SAMPLE_STOP
from ._exceptions import ExponentOutOfRangeError
from ._polynomial import Polynomial
from ._polynomial_add import polynomial_add
from ._polynomial_derivative import polynomial_derivative
from ._polynomial_divmod import polynomial_divmod
from ._polynomial_evaluate import polynomial_evaluate, polynomial_sample
from ._polynomial_multiply import polynomial_multiply
from ._polynomial_operand import check_operands
from ._polynomial_pow import polynomial_is_power_allowed, polynomial_pow
from ._polynomial_subtract import polynomial_subtract

logger = logging.getLogger(__name__)


def _check_entry_exponent(exponent: int) -> None:
    if exponent < 0 or exponent > MAX_EXPONENT:
        raise ExponentOutOfRangeError(
            f"Exponent {exponent} outside [0, {MAX_EXPONENT}]"
        )


class PolynomialOperations:
    """Arithmetic on a current pair of polynomials.

    Holds the two polynomials an editing session works on ("first" and
    "second", addressed as 1 and 2) and exposes the pure polynomial
    functions bound to them. Results are always new polynomials; only
    :meth:`set_coefficient` and :meth:`reset` modify the held pair.

    Every method takes a per-instance re-entrant lock, so replacing or
    swapping the pair never interleaves with a running operation.
    :meth:`submit` queues work on a private single-worker executor and
    returns a :class:`~concurrent.futures.Future`; handing the result to a
    presentation thread is up to the caller.

    Parameters
    ----------
    first, second : Polynomial
        Initial pair.

    Raises
    ------
    NullOperandError
        If either polynomial is missing.

    Examples
    --------
    >>> with PolynomialOperations(Polynomial(1000), Polynomial(1000)) as ops:
    ...     ops.set_coefficient(1, 2, 3.0)
    ...     future = ops.submit(ops.add)
    ...     str(future.result())
    'P(x) = 3x^2'
    """

    def __init__(self, first: Polynomial, second: Polynomial):
        check_operands(first, second)

        self._first = first
        self._second = second
        self._lock = threading.RLock()
        self._executor = None

    def __enter__(self) -> "PolynomialOperations":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    @property
    def first(self) -> Polynomial:
        with self._lock:
            return self._first

    @property
    def second(self) -> Polynomial:
        with self._lock:
            return self._second

    def set_first(self, polynomial: Polynomial) -> None:
        check_operands(polynomial)

        with self._lock:
            self._first = polynomial

    def set_second(self, polynomial: Polynomial) -> None:
        check_operands(polynomial)

        with self._lock:
            self._second = polynomial

    def swap(self) -> None:
        """Exchange the first and second polynomial."""
        with self._lock:
            self._first, self._second = self._second, self._first

    def _select(self, which: int) -> Polynomial:
        if which == 1:
            return self._first
        if which == 2:
            return self._second
        raise ValueError(f"Polynomial selector must be 1 or 2, got {which}")

    def set_coefficient(self, which: int, exponent: int, value: float) -> None:
        """Set a coefficient of polynomial ``which``.

        Raises
        ------
        ExponentOutOfRangeError
            If ``exponent`` is outside ``[0, MAX_EXPONENT]`` or the held
            polynomial's capacity.
        """
        _check_entry_exponent(exponent)

        with self._lock:
            self._select(which).set_coefficient(exponent, value)

    def get_coefficient(self, which: int, exponent: int) -> float:
        """Return a coefficient of polynomial ``which``.

        Raises
        ------
        ExponentOutOfRangeError
            If ``exponent`` is outside ``[0, MAX_EXPONENT]`` or the held
            polynomial's capacity.
        """
        _check_entry_exponent(exponent)

        with self._lock:
            return self._select(which).get_coefficient(exponent)

    def reset(self, which: int) -> None:
        with self._lock:
            self._select(which).reset()

    def add(self) -> Polynomial:
        with self._lock:
            logger.debug("add")
            return polynomial_add(self._first, self._second)

    def subtract(self) -> Polynomial:
        with self._lock:
            logger.debug("subtract")
            return polynomial_subtract(self._first, self._second)

    def multiply(self) -> Polynomial:
        with self._lock:
            logger.debug("multiply")
            return polynomial_multiply(self._first, self._second)

    def divide(self) -> tuple[Polynomial, Polynomial]:
        """Divide the first polynomial by the second."""
        with self._lock:
            logger.debug("divide")
            return polynomial_divmod(self._first, self._second)

    def derivative(self, which: int) -> Polynomial:
        with self._lock:
            logger.debug("derivative of polynomial %d", which)
            return polynomial_derivative(self._select(which))

    def is_power_allowed(self, which: int, power: int) -> bool:
        with self._lock:
            return polynomial_is_power_allowed(self._select(which), power)

    def pow(self, which: int, power: int) -> Polynomial:
        with self._lock:
            logger.debug("polynomial %d to power %d", which, power)
            return polynomial_pow(self._select(which), power)

    def evaluate(
        self, which: int, x: Union[float, Tensor]
    ) -> Union[float, Tensor]:
        with self._lock:
            return polynomial_evaluate(self._select(which), x)

    def sample(
        self,
        which: int,
        start: int = SAMPLE_START,
        stop: int = SAMPLE_STOP,
    ) -> tuple[Tensor, Tensor]:
        """Sample polynomial ``which`` over ``start .. stop`` for plotting."""
        with self._lock:
            return polynomial_sample(self._select(which), start, stop)

    def submit(self, fn: Callable, *args) -> Future:
        """Run ``fn(*args)`` on the background worker.

        Submitted calls run one at a time in submission order.
        """
        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=1, thread_name_prefix="torchpoly"
                )
            return self._executor.submit(fn, *args)

    def close(self) -> None:
        """Wait for submitted work and stop the background worker."""
        with self._lock:
            executor, self._executor = self._executor, None

        if executor is not None:
            executor.shutdown(wait=True)
