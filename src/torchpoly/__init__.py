"""torchpoly: bounded-degree real polynomials on PyTorch tensors."""

import logging

from . import polynomial

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "polynomial",
]

__version__ = "0.1.0"
