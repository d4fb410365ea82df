import torch

# Largest exponent a polynomial entered or produced by the engine may carry.
MAX_EXPONENT = 999

# Capacity used for the two polynomials of an editing session.
DEFAULT_CAPACITY = MAX_EXPONENT + 1

# Integer domain sampled for plotting.
SAMPLE_START = -100
SAMPLE_STOP = 100

FRACTION_DIGITS = 3

DTYPE = torch.float64
