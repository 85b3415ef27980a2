"""Mathematical and numerical constants exposed to calculator consumers."""

import math
import sys

# Fundamental constants
PI = math.pi
E = math.e
SQRT2 = math.sqrt(2)
SQRT1_2 = math.sqrt(0.5)
LN2 = math.log(2)
LN10 = math.log(10)
LOG2E = 1 / LN2
LOG10E = 1 / LN10

# Golden ratio
PHI = (1 + math.sqrt(5)) / 2

# IEEE-754 double limits
EPSILON = sys.float_info.epsilon
MAX_SAFE_INTEGER = 2**53 - 1
MIN_SAFE_INTEGER = -(2**53 - 1)
MAX_VALUE = sys.float_info.max
MIN_VALUE = 5e-324  # smallest positive subnormal

# Calculation limits
MAX_FACTORIAL = 170  # 171! does not fit in a double
PRECISION_DIGITS = 15
