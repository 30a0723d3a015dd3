"""
Numeric function library for the expression evaluator.

Every function here is computed from first principles (Newton iteration,
Taylor/Maclaurin series) rather than delegated to the platform math library.
The results are approximations: each series stops once the next term drops
below its convergence tolerance.
"""
import logging
from typing import Callable, Dict, List, Tuple

logger = logging.getLogger(__name__)

PI = 3.141592653589793
HALF_PI = PI / 2
QUARTER_PI = PI / 4
TWO_PI = 2 * PI
SQRT_HALF = 0.7071067811865476

DEFAULT_PRECISION = 1e-4
FINE_PRECISION = 1e-15
MAX_ITERATIONS = 10000

# atan series input is shrunk below this before summing
ATAN_REDUCTION_LIMIT = 0.25

NAN = float("nan")
INF = float("inf")


def _is_nan(x) -> bool:
    return x != x


def _is_finite(x) -> bool:
    return not _is_nan(x) and x not in (INF, -INF)


def _not_converged(name: str, x):
    logger.warning(f"{name}({x!r}) did not converge within {MAX_ITERATIONS} iterations")


def abs(x):
    return x if x >= 0 else -x


def factorial(n):
    """Iterative n! for non-negative integers; 1 for 0 and 1."""
    if n == 0 or n == 1:
        return 1

    result = 1
    for i in range(2, int(n) + 1):
        result *= i
    return result


def pow(base, exponent):
    """
    Raise base to an integer exponent.

    Positive exponents multiply, negative exponents divide, zero gives 1.
    The number of steps is the smallest whole number not below |exponent|,
    so fractional exponents do not give a meaningful result.
    """
    if exponent == 0:
        return 1
    if not _is_finite(exponent):
        return NAN

    steps = int(exponent)
    if steps != exponent:
        steps += 1 if exponent > 0 else -1
    steps = abs(steps)

    if exponent < 0:
        if base == 0:
            return INF
        base = 1 / base

    # binary exponentiation over the step count
    result = 1
    while steps:
        if steps & 1:
            result *= base
        base *= base
        steps >>= 1
    return result


def _newton_sqrt(x, precision):
    """Newton-Raphson square root starting from x / 2, unrounded."""
    guess = x / 2
    for step in range(MAX_ITERATIONS):
        if abs(guess * guess - x) <= precision:
            return guess
        following = (guess + x / guess) / 2
        # past the first step the iterates only decrease
        if following == guess or (step > 0 and following > guess):
            return guess
        guess = following

    _not_converged("sqrt", x)
    return guess


def sqrt(x, precision=DEFAULT_PRECISION):
    """Square root rounded half-up to the nearest whole number."""
    if x == 0 or x == 1:
        return x
    if _is_nan(x) or x < 0:
        return NAN
    if x == INF:
        return INF

    guess = _newton_sqrt(x, precision)
    return float(int(guess + 0.5))


def sin(x, precision=DEFAULT_PRECISION):
    if not _is_finite(x):
        return NAN

    # shift x into [0, 2PI)
    x = x % TWO_PI

    result = 0
    delta = x
    i = 1
    while abs(delta) > precision:
        result += delta
        delta *= -(x * x) / (2 * i * (2 * i + 1))
        i += 1

    return result


def cos(x, precision=DEFAULT_PRECISION):
    if not _is_finite(x):
        return NAN

    x = x % TWO_PI

    result = 0
    delta = 1
    i = 1
    while abs(delta) > precision:
        result += delta
        delta *= -(x * x) / ((2 * i - 1) * 2 * i)
        i += 1

    return result


# Maclaurin coefficients of tan: entry n belongs to x ** (2n + 1)
_TANGENT_COEFFICIENTS: List[float] = [1.0]


def _tangent_coefficient(n):
    # tan' = 1 + tan ** 2 gives each coefficient from the previous ones
    while len(_TANGENT_COEFFICIENTS) <= n:
        k = len(_TANGENT_COEFFICIENTS)
        total = sum(
            _TANGENT_COEFFICIENTS[a] * _TANGENT_COEFFICIENTS[k - 1 - a]
            for a in range(k)
        )
        _TANGENT_COEFFICIENTS.append(total / (2 * k + 1))
    return _TANGENT_COEFFICIENTS[n]


def _tan_series(x, precision):
    result = x
    power = x
    for n in range(1, MAX_ITERATIONS):
        power *= x * x
        delta = _tangent_coefficient(n) * power
        result += delta
        if abs(delta) <= precision:
            return result

    _not_converged("tan", x)
    return result


def tan(x, precision=DEFAULT_PRECISION):
    """
    Series x + x^3/3 + 2x^5/15 + ... after reducing x into (-PI/2, PI/2].

    Angles beyond PI/4 go through tan(x) = 1 / tan(PI/2 - x) so the series
    is only ever summed where it converges quickly.
    """
    if not _is_finite(x):
        return NAN

    x = HALF_PI - ((HALF_PI - x) % PI)

    if abs(x) <= QUARTER_PI:
        return _tan_series(x, precision)

    complement = (HALF_PI if x > 0 else -HALF_PI) - x
    if complement == 0:
        return INF
    return 1 / _tan_series(complement, precision)


def _arcsine(x, precision):
    if _is_nan(x) or x < -1 or x > 1:
        return NAN

    if abs(x) > SQRT_HALF:
        # asin x = PI/2 - asin(sqrt(1 - x^2)), the series crawls near +-1
        reduced = _arcsine(_newton_sqrt(1 - x * x, 0.0), precision)
        return HALF_PI - reduced if x > 0 else reduced - HALF_PI

    result = 0
    delta = x
    square = x * x
    i = 0
    while abs(delta) > precision:
        result += delta
        i += 1
        delta *= (2 * i - 1) * (2 * i - 1) / (2 * i * (2 * i + 1)) * square
        if i >= MAX_ITERATIONS:
            _not_converged("asin", x)
            break

    return result


def asin(x, precision=FINE_PRECISION):
    return _arcsine(x, precision)


def acos(x, precision=DEFAULT_PRECISION):
    return HALF_PI - _arcsine(x, precision)


def atan(x, precision=FINE_PRECISION):
    """
    Alternating series x - x^3/3 + x^5/5 - ...

    |x| > 1 is folded through atan(x) = +-PI/2 - atan(1/x), then the argument
    is halved with atan(x) = 2 atan(x / (1 + sqrt(1 + x^2))) until the series
    converges in a handful of terms.
    """
    if _is_nan(x):
        return NAN
    if x > 1 or x < -1:
        return (HALF_PI if x > 0 else -HALF_PI) - atan(1 / x, precision)

    scale = 1
    while abs(x) > ATAN_REDUCTION_LIMIT:
        x = x / (1 + _newton_sqrt(1 + x * x, 0.0))
        scale *= 2

    result = 0
    delta = x
    power = x
    i = 0
    while abs(delta) > precision:
        result += delta
        i += 1
        power *= -(x * x)
        delta = power / (2 * i + 1)

    return scale * result


SUPPORTED_FUNCTIONS: Dict[str, Tuple[int, Callable]] = {
    "cos": (1, cos),
    "acos": (1, acos),
    "sin": (1, sin),
    "asin": (1, asin),
    "tan": (1, tan),
    "atan": (1, atan),
    "sqrt": (1, sqrt),
    "pow": (2, pow),
}
