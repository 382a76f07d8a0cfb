import math
from typing import Optional
from typing import Union

# Largest magnitude at which every integer is exactly representable in a double.
MAX_EXACT_INTEGER = 2 ** 53


def as_exact_integer(number: Union[int, float]) -> Optional[int]:
    if isinstance(number, float):
        # NaN and infinities are never integral
        if not number.is_integer():
            return None
        number = int(number)

    if abs(number) > MAX_EXACT_INTEGER:
        return None

    return number


def is_prime(number: Union[int, float]) -> bool:
    n = as_exact_integer(number)
    # non-integers, and integers too large to be exact, cannot be prime
    if n is None:
        return False
    # 0, 1 and negative numbers are not prime
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False

    for i in range(3, math.isqrt(n) + 1, 2):
        if (n % i) == 0:
            return False

    return True
