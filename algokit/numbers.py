"""Small number-theory helpers."""

from math import isqrt


def decimal_to_binary(decimal: int) -> int:
    """Return the binary form of ``decimal`` written with decimal digits (0 for n <= 0)."""
    if decimal <= 0:
        return 0
    return int(format(decimal, "b"))


def is_palindrome_number(x: int) -> bool:
    """Tell whether the decimal digits of ``x`` read the same both ways; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def is_prime(number: int) -> bool:
    """Tell whether ``number`` is prime."""
    if number <= 1:
        return False
    return all(number % divisor for divisor in range(2, isqrt(number) + 1))


def number_of_steps(num: int) -> int:
    """Return the steps to reach zero by halving even values and decrementing odd ones."""
    steps = 0
    while num > 0:
        num = num // 2 if num % 2 == 0 else num - 1
        steps += 1
    return steps