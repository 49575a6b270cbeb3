"""Number-theory drills: primes, Armstrong, palindromic and neon numbers."""

from __future__ import annotations

from drillbook.arithmetic import fibonacci


def is_prime(n: int) -> bool:
    """Return True if ``n`` is a prime number."""
    if n <= 1:
        return False
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 1
    return True


def primes_between(low: int, high: int) -> list[int]:
    """Return the primes in the closed interval ``[low, high]``, ascending."""
    return [number for number in range(low, high + 1) if is_prime(number)]


def primes_up_to(n: int) -> list[int]:
    """Return every prime from 2 up to and including ``n``."""
    return primes_between(2, n)


def is_armstrong(n: int) -> bool:
    """Return True if ``n`` equals the sum of its digits each raised to the digit count.

    Negative numbers are never Armstrong numbers.
    """
    if n < 0:
        return False
    digits = str(n)
    width = len(digits)
    return sum(int(digit) ** width for digit in digits) == n


def armstrong_numbers(low: int, high: int) -> list[int]:
    """Return the Armstrong numbers in the closed interval ``[low, high]``."""
    return [number for number in range(low, high + 1) if is_armstrong(number)]


def reverse_number(n: int) -> int:
    """Return the decimal digits of ``n`` in reverse order.

    Leading zeros of the result vanish; a number that is not positive
    reverses to 0.
    """
    if n <= 0:
        return 0
    return int(str(n)[::-1])


def is_palindrome_number(n: int) -> bool:
    """Return True if the decimal digits of ``n`` read the same both ways.

    The sign is ignored, so a negative number is a palindrome when its
    magnitude is.
    """
    digits = str(abs(n))
    return digits == digits[::-1]


def is_neon(n: int) -> bool:
    """Return True if the digit sum of ``n`` squared equals ``n``."""
    return sum(int(digit) for digit in str(n * n)) == n


def factors(n: int) -> list[int]:
    """Return every positive divisor of a natural number, ascending."""
    if n <= 0:
        raise ValueError("n must be a positive integer")
    return [divisor for divisor in range(1, n + 1) if n % divisor == 0]


def even_index_fibonacci_sum(terms: int) -> int:
    """Return the sum of the Fibonacci terms at even 1-based positions.

    The series starts 0, 1, 1, 2, ... and only its first ``terms`` terms count.
    """
    return sum(fibonacci(terms)[1::2])


def two_prime_sum(n: int) -> tuple[int, int] | None:
    """Return the first pair of primes ``(p, q)`` with ``p <= q`` and ``p + q == n``.

    Returns None when ``n`` is not the sum of two primes.
    """
    for first in range(2, n // 2 + 1):
        second = n - first
        if is_prime(first) and is_prime(second):
            return first, second
    return None