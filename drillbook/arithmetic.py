"""Elementary arithmetic drills: sums, conversions, interest, classification."""

from __future__ import annotations

import math
import string
from enum import Enum


class Sign(Enum):
    """Sign of a number."""

    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    ZERO = "Zero"


class LetterKind(Enum):
    """Kind of a single character with respect to the Latin alphabet."""

    VOWEL = "Vowel"
    CONSONANT = "Consonant"
    NOT_A_LETTER = "Not a Character."


_VOWELS = frozenset("aeiouAEIOU")
_LETTERS = frozenset(string.ascii_letters)
_OPERATORS = frozenset("+-*/")


def _require_char(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def _truncating_div(a: int, b: int) -> int:
    """Integer division that rounds toward zero."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def add(a, b):
    """Return the sum of two numbers."""
    return a + b


def multiply(a, b):
    """Return the product of two numbers."""
    return a * b


def ascii_value(char: str) -> int:
    """Return the character code of a single character."""
    return ord(_require_char(char))


def swap(a, b):
    """Return the two values in swapped order."""
    return b, a


def fahrenheit_to_celsius(fahrenheit: int) -> int:
    """Convert Fahrenheit to Celsius, truncating the result toward zero."""
    return int((fahrenheit - 32) * 5.0 / 9.0)


def add_complex(first, second) -> complex:
    """Return the sum of two complex numbers."""
    return complex(first) + complex(second)


def simple_interest(principal: float, rate: float, time: float) -> float:
    """Return the simple interest for a rate given in percent per year."""
    return principal * rate * time / 100


def compound_interest(
    principal: float, rate: float, time: float, periods: int
) -> tuple[float, float]:
    """Return ``(interest, amount)`` for interest compounded ``periods`` times a year."""
    if periods == 0:
        raise ValueError("interest must be compounded at least once per year")
    fraction = rate / 100
    amount = principal * (1 + fraction / periods) ** (periods * time)
    return amount - principal, amount


def rectangle_area_perimeter(length: float, width: float) -> tuple[float, float]:
    """Return ``(area, perimeter)`` of a rectangle."""
    return length * width, 2 * (length + width)


def sign_of(number) -> Sign:
    """Classify a number as positive, negative or zero."""
    if number > 0:
        return Sign.POSITIVE
    if number < 0:
        return Sign.NEGATIVE
    return Sign.ZERO


def is_even(number: int) -> bool:
    """Return True if the number is even."""
    return number % 2 == 0


def classify_letter(char: str) -> LetterKind:
    """Classify a character as a vowel, a consonant or not a Latin letter."""
    _require_char(char)
    if char in _VOWELS:
        return LetterKind.VOWEL
    if char in _LETTERS:
        return LetterKind.CONSONANT
    return LetterKind.NOT_A_LETTER


def largest_of_three(a, b, c):
    """Return the largest of three values."""
    return max(a, b, c)


def sum_natural(n: int) -> int:
    """Return the sum of the first ``n`` natural numbers."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    return sum(range(1, n + 1))


def alphabet() -> str:
    """Return the upper-case letters from A to Z."""
    return string.ascii_uppercase


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative integer."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return math.prod(range(1, n + 1))


def calculate(a: int, operator: str, b: int) -> int:
    """Apply one of ``+ - * /`` to two integers; division truncates toward zero."""
    if operator not in _OPERATORS:
        raise ValueError(f"invalid operator {operator!r}")
    if operator == "+":
        return a + b
    if operator == "-":
        return a - b
    if operator == "*":
        return a * b
    return _truncating_div(a, b)


def multiplication_table(n: int) -> list[str]:
    """Return the lines ``n * i = n*i`` for ``i`` from 1 to 10."""
    return [f"{n} * {i} = {n * i}" for i in range(1, 11)]


def fibonacci(terms: int) -> list[int]:
    """Return the first ``terms`` Fibonacci numbers, starting from 0."""
    series = []
    a, b = 0, 1
    for _ in range(terms):
        series.append(a)
        a, b = b, a + b
    return series


def largest_common_divisor(a: int, b: int) -> int:
    """Return the largest number from 1 up to min(a, b) dividing both."""
    if a < 1 or b < 1:
        raise ValueError("both numbers must be positive")
    return math.gcd(a, b)


def solve_quadratic(a: float, b: float, c: float) -> tuple[float, ...]:
    """Return the real roots of ``a*x**2 + b*x + c``.

    Two distinct roots, one repeated root, or an empty tuple when the roots
    are complex.
    """
    if a == 0:
        raise ValueError("this is not a quadratic equation")
    discriminant = b * b - 4 * a * c
    if discriminant > 0:
        root = math.sqrt(discriminant)
        return (-b + root) / (2 * a), (-b - root) / (2 * a)
    if discriminant == 0:
        return (-b / (2 * a),)
    return ()


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two positive integers."""
    if a <= 0 or b <= 0:
        raise ValueError("both numbers must be positive")
    while b:
        a, b = b, a % b
    return a


def power(base: int, exponent: int) -> int:
    """Return ``base`` raised to a non-negative integer ``exponent``."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    for _ in range(exponent):
        result *= base
    return result