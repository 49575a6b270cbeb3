import math

import pytest

from drillbook.arithmetic import (
    LetterKind,
    Sign,
    add,
    add_complex,
    alphabet,
    ascii_value,
    calculate,
    classify_letter,
    compound_interest,
    factorial,
    fahrenheit_to_celsius,
    fibonacci,
    gcd,
    is_even,
    is_leap_year,
    largest_common_divisor,
    largest_of_three,
    multiplication_table,
    multiply,
    power,
    rectangle_area_perimeter,
    sign_of,
    simple_interest,
    solve_quadratic,
    sum_natural,
    swap,
)


@pytest.mark.parametrize("a,b", [(3, 2), (-4, 9), (0, 0)])
def test_add_inverts_subtraction(a, b):
    assert add(a, b) - b == a
    assert add(a, b) == add(b, a)


def test_multiply_identity_and_commutativity():
    assert multiply(2.5, 1) == 2.5
    assert multiply(1.5, 4.0) == multiply(4.0, 1.5)
    assert multiply(7.0, 0) == 0


@pytest.mark.parametrize("code", [65, 97, 48, 32, 126])
def test_ascii_value_of_char(code):
    assert ascii_value(chr(code)) == code


@pytest.mark.parametrize("bad", ["", "ab"])
def test_ascii_value_rejects_non_single_char(bad):
    with pytest.raises(ValueError):
        ascii_value(bad)


def test_swap_round_trip():
    assert swap(1, 2) == (2, 1)
    assert swap(*swap("x", "y")) == ("x", "y")


def test_fahrenheit_to_celsius_freezing_point():
    assert fahrenheit_to_celsius(32) == 0


def test_fahrenheit_to_celsius_truncates_toward_zero():
    assert isinstance(fahrenheit_to_celsius(100), int)
    assert fahrenheit_to_celsius(33) == 0
    assert fahrenheit_to_celsius(31) == 0


def test_fahrenheit_to_celsius_is_monotonic():
    values = [fahrenheit_to_celsius(f) for f in range(-40, 250)]
    assert values == sorted(values)


def test_add_complex_identity_and_inverse():
    z = complex(1.5, -2.0)
    assert add_complex(z, 0) == z
    assert add_complex(z, -z) == 0
    assert add_complex(z, 3j) == add_complex(3j, z)


def test_simple_interest_scales_linearly():
    base = simple_interest(1000, 5, 2)
    assert simple_interest(2000, 5, 2) == pytest.approx(2 * base)
    assert simple_interest(1000, 5, 0) == 0


def test_compound_interest_single_period_matches_simple():
    interest, amount = compound_interest(1000, 5, 1, 1)
    assert interest == pytest.approx(simple_interest(1000, 5, 1))
    assert amount - interest == pytest.approx(1000)


def test_compound_interest_grows_with_periods():
    yearly, _ = compound_interest(1000, 10, 3, 1)
    monthly, _ = compound_interest(1000, 10, 3, 12)
    assert monthly > yearly


def test_compound_interest_rejects_zero_periods():
    with pytest.raises(ValueError):
        compound_interest(1000, 5, 1, 0)


def test_rectangle_area_perimeter_square():
    area, perimeter = rectangle_area_perimeter(3.0, 3.0)
    assert area == 3.0 * 3.0
    assert perimeter == 4 * 3.0


@pytest.mark.parametrize(
    "number,expected",
    [(5, Sign.POSITIVE), (-3, Sign.NEGATIVE), (0, Sign.ZERO)],
)
def test_sign_of(number, expected):
    assert sign_of(number) is expected


def test_sign_values_match_messages():
    assert sign_of(5).value == "Positive"
    assert sign_of(-1).value == "Negative"
    assert sign_of(0).value == "Zero"
    assert classify_letter("1").value == "Not a Character."
    assert classify_letter("a").value == "Vowel"
    assert classify_letter("b").value == "Consonant"


@pytest.mark.parametrize("number", [-4, 0, 10])
def test_is_even_true(number):
    assert is_even(number) is True
    assert is_even(number + 1) is False


@pytest.mark.parametrize(
    "char,expected",
    [
        ("a", LetterKind.VOWEL),
        ("U", LetterKind.VOWEL),
        ("b", LetterKind.CONSONANT),
        ("Z", LetterKind.CONSONANT),
        ("1", LetterKind.NOT_A_LETTER),
        ("é", LetterKind.NOT_A_LETTER),
    ],
)
def test_classify_letter(char, expected):
    assert classify_letter(char) is expected


def test_classify_letter_rejects_empty():
    with pytest.raises(ValueError):
        classify_letter("")


@pytest.mark.parametrize("values", [(1, 2, 3), (3, 2, 1), (2, 3, 1), (5, 5, 1)])
def test_largest_of_three(values):
    result = largest_of_three(*values)
    assert result in values
    assert all(result >= v for v in values)


def test_sum_natural_steps():
    assert sum_natural(1) == 1
    for n in range(2, 30):
        assert sum_natural(n) - sum_natural(n - 1) == n


@pytest.mark.parametrize("n", [0, -5])
def test_sum_natural_rejects_non_positive(n):
    with pytest.raises(ValueError):
        sum_natural(n)


def test_alphabet_runs_a_to_z():
    letters = alphabet()
    assert letters[0] == "A"
    assert letters[-1] == "Z"
    assert list(letters) == sorted(set(letters))


@pytest.mark.parametrize(
    "year,leap", [(2000, True), (1900, False), (2024, True), (2023, False)]
)
def test_is_leap_year(year, leap):
    assert is_leap_year(year) is leap


def test_factorial_recurrence():
    assert factorial(0) == 1
    assert factorial(1) == 1
    for n in range(2, 25):
        assert factorial(n) == n * factorial(n - 1)


def test_factorial_rejects_negative():
    with pytest.raises(ValueError):
        factorial(-1)


def test_calculate_matches_basic_operations():
    assert calculate(3, "+", 2) == add(3, 2)
    assert calculate(3, "-", 2) + 2 == 3
    assert calculate(3, "*", 2) == multiply(3, 2)


def test_calculate_division_truncates_toward_zero():
    assert calculate(-7, "/", 2) == -calculate(7, "/", 2)
    assert calculate(7, "/", -2) == -calculate(7, "/", 2)
    assert calculate(6, "/", 3) * 3 == 6


def test_calculate_invalid_operator():
    with pytest.raises(ValueError):
        calculate(3, "%", 2)


def test_calculate_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        calculate(3, "/", 0)


def test_multiplication_table_lines():
    lines = multiplication_table(7)
    assert len(lines) == 10
    assert lines[0] == "7 * 1 = 7"
    for i, line in enumerate(lines, start=1):
        left, right = line.split(" = ")
        assert left == f"7 * {i}"
        assert int(right) == 7 * i


def test_fibonacci_recurrence():
    series = fibonacci(20)
    assert len(series) == 20
    assert series[:2] == [0, 1]
    for a, b, c in zip(series, series[1:], series[2:]):
        assert a + b == c


def test_fibonacci_empty():
    assert fibonacci(0) == []


@pytest.mark.parametrize("a,b", [(12, 18), (7, 13), (100, 75), (9, 9)])
def test_largest_common_divisor_divides_both(a, b):
    d = largest_common_divisor(a, b)
    assert a % d == 0 and b % d == 0
    assert not any(a % k == 0 and b % k == 0 for k in range(d + 1, min(a, b) + 1))


def test_largest_common_divisor_rejects_non_positive():
    with pytest.raises(ValueError):
        largest_common_divisor(0, 5)


@pytest.mark.parametrize("a,b", [(48, 18), (17, 5), (1, 1), (270, 192)])
def test_gcd_agrees_with_loop_version(a, b):
    assert gcd(a, b) == largest_common_divisor(a, b)
    assert gcd(a, b) == gcd(b, a)


@pytest.mark.parametrize("a,b", [(0, 3), (3, -1)])
def test_gcd_rejects_non_positive(a, b):
    with pytest.raises(ValueError):
        gcd(a, b)


def test_solve_quadratic_two_roots():
    a, b, c = 1.0, -5.0, 6.0
    roots = solve_quadratic(a, b, c)
    assert len(roots) == 2
    assert roots[0] > roots[1]
    for r in roots:
        assert a * r * r + b * r + c == pytest.approx(0, abs=1e-9)


def test_solve_quadratic_equal_roots():
    roots = solve_quadratic(1.0, -2.0, 1.0)
    assert len(roots) == 1
    assert roots[0] == pytest.approx(1.0)


def test_solve_quadratic_complex_roots():
    assert solve_quadratic(1.0, 0.0, 1.0) == ()


def test_solve_quadratic_not_quadratic():
    with pytest.raises(ValueError):
        solve_quadratic(0, 2, 1)


def test_power_recurrence():
    assert power(5, 0) == 1
    for e in range(1, 20):
        assert power(3, e) == 3 * power(3, e - 1)
    assert power(-2, 3) == -power(2, 3)


def test_power_rejects_negative_exponent():
    with pytest.raises(ValueError):
        power(2, -1)


def test_power_matches_math_for_floats_of_ints():
    assert math.isclose(float(power(7, 5)), 7.0 ** 5)