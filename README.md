# drillbook

Answers to the classic beginner programming drills, written as plain
functions. Each function takes ordinary Python values and returns a result.
Nothing is printed and nothing is read from standard input.

Invalid input raises an exception: `ValueError` for bad arguments,
`ZeroDivisionError` for division by zero in `calculate`, and `IndexError` in
`code_point_at`. Some searches can legitimately find nothing. Those return
`None` or an empty tuple instead of raising: `binary_search`,
`two_prime_sum`, `first_unique_char` and `solve_quadratic` when the roots are
complex.

## Installation

```
pip install drillbook
```

To run the tests:

```
pip install "drillbook[test]"
pytest
```

## Modules

### `drillbook.arithmetic`

- **Basic operations:** `add`, `multiply`, `swap`, `power` (non-negative exponent), `gcd` and `largest_common_divisor` (both need positive integers).
- **Conversions and money:** `fahrenheit_to_celsius` truncates toward zero. `simple_interest` takes a percentage rate. `compound_interest` returns `(interest, amount)`.
- **Geometry:** `rectangle_area_perimeter` returns `(area, perimeter)`.
- **Classification:**
  - `sign_of` returns a `Sign` member: `POSITIVE`, `NEGATIVE` or `ZERO`.
  - `classify_letter` returns a `LetterKind` member: `VOWEL`, `CONSONANT` or `NOT_A_LETTER`.
  - `is_even` and `is_leap_year` return a boolean.
  - `ascii_value` returns the code of a single character.
  - `largest_of_three` returns the largest of three values.
- **Sums and sequences:** `sum_natural`, `factorial`, `fibonacci`, `multiplication_table` (ten lines of text) and `alphabet` (`"A"` to `"Z"`).
- **Calculator:** `calculate(a, operator, b)` accepts `+ - * /`. Integer division truncates toward zero.
- **Quadratics:** `solve_quadratic` returns two roots, one repeated root, or `()`.

### `drillbook.numtheory`

- **Primes:** `is_prime`, `primes_up_to`, `primes_between`.
- **Two-prime sums:** `two_prime_sum` returns the first pair of primes that adds up to the number, or `None`.
- **Armstrong numbers:** `is_armstrong`, `armstrong_numbers`.
- **Digit checks:** `reverse_number`, `is_palindrome_number` and `is_neon`.
- **Divisors:** `factors` returns the positive divisors.
- **Fibonacci:** `even_index_fibonacci_sum` sums the terms at even 1-based positions of the series 0, 1, 1, 2, …

### `drillbook.patterns`

Every function returns its pattern as a list of lines without newlines.

| Function | Pattern |
| --- | --- |
| `right_triangle(rows, cell="*")` | Left-aligned triangle |
| `digit_pyramid(rows, digit)` | Centred pyramid drawn with the digit |
| `right_aligned_inverted_triangle` | Right-aligned triangle, widest row first |
| `inverted_pyramid` | Centred pyramid on its tip |
| `hollow_pyramid` | Pyramid outline with a solid base |
| `inverted_hollow_pyramid` | Upside-down outline with a solid top |
| `hollow_diamond` | Diamond outline |
| `diamond` | Solid diamond |
| `number_triangle` | Each row lists 1 up to the row number |
| `letter_triangle` | Letters restarting at `A` on each row |
| `continuous_letter_triangle` | Letters that keep counting across rows |
| `pascal_triangle` | Pascal's triangle |
| `floyd_triangle` | Floyd's triangle |
| `reverse_floyd_triangle` | Floyd's triangle counting down |

In the number and letter patterns, each value is followed by a space.

### `drillbook.arrays`

Every function returns a new list and leaves its input unchanged.

- **Statistics:** `largest`, `min_max` and `average` all require a non-empty sequence.
- **Searching:** `binary_search` works on an ascending sequence and returns an index or `None`.
- **Sorting:** `bubble_sort` (pass `descending=True` for descending order), `merge_sort`, `selection_sort` and `insertion_sort`.
- **Filtering:** `dedupe_sorted`, `remove_all` and `common_elements`.
- **Combining and copying:** `merge_arrays`, `copy_values`.
- **Reordering:** `rotate_left`, `reverse_values`, and `reverse_stack`, which treats the last item as the top.
- **Display:** `format_grid` returns one text line per row.

### `drillbook.matrices`

A matrix is a sequence of equally long rows. A ragged matrix raises `ValueError`.

- **Comparison:** `are_equal`.
- **Arithmetic:** `add_matrices`, `multiply_matrices`, `determinant_2x2`.
- **Square matrices:** `trace_and_norm` returns the trace and the Frobenius norm. `diagonal_sums` returns the primary and secondary diagonal sums.
- **Rearranging:** `transpose`, `sort_rows`, `swap_first_last_rows`, `swap_first_last_columns`, and `rotate_ring_clockwise`, which shifts the outer ring one place.
- **Display:** `boundary_lines` returns text lines showing only the edge elements.

### `drillbook.strings`

- **Building strings:** `concatenate`, `reverse_string`, `sort_chars`.
- **Measuring:** `string_length`.
- **Binary addition:** `add_binary` raises `ValueError` for non-binary input.
- **Tests on text:** `is_palindrome`, and `is_pangram`, which ignores case.
- **Picking characters:** `first_unique_char`, `initials` and `code_point_at`. `code_point_at` raises `IndexError` outside `0 <= index < len(text)`.

## Examples

```python
from drillbook.arithmetic import Sign, calculate, gcd, sign_of, solve_quadratic
from drillbook.numtheory import armstrong_numbers, two_prime_sum
from drillbook.patterns import diamond
from drillbook.arrays import binary_search, merge_sort
from drillbook.matrices import multiply_matrices
from drillbook.strings import add_binary, is_pangram

calculate(-7, "/", 2)          # -3
gcd(48, 18)                    # 6
sign_of(0) is Sign.ZERO        # True
solve_quadratic(1, 0, 1)       # ()
armstrong_numbers(1, 1000)     # [1, 2, ..., 9, 153, 370, 371, 407]
two_prime_sum(28)              # (5, 23)

print("\n".join(diamond(3)))
#   *
#  ***
# *****
#  ***
#   *

values = merge_sort([5, 2, 9, 1])   # [1, 2, 5, 9]
binary_search(values, 9)            # 3

multiply_matrices([[1, 2], [3, 4]], [[5, 6], [7, 8]])  # [[19, 22], [43, 50]]
add_binary("1011", "110")                              # "10001"
is_pangram("The quick brown fox jumps over the lazy dog")  # True
```

## What it does not do

drillbook is a library only. It has no command-line program and no
interactive prompts. To use a drill with user input, read and convert that
input yourself, then call the function.