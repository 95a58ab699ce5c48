"""Integer puzzles: FizzBuzz, factorial, digit manipulation, Luhn, radix."""

from __future__ import annotations

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def fizzbuzz(num: int) -> int | str:
    """Return 'Fizz', 'Buzz', 'FizzBuzz' or *num* itself.

    Multiples of 3 give 'Fizz', multiples of 5 give 'Buzz' and multiples of
    both give 'FizzBuzz'.
    """
    output = ""
    if num % 3 == 0:
        output = "Fizz"
    if num % 5 == 0:
        output += "Buzz"
    return output or num


def factorial(n: int) -> int:
    if n < 0:
        raise ValueError(f"factorial is undefined for negative n: {n}")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def sum_between(n1: int, n2: int) -> int:
    """Sum of the integers from *n1* to *n2* inclusive (0 when n2 < n1)."""
    return sum(range(n1, n2 + 1))


def reverse_integer(num: int) -> int:
    """Reverse the decimal digits of *num*, keeping its sign."""
    sign = -1 if num < 0 else 1
    return sign * int(str(abs(num))[::-1])


def is_credit_card_number(ccn: int | str) -> bool:
    """Validate *ccn* with the Luhn checksum.

    Starting from the rightmost digit, every second digit is doubled (and
    reduced by 9 when the result exceeds 9); the total must be divisible by 10.
    """
    digits = str(ccn)
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"credit card number must be a non-empty digit string: {ccn!r}")
    parity = len(digits) % 2
    total = 0
    for i, ch in enumerate(digits):
        n = int(ch)
        if i % 2 != parity:
            total += n
        elif n > 4:
            total += 2 * n - 9
        else:
            total += 2 * n
    return total % 10 == 0


def digital_root(num: int) -> int:
    """Sum the digits of *num* repeatedly until a single digit remains."""
    total = sum(int(ch) for ch in str(abs(num)))
    while total > 9:
        total = sum(int(ch) for ch in str(total))
    return total


def to_nary_string(num: int, radix: int) -> str:
    """Return the base-*radix* representation of *num* (2 <= radix <= 36)."""
    if not 2 <= radix <= 36:
        raise ValueError(f"radix must be between 2 and 36, got {radix}")
    if num == 0:
        return "0"

    sign = "-" if num < 0 else ""
    num = abs(num)
    digits: list[str] = []
    while num:
        num, rem = divmod(num, radix)
        digits.append(_DIGITS[rem])
    return sign + "".join(reversed(digits))
