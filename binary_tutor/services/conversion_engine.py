"""Binary/decimal conversion with step-by-step explanations.

Both conversions are pure: they validate the text they are given, compute
the converted value and build an explanation trace describing how the
value was derived. Invalid input is reported through the returned
ConversionResult rather than raised.
"""

import re

from binary_tutor.models import ConversionErrorKind, ConversionResult, Direction

_BINARY_RE = re.compile(r"[01]+")
_DECIMAL_RE = re.compile(r"[0-9]+")
_NON_BINARY_RE = re.compile(r"[^01]")
_NON_DECIMAL_RE = re.compile(r"[^0-9]")


def sanitize_binary(raw: str) -> str:
    """Drop every character that is not a binary digit.

    Args:
        raw: Text as typed by the user

    Returns:
        The candidate string made of 0s and 1s only
    """
    return _NON_BINARY_RE.sub("", raw)


def sanitize_decimal(raw: str) -> str:
    """Drop every character that is not a decimal digit.

    Args:
        raw: Text as typed by the user

    Returns:
        The candidate string made of 0-9 only
    """
    return _NON_DECIMAL_RE.sub("", raw)


def binary_to_decimal(raw: str) -> ConversionResult:
    """Convert a binary string to its decimal value.

    Args:
        raw: Candidate binary string, most significant digit first

    Returns:
        ConversionResult holding the decimal string and explanation trace,
        or the reason the input was rejected
    """
    direction = Direction.BINARY_TO_DECIMAL
    if raw == "":
        return ConversionResult.failure(direction, raw, ConversionErrorKind.EMPTY_INPUT)
    if not _BINARY_RE.fullmatch(raw):
        return ConversionResult.failure(direction, raw, ConversionErrorKind.INVALID_DIGITS)

    # (digit, position) pairs, most significant first
    digits = [(int(bit), position) for position, bit in enumerate(reversed(raw))]
    digits.reverse()

    terms = []
    total = 0
    for digit, position in digits:
        power = 2**position
        product = digit * power
        total += product
        terms.append(f"{digit} × 2^{position} = {digit} × {power} = {product}")

    steps = (
        f"To convert the binary number ({raw}), multiply each digit by a power of 2, "
        f"starting from the right (2^0).",
        f"Calculation: {' + '.join(terms)}",
        f"Add the results: {total}",
        f"So, binary {raw}'s decimal value is {total}.",
    )
    return ConversionResult(direction=direction, input=raw, value=str(total), steps=steps)


def decimal_to_binary(raw: str) -> ConversionResult:
    """Convert a decimal string to its binary representation.

    Args:
        raw: Candidate decimal string (non-negative integer)

    Returns:
        ConversionResult holding the binary string and explanation trace,
        or the reason the input was rejected
    """
    direction = Direction.DECIMAL_TO_BINARY
    if raw == "":
        return ConversionResult.failure(direction, raw, ConversionErrorKind.EMPTY_INPUT)
    if not _DECIMAL_RE.fullmatch(raw):
        return ConversionResult.failure(direction, raw, ConversionErrorKind.INVALID_DIGITS)

    number = int(raw)
    if number == 0:
        return ConversionResult(
            direction=direction, input=raw, value="0", steps=("Decimal 0 is binary 0.",)
        )

    division_steps = []
    remainders = []
    current = number
    while current > 0:
        quotient, remainder = divmod(current, 2)
        division_steps.append(f"{current} ÷ 2 = {quotient} (remainder: {remainder})")
        remainders.append(str(remainder))
        current = quotient

    bits = "".join(reversed(remainders))
    steps = (
        f"To convert the decimal number ({raw}) to binary, divide it by 2 repeatedly "
        f"until the quotient is 0, noting the remainder at each step.",
        *division_steps,
        f"Read the remainders in reverse order: {bits}",
        f"So, decimal {raw}'s binary value is {bits}.",
    )
    return ConversionResult(direction=direction, input=raw, value=bits, steps=steps)


def convert(direction: Direction, raw: str) -> ConversionResult:
    """Dispatch to the conversion matching ``direction``."""
    if direction is Direction.BINARY_TO_DECIMAL:
        return binary_to_decimal(raw)
    return decimal_to_binary(raw)
