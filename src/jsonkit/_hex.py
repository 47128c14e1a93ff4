"""Fixed-width hexadecimal formatting for ``\\uXXXX`` escape sequences."""

from __future__ import annotations


def to_hex(value: int, digits: int) -> str:
    """Format an integer as lowercase hexadecimal, zero-padded to a width.

    Args:
        value: The non-negative number to format (a code unit or code point)
        digits: Minimum number of hex digits in the result

    Returns:
        The hexadecimal text, at least ``digits`` characters long. Values that
        need more digits are never truncated.

    Raises:
        ValueError: If ``value`` or ``digits`` is negative
    """
    if value < 0:
        msg = f"value must be non-negative, not {value}"
        raise ValueError(msg)
    if digits < 0:
        msg = f"digits must be non-negative, not {digits}"
        raise ValueError(msg)

    return format(value, f"0{digits}x")
