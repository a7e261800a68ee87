# gtinfix/checksum.py
from __future__ import annotations


def is_ascii_numeric(s: str) -> bool:
    """True when every char is 0-9. Empty string counts as numeric."""
    return all("0" <= ch <= "9" for ch in s)


def compute_check_digit(digits: str, length: int) -> int:
    """
    GS1 check digit for a code of `length` characters.

    Only digits[:length - 1] are read; whatever sits at the check position is
    ignored, so a full code can be passed as-is. Weights run 3,1,3,1... from
    the digit right before the check position towards the left.

    Raises ValueError if the body is short or holds anything but ASCII digits.
    """
    if length < 1:
        raise ValueError(f"length must be positive, got {length}")
    body = digits[: length - 1]
    if len(body) != length - 1:
        raise ValueError(f"need {length - 1} digits before the check digit, got {len(body)}")
    if not is_ascii_numeric(body):
        raise ValueError(f"non-digit characters in {body!r}")

    total = 0
    for i, ch in enumerate(reversed(body)):  # right→left
        d = ord(ch) - 48
        total += d * (3 if i % 2 == 0 else 1)  # 3,1,3,1...
    return (10 - (total % 10)) % 10


def zero_pad(s: str, target_length: int) -> str:
    """Left-pad with '0' up to target_length. Longer input comes back untouched."""
    if len(s) >= target_length:
        return s
    return "0" * (target_length - len(s)) + s
