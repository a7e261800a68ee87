# gtinfix/codes.py
"""
Length-parameterized check/fix for GTIN-8, GTIN-12, GTIN-13 and GTIN-14.

check() is a plain predicate and never raises on the code it is given.
fix() trims, zero-pads and re-checks, raising a FixError subclass at the
first gate that fails.
"""
from __future__ import annotations

import logging
import string

from gtinfix.checksum import compute_check_digit, is_ascii_numeric, zero_pad

logger = logging.getLogger(__name__)

SUPPORTED_LENGTHS = (8, 12, 13, 14)


class FixError(ValueError):
    """A code that cannot be turned into a valid GTIN of the requested length."""

    kind = "invalid"
    reason = "cannot be repaired"

    def __init__(self, code: str, length: int):
        self.code = code
        self.length = length
        super().__init__(f"GTIN-{length} {code!r}: {self.reason}")


class NonAsciiString(FixError):
    kind = "non_ascii"
    reason = "contains non-ASCII characters"


class TooLong(FixError):
    kind = "too_long"
    reason = "too long; only short codes can be zero-padded"


class CheckDigitIncorrect(FixError):
    kind = "check_digit"
    reason = "check digit does not match"


def _require_supported(length: int) -> None:
    if length not in SUPPORTED_LENGTHS:
        raise ValueError(f"Unsupported GTIN length {length}; expected one of {SUPPORTED_LENGTHS}")


def check(code: str, length: int) -> bool:
    _require_supported(length)
    if not isinstance(code, str) or not code.isascii():
        return False
    if len(code) != length or not is_ascii_numeric(code):
        return False
    return compute_check_digit(code, length) == ord(code[-1]) - 48


def fix(code: str, length: int) -> str:
    """
    Repair a code by stripping outer ASCII whitespace and restoring lost
    leading zeros. Interior characters are never touched and nothing is
    ever truncated.
    """
    _require_supported(length)
    fixed = code.strip(string.whitespace)

    if not code.isascii():
        logger.debug("GTIN-%d fix rejected non-ASCII input %r", length, code)
        raise NonAsciiString(code, length)
    if len(fixed) > length:
        logger.debug("GTIN-%d fix rejected %r: %d chars", length, code, len(fixed))
        raise TooLong(code, length)

    fixed = zero_pad(fixed, length)
    if not check(fixed, length):
        logger.debug("GTIN-%d fix rejected %r: check digit", length, code)
        raise CheckDigitIncorrect(code, length)

    if fixed != code:
        logger.debug("GTIN-%d fixed %r -> %r", length, code, fixed)
    return fixed


def verify(code: str, length: int) -> str:
    """Strict counterpart of fix(): return code if valid as-is, else raise why not."""
    if check(code, length):
        return code
    if not code.isascii():
        raise NonAsciiString(code, length)
    if len(code) > length:
        raise TooLong(code, length)
    raise CheckDigitIncorrect(code, length)
