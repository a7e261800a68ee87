# gtinfix/gtin13.py
"""GTIN-13 (EAN-13) check and fix."""
from __future__ import annotations

from gtinfix import codes

LENGTH = 13


def check(code: str) -> bool:
    return codes.check(code, LENGTH)


def fix(code: str) -> str:
    return codes.fix(code, LENGTH)
