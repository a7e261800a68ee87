# gtinfix/gtin12.py
"""GTIN-12 (UPC-A) check and fix."""
from __future__ import annotations

from gtinfix import codes

LENGTH = 12


def check(code: str) -> bool:
    return codes.check(code, LENGTH)


def fix(code: str) -> str:
    return codes.fix(code, LENGTH)
