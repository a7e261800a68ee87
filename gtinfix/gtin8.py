# gtinfix/gtin8.py
"""GTIN-8 (EAN-8) check and fix."""
from __future__ import annotations

from gtinfix import codes

LENGTH = 8


def check(code: str) -> bool:
    return codes.check(code, LENGTH)


def fix(code: str) -> str:
    return codes.fix(code, LENGTH)
