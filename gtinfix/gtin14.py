# gtinfix/gtin14.py
"""GTIN-14 check and fix."""
from __future__ import annotations

from gtinfix import codes

LENGTH = 14


def check(code: str) -> bool:
    return codes.check(code, LENGTH)


def fix(code: str) -> str:
    return codes.fix(code, LENGTH)
