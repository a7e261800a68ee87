# gtinfix/frame.py
from __future__ import annotations

import pandas as pd

from gtinfix.codes import FixError, check, fix

STATUSES = ("valid", "fixable", "invalid")


def _norm(s: str | None) -> str:
    return (s or "").strip()


def _classify(value, length: int) -> tuple[bool, str | None, str | None]:
    """(valid as-is, repaired code, error kind) for one cell."""
    if value is None or (pd.api.types.is_scalar(value) and pd.isna(value)):
        return False, None, "missing"
    if pd.api.types.is_integer(value) and not isinstance(value, bool):
        # numeric columns lose leading zeros; fix() puts them back
        value = str(value)
    elif pd.api.types.is_float(value) and float(value).is_integer():
        # an int column with a gap becomes float64
        value = str(int(value))
    if not isinstance(value, str):
        return False, None, "not_text"
    try:
        return check(value, length), fix(value, length), None
    except FixError as e:
        return False, None, e.kind


def annotate_codes(df: pd.DataFrame, column: str = "gtin", length: int = 13) -> pd.DataFrame:
    """
    Returns a copy of df with 'valid', 'fixed' and 'error' columns added.

    valid: the raw cell already is a GTIN-<length>.
    fixed: the repaired code, or None when repair is impossible.
    error: None, a FixError kind, or 'missing' / 'not_text'.
    """
    res = df.copy()
    outcomes = [_classify(v, length) for v in res[column]]
    res["valid"] = pd.Series([o[0] for o in outcomes], index=res.index, dtype=bool)
    res["fixed"] = pd.Series([o[1] for o in outcomes], index=res.index, dtype=object)
    res["error"] = pd.Series([o[2] for o in outcomes], index=res.index, dtype=object)
    return res


def filter_codes(
    df: pd.DataFrame,
    column: str = "gtin",
    code_contains: str | None = None,
    status: str | None = None,  # "valid" | "fixable" | "invalid"
) -> pd.DataFrame:
    """Filter a frame produced by annotate_codes()."""
    res = df
    if code_contains:
        q = _norm(code_contains)
        res = res[res[column].astype(str).str.contains(q, regex=False, na=False)]

    if status:
        if status not in STATUSES:
            raise ValueError(f"Unknown status {status!r}; expected one of {STATUSES}")
        if status == "valid":
            res = res[res["valid"]]
        elif status == "fixable":
            res = res[~res["valid"] & res["fixed"].notna()]
        else:
            res = res[res["fixed"].isna()]

    return res.copy()
