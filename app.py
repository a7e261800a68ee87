from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import pandas as pd
import streamlit as st
from pydantic import ValidationError

from gtinfix.codes import SUPPORTED_LENGTHS, FixError, check, fix
from gtinfix.config import DEFAULT_CFG, load_cfg, save_cfg
from gtinfix.frame import STATUSES, annotate_codes, filter_codes
from gtinfix.logging_config import setup_logging
from gtinfix.models import GtinCode

# ---------- Paths / constants ----------
DATA_DIR = Path("data")
CFG_PATH = DATA_DIR / "config.json"
COLUMNS = ["gtin", "length", "checked_at"]
LABELS = {8: "GTIN-8 / EAN-8", 12: "GTIN-12 / UPC-A", 13: "GTIN-13 / EAN-13", 14: "GTIN-14"}

log = setup_logging()


# ---------- Helpers ----------
def now_iso() -> str:
    return datetime.now(UTC).isoformat(timespec="seconds")


def annotate_history(df: pd.DataFrame) -> pd.DataFrame:
    """Annotate each row against its own length."""
    if df.empty:
        return annotate_codes(df, column="gtin")
    parts = [
        annotate_codes(group, column="gtin", length=int(length))
        for length, group in df.groupby("length", sort=False)
    ]
    return pd.concat(parts).sort_index()


# ---------- Session init ----------
if "history" not in st.session_state:
    st.session_state.history = pd.DataFrame(columns=COLUMNS)

st.set_page_config(page_title="GTIN fix", layout="wide")
st.title("GTIN check & fix")

# ---------- Settings ----------
if "cfg" not in st.session_state:
    st.session_state.cfg = load_cfg(CFG_PATH, DEFAULT_CFG)

with st.sidebar.expander("Settings", expanded=False):
    default_length = st.selectbox(
        "Default code length",
        SUPPORTED_LENGTHS,
        index=SUPPORTED_LENGTHS.index(st.session_state.cfg["default_length"]),
        format_func=LABELS.get,
    )
    auto_fix = st.checkbox(
        "Repair whitespace and missing leading zeros",
        value=st.session_state.cfg["auto_fix"],
    )
    if (
        default_length != st.session_state.cfg["default_length"]
        or auto_fix != st.session_state.cfg["auto_fix"]
    ):
        st.session_state.cfg["default_length"] = default_length
        st.session_state.cfg["auto_fix"] = auto_fix
        save_cfg(CFG_PATH, st.session_state.cfg)
        log.info("Settings saved: %s", st.session_state.cfg)

# ---------- Filters ----------
with st.sidebar.expander("Filters", expanded=False):
    if "filters" not in st.session_state:
        st.session_state.filters = {"gtin": "", "status": ""}

    st.session_state.filters["gtin"] = st.text_input(
        "GTIN contains",
        st.session_state.filters["gtin"],
    )
    status_options = ["", *STATUSES]
    st.session_state.filters["status"] = st.selectbox(
        "Status",
        status_options,
        index=status_options.index(st.session_state.filters["status"]),
        format_func=lambda s: s or "any",
    )

    if st.button("Clear filters"):
        st.session_state.filters = {"gtin": "", "status": ""}
        st.rerun()

# ---------- Check single code ----------
st.subheader("Check a code")
c1, c2 = st.columns([1, 3])
with c1:
    length = st.selectbox(
        "Length",
        SUPPORTED_LENGTHS,
        index=SUPPORTED_LENGTHS.index(st.session_state.cfg["default_length"]),
        format_func=LABELS.get,
    )
with c2:
    raw = st.text_input("Code")

if st.button("Check"):
    if check(raw, length):
        st.success(f"{raw} is a valid {LABELS[length]}.")
    elif st.session_state.cfg["auto_fix"]:
        try:
            st.info(f"Not valid as typed; repaired to {fix(raw, length)}.")
        except FixError as e:
            st.error(f"Cannot repair ({e.kind}): {e}")
    else:
        try:
            GtinCode(code=raw, length=length, repair=False)
        except ValidationError as ve:
            st.error("; ".join([e["msg"] for e in ve.errors()]))

    st.session_state.history.loc[len(st.session_state.history)] = [raw, length, now_iso()]

# ---------- History ----------
df_view = filter_codes(
    annotate_history(st.session_state.history),
    column="gtin",
    code_contains=st.session_state.filters["gtin"],
    status=st.session_state.filters["status"] or None,
)

st.subheader(f"Checked this session ({len(df_view)})")
st.dataframe(df_view.iloc[::-1], use_container_width=True)

if st.button("Clear history"):
    st.session_state.history = pd.DataFrame(columns=COLUMNS)
    st.rerun()
