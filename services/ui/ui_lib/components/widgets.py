# ui_lib/components/widgets.py
from decimal import Decimal, ROUND_HALF_UP
import streamlit as st
from schemas.models import PolicyResponse

__all__ = ["format_inr", "decision_badge", "result_block"]

_BADGE = {
    "approved": ("Approved", "green"),
    "rejected": ("Rejected", "red"),
}


def _group_indian(digits: str) -> str:
    """12345678 -> 1,23,45,678 (last three digits, then pairs)."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    return ",".join([head] + pairs + [tail])


def format_inr(amount: float) -> str:
    """en-IN number formatting: Indian digit grouping, up to 3 decimals."""
    value = Decimal(str(amount)).quantize(Decimal("0.001"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    whole, _, frac = f"{abs(value):f}".partition(".")
    frac = frac.rstrip("0")
    out = _group_indian(whole)
    return f"{sign}{out}.{frac}" if frac else f"{sign}{out}"


def decision_badge(decision: str):
    label, color = _BADGE.get(decision, _BADGE["rejected"])
    st.markdown(f":{color}-background[:{color}[**{label}**]]")


def result_block(record: PolicyResponse):
    """Decision, amount and justification, as shown after a submit."""
    with st.container(border=True):
        left, right = st.columns([3, 1])
        left.subheader("Decision")
        with right:
            decision_badge(record.decision)
        st.caption("Amount")
        amount = f"₹ {format_inr(record.amount)}"
        if record.decision == "approved":
            st.markdown(f":green[**{amount}**]")
        else:
            st.markdown(f"**{amount}**")
        st.caption("Justification")
        # markdown collapses single newlines; keep the server's line breaks
        st.markdown(record.justification.replace("\n", "  \n"))
