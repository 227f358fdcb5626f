import requests
import streamlit as st
from ui_lib.clients.policy import PolicyServiceError
from ui_lib.components.widgets import result_block
from ui_lib.logging_setup import setup_logging
from ui_lib.state.session import ensure, form_key, reset_form
from ui_lib.workflows.evaluate import evaluate_claim

ACCEPTED_TYPES = ["pdf", "doc", "docx", "png", "jpg", "jpeg", "txt"]


def _form():
    with st.form(form_key("claim")):
        uploaded = st.file_uploader("Upload Document *", type=ACCEPTED_TYPES, key=form_key("file"))
        query = st.text_area(
            "Query *",
            height=120,
            placeholder="Ask about the policy eligibility...",
            key=form_key("query"),
        )
        c1, c2 = st.columns([1, 4])
        submitted = c1.form_submit_button("Submit Claim", type="primary")
        reset = c2.form_submit_button("Reset")
    return uploaded, query, submitted, reset


def main():
    st.set_page_config(page_title="Hospital Policy Checker", layout="centered")
    setup_logging()
    ensure()
    st.title("Hospital Policy Checker")
    st.caption("Claim evaluation powered by LLM")

    uploaded, query, submitted, reset = _form()
    if reset:
        reset_form()
        st.rerun()
    if not submitted:
        return

    try:
        with st.spinner("Submitting..."):
            parsed = evaluate_claim(uploaded, query)
    except (ValueError, PolicyServiceError, requests.RequestException) as ex:
        st.error(str(ex) or "Unknown error occurred")
        return

    result_block(parsed.record)


if __name__ == "__main__":
    main()
