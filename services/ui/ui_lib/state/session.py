import streamlit as st

# only the form nonce survives between reruns
DEFAULTS = {
    "form_nonce": 0,
}

def ensure():
    for k, v in DEFAULTS.items():
        st.session_state.setdefault(k, v)

def form_key(name: str) -> str:
    return f"{name}_{st.session_state['form_nonce']}"

def reset_form():
    # new widget keys on the next run -> empty uploader and query
    st.session_state["form_nonce"] += 1
