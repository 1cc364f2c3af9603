"""Policy Q&A tab: chat with the expense agent about reimbursement rules."""

import streamlit as st

from ui.components import display_chat_history
from ui.services import get_chat_flow


def render() -> None:
    st.subheader("💬 Policy Q&A Assistant")
    st.caption("Ask questions about expense policies and reimbursement guidelines")

    flow = get_chat_flow()
    state = flow.state

    with st.container(height=520, border=True):
        display_chat_history(state.messages)
        if state.loading:
            with st.chat_message("assistant"):
                with st.spinner("Thinking…"):
                    flow.finish_turn()
            st.rerun()

    if state.error:
        st.error(state.error, icon=":material/warning:")

    question = st.chat_input(
        "Ask about expense policies...", disabled=flow.input_disabled, key="policy_question"
    )
    if question and flow.begin_turn(question):
        st.rerun()
