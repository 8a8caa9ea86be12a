"""Streamlit front end for the Gemini question solver.

Features:
- Solve tab: upload a photo of a question and/or type it, get a structured answer
- Chat tab: free-form follow-up questions about the last solved question
- All Gemini calls go through the relay, so no API key is needed here
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import httpx
import streamlit as st
from dotenv import load_dotenv
from PIL import Image

# Ensure project root is on the path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from core.answers import extract_text, parse_answer
from core.client import RelayClient, RelayError
from prompts.templates import LANGUAGES, chat_prompt, solve_prompt

load_dotenv()
logging.basicConfig(level=logging.INFO)
logging.getLogger("httpx").setLevel(logging.WARNING)

# ============================================================================
# Page config
# ============================================================================

st.set_page_config(
    page_title="Question Solver",
    layout="centered",
    initial_sidebar_state="expanded",
)

ANSWER_SECTIONS = [
    ("simplified_question", "Question"),
    ("solution_steps", "Solution Steps"),
    ("final_answer", "Final Answer"),
    ("recommendations", "Recommendations"),
]

# ============================================================================
# Session state initialization
# ============================================================================


def init_session_state():
    defaults = {
        "answer": None,
        "chat_messages": [],
    }
    for key, val in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = val


init_session_state()

# ============================================================================
# Sidebar
# ============================================================================

with st.sidebar:
    st.markdown("### Configuration")
    relay_input = st.text_input(
        "Relay URL",
        value=os.environ.get("RELAY_URL", ""),
        help="Deployed relay endpoint, e.g. https://<project>.vercel.app/api",
    )
    language = st.selectbox(
        "Answer language",
        options=list(LANGUAGES.keys()),
        index=0,
        format_func=lambda k: LANGUAGES[k],
    )
    if st.button("Clear session"):
        st.session_state["answer"] = None
        st.session_state["chat_messages"] = []


def get_client() -> RelayClient | None:
    try:
        return RelayClient(url=relay_input)
    except ValueError as e:
        st.error(str(e))
        return None


tab_solve, tab_chat = st.tabs(["Solve", "Chat"])

# ============================================================================
# Solve tab
# ============================================================================

with tab_solve:
    uploaded = st.file_uploader("Question photo", type=["png", "jpg", "jpeg", "webp"])
    question = st.text_area("Question text (optional when a photo is uploaded)")

    image = None
    if uploaded is not None:
        image = Image.open(uploaded)
        st.image(image, width="stretch")

    if st.button("Solve", type="primary"):
        if image is None and not question.strip():
            st.error("Upload a photo or type a question.")
        else:
            client = get_client()
            if client is not None:
                with st.spinner("Solving..."):
                    try:
                        response = client.solve(
                            solve_prompt(question, has_image=image is not None, language=language),
                            image=image,
                        )
                        st.session_state["answer"] = parse_answer(response).to_dict()
                        st.session_state["chat_messages"] = []
                    except (RelayError, ValueError, httpx.HTTPError) as e:
                        st.error(f"Could not solve the question: {e}")
                        logging.exception("Solve error")

    answer = st.session_state["answer"]
    if answer:
        for key, title in ANSWER_SECTIONS:
            st.subheader(title)
            st.markdown(answer.get(key) or "_empty_")

# ============================================================================
# Chat tab
# ============================================================================

with tab_chat:
    if st.session_state["answer"]:
        st.caption("Follow-up questions refer to the last solved question.")

    for msg in st.session_state["chat_messages"]:
        with st.chat_message(msg["role"]):
            st.markdown(msg["content"])

    message = st.chat_input("Ask a follow-up question")
    if message:
        st.session_state["chat_messages"].append({"role": "user", "content": message})
        with st.chat_message("user"):
            st.markdown(message)

        client = get_client()
        if client is not None:
            with st.chat_message("assistant"):
                try:
                    response = client.chat(chat_prompt(message, st.session_state["answer"], language))
                    reply = extract_text(response)
                    st.markdown(reply)
                    st.session_state["chat_messages"].append({"role": "assistant", "content": reply})
                except (RelayError, ValueError, httpx.HTTPError) as e:
                    st.error(f"Chat request failed: {e}")
                    logging.exception("Chat error")
