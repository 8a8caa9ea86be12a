from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).resolve().parents[1] / "app" / "streamlit_app.py")


def test_app_renders_without_errors(monkeypatch):
    monkeypatch.setenv("RELAY_URL", "https://relay.example/api")
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    assert not at.exception
    assert at.sidebar.text_input[0].value == "https://relay.example/api"


def test_question_preview_width_is_accepted():
    def preview():
        import streamlit as st
        from PIL import Image

        st.image(Image.new("RGB", (8, 8)), width="stretch")

    at = AppTest.from_function(preview, default_timeout=30)
    at.run()
    assert not at.exception
