from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from prompts.templates import chat_prompt, solve_prompt


def test_solve_prompt_uses_image_template():
    prompt = solve_prompt("", has_image=True)
    assert "attached photo" in prompt
    assert "Turkish" in prompt
    assert "(none)" in prompt


def test_solve_prompt_includes_question():
    prompt = solve_prompt("What is 2+2?", has_image=False, language="en")
    assert "Question: What is 2+2?" in prompt
    assert "English" in prompt


def test_chat_prompt_embeds_solved_question():
    context = {"simplified_question": "2+2?", "final_answer": "4"}
    prompt = chat_prompt("why?", context, language="en")
    assert "Question: 2+2?" in prompt
    assert "Final answer: 4" in prompt
    assert prompt.endswith("why?")


def test_chat_prompt_without_context():
    prompt = chat_prompt("hello", None)
    assert "already solved" not in prompt
    assert prompt.endswith("hello")
