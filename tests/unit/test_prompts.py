from __future__ import annotations

from parley.providers.base import TranslationOptions
from parley.providers.prompts import build_translation_system_prompt, build_explanation_user_message


def test_neutral_options_add_no_register_instructions() -> None:
    prompt = build_translation_system_prompt("English", "French", TranslationOptions(tone=0, detail=0, emotion=0))

    assert "fluent in both English and French" in prompt
    assert "casual" not in prompt
    assert "respectful" not in prompt
    assert "concise" not in prompt
    assert prompt.endswith("Provide only the translation.")


def test_slider_direction_selects_instruction() -> None:
    casual = build_translation_system_prompt("English", "French", TranslationOptions(tone=-0.4, detail=0.9))
    formal = build_translation_system_prompt("English", "French", TranslationOptions(tone=0.4, emotion=-1))

    assert "Be casual" in casual
    assert "Convey the meaning fully" in casual
    assert "Be very respectful" in formal
    assert "warm and positive" in formal


def test_gender_line_needs_both_sides() -> None:
    both = build_translation_system_prompt(
        "English", "Spanish", TranslationOptions(fromGender="female", toGender="male")
    )
    one = build_translation_system_prompt("English", "Spanish", TranslationOptions(fromGender="female"))

    assert "The speaker is female, and the listener is male." in both
    assert "listener" not in one


def test_explanation_user_message_layout() -> None:
    assert build_explanation_user_message("Hi", "Salut") == "Original text: Hi\n\nTranslated text: Salut"
