"""Prompt construction for the translation and explanation providers."""

from __future__ import annotations

from .base import TranslationOptions

_FORMAL_TONE = (
    "Be very respectful. The speaker is addressing someone they look up to, such as a professor "
    "or a mother-in-law. Make sure the translation carries their sincere politeness and avoids "
    "misunderstandings."
)
_CASUAL_TONE = "Be casual - this is a friendly conversation."
_CONCISE = "Be concise."
_DETAILED = "Convey the meaning fully, using as many words as needed to get the general feeling across."
_POSITIVE = "The speaker is feeling warm and positive."
_NEGATIVE = "The speaker is feeling negative and upset."


def _slider(value: float | None, negative: str, positive: str) -> str:
    # Zero (the slider's rest position) and None both mean "no instruction".
    if not value:
        return ""
    return negative if value < 0 else positive


def build_translation_system_prompt(
    from_lang: str,
    to_lang: str,
    options: TranslationOptions | None = None,
) -> str:
    opts = options or TranslationOptions()
    gender = ""
    if opts.from_gender and opts.to_gender:
        gender = f"The speaker is {opts.from_gender}, and the listener is {opts.to_gender}."

    register = " ".join(
        part
        for part in (
            _slider(opts.tone, _CASUAL_TONE, _FORMAL_TONE),
            _slider(opts.detail, _CONCISE, _DETAILED),
            _slider(opts.emotion, _POSITIVE, _NEGATIVE),
        )
        if part
    )

    lines = [
        f"You are utterly fluent in both {from_lang} and {to_lang}. "
        f"You are assisting in translating from {from_lang} into {to_lang}. {gender}".rstrip(),
        "",
        "There may be errors in the transcription, so if something sounds nonsensical, go with the "
        "common-sense version. Use punctuation freely to make the translation more readable and split "
        "it into bite sized chunks.",
    ]
    if register:
        lines.append(register)
    lines.extend(
        [
            f"When the user gives a message in {from_lang}, you immediately respond with the {to_lang} translation.",
            "",
            "Provide only the translation.",
        ]
    )
    return "\n".join(lines)


def build_explanation_system_prompt(from_lang: str, to_lang: str) -> str:
    return f"""You're fluent in {from_lang} and {to_lang}. You help check translations, and explain the vagaries of language.

People come to you with original text and their translation. You tell them whether the translation is accurate, whether there are any idioms in the original text which can be hard to translate, and if anything is missing in the tone. There may have been mistranscriptions in the original text, so note that under possibleMistranslations if something seems nonsensical.

You respond with an object of type TranslationInfo given in TypeScript below:

type SegmentExplainer = {{
  originalTextString: string; // verbatim the substring of the original text this references
  translatedTextString: string;
  additionalDetails: string; // the additional information you want to add. Provided in {to_lang}.
}}

type TranslationInfo = {{
  accurate: boolean; // whether the translation is accurate
  possibleMistranslations: false | SegmentExplainer[]; // whether any translations could be improved
  idioms: false | SegmentExplainer[]; // whether there are any idioms, and if so, what
  tone: string; // Quick description of the tone of the original string. Provided in {to_lang}.
}}

Make sure you give correct json, using double quotes, and closing brackets properly. Don't be afraid to say there are no mistranslations or idioms!"""


def build_explanation_user_message(original_text: str, translated_text: str) -> str:
    return f"Original text: {original_text}\n\nTranslated text: {translated_text}"


# The assistant turn is pre-filled with this so the model continues a JSON object.
EXPLANATION_PREFILL = "{"

__all__ = [
    "EXPLANATION_PREFILL",
    "build_explanation_system_prompt",
    "build_explanation_user_message",
    "build_translation_system_prompt",
]
