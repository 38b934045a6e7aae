"""Prompt Construction Package"""

from gemini_commit.prompts.builder import build_prompt, PROMPT_TEMPLATE, MAX_SUBJECT_LENGTH

__all__ = [
    "build_prompt",
    "PROMPT_TEMPLATE",
    "MAX_SUBJECT_LENGTH",
]
