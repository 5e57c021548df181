from newsintel.llm.base import (
    UPSTREAM_ERROR_MESSAGE,
    ChatCompletion,
    is_error_message,
    missing_key_message,
)
from newsintel.llm.claude import ClaudeCompletion
from newsintel.llm.groq import GroqCompletion
from newsintel.llm.selection import default_selection, parse_selected_indices

__all__ = [
    "UPSTREAM_ERROR_MESSAGE",
    "ChatCompletion",
    "ClaudeCompletion",
    "GroqCompletion",
    "default_selection",
    "is_error_message",
    "missing_key_message",
    "parse_selected_indices",
]
