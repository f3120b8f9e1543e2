"""Prompt Session Package"""

from ac.session.base import PromptSession
from ac.session.terminal import QuestionarySession


def get_session() -> PromptSession:
    """Get the interactive session used for collecting commit input."""
    return QuestionarySession()


__all__ = [
    "PromptSession",
    "QuestionarySession",
    "get_session",
]
