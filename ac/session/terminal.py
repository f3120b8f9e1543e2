"""Terminal Prompt Session (questionary)"""

import questionary

from ac.errors import PromptCancelled
from ac.session.base import PromptSession


def _require_value(text: str) -> bool | str:
    return bool(text.strip()) or "A value is required"


class QuestionarySession(PromptSession):
    """Interactive session backed by questionary / prompt_toolkit."""

    @property
    def name(self) -> str:
        return "questionary"

    def _ask(self, question):
        # unsafe_ask() lets Ctrl-C / Ctrl-D surface instead of returning None
        try:
            return question.unsafe_ask()
        except (KeyboardInterrupt, EOFError):
            raise PromptCancelled()

    def select_one(self, message: str, choices: list[str]) -> str:
        return self._ask(questionary.select(message, choices=choices))

    def ask_optional_text(
        self,
        message: str,
        help_message: str | None = None,
        placeholder: str | None = None,
        multiline: bool = False,
    ) -> str | None:
        kwargs = {}
        if placeholder:
            kwargs['placeholder'] = placeholder
        answer = self._ask(questionary.text(
            message,
            instruction=help_message,
            multiline=multiline,
            **kwargs,
        ))
        if not answer or not answer.strip():
            return None
        return answer

    def ask_required_text(self, message: str, help_message: str | None = None) -> str:
        return self._ask(questionary.text(
            message,
            instruction=help_message,
            validate=_require_value,
        ))

    def ask_boolean(self, message: str, default: bool = False) -> bool:
        return self._ask(questionary.confirm(message, default=default))
