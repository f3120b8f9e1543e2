"""Prompt Session Base Class"""

from abc import ABC, abstractmethod


class PromptSession(ABC):
    """Abstract synchronous terminal session.

    Every method blocks until the user answers and raises PromptCancelled
    when the user aborts. Aborting is not the same as skipping: a skipped
    optional question returns None.
    """

    @abstractmethod
    def select_one(self, message: str, choices: list[str]) -> str:
        pass

    @abstractmethod
    def ask_optional_text(
        self,
        message: str,
        help_message: str | None = None,
        placeholder: str | None = None,
        multiline: bool = False,
    ) -> str | None:
        pass

    @abstractmethod
    def ask_required_text(self, message: str, help_message: str | None = None) -> str:
        pass

    @abstractmethod
    def ask_boolean(self, message: str, default: bool = False) -> bool:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass
