"""Prompt Collector - Gather commit details from an interactive session."""

from dataclasses import dataclass
from typing import Optional

from ac import change_type_labels
from ac.session.base import PromptSession


@dataclass
class CollectedInput:
    """Everything the user answered for one commit."""
    selected_label: str
    summary: str
    scope: Optional[str] = None
    body: Optional[str] = None
    breaking: bool = False
    footer: Optional[str] = None


def collect_input(session: PromptSession) -> CollectedInput:
    """Ask the six commit questions in order.

    PromptCancelled from any question propagates immediately, so later
    questions are never asked and no partial input is returned.
    """
    selected_label = session.select_one("Type of change?", change_type_labels())
    scope = session.ask_optional_text(
        "Scope? (class, file name, etc)",
        help_message="skip with ENTER",
        placeholder="index.tsx",
    )
    summary = session.ask_required_text("Summary?", help_message="lowercase, no period")
    if not summary.strip():
        raise ValueError("Summary must not be empty")
    body = session.ask_optional_text(
        "Body?",
        help_message="additional info. Esc+Enter to submit, leave empty to skip",
        placeholder="Lorem ipsum.",
        multiline=True,
    )
    breaking = session.ask_boolean("Breaking change?", default=False)
    footer = session.ask_optional_text(
        "Footer?",
        help_message="BC info and references. skip with ENTER",
        placeholder="Closes #1337.",
    )

    return CollectedInput(
        selected_label=selected_label,
        summary=summary,
        scope=scope,
        body=body,
        breaking=breaking,
        footer=footer,
    )
