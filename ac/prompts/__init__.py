"""Commit Prompts Package"""

from ac.prompts.collector import CollectedInput, collect_input
from ac.prompts.formatter import MalformedLabel, extract_slug, make_commit_message

__all__ = [
    "CollectedInput",
    "collect_input",
    "MalformedLabel",
    "extract_slug",
    "make_commit_message",
]
