"""Message Formatter - Turn collected answers into a Conventional Commit."""

from ac import LABEL_SEPARATOR
from ac.prompts.collector import CollectedInput


class MalformedLabel(ValueError):
    """Raised when a change type label has no slug separator."""
    pass


def extract_slug(label: str) -> str:
    """Return the type slug from a 'slug:   description' label."""
    slug, sep, _ = label.partition(LABEL_SEPARATOR)
    if not sep:
        raise MalformedLabel(f"Change type label has no '{LABEL_SEPARATOR}' separator: {label!r}")
    return slug


def make_commit_message(collected: CollectedInput) -> str:
    """Build `type[!][(scope)]: summary[\\n\\nbody][\\n\\nfooter]`."""
    message = extract_slug(collected.selected_label)
    if collected.breaking:
        message += '!'
    if collected.scope is not None:
        message += f"({collected.scope})"
    message += f": {collected.summary}"
    if collected.body is not None:
        message += f"\n\n{collected.body}"
    if collected.footer is not None:
        message += f"\n\n{collected.footer}"
    return message
