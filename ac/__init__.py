"""
ac - Add & Commit

Interactive helper that stages changes and writes Conventional Commits.
"""

from dataclasses import dataclass

__version__ = "1.0.0"

LABEL_SEPARATOR = ':'


@dataclass(frozen=True)
class ChangeType:
    """One selectable conventional commit type."""
    slug: str
    description: str


# Centralized change types - single source of truth, in display order
# Used by: prompts/collector.py (selection list), output (type colors)
CHANGE_TYPES = (
    ChangeType('fix', 'Fix a bug. "PATCH" in SemVer'),
    ChangeType('feat', 'Add a feature. "MINOR" in SemVer'),
    ChangeType('docs', 'Change documentation'),
    ChangeType('style', 'Format the code, lint, semi-colons, white spaces, EOF, etc'),
    ChangeType('refactor', "Doesn't fix a bug or add a feature"),
    ChangeType('perf', 'Improve performance'),
    ChangeType('test', 'Change tests or the test system'),
    ChangeType('build', 'Change the build system'),
    ChangeType('ci', 'Change the continuous integration system'),
    ChangeType('chore', 'Repetitive task'),
)

COMMIT_TYPE_NAMES = [t.slug for t in CHANGE_TYPES]


def change_type_labels(change_types=CHANGE_TYPES) -> list[str]:
    """Render change types as 'slug:   description' with aligned descriptions."""
    # Widest slug gets three spaces after the separator
    width = max(len(t.slug) for t in change_types) + len(LABEL_SEPARATOR) + 3
    return [
        f"{t.slug}{LABEL_SEPARATOR}".ljust(width) + t.description
        for t in change_types
    ]
