"""Feature numbering: allocate the next sequential feature number."""

import os
import re

_LEADING_DIGITS = re.compile(r"^[0-9]+")


def feature_number_of(name: str) -> int:
    """Return the number in the leading digits of name, or 0 if there are none."""
    match = _LEADING_DIGITS.match(name)
    return int(match.group(0)) if match else 0


def _child_directories(directory: str) -> list[str]:
    if not os.path.isdir(directory):
        return []
    return [
        entry for entry in os.listdir(directory)
        if os.path.isdir(os.path.join(directory, entry))
    ]


def highest_feature_number(*directories: str) -> int:
    """Return the highest feature number among the child directories of directories."""
    numbers = [
        feature_number_of(entry)
        for directory in directories
        for entry in _child_directories(directory)
    ]
    return max(numbers, default=0)


def format_feature_number(number: int) -> str:
    return f"{number:03d}"


def next_feature_number(*directories: str) -> str:
    """Return the next feature number as a zero-padded 3-digit string.

    Missing directories are treated as empty, so a repository with no
    feature directories yields ``"001"``.
    """
    return format_feature_number(highest_feature_number(*directories) + 1)
