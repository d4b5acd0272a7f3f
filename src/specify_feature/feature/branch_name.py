"""Branch naming: turn a free-text feature description into a branch name."""

import re

from specify_feature.feature_config import DEFAULT_BRANCH_WORDS

FALLBACK_WORD = "unnamed"


def slugify_description(description: str, max_words: int = DEFAULT_BRANCH_WORDS) -> str:
    """Return the first max_words kebab-case words of description.

    Returns an empty string when description has no letters or digits.
    """
    result = description.lower()
    result = re.sub(r'[^a-z0-9]+', '-', result)
    result = re.sub(r'-+', '-', result)
    result = result.strip('-')
    words = [word for word in result.split('-') if word]
    return '-'.join(words[:max_words])


def branch_name_for(feature_num: str, description: str, max_words: int = DEFAULT_BRANCH_WORDS) -> str:
    """Build ``<feature_num>-<slug>`` for a feature description.

    A description without any usable words gets the slug ``unnamed``.
    """
    slug = slugify_description(description, max_words) or FALLBACK_WORD
    return f"{feature_num}-{slug}"
