"""Feature configuration: read optional overrides from .specify/feature.yaml."""

import os
from dataclasses import dataclass

CONFIG_RELPATH = os.path.join(".specify", "feature.yaml")
DEFAULT_TEMPLATE = os.path.join(".specify", "templates", "spec-template.md")
DEFAULT_BRANCH_WORDS = 3


@dataclass(frozen=True)
class FeatureConfig:
    """Settings that shape how a new feature is created."""

    template: str = DEFAULT_TEMPLATE
    branch_words: int = DEFAULT_BRANCH_WORDS

    def template_path(self, source_dir):
        """Return the absolute template path for the given source directory."""
        return os.path.join(source_dir, self.template)


def _parse_branch_words(value):
    try:
        words = int(value)
    except ValueError:
        return DEFAULT_BRANCH_WORDS
    return words if words > 0 else DEFAULT_BRANCH_WORDS


def read_feature_config(source_dir):
    """Read feature config from a YAML-like file under the source directory.

    Recognised keys are ``template`` and ``branch_words``. Unknown keys and
    comment lines are ignored.

    Returns:
        A FeatureConfig, with defaults for anything not set. A missing
        config file yields the defaults.
    """
    path = os.path.join(source_dir, CONFIG_RELPATH)
    if not os.path.isfile(path):
        return FeatureConfig()

    values = {}
    with open(path) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or ":" not in line:
                continue
            key, value = (part.strip() for part in line.split(":", 1))
            if key == "template" and value:
                values["template"] = value.strip("'\"")
            elif key == "branch_words":
                values["branch_words"] = _parse_branch_words(value)

    return FeatureConfig(**values)
