"""Click command that creates a new feature workspace."""

import sys

import click

from specify_feature.errors import FeatureSetupError, UsageError
from specify_feature.feature.create_feature import create_feature
from specify_feature.reporter import format_json, format_lines, publish_active_feature

USAGE = "Usage: create-new-feature [--json] <feature_description>"

# -h is matched as a whole word in main(); registering it as a click short
# option would make words such as "-hash" parse as an -h cluster.
SHORT_HELP_WORD = "-h"

CONTEXT_SETTINGS = {
    "help_option_names": ["--help", "-help"],
    "ignore_unknown_options": True,
    "token_normalize_func": lambda token: token.lower(),
}


def feature_description(words):
    """Join description words with single spaces.

    Raises:
        UsageError: If no description remains.
    """
    description = " ".join(words)
    if not description.strip():
        raise UsageError(USAGE)
    return description


@click.command("create-new-feature", context_settings=CONTEXT_SETTINGS)
@click.option("--json", "-json", "json_mode", is_flag=True, help="Emit a single JSON record.")
@click.argument("words", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def main(ctx, json_mode, words):
    """Create a numbered feature branch, worktree and spec file.

    WORDS form the free-text feature description. Use -h or --help for
    this message.
    """
    if any(word.lower() == SHORT_HELP_WORD for word in words):
        click.echo(ctx.get_help())
        ctx.exit(0)

    try:
        description = feature_description(words)
        result = create_feature(description)
    except FeatureSetupError as exc:
        click.echo(str(exc), err=True)
        sys.exit(1)

    publish_active_feature(result.branch_name)

    if json_mode:
        click.echo(format_json(result))
    else:
        for line in format_lines(result):
            click.echo(line)
