"""Create the spec file for a new feature from the spec template."""

import os
import shutil

SPECS_DIR_NAME = "specs"
SPEC_FILE_NAME = "spec.md"


def feature_dir_for(worktree_path, branch_name):
    return os.path.join(worktree_path, SPECS_DIR_NAME, branch_name)


def materialize_spec(worktree_path, branch_name, template_path):
    """Write ``specs/<branch_name>/spec.md`` inside the worktree.

    The template is copied byte for byte when it exists; otherwise an empty
    spec file is created. No placeholders are substituted.

    Returns:
        Absolute path of the spec file.
    """
    feature_dir = feature_dir_for(worktree_path, branch_name)
    os.makedirs(feature_dir, exist_ok=True)

    spec_file = os.path.join(feature_dir, SPEC_FILE_NAME)
    if template_path and os.path.isfile(template_path):
        shutil.copy2(template_path, spec_file)
    else:
        open(spec_file, "a").close()
    return os.path.abspath(spec_file)
