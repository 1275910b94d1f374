"""vcsdiff: rename-aware side-by-side diffs for git and jj via difftastic."""

__version__ = "0.1.0"

from vcsdiff.diff.facade import (  # noqa: E402
    DiffError,
    DiffResult,
    run_diff,
    run_diff_staged,
    run_diff_unstaged,
)

__all__ = [
    "DiffError",
    "DiffResult",
    "__version__",
    "run_diff",
    "run_diff_staged",
    "run_diff_unstaged",
]
