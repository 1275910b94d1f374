"""Default aligner: pair old and new lines into side-by-side rows.

difftastic's ``aligned_lines`` are used when present. Older difftastic
releases omit them, in which case lines are paired with difflib and the
changed markers still come from difftastic's chunks.
"""

from __future__ import annotations

import difflib
from itertools import zip_longest
from typing import Any, Iterable, Optional

from vcsdiff.difftastic.models import DifftFile
from vcsdiff.display.models import DisplayFile, DisplayRow, LineSide


def _changed_lines(chunks: Iterable[Any], side: str) -> set[int]:
    numbers: set[int] = set()
    for chunk in chunks:
        if not isinstance(chunk, list):
            continue
        for entry in chunk:
            if not isinstance(entry, dict):
                continue
            line = entry.get(side)
            if isinstance(line, dict) and isinstance(line.get("line_number"), int):
                numbers.add(line["line_number"])
    return numbers


def _side(lines: list[str], idx: Optional[int], changed: set[int]) -> Optional[LineSide]:
    if idx is None:
        return None
    text = lines[idx] if 0 <= idx < len(lines) else ""
    return LineSide(number=idx + 1, text=text, changed=idx in changed)


def _pairs_from_difflib(
    old_lines: list[str], new_lines: list[str]
) -> tuple[list[tuple[Optional[int], Optional[int]]], set[int], set[int]]:
    """Pair lines with difflib; also return the unmatched line numbers."""
    pairs: list[tuple[Optional[int], Optional[int]]] = []
    unmatched_left: set[int] = set()
    unmatched_right: set[int] = set()
    matcher = difflib.SequenceMatcher(None, old_lines, new_lines, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            pairs.extend(zip(range(i1, i2), range(j1, j2)))
            continue
        pairs.extend(zip_longest(range(i1, i2), range(j1, j2)))
        unmatched_left.update(range(i1, i2))
        unmatched_right.update(range(j1, j2))
    return pairs, unmatched_left, unmatched_right


def process_file(
    file: DifftFile,
    old_lines: list[str],
    new_lines: list[str],
    stats: Optional[tuple[int, int]] = None,
) -> DisplayFile:
    """Build a DisplayFile from a difftastic entry and both file versions."""
    changed_left = _changed_lines(file.chunks, "lhs")
    changed_right = _changed_lines(file.chunks, "rhs")

    if file.aligned_lines:
        pairs = [
            (pair[0], pair[1])
            for pair in file.aligned_lines
            if isinstance(pair, list) and len(pair) == 2
        ]
    else:
        pairs, unmatched_left, unmatched_right = _pairs_from_difflib(old_lines, new_lines)
        if not file.chunks:
            # No chunk data: every unmatched line counts as changed.
            changed_left, changed_right = unmatched_left, unmatched_right

    rows = [
        DisplayRow(
            left=_side(old_lines, left, changed_left),
            right=_side(new_lines, right, changed_right),
        )
        for left, right in pairs
    ]

    additions, deletions = stats if stats is not None else (
        len(changed_right),
        len(changed_left),
    )

    return DisplayFile(
        path=file.path,
        status=file.status,
        language=file.language,
        rows=rows,
        additions=additions,
        deletions=deletions,
    )
