"""difftastic JSON parser.

git runs the external tool once per file, so its output is a sequence of
JSON objects back to back. jj and direct difftastic runs may instead emit a
single array. Both shapes are accepted, in any mix.
"""

from __future__ import annotations

import json
from typing import Any, Iterator

from vcsdiff.difftastic.models import ChangeStatus, DifftFile

_STATUS_MAP = {
    "unchanged": ChangeStatus.UNCHANGED,
    "created": ChangeStatus.CREATED,
    "deleted": ChangeStatus.DELETED,
    "changed": ChangeStatus.MODIFIED,
    "modified": ChangeStatus.MODIFIED,
}


class DifftParseError(Exception):
    """Raised when difftastic output is not the expected JSON."""


def _iter_values(raw_text: str) -> Iterator[Any]:
    decoder = json.JSONDecoder()
    idx = 0
    total = len(raw_text)
    while True:
        while idx < total and raw_text[idx].isspace():
            idx += 1
        if idx >= total:
            return
        try:
            value, idx = decoder.raw_decode(raw_text, idx)
        except json.JSONDecodeError as exc:
            raise DifftParseError(str(exc)) from exc
        yield value


def _to_file(obj: dict[str, Any]) -> DifftFile:
    path = obj.get("path")
    if not isinstance(path, str) or not path:
        raise DifftParseError("file entry without a path")

    raw_status = obj.get("status", "changed")
    try:
        status = _STATUS_MAP[raw_status]
    except (KeyError, TypeError):
        raise DifftParseError(f"unknown status {raw_status!r} for {path}") from None

    chunks = obj.get("chunks") or []
    if not isinstance(chunks, list):
        raise DifftParseError(f"chunks for {path} is not a list")
    aligned = obj.get("aligned_lines")
    if aligned is not None and not isinstance(aligned, list):
        raise DifftParseError(f"aligned_lines for {path} is not a list")

    return DifftFile(
        path=path,
        status=status,
        language=obj.get("language"),
        chunks=chunks,
        aligned_lines=aligned,
    )


def parse(raw_text: str) -> list[DifftFile]:
    """Parse difftastic JSON output into file entries, in output order."""
    files: list[DifftFile] = []
    for value in _iter_values(raw_text):
        entries = value if isinstance(value, list) else [value]
        for entry in entries:
            if not isinstance(entry, dict):
                raise DifftParseError(f"expected a file object, got {type(entry).__name__}")
            files.append(_to_file(entry))
    return files
