"""Splitting of move-encoding path strings.

Both backends report moves inline in some outputs, either as a brace form
(``src/{old.rs => new.rs}``, as git numstat and jj summary do) or as a flat
arrow (``old.rs => new.rs``). ``->`` is accepted as the arrow as well.

git also C-quotes paths it considers unusual (``"caf\\303\\251.txt"``);
:func:`unquote_path` undoes that so paths compare equal to difftastic's.
"""

from __future__ import annotations

from typing import Optional

_ARROWS = ("=>", "->")

_C_ESCAPES = {
    "a": 0x07,
    "b": 0x08,
    "t": 0x09,
    "n": 0x0A,
    "v": 0x0B,
    "f": 0x0C,
    "r": 0x0D,
    "\"": 0x22,
    "\\": 0x5C,
}
_OCTAL = "01234567"


def _split_arrow(text: str) -> Optional[tuple[str, str]]:
    for arrow in _ARROWS:
        if arrow not in text:
            continue
        old, new = (side.strip() for side in text.split(arrow, 1))
        if old and new:
            return old, new
    return None


def split_path(path: str) -> tuple[str, str]:
    """Return ``(old_path, new_path)``; both equal *path* when it is not a move."""
    start = path.find("{")
    end = path.find("}", start + 1) if start != -1 else -1
    if end != -1:
        sides = _split_arrow(path[start + 1:end])
        if sides is not None:
            prefix, suffix = path[:start], path[end + 1:]
            return prefix + sides[0] + suffix, prefix + sides[1] + suffix

    sides = _split_arrow(path)
    if sides is not None:
        return sides
    return path, path


def new_path(path: str) -> str:
    """The destination side of a possibly move-encoding path."""
    return split_path(path)[1]


def unquote_path(path: str) -> str:
    """Undo git's C-style path quoting; unquoted paths are returned as is."""
    if len(path) < 2 or path[0] != '"' or path[-1] != '"':
        return path
    body = path[1:-1]
    out = bytearray()
    i = 0
    while i < len(body):
        ch = body[i]
        if ch != "\\" or i + 1 == len(body):
            out += ch.encode("utf-8")
            i += 1
            continue
        digits = body[i + 1:i + 4]
        if len(digits) == 3 and all(d in _OCTAL for d in digits):
            # Octal escapes are raw bytes of the UTF-8 encoded name.
            out.append(int(digits, 8) & 0xFF)
            i += 4
        elif body[i + 1] in _C_ESCAPES:
            out.append(_C_ESCAPES[body[i + 1]])
            i += 2
        else:
            out += ch.encode("utf-8")
            i += 1
    return out.decode("utf-8", errors="replace")
