"""difftastic output models and parser."""

from vcsdiff.difftastic.models import ChangeStatus, DifftFile
from vcsdiff.difftastic.parser import DifftParseError, parse

__all__ = ["ChangeStatus", "DifftFile", "DifftParseError", "parse"]
