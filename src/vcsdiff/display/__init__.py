"""Display models and the default side-by-side aligner."""

from vcsdiff.display.models import DisplayFile, DisplayRow, LineSide
from vcsdiff.display.processor import process_file

__all__ = ["DisplayFile", "DisplayRow", "LineSide", "process_file"]
