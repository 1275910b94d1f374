"""Configuration schema: dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

VcsChoice = Literal["auto", "git", "jj"]
OutputFormat = Literal["terminal", "json"]

VCS_CHOICES = ("auto", "git", "jj")
OUTPUT_FORMATS = ("terminal", "json")


@dataclass
class DiffConfig:
    vcs: VcsChoice = "auto"
    tool: str = "difft"  # external diff tool run in JSON mode
    jobs: int = 0  # 0 = one worker per CPU
    rename_detection: bool = True
    timeout: float = 0  # seconds per VCS command, 0 = no limit
    default_range: str = ""  # empty = HEAD (git) / @ (jj)

    @property
    def command_timeout(self) -> Optional[float]:
        return self.timeout if self.timeout > 0 else None

    @property
    def workers(self) -> Optional[int]:
        return self.jobs if self.jobs > 0 else None


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"


@dataclass
class LogConfig:
    limit: int = 50
    jj_revset: str = ""


@dataclass
class VcsDiffConfig:
    version: str = "1.0"
    diff: DiffConfig = field(default_factory=DiffConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log: LogConfig = field(default_factory=LogConfig)
