"""Starter .vcsdiff.toml template."""

DEFAULT_TOML = """\
# vcsdiff configuration
version = "1.0"

[diff]
vcs = "auto"              # auto | git | jj
tool = "difft"            # difftastic binary, run with DFT_DISPLAY=json
jobs = 0                  # worker threads; 0 = one per CPU
rename_detection = true
timeout = 0               # seconds per VCS command; 0 = no limit
# default_range = "main..HEAD"

[output]
format = "terminal"       # terminal | json

[log]
limit = 50
# jj_revset = "trunk()::"
"""
