"""Starter .issuebridge.toml template."""

DEFAULT_TOML = """\
# issuebridge configuration
version = "1.0"

[convert]
include_ignores = false   # keep findings whose suppression was accepted
# base_path = "/abs/path/of/scanned/project"   # default: current directory

[output]
format = "json"           # json | terminal
min_severity = "low"      # low | medium | high | critical (terminal table only)
show_summary = true
indent = 2

[logging]
level = "warning"         # debug | info | warning | error
"""
