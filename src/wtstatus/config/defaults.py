"""Starter .wtstatus.toml template."""

DEFAULT_TOML = """\
# wtstatus configuration
version = "1.0"

[status]
untracked_files = "all"     # all | normal | no
ignore_submodules = "none"  # none | untracked | dirty | all
renames = true              # false passes --no-renames to git status

[conflicts]
binary_sniff_bytes = 8000   # a NUL byte in this prefix marks a conflict as binary

[git]
timeout = 30                # seconds per git invocation

[output]
format = "terminal"         # terminal | json
show_summary = true
"""
