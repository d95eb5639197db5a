"""Shared help-panel groups for the result-table CLI."""

from __future__ import annotations

from cyclopts import Group

session_group = Group(
    "Session",
    help="Logging and run context options.",
    sort_key=0,
)

workload_group = Group(
    "Workload",
    help="Select queries and size the generated tables.",
    sort_key=1,
)

output_group = Group(
    "Output",
    help="Choose how results are reported.",
    sort_key=2,
)

__all__ = ["output_group", "session_group", "workload_group"]
