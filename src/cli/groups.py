"""Shared help-panel groups for the bracecheck CLI."""

from __future__ import annotations

from cyclopts import Group

session_group = Group(
    "Session",
    help="Session and run context options.",
    sort_key=0,
)

input_group = Group(
    "Input",
    help="Select and decode the sources to scan.",
    sort_key=1,
)

output_group = Group(
    "Output",
    help="Control how findings are reported.",
    sort_key=2,
)

admin_group = Group(
    "Admin",
    help="Administrative commands and help.",
    sort_key=99,
)

__all__ = [
    "admin_group",
    "input_group",
    "output_group",
    "session_group",
]
