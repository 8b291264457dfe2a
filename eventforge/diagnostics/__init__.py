"""Inspection helpers for dispatcher state."""

from .checklist import ChecklistIssue, run_checklist
from .inspector import render_listeners, snapshot

__all__ = ["ChecklistIssue", "render_listeners", "run_checklist", "snapshot"]
