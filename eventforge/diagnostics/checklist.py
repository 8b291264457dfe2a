"""Automated checks to highlight suspicious listener wiring."""

from __future__ import annotations

from dataclasses import dataclass

from ..dispatcher import Dispatcher


@dataclass(slots=True)
class ChecklistIssue:
    severity: str
    message: str


def run_checklist(dispatcher: Dispatcher) -> list[ChecklistIssue]:
    issues: list[ChecklistIssue] = []
    registry = dispatcher.registry
    names = registry.names()

    for name in names:
        normal = registry.normal(name)
        if registry.one(name) is not None and normal:
            issues.append(
                ChecklistIssue(
                    "warning",
                    f"Event '{name}' has an exclusive listener; "
                    f"{len(normal)} other listener(s) will not run.",
                )
            )

        seen: list = []
        for callback, _priority in normal:
            if callback in seen:
                issues.append(
                    ChecklistIssue(
                        "warning",
                        f"Event '{name}' has the same callback registered more than once.",
                    )
                )
                break
            seen.append(callback)

    for name in dispatcher.completed_names():
        if name not in names:
            issues.append(
                ChecklistIssue("info", f"Completed event '{name}' has no listeners left.")
            )

    return issues
