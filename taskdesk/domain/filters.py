from __future__ import annotations

from dataclasses import dataclass

UNASSIGNED = "unassigned"


@dataclass(frozen=True)
class TaskFilters:
    filter_key: str = "all"
    search: str | None = None
    assignee: str | None = None
