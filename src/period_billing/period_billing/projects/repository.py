from __future__ import annotations

from typing import Protocol, Sequence

from .model import Project


class ProjectRepository(Protocol):
    """Read-only project directory."""

    def list_projects(self) -> Sequence[Project]:
        raise NotImplementedError
