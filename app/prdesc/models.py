from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BranchContext:
    """What the current branch adds on top of the base branch."""

    current_branch: str
    commits: str
    diff: str


@dataclass(frozen=True)
class RepositoryCoordinates:
    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True)
class PipelineResult:
    branch: str
    pr_number: int
