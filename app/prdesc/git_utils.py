from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List

from .errors import BranchResolutionError
from .models import BranchContext


class GitRunner:
    """Read-only git queries against a working copy, returned as raw text."""

    def __init__(self, cwd: str | Path | None = None):
        self.cwd = cwd

    def run(self, cmd: List[str]) -> str:
        print(f"💻 Running: {' '.join(cmd)}")
        proc = subprocess.run(cmd, cwd=self.cwd, text=True, capture_output=True)
        if proc.returncode != 0:
            # callers decide on the (usually empty) stdout
            if proc.stderr:
                print("   🔻 stderr:")
                print(proc.stderr.strip())
            print(f"   ❌ Command failed with exit code {proc.returncode}")
        return proc.stdout

    def current_branch(self) -> str:
        return self.run(["git", "branch", "--show-current"]).strip()

    def merge_base(self, branch: str, base: str) -> str:
        return self.run(["git", "merge-base", branch, base]).strip()

    def list_commits(self, base: str, head: str) -> str:
        return self.run(["git", "log", f"{base}..{head}", "--pretty=format:%h %s"])

    def compute_diff(self, base: str, head: str) -> str:
        return self.run(["git", "diff", f"{base}..{head}"])

    def remote_url(self) -> str:
        return self.run(["git", "config", "--get", "remote.origin.url"]).strip()


def get_branch_information(git: GitRunner, base_branch: str = "main") -> BranchContext:
    print("🔍 Inspecting current branch...")
    current_branch = git.current_branch()
    if not current_branch:
        raise BranchResolutionError("Failed to determine the current git branch.")
    print(f"   🌿 Branch: {current_branch}")
    print(f"   🌿 Base branch: {base_branch}")

    merge_base = git.merge_base(current_branch, base_branch)
    commits = git.list_commits(merge_base, current_branch) if merge_base else ""
    if not commits.strip():
        raise BranchResolutionError("No commit history found for this branch.")

    diff = git.compute_diff(merge_base, current_branch)
    if not diff.strip():
        raise BranchResolutionError("No diff found for this branch.")

    print(f"   ✅ {len(commits.splitlines())} commit(s), {len(diff)} characters of diff")
    return BranchContext(current_branch=current_branch, commits=commits, diff=diff)
