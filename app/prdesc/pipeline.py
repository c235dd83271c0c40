from __future__ import annotations

from enum import Enum

import google.generativeai as genai
from github import Github

from .ai_integration import generate_pr_description
from .config import Settings
from .git_utils import GitRunner, get_branch_information
from .github_utils import update_github_pr_description
from .models import PipelineResult


class Stage(Enum):
    INSPECTING = "Inspecting branch"
    GENERATING = "Generating PR description"
    UPDATING = "Updating pull request"
    DONE = "SUCCESS!"


def _banner(step: int, stage: Stage) -> None:
    if step > 1:
        print()
    print(f"📄 STEP {step}: {stage.value}")
    print("-" * 30)


def run_pipeline(settings: Settings, git: GitRunner, gh: Github, model: genai.GenerativeModel) -> PipelineResult:
    """Inspect the branch, draft a description, and overwrite the PR body.

    Any failure propagates straight to the caller; a description generated
    before a failed update is discarded.
    """
    _banner(1, Stage.INSPECTING)
    branch_ctx = get_branch_information(git, settings.base_branch)

    _banner(2, Stage.GENERATING)
    description = generate_pr_description(model, branch_ctx.commits, branch_ctx.diff)

    _banner(3, Stage.UPDATING)
    pr_number = update_github_pr_description(gh, git, branch_ctx.current_branch, description)

    print()
    print(f"🎉 {Stage.DONE.value}")
    print("=" * 50)
    print(f"✅ PR #{pr_number} description updated")
    print(f"🌿 Branch: {branch_ctx.current_branch}")
    return PipelineResult(branch=branch_ctx.current_branch, pr_number=pr_number)
