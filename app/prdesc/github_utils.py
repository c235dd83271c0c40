from __future__ import annotations

import re

from github import Auth, Github

from .config import Settings
from .errors import NoMatchingPullRequestError, RemoteResolutionError
from .git_utils import GitRunner
from .models import RepositoryCoordinates

_REMOTE_RE = re.compile(
    r"^(?:https://github\.com/|git@github\.com:)(?P<owner>[^/\s]+)/(?P<repo>[^/\s]+?)(?:\.git)?$"
)


def get_github_client(settings: Settings) -> Github:
    return Github(auth=Auth.Token(settings.github_token))


def parse_repository_coordinates(remote_url: str) -> RepositoryCoordinates:
    """Owner and repo from an `https://github.com/...` or `git@github.com:...` remote."""
    m = _REMOTE_RE.match(remote_url.strip())
    if not m:
        raise RemoteResolutionError(
            f"Could not determine the repository from the remote origin URL: {remote_url.strip() or '(none)'}"
        )
    return RepositoryCoordinates(owner=m.group("owner"), repo=m.group("repo"))


def find_open_pull_request(gh: Github, coords: RepositoryCoordinates, branch: str):
    head = f"{coords.owner}:{branch}"
    print(f"🔎 Looking up open pull requests for {head}...")
    repo = gh.get_repo(coords.full_name)
    # only the first page is consulted
    prs = repo.get_pulls(state="open", head=head).get_page(0)
    if not prs:
        raise NoMatchingPullRequestError(f"No open PRs found for branch: {branch}")
    if len(prs) > 1:
        print(f"   ⚠️  {len(prs)} open PRs share this head; updating the first one returned")
    pr = prs[0]
    print(f"   ✅ Found PR #{pr.number}")
    return pr


def update_github_pr_description(gh: Github, git: GitRunner, branch: str, description: str) -> int:
    remote_url = git.remote_url()
    coords = parse_repository_coordinates(remote_url)
    print(f"   📁 Repository: {coords.full_name}")
    pr = find_open_pull_request(gh, coords, branch)
    pr.edit(body=description)
    print(f"PR description updated successfully for PR #{pr.number}.")
    return pr.number
